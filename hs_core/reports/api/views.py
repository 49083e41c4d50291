# hs_core/reports/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from hs_core.reports.api.serializers import OccupancySummarySerializer
from hs_core.reports.selectors import occupancy_summary


class OccupancyReportView(APIView):
    """
    Dashboard numbers: overall occupancy and the per-building breakdown.
    """

    @extend_schema(tags=["Reports"], responses={200: OccupancySummarySerializer})
    def get(self, request):
        return Response(OccupancySummarySerializer(occupancy_summary()).data)
