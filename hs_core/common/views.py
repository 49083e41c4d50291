# hs_core/common/views.py
from __future__ import annotations

import logging

from django.conf import settings
from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthView(APIView):
    """
    Liveness + database reachability. Bypasses the error envelope on purpose:
    monitors expect {status, db} / {status, message}.
    """

    authentication_classes = ()
    permission_classes = ()

    def get(self, request):
        if not getattr(settings, "HS_DB_CONFIGURED", False):
            return Response({"status": "ok", "db": "not-configured"}, status=status.HTTP_200_OK)

        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as e:
            logger.error("Health check failed: %s", e)
            return Response(
                {"status": "error", "message": "DB connection failed"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"status": "ok", "db": "connected"}, status=status.HTTP_200_OK)
