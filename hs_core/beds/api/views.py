# hs_core/beds/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from hs_core.beds.api.serializers import BedCreateSerializer, BedSerializer, BedUpdateSerializer
from hs_core.beds.models import Bed
from hs_core.beds.selectors import bed_by_id, list_beds
from hs_core.beds.services import BedService, BedUpdate


class BedViewSet(viewsets.ViewSet):
    serializer_class = BedSerializer
    queryset = Bed.objects.none()
    lookup_value_regex = r"\d+"

    def _get(self, pk) -> Bed:
        try:
            return bed_by_id(bed_id=int(pk))
        except Bed.DoesNotExist:
            raise NotFound("Bed not found")

    def list(self, request):
        qs = list_beds(params=request.query_params)
        return Response(BedSerializer(qs, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(BedSerializer(self._get(pk)).data)

    def create(self, request):
        s = BedCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        bed = BedService.create(room_id=d["roomId"], bed_code=d["bedCode"])
        return Response(BedSerializer(self._get(bed.id)).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = BedUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        bed = BedService.update(
            bed_id=int(pk),
            patch=BedUpdate(room_id=d.get("roomId"), bed_code=d.get("bedCode")),
        )
        return Response(BedSerializer(self._get(bed.id)).data, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        BedService.delete(bed_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
