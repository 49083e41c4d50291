# hs_core/assignments/api/views.py
from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from hs_core.assignments.api.serializers import (
    AssignmentCreateSerializer,
    AssignmentDeletedSerializer,
    AssignmentSerializer,
    AssignmentUpdateSerializer,
)
from hs_core.assignments.models import BedAssignment
from hs_core.assignments.selectors import AssignmentSelector
from hs_core.assignments.services import UNSET, AssignmentService, AssignmentUpdate


class AssignmentViewSet(viewsets.ViewSet):
    """
    Thin API layer:
    - request schema validation (400)
    - calls selectors for reads
    - calls AssignmentService for writes (bed occupancy is reconciled there)
    """

    serializer_class = AssignmentSerializer
    queryset = BedAssignment.objects.none()
    lookup_value_regex = r"\d+"

    # ----------------------------
    # Reads
    # ----------------------------
    @extend_schema(
        tags=["Assignments"],
        responses={200: AssignmentSerializer(many=True)},
        parameters=[
            OpenApiParameter(
                name="status",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Planned | Active | Closed",
            ),
            OpenApiParameter(
                name="employeeId",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
            OpenApiParameter(
                name="bedId",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
    )
    def list(self, request):
        qs = AssignmentSelector.list_assignments(params=request.query_params)
        return Response(AssignmentSerializer(qs, many=True).data)

    @extend_schema(tags=["Assignments"], responses={200: AssignmentSerializer})
    def retrieve(self, request, pk=None):
        try:
            obj = AssignmentSelector.get_assignment(assignment_id=int(pk))
        except AssignmentSelector.NotFound:
            raise NotFound("Assignment not found")
        return Response(AssignmentSerializer(obj).data)

    # ----------------------------
    # Writes
    # ----------------------------
    @extend_schema(
        tags=["Assignments"],
        request=AssignmentCreateSerializer,
        responses={201: AssignmentSerializer},
    )
    def create(self, request):
        s = AssignmentCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = AssignmentService.create(
            employee_id=d["employeeId"],
            bed_id=d["bedId"],
            start_date=d["startDate"],
            end_date=d.get("endDate"),
            status=d.get("status") or None,
            reason=d.get("reason") or None,
            created_by=d.get("createdBy") or None,
        )
        return Response(AssignmentSerializer(obj).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Assignments"],
        request=AssignmentUpdateSerializer,
        responses={200: AssignmentSerializer},
    )
    def update(self, request, pk=None):
        s = AssignmentUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = AssignmentService.update(
            assignment_id=int(pk),
            patch=AssignmentUpdate(
                start_date=d.get("startDate"),
                end_date=d["endDate"] if "endDate" in d else UNSET,
                status=d.get("status") or None,
                reason=d.get("reason") or None,
            ),
        )
        return Response(AssignmentSerializer(obj).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Assignments"],
        request=AssignmentUpdateSerializer,
        responses={200: AssignmentSerializer},
    )
    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(tags=["Assignments"], responses={200: AssignmentDeletedSerializer})
    def destroy(self, request, pk=None):
        bed_id = AssignmentService.delete(assignment_id=int(pk))
        return Response({"bedId": bed_id}, status=status.HTTP_200_OK)
