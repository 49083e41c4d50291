# hs_core/assignments/selectors.py
from __future__ import annotations

from typing import Any

from django.db.models import QuerySet

from hs_core.assignments.filters import AssignmentFilter
from hs_core.assignments.models import LIVE_STATUSES, BedAssignment
from hs_core.common.filtering import apply_filterset


class AssignmentSelector:
    class NotFound(Exception):
        pass

    @staticmethod
    def _joined() -> QuerySet[BedAssignment]:
        # employee + full hierarchy labels for the joined read shape
        return BedAssignment.objects.select_related(
            "employee",
            "bed__room__flat__floor__building",
        )

    @staticmethod
    def list_assignments(*, params: Any = None) -> QuerySet[BedAssignment]:
        """
        Newest first. Optional query params: status, employeeId, bedId.
        """
        qs = apply_filterset(AssignmentFilter, params, AssignmentSelector._joined())
        return qs.order_by("-id")

    @staticmethod
    def get_assignment(*, assignment_id: int) -> BedAssignment:
        try:
            return AssignmentSelector._joined().get(id=assignment_id)
        except BedAssignment.DoesNotExist:
            raise AssignmentSelector.NotFound()

    @staticmethod
    def has_live_assignment(*, bed_id: int) -> bool:
        return BedAssignment.objects.filter(bed_id=bed_id, status__in=LIVE_STATUSES).exists()
