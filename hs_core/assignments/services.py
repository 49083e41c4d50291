# hs_core/assignments/services.py

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from hs_core.assignments.models import AssignmentStatus, BedAssignment
from hs_core.assignments.selectors import AssignmentSelector
from hs_core.beds.models import Bed, BedStatus
from hs_core.beds.services import BedService
from hs_core.common.services import get_for_update_or_404
from hs_core.employees.models import Employee

logger = logging.getLogger(__name__)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


# Marks "field not sent" where None is a meaningful value (end_date: null clears it).
UNSET: Any = _Unset()


@dataclass(frozen=True)
class AssignmentUpdate:
    start_date: Optional[datetime.date] = None
    end_date: Any = UNSET
    status: Optional[str] = None
    reason: Optional[str] = None


class AssignmentService:
    """
    Bed assignment write-model and the only writer of Bed.status.

    Notes:
    - Every operation is one transaction: row write + bed reconciliation + read-back.
    - create() always marks the bed Occupied, whatever status the new row carries.
    - update() may free the bed only when the request sets status=Closed;
      moving back to Planned/Active does not re-occupy the bed.
    - delete() always checks whether the bed can be freed.
    - Neither update() nor delete() ever marks a bed Occupied.
    - No overlap/capacity guard: two live assignments may share a bed.
    """

    # -------------------------
    # Reconciliation
    # -------------------------
    @staticmethod
    def reconcile_bed_status(*, bed_id: int) -> Optional[str]:
        """
        Release a bed once none of its assignments is Planned/Active.

        Only ever writes Available; a bed that still has a live row is left
        as stored. Locks the bed row so concurrent closures on the same bed
        serialize. Returns the bed's resulting status, or None if the bed no
        longer exists. Must run inside the caller's transaction.
        """
        bed = Bed.objects.select_for_update().filter(id=bed_id).first()
        if bed is None:
            return None

        if AssignmentSelector.has_live_assignment(bed_id=bed_id):
            return bed.status

        BedService.set_status(bed_id=bed_id, status=BedStatus.AVAILABLE)
        return BedStatus.AVAILABLE

    # -------------------------
    # Create
    # -------------------------
    @staticmethod
    @transaction.atomic
    def create(
        *,
        employee_id: int,
        bed_id: int,
        start_date: datetime.date,
        end_date: Optional[datetime.date] = None,
        status: Optional[str] = None,
        reason: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> BedAssignment:
        if not employee_id or not bed_id or not start_date:
            raise ValidationError({"detail": "employeeId, bedId and startDate are required"})

        if not Employee.objects.filter(id=employee_id).exists():
            raise NotFound("Employee not found")
        if not Bed.objects.filter(id=bed_id).exists():
            raise NotFound("Bed not found")

        assignment = BedAssignment.objects.create(
            employee_id=employee_id,
            bed_id=bed_id,
            start_date=start_date,
            end_date=end_date,
            status=status or AssignmentStatus.ACTIVE,
            reason=reason or "",
            created_by=created_by or settings.HS_ASSIGNMENT_DEFAULT_CREATED_BY,
        )

        # Any new assignment claims the bed, even one created as Planned or Closed.
        BedService.set_status(bed_id=bed_id, status=BedStatus.OCCUPIED)

        logger.info(
            "Assignment %s created: employee %s -> bed %s (%s)",
            assignment.id,
            employee_id,
            bed_id,
            assignment.status,
        )
        return AssignmentSelector.get_assignment(assignment_id=assignment.id)

    # -------------------------
    # Update (coalesce)
    # -------------------------
    @staticmethod
    @transaction.atomic
    def update(*, assignment_id: int, patch: AssignmentUpdate) -> BedAssignment:
        """
        start_date / status / reason: None (or blank) keeps the stored value.
        end_date: UNSET keeps it, None clears it.
        """
        assignment = get_for_update_or_404(BedAssignment, assignment_id, label="Assignment")
        previous_status = assignment.status

        update_fields: list[str] = []
        if patch.start_date is not None:
            assignment.start_date = patch.start_date
            update_fields.append("start_date")
        if patch.end_date is not UNSET:
            assignment.end_date = patch.end_date
            update_fields.append("end_date")
        if patch.status:
            assignment.status = patch.status
            update_fields.append("status")
        if patch.reason:
            assignment.reason = patch.reason
            update_fields.append("reason")

        update_fields.append("updated_at")
        assignment.save(update_fields=update_fields)

        if patch.status == AssignmentStatus.CLOSED:
            bed_status = AssignmentService.reconcile_bed_status(bed_id=assignment.bed_id)
            logger.info(
                "Assignment %s closed (was %s); bed %s is %s",
                assignment.id,
                previous_status,
                assignment.bed_id,
                bed_status,
            )
        else:
            logger.info("Assignment %s updated: %s", assignment.id, ", ".join(update_fields))

        return AssignmentSelector.get_assignment(assignment_id=assignment.id)

    # -------------------------
    # Delete
    # -------------------------
    @staticmethod
    @transaction.atomic
    def delete(*, assignment_id: int) -> int:
        """
        Returns the bed id so callers can refresh bed views.
        """
        assignment = get_for_update_or_404(BedAssignment, assignment_id, label="Assignment")
        bed_id = assignment.bed_id

        assignment.delete()
        bed_status = AssignmentService.reconcile_bed_status(bed_id=bed_id)

        logger.info("Assignment %s deleted; bed %s is %s", assignment_id, bed_id, bed_status)
        return bed_id

    # -------------------------
    # Repair
    # -------------------------
    @staticmethod
    @transaction.atomic
    def reconcile_all_beds(*, dry_run: bool = False) -> tuple[int, int]:
        """
        Recompute every bed's status from its live assignments, in both
        directions (unlike reconcile_bed_status, this can re-occupy a bed).
        Returns (examined, changed). With dry_run nothing is written.
        """
        examined = 0
        changed = 0
        for bed in Bed.objects.select_for_update().order_by("id"):
            examined += 1
            live = AssignmentSelector.has_live_assignment(bed_id=bed.id)
            target = BedStatus.OCCUPIED if live else BedStatus.AVAILABLE
            if bed.status == target:
                continue
            changed += 1
            if not dry_run:
                BedService.set_status(bed_id=bed.id, status=target)
        return examined, changed
