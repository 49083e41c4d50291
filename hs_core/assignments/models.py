# hs_core/assignments/models.py
from django.db import models

from hs_core.beds.models import Bed
from hs_core.employees.models import Employee


class AssignmentStatus(models.TextChoices):
    PLANNED = "Planned", "Planned"
    ACTIVE = "Active", "Active"
    CLOSED = "Closed", "Closed"


# Statuses that hold a bed.
LIVE_STATUSES = (AssignmentStatus.PLANNED, AssignmentStatus.ACTIVE)


class BedAssignment(models.Model):
    """
    Time-bounded link between one Employee and one Bed.

    employee/bed are fixed once created; dates, status and reason are mutable.
    """
    employee = models.ForeignKey(Employee, on_delete=models.PROTECT, related_name="bed_assignments")
    bed = models.ForeignKey(Bed, on_delete=models.PROTECT, related_name="assignments")

    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=16,
        choices=AssignmentStatus.choices,
        default=AssignmentStatus.ACTIVE,
        db_index=True,
    )
    reason = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    created_by = models.CharField(max_length=128, blank=True, default="web")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "assignments_bed_assignment"
        indexes = [
            models.Index(fields=["bed", "status"]),
            models.Index(fields=["employee", "status"]),
        ]

    def __str__(self) -> str:
        return f"#{self.pk} {self.employee_id} -> {self.bed_id} ({self.status})"
