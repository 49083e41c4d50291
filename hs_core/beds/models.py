# hs_core/beds/models.py
from __future__ import annotations

from django.db import models

from hs_core.common.models import TimeStampedModel
from hs_core.hierarchy.models import Room


class BedStatus(models.TextChoices):
    AVAILABLE = "Available", "Available"
    OCCUPIED = "Occupied", "Occupied"


class Bed(TimeStampedModel):
    """
    Leaf of the physical hierarchy.

    `status` is a denormalized view of the bed's live assignments and is written
    only by the assignment engine (see hs_core.assignments.services).
    """
    room = models.ForeignKey(Room, on_delete=models.PROTECT, related_name="beds")
    bed_code = models.CharField(max_length=32)
    status = models.CharField(
        max_length=16,
        choices=BedStatus.choices,
        default=BedStatus.AVAILABLE,
        db_index=True,
    )

    class Meta:
        db_table = "beds_bed"
        constraints = [
            models.UniqueConstraint(fields=["room", "bed_code"], name="uq_bed_room_code"),
        ]
        indexes = [
            models.Index(fields=["room", "status"]),
        ]

    def __str__(self) -> str:
        return f"{self.bed_code} ({self.status})"
