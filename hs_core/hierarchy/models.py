# hs_core/hierarchy/models.py
from __future__ import annotations

from django.db import models

from hs_core.common.models import RecordStatus, TimeStampedModel


class Building(TimeStampedModel):
    """
    Top of the physical hierarchy: Building -> Floor -> Flat -> Room -> Bed.
    """
    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255, blank=True, default="")
    description = models.TextField(blank=True, default="")
    status = models.CharField(
        max_length=32,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = "hierarchy_building"
        indexes = [
            models.Index(fields=["name"]),
        ]

    def __str__(self) -> str:
        return self.name


class Floor(TimeStampedModel):
    building = models.ForeignKey(Building, on_delete=models.PROTECT, related_name="floors")
    floor_number = models.IntegerField()
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "hierarchy_floor"
        constraints = [
            models.UniqueConstraint(fields=["building", "floor_number"], name="uq_floor_building_number"),
        ]

    def __str__(self) -> str:
        return f"{self.building} / Floor {self.floor_number}"


class Flat(TimeStampedModel):
    floor = models.ForeignKey(Floor, on_delete=models.PROTECT, related_name="flats")
    flat_number = models.CharField(max_length=32)
    flat_type = models.CharField(max_length=64, blank=True, default="")
    status = models.CharField(
        max_length=32,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = "hierarchy_flat"
        constraints = [
            models.UniqueConstraint(fields=["floor", "flat_number"], name="uq_flat_floor_number"),
        ]

    def __str__(self) -> str:
        return f"{self.floor} / Flat {self.flat_number}"


class Room(TimeStampedModel):
    flat = models.ForeignKey(Flat, on_delete=models.PROTECT, related_name="rooms")
    room_number = models.CharField(max_length=32)
    room_type = models.CharField(max_length=64, blank=True, default="")
    max_occupancy = models.PositiveIntegerField(default=1)
    gender_restriction = models.CharField(max_length=32, blank=True, default="")
    status = models.CharField(
        max_length=32,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = "hierarchy_room"
        constraints = [
            models.UniqueConstraint(fields=["flat", "room_number"], name="uq_room_flat_number"),
        ]

    def __str__(self) -> str:
        return f"{self.flat} / Room {self.room_number}"
