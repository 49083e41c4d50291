# hs_core/hierarchy/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction
from rest_framework.exceptions import ValidationError

from hs_core.common.models import RecordStatus
from hs_core.common.services import (
    apply_coalesced,
    delete_or_conflict,
    get_for_update_or_404,
    save_or_conflict,
)
from hs_core.hierarchy.models import Building, Flat, Floor, Room

logger = logging.getLogger(__name__)


def _require_parent(model, pk, *, field: str, label: str):
    parent = model.objects.filter(id=pk).first()
    if parent is None:
        raise ValidationError({field: f"{label} not found."})
    return parent


# -------------------------
# Buildings
# -------------------------
@dataclass(frozen=True)
class BuildingUpdate:
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class BuildingService:
    @staticmethod
    @transaction.atomic
    def create(
        *,
        name: str,
        location: str = "",
        description: str = "",
        status: str = RecordStatus.ACTIVE,
    ) -> Building:
        b = Building.objects.create(
            name=name,
            location=location or "",
            description=description or "",
            status=status or RecordStatus.ACTIVE,
        )
        logger.info("Building %s created (%s)", b.id, b.name)
        return b

    @staticmethod
    @transaction.atomic
    def update(*, building_id: int, patch: BuildingUpdate) -> Building:
        b = get_for_update_or_404(Building, building_id, label="Building")
        changed = apply_coalesced(
            b,
            {
                "name": patch.name,
                "location": patch.location,
                "description": patch.description,
                "status": patch.status,
            },
        )
        if changed:
            b.save()
        return b

    @staticmethod
    @transaction.atomic
    def delete(*, building_id: int) -> None:
        b = get_for_update_or_404(Building, building_id, label="Building")
        delete_or_conflict(b, conflict_message="Building still has floors. Delete them first.")
        logger.info("Building %s deleted", building_id)


# -------------------------
# Floors
# -------------------------
@dataclass(frozen=True)
class FloorUpdate:
    building_id: Optional[int] = None
    floor_number: Optional[int] = None
    description: Optional[str] = None


class FloorService:
    DUPLICATE_MSG = "FloorNumber already exists in this building"

    @staticmethod
    @transaction.atomic
    def create(*, building_id: int, floor_number: int, description: str = "") -> Floor:
        building = _require_parent(Building, building_id, field="buildingId", label="Building")
        f = Floor(building=building, floor_number=floor_number, description=description or "")
        save_or_conflict(f, conflict_message=FloorService.DUPLICATE_MSG, force_insert=True)
        logger.info("Floor %s created in building %s", f.id, building.id)
        return f

    @staticmethod
    @transaction.atomic
    def update(*, floor_id: int, patch: FloorUpdate) -> Floor:
        f = get_for_update_or_404(Floor, floor_id, label="Floor")
        if patch.building_id is not None:
            _require_parent(Building, patch.building_id, field="buildingId", label="Building")
        changed = apply_coalesced(
            f,
            {
                "building_id": patch.building_id,
                "floor_number": patch.floor_number,
                "description": patch.description,
            },
        )
        if changed:
            save_or_conflict(f, conflict_message=FloorService.DUPLICATE_MSG)
        return f

    @staticmethod
    @transaction.atomic
    def delete(*, floor_id: int) -> None:
        f = get_for_update_or_404(Floor, floor_id, label="Floor")
        delete_or_conflict(f, conflict_message="Floor still has flats. Delete them first.")
        logger.info("Floor %s deleted", floor_id)


# -------------------------
# Flats
# -------------------------
@dataclass(frozen=True)
class FlatUpdate:
    floor_id: Optional[int] = None
    flat_number: Optional[str] = None
    flat_type: Optional[str] = None
    status: Optional[str] = None


class FlatService:
    DUPLICATE_MSG = "FlatNumber already exists on this floor"

    @staticmethod
    @transaction.atomic
    def create(
        *,
        floor_id: int,
        flat_number: str,
        flat_type: str = "",
        status: str = RecordStatus.ACTIVE,
    ) -> Flat:
        floor = _require_parent(Floor, floor_id, field="floorId", label="Floor")
        fl = Flat(
            floor=floor,
            flat_number=flat_number,
            flat_type=flat_type or "",
            status=status or RecordStatus.ACTIVE,
        )
        save_or_conflict(fl, conflict_message=FlatService.DUPLICATE_MSG, force_insert=True)
        logger.info("Flat %s created on floor %s", fl.id, floor.id)
        return fl

    @staticmethod
    @transaction.atomic
    def update(*, flat_id: int, patch: FlatUpdate) -> Flat:
        fl = get_for_update_or_404(Flat, flat_id, label="Flat")
        if patch.floor_id is not None:
            _require_parent(Floor, patch.floor_id, field="floorId", label="Floor")
        changed = apply_coalesced(
            fl,
            {
                "floor_id": patch.floor_id,
                "flat_number": patch.flat_number,
                "flat_type": patch.flat_type,
                "status": patch.status,
            },
        )
        if changed:
            save_or_conflict(fl, conflict_message=FlatService.DUPLICATE_MSG)
        return fl

    @staticmethod
    @transaction.atomic
    def delete(*, flat_id: int) -> None:
        fl = get_for_update_or_404(Flat, flat_id, label="Flat")
        delete_or_conflict(fl, conflict_message="Flat still has rooms. Delete them first.")
        logger.info("Flat %s deleted", flat_id)


# -------------------------
# Rooms
# -------------------------
@dataclass(frozen=True)
class RoomUpdate:
    flat_id: Optional[int] = None
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    max_occupancy: Optional[int] = None
    gender_restriction: Optional[str] = None
    status: Optional[str] = None


class RoomService:
    DUPLICATE_MSG = "RoomNumber already exists in this flat"

    @staticmethod
    @transaction.atomic
    def create(
        *,
        flat_id: int,
        room_number: str,
        max_occupancy: int,
        room_type: str = "",
        gender_restriction: str = "",
        status: str = RecordStatus.ACTIVE,
    ) -> Room:
        flat = _require_parent(Flat, flat_id, field="flatId", label="Flat")
        r = Room(
            flat=flat,
            room_number=room_number,
            room_type=room_type or "",
            max_occupancy=max_occupancy,
            gender_restriction=gender_restriction or "",
            status=status or RecordStatus.ACTIVE,
        )
        save_or_conflict(r, conflict_message=RoomService.DUPLICATE_MSG, force_insert=True)
        logger.info("Room %s created in flat %s", r.id, flat.id)
        return r

    @staticmethod
    @transaction.atomic
    def update(*, room_id: int, patch: RoomUpdate) -> Room:
        r = get_for_update_or_404(Room, room_id, label="Room")
        if patch.flat_id is not None:
            _require_parent(Flat, patch.flat_id, field="flatId", label="Flat")
        changed = apply_coalesced(
            r,
            {
                "flat_id": patch.flat_id,
                "room_number": patch.room_number,
                "room_type": patch.room_type,
                "max_occupancy": patch.max_occupancy,
                "gender_restriction": patch.gender_restriction,
                "status": patch.status,
            },
        )
        if changed:
            save_or_conflict(r, conflict_message=RoomService.DUPLICATE_MSG)
        return r

    @staticmethod
    @transaction.atomic
    def delete(*, room_id: int) -> None:
        r = get_for_update_or_404(Room, room_id, label="Room")
        delete_or_conflict(r, conflict_message="Room still has beds. Delete them first.")
        logger.info("Room %s deleted", room_id)
