# hs_core/beds/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction
from django.utils.timezone import now
from rest_framework.exceptions import ValidationError

from hs_core.beds.models import Bed, BedStatus
from hs_core.common.services import (
    apply_coalesced,
    delete_or_conflict,
    get_for_update_or_404,
    save_or_conflict,
)
from hs_core.hierarchy.models import Room

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BedUpdate:
    room_id: Optional[int] = None
    bed_code: Optional[str] = None


class BedService:
    """
    Bed registry writes.

    Notes:
    - Callers outside the assignment engine never choose a bed's status:
      new beds start Available and updates cannot touch it.
    - set_status() is the single write path for occupancy.
    """

    DUPLICATE_MSG = "BedCode already exists in this room"

    @staticmethod
    def _require_room(room_id: int) -> Room:
        room = Room.objects.filter(id=room_id).first()
        if room is None:
            raise ValidationError({"roomId": "Room not found."})
        return room

    @staticmethod
    @transaction.atomic
    def create(*, room_id: int, bed_code: str) -> Bed:
        room = BedService._require_room(room_id)
        bed = Bed(room=room, bed_code=bed_code, status=BedStatus.AVAILABLE)
        save_or_conflict(bed, conflict_message=BedService.DUPLICATE_MSG, force_insert=True)
        logger.info("Bed %s (%s) created in room %s", bed.id, bed.bed_code, room.id)
        return bed

    @staticmethod
    @transaction.atomic
    def update(*, bed_id: int, patch: BedUpdate) -> Bed:
        bed = get_for_update_or_404(Bed, bed_id, label="Bed")
        if patch.room_id is not None:
            BedService._require_room(patch.room_id)
        changed = apply_coalesced(bed, {"room_id": patch.room_id, "bed_code": patch.bed_code})
        if changed:
            save_or_conflict(bed, conflict_message=BedService.DUPLICATE_MSG)
        return bed

    @staticmethod
    @transaction.atomic
    def delete(*, bed_id: int) -> None:
        bed = get_for_update_or_404(Bed, bed_id, label="Bed")
        delete_or_conflict(bed, conflict_message="Bed has assignments. Delete them first.")
        logger.info("Bed %s deleted", bed_id)

    @staticmethod
    def set_status(*, bed_id: int, status: str) -> bool:
        """
        Write the occupancy field. Returns True when the stored value changed.
        Runs inside the caller's transaction.
        """
        if status not in BedStatus.values:
            raise ValueError(f"Unknown bed status: {status!r}")

        changed = (
            Bed.objects.filter(id=bed_id)
            .exclude(status=status)
            .update(status=status, updated_at=now())
        )
        if changed:
            logger.info("Bed %s -> %s", bed_id, status)
        return bool(changed)
