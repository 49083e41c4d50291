# hs_core/beds/selectors.py
from __future__ import annotations

from typing import Any

from django.db.models import QuerySet

from hs_core.beds.filters import BedFilter
from hs_core.beds.models import Bed, BedStatus
from hs_core.common.filtering import apply_filterset

HIERARCHY_ORDER = (
    "room__flat__floor__building__name",
    "room__flat__floor__floor_number",
    "room__flat__flat_number",
    "room__room_number",
    "bed_code",
    "id",
)


def _with_labels() -> QuerySet[Bed]:
    return Bed.objects.select_related("room__flat__floor__building")


def list_beds(*, params: Any = None) -> QuerySet[Bed]:
    """
    Query params supported:
      - roomId, flatId, buildingId
      - status (Available | Occupied)
    Ordered by building / floor / flat / room / bed code.
    """
    qs = apply_filterset(BedFilter, params, _with_labels())
    return qs.order_by(*HIERARCHY_ORDER)


def bed_by_id(*, bed_id: int) -> Bed:
    return _with_labels().get(id=bed_id)


def available_beds_in_room(*, room_id: int) -> QuerySet[Bed]:
    return _with_labels().filter(room_id=room_id, status=BedStatus.AVAILABLE).order_by("bed_code", "id")
