# hs_core/hierarchy/selectors.py
from __future__ import annotations

from typing import Any

from django.db.models import QuerySet

from hs_core.common.filtering import apply_filterset
from hs_core.hierarchy.filters import FlatFilter, FloorFilter, RoomFilter
from hs_core.hierarchy.models import Building, Flat, Floor, Room


def list_buildings() -> QuerySet[Building]:
    return Building.objects.all().order_by("name", "id")


def building_by_id(*, building_id: int) -> Building:
    return Building.objects.get(id=building_id)


def list_floors(*, params: Any = None) -> QuerySet[Floor]:
    qs = Floor.objects.select_related("building")
    qs = apply_filterset(FloorFilter, params, qs)
    return qs.order_by("building__name", "floor_number", "id")


def floor_by_id(*, floor_id: int) -> Floor:
    return Floor.objects.select_related("building").get(id=floor_id)


def list_flats(*, params: Any = None) -> QuerySet[Flat]:
    qs = Flat.objects.select_related("floor__building")
    qs = apply_filterset(FlatFilter, params, qs)
    return qs.order_by("floor__building__name", "floor__floor_number", "flat_number", "id")


def flat_by_id(*, flat_id: int) -> Flat:
    return Flat.objects.select_related("floor__building").get(id=flat_id)


def list_rooms(*, params: Any = None) -> QuerySet[Room]:
    qs = Room.objects.select_related("flat__floor__building")
    qs = apply_filterset(RoomFilter, params, qs)
    return qs.order_by(
        "flat__floor__building__name",
        "flat__floor__floor_number",
        "flat__flat_number",
        "room_number",
        "id",
    )


def room_by_id(*, room_id: int) -> Room:
    return Room.objects.select_related("flat__floor__building").get(id=room_id)
