# hs_core/hierarchy/filters.py
from __future__ import annotations

import django_filters

from hs_core.hierarchy.models import Flat, Floor, Room


class FloorFilter(django_filters.FilterSet):
    buildingId = django_filters.NumberFilter(field_name="building_id")

    class Meta:
        model = Floor
        fields: list[str] = []


class FlatFilter(django_filters.FilterSet):
    floorId = django_filters.NumberFilter(field_name="floor_id")
    buildingId = django_filters.NumberFilter(field_name="floor__building_id")

    class Meta:
        model = Flat
        fields: list[str] = []


class RoomFilter(django_filters.FilterSet):
    flatId = django_filters.NumberFilter(field_name="flat_id")
    floorId = django_filters.NumberFilter(field_name="flat__floor_id")
    buildingId = django_filters.NumberFilter(field_name="flat__floor__building_id")

    class Meta:
        model = Room
        fields: list[str] = []
