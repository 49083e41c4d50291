# hs_core/beds/filters.py
from __future__ import annotations

import django_filters

from hs_core.beds.models import Bed, BedStatus


class BedFilter(django_filters.FilterSet):
    roomId = django_filters.NumberFilter(field_name="room_id")
    flatId = django_filters.NumberFilter(field_name="room__flat_id")
    buildingId = django_filters.NumberFilter(field_name="room__flat__floor__building_id")
    status = django_filters.ChoiceFilter(field_name="status", choices=BedStatus.choices)

    class Meta:
        model = Bed
        fields: list[str] = []
