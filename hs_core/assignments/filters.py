# hs_core/assignments/filters.py
from __future__ import annotations

import django_filters

from hs_core.assignments.models import AssignmentStatus, BedAssignment


class AssignmentFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(field_name="status", choices=AssignmentStatus.choices)
    employeeId = django_filters.NumberFilter(field_name="employee_id")
    bedId = django_filters.NumberFilter(field_name="bed_id")

    class Meta:
        model = BedAssignment
        fields: list[str] = []
