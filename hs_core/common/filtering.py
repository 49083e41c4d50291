# hs_core/common/filtering.py
from __future__ import annotations

from typing import Any

from django.db.models import QuerySet
from django_filters.utils import translate_validation


def apply_filterset(filterset_class, params: Any, queryset: QuerySet) -> QuerySet:
    """
    Run query-string params through a django-filter FilterSet.
    Invalid filter values are a 400, same as DjangoFilterBackend.
    """
    # always bound: an unbound FilterSet never validates
    fs = filterset_class(params if params is not None else {}, queryset=queryset)
    if not fs.is_valid():
        raise translate_validation(fs.errors)
    return fs.qs
