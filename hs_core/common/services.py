# hs_core/common/services.py
from __future__ import annotations

from typing import Any, Mapping, TypeVar

from django.db import IntegrityError, models, transaction
from django.db.models import ProtectedError
from rest_framework.exceptions import NotFound

from hs_core.common.api.exceptions import ConflictError

M = TypeVar("M", bound=models.Model)


def get_for_update_or_404(model: type[M], pk: Any, *, label: str) -> M:
    """
    Row-locked fetch for write paths. Must run inside transaction.atomic.
    """
    obj = model.objects.select_for_update().filter(pk=pk).first()
    if obj is None:
        raise NotFound(f"{label} not found")
    return obj


def apply_coalesced(obj: models.Model, mapping: Mapping[str, Any]) -> list[str]:
    """
    Copy every non-None value onto obj. Returns the names of fields that changed.
    """
    changed: list[str] = []
    for field, value in mapping.items():
        if value is None:
            continue
        if getattr(obj, field) != value:
            setattr(obj, field, value)
            changed.append(field)
    return changed


def save_or_conflict(obj: models.Model, *, conflict_message: str, **save_kwargs) -> None:
    # savepoint keeps an IntegrityError from poisoning the caller's transaction
    try:
        with transaction.atomic(savepoint=True):
            obj.save(**save_kwargs)
    except IntegrityError:
        raise ConflictError(conflict_message)


def delete_or_conflict(obj: models.Model, *, conflict_message: str) -> None:
    try:
        with transaction.atomic(savepoint=True):
            obj.delete()
    except ProtectedError:
        raise ConflictError(conflict_message)
