# hs_core/employees/selectors.py
from __future__ import annotations

from django.db.models import Q, QuerySet

from hs_core.employees.models import Employee


def list_employees(*, q: str | None = None) -> QuerySet[Employee]:
    qs = Employee.objects.all()

    qv = (q or "").strip()
    if qv:
        qs = qs.filter(
            Q(employee_code__icontains=qv)
            | Q(first_name__icontains=qv)
            | Q(last_name__icontains=qv)
            | Q(department__icontains=qv)
        )

    return qs.order_by("-id")


def employee_by_id(*, employee_id: int) -> Employee:
    return Employee.objects.get(id=employee_id)
