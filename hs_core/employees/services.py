# hs_core/employees/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from django.db import transaction

from hs_core.common.models import RecordStatus
from hs_core.common.services import (
    apply_coalesced,
    delete_or_conflict,
    get_for_update_or_404,
    save_or_conflict,
)
from hs_core.employees.models import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeUpdate:
    employee_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    department: Optional[str] = None
    grade: Optional[str] = None
    gender: Optional[str] = None
    status: Optional[str] = None


class EmployeeService:
    DUPLICATE_MSG = "EmployeeCode already exists"

    @staticmethod
    @transaction.atomic
    def create(
        *,
        employee_code: str,
        first_name: str,
        last_name: str,
        gender: str,
        department: str = "",
        grade: str = "",
        status: str = RecordStatus.ACTIVE,
    ) -> Employee:
        emp = Employee(
            employee_code=employee_code,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            department=department or "",
            grade=grade or "",
            status=status or RecordStatus.ACTIVE,
        )
        save_or_conflict(emp, conflict_message=EmployeeService.DUPLICATE_MSG, force_insert=True)
        logger.info("Employee %s created (%s)", emp.id, emp.employee_code)
        return emp

    @staticmethod
    @transaction.atomic
    def update(*, employee_id: int, patch: EmployeeUpdate) -> Employee:
        emp = get_for_update_or_404(Employee, employee_id, label="Employee")
        changed = apply_coalesced(
            emp,
            {
                "employee_code": patch.employee_code,
                "first_name": patch.first_name,
                "last_name": patch.last_name,
                "department": patch.department,
                "grade": patch.grade,
                "gender": patch.gender,
                "status": patch.status,
            },
        )
        if changed:
            save_or_conflict(emp, conflict_message=EmployeeService.DUPLICATE_MSG)
        return emp

    @staticmethod
    @transaction.atomic
    def delete(*, employee_id: int) -> None:
        emp = get_for_update_or_404(Employee, employee_id, label="Employee")
        delete_or_conflict(emp, conflict_message="Employee has bed assignments. Delete them first.")
        logger.info("Employee %s deleted", employee_id)
