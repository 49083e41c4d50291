# hs_core/employees/models.py
from django.db import models

from hs_core.common.models import RecordStatus, TimeStampedModel


class Gender(models.TextChoices):
    MALE = "Male", "Male"
    FEMALE = "Female", "Female"
    OTHER = "Other", "Other"


class Employee(TimeStampedModel):
    """
    Roster entry. Linked to beds only through BedAssignment.
    """
    employee_code = models.CharField(max_length=64, unique=True)
    first_name = models.CharField(max_length=128)
    last_name = models.CharField(max_length=128)
    department = models.CharField(max_length=128, blank=True, default="")
    grade = models.CharField(max_length=64, blank=True, default="")
    gender = models.CharField(max_length=16, choices=Gender.choices)
    status = models.CharField(
        max_length=32,
        choices=RecordStatus.choices,
        default=RecordStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = "employees_employee"
        indexes = [
            models.Index(fields=["last_name", "first_name"]),
            models.Index(fields=["department"]),
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"{self.full_name} ({self.employee_code})"
