# hs_core/conftest.py
import datetime

import pytest
from rest_framework.test import APIClient

from hs_core.beds.models import Bed
from hs_core.employees.models import Employee
from hs_core.hierarchy.models import Building, Flat, Floor, Room


@pytest.fixture
def api_client(db):
    return APIClient()


@pytest.fixture
def building(db):
    return Building.objects.create(name="Tower A", location="North Campus")


@pytest.fixture
def floor(building):
    return Floor.objects.create(building=building, floor_number=1)


@pytest.fixture
def flat(floor):
    return Flat.objects.create(floor=floor, flat_number="101", flat_type="3BHK")


@pytest.fixture
def room(flat):
    return Room.objects.create(flat=flat, room_number="R1", max_occupancy=2)


@pytest.fixture
def bed(room):
    return Bed.objects.create(room=room, bed_code="B1")


@pytest.fixture
def other_bed(room):
    return Bed.objects.create(room=room, bed_code="B2")


@pytest.fixture
def employee(db):
    return Employee.objects.create(
        employee_code="E-001",
        first_name="Asha",
        last_name="Rao",
        department="Operations",
        gender="Female",
    )


@pytest.fixture
def other_employee(db):
    return Employee.objects.create(
        employee_code="E-002",
        first_name="Vikram",
        last_name="Singh",
        department="Maintenance",
        gender="Male",
    )


@pytest.fixture
def start_date():
    return datetime.date(2024, 1, 1)
