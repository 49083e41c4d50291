import pytest

from hs_core.assignments.services import AssignmentService
from hs_core.beds.models import Bed
from hs_core.hierarchy.models import Building
from hs_core.reports.selectors import OccupancySummary, occupancy_summary

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize(
    "occupied,total,expected",
    [(0, 0, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 3, 100)],
)
def test_occupancy_percent_rounds_half_up(occupied, total, expected):
    assert OccupancySummary(total_beds=total, occupied_beds=occupied).occupancy_percent == expected


def test_summary_counts_by_building(employee, room, bed, other_bed, start_date):
    Bed.objects.create(room=room, bed_code="B3")
    Building.objects.create(name="Empty Block")
    AssignmentService.create(employee_id=employee.id, bed_id=bed.id, start_date=start_date)

    s = occupancy_summary()

    assert s.total_beds == 3
    assert s.occupied_beds == 1
    assert s.available_beds == 2
    assert s.occupancy_percent == 33
    assert [(b.building_name, b.total, b.occupied) for b in s.buildings] == [
        ("Empty Block", 0, 0),
        ("Tower A", 3, 1),
    ]


def test_occupancy_endpoint(api_client, employee, bed, other_bed, start_date):
    AssignmentService.create(employee_id=employee.id, bed_id=bed.id, start_date=start_date)

    r = api_client.get("/api/reports/occupancy")

    assert r.status_code == 200, r.data
    assert r.data["totalBeds"] == 2
    assert r.data["occupiedBeds"] == 1
    assert r.data["availableBeds"] == 1
    assert r.data["occupancyPercent"] == 50
    assert r.data["buildings"][0]["BuildingName"] == "Tower A"
    assert r.data["buildings"][0]["available"] == 1
