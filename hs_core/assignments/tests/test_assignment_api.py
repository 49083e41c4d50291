import pytest
from django.db import DatabaseError

from hs_core.assignments.models import BedAssignment
from hs_core.beds.models import BedStatus
from hs_core.beds.services import BedService


pytestmark = pytest.mark.django_db

BASE = "/api/v1/assignments"


def _post(api_client, payload, base=BASE):
    return api_client.post(f"{base}/", payload, format="json")


def _bed_status(bed):
    bed.refresh_from_db()
    return bed.status


def test_create_close_delete_end_to_end(api_client, employee, bed):
    r = _post(
        api_client,
        {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01", "status": "Active"},
    )
    assert r.status_code == 201, r.data
    assert _bed_status(bed) == BedStatus.OCCUPIED
    aid = r.data["AssignmentID"]

    p = api_client.put(f"{BASE}/{aid}/", {"status": "Closed"}, format="json")
    assert p.status_code == 200, p.data
    assert p.data["Status"] == "Closed"
    assert _bed_status(bed) == BedStatus.AVAILABLE

    d = api_client.delete(f"{BASE}/{aid}/")
    assert d.status_code == 200, d.data
    assert d.data == {"bedId": bed.id}
    assert _bed_status(bed) == BedStatus.AVAILABLE
    assert not BedAssignment.objects.filter(id=aid).exists()


def test_create_returns_joined_shape(api_client, employee, bed):
    r = _post(
        api_client,
        {
            "employeeId": employee.id,
            "bedId": bed.id,
            "startDate": "2024-01-01",
            "endDate": "2024-12-31",
            "reason": "Relocation",
            "createdBy": "hr-desk",
        },
    )
    assert r.status_code == 201, r.data

    body = r.data
    assert set(body.keys()) == {
        "AssignmentID",
        "EmployeeID",
        "EmployeeCode",
        "FirstName",
        "LastName",
        "BedID",
        "BedCode",
        "RoomNumber",
        "FlatNumber",
        "FloorNumber",
        "BuildingName",
        "StartDate",
        "EndDate",
        "Status",
        "Reason",
        "CreatedAt",
        "CreatedBy",
    }
    assert body["EmployeeCode"] == "E-001"
    assert body["FirstName"] == "Asha"
    assert body["BedCode"] == "B1"
    assert body["RoomNumber"] == "R1"
    assert body["FlatNumber"] == "101"
    assert body["FloorNumber"] == 1
    assert body["BuildingName"] == "Tower A"
    assert body["StartDate"] == "2024-01-01"
    assert body["EndDate"] == "2024-12-31"
    assert body["Status"] == "Active"
    assert body["Reason"] == "Relocation"
    assert body["CreatedBy"] == "hr-desk"


def test_create_without_trailing_slash_on_unversioned_alias(api_client, employee, bed):
    r = api_client.post(
        "/api/assignments",
        {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"},
        format="json",
    )
    assert r.status_code == 201, r.data
    assert r.data["CreatedBy"] == "web"


def test_create_missing_employee_returns_400(api_client, bed):
    r = _post(api_client, {"bedId": bed.id, "startDate": "2024-01-01"})

    assert r.status_code == 400, r.data
    assert r.data["code"] == "validation_error"
    assert "employeeId" in r.data["message"]
    assert "request_id" in r.data
    assert _bed_status(bed) == BedStatus.AVAILABLE


@pytest.mark.parametrize("missing", ["bedId", "startDate"])
def test_create_other_required_fields_return_400(api_client, employee, bed, missing):
    payload = {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}
    payload.pop(missing)

    r = _post(api_client, payload)

    assert r.status_code == 400, r.data
    assert BedAssignment.objects.count() == 0


def test_create_unknown_bed_returns_404(api_client, employee):
    r = _post(api_client, {"employeeId": employee.id, "bedId": 999999, "startDate": "2024-01-01"})

    assert r.status_code == 404, r.data
    assert r.data["message"] == "Bed not found"


def test_update_and_delete_unknown_id_return_404(api_client):
    p = api_client.put(f"{BASE}/99999/", {"status": "Closed"}, format="json")
    assert p.status_code == 404, p.data
    assert p.data["code"] == "not_found"

    d = api_client.delete(f"{BASE}/99999/")
    assert d.status_code == 404, d.data


def test_update_reason_only_keeps_bed_and_status(api_client, employee, bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]

    p = api_client.put(f"{BASE}/{aid}/", {"reason": "Team moved"}, format="json")

    assert p.status_code == 200, p.data
    assert p.data["Reason"] == "Team moved"
    assert p.data["Status"] == "Active"
    assert _bed_status(bed) == BedStatus.OCCUPIED


def test_update_end_date_absent_keeps_and_null_clears(api_client, employee, bed):
    aid = _post(
        api_client,
        {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01", "endDate": "2024-03-31"},
    ).data["AssignmentID"]

    kept = api_client.put(f"{BASE}/{aid}/", {"reason": "x"}, format="json")
    assert kept.data["EndDate"] == "2024-03-31"

    cleared = api_client.put(f"{BASE}/{aid}/", {"endDate": None}, format="json")
    assert cleared.status_code == 200, cleared.data
    assert cleared.data["EndDate"] is None


def test_update_ignores_employee_and_bed_changes(api_client, employee, other_employee, bed, other_bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]

    p = api_client.put(
        f"{BASE}/{aid}/",
        {"employeeId": other_employee.id, "bedId": other_bed.id, "reason": "attempted move"},
        format="json",
    )

    assert p.status_code == 200, p.data
    assert p.data["EmployeeID"] == employee.id
    assert p.data["BedID"] == bed.id


def test_update_rejects_unknown_status(api_client, employee, bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]

    p = api_client.put(f"{BASE}/{aid}/", {"status": "Cancelled"}, format="json")

    assert p.status_code == 400, p.data


def test_list_is_newest_first_and_filterable(api_client, employee, other_employee, bed, other_bed):
    first = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data
    second = _post(
        api_client,
        {"employeeId": other_employee.id, "bedId": other_bed.id, "startDate": "2024-02-01", "status": "Planned"},
    ).data

    r = api_client.get(f"{BASE}/")
    assert r.status_code == 200
    assert [row["AssignmentID"] for row in r.data] == [second["AssignmentID"], first["AssignmentID"]]

    planned = api_client.get(f"{BASE}/", {"status": "Planned"})
    assert [row["AssignmentID"] for row in planned.data] == [second["AssignmentID"]]

    by_bed = api_client.get(f"{BASE}/", {"bedId": bed.id})
    assert [row["AssignmentID"] for row in by_bed.data] == [first["AssignmentID"]]


def test_retrieve_single_assignment(api_client, employee, bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]

    r = api_client.get(f"{BASE}/{aid}/")
    assert r.status_code == 200
    assert r.data["AssignmentID"] == aid

    missing = api_client.get(f"{BASE}/99999/")
    assert missing.status_code == 404


def test_list_without_query_params_returns_everything(api_client, employee, bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]

    for path in (f"{BASE}/", "/api/assignments"):
        r = api_client.get(path)
        assert r.status_code == 200, r.data
        assert [row["AssignmentID"] for row in r.data] == [aid]


def _failing_set_status(*, bed_id, status):
    raise DatabaseError("bed table unavailable")


def test_create_storage_failure_is_500_and_leaves_nothing(api_client, monkeypatch, employee, bed):
    monkeypatch.setattr(BedService, "set_status", staticmethod(_failing_set_status))

    r = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"})

    assert r.status_code == 500, r.data
    assert r.data["code"] == "persistence_error"
    assert BedAssignment.objects.count() == 0
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_delete_storage_failure_is_500_and_keeps_row(api_client, monkeypatch, employee, bed):
    aid = _post(api_client, {"employeeId": employee.id, "bedId": bed.id, "startDate": "2024-01-01"}).data[
        "AssignmentID"
    ]
    monkeypatch.setattr(BedService, "set_status", staticmethod(_failing_set_status))

    r = api_client.delete(f"{BASE}/{aid}/")

    assert r.status_code == 500, r.data
    assert r.data["code"] == "persistence_error"
    assert BedAssignment.objects.filter(id=aid).exists()
    assert _bed_status(bed) == BedStatus.OCCUPIED
