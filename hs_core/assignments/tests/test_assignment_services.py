import datetime

import pytest
from django.db import DatabaseError
from rest_framework.exceptions import NotFound, ValidationError

from hs_core.assignments.models import AssignmentStatus, BedAssignment
from hs_core.assignments.services import AssignmentService, AssignmentUpdate
from hs_core.beds.models import Bed, BedStatus
from hs_core.beds.services import BedService


pytestmark = pytest.mark.django_db


def _bed_status(bed):
    bed.refresh_from_db()
    return bed.status


def _create(employee, bed, start_date, **kwargs):
    return AssignmentService.create(
        employee_id=employee.id,
        bed_id=bed.id,
        start_date=start_date,
        **kwargs,
    )


def test_create_defaults_to_active_and_occupies_bed(employee, bed, start_date):
    assert bed.status == BedStatus.AVAILABLE

    a = _create(employee, bed, start_date)

    assert a.status == AssignmentStatus.ACTIVE
    assert a.created_by == "web"
    assert a.end_date is None
    assert _bed_status(bed) == BedStatus.OCCUPIED


@pytest.mark.parametrize("status", [AssignmentStatus.PLANNED, AssignmentStatus.CLOSED])
def test_create_always_occupies_bed_regardless_of_status(employee, bed, start_date, status):
    a = _create(employee, bed, start_date, status=status)

    assert a.status == status
    assert _bed_status(bed) == BedStatus.OCCUPIED


def test_create_returns_joined_labels(employee, bed, start_date):
    a = _create(employee, bed, start_date, reason="New joiner", created_by="desk-1")

    assert a.employee.employee_code == "E-001"
    assert a.bed.room.flat.floor.building.name == "Tower A"
    assert a.reason == "New joiner"
    assert a.created_by == "desk-1"


def test_create_requires_employee_bed_and_start_date(employee, bed):
    with pytest.raises(ValidationError):
        AssignmentService.create(employee_id=employee.id, bed_id=bed.id, start_date=None)

    assert BedAssignment.objects.count() == 0
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_create_unknown_references_are_not_found(employee, bed, start_date):
    with pytest.raises(NotFound):
        AssignmentService.create(employee_id=999999, bed_id=bed.id, start_date=start_date)

    with pytest.raises(NotFound):
        AssignmentService.create(employee_id=employee.id, bed_id=999999, start_date=start_date)

    assert BedAssignment.objects.count() == 0
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_create_does_not_guard_against_double_booking(employee, other_employee, bed, start_date):
    _create(employee, bed, start_date)
    _create(other_employee, bed, start_date)

    assert BedAssignment.objects.filter(bed=bed).count() == 2
    assert _bed_status(bed) == BedStatus.OCCUPIED


def test_close_frees_bed_when_no_other_live_assignment(employee, bed, start_date):
    a = _create(employee, bed, start_date)

    updated = AssignmentService.update(
        assignment_id=a.id,
        patch=AssignmentUpdate(status=AssignmentStatus.CLOSED),
    )

    assert updated.status == AssignmentStatus.CLOSED
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_closing_twice_leaves_bed_unchanged(employee, bed, start_date):
    a = _create(employee, bed, start_date)
    close = AssignmentUpdate(status=AssignmentStatus.CLOSED)

    AssignmentService.update(assignment_id=a.id, patch=close)
    assert _bed_status(bed) == BedStatus.AVAILABLE

    AssignmentService.update(assignment_id=a.id, patch=close)
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_bed_freed_only_when_all_live_assignments_closed(employee, other_employee, bed, start_date):
    a1 = _create(employee, bed, start_date)
    a2 = _create(other_employee, bed, start_date, status=AssignmentStatus.PLANNED)
    close = AssignmentUpdate(status=AssignmentStatus.CLOSED)

    AssignmentService.update(assignment_id=a1.id, patch=close)
    assert _bed_status(bed) == BedStatus.OCCUPIED

    AssignmentService.update(assignment_id=a2.id, patch=close)
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_delete_frees_bed_only_when_no_live_assignment_remains(employee, other_employee, bed, start_date):
    a1 = _create(employee, bed, start_date)
    a2 = _create(other_employee, bed, start_date)

    assert AssignmentService.delete(assignment_id=a1.id) == bed.id
    assert _bed_status(bed) == BedStatus.OCCUPIED

    assert AssignmentService.delete(assignment_id=a2.id) == bed.id
    assert _bed_status(bed) == BedStatus.AVAILABLE
    assert BedAssignment.objects.count() == 0


def test_delete_of_closed_assignment_keeps_bed_available(employee, bed, start_date):
    a = _create(employee, bed, start_date)
    AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.CLOSED))

    AssignmentService.delete(assignment_id=a.id)

    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_updating_reason_only_does_not_touch_bed(employee, bed, other_bed, start_date):
    a = _create(employee, bed, start_date)

    updated = AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(reason="Shifted team"))

    assert updated.reason == "Shifted team"
    assert updated.status == AssignmentStatus.ACTIVE
    assert _bed_status(bed) == BedStatus.OCCUPIED
    assert _bed_status(other_bed) == BedStatus.AVAILABLE


def test_reopening_closed_assignment_does_not_reoccupy_bed(employee, bed, start_date):
    a = _create(employee, bed, start_date)
    AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.CLOSED))
    assert _bed_status(bed) == BedStatus.AVAILABLE

    reopened = AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.ACTIVE))

    assert reopened.status == AssignmentStatus.ACTIVE
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_update_coalesces_fields(employee, bed, start_date):
    a = _create(
        employee,
        bed,
        start_date,
        end_date=datetime.date(2024, 6, 30),
        reason="Project",
    )

    # nothing provided: stored values survive, end_date included
    same = AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate())
    assert same.start_date == start_date
    assert same.end_date == datetime.date(2024, 6, 30)
    assert same.status == AssignmentStatus.ACTIVE
    assert same.reason == "Project"

    moved = AssignmentService.update(
        assignment_id=a.id,
        patch=AssignmentUpdate(start_date=datetime.date(2024, 2, 1)),
    )
    assert moved.start_date == datetime.date(2024, 2, 1)
    assert moved.end_date == datetime.date(2024, 6, 30)

    cleared = AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(end_date=None))
    assert cleared.end_date is None
    assert cleared.reason == "Project"


def test_update_and_delete_unknown_assignment_are_not_found():
    with pytest.raises(NotFound):
        AssignmentService.update(assignment_id=99999, patch=AssignmentUpdate(status=AssignmentStatus.CLOSED))

    with pytest.raises(NotFound):
        AssignmentService.delete(assignment_id=99999)


def test_reconcile_bed_status_only_releases(employee, bed, other_bed, start_date):
    _create(employee, bed, start_date)

    # drift in both directions
    Bed.objects.filter(id=bed.id).update(status=BedStatus.AVAILABLE)
    Bed.objects.filter(id=other_bed.id).update(status=BedStatus.OCCUPIED)

    # a bed with a live row is left as stored, never re-occupied here
    assert AssignmentService.reconcile_bed_status(bed_id=bed.id) == BedStatus.AVAILABLE
    assert AssignmentService.reconcile_bed_status(bed_id=other_bed.id) == BedStatus.AVAILABLE
    assert AssignmentService.reconcile_bed_status(bed_id=424242) is None

    assert _bed_status(bed) == BedStatus.AVAILABLE
    assert _bed_status(other_bed) == BedStatus.AVAILABLE


def test_closing_again_after_reopen_keeps_bed_available(employee, other_employee, bed, start_date):
    a = _create(employee, bed, start_date)
    b = _create(other_employee, bed, start_date)
    close = AssignmentUpdate(status=AssignmentStatus.CLOSED)

    AssignmentService.update(assignment_id=a.id, patch=close)
    AssignmentService.update(assignment_id=b.id, patch=close)
    assert _bed_status(bed) == BedStatus.AVAILABLE

    # reopening does not re-occupy the bed
    AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.ACTIVE))
    assert _bed_status(bed) == BedStatus.AVAILABLE

    # a repeated closure of b must not flip the bed either way
    AssignmentService.update(assignment_id=b.id, patch=close)
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_delete_with_live_sibling_never_occupies(employee, other_employee, bed, start_date):
    a = _create(employee, bed, start_date)
    b = _create(other_employee, bed, start_date)
    close = AssignmentUpdate(status=AssignmentStatus.CLOSED)
    AssignmentService.update(assignment_id=a.id, patch=close)
    AssignmentService.update(assignment_id=b.id, patch=close)
    AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.ACTIVE))

    AssignmentService.delete(assignment_id=b.id)

    assert _bed_status(bed) == BedStatus.AVAILABLE


def _failing_set_status(*, bed_id, status):
    raise DatabaseError("bed table unavailable")


def test_create_rolls_back_when_bed_write_fails(monkeypatch, employee, bed, start_date):
    monkeypatch.setattr(BedService, "set_status", staticmethod(_failing_set_status))

    with pytest.raises(DatabaseError):
        _create(employee, bed, start_date)

    assert BedAssignment.objects.count() == 0
    assert _bed_status(bed) == BedStatus.AVAILABLE


def test_delete_rolls_back_when_bed_write_fails(monkeypatch, employee, bed, start_date):
    a = _create(employee, bed, start_date)
    monkeypatch.setattr(BedService, "set_status", staticmethod(_failing_set_status))

    with pytest.raises(DatabaseError):
        AssignmentService.delete(assignment_id=a.id)

    assert BedAssignment.objects.filter(id=a.id).exists()
    assert _bed_status(bed) == BedStatus.OCCUPIED


def test_close_rolls_back_when_bed_write_fails(monkeypatch, employee, bed, start_date):
    a = _create(employee, bed, start_date)
    monkeypatch.setattr(BedService, "set_status", staticmethod(_failing_set_status))

    with pytest.raises(DatabaseError):
        AssignmentService.update(assignment_id=a.id, patch=AssignmentUpdate(status=AssignmentStatus.CLOSED))

    a.refresh_from_db()
    assert a.status == AssignmentStatus.ACTIVE
    assert _bed_status(bed) == BedStatus.OCCUPIED


def test_invariant_holds_after_mixed_sequence(employee, other_employee, bed, other_bed, start_date):
    a1 = _create(employee, bed, start_date)
    a2 = _create(other_employee, other_bed, start_date, status=AssignmentStatus.PLANNED)
    a3 = _create(other_employee, bed, start_date)

    AssignmentService.update(assignment_id=a1.id, patch=AssignmentUpdate(status=AssignmentStatus.CLOSED))
    AssignmentService.update(assignment_id=a2.id, patch=AssignmentUpdate(reason="Waiting for keys"))
    AssignmentService.delete(assignment_id=a3.id)

    for b in (bed, other_bed):
        live = BedAssignment.objects.filter(
            bed=b,
            status__in=[AssignmentStatus.PLANNED, AssignmentStatus.ACTIVE],
        ).exists()
        expected = BedStatus.OCCUPIED if live else BedStatus.AVAILABLE
        assert _bed_status(b) == expected
