# hs_core/assignments/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hs_core.assignments.models import AssignmentStatus, BedAssignment


class BlankableDateField(serializers.DateField):
    """
    Date inputs post "" when cleared; treat it like null when null is allowed.
    """

    def validate_empty_values(self, data):
        if data == "" and self.allow_null:
            return (True, None)
        return super().validate_empty_values(data)


class AssignmentSerializer(serializers.ModelSerializer):
    """
    Joined read shape: assignment + employee + bed + hierarchy labels.
    Expects a queryset built by AssignmentSelector (select_related).
    """
    AssignmentID = serializers.IntegerField(source="id", read_only=True)
    EmployeeID = serializers.IntegerField(source="employee_id", read_only=True)
    EmployeeCode = serializers.CharField(source="employee.employee_code", read_only=True)
    FirstName = serializers.CharField(source="employee.first_name", read_only=True)
    LastName = serializers.CharField(source="employee.last_name", read_only=True)
    BedID = serializers.IntegerField(source="bed_id", read_only=True)
    BedCode = serializers.CharField(source="bed.bed_code", read_only=True)
    RoomNumber = serializers.CharField(source="bed.room.room_number", read_only=True)
    FlatNumber = serializers.CharField(source="bed.room.flat.flat_number", read_only=True)
    FloorNumber = serializers.IntegerField(source="bed.room.flat.floor.floor_number", read_only=True)
    BuildingName = serializers.CharField(source="bed.room.flat.floor.building.name", read_only=True)
    StartDate = serializers.DateField(source="start_date", read_only=True)
    EndDate = serializers.DateField(source="end_date", read_only=True, allow_null=True)
    Status = serializers.CharField(source="status", read_only=True)
    Reason = serializers.CharField(source="reason", read_only=True)
    CreatedAt = serializers.DateTimeField(source="created_at", read_only=True)
    CreatedBy = serializers.CharField(source="created_by", read_only=True)

    class Meta:
        model = BedAssignment
        fields = [
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
        ]
        read_only_fields = fields


class AssignmentCreateSerializer(serializers.Serializer):
    employeeId = serializers.IntegerField(min_value=1)
    bedId = serializers.IntegerField(min_value=1)
    startDate = serializers.DateField()
    endDate = BlankableDateField(required=False, allow_null=True)
    status = serializers.ChoiceField(
        choices=AssignmentStatus.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    createdBy = serializers.CharField(max_length=128, required=False, allow_blank=True, allow_null=True)


class AssignmentUpdateSerializer(serializers.Serializer):
    """
    Partial update contract (PUT/PATCH). employeeId/bedId are fixed at creation
    and are not part of this contract.
    """
    startDate = BlankableDateField(required=False, allow_null=True)
    endDate = BlankableDateField(required=False, allow_null=True)
    status = serializers.ChoiceField(
        choices=AssignmentStatus.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class AssignmentDeletedSerializer(serializers.Serializer):
    bedId = serializers.IntegerField()
