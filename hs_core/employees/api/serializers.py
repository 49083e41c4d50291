# hs_core/employees/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hs_core.common.models import RecordStatus
from hs_core.employees.models import Employee, Gender


class EmployeeSerializer(serializers.ModelSerializer):
    EmployeeID = serializers.IntegerField(source="id", read_only=True)
    EmployeeCode = serializers.CharField(source="employee_code", read_only=True)
    FirstName = serializers.CharField(source="first_name", read_only=True)
    LastName = serializers.CharField(source="last_name", read_only=True)
    Department = serializers.CharField(source="department", read_only=True)
    Grade = serializers.CharField(source="grade", read_only=True)
    Gender = serializers.CharField(source="gender", read_only=True)
    Status = serializers.CharField(source="status", read_only=True)

    class Meta:
        model = Employee
        fields = [
            "EmployeeID",
            "EmployeeCode",
            "FirstName",
            "LastName",
            "Department",
            "Grade",
            "Gender",
            "Status",
        ]
        read_only_fields = fields


class EmployeeCreateSerializer(serializers.Serializer):
    employeeCode = serializers.CharField(max_length=64)
    firstName = serializers.CharField(max_length=128)
    lastName = serializers.CharField(max_length=128)
    gender = serializers.ChoiceField(choices=Gender.choices)
    department = serializers.CharField(max_length=128, required=False, allow_blank=True, allow_null=True)
    grade = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class EmployeeUpdateSerializer(serializers.Serializer):
    """
    Partial update contract: omitted or null fields keep their stored value.
    """
    employeeCode = serializers.CharField(max_length=64, required=False, allow_null=True)
    firstName = serializers.CharField(max_length=128, required=False, allow_null=True)
    lastName = serializers.CharField(max_length=128, required=False, allow_null=True)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False, allow_null=True)
    department = serializers.CharField(max_length=128, required=False, allow_blank=True, allow_null=True)
    grade = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)
