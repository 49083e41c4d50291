# hs_core/employees/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from hs_core.employees.api.serializers import (
    EmployeeCreateSerializer,
    EmployeeSerializer,
    EmployeeUpdateSerializer,
)
from hs_core.employees.models import Employee
from hs_core.employees.selectors import employee_by_id, list_employees
from hs_core.employees.services import EmployeeService, EmployeeUpdate


class EmployeeViewSet(viewsets.ViewSet):
    serializer_class = EmployeeSerializer
    queryset = Employee.objects.none()
    lookup_value_regex = r"\d+"

    def list(self, request):
        q = request.query_params.get("q", "").strip()
        return Response(EmployeeSerializer(list_employees(q=q), many=True).data)

    def retrieve(self, request, pk=None):
        try:
            emp = employee_by_id(employee_id=int(pk))
        except Employee.DoesNotExist:
            raise NotFound("Employee not found")
        return Response(EmployeeSerializer(emp).data)

    def create(self, request):
        s = EmployeeCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        emp = EmployeeService.create(
            employee_code=d["employeeCode"],
            first_name=d["firstName"],
            last_name=d["lastName"],
            gender=d["gender"],
            department=d.get("department") or "",
            grade=d.get("grade") or "",
            status=d.get("status") or None,
        )
        return Response(EmployeeSerializer(emp).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = EmployeeUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        emp = EmployeeService.update(
            employee_id=int(pk),
            patch=EmployeeUpdate(
                employee_code=d.get("employeeCode"),
                first_name=d.get("firstName"),
                last_name=d.get("lastName"),
                department=d.get("department"),
                grade=d.get("grade"),
                gender=d.get("gender"),
                status=d.get("status"),
            ),
        )
        return Response(EmployeeSerializer(emp).data, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        EmployeeService.delete(employee_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
