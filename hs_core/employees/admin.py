from __future__ import annotations

from django.contrib import admin

from hs_core.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("employee_code", "first_name", "last_name", "department", "grade", "gender", "status")
    list_filter = ("status", "gender", "department")
    search_fields = ("employee_code", "first_name", "last_name", "department")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-id",)
