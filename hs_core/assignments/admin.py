from __future__ import annotations

from django.contrib import admin

from hs_core.assignments.models import BedAssignment


@admin.register(BedAssignment)
class BedAssignmentAdmin(admin.ModelAdmin):
    """
    Read-only in admin: writes must go through AssignmentService so bed
    occupancy stays reconciled.
    """
    list_display = ("id", "employee", "bed", "start_date", "end_date", "status", "created_by", "created_at")
    list_filter = ("status",)
    search_fields = ("employee__employee_code", "employee__last_name", "bed__bed_code")
    ordering = ("-id",)
    list_select_related = ("employee", "bed")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
