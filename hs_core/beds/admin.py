from __future__ import annotations

from django.contrib import admin

from hs_core.beds.models import Bed


@admin.register(Bed)
class BedAdmin(admin.ModelAdmin):
    list_display = ("id", "bed_code", "room", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("bed_code", "room__room_number")
    list_select_related = ("room__flat__floor__building",)

    # occupancy is owned by the assignment engine
    readonly_fields = ("status", "created_at", "updated_at")
