from __future__ import annotations

from django.contrib import admin

from hs_core.hierarchy.models import Building, Flat, Floor, Room


@admin.register(Building)
class BuildingAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "location", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("name", "location")
    ordering = ("name",)


@admin.register(Floor)
class FloorAdmin(admin.ModelAdmin):
    list_display = ("id", "building", "floor_number", "description")
    list_select_related = ("building",)
    ordering = ("building__name", "floor_number")


@admin.register(Flat)
class FlatAdmin(admin.ModelAdmin):
    list_display = ("id", "floor", "flat_number", "flat_type", "status")
    list_filter = ("status", "flat_type")
    list_select_related = ("floor__building",)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "flat", "room_number", "room_type", "max_occupancy", "gender_restriction", "status")
    list_filter = ("status", "room_type", "gender_restriction")
    search_fields = ("room_number",)
    list_select_related = ("flat__floor__building",)
