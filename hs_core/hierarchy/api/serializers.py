# hs_core/hierarchy/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hs_core.common.models import RecordStatus
from hs_core.hierarchy.models import Building, Flat, Floor, Room


# -------------------------
# Read shapes (PascalCase, as the UI and spreadsheets expect)
# -------------------------
class BuildingSerializer(serializers.ModelSerializer):
    BuildingID = serializers.IntegerField(source="id", read_only=True)
    BuildingName = serializers.CharField(source="name", read_only=True)
    Location = serializers.CharField(source="location", read_only=True)
    Description = serializers.CharField(source="description", read_only=True)
    Status = serializers.CharField(source="status", read_only=True)

    class Meta:
        model = Building
        fields = ["BuildingID", "BuildingName", "Location", "Description", "Status"]
        read_only_fields = fields


class FloorSerializer(serializers.ModelSerializer):
    FloorID = serializers.IntegerField(source="id", read_only=True)
    BuildingID = serializers.IntegerField(source="building_id", read_only=True)
    FloorNumber = serializers.IntegerField(source="floor_number", read_only=True)
    Description = serializers.CharField(source="description", read_only=True)
    BuildingName = serializers.CharField(source="building.name", read_only=True)

    class Meta:
        model = Floor
        fields = ["FloorID", "BuildingID", "FloorNumber", "Description", "BuildingName"]
        read_only_fields = fields


class FlatSerializer(serializers.ModelSerializer):
    FlatID = serializers.IntegerField(source="id", read_only=True)
    FloorID = serializers.IntegerField(source="floor_id", read_only=True)
    FlatNumber = serializers.CharField(source="flat_number", read_only=True)
    FlatType = serializers.CharField(source="flat_type", read_only=True)
    Status = serializers.CharField(source="status", read_only=True)
    FloorNumber = serializers.IntegerField(source="floor.floor_number", read_only=True)
    BuildingID = serializers.IntegerField(source="floor.building_id", read_only=True)
    BuildingName = serializers.CharField(source="floor.building.name", read_only=True)

    class Meta:
        model = Flat
        fields = [
            "FlatID",
            "FloorID",
            "FlatNumber",
            "FlatType",
            "Status",
            "FloorNumber",
            "BuildingID",
            "BuildingName",
        ]
        read_only_fields = fields


class RoomSerializer(serializers.ModelSerializer):
    RoomID = serializers.IntegerField(source="id", read_only=True)
    FlatID = serializers.IntegerField(source="flat_id", read_only=True)
    RoomNumber = serializers.CharField(source="room_number", read_only=True)
    RoomType = serializers.CharField(source="room_type", read_only=True)
    MaxOccupancy = serializers.IntegerField(source="max_occupancy", read_only=True)
    GenderRestriction = serializers.CharField(source="gender_restriction", read_only=True)
    Status = serializers.CharField(source="status", read_only=True)
    FlatNumber = serializers.CharField(source="flat.flat_number", read_only=True)
    FloorNumber = serializers.IntegerField(source="flat.floor.floor_number", read_only=True)
    BuildingID = serializers.IntegerField(source="flat.floor.building_id", read_only=True)
    BuildingName = serializers.CharField(source="flat.floor.building.name", read_only=True)

    class Meta:
        model = Room
        fields = [
            "RoomID",
            "FlatID",
            "RoomNumber",
            "RoomType",
            "MaxOccupancy",
            "GenderRestriction",
            "Status",
            "FlatNumber",
            "FloorNumber",
            "BuildingID",
            "BuildingName",
        ]
        read_only_fields = fields


# -------------------------
# Write contracts (camelCase request bodies)
# -------------------------
class BuildingCreateSerializer(serializers.Serializer):
    buildingName = serializers.CharField(max_length=255)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class BuildingUpdateSerializer(serializers.Serializer):
    buildingName = serializers.CharField(max_length=255, required=False, allow_null=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class FloorCreateSerializer(serializers.Serializer):
    buildingId = serializers.IntegerField()
    floorNumber = serializers.IntegerField()
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class FloorUpdateSerializer(serializers.Serializer):
    buildingId = serializers.IntegerField(required=False, allow_null=True)
    floorNumber = serializers.IntegerField(required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class FlatCreateSerializer(serializers.Serializer):
    floorId = serializers.IntegerField()
    flatNumber = serializers.CharField(max_length=32)
    flatType = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class FlatUpdateSerializer(serializers.Serializer):
    floorId = serializers.IntegerField(required=False, allow_null=True)
    flatNumber = serializers.CharField(max_length=32, required=False, allow_null=True)
    flatType = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class RoomCreateSerializer(serializers.Serializer):
    flatId = serializers.IntegerField()
    roomNumber = serializers.CharField(max_length=32)
    maxOccupancy = serializers.IntegerField(min_value=1)
    roomType = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    genderRestriction = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)


class RoomUpdateSerializer(serializers.Serializer):
    flatId = serializers.IntegerField(required=False, allow_null=True)
    roomNumber = serializers.CharField(max_length=32, required=False, allow_null=True)
    maxOccupancy = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    roomType = serializers.CharField(max_length=64, required=False, allow_blank=True, allow_null=True)
    genderRestriction = serializers.CharField(max_length=32, required=False, allow_blank=True, allow_null=True)
    status = serializers.ChoiceField(choices=RecordStatus.choices, required=False, allow_null=True)
