# hs_core/beds/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hs_core.beds.models import Bed


class BedSerializer(serializers.ModelSerializer):
    BedID = serializers.IntegerField(source="id", read_only=True)
    RoomID = serializers.IntegerField(source="room_id", read_only=True)
    BedCode = serializers.CharField(source="bed_code", read_only=True)
    Status = serializers.CharField(source="status", read_only=True)
    RoomNumber = serializers.CharField(source="room.room_number", read_only=True)
    FlatNumber = serializers.CharField(source="room.flat.flat_number", read_only=True)
    FloorNumber = serializers.IntegerField(source="room.flat.floor.floor_number", read_only=True)
    BuildingID = serializers.IntegerField(source="room.flat.floor.building_id", read_only=True)
    BuildingName = serializers.CharField(source="room.flat.floor.building.name", read_only=True)

    class Meta:
        model = Bed
        fields = [
            "BedID",
            "RoomID",
            "BedCode",
            "Status",
            "RoomNumber",
            "FlatNumber",
            "FloorNumber",
            "BuildingID",
            "BuildingName",
        ]
        read_only_fields = fields


class BedCreateSerializer(serializers.Serializer):
    """
    Status is not accepted: occupancy belongs to the assignment engine.
    """
    roomId = serializers.IntegerField()
    bedCode = serializers.CharField(max_length=32)


class BedUpdateSerializer(serializers.Serializer):
    roomId = serializers.IntegerField(required=False, allow_null=True)
    bedCode = serializers.CharField(max_length=32, required=False, allow_null=True)
