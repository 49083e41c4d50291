from __future__ import annotations

from rest_framework import serializers


class BuildingOccupancySerializer(serializers.Serializer):
    BuildingID = serializers.IntegerField(source="building_id")
    BuildingName = serializers.CharField(source="building_name")
    total = serializers.IntegerField()
    occupied = serializers.IntegerField()
    available = serializers.IntegerField()


class OccupancySummarySerializer(serializers.Serializer):
    totalBeds = serializers.IntegerField(source="total_beds")
    occupiedBeds = serializers.IntegerField(source="occupied_beds")
    availableBeds = serializers.IntegerField(source="available_beds")
    occupancyPercent = serializers.IntegerField(source="occupancy_percent")
    buildings = BuildingOccupancySerializer(many=True)
