# hs_core/hierarchy/api/views.py
from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from hs_core.beds.api.serializers import BedSerializer
from hs_core.beds.selectors import available_beds_in_room
from hs_core.hierarchy.api.serializers import (
    BuildingCreateSerializer,
    BuildingSerializer,
    BuildingUpdateSerializer,
    FlatCreateSerializer,
    FlatSerializer,
    FlatUpdateSerializer,
    FloorCreateSerializer,
    FloorSerializer,
    FloorUpdateSerializer,
    RoomCreateSerializer,
    RoomSerializer,
    RoomUpdateSerializer,
)
from hs_core.hierarchy.models import Building, Flat, Floor, Room
from hs_core.hierarchy.selectors import (
    building_by_id,
    flat_by_id,
    floor_by_id,
    list_buildings,
    list_flats,
    list_floors,
    list_rooms,
    room_by_id,
)
from hs_core.hierarchy.services import (
    BuildingService,
    BuildingUpdate,
    FlatService,
    FlatUpdate,
    FloorService,
    FloorUpdate,
    RoomService,
    RoomUpdate,
)


class _HierarchyViewSet(viewsets.ViewSet):
    """
    Thin API layer shared by the hierarchy resources:
    - validation via explicit request serializers
    - reads via selectors, writes via services
    - PUT and PATCH both use coalesce semantics (omitted/null fields stay unchanged)
    """

    lookup_value_regex = r"\d+"

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)


class BuildingViewSet(_HierarchyViewSet):
    serializer_class = BuildingSerializer
    queryset = Building.objects.none()

    def _get(self, pk) -> Building:
        try:
            return building_by_id(building_id=int(pk))
        except Building.DoesNotExist:
            raise NotFound("Building not found")

    def list(self, request):
        return Response(BuildingSerializer(list_buildings(), many=True).data)

    def retrieve(self, request, pk=None):
        return Response(BuildingSerializer(self._get(pk)).data)

    def create(self, request):
        s = BuildingCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = BuildingService.create(
            name=d["buildingName"],
            location=d.get("location") or "",
            description=d.get("description") or "",
            status=d.get("status") or None,
        )
        return Response(BuildingSerializer(obj).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = BuildingUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = BuildingService.update(
            building_id=int(pk),
            patch=BuildingUpdate(
                name=d.get("buildingName"),
                location=d.get("location"),
                description=d.get("description"),
                status=d.get("status"),
            ),
        )
        return Response(BuildingSerializer(obj).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        BuildingService.delete(building_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


class FloorViewSet(_HierarchyViewSet):
    serializer_class = FloorSerializer
    queryset = Floor.objects.none()

    def _get(self, pk) -> Floor:
        try:
            return floor_by_id(floor_id=int(pk))
        except Floor.DoesNotExist:
            raise NotFound("Floor not found")

    def list(self, request):
        qs = list_floors(params=request.query_params)
        return Response(FloorSerializer(qs, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(FloorSerializer(self._get(pk)).data)

    def create(self, request):
        s = FloorCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = FloorService.create(
            building_id=d["buildingId"],
            floor_number=d["floorNumber"],
            description=d.get("description") or "",
        )
        return Response(FloorSerializer(self._get(obj.id)).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = FloorUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = FloorService.update(
            floor_id=int(pk),
            patch=FloorUpdate(
                building_id=d.get("buildingId"),
                floor_number=d.get("floorNumber"),
                description=d.get("description"),
            ),
        )
        return Response(FloorSerializer(self._get(obj.id)).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        FloorService.delete(floor_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


class FlatViewSet(_HierarchyViewSet):
    serializer_class = FlatSerializer
    queryset = Flat.objects.none()

    def _get(self, pk) -> Flat:
        try:
            return flat_by_id(flat_id=int(pk))
        except Flat.DoesNotExist:
            raise NotFound("Flat not found")

    def list(self, request):
        qs = list_flats(params=request.query_params)
        return Response(FlatSerializer(qs, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(FlatSerializer(self._get(pk)).data)

    def create(self, request):
        s = FlatCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = FlatService.create(
            floor_id=d["floorId"],
            flat_number=d["flatNumber"],
            flat_type=d.get("flatType") or "",
            status=d.get("status") or None,
        )
        return Response(FlatSerializer(self._get(obj.id)).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = FlatUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = FlatService.update(
            flat_id=int(pk),
            patch=FlatUpdate(
                floor_id=d.get("floorId"),
                flat_number=d.get("flatNumber"),
                flat_type=d.get("flatType"),
                status=d.get("status"),
            ),
        )
        return Response(FlatSerializer(self._get(obj.id)).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        FlatService.delete(flat_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


class RoomViewSet(_HierarchyViewSet):
    serializer_class = RoomSerializer
    queryset = Room.objects.none()

    def _get(self, pk) -> Room:
        try:
            return room_by_id(room_id=int(pk))
        except Room.DoesNotExist:
            raise NotFound("Room not found")

    def list(self, request):
        qs = list_rooms(params=request.query_params)
        return Response(RoomSerializer(qs, many=True).data)

    def retrieve(self, request, pk=None):
        return Response(RoomSerializer(self._get(pk)).data)

    def create(self, request):
        s = RoomCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = RoomService.create(
            flat_id=d["flatId"],
            room_number=d["roomNumber"],
            max_occupancy=d["maxOccupancy"],
            room_type=d.get("roomType") or "",
            gender_restriction=d.get("genderRestriction") or "",
            status=d.get("status") or None,
        )
        return Response(RoomSerializer(self._get(obj.id)).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        s = RoomUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        d = s.validated_data

        obj = RoomService.update(
            room_id=int(pk),
            patch=RoomUpdate(
                flat_id=d.get("flatId"),
                room_number=d.get("roomNumber"),
                room_type=d.get("roomType"),
                max_occupancy=d.get("maxOccupancy"),
                gender_restriction=d.get("genderRestriction"),
                status=d.get("status"),
            ),
        )
        return Response(RoomSerializer(self._get(obj.id)).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        RoomService.delete(room_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"], url_path="available-beds")
    def available_beds(self, request, pk=None):
        room = self._get(pk)
        qs = available_beds_in_room(room_id=room.id)
        return Response(BedSerializer(qs, many=True).data)
