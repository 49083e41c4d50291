# hs_core/reports/selectors.py
from __future__ import annotations

from dataclasses import dataclass, field

from django.db.models import Count, Q

from hs_core.beds.models import BedStatus
from hs_core.hierarchy.models import Building


@dataclass(frozen=True)
class BuildingOccupancy:
    building_id: int
    building_name: str
    total: int
    occupied: int

    @property
    def available(self) -> int:
        return self.total - self.occupied


@dataclass(frozen=True)
class OccupancySummary:
    total_beds: int
    occupied_beds: int
    buildings: list[BuildingOccupancy] = field(default_factory=list)

    @property
    def available_beds(self) -> int:
        return self.total_beds - self.occupied_beds

    @property
    def occupancy_percent(self) -> int:
        if self.total_beds <= 0:
            return 0
        # half-up, matching the dashboard's Math.round
        return int(self.occupied_beds * 100 / self.total_beds + 0.5)


def occupancy_summary() -> OccupancySummary:
    """
    Bed counts per building, read straight from Bed.status.
    Buildings without beds are listed with zero counts.
    """
    bed_path = "floors__flats__rooms__beds"
    rows = (
        Building.objects.annotate(
            total=Count(bed_path, distinct=True),
            occupied=Count(
                bed_path,
                filter=Q(**{f"{bed_path}__status": BedStatus.OCCUPIED}),
                distinct=True,
            ),
        )
        .order_by("name", "id")
        .values("id", "name", "total", "occupied")
    )

    buildings = [
        BuildingOccupancy(
            building_id=r["id"],
            building_name=r["name"],
            total=r["total"],
            occupied=r["occupied"],
        )
        for r in rows
    ]
    return OccupancySummary(
        total_beds=sum(b.total for b in buildings),
        occupied_beds=sum(b.occupied for b in buildings),
        buildings=buildings,
    )
