# hs_core/api/urls.py
from __future__ import annotations

from django.urls import re_path
from rest_framework.routers import DefaultRouter

from hs_core.assignments.api.views import AssignmentViewSet
from hs_core.beds.api.views import BedViewSet
from hs_core.common.views import HealthView
from hs_core.employees.api.views import EmployeeViewSet
from hs_core.hierarchy.api.views import BuildingViewSet, FlatViewSet, FloorViewSet, RoomViewSet
from hs_core.reports.api.views import OccupancyReportView

# The browser UI calls routes without a trailing slash; accept both forms.
router = DefaultRouter()
router.trailing_slash = "/?"

# Physical hierarchy
router.register(r"buildings", BuildingViewSet, basename="buildings")
router.register(r"floors", FloorViewSet, basename="floors")
router.register(r"flats", FlatViewSet, basename="flats")
router.register(r"rooms", RoomViewSet, basename="rooms")
router.register(r"beds", BedViewSet, basename="beds")

# Roster
router.register(r"employees", EmployeeViewSet, basename="employees")

# Bed assignments (occupancy engine)
router.register(r"assignments", AssignmentViewSet, basename="assignments")

urlpatterns = [
    re_path(r"^health/?$", HealthView.as_view(), name="health"),
    re_path(r"^reports/occupancy/?$", OccupancyReportView.as_view(), name="reports-occupancy"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
