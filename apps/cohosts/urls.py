"""URL routing for co-host management."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CohostPermissionViewSet

router = DefaultRouter()
router.register(r"", CohostPermissionViewSet, basename="cohost")

urlpatterns = [
    path("", include(router.urls)),
]
