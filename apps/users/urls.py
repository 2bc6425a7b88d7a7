"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BecomeHostView, MeView, UserSearchView

urlpatterns = [
    path("me/", MeView.as_view(), name="user-me"),
    path("me/become-host/", BecomeHostView.as_view(), name="user-become-host"),
    path("search/", UserSearchView.as_view(), name="user-search"),
]
