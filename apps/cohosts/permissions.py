"""DRF permission classes backed by the authorization resolver."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .authorization import require


class ResolverPermission(permissions.BasePermission):
    """Object-level check delegated to ``apps.cohosts.authorization``.

    Views declare ``authorization_actions``, a mapping of viewset action name
    to resolver ``Action``. Actions missing from the mapping are not checked
    here. A denial raises the matching domain error so the client sees the
    same ``code`` as from the service layer.
    """

    def has_object_permission(self, request, view, obj):  # type: ignore
        mapping = getattr(view, "authorization_actions", {})
        resolver_action = mapping.get(getattr(view, "action", None))
        if resolver_action is None:
            return True
        require(request.user, resolver_action, obj)
        return True


class IsHostOrCohost(permissions.BasePermission):
    """Only users whose derived role is host or cohost."""

    message = "Only hosts and co-hosts can perform this action."

    def has_permission(self, request, view):  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role in {user.Role.HOST, user.Role.COHOST}


class IsHost(permissions.BasePermission):
    message = "Only hosts can perform this action."

    def has_permission(self, request, view):  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role == user.Role.HOST
