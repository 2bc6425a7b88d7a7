"""API views for co-host management."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.listings.services import find_listing_by_id

from .models import CohostPermission
from .serializers import (
    CohostPermissionCreateSerializer,
    CohostPermissionSerializer,
    CohostPermissionUpdateSerializer,
)
from .services import (
    find_cohost_permissions_for_host,
    grant_cohost_permission,
    revoke_cohost_permission,
    update_cohost_permission,
)


class CohostPermissionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Grants on the authenticated host's listings.

    Ownership of each grant is checked by the authorization resolver, so a
    grant that exists but belongs to another host answers 403 rather than 404.
    """

    queryset = CohostPermission.objects.select_related("listing", "host", "cohost")
    serializer_class = CohostPermissionSerializer
    permission_classes = [permissions.IsAuthenticated]
    pagination_class = None

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if self.action == "retrieve":
            return qs.filter(listing__host=self.request.user)
        return qs

    def list(self, request, *args, **kwargs):  # type: ignore
        permissions_granted = find_cohost_permissions_for_host(request.user.pk)
        return Response(CohostPermissionSerializer(permissions_granted, many=True).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = CohostPermissionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        listing = find_listing_by_id(data.pop("listing_id"))
        permission = grant_cohost_permission(
            request.user,
            listing,
            data.pop("cohost_id"),
            **data,
        )
        return Response(CohostPermissionSerializer(permission).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):  # type: ignore
        permission = self.get_object()
        serializer = CohostPermissionUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        permission = update_cohost_permission(request.user, permission, **serializer.validated_data)
        return Response(CohostPermissionSerializer(permission).data)

    def update(self, request, *args, **kwargs):  # type: ignore
        return self.partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        permission = self.get_object()
        revoke_cohost_permission(request.user, permission)
        return Response(status=status.HTTP_204_NO_CONTENT)
