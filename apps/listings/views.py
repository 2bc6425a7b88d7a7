"""Listing API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.cohosts.authorization import Action
from apps.cohosts.permissions import IsHostOrCohost, ResolverPermission

from .cache import get_or_build_detail, get_or_build_search
from .filters import ListingFilterSet
from .models import Listing
from .serializers import ListingSerializer, ListingWriteSerializer
from .services import create_listing, delete_listing, listings_managed_by, update_listing


class ListingViewSet(viewsets.ModelViewSet):
    """Public catalogue of listings with host and co-host management.

    Reads are anonymous and served through the listing cache. Writes are
    checked by the authorization resolver: editing needs host or a co-host
    grant with ``can_edit_listing``, deletion is reserved to the host.
    """

    queryset = Listing.objects.select_related("host")
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, ResolverPermission]
    filter_backends = [DjangoFilterBackend]
    filterset_class = ListingFilterSet
    authorization_actions = {
        "update": Action.LISTING_EDIT,
        "partial_update": Action.LISTING_EDIT,
        "destroy": Action.LISTING_DELETE,
    }

    def get_permissions(self):  # type: ignore
        if self.action in {"list", "retrieve"}:
            return [permissions.AllowAny()]
        if self.action == "create":
            return [IsHostOrCohost()]
        if self.action == "my_listings":
            return [permissions.IsAuthenticated()]
        return super().get_permissions()

    def get_serializer_class(self):  # type: ignore
        if self.action in {"create", "update", "partial_update"}:
            return ListingWriteSerializer
        return ListingSerializer

    def list(self, request, *args, **kwargs):  # type: ignore
        def build():
            queryset = self.filter_queryset(self.get_queryset())
            page = self.paginate_queryset(queryset)
            serializer = ListingSerializer(page, many=True)
            return self.get_paginated_response(serializer.data).data

        filters = {key: request.query_params.get(key) for key in request.query_params}
        return Response(get_or_build_search(filters, build))

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        listing_id = self.kwargs[self.lookup_field]

        def build():
            return ListingSerializer(self.get_object()).data

        return Response(get_or_build_detail(listing_id, build))

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = create_listing(request.user, **serializer.validated_data)
        return Response(ListingSerializer(listing).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):  # type: ignore
        partial = kwargs.pop("partial", False)
        listing = self.get_object()
        serializer = self.get_serializer(listing, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        listing = update_listing(request.user, listing, **serializer.validated_data)
        return Response(ListingSerializer(listing).data)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        listing = self.get_object()
        delete_listing(request.user, listing)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path="my-listings")
    def my_listings(self, request):  # type: ignore
        """Listings the caller hosts or co-hosts."""
        queryset = listings_managed_by(request.user)
        page = self.paginate_queryset(queryset)
        serializer = ListingSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)
