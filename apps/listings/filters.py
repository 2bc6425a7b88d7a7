"""FilterSet definitions for listing search."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Listing


class ListingFilterSet(django_filters.FilterSet):
    """Public search filters: location, price bracket and capacity."""

    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    country = django_filters.CharFilter(field_name="country", lookup_expr="icontains")
    min_price = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="lte")
    # Listings that accommodate at least this many guests
    guests = django_filters.NumberFilter(field_name="max_guests", lookup_expr="gte")

    class Meta:
        model = Listing
        fields = ["city", "country", "min_price", "max_price", "guests"]
