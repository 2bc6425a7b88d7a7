"""Tests for the co-host persistence queries."""

from __future__ import annotations

from decimal import Decimal

from django.test import TestCase

from apps.cohosts.models import CohostPermission
from apps.cohosts.services import (
    find_cohost_permission,
    find_cohost_permissions_for_host,
    find_cohost_permissions_for_user,
)
from apps.listings.models import Listing
from apps.users.models import User


def make_listing(host: User, title: str) -> Listing:
    return Listing.objects.create(
        host=host,
        title=title,
        description="Bright and quiet",
        address="1 rue de la Paix",
        city="Paris",
        country="France",
        price_per_night=Decimal("80.00"),
        max_guests=2,
    )


class CohostQueryTests(TestCase):
    def setUp(self) -> None:
        self.host = User.objects.create_user(email="host@example.com", password="pass", is_host=True)
        self.other_host = User.objects.create_user(
            email="other@example.com", password="pass", is_host=True
        )
        self.helper = User.objects.create_user(email="helper@example.com", password="pass")
        self.bystander = User.objects.create_user(email="bystander@example.com", password="pass")

        self.loft = make_listing(self.host, "Loft")
        self.studio = make_listing(self.host, "Studio")
        self.chalet = make_listing(self.other_host, "Chalet")

        CohostPermission.objects.create(
            listing=self.loft, host=self.host, cohost=self.helper, can_manage_bookings=True
        )
        CohostPermission.objects.create(listing=self.chalet, host=self.other_host, cohost=self.helper)
        CohostPermission.objects.create(listing=self.studio, host=self.host, cohost=self.bystander)

    def test_grants_held_by_a_cohost_span_hosts(self) -> None:
        grants = find_cohost_permissions_for_user(self.helper.pk)
        self.assertEqual({grant.listing.title for grant in grants}, {"Loft", "Chalet"})
        self.assertEqual({grant.host_id for grant in grants}, {self.host.pk, self.other_host.pk})

    def test_user_without_grants(self) -> None:
        self.assertEqual(find_cohost_permissions_for_user(self.host.pk), [])

    def test_grants_on_a_hosts_listings(self) -> None:
        grants = find_cohost_permissions_for_host(self.host.pk)
        self.assertEqual(
            {(grant.listing.title, grant.cohost.email) for grant in grants},
            {("Loft", "helper@example.com"), ("Studio", "bystander@example.com")},
        )

    def test_single_grant_lookup(self) -> None:
        grant = find_cohost_permission(self.loft.pk, self.helper.pk)
        self.assertIsNotNone(grant)
        self.assertTrue(grant.can_manage_bookings)
        self.assertIsNone(find_cohost_permission(self.studio.pk, self.helper.pk))
