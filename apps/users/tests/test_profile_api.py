"""Tests for the profile endpoints and the derived role."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cohosts.models import CohostPermission
from apps.listings.models import Listing
from apps.users.models import User


def make_listing(host: User, **overrides) -> Listing:
    data = {
        "title": "Loft",
        "description": "Bright loft",
        "address": "1 rue de Rivoli",
        "city": "Paris",
        "country": "France",
        "price_per_night": Decimal("100.00"),
        "max_guests": 4,
    }
    data.update(overrides)
    return Listing.objects.create(host=host, **data)


class ProfileAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="me@example.com",
            password="StrongPass123",
            first_name="Ada",
            last_name="Lovelace",
        )
        self.client.force_authenticate(self.user)

    def test_me_requires_authentication(self) -> None:
        self.client.force_authenticate(None)
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_update_names_but_not_role(self) -> None:
        response = self.client.patch(
            reverse("user-me"),
            {"first_name": "Grace", "role": "host", "is_host": True},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertEqual(self.user.first_name, "Grace")
        self.assertFalse(self.user.is_host)
        self.assertEqual(response.data["role"], "user")

    def test_become_host(self) -> None:
        response = self.client.post(reverse("user-become-host"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["role"], "host")
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_host)

    def test_search_is_for_hosts_only(self) -> None:
        User.objects.create_user(email="friend@example.com", password="StrongPass123")
        response = self.client.get(reverse("user-search"), {"q": "friend"})
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.user.become_host()
        response = self.client.get(reverse("user-search"), {"q": "friend"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["email"] for row in response.data], ["friend@example.com"])


class DerivedRoleTests(APITestCase):
    def setUp(self) -> None:
        self.host = User.objects.create_user(email="host@example.com", password="StrongPass123")
        self.other = User.objects.create_user(email="other@example.com", password="StrongPass123")

    def test_owning_a_listing_makes_a_host(self) -> None:
        self.assertEqual(self.host.role, User.Role.USER)
        make_listing(self.host)
        self.assertEqual(self.host.role, User.Role.HOST)

    def test_role_follows_cohost_grants(self) -> None:
        listing = make_listing(self.host)
        grant = CohostPermission.objects.create(listing=listing, host=self.host, cohost=self.other)
        self.assertEqual(self.other.role, User.Role.COHOST)

        grant.delete()
        self.assertEqual(self.other.role, User.Role.USER)

    def test_host_wins_over_cohost(self) -> None:
        listing = make_listing(self.host)
        CohostPermission.objects.create(listing=listing, host=self.host, cohost=self.other)
        self.other.become_host()
        self.assertEqual(self.other.role, User.Role.HOST)
