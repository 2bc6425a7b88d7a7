"""Tests for listing search, details and management."""

from __future__ import annotations

from decimal import Decimal

from django.core.cache import cache
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.cohosts.models import CohostPermission
from apps.listings.models import Listing
from apps.users.models import User


class ListingAPITests(APITestCase):
    def setUp(self) -> None:
        cache.clear()
        self.host = User.objects.create_user(email="host@example.com", password="pass", is_host=True)
        self.cohost = User.objects.create_user(email="cohost@example.com", password="pass")
        self.guest = User.objects.create_user(email="guest@example.com", password="pass")
        self.listing = Listing.objects.create(
            host=self.host,
            title="Seaside villa",
            description="Sea view",
            address="Promenade des Anglais",
            city="Nice",
            country="France",
            price_per_night=Decimal("250.00"),
            max_guests=6,
        )
        Listing.objects.create(
            host=self.host,
            title="Studio",
            description="Small studio",
            address="Rue de la Paix",
            city="Paris",
            country="France",
            price_per_night=Decimal("90.00"),
            max_guests=2,
        )
        self.grant = CohostPermission.objects.create(
            listing=self.listing, host=self.host, cohost=self.cohost
        )

    def payload(self, **overrides) -> dict:
        data = {
            "title": "New place",
            "description": "Freshly listed",
            "address": "1 quai",
            "city": "Bordeaux",
            "country": "France",
            "price_per_night": "120.00",
            "max_guests": 3,
        }
        data.update(overrides)
        return data

    def test_public_list_with_filters(self) -> None:
        response = self.client.get(reverse("listing-list"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["count"], 2)

        response = self.client.get(reverse("listing-list"), {"city": "nic"})
        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["results"][0]["title"], "Seaside villa")

        response = self.client.get(reverse("listing-list"), {"max_price": "100", "guests": 2})
        self.assertEqual([row["title"] for row in response.data["results"]], ["Studio"])

        response = self.client.get(reverse("listing-list"), {"guests": 5})
        self.assertEqual(response.data["count"], 1)

    def test_pagination(self) -> None:
        response = self.client.get(reverse("listing-list"), {"limit": 1})
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(len(response.data["results"]), 1)
        self.assertIsNotNone(response.data["next"])

    def test_public_detail(self) -> None:
        response = self.client.get(reverse("listing-detail", args=[self.listing.id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["price_per_night"], "250.00")
        self.assertEqual(response.data["currency"], "EUR")
        self.assertEqual(response.data["host"]["id"], self.host.id)

    def test_missing_detail(self) -> None:
        response = self.client.get(reverse("listing-detail", args=[999999]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_create_requires_host_or_cohost_role(self) -> None:
        response = self.client.post(reverse("listing-list"), self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(self.guest)
        response = self.client.post(reverse("listing-list"), self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.cohost)
        response = self.client.post(reverse("listing-list"), self.payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["host"]["id"], self.cohost.id)
        self.assertEqual(self.cohost.role, User.Role.HOST)

    def test_create_validates_input(self) -> None:
        self.client.force_authenticate(self.host)
        response = self.client.post(
            reverse("listing-list"), self.payload(max_guests=0), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("max_guests", response.data)

        response = self.client.post(
            reverse("listing-list"), self.payload(currency="XXX"), format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("currency", response.data)

    def test_cohost_edit_requires_flag(self) -> None:
        url = reverse("listing-detail", args=[self.listing.id])
        self.client.force_authenticate(self.cohost)
        response = self.client.patch(url, {"title": "Renamed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.grant.can_edit_listing = True
        self.grant.save()
        response = self.client.patch(url, {"title": "Renamed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["title"], "Renamed")

    def test_only_host_deletes(self) -> None:
        url = reverse("listing-detail", args=[self.listing.id])
        self.grant.can_edit_listing = True
        self.grant.save()

        self.client.force_authenticate(self.cohost)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.host)
        self.assertEqual(self.client.delete(url).status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Listing.objects.filter(pk=self.listing.pk).exists())

    def test_my_listings(self) -> None:
        self.client.force_authenticate(self.host)
        response = self.client.get(reverse("listing-my-listings"))
        self.assertEqual(response.data["count"], 2)

        self.client.force_authenticate(self.cohost)
        response = self.client.get(reverse("listing-my-listings"))
        self.assertEqual([row["id"] for row in response.data["results"]], [self.listing.id])

        self.client.force_authenticate(self.guest)
        response = self.client.get(reverse("listing-my-listings"))
        self.assertEqual(response.data["count"], 0)
