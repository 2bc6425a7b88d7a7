"""API tests for bookings."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.cohosts.models import CohostPermission
from apps.listings.models import Listing
from apps.users.models import User


class BookingAPITests(APITestCase):
    def setUp(self) -> None:
        self.host = User.objects.create_user(email="host@example.com", password="pass", is_host=True)
        self.guest = User.objects.create_user(email="guest@example.com", password="pass")
        self.cohost = User.objects.create_user(email="cohost@example.com", password="pass")
        self.listing = Listing.objects.create(
            host=self.host,
            title="Apartment",
            description="Central apartment",
            address="Canebiere",
            city="Marseille",
            country="France",
            price_per_night=Decimal("120.00"),
            max_guests=4,
        )
        self.grant = CohostPermission.objects.create(
            listing=self.listing, host=self.host, cohost=self.cohost
        )
        self.check_in = timezone.localdate() + timedelta(days=30)
        self.check_out = self.check_in + timedelta(days=3)

    def create_booking(self, user=None, **overrides):
        self.client.force_authenticate(user or self.guest)
        payload = {
            "listing_id": self.listing.id,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "guests": 2,
        }
        payload.update(overrides)
        return self.client.post(reverse("booking-list"), payload, format="json")

    def test_create_booking(self) -> None:
        response = self.create_booking()
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "pending")
        self.assertEqual(response.data["nights"], 3)
        self.assertEqual(response.data["total_price"], "360.00")
        self.assertEqual(response.data["listing_id"], self.listing.id)

    def test_create_requires_authentication(self) -> None:
        response = self.client.post(reverse("booking-list"), {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_conflict_returns_409(self) -> None:
        self.create_booking()
        other = User.objects.create_user(email="other@example.com", password="pass")
        response = self.create_booking(
            user=other,
            check_in=(self.check_in + timedelta(days=1)).isoformat(),
        )
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "DATE_CONFLICT")

    def test_validation_codes(self) -> None:
        yesterday = timezone.localdate() - timedelta(days=1)
        response = self.create_booking(check_in=yesterday.isoformat())
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "PAST_DATE")

        response = self.create_booking(check_out=self.check_in.isoformat())
        self.assertEqual(response.data["code"], "INVALID_RANGE")

        response = self.create_booking(guests=5)
        self.assertEqual(response.data["code"], "CAPACITY_EXCEEDED")

    def test_host_self_booking_is_forbidden(self) -> None:
        response = self.create_booking(user=self.host)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unknown_listing(self) -> None:
        response = self.create_booking(listing_id=999999)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_lists(self) -> None:
        booking_id = self.create_booking().data["id"]

        response = self.client.get(reverse("booking-my-bookings"))
        self.assertEqual([row["id"] for row in response.data["results"]], [booking_id])
        self.assertEqual(self.client.get(reverse("booking-list")).data["count"], 0)

        self.client.force_authenticate(self.host)
        self.assertEqual(self.client.get(reverse("booking-list")).data["count"], 1)

        self.client.force_authenticate(self.cohost)
        self.assertEqual(self.client.get(reverse("booking-list")).data["count"], 0)
        self.grant.can_manage_bookings = True
        self.grant.save()
        self.assertEqual(self.client.get(reverse("booking-list")).data["count"], 1)

    def test_retrieve_is_checked_by_resolver(self) -> None:
        booking_id = self.create_booking().data["id"]
        url = reverse("booking-detail", args=[booking_id])
        self.assertEqual(self.client.get(url).status_code, status.HTTP_200_OK)

        self.client.force_authenticate(self.cohost)
        self.assertEqual(self.client.get(url).status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(self.host)
        self.assertEqual(self.client.get(url).status_code, status.HTTP_200_OK)

    def test_cohost_confirms_with_flag(self) -> None:
        booking_id = self.create_booking().data["id"]
        url = reverse("booking-update-status", args=[booking_id])

        self.client.force_authenticate(self.cohost)
        response = self.client.patch(url, {"status": "confirmed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.grant.can_manage_bookings = True
        self.grant.save()
        response = self.client.patch(url, {"status": "confirmed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "confirmed")

    def test_invalid_transition(self) -> None:
        booking_id = self.create_booking().data["id"]
        self.client.force_authenticate(self.host)
        url = reverse("booking-update-status", args=[booking_id])
        self.client.patch(url, {"status": "cancelled"}, format="json")
        response = self.client.patch(url, {"status": "confirmed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "INVALID_TRANSITION")

    def test_delete_cancels_idempotently(self) -> None:
        booking_id = self.create_booking().data["id"]
        url = reverse("booking-detail", args=[booking_id])

        first = self.client.delete(url)
        self.assertEqual(first.status_code, status.HTTP_200_OK, first.data)
        self.assertEqual(first.data["status"], "cancelled")

        second = self.client.delete(url)
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertEqual(second.data["status"], "cancelled")
        self.assertEqual(Booking.objects.get(pk=booking_id).status, Booking.Status.CANCELLED)
