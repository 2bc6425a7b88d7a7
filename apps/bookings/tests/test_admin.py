"""Tests for the administrative completion of bookings."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from apps.bookings.models import Booking
from apps.listings.models import Listing
from apps.users.models import User


class CompleteBookingAdminActionTests(TestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_superuser(email="admin@example.com", password="pass")
        host = User.objects.create_user(email="host@example.com", password="pass", is_host=True)
        guest = User.objects.create_user(email="guest@example.com", password="pass")
        listing = Listing.objects.create(
            host=host,
            title="Mill",
            description="Old mill",
            address="Rue du moulin",
            city="Rouen",
            country="France",
            price_per_night=Decimal("60.00"),
            max_guests=2,
        )
        check_in = timezone.localdate() + timedelta(days=3)
        self.confirmed = Booking.objects.create(
            listing=listing,
            guest=guest,
            check_in=check_in,
            check_out=check_in + timedelta(days=1),
            total_price=Decimal("60.00"),
            currency="EUR",
            status=Booking.Status.CONFIRMED,
        )
        self.cancelled = Booking.objects.create(
            listing=listing,
            guest=guest,
            check_in=check_in + timedelta(days=5),
            check_out=check_in + timedelta(days=6),
            total_price=Decimal("60.00"),
            currency="EUR",
            status=Booking.Status.CANCELLED,
        )
        self.client.force_login(self.admin)

    def test_mark_completed_skips_terminal_bookings(self) -> None:
        response = self.client.post(
            reverse("admin:bookings_booking_changelist"),
            {
                "action": "mark_completed",
                "_selected_action": [self.confirmed.pk, self.cancelled.pk],
            },
            follow=True,
        )
        self.assertEqual(response.status_code, 200)
        self.confirmed.refresh_from_db()
        self.cancelled.refresh_from_db()
        self.assertEqual(self.confirmed.status, Booking.Status.COMPLETED)
        self.assertEqual(self.cancelled.status, Booking.Status.CANCELLED)

    def test_change_form_cannot_move_dates(self) -> None:
        url = reverse("admin:bookings_booking_change", args=[self.confirmed.pk])
        original = (self.confirmed.check_in, self.confirmed.check_out, self.confirmed.total_price)
        self.client.post(
            url,
            {
                "listing": self.confirmed.listing_id,
                "guest": self.confirmed.guest_id,
                "check_in": self.cancelled.check_in.isoformat(),
                "check_out": (self.cancelled.check_out + timedelta(days=4)).isoformat(),
                "guests": 2,
                "total_price": "1.00",
                "status": Booking.Status.PENDING,
            },
        )
        self.confirmed.refresh_from_db()
        self.assertEqual(
            (self.confirmed.check_in, self.confirmed.check_out, self.confirmed.total_price),
            original,
        )
        self.assertEqual(self.confirmed.status, Booking.Status.CONFIRMED)

    def test_bookings_cannot_be_added_from_admin(self) -> None:
        url = reverse("admin:bookings_booking_add")
        self.assertEqual(self.client.get(url).status_code, 403)
        self.assertEqual(self.client.post(url, {}).status_code, 403)
        self.assertEqual(Booking.objects.count(), 2)
