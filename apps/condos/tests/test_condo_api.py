"""Integration tests for condo lifecycle endpoints."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.db import IntegrityError
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.condos.exceptions import DuplicateCondoError
from apps.condos.models import Condo
from apps.condos.services import CondoProvisioningSaga, create_condo
from apps.users.models import User


def make_owner(username: str = "olivia") -> User:
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="OwnerPass123",
        role=User.Role.OWNER,
    )


def make_condo(owner: User, name: str = "Sunset Villa", **extra) -> Condo:
    front_desk = User.objects.create_user(
        username=f"desk-{name.lower().replace(' ', '-')}",
        email=f"desk-{name.lower().replace(' ', '-')}@condosystem.local",
        password="DeskPass123",
        role=User.Role.FRONTDESK,
    )
    defaults = {"location": "Makati", "max_guests": 4, "price_per_night": Decimal("100.00")}
    defaults.update(extra)
    return Condo.objects.create(owner=owner, front_desk=front_desk, name=name, **defaults)


class CondoCreateAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_owner()
        self.client.force_authenticate(self.owner)
        self.url = reverse("condo-create")

    def _payload(self, **overrides) -> dict:
        payload = {
            "name": "Sunset Villa",
            "location": "Makati",
            "description": "Two bedrooms facing the bay.",
            "amenities": "Pool, Gym",
            "max_guests": 4,
            "price_per_night": "2500.00",
            "front_desk_username": "sunset-desk",
            "front_desk_password": "desk123",
        }
        payload.update(overrides)
        return payload

    def test_owner_creates_condo_with_front_desk_and_booking_link(self) -> None:
        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        condo = Condo.objects.get(name="Sunset Villa")
        self.assertEqual(condo.owner, self.owner)
        self.assertEqual(condo.booking_link, f"https://condos.example.com/booking.html?condoId={condo.pk}")
        self.assertEqual(response.data["condo"]["booking_link"], condo.booking_link)

        front_desk = condo.front_desk
        self.assertEqual(front_desk.username, "sunset-desk")
        self.assertEqual(front_desk.email, "sunset-desk@condosystem.local")
        self.assertEqual(front_desk.full_name, "Front Desk - Sunset Villa")
        self.assertTrue(front_desk.is_front_desk())
        self.assertTrue(front_desk.check_password("desk123"))

    def test_front_desk_username_with_at_sign_is_used_as_email(self) -> None:
        response = self.client.post(self.url, self._payload(front_desk_username="desk@sunset.ph"), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(Condo.objects.get().front_desk.email, "desk@sunset.ph")

    def test_duplicate_name_and_location_is_rejected(self) -> None:
        make_condo(self.owner, name="Sunset Villa")

        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "DuplicateCondo")
        self.assertFalse(User.objects.filter(username="sunset-desk").exists())

    def test_taken_front_desk_username_is_rejected(self) -> None:
        User.objects.create_user(username="sunset-desk", email="someone@example.com", password="Secret123")

        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "FrontDeskUsernameTaken")
        self.assertFalse(Condo.objects.exists())

    def test_payload_limits_are_validated(self) -> None:
        response = self.client.post(
            self.url,
            self._payload(max_guests=21, price_per_night="-1", front_desk_password="123"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("max_guests", "price_per_night", "front_desk_password"):
            self.assertIn(field, response.data)

    def test_guest_cannot_create_condo(self) -> None:
        guest = User.objects.create_user(username="gary", email="gary@example.com", password="GuestPass1")
        self.client.force_authenticate(guest)

        response = self.client.post(self.url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class CondoProvisioningSagaTests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_owner()
        self.data = {
            "name": "Harbor Loft",
            "location": "Cebu",
            "max_guests": 2,
            "price_per_night": Decimal("80.00"),
            "front_desk_username": "harbor-desk",
            "front_desk_password": "desk123",
        }

    def test_failed_link_step_removes_condo_and_account(self) -> None:
        def _publish_fails(saga) -> None:
            raise RuntimeError("link storage unavailable")

        with mock.patch.object(CondoProvisioningSaga, "_publish_booking_link", _publish_fails):
            with self.assertRaises(RuntimeError):
                create_condo(self.owner, self.data, base_url="https://condos.example.com")

        self.assertFalse(Condo.objects.exists())
        self.assertFalse(User.objects.filter(username="harbor-desk").exists())
        self.assertTrue(User.objects.filter(pk=self.owner.pk).exists())

    def test_failed_condo_insert_removes_front_desk_account(self) -> None:
        with mock.patch.object(Condo.objects, "create", side_effect=IntegrityError("duplicate")):
            with self.assertRaises(DuplicateCondoError):
                create_condo(self.owner, self.data, base_url="https://condos.example.com")

        self.assertFalse(User.objects.filter(username="harbor-desk").exists())


class CondoManagementAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_owner()
        self.condo = make_condo(self.owner)
        self.client.force_authenticate(self.owner)
        self.detail_url = reverse("condo-detail", args=[self.condo.pk])

    def test_update_applies_only_valid_fields(self) -> None:
        payload = {
            "name": "",
            "description": "Renovated in 2024.",
            "max_guests": 0,
            "price_per_night": -5,
            "location": "BGC",
        }

        response = self.client.put(self.detail_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.condo.refresh_from_db()
        self.assertEqual(self.condo.name, "Sunset Villa")
        self.assertEqual(self.condo.location, "BGC")
        self.assertEqual(self.condo.description, "Renovated in 2024.")
        self.assertEqual(self.condo.max_guests, 4)
        self.assertEqual(self.condo.price_per_night, Decimal("100.00"))
        self.assertIsNotNone(self.condo.last_updated)
        self.assertIn(f"condoId={self.condo.pk}", self.condo.booking_link)

    def test_update_applies_numeric_fields(self) -> None:
        response = self.client.put(self.detail_url, {"max_guests": 6, "price_per_night": "150.50"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.condo.refresh_from_db()
        self.assertEqual(self.condo.max_guests, 6)
        self.assertEqual(self.condo.price_per_night, Decimal("150.50"))

    def test_other_owner_sees_not_found(self) -> None:
        self.client.force_authenticate(make_owner("mallory"))

        update = self.client.put(self.detail_url, {"name": "Mine now"}, format="json")
        delete = self.client.delete(self.detail_url)

        self.assertEqual(update.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(delete.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(Condo.objects.filter(pk=self.condo.pk).exists())

    def test_non_numeric_condo_id_is_not_found(self) -> None:
        delete = self.client.delete("/api/v1/condos/abc/")
        change_status = self.client.patch("/api/v1/condos/abc/status/", {"status": "Maintenance"}, format="json")

        self.assertEqual(delete.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(change_status.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(Condo.objects.filter(pk=self.condo.pk).exists())

    def test_status_change_is_limited_to_owner_settable_values(self) -> None:
        url = reverse("condo-status", args=[self.condo.pk])

        occupied = self.client.patch(url, {"status": "Occupied"}, format="json")
        maintenance = self.client.patch(url, {"status": "Maintenance"}, format="json")

        self.assertEqual(occupied.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(maintenance.status_code, status.HTTP_200_OK, maintenance.data)
        self.assertEqual(maintenance.data["status"], "Maintenance")
        self.condo.refresh_from_db()
        self.assertEqual(self.condo.status, Condo.Status.MAINTENANCE)

    def test_delete_removes_condo_bookings_and_front_desk_but_not_owner(self) -> None:
        front_desk_id = self.condo.front_desk_id
        start = timezone.now() + timedelta(days=3)
        Booking.objects.create(
            condo=self.condo,
            full_name="Gina Guest",
            email="gina@example.com",
            contact="+639170000000",
            guest_count=2,
            start_datetime=start,
            end_datetime=start + timedelta(days=2),
        )

        response = self.client.delete(self.detail_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(Condo.objects.filter(pk=self.condo.pk).exists())
        self.assertFalse(Booking.objects.exists())
        self.assertFalse(User.objects.filter(pk=front_desk_id).exists())
        self.assertTrue(User.objects.filter(pk=self.owner.pk).exists())

    def test_owner_listing_includes_counters_and_front_desk_contact(self) -> None:
        start = timezone.now() + timedelta(days=1)
        for offset, booking_status in enumerate(
            [Booking.Status.PENDING_APPROVAL, Booking.Status.APPROVED, Booking.Status.REJECTED]
        ):
            Booking.objects.create(
                condo=self.condo,
                full_name=f"Guest {offset}",
                email=f"guest{offset}@example.com",
                contact="+639170000000",
                guest_count=1,
                start_datetime=start + timedelta(days=offset * 3),
                end_datetime=start + timedelta(days=offset * 3 + 1),
                status=booking_status,
            )
        make_condo(make_owner("mallory"), name="Elsewhere")

        response = self.client.get(reverse("condo-owner"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(len(response.data), 1)
        row = response.data[0]
        self.assertEqual(row["total_bookings"], 3)
        self.assertEqual(row["pending_bookings"], 1)
        self.assertEqual(row["active_bookings"], 1)
        self.assertEqual(row["front_desk"]["email"], self.condo.front_desk.email)


class CondoReadAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = make_owner()
        self.condo = make_condo(self.owner)

    def test_public_condo_is_anonymous(self) -> None:
        response = self.client.get(reverse("condo-public", kwargs={"condo_id": self.condo.pk}))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["name"], "Sunset Villa")
        self.assertNotIn("bookings", response.data)

    def test_public_condo_missing_is_not_found(self) -> None:
        response = self.client.get(reverse("condo-public", kwargs={"condo_id": 9999}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_front_desk_sees_its_condo_with_today_counters(self) -> None:
        now = timezone.now()
        Booking.objects.create(
            condo=self.condo,
            full_name="Arriving Today",
            email="arrive@example.com",
            contact="+639170000000",
            guest_count=2,
            start_datetime=now - timedelta(hours=1),
            end_datetime=now + timedelta(days=2),
            status=Booking.Status.APPROVED,
        )
        self.client.force_authenticate(self.condo.front_desk)

        response = self.client.get(reverse("condo-frontdesk"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["id"], self.condo.pk)
        self.assertEqual(response.data["owner"]["email"], self.owner.email)
        self.assertEqual(response.data["today_bookings"], 1)
        self.assertEqual(response.data["pending_check_ins"], 1)
        self.assertEqual(response.data["active_guests"], 0)

    def test_front_desk_without_condo_gets_not_found(self) -> None:
        orphan = User.objects.create_user(
            username="orphan-desk",
            email="orphan@condosystem.local",
            password="DeskPass123",
            role=User.Role.FRONTDESK,
        )
        self.client.force_authenticate(orphan)

        response = self.client.get(reverse("condo-frontdesk"))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
