"""API tests for dashboard endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.condos.models import Condo
from apps.users.models import User

UTC = dt_timezone.utc


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=UTC)


class DashboardAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            username="olivia",
            email="olivia@example.com",
            password="OwnerPass123",
            role=User.Role.OWNER,
        )
        self.condo = self._condo("Sunset Villa", Decimal("100.00"))
        self.other_condo = self._condo("Harbor Loft", Decimal("80.00"))

    def _condo(self, name: str, price: Decimal, owner: User | None = None) -> Condo:
        owner = owner or self.owner
        front_desk = User.objects.create_user(
            username=f"{name.lower().replace(' ', '-')}-desk",
            email=f"{name.lower().replace(' ', '-')}@condosystem.local",
            password="DeskPass123",
            role=User.Role.FRONTDESK,
        )
        return Condo.objects.create(
            owner=owner,
            front_desk=front_desk,
            name=name,
            location="Makati",
            max_guests=4,
            price_per_night=price,
        )

    def _booking(self, condo: Condo, start: datetime, end: datetime, booking_status: str, **extra) -> Booking:
        return Booking.objects.create(
            condo=condo,
            full_name="Gina Guest",
            email="gina@example.com",
            contact="+639170000000",
            guest_count=2,
            start_datetime=start,
            end_datetime=end,
            status=booking_status,
            **extra,
        )

    def test_owner_dashboard_revenue_counts_whole_days_of_checked_out_stays(self) -> None:
        # 2 days 21 hours is two whole days.
        self._booking(self.condo, utc(2030, 1, 10, 14), utc(2030, 1, 13, 11), Booking.Status.CHECKED_OUT)
        self._booking(self.condo, utc(2030, 2, 1, 12), utc(2030, 2, 4, 12), Booking.Status.CHECKED_OUT)
        self._booking(self.condo, utc(2030, 3, 1, 12), utc(2030, 3, 9, 12), Booking.Status.APPROVED)
        self._booking(self.condo, utc(2030, 4, 1, 12), utc(2030, 4, 2, 12), Booking.Status.PENDING_APPROVAL)
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("dashboard:owner"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        rows = {row["condo"]["id"]: row for row in response.data}
        sunset = rows[self.condo.pk]
        self.assertEqual(Decimal(sunset["revenue"]), Decimal("500.00"))
        self.assertEqual(sunset["total_bookings"], 4)
        self.assertEqual(sunset["pending_bookings"], 1)
        self.assertEqual(sunset["active_bookings"], 1)
        self.assertEqual(len(sunset["bookings"]), 4)
        self.assertEqual(Decimal(rows[self.other_condo.pk]["revenue"]), Decimal("0.00"))

    def test_owner_stats(self) -> None:
        now = timezone.now()
        self._booking(
            self.condo,
            now - timedelta(days=5),
            now - timedelta(days=2),
            Booking.Status.CHECKED_OUT,
            checked_out_at=now - timedelta(days=2),
        )
        self._booking(
            self.condo,
            now - timedelta(days=90),
            now - timedelta(days=80),
            Booking.Status.CHECKED_OUT,
            checked_out_at=now - timedelta(days=80),
        )
        self._booking(self.other_condo, now + timedelta(days=1), now + timedelta(days=2), Booking.Status.APPROVED)
        self.other_condo.set_status(Condo.Status.OCCUPIED)
        self.other_condo.save()
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("dashboard:owner-stats"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_condos"], 2)
        self.assertEqual(response.data["total_bookings"], 3)
        self.assertEqual(Decimal(response.data["monthly_revenue"]), Decimal("300.00"))
        self.assertEqual(response.data["occupancy_rate"], 50.0)
        breakdown = {row["status"]: row["count"] for row in response.data["status_breakdown"]}
        self.assertEqual(breakdown, {"CheckedOut": 2, "Approved": 1})

    def test_owner_stats_with_no_condos_has_zero_occupancy(self) -> None:
        lonely = User.objects.create_user(
            username="nora",
            email="nora@example.com",
            password="OwnerPass123",
            role=User.Role.OWNER,
        )
        self.client.force_authenticate(lonely)

        response = self.client.get(reverse("dashboard:owner-stats"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["total_condos"], 0)
        self.assertEqual(response.data["occupancy_rate"], 0)

    def test_front_desk_dashboard(self) -> None:
        now = timezone.now()
        self._booking(self.condo, now - timedelta(hours=1), now + timedelta(days=1), Booking.Status.APPROVED)
        self._booking(self.condo, now - timedelta(days=1), now + timedelta(days=3), Booking.Status.CHECKED_IN)
        self._booking(self.condo, now + timedelta(days=10), now + timedelta(days=12), Booking.Status.PENDING_APPROVAL)
        old = self._booking(self.condo, utc(2020, 1, 1, 12), utc(2020, 1, 2, 12), Booking.Status.CHECKED_OUT)
        Booking.objects.filter(pk=old.pk).update(created_at=now - timedelta(days=30))
        self.client.force_authenticate(self.condo.front_desk)

        response = self.client.get(reverse("dashboard:frontdesk"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["condo"]["id"], self.condo.pk)
        self.assertEqual(response.data["today_bookings"], 2)
        self.assertEqual(response.data["pending_check_ins"], 1)
        self.assertEqual(response.data["active_guests"], 1)
        self.assertEqual(len(response.data["recent_bookings"]), 3)
        self.assertNotIn(old.pk, [row["id"] for row in response.data["recent_bookings"]])

    def test_front_desk_dashboard_is_front_desk_only(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("dashboard:frontdesk"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class AvailabilityAPITests(APITestCase):
    def setUp(self) -> None:
        owner = User.objects.create_user(
            username="olivia",
            email="olivia@example.com",
            password="OwnerPass123",
            role=User.Role.OWNER,
        )
        front_desk = User.objects.create_user(
            username="sunset-desk",
            email="sunset-desk@condosystem.local",
            password="DeskPass123",
            role=User.Role.FRONTDESK,
        )
        self.condo = Condo.objects.create(
            owner=owner,
            front_desk=front_desk,
            name="Sunset Villa",
            location="Makati",
            max_guests=4,
            price_per_night=Decimal("100.00"),
        )
        Booking.objects.create(
            condo=self.condo,
            full_name="Gina Guest",
            email="gina@example.com",
            contact="+639170000000",
            guest_count=2,
            start_datetime=utc(2030, 1, 10, 14),
            end_datetime=utc(2030, 1, 12, 11),
            status=Booking.Status.APPROVED,
        )
        self.url = reverse("dashboard:availability", kwargs={"condo_id": self.condo.pk})

    def test_free_range_lists_every_calendar_date(self) -> None:
        response = self.client.get(
            self.url,
            {"startDate": "2030-01-12T11:00:00Z", "endDate": "2030-01-14T11:00:00Z"},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["is_available"])
        self.assertEqual(response.data["available_dates"], ["2030-01-12", "2030-01-13", "2030-01-14"])
        self.assertEqual(response.data["conflicting_bookings"], [])
        self.assertEqual(response.data["max_guests"], 4)

    def test_overlapping_range_reports_conflicts(self) -> None:
        response = self.client.get(self.url, {"startDate": "2030-01-11", "endDate": "2030-01-13"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertFalse(response.data["is_available"])
        self.assertEqual(response.data["available_dates"], [])
        self.assertEqual(len(response.data["conflicting_bookings"]), 1)
        self.assertEqual(response.data["conflicting_bookings"][0]["status"], "Approved")

    def test_reversed_or_missing_dates_are_rejected(self) -> None:
        reversed_range = self.client.get(self.url, {"startDate": "2030-01-13", "endDate": "2030-01-11"})
        missing = self.client.get(self.url)

        self.assertEqual(reversed_range.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(missing.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_condo_is_not_found(self) -> None:
        response = self.client.get(
            reverse("dashboard:availability", kwargs={"condo_id": 9999}),
            {"startDate": "2030-01-11", "endDate": "2030-01-13"},
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
