"""API tests for authentication endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.condos.models import Condo
from apps.users.access import Principal
from apps.users.models import User


class AuthAPITests(APITestCase):
    def _register_payload(self, **overrides) -> dict[str, str]:
        payload = {
            "username": "olivia",
            "email": "olivia@example.com",
            "password": "StrongPass123",
            "full_name": "Olivia Owner",
        }
        payload.update(overrides)
        return payload

    def test_register_owner_returns_tokens_with_owner_role(self) -> None:
        response = self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("tokens", response.data)
        self.assertEqual(response.data["user"]["roles"], [User.Role.OWNER])
        user = User.objects.get(username="olivia")
        self.assertTrue(user.is_owner())

        claims = AccessToken(response.data["tokens"]["access"])
        self.assertEqual(claims["roles"], [User.Role.OWNER])
        self.assertEqual(claims["email"], "olivia@example.com")

    def test_register_guest_assigns_guest_role(self) -> None:
        payload = self._register_payload(username="gary", email="gary@example.com")

        response = self.client.post(reverse("auth:register-guest"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(User.objects.get(username="gary").is_guest())

    def test_register_rejects_duplicate_email(self) -> None:
        User.objects.create_user(username="taken", email="olivia@example.com", password="Secret123")

        response = self.client.post(reverse("auth:register"), self._register_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", response.data)

    def test_register_rejects_short_password(self) -> None:
        response = self.client.post(
            reverse("auth:register"),
            self._register_payload(password="123"),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data)

    def test_login_accepts_username_or_email(self) -> None:
        User.objects.create_user(
            username="desk1",
            email="desk1@condosystem.local",
            password="DeskPass1",
            role=User.Role.FRONTDESK,
        )
        url = reverse("auth:login")

        by_username = self.client.post(url, {"login": "desk1", "password": "DeskPass1"}, format="json")
        by_email = self.client.post(url, {"login": "DESK1@condosystem.local", "password": "DeskPass1"}, format="json")

        self.assertEqual(by_username.status_code, status.HTTP_200_OK, by_username.data)
        self.assertEqual(by_email.status_code, status.HTTP_200_OK, by_email.data)
        self.assertEqual(AccessToken(by_username.data["token"])["roles"], [User.Role.FRONTDESK])
        self.assertEqual(by_email.data["user"]["username"], "desk1")

    def test_login_with_wrong_password_is_unauthorized(self) -> None:
        User.objects.create_user(username="olivia", email="olivia@example.com", password="StrongPass123")

        response = self.client.post(
            reverse("auth:login"),
            {"login": "olivia", "password": "wrong-password"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_bearer_token_claims_drive_principal(self) -> None:
        User.objects.create_user(
            username="olivia",
            email="olivia@example.com",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        login = self.client.post(
            reverse("auth:login"),
            {"login": "olivia", "password": "StrongPass123"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['token']}")

        response = self.client.get(reverse("condo-owner"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, [])

    def test_guest_token_cannot_reach_owner_endpoints(self) -> None:
        guest = User.objects.create_user(username="gary", email="gary@example.com", password="StrongPass123")
        self.client.force_authenticate(guest)

        response = self.client.get(reverse("booking-pending"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PrincipalTests(APITestCase):
    def test_anonymous_principal_has_no_capabilities(self) -> None:
        principal = Principal.anonymous()

        self.assertFalse(principal.is_authenticated)
        self.assertFalse(principal.is_owner)
        self.assertFalse(principal.is_front_desk)

    def test_principal_for_user_uses_stored_role(self) -> None:
        owner = User.objects.create_user(
            username="olivia",
            email="olivia@example.com",
            password="StrongPass123",
            role=User.Role.OWNER,
        )

        principal = Principal.for_user(owner)

        self.assertTrue(principal.is_owner)
        self.assertFalse(principal.is_front_desk)
        self.assertEqual(principal.user_id, owner.pk)

    def test_condo_predicates_match_owner_and_front_desk(self) -> None:
        owner = User.objects.create_user(
            username="olivia",
            email="olivia@example.com",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        other_owner = User.objects.create_user(
            username="mallory",
            email="mallory@example.com",
            password="StrongPass123",
            role=User.Role.OWNER,
        )
        front_desk = User.objects.create_user(
            username="sunset-desk",
            email="sunset-desk@condosystem.local",
            password="DeskPass123",
            role=User.Role.FRONTDESK,
        )
        condo = Condo.objects.create(
            owner=owner,
            front_desk=front_desk,
            name="Sunset Villa",
            location="Makati",
            max_guests=4,
            price_per_night=Decimal("100.00"),
        )

        self.assertTrue(Principal.for_user(owner).is_owner_of(condo))
        self.assertFalse(Principal.for_user(other_owner).is_owner_of(condo))
        self.assertFalse(Principal.for_user(owner).is_front_desk_of(condo))
        self.assertTrue(Principal.for_user(front_desk).is_front_desk_of(condo))
        self.assertFalse(Principal.anonymous().is_owner_of(condo))
