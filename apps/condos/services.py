"""Domain services for the condo lifecycle."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from django.conf import settings  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore

from apps.users.access import Principal

from .exceptions import (
    CondoNotFoundError,
    DuplicateCondoError,
    FrontDeskUsernameTakenError,
    InvalidCondoStatusError,
)
from .models import Condo

logger = logging.getLogger(__name__)

User = get_user_model()

UPDATABLE_TEXT_FIELDS = ("name", "location", "description", "amenities", "image_url")
MAX_GUESTS_LIMIT = 20
MAX_PRICE_PER_NIGHT = Decimal("99999999.99")


def front_desk_email_for(username: str) -> str:
    """Front-desk logins are usernames; the account still needs an email."""
    if "@" in username:
        return username
    return f"{username}@{settings.FRONT_DESK_EMAIL_DOMAIN}"


def get_owned_condo(condo_id: int, principal: Principal, *, for_update: bool = False) -> Condo:
    """Condos the caller does not own read as missing."""
    queryset = Condo.objects.filter(pk=condo_id)
    if for_update:
        queryset = queryset.select_for_update()
    condo = queryset.first()
    if condo is None or not principal.is_owner_of(condo):
        raise CondoNotFoundError()
    return condo


class CondoProvisioningSaga:
    """
    Creates a condo together with its front-desk account.

    Each step commits on its own; when a later step fails the completed
    steps are compensated in reverse order and the failure is re-raised.
    """

    def __init__(self, owner, data: dict[str, Any], *, base_url: str):
        self.owner = owner
        self.data = dict(data)
        self.base_url = base_url
        self.front_desk = None
        self.condo: Condo | None = None
        self._compensations: list[Callable[[], None]] = []

    def execute(self) -> Condo:
        steps = (
            self._create_front_desk_account,
            self._create_condo,
            self._publish_booking_link,
        )
        for step in steps:
            try:
                step()
            except Exception:
                logger.warning(f"Condo provisioning failed at {step.__name__}, compensating")
                self._compensate()
                raise
        assert self.condo is not None
        return self.condo

    def _create_front_desk_account(self) -> None:
        username = self.data.pop("front_desk_username")
        password = self.data.pop("front_desk_password")
        try:
            with transaction.atomic():
                self.front_desk = User.objects.create_user(
                    username=username,
                    email=front_desk_email_for(username),
                    password=password,
                    full_name=f"Front Desk - {self.data['name']}",
                    role=User.Role.FRONTDESK,
                )
        except IntegrityError as exc:
            raise FrontDeskUsernameTakenError() from exc
        self._compensations.append(self._delete_front_desk_account)

    def _create_condo(self) -> None:
        try:
            with transaction.atomic():
                self.condo = Condo.objects.create(
                    owner=self.owner,
                    front_desk=self.front_desk,
                    **self.data,
                )
        except IntegrityError as exc:
            raise DuplicateCondoError() from exc
        self._compensations.append(self._delete_condo)

    def _publish_booking_link(self) -> None:
        assert self.condo is not None
        self.condo.booking_link = self.condo.build_booking_link(self.base_url)
        self.condo.save(update_fields=["booking_link"])

    def _delete_condo(self) -> None:
        if self.condo is not None and self.condo.pk:
            Condo.objects.filter(pk=self.condo.pk).delete()

    def _delete_front_desk_account(self) -> None:
        if self.front_desk is not None and self.front_desk.pk:
            User.objects.filter(pk=self.front_desk.pk).delete()

    def _compensate(self) -> None:
        while self._compensations:
            compensation = self._compensations.pop()
            try:
                compensation()
            except Exception as e:
                logger.error(f"Compensation {compensation.__name__} failed: {e}", exc_info=True)


def create_condo(owner, data: dict[str, Any], *, base_url: str) -> Condo:
    if Condo.objects.filter(name=data["name"], location=data["location"]).exists():
        raise DuplicateCondoError()
    if User.objects.filter(username=data["front_desk_username"]).exists():
        raise FrontDeskUsernameTakenError()
    if User.objects.filter(email__iexact=front_desk_email_for(data["front_desk_username"])).exists():
        raise FrontDeskUsernameTakenError()

    condo = CondoProvisioningSaga(owner, data, base_url=base_url).execute()
    logger.info(
        f"Condo {condo.pk} '{condo.name}' created by owner {owner.pk} "
        f"with front desk {condo.front_desk_id}"
    )
    return condo


def _clean_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _clean_max_guests(value: Any) -> int | None:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if 0 < number <= MAX_GUESTS_LIMIT else None


def _clean_price(value: Any) -> Decimal | None:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not price.is_finite() or price < 0 or price > MAX_PRICE_PER_NIGHT:
        return None
    return price.quantize(Decimal("0.01"))


@transaction.atomic
def update_condo(condo_id: int, principal: Principal, changes: dict[str, Any], *, base_url: str) -> Condo:
    """
    Partial update: a field is only overwritten when it is supplied and
    passes its own check. Status is not changed here.
    """
    condo = get_owned_condo(condo_id, principal, for_update=True)

    for field in UPDATABLE_TEXT_FIELDS:
        value = _clean_text(changes.get(field))
        if value is not None:
            setattr(condo, field, value)

    max_guests = _clean_max_guests(changes.get("max_guests"))
    if max_guests is not None:
        condo.max_guests = max_guests

    price = _clean_price(changes.get("price_per_night"))
    if price is not None:
        condo.price_per_night = price

    if not condo.booking_link:
        condo.booking_link = condo.build_booking_link(base_url)

    condo.touch()
    try:
        with transaction.atomic():
            condo.save()
    except IntegrityError as exc:
        raise DuplicateCondoError() from exc

    logger.info(f"Condo {condo.pk} updated by owner {principal.user_id}")
    return condo


@transaction.atomic
def update_condo_status(condo_id: int, principal: Principal, status: str) -> Condo:
    condo = get_owned_condo(condo_id, principal, for_update=True)
    if status not in Condo.OWNER_SETTABLE_STATUSES:
        raise InvalidCondoStatusError()

    previous = condo.status
    condo.set_status(status)
    condo.save(update_fields=["status", "last_updated"])
    logger.info(f"Condo {condo.pk} status {previous} -> {status} by owner {principal.user_id}")
    return condo


@transaction.atomic
def delete_condo(condo_id: int, principal: Principal) -> None:
    """Removes the condo, its bookings and its front-desk account; the owner stays."""
    condo = get_owned_condo(condo_id, principal, for_update=True)
    front_desk_id = condo.front_desk_id

    condo.delete()
    User.objects.filter(pk=front_desk_id, role=User.Role.FRONTDESK).delete()
    logger.info(f"Condo {condo_id} and front desk {front_desk_id} deleted by owner {principal.user_id}")
