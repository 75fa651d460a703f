"""Per-request capability object.

The principal is resolved once per request from the validated JWT claims
(falling back to the stored role when a request was authenticated some
other way) and answers the only two authorization questions the booking
domain asks: does the caller own this condo, and is the caller its front
desk.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import CustomUser

_PRINCIPAL_ATTR = "_condosystem_principal"


@dataclass(frozen=True)
class Principal:
    user_id: int | None
    roles: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls(user_id=None)

    @classmethod
    def for_user(cls, user) -> "Principal":
        if user is None or not user.is_authenticated:
            return cls.anonymous()
        return cls(user_id=user.pk, roles=frozenset(user.roles))

    @classmethod
    def from_request(cls, request) -> "Principal":
        cached = getattr(request, _PRINCIPAL_ATTR, None)
        if cached is not None:
            return cached

        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            principal = cls.anonymous()
        else:
            token = getattr(request, "auth", None)
            claimed = token.get("roles") if hasattr(token, "get") else None
            if claimed:
                principal = cls(user_id=user.pk, roles=frozenset(claimed))
            else:
                principal = cls.for_user(user)

        setattr(request, _PRINCIPAL_ATTR, principal)
        return principal

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_owner(self) -> bool:
        return self.is_authenticated and CustomUser.Role.OWNER in self.roles

    @property
    def is_front_desk(self) -> bool:
        return self.is_authenticated and CustomUser.Role.FRONTDESK in self.roles

    def is_owner_of(self, condo) -> bool:
        return self.is_owner and condo.owner_id == self.user_id

    def is_front_desk_of(self, condo) -> bool:
        return self.is_front_desk and condo.front_desk_id == self.user_id
