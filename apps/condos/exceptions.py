"""Condo lifecycle errors."""

from __future__ import annotations

from shared.domain.exceptions import ConflictError, InvalidInputError, NotFoundError


class CondoNotFoundError(NotFoundError):
    code = "CondoNotFound"
    default_message = "Condo not found or you don't have permission to access it."


class DuplicateCondoError(ConflictError):
    code = "DuplicateCondo"
    default_message = "Condo already exists at this location."


class FrontDeskUsernameTakenError(ConflictError):
    code = "FrontDeskUsernameTaken"
    default_message = "Front desk username is already taken."


class InvalidCondoStatusError(InvalidInputError):
    code = "InvalidCondoStatus"
    default_message = "Invalid status. Must be Available, Maintenance, or Unavailable."
