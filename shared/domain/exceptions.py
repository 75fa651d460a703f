"""
Domain error taxonomy.

Services raise these; the API layer turns them into responses in
`shared.infrastructure.exception_handler`. Anything that is not a
DomainError is treated as an internal failure.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for expected, caller-visible failures."""

    status_code = 400
    code = "Error"
    default_message = "The request could not be completed."

    def __init__(self, message: str | None = None, *, code: str | None = None):
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class InvalidInputError(DomainError):
    """Malformed or out-of-range input."""

    code = "ValidationError"
    default_message = "Invalid input."


class ConflictError(DomainError):
    """The request collides with existing state (overlap, duplicate)."""

    code = "Conflict"
    default_message = "The request conflicts with existing data."


class NotFoundError(DomainError):
    """Missing, or not visible to the caller."""

    status_code = 404
    code = "NotFound"
    default_message = "Not found."


class InvalidStateError(DomainError):
    """The operation is illegal for the current status."""

    code = "InvalidState"
    default_message = "Operation is not allowed in the current state."


class UnauthorizedError(DomainError):
    """Missing or insufficient role claim."""

    status_code = 403
    code = "Unauthorized"
    default_message = "You do not have permission to perform this action."
