"""Typed failures raised by the domain services.

Each kind is an ``HTTPException`` so the transport layer maps it to a status
code without extra plumbing. ``code`` names the kind in error responses and
the message travels in ``detail``.
"""

from fastapi import HTTPException, status


class PitchsideError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "error"
    default_detail = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class NotFoundError(PitchsideError):
    """A referenced entity id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Resource not found"


class NotAuthorizedError(PitchsideError):
    """The caller does not own, captain or belong to the target entity."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "not_authorized"
    default_detail = "Not authorized"


class ConflictError(PitchsideError):
    """The mutation violates a uniqueness or state precondition."""

    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_detail = "Conflict"


class InvalidOperationError(PitchsideError):
    """The mutation is disallowed regardless of authorization."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_operation"
    default_detail = "Invalid operation"


__all__ = [
    "PitchsideError",
    "NotFoundError",
    "NotAuthorizedError",
    "ConflictError",
    "InvalidOperationError",
]
