"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a message that is safe to
show to the client. Handlers registered in `kidcode.main` render them as
`{"error": message}`.
"""
from fastapi import status


class KidCodeError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected internal server error occurred."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(KidCodeError):
    """Malformed request shape or types."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class Unauthorized(KidCodeError):
    """Missing, invalid, expired or stale credential."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated."


class NotFound(KidCodeError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class Conflict(KidCodeError):
    """Uniqueness violation, e.g. a duplicate email at registration."""
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


class StorageFailure(KidCodeError):
    # Cause is logged, never returned to the client.
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "A storage error occurred. Please try again later."
