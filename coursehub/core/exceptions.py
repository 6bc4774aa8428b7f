"""
Domain error taxonomy for the CourseHub backend.

Every error raised by the core inherits from CourseHubError and carries a
client-safe message. The HTTP layer maps each kind to a status code in one
place (coursehub.api.error_handlers); use cases and repositories only raise.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CourseHubError(Exception):
    """Base exception for all CourseHub errors."""

    default_message = "An error occurred. Please try again."

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(CourseHubError):
    """Raised when input is malformed or out of range."""

    default_message = "Invalid input"


class Unauthenticated(CourseHubError):
    """Base for session token failures."""

    default_message = "You are not signed in"


class MissingToken(Unauthenticated):
    """Raised when a guarded request carries no token."""

    default_message = "You are not signed in"


class InvalidToken(Unauthenticated):
    """Raised on bad signature, malformed token or wrong principal class."""

    default_message = "Invalid session token"


class InvalidCredentials(CourseHubError):
    """Raised on signin failure. Unknown email and wrong password look the same."""

    default_message = "Invalid email or password"


class Forbidden(CourseHubError):
    """Raised when the resource does not exist for the acting owner."""

    default_message = "Course not found for this admin"


class DuplicateEmail(CourseHubError):
    """Raised when the email is already registered for the principal class."""

    default_message = "Email is already registered"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class InternalError(CourseHubError):
    """Unexpected storage or crypto failure. Never shown verbatim to clients."""

    default_message = "Internal server error"


class StorageError(InternalError):
    """Raised when the database driver fails."""
    pass


class CorruptCredential(InternalError):
    """Raised when a stored password hash is not a well-formed bcrypt hash."""
    pass
