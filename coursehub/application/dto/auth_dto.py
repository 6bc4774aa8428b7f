# Standard library imports
import re
from typing import Annotated, Any

# External package imports
from pydantic import AfterValidator, BeforeValidator, EmailStr, StringConstraints

# Local application imports
from .base_dto import CamelModel, MessageResponse
from .principal_dto import PrincipalProfile

EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8
# bcrypt ignores input past 72 bytes
PASSWORD_MAX_BYTES = 72

_PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
    (re.compile(r"[^a-zA-Z0-9]"), "Password must contain at least one special character"),
)


def normalize_email(value: Any) -> Any:
    """Trim and lower-case before address validation"""
    if not isinstance(value, str):
        return value
    value = value.strip().lower()
    if len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


def check_password_strength(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")
    for pattern, message in _PASSWORD_RULES:
        if not pattern.search(value):
            raise ValueError(message)
    return value


Email = Annotated[EmailStr, BeforeValidator(normalize_email)]
Password = Annotated[str, AfterValidator(check_password_strength)]
PersonName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]


class SignupRequest(CamelModel):
    """DTO for user or admin signup request"""
    email: Email
    password: Password
    first_name: PersonName
    last_name: PersonName


class SigninRequest(CamelModel):
    """DTO for user or admin signin request"""
    email: Email
    password: Password


class SignupResponse(MessageResponse):
    """DTO for signup response"""
    id: str


class SigninResponse(MessageResponse):
    """DTO for signin response: session token plus the signed-in profile"""
    token: str
    profile: PrincipalProfile
