from .config import Settings, get_settings
from .security import PasswordHasher, SessionTokenService

__all__ = [
    "Settings",
    "get_settings",
    "PasswordHasher",
    "SessionTokenService",
]
