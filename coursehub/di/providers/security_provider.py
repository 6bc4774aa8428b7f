from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import PasswordHasher, SessionTokenService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SecurityProvider:
    """Registers the password hasher and the session token service, built from Settings"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)

        container.register_singleton(
            PasswordHasher,
            PasswordHasher(rounds=settings.password_hash_rounds)
        )
        container.register_singleton(
            SessionTokenService,
            SessionTokenService.from_settings(settings)
        )
