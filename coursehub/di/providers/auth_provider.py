from typing import TYPE_CHECKING
from ...core.security import PasswordHasher, SessionTokenService
from ...domain.repositories.principal_repository import PrincipalRepository
from ...application.use_cases.auth.register_principal import RegisterPrincipalUseCase
from ...application.use_cases.auth.authenticate_principal import AuthenticatePrincipalUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers signup and signin use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterPrincipalUseCase,
            lambda: RegisterPrincipalUseCase(
                principal_repository=container.get(PrincipalRepository),
                password_hasher=container.get(PasswordHasher),
            )
        )

        container.register_factory(
            AuthenticatePrincipalUseCase,
            lambda: AuthenticatePrincipalUseCase(
                principal_repository=container.get(PrincipalRepository),
                password_hasher=container.get(PasswordHasher),
                token_service=container.get(SessionTokenService),
            )
        )
