# Standard library imports
import logging

# Local application imports
from ....core.security import PasswordHasher
from ....domain.repositories.principal_repository import PrincipalRepository
from ....domain.models.principal import Principal, PrincipalClass
from ...dto.auth_dto import SignupRequest, SignupResponse

logger = logging.getLogger(__name__)


class RegisterPrincipalUseCase:
    """Use case for signing up a new user or admin"""

    def __init__(self, principal_repository: PrincipalRepository, password_hasher: PasswordHasher) -> None:
        self.principal_repository = principal_repository
        self.password_hasher = password_hasher

    async def execute(self, principal_class: PrincipalClass, request: SignupRequest) -> SignupResponse:
        """
        Register a new principal

        Args:
            principal_class: USER or ADMIN namespace to register in
            request: Validated signup request

        Returns:
            SignupResponse with the new principal ID

        Raises:
            DuplicateEmail: If the email is already taken within the class
        """
        new_principal = Principal(
            id=None,  # Will be set by repository
            principal_class=principal_class,
            email=request.email,
            hashed_password=self.password_hasher.hash_password(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
        )

        # Uniqueness is enforced by the store's index, not by a lookup here.
        saved = await self.principal_repository.create(new_principal)
        logger.info(f"Registered {principal_class.value} {saved.id} ({saved.email})")

        return SignupResponse(
            message=f"{principal_class.value.capitalize()} signed up successfully",
            id=saved.id or "",
        )
