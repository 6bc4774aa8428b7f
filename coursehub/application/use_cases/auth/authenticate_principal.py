# Standard library imports
import logging

# Local application imports
from ....core.exceptions import InvalidCredentials
from ....core.security import PasswordHasher, SessionTokenService
from ....domain.repositories.principal_repository import PrincipalRepository
from ....domain.models.principal import PrincipalClass
from ...dto.auth_dto import SigninRequest, SigninResponse
from ...dto.principal_dto import PrincipalProfile

logger = logging.getLogger(__name__)


class AuthenticatePrincipalUseCase:
    """Use case for signing in a user or admin and issuing a session token"""

    def __init__(
        self,
        principal_repository: PrincipalRepository,
        password_hasher: PasswordHasher,
        token_service: SessionTokenService,
    ) -> None:
        self.principal_repository = principal_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, principal_class: PrincipalClass, request: SigninRequest) -> SigninResponse:
        """
        Authenticate a principal and issue a token signed with the class key

        Args:
            principal_class: USER or ADMIN namespace to look in
            request: Validated signin request

        Returns:
            SigninResponse with token and profile

        Raises:
            InvalidCredentials: Unknown email or wrong password, indistinguishably
        """
        principal = await self.principal_repository.find_by_email(principal_class, request.email)
        if principal is None:
            self.password_hasher.burn_verification(request.password)
            logger.warning(f"Failed {principal_class.value} signin for {request.email}")
            raise InvalidCredentials()

        if not self.password_hasher.verify_password(request.password, principal.hashed_password):
            logger.warning(f"Failed {principal_class.value} signin for {request.email}")
            raise InvalidCredentials()

        token = self.token_service.issue(principal.id or "", principal_class)
        logger.info(f"{principal_class.value.capitalize()} {principal.id} signed in")

        return SigninResponse(
            message="Signed in successfully",
            token=token,
            profile=PrincipalProfile(
                id=principal.id or "",
                email=principal.email,
                first_name=principal.first_name,
                last_name=principal.last_name,
            ),
        )
