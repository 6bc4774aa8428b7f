# Standard library imports
from typing import Awaitable, Callable, Optional

# External package imports
from fastapi import Depends
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...core.security import SessionTokenService
from ...domain.models.principal import PrincipalClass
from ...di.container import get_container

TOKEN_HEADER = "token"

# auto_error=False so a missing token reaches the guard and maps to MissingToken.
token_header_scheme = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)


def _principal_guard(principal_class: PrincipalClass) -> Callable[..., Awaitable[str]]:
    """
    Build a FastAPI dependency that admits only tokens of principal_class

    The dependency raises on a missing or invalid token, so the route
    handler never runs for a rejected request.
    """

    async def guard(
        token: Optional[str] = Depends(token_header_scheme),
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> str:
        raw_token = token or (credentials.credentials if credentials is not None else None)
        token_service = get_container().get(SessionTokenService)
        return token_service.verify(raw_token, principal_class)

    guard.__name__ = f"require_{principal_class.value}"
    return guard


# Return the verified principal ID
require_user = _principal_guard(PrincipalClass.USER)
require_admin = _principal_guard(PrincipalClass.ADMIN)
