# Standard library imports
import logging
import re
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from ..domain.models.principal import PrincipalClass
from .config import Settings
from .exceptions import CorruptCredential, InvalidToken, MissingToken

logger = logging.getLogger(__name__)

_BCRYPT_HASH_PATTERN = re.compile(r"^\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}$")


class PasswordHasher:
    """bcrypt hashing with a fixed cost factor"""

    def __init__(self, rounds: int = 5) -> None:
        self.rounds = rounds
        # Verified against when an email is unknown, so both signin failures cost the same.
        self._dummy_hash = self.hash_password("Dummy-password-0")

    def hash_password(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (fresh salt per call)
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a stored bcrypt hash

        Args:
            plain_password: The plain text password to verify
            hashed_password: The stored hash to compare against

        Returns:
            True if passwords match, False otherwise

        Raises:
            CorruptCredential: If the stored hash is not a bcrypt hash
        """
        if not isinstance(hashed_password, str) or not _BCRYPT_HASH_PATTERN.match(hashed_password):
            raise CorruptCredential("Stored password hash is malformed")
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except ValueError:
            return False

    def burn_verification(self, plain_password: str) -> bool:
        """Run a verification that always fails. Used when no stored hash exists."""
        self.verify_password(plain_password, self._dummy_hash)
        return False


class SessionTokenService:
    """
    Issues and verifies stateless session tokens.

    Each principal class signs with its own key, so a token minted for a user
    never verifies as an admin token and the other way round. Tokens carry
    only the subject claim; there is no expiry and no revocation.
    """

    def __init__(self, user_secret: str, admin_secret: str, algorithm: str = "HS256") -> None:
        if not user_secret or not admin_secret:
            raise ValueError("Both user and admin signing keys are required")
        if user_secret == admin_secret:
            raise ValueError("User and admin signing keys must differ")
        self.algorithm = algorithm
        self._keys: Dict[PrincipalClass, str] = {
            PrincipalClass.USER: user_secret,
            PrincipalClass.ADMIN: admin_secret,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "SessionTokenService":
        return cls(
            user_secret=settings.jwt_user_secret,
            admin_secret=settings.jwt_admin_secret,
            algorithm=settings.jwt_algorithm,
        )

    def issue(self, principal_id: str, principal_class: PrincipalClass) -> str:
        """
        Create a token for a principal

        Args:
            principal_id: ID of the signed-in principal
            principal_class: Class whose key signs the token

        Returns:
            Encoded JWT string
        """
        if not principal_id:
            raise ValueError("Principal ID is required")
        payload: Dict[str, Any] = {"sub": principal_id}
        return jwt.encode(payload, self._keys[principal_class], algorithm=self.algorithm)

    def verify(self, token: Optional[str], principal_class: PrincipalClass) -> str:
        """
        Verify a token against the key of the required class

        Args:
            token: Raw token from the request, or None
            principal_class: Class the route requires

        Returns:
            The principal ID from the subject claim

        Raises:
            MissingToken: If no token was supplied
            InvalidToken: On bad signature, malformed token or wrong class
        """
        if not token:
            raise MissingToken()
        try:
            payload = jwt.decode(
                token,
                self._keys[principal_class],
                algorithms=[self.algorithm],
                options={"require": ["sub"]},
            )
        except InvalidTokenError as exception:
            logger.warning(f"Rejected {principal_class.value} token: {exception}")
            raise InvalidToken()

        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.strip():
            logger.warning(f"Rejected {principal_class.value} token: blank subject")
            raise InvalidToken()
        return subject
