from abc import ABC, abstractmethod
from typing import Optional
from ..models.principal import Principal, PrincipalClass


class PrincipalRepository(ABC):
    """
    Repository interface - defines contract for principal (user/admin) data access.

    Every lookup is scoped to one principal class; the two classes live in
    separate namespaces and share no emails or IDs.
    """

    @abstractmethod
    async def find_by_email(self, principal_class: PrincipalClass, email: str) -> Optional[Principal]:
        """Find principal of the given class by normalized email"""
        pass

    @abstractmethod
    async def create(self, principal: Principal) -> Principal:
        """
        Insert a new principal.

        Raises DuplicateEmail when the email already exists for the class.
        The check must be enforced by the store, not by a prior lookup.
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create storage constraints. Stores without any keep this no-op."""
        return None
