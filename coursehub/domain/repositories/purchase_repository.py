from abc import ABC, abstractmethod
from typing import List
from ..models.purchase import Purchase


class PurchaseRepository(ABC):
    """Repository interface - defines contract for purchase data access"""

    @abstractmethod
    async def record(self, purchase: Purchase) -> Purchase:
        """
        Record a purchase fact.

        One fact per (user, course): recording the same pair again returns the
        existing purchase instead of inserting a second one.
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Purchase]:
        """Find all purchases of a user, oldest first"""
        pass

    async def ensure_indexes(self) -> None:
        """Create storage constraints. Stores without any keep this no-op."""
        return None
