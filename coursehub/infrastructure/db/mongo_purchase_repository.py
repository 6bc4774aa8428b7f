# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import StorageError
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...domain.models.purchase import Purchase
from ...domain.constants import PurchaseFields
from .mongo_connection import get_purchase_collection

logger = logging.getLogger(__name__)


class MongoPurchaseRepository(PurchaseRepository):
    """MongoDB implementation of PurchaseRepository"""

    def __init__(self, purchase_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.purchase_collection = (
            purchase_collection if purchase_collection is not None else get_purchase_collection()
        )

    async def ensure_indexes(self) -> None:
        """One purchase fact per (user, course) pair"""
        try:
            await self.purchase_collection.create_index(
                [(PurchaseFields.USER_ID, ASCENDING), (PurchaseFields.COURSE_ID, ASCENDING)],
                unique=True,
                name="user_course_unique",
            )
        except PyMongoError as e:
            raise StorageError(f"Error creating purchase indexes: {str(e)}") from e

    async def record(self, purchase: Purchase) -> Purchase:
        """
        Record a purchase, returning the existing fact for a repeated pair

        Args:
            purchase: Purchase without an ID

        Returns:
            Purchase with ID set
        """
        key = {
            PurchaseFields.USER_ID: purchase.user_id,
            PurchaseFields.COURSE_ID: purchase.course_id,
        }
        try:
            result = await self.purchase_collection.update_one(
                key,
                {"$setOnInsert": dict(key)},
                upsert=True,
            )
            if result.upserted_id is not None:
                return Purchase(id=str(result.upserted_id), user_id=purchase.user_id, course_id=purchase.course_id)
        except DuplicateKeyError:
            # A concurrent request inserted the same pair first.
            pass
        except PyMongoError as e:
            raise StorageError(f"Error recording purchase: {str(e)}") from e

        try:
            document = await self.purchase_collection.find_one(key)
        except PyMongoError as e:
            raise StorageError(f"Error reading purchase: {str(e)}") from e
        if document is None:
            raise StorageError("Purchase was recorded but could not be retrieved")
        logger.info(f"Purchase of course {purchase.course_id} by user {purchase.user_id} already recorded")
        return self._document_to_purchase(document)

    async def find_by_user(self, user_id: str) -> List[Purchase]:
        """
        Find all purchases of a user

        Args:
            user_id: The user ID

        Returns:
            List of Purchase domain models, oldest first
        """
        if not user_id:
            return []

        try:
            cursor = self.purchase_collection.find({PurchaseFields.USER_ID: user_id}).sort(
                PurchaseFields.MONGO_ID, ASCENDING
            )
            purchases = []
            async for document in cursor:
                purchases.append(self._document_to_purchase(document))
            return purchases
        except PyMongoError as e:
            raise StorageError(f"Error listing purchases for user: {str(e)}") from e

    def _document_to_purchase(self, document: dict) -> Purchase:
        if not document or PurchaseFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Purchase(
            id=str(document[PurchaseFields.MONGO_ID]),
            user_id=document.get(PurchaseFields.USER_ID, ""),
            course_id=document.get(PurchaseFields.COURSE_ID, ""),
        )
