# Standard library imports
import logging
from typing import Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DuplicateEmail, StorageError
from ...domain.repositories.principal_repository import PrincipalRepository
from ...domain.models.principal import Principal, PrincipalClass
from ...domain.constants import PrincipalFields
from .mongo_connection import get_principal_collection

logger = logging.getLogger(__name__)


class MongoPrincipalRepository(PrincipalRepository):
    """MongoDB implementation of PrincipalRepository, one collection per principal class"""

    def __init__(
        self,
        collections: Optional[Dict[PrincipalClass, AsyncIOMotorCollection]] = None,
    ) -> None:
        if collections is None:
            collections = {
                principal_class: get_principal_collection(principal_class)
                for principal_class in PrincipalClass
            }
        self.collections = collections

    async def ensure_indexes(self) -> None:
        """Unique email per principal class, enforced by MongoDB itself"""
        try:
            for principal_class, collection in self.collections.items():
                await collection.create_index(
                    [(PrincipalFields.EMAIL, ASCENDING)],
                    unique=True,
                    name="email_unique",
                )
                logger.info(f"Ensured unique email index on {principal_class.value} collection")
        except PyMongoError as e:
            raise StorageError(f"Error creating principal indexes: {str(e)}") from e

    async def find_by_email(self, principal_class: PrincipalClass, email: str) -> Optional[Principal]:
        """
        Find principal by email address

        Args:
            principal_class: Namespace to search
            email: Normalized email address

        Returns:
            Principal domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.collections[principal_class].find_one({PrincipalFields.EMAIL: email})
        except PyMongoError as e:
            raise StorageError(f"Error finding {principal_class.value} by email: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_principal(document, principal_class)

    async def create(self, principal: Principal) -> Principal:
        """
        Insert a new principal

        Args:
            principal: Principal without an ID

        Returns:
            Principal with the generated ID set

        Raises:
            DuplicateEmail: If the unique email index rejects the insert
        """
        if not principal:
            raise ValueError("Principal cannot be None")

        collection = self.collections[principal.principal_class]
        try:
            result = await collection.insert_one(self._principal_to_dict(principal))
        except DuplicateKeyError:
            raise DuplicateEmail()
        except PyMongoError as e:
            raise StorageError(f"Error saving {principal.principal_class.value}: {str(e)}") from e

        return Principal(
            id=str(result.inserted_id),
            principal_class=principal.principal_class,
            email=principal.email,
            hashed_password=principal.hashed_password,
            first_name=principal.first_name,
            last_name=principal.last_name,
        )

    def _document_to_principal(self, document: dict, principal_class: PrincipalClass) -> Principal:
        """
        Convert MongoDB document to Principal domain model

        Args:
            document: MongoDB document dictionary
            principal_class: Class of the collection the document came from

        Returns:
            Principal domain model
        """
        if not document or PrincipalFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Principal(
            id=str(document[PrincipalFields.MONGO_ID]),
            principal_class=principal_class,
            email=document.get(PrincipalFields.EMAIL, ""),
            hashed_password=document.get(PrincipalFields.HASHED_PASSWORD, ""),
            first_name=document.get(PrincipalFields.FIRST_NAME, ""),
            last_name=document.get(PrincipalFields.LAST_NAME, ""),
        )

    def _principal_to_dict(self, principal: Principal) -> dict:
        # The class is implied by the collection and is not stored.
        return {
            PrincipalFields.EMAIL: principal.email,
            PrincipalFields.HASHED_PASSWORD: principal.hashed_password,
            PrincipalFields.FIRST_NAME: principal.first_name,
            PrincipalFields.LAST_NAME: principal.last_name,
        }
