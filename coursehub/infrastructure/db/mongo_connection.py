# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.models.principal import PrincipalClass

logger = logging.getLogger(__name__)

# Collection per principal class; emails are unique within each one.
PRINCIPAL_COLLECTIONS = {
    PrincipalClass.USER: "users",
    PrincipalClass.ADMIN: "admins",
}
COURSE_COLLECTION = "courses"
PURCHASE_COLLECTION = "purchases"


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Args:
        settings: Settings to connect with; defaults to the process settings

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings or get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def close_database() -> None:
    """Close the MongoDB client if one was created"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None


def get_principal_collection(principal_class: PrincipalClass) -> AsyncIOMotorCollection:
    """
    Get the collection holding principals of one class

    Args:
        principal_class: USER or ADMIN

    Returns:
        MongoDB collection for that class
    """
    return get_database()[PRINCIPAL_COLLECTIONS[principal_class]]


def get_course_collection() -> AsyncIOMotorCollection:
    return get_database()[COURSE_COLLECTION]


def get_purchase_collection() -> AsyncIOMotorCollection:
    return get_database()[PURCHASE_COLLECTION]
