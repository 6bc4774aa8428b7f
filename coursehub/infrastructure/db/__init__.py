from .mongo_connection import (
    get_database,
    close_database,
    get_principal_collection,
    get_course_collection,
    get_purchase_collection,
)
from .mongo_principal_repository import MongoPrincipalRepository
from .mongo_course_repository import MongoCourseRepository
from .mongo_purchase_repository import MongoPurchaseRepository

__all__ = [
    "get_database",
    "close_database",
    "get_principal_collection",
    "get_course_collection",
    "get_purchase_collection",
    "MongoPrincipalRepository",
    "MongoCourseRepository",
    "MongoPurchaseRepository",
]
