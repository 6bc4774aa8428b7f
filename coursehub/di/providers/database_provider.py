from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.models.principal import PrincipalClass
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_principal_collection,
    get_course_collection,
    get_purchase_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and every collection as singletons.
        The Motor client connects lazily, so nothing touches the network here.
        """
        database = get_database(container.get(Settings))

        container.register_singleton("database", database)
        container.register_singleton("user_collection", get_principal_collection(PrincipalClass.USER))
        container.register_singleton("admin_collection", get_principal_collection(PrincipalClass.ADMIN))
        container.register_singleton("course_collection", get_course_collection())
        container.register_singleton("purchase_collection", get_purchase_collection())
