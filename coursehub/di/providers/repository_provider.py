from typing import TYPE_CHECKING
from ...domain.models.principal import PrincipalClass
from ...domain.repositories.principal_repository import PrincipalRepository
from ...domain.repositories.course_repository import CourseRepository
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...infrastructure.db.mongo_principal_repository import MongoPrincipalRepository
from ...infrastructure.db.mongo_course_repository import MongoCourseRepository
from ...infrastructure.db.mongo_purchase_repository import MongoPurchaseRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            PrincipalRepository,
            MongoPrincipalRepository(collections={
                PrincipalClass.USER: container.get("user_collection"),
                PrincipalClass.ADMIN: container.get("admin_collection"),
            })
        )

        container.register_singleton(
            CourseRepository,
            MongoCourseRepository(course_collection=container.get("course_collection"))
        )

        container.register_singleton(
            PurchaseRepository,
            MongoPurchaseRepository(purchase_collection=container.get("purchase_collection"))
        )
