from typing import TYPE_CHECKING
from ...domain.repositories.course_repository import CourseRepository
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...application.use_cases.purchase import PurchaseCourseUseCase, ListPurchasedCoursesUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PurchaseProvider:
    """Purchase use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            PurchaseCourseUseCase,
            lambda: PurchaseCourseUseCase(
                purchase_repository=container.get(PurchaseRepository)
            )
        )

        container.register_factory(
            ListPurchasedCoursesUseCase,
            lambda: ListPurchasedCoursesUseCase(
                purchase_repository=container.get(PurchaseRepository),
                course_repository=container.get(CourseRepository),
            )
        )
