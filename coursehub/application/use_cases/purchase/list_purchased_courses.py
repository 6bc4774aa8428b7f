# Local application imports
from ....domain.repositories.course_repository import CourseRepository
from ....domain.repositories.purchase_repository import PurchaseRepository
from ....utils.ids import is_valid_id, normalize_id
from ...dto.course_dto import CourseResponse
from ...dto.purchase_dto import PurchasedCoursesResponse


class ListPurchasedCoursesUseCase:
    """Use case for the courses a user owns through purchases"""

    def __init__(
        self,
        purchase_repository: PurchaseRepository,
        course_repository: CourseRepository,
    ) -> None:
        self.purchase_repository = purchase_repository
        self.course_repository = course_repository

    async def execute(self, user_id: str) -> PurchasedCoursesResponse:
        """
        Resolve a user's purchases against the catalog

        Courses deleted after purchase are dropped without error. Order
        follows the purchases, oldest first.

        Args:
            user_id: ID of the user

        Returns:
            PurchasedCoursesResponse; empty list when nothing was bought
        """
        purchases = await self.purchase_repository.find_by_user(user_id)
        # Catalog IDs come back in canonical form; match stored references the same way.
        course_ids = list(dict.fromkeys(
            normalize_id(purchase.course_id) for purchase in purchases if is_valid_id(purchase.course_id)
        ))

        courses_by_id = {}
        if course_ids:
            for course in await self.course_repository.find_by_ids(course_ids):
                courses_by_id[course.id] = course

        courses = [
            CourseResponse.from_domain(courses_by_id[course_id])
            for course_id in course_ids
            if course_id in courses_by_id
        ]
        return PurchasedCoursesResponse(
            message="Purchases fetched",
            courses=courses,
            total_courses=len(courses),
        )
