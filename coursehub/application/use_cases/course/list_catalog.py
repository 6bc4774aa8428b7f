# Local application imports
from ....domain.repositories.course_repository import CourseRepository
from ...dto.course_dto import CourseListResponse, CourseResponse


class ListCatalogUseCase:
    """Use case for the public course catalog (no owner filter, no auth)"""

    def __init__(self, course_repository: CourseRepository) -> None:
        self.course_repository = course_repository

    async def execute(self) -> CourseListResponse:
        courses = await self.course_repository.find_all()
        return CourseListResponse(
            message="Courses fetched",
            courses=[CourseResponse.from_domain(course) for course in courses],
        )
