# Local application imports
from ....domain.repositories.course_repository import CourseRepository
from ...dto.course_dto import CourseListResponse, CourseResponse


class ListOwnedCoursesUseCase:
    """Use case for listing the courses an admin created"""

    def __init__(self, course_repository: CourseRepository) -> None:
        self.course_repository = course_repository

    async def execute(self, creator_id: str) -> CourseListResponse:
        courses = await self.course_repository.find_by_creator(creator_id)
        return CourseListResponse(
            message="Courses fetched",
            courses=[CourseResponse.from_domain(course) for course in courses],
        )
