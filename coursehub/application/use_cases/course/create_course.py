# Standard library imports
import logging

# Local application imports
from ....domain.repositories.course_repository import CourseRepository
from ....domain.models.course import Course
from ...dto.course_dto import CourseCreateRequest, CourseCreatedResponse

logger = logging.getLogger(__name__)


class CreateCourseUseCase:
    """Use case for creating a course owned by the acting admin"""

    def __init__(self, course_repository: CourseRepository) -> None:
        self.course_repository = course_repository

    async def execute(self, request: CourseCreateRequest, creator_id: str) -> CourseCreatedResponse:
        """
        Create a new course

        Args:
            request: Course creation request
            creator_id: ID of the admin creating the course

        Returns:
            CourseCreatedResponse with the new course ID
        """
        new_course = Course(
            id=None,
            creator_id=creator_id,
            title=request.title,
            description=request.description,
            price=request.price,
            image_url=request.image_url,
        )

        saved = await self.course_repository.create(new_course)
        logger.info(f"Admin {creator_id} created course {saved.id}")

        return CourseCreatedResponse(message="Course created", course_id=saved.id or "")
