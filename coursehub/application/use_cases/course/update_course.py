# Standard library imports
import logging

# Local application imports
from ....core.exceptions import Forbidden, ValidationError
from ....domain.repositories.course_repository import CourseRepository
from ...dto.course_dto import CourseUpdateRequest, CourseUpdatedResponse, CourseResponse

logger = logging.getLogger(__name__)


class UpdateCourseUseCase:
    """Use case for updating a course; only its creator may do so"""

    def __init__(self, course_repository: CourseRepository) -> None:
        self.course_repository = course_repository

    async def execute(self, request: CourseUpdateRequest, creator_id: str) -> CourseUpdatedResponse:
        """
        Update the supplied fields of a course owned by creator_id

        Args:
            request: Update request with course ID and changed fields
            creator_id: ID of the acting admin

        Returns:
            CourseUpdatedResponse with the course after the update

        Raises:
            ValidationError: If no mutable field was supplied
            Forbidden: If no course with that ID belongs to creator_id
        """
        changes = request.changes()
        if not changes:
            raise ValidationError("Provide at least one field to update")

        course = await self.course_repository.update_owned(request.course_id, creator_id, changes)
        if course is None:
            logger.warning(f"Admin {creator_id} denied update of course {request.course_id}")
            raise Forbidden()

        logger.info(f"Admin {creator_id} updated course {course.id}: {sorted(changes)}")
        return CourseUpdatedResponse(message="Course updated", course=CourseResponse.from_domain(course))
