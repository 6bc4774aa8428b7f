# Standard library imports
import logging

# Local application imports
from ....core.exceptions import Forbidden
from ....domain.repositories.course_repository import CourseRepository
from ...dto.course_dto import CourseDeleteRequest, CourseDeletedResponse

logger = logging.getLogger(__name__)


class DeleteCourseUseCase:
    """Use case for deleting a course; only its creator may do so"""

    def __init__(self, course_repository: CourseRepository) -> None:
        self.course_repository = course_repository

    async def execute(self, request: CourseDeleteRequest, creator_id: str) -> CourseDeletedResponse:
        """
        Delete a course owned by creator_id

        Raises:
            Forbidden: If no course with that ID belongs to creator_id
        """
        deleted = await self.course_repository.delete_owned(request.course_id, creator_id)
        if not deleted:
            logger.warning(f"Admin {creator_id} denied deletion of course {request.course_id}")
            raise Forbidden()

        logger.info(f"Admin {creator_id} deleted course {request.course_id}")
        return CourseDeletedResponse(message="Course deleted", course_id=request.course_id)
