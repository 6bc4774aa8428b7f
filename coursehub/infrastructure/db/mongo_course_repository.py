# Standard library imports
import logging
from typing import Any, Dict, List, Optional, Sequence

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import StorageError
from ...domain.repositories.course_repository import CourseRepository
from ...domain.models.course import Course
from ...domain.constants import CourseFields
from .mongo_connection import get_course_collection

logger = logging.getLogger(__name__)


def _to_object_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoCourseRepository(CourseRepository):
    """MongoDB implementation of CourseRepository"""

    def __init__(self, course_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.course_collection = course_collection if course_collection is not None else get_course_collection()

    async def ensure_indexes(self) -> None:
        try:
            await self.course_collection.create_index(
                [(CourseFields.CREATOR_ID, ASCENDING)],
                name="creator_id",
            )
        except PyMongoError as e:
            raise StorageError(f"Error creating course indexes: {str(e)}") from e

    async def create(self, course: Course) -> Course:
        """
        Insert a new course

        Args:
            course: Course domain model without an ID

        Returns:
            Course domain model with ID set
        """
        if not course:
            raise ValueError("Course cannot be None")

        try:
            result = await self.course_collection.insert_one(self._course_to_dict(course))
        except PyMongoError as e:
            raise StorageError(f"Error saving course: {str(e)}") from e

        return Course(
            id=str(result.inserted_id),
            creator_id=course.creator_id,
            title=course.title,
            description=course.description,
            price=course.price,
            image_url=course.image_url,
        )

    async def update_owned(
        self,
        course_id: str,
        creator_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Course]:
        """
        Conditionally update a course owned by creator_id

        The filter matches both _id and creator_id, so the ownership check and
        the write are one atomic document operation.

        Args:
            course_id: Course to update
            creator_id: Acting admin ID
            changes: Mutable field values to set

        Returns:
            Updated Course, or None if no such course belongs to creator_id
        """
        object_id = _to_object_id(course_id)
        if object_id is None or not creator_id:
            return None

        update = {k: v for k, v in changes.items() if k in CourseFields.MUTABLE}
        if not update:
            raise ValueError("No mutable course fields to update")

        try:
            document = await self.course_collection.find_one_and_update(
                {CourseFields.MONGO_ID: object_id, CourseFields.CREATOR_ID: creator_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StorageError(f"Error updating course: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_course(document)

    async def delete_owned(self, course_id: str, creator_id: str) -> bool:
        object_id = _to_object_id(course_id)
        if object_id is None or not creator_id:
            return False

        try:
            result = await self.course_collection.delete_one(
                {CourseFields.MONGO_ID: object_id, CourseFields.CREATOR_ID: creator_id}
            )
        except PyMongoError as e:
            raise StorageError(f"Error deleting course: {str(e)}") from e
        return result.deleted_count == 1

    async def find_by_creator(self, creator_id: str) -> List[Course]:
        """
        Find all courses created by an admin

        Args:
            creator_id: The admin ID

        Returns:
            List of Course domain models
        """
        if not creator_id:
            return []
        return await self._find({CourseFields.CREATOR_ID: creator_id})

    async def find_all(self) -> List[Course]:
        return await self._find({})

    async def find_by_ids(self, course_ids: Sequence[str]) -> List[Course]:
        object_ids = [oid for oid in (_to_object_id(cid) for cid in course_ids) if oid is not None]
        if not object_ids:
            return []
        return await self._find({CourseFields.MONGO_ID: {"$in": object_ids}})

    async def _find(self, query: Dict[str, Any]) -> List[Course]:
        try:
            cursor = self.course_collection.find(query).sort(CourseFields.MONGO_ID, ASCENDING)
            courses = []
            async for document in cursor:
                courses.append(self._document_to_course(document))
            return courses
        except PyMongoError as e:
            raise StorageError(f"Error listing courses: {str(e)}") from e

    def _document_to_course(self, document: dict) -> Course:
        """
        Convert MongoDB document to Course domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Course domain model
        """
        if not document or CourseFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Course(
            id=str(document[CourseFields.MONGO_ID]),
            creator_id=document.get(CourseFields.CREATOR_ID, ""),
            title=document.get(CourseFields.TITLE, ""),
            description=document.get(CourseFields.DESCRIPTION, ""),
            price=float(document.get(CourseFields.PRICE, 0)),
            image_url=document.get(CourseFields.IMAGE_URL, ""),
        )

    def _course_to_dict(self, course: Course) -> dict:
        return {
            CourseFields.CREATOR_ID: course.creator_id,
            CourseFields.TITLE: course.title,
            CourseFields.DESCRIPTION: course.description,
            CourseFields.PRICE: course.price,
            CourseFields.IMAGE_URL: course.image_url,
        }
