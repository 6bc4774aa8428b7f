from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence
from ..models.course import Course


class CourseRepository(ABC):
    """Repository interface - defines contract for course data access"""

    @abstractmethod
    async def create(self, course: Course) -> Course:
        """Insert a new course and return it with ID set"""
        pass

    @abstractmethod
    async def update_owned(
        self,
        course_id: str,
        creator_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Course]:
        """
        Apply changes to a course only if creator_id owns it.

        Match and write happen in a single storage operation. Returns the
        updated course, or None when no course with that ID belongs to
        creator_id.
        """
        pass

    @abstractmethod
    async def delete_owned(self, course_id: str, creator_id: str) -> bool:
        """Delete a course only if creator_id owns it, in one storage operation"""
        pass

    @abstractmethod
    async def find_by_creator(self, creator_id: str) -> List[Course]:
        """Find all courses created by an admin"""
        pass

    @abstractmethod
    async def find_all(self) -> List[Course]:
        """Find every course in the catalog"""
        pass

    @abstractmethod
    async def find_by_ids(self, course_ids: Sequence[str]) -> List[Course]:
        """Find the courses that still exist among course_ids"""
        pass

    async def ensure_indexes(self) -> None:
        """Create storage constraints. Stores without any keep this no-op."""
        return None
