"""
In-memory repositories for tests.

They implement the same contracts as the Mongo repositories, including the
ones the store enforces: unique email per principal class, owner-filtered
update/delete in a single step, and one purchase per (user, course).
"""
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId

from coursehub.core.exceptions import DuplicateEmail
from coursehub.domain.constants import CourseFields
from coursehub.domain.models import Course, Principal, PrincipalClass, Purchase
from coursehub.domain.repositories import CourseRepository, PrincipalRepository, PurchaseRepository

STRONG_PASSWORD = "Str0ng!Passw0rd"


class InMemoryPrincipalRepository(PrincipalRepository):
    def __init__(self) -> None:
        self.records: Dict[PrincipalClass, Dict[str, Principal]] = {
            principal_class: {} for principal_class in PrincipalClass
        }

    async def find_by_email(self, principal_class: PrincipalClass, email: str) -> Optional[Principal]:
        for principal in self.records[principal_class].values():
            if principal.email == email:
                return principal
        return None

    async def create(self, principal: Principal) -> Principal:
        namespace = self.records[principal.principal_class]
        if any(existing.email == principal.email for existing in namespace.values()):
            raise DuplicateEmail()
        saved = replace(principal, id=str(ObjectId()))
        namespace[saved.id] = saved
        return saved


class InMemoryCourseRepository(CourseRepository):
    def __init__(self) -> None:
        self.courses: Dict[str, Course] = {}

    async def create(self, course: Course) -> Course:
        saved = replace(course, id=str(ObjectId()))
        self.courses[saved.id] = saved
        return saved

    async def update_owned(self, course_id: str, creator_id: str, changes: Dict[str, Any]) -> Optional[Course]:
        course = self.courses.get(course_id)
        if course is None or course.creator_id != creator_id:
            return None
        update = {k: v for k, v in changes.items() if k in CourseFields.MUTABLE}
        updated = replace(course, **update)
        self.courses[course_id] = updated
        return updated

    async def delete_owned(self, course_id: str, creator_id: str) -> bool:
        course = self.courses.get(course_id)
        if course is None or course.creator_id != creator_id:
            return False
        del self.courses[course_id]
        return True

    async def find_by_creator(self, creator_id: str) -> List[Course]:
        return [course for course in self.courses.values() if course.creator_id == creator_id]

    async def find_all(self) -> List[Course]:
        return list(self.courses.values())

    async def find_by_ids(self, course_ids: Sequence[str]) -> List[Course]:
        return [self.courses[course_id] for course_id in course_ids if course_id in self.courses]


class InMemoryPurchaseRepository(PurchaseRepository):
    def __init__(self) -> None:
        self.purchases: List[Purchase] = []

    async def record(self, purchase: Purchase) -> Purchase:
        for existing in self.purchases:
            if existing.user_id == purchase.user_id and existing.course_id == purchase.course_id:
                return existing
        saved = replace(purchase, id=str(ObjectId()))
        self.purchases.append(saved)
        return saved

    async def find_by_user(self, user_id: str) -> List[Purchase]:
        return [purchase for purchase in self.purchases if purchase.user_id == user_id]
