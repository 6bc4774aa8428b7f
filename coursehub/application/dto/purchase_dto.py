from typing import List

from .base_dto import CamelModel, MessageResponse
from .course_dto import CourseId, CourseResponse


class PurchaseRequest(CamelModel):
    """DTO for course purchase request; the buyer comes from the session token"""
    course_id: CourseId


class PurchaseResponse(MessageResponse):
    purchase_id: str


class PurchasedCoursesResponse(MessageResponse):
    """DTO for the courses a user owns"""
    courses: List[CourseResponse]
    total_courses: int
