# Standard library imports
from typing import Annotated, Any, Dict, List, Optional

# External package imports
from pydantic import AfterValidator, Field, StringConstraints

# Local application imports
from ...domain.models.course import Course
from ...utils.ids import is_valid_id, normalize_id
from .base_dto import CamelModel, MessageResponse


def _check_course_id(value: str) -> str:
    if not is_valid_id(value):
        raise ValueError("Invalid course ID")
    return normalize_id(value)


CourseId = Annotated[str, AfterValidator(_check_course_id)]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=200)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=5000)]
ImageUrl = Annotated[str, StringConstraints(max_length=300)]


class CourseCreateRequest(CamelModel):
    """DTO for course creation request"""
    title: Title
    description: Description = ""
    price: float = Field(ge=0, allow_inf_nan=False)
    image_url: ImageUrl = ""


class CourseUpdateRequest(CamelModel):
    """DTO for course update request; any subset of the mutable fields"""
    course_id: CourseId
    title: Optional[Title] = None
    description: Optional[Description] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    image_url: Optional[ImageUrl] = None

    def changes(self) -> Dict[str, Any]:
        """Mutable fields the client actually supplied, keyed by domain field name"""
        return self.model_dump(exclude={"course_id"}, exclude_none=True)


class CourseDeleteRequest(CamelModel):
    """DTO for course deletion request"""
    course_id: CourseId


class CourseResponse(CamelModel):
    """DTO for course response"""
    id: str
    title: str
    description: str
    price: float
    image_url: str
    creator_id: str

    @classmethod
    def from_domain(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id or "",
            title=course.title,
            description=course.description,
            price=course.price,
            image_url=course.image_url,
            creator_id=course.creator_id,
        )


class CourseCreatedResponse(MessageResponse):
    course_id: str


class CourseUpdatedResponse(MessageResponse):
    course: CourseResponse


class CourseDeletedResponse(MessageResponse):
    course_id: str


class CourseListResponse(MessageResponse):
    courses: List[CourseResponse]
