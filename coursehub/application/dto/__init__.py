from .base_dto import MessageResponse
from .auth_dto import SignupRequest, SigninRequest, SignupResponse, SigninResponse
from .principal_dto import PrincipalProfile
from .course_dto import (
    CourseCreateRequest,
    CourseUpdateRequest,
    CourseDeleteRequest,
    CourseResponse,
    CourseCreatedResponse,
    CourseUpdatedResponse,
    CourseDeletedResponse,
    CourseListResponse,
)
from .purchase_dto import PurchaseRequest, PurchaseResponse, PurchasedCoursesResponse

__all__ = [
    "MessageResponse",
    "SignupRequest",
    "SigninRequest",
    "SignupResponse",
    "SigninResponse",
    "PrincipalProfile",
    "CourseCreateRequest",
    "CourseUpdateRequest",
    "CourseDeleteRequest",
    "CourseResponse",
    "CourseCreatedResponse",
    "CourseUpdatedResponse",
    "CourseDeletedResponse",
    "CourseListResponse",
    "PurchaseRequest",
    "PurchaseResponse",
    "PurchasedCoursesResponse",
]
