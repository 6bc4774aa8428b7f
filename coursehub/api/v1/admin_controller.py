# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, SigninRequest, SignupResponse, SigninResponse
from ...application.dto.course_dto import (
    CourseCreateRequest,
    CourseUpdateRequest,
    CourseDeleteRequest,
    CourseCreatedResponse,
    CourseUpdatedResponse,
    CourseDeletedResponse,
    CourseListResponse,
)
from ...application.use_cases.auth import RegisterPrincipalUseCase, AuthenticatePrincipalUseCase
from ...application.use_cases.course import (
    CreateCourseUseCase,
    UpdateCourseUseCase,
    DeleteCourseUseCase,
    ListOwnedCoursesUseCase,
)
from ...domain.models.principal import PrincipalClass
from ...di.container import get_container
from .dependencies import require_admin


router = APIRouter(tags=["admins"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup_admin(request: SignupRequest) -> SignupResponse:
    """Register a new admin"""
    register_use_case = get_container().get(RegisterPrincipalUseCase)
    return await register_use_case.execute(PrincipalClass.ADMIN, request)


@router.post("/signin", response_model=SigninResponse)
async def signin_admin(request: SigninRequest) -> SigninResponse:
    """Authenticate an admin and get an admin session token"""
    signin_use_case = get_container().get(AuthenticatePrincipalUseCase)
    return await signin_use_case.execute(PrincipalClass.ADMIN, request)


@router.post("/course", response_model=CourseCreatedResponse)
async def create_course(
    request: CourseCreateRequest,
    admin_id: str = Depends(require_admin),
) -> CourseCreatedResponse:
    """
    Create a course owned by the current admin

    Args:
        request: Course creation request
        admin_id: Verified admin ID (from dependency)

    Returns:
        CourseCreatedResponse with the new course ID
    """
    create_use_case = get_container().get(CreateCourseUseCase)
    return await create_use_case.execute(request=request, creator_id=admin_id)


@router.put("/course", response_model=CourseUpdatedResponse)
async def update_course(
    request: CourseUpdateRequest,
    admin_id: str = Depends(require_admin),
) -> CourseUpdatedResponse:
    """
    Update a course the current admin created

    Args:
        request: Course ID plus the fields to change
        admin_id: Verified admin ID (from dependency)

    Returns:
        CourseUpdatedResponse with the updated course
    """
    update_use_case = get_container().get(UpdateCourseUseCase)
    return await update_use_case.execute(request=request, creator_id=admin_id)


@router.delete("/course", response_model=CourseDeletedResponse)
async def delete_course(
    request: CourseDeleteRequest,
    admin_id: str = Depends(require_admin),
) -> CourseDeletedResponse:
    """Delete a course the current admin created"""
    delete_use_case = get_container().get(DeleteCourseUseCase)
    return await delete_use_case.execute(request=request, creator_id=admin_id)


@router.get("/course/bulk", response_model=CourseListResponse)
async def list_own_courses(admin_id: str = Depends(require_admin)) -> CourseListResponse:
    """List every course the current admin created"""
    list_use_case = get_container().get(ListOwnedCoursesUseCase)
    return await list_use_case.execute(creator_id=admin_id)
