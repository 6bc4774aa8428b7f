# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.course_dto import CourseListResponse
from ...application.dto.purchase_dto import PurchaseRequest, PurchaseResponse
from ...application.use_cases.course import ListCatalogUseCase
from ...application.use_cases.purchase import PurchaseCourseUseCase
from ...di.container import get_container
from .dependencies import require_user


router = APIRouter(tags=["courses"])


@router.get("/preview", response_model=CourseListResponse)
async def preview_courses() -> CourseListResponse:
    """Public catalog of all courses; no sign-in required"""
    catalog_use_case = get_container().get(ListCatalogUseCase)
    return await catalog_use_case.execute()


@router.post("/purchase", response_model=PurchaseResponse)
async def purchase_course(
    request: PurchaseRequest,
    user_id: str = Depends(require_user),
) -> PurchaseResponse:
    """
    Purchase a course as the current user

    Args:
        request: Purchase request with the course ID
        user_id: Verified user ID (from dependency)

    Returns:
        PurchaseResponse with the purchase ID
    """
    purchase_use_case = get_container().get(PurchaseCourseUseCase)
    return await purchase_use_case.execute(user_id=user_id, request=request)
