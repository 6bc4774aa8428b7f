# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, SigninRequest, SignupResponse, SigninResponse
from ...application.dto.purchase_dto import PurchasedCoursesResponse
from ...application.use_cases.auth import RegisterPrincipalUseCase, AuthenticatePrincipalUseCase
from ...application.use_cases.purchase import ListPurchasedCoursesUseCase
from ...domain.models.principal import PrincipalClass
from ...di.container import get_container
from .dependencies import require_user


router = APIRouter(tags=["users"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup_user(request: SignupRequest) -> SignupResponse:
    """Register a new user"""
    register_use_case = get_container().get(RegisterPrincipalUseCase)
    return await register_use_case.execute(PrincipalClass.USER, request)


@router.post("/signin", response_model=SigninResponse)
async def signin_user(request: SigninRequest) -> SigninResponse:
    """Authenticate a user and get a user session token"""
    signin_use_case = get_container().get(AuthenticatePrincipalUseCase)
    return await signin_use_case.execute(PrincipalClass.USER, request)


@router.get("/purchases", response_model=PurchasedCoursesResponse)
async def list_purchases(user_id: str = Depends(require_user)) -> PurchasedCoursesResponse:
    """
    List the courses the current user has purchased

    Args:
        user_id: Verified user ID (from dependency)

    Returns:
        PurchasedCoursesResponse, with an empty list when nothing was bought
    """
    list_use_case = get_container().get(ListPurchasedCoursesUseCase)
    return await list_use_case.execute(user_id)
