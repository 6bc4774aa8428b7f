# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.purchase_repository import PurchaseRepository
from ....domain.models.purchase import Purchase
from ....utils.ids import is_valid_id, normalize_id
from ...dto.purchase_dto import PurchaseRequest, PurchaseResponse

logger = logging.getLogger(__name__)


class PurchaseCourseUseCase:
    """Use case for recording that a user bought a course"""

    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self.purchase_repository = purchase_repository

    async def execute(self, user_id: str, request: PurchaseRequest) -> PurchaseResponse:
        """
        Record a purchase

        The course is not looked up; a purchase of a course that no longer
        exists simply never shows among the user's courses. Buying the same
        course twice returns the original purchase.

        Args:
            user_id: ID of the buying user (from the session token)
            request: Purchase request with the course ID

        Returns:
            PurchaseResponse with the purchase ID

        Raises:
            ValidationError: If either ID is malformed
        """
        if not is_valid_id(user_id):
            raise ValidationError("Invalid user ID")
        if not is_valid_id(request.course_id):
            raise ValidationError("Invalid course ID")
        # The (user_id, course_id) pair is unique only in canonical form.
        user_id = normalize_id(user_id)
        course_id = normalize_id(request.course_id)

        purchase = await self.purchase_repository.record(
            Purchase(id=None, user_id=user_id, course_id=course_id)
        )
        logger.info(f"User {user_id} purchased course {course_id} (purchase {purchase.id})")

        return PurchaseResponse(message="Course purchased", purchase_id=purchase.id or "")
