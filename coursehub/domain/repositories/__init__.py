from .principal_repository import PrincipalRepository
from .course_repository import CourseRepository
from .purchase_repository import PurchaseRepository

__all__ = ["PrincipalRepository", "CourseRepository", "PurchaseRepository"]
