"""Constants for domain model field names"""

from .principal_fields import PrincipalFields
from .course_fields import CourseFields
from .purchase_fields import PurchaseFields

__all__ = [
    "PrincipalFields",
    "CourseFields",
    "PurchaseFields",
]
