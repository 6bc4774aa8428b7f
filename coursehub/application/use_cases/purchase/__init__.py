from .purchase_course import PurchaseCourseUseCase
from .list_purchased_courses import ListPurchasedCoursesUseCase

__all__ = [
    "PurchaseCourseUseCase",
    "ListPurchasedCoursesUseCase",
]
