from .create_course import CreateCourseUseCase
from .update_course import UpdateCourseUseCase
from .delete_course import DeleteCourseUseCase
from .list_owned_courses import ListOwnedCoursesUseCase
from .list_catalog import ListCatalogUseCase

__all__ = [
    "CreateCourseUseCase",
    "UpdateCourseUseCase",
    "DeleteCourseUseCase",
    "ListOwnedCoursesUseCase",
    "ListCatalogUseCase",
]
