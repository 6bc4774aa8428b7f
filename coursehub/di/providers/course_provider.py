from typing import TYPE_CHECKING
from ...domain.repositories.course_repository import CourseRepository
from ...application.use_cases.course import (
    CreateCourseUseCase,
    UpdateCourseUseCase,
    DeleteCourseUseCase,
    ListOwnedCoursesUseCase,
    ListCatalogUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CourseProvider:
    """Course use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (
            CreateCourseUseCase,
            UpdateCourseUseCase,
            DeleteCourseUseCase,
            ListOwnedCoursesUseCase,
            ListCatalogUseCase,
        ):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    course_repository=container.get(CourseRepository)
                )
            )
