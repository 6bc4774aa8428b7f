from .principal import Principal, PrincipalClass
from .course import Course
from .purchase import Purchase

__all__ = ["Principal", "PrincipalClass", "Course", "Purchase"]
