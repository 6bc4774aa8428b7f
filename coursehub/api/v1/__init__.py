from .user_controller import router as user_router
from .admin_controller import router as admin_router
from .course_controller import router as course_router


__all__ = ["user_router", "admin_router", "course_router"]
