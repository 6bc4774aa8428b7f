# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from . import __version__
from .api.error_handlers import register_exception_handlers
from .api.v1 import user_router, admin_router, course_router
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories import CourseRepository, PrincipalRepository, PurchaseRepository
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


async def prepare_storage() -> None:
    """
    Create the indexes the ownership and uniqueness rules depend on.

    Email uniqueness per principal class and one purchase per (user, course)
    are enforced by these indexes, so start-up fails if they cannot be made.
    """
    container = get_container()
    for repository_type in (PrincipalRepository, CourseRepository, PurchaseRepository):
        await container.get(repository_type).ensure_indexes()
    logger.info("Storage indexes ensured")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures database indexes on startup and closes the MongoDB client on
    shutdown.
    """
    await prepare_storage()

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="CourseHub API",
        version=__version__,
        description="Course marketplace backend for users and content admins",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(user_router, prefix="/user")
    application.include_router(admin_router, prefix="/admin")
    application.include_router(course_router, prefix="/course")

    return application


# Create application instance
app = create_application()
