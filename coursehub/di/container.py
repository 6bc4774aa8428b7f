# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    CourseProvider,
    DatabaseProvider,
    PurchaseProvider,
    RepositoryProvider,
    SecurityProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings (the one configuration value)
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Security services (SecurityProvider) - depends on settings
    5. Use cases (Auth, Course, Purchase) - depend on repositories and security
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        self.register_singleton(Settings, self.settings)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        SecurityProvider.register(self)

        register_use_cases(self)


def register_use_cases(container: BaseContainer) -> None:
    """Register every use case; repositories and security services must already be present"""
    AuthProvider.register(container)
    CourseProvider.register(container)
    PurchaseProvider.register(container)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        Container with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
