"""
Shared pytest fixtures for coursehub tests.
"""
import os
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from coursehub.core.config import Settings
from coursehub.core.security import PasswordHasher, SessionTokenService
from coursehub.di.base_container import BaseContainer
from coursehub.di.container import register_use_cases
from coursehub.di.providers import SecurityProvider
from coursehub.domain.repositories import CourseRepository, PrincipalRepository, PurchaseRepository
from tests.fakes import InMemoryCourseRepository, InMemoryPrincipalRepository, InMemoryPurchaseRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_coursehub",
        "JWT_USER_SECRET": "test_user_signing_key_for_testing_only_0123456789",
        "JWT_ADMIN_SECRET": "test_admin_signing_key_for_testing_only_9876543210",
        "PASSWORD_HASH_ROUNDS": "5",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env):
    return Settings()


@pytest.fixture
def password_hasher(settings):
    return PasswordHasher(rounds=settings.password_hash_rounds)


@pytest.fixture
def token_service(settings):
    return SessionTokenService.from_settings(settings)


@pytest.fixture
def memory_container(settings):
    """Container wired through the real providers, with in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    container.register_singleton(PrincipalRepository, InMemoryPrincipalRepository())
    container.register_singleton(CourseRepository, InMemoryCourseRepository())
    container.register_singleton(PurchaseRepository, InMemoryPurchaseRepository())
    SecurityProvider.register(container)
    register_use_cases(container)
    return container


@pytest.fixture
def client(memory_container):
    """Test client for the full app (lifespan included) on the in-memory container."""
    from coursehub.main import app

    with patch("coursehub.di.container._container", memory_container):
        with TestClient(app) as test_client:
            yield test_client
