"""
Session token fixtures for HTTP-level tests.
"""
import pytest

from tests.integration.api_helpers import sign_in


@pytest.fixture
def user_token(client):
    return sign_in(client, "user", "learner@example.com")


@pytest.fixture
def admin_token(client):
    return sign_in(client, "admin", "author@example.com")


@pytest.fixture
def other_admin_token(client):
    return sign_in(client, "admin", "rival@example.com")
