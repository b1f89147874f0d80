import pytest
from rest_framework.test import APIClient


@pytest.fixture
def user():
    from users.factories import UserFactory

    return UserFactory().create_user(name="Olivia Organizer", time_zone="America/Sao_Paulo")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def di_container():
    """Fixture to access the DI container wired at app startup."""
    from di_core.containers import container

    return container
