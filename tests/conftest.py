"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest

from apps.categories.domain.entities.category import Category
from apps.categories.domain.repositories.category_gateway import CategoryGateway
from apps.categories.domain.value_objects.category_id import CategoryID

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def gateway_mock():
    """A CategoryGateway double that enforces the real method signatures."""
    return mock.create_autospec(CategoryGateway, instance=True)


@pytest.fixture
def gateway():
    """The Django-backed gateway; tests using it need the django_db mark."""
    from apps.categories.infrastructure.repositories import DjangoCategoryGateway
    return DjangoCategoryGateway()


@pytest.fixture
def category_factory():
    """
    Build categories with deterministic timestamps.

    ``minutes`` shifts created_at/updated_at away from a fixed base time so
    ordering by those columns is predictable.
    """
    def make(name='Movies', description='some description', is_active=True, minutes=0):
        stamp = BASE_TIME + timedelta(minutes=minutes)
        return Category(
            id=CategoryID.generate(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=stamp,
            updated_at=stamp,
            deleted_at=None if is_active else stamp,
        )

    return make
