"""
Pytest configuration and fixtures.
"""
import pytest

from apps.taxonomy.application.dtos import CategoryCreateDTO, TagCreateDTO
from apps.taxonomy.application.services import TaxonomyService
from apps.taxonomy.infrastructure.repositories.in_memory import (
    InMemoryCategoryRepository,
    InMemoryProductUsageCounter,
    InMemoryTagRepository,
)


@pytest.fixture
def category_repository():
    return InMemoryCategoryRepository()


@pytest.fixture
def tag_repository():
    return InMemoryTagRepository()


@pytest.fixture
def product_counter():
    return InMemoryProductUsageCounter()


@pytest.fixture
def service(category_repository, tag_repository, product_counter):
    """Taxonomy service over in-memory repositories."""
    return TaxonomyService(
        category_repository=category_repository,
        tag_repository=tag_repository,
        product_counter=product_counter,
    )


@pytest.fixture
def make_category(service):
    """Create a category through the service."""
    def _make(name, parent=None, **details):
        parent_id = parent.id if parent is not None else None
        return service.create_category(CategoryCreateDTO(name=name, parent_id=parent_id, **details))
    return _make


@pytest.fixture
def make_tag(service):
    """Create a tag through the service."""
    def _make(name, category=None, **details):
        category_id = category.id if category is not None else None
        return service.create_tag(TagCreateDTO(name=name, category_id=category_id, **details))
    return _make


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username='admin',
        email='admin@example.com',
        password='testpass123',
        is_staff=True,
    )


@pytest.fixture
def admin_client(api_client, admin_user):
    """Create an API client authenticated as a staff user."""
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def customer_client(api_client, django_user_model):
    """Create an API client authenticated as a non-staff user."""
    user = django_user_model.objects.create_user(
        username='customer',
        email='customer@example.com',
        password='testpass123',
    )
    api_client.force_authenticate(user=user)
    return api_client
