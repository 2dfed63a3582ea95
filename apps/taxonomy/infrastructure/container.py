"""
Wiring of the taxonomy service with its Django collaborators.
"""
from django.db import transaction

from ..application.services.taxonomy_service import TaxonomyService
from ..conf import taxonomy_setting
from ..domain.services import CategoryTreeValidator
from .repositories import (
    DjangoCategoryRepository,
    DjangoProductUsageCounter,
    DjangoTagRepository,
)


def get_taxonomy_service() -> TaxonomyService:
    """Build a service backed by the database."""
    return TaxonomyService(
        category_repository=DjangoCategoryRepository(),
        tag_repository=DjangoTagRepository(),
        product_counter=DjangoProductUsageCounter(),
        tree_validator=CategoryTreeValidator(max_level=taxonomy_setting('MAX_CATEGORY_LEVEL')),
        atomic=transaction.atomic,
    )
