"""
Django ORM implementation of ProductUsageCounter.
"""
from typing import Dict
from uuid import UUID

from django.db.models import Count

from shared.infrastructure.persistence import translate_storage_errors
from ...domain.repositories.product_usage_counter import ProductUsageCounter
from ..models.product_model import ProductModel


class DjangoProductUsageCounter(ProductUsageCounter):
    """Counts products that are not soft deleted."""

    def _live(self):
        return ProductModel.objects.filter(deleted_at__isnull=True)

    def count_for_category(self, category_id: UUID) -> int:
        with translate_storage_errors('Product'):
            return self._live().filter(category_id=category_id).count()

    def counts_by_category(self) -> Dict[UUID, int]:
        with translate_storage_errors('Product'):
            rows = (
                self._live()
                .filter(category__isnull=False)
                .values('category_id')
                .annotate(total=Count('id'))
                .order_by()
            )
            return {row['category_id']: row['total'] for row in rows}

    def count_for_tag(self, tag_id: UUID) -> int:
        with translate_storage_errors('Product'):
            return self._live().filter(tags__id=tag_id).count()

    def counts_by_tag(self) -> Dict[UUID, int]:
        with translate_storage_errors('Product'):
            rows = (
                self._live()
                .filter(tags__isnull=False)
                .values('tags')
                .annotate(total=Count('id'))
                .order_by()
            )
            return {row['tags']: row['total'] for row in rows}
