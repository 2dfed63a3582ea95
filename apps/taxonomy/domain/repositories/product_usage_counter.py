"""
Read-only view of how products use the taxonomy.
"""
from abc import ABC, abstractmethod
from typing import Dict
from uuid import UUID


class ProductUsageCounter(ABC):
    """Counts live (non-deleted) products per category and per tag."""

    @abstractmethod
    def count_for_category(self, category_id: UUID) -> int:
        pass

    @abstractmethod
    def counts_by_category(self) -> Dict[UUID, int]:
        pass

    @abstractmethod
    def count_for_tag(self, tag_id: UUID) -> int:
        pass

    @abstractmethod
    def counts_by_tag(self) -> Dict[UUID, int]:
        pass
