"""
In-memory store implementations.

Used by the test suite and by scripts that need a throwaway taxonomy.
Entities are copied on the way in and on the way out, so callers never hold
a reference into the store. The same uniqueness rules as the database
constraints apply and raise ConflictError.
"""
import copy
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
from uuid import UUID, uuid4

from shared.domain import ConflictError
from ...domain.entities.category import Category
from ...domain.entities.tag import Tag
from ...domain.repositories import CategoryRepository, ProductUsageCounter, TagRepository


def _stored_copy(entity):
    stored = copy.deepcopy(entity)
    stored.clear_domain_events()
    return stored


class InMemoryCategoryRepository(CategoryRepository):
    """Dict backed category repository."""

    def __init__(self):
        self._items: Dict[UUID, Category] = {}

    def save(self, category: Category) -> Category:
        for other in self._items.values():
            if other.id == category.id:
                continue
            if other.name.casefold() == category.name.casefold():
                raise ConflictError(
                    f"Category with name '{category.name}' already exists",
                    field='name',
                    value=category.name,
                )
            if other.slug == category.slug:
                raise ConflictError(
                    f"Category with slug '{category.slug}' already exists",
                    field='slug',
                    value=category.slug,
                )
        stored = _stored_copy(category)
        stored.level = 0
        stored.product_count = 0
        self._items[category.id] = stored
        saved = copy.deepcopy(stored)
        saved.level = category.level
        return saved

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        category = self._items.get(category_id)
        return copy.deepcopy(category) if category else None

    def find_all(self) -> List[Category]:
        return [copy.deepcopy(category) for category in self._items.values()]

    def delete(self, category_id: UUID) -> bool:
        if category_id not in self._items:
            return False
        if any(other.parent_id == category_id for other in self._items.values()):
            raise ConflictError("Category is still referenced by other records")
        del self._items[category_id]
        return True


class InMemoryTagRepository(TagRepository):
    """Dict backed tag repository."""

    def __init__(self):
        self._items: Dict[UUID, Tag] = {}

    def save(self, tag: Tag) -> Tag:
        for other in self._items.values():
            if other.id == tag.id or other.category_id != tag.category_id:
                continue
            if other.name.casefold() == tag.name.casefold():
                raise ConflictError(
                    f"Tag with name '{tag.name}' already exists in scope {tag.scope}",
                    field='name',
                    value=tag.name,
                )
            if other.slug == tag.slug:
                raise ConflictError(
                    f"Tag with slug '{tag.slug}' already exists in scope {tag.scope}",
                    field='slug',
                    value=tag.slug,
                )
        self._items[tag.id] = _stored_copy(tag)
        return copy.deepcopy(self._items[tag.id])

    def find_by_id(self, tag_id: UUID) -> Optional[Tag]:
        tag = self._items.get(tag_id)
        return copy.deepcopy(tag) if tag else None

    def find_all(self) -> List[Tag]:
        return [copy.deepcopy(tag) for tag in self._items.values()]

    def count_scoped_to(self, category_id: UUID) -> int:
        return sum(1 for tag in self._items.values() if tag.category_id == category_id)

    def delete(self, tag_id: UUID) -> bool:
        return self._items.pop(tag_id, None) is not None


@dataclass
class StoredProduct:
    """Just enough of a product to count taxonomy usage."""
    id: UUID = field(default_factory=uuid4)
    category_id: Optional[UUID] = None
    tag_ids: List[UUID] = field(default_factory=list)
    deleted: bool = False


class InMemoryProductUsageCounter(ProductUsageCounter):
    """Counts the products registered with `add_product`."""

    def __init__(self):
        self.products: List[StoredProduct] = []

    def add_product(
        self,
        category_id: Optional[UUID] = None,
        tag_ids: Sequence[UUID] = (),
        deleted: bool = False,
    ) -> StoredProduct:
        product = StoredProduct(category_id=category_id, tag_ids=list(tag_ids), deleted=deleted)
        self.products.append(product)
        return product

    def _live(self) -> List[StoredProduct]:
        return [product for product in self.products if not product.deleted]

    def count_for_category(self, category_id: UUID) -> int:
        return sum(1 for product in self._live() if product.category_id == category_id)

    def counts_by_category(self) -> Dict[UUID, int]:
        counts: Dict[UUID, int] = {}
        for product in self._live():
            if product.category_id is not None:
                counts[product.category_id] = counts.get(product.category_id, 0) + 1
        return counts

    def count_for_tag(self, tag_id: UUID) -> int:
        return sum(1 for product in self._live() if tag_id in product.tag_ids)

    def counts_by_tag(self) -> Dict[UUID, int]:
        counts: Dict[UUID, int] = {}
        for product in self._live():
            for tag_id in set(product.tag_ids):
                counts[tag_id] = counts.get(tag_id, 0) + 1
        return counts
