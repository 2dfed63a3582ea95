"""
Structural rules of the category forest.

Every function works on an explicit snapshot of categories handed in by the
caller, so the same validator can be shared between requests.
"""
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence
from uuid import UUID

from ..entities.category import Category
from ..exceptions import (
    CategoryHasChildrenError,
    CategoryHasProductsError,
    CategoryNotFoundError,
    DepthExceededError,
    DuplicateNameError,
    DuplicateSlugError,
    InvalidHierarchyError,
)
from .naming import find_conflict

MAX_LEVEL = 3


class CategoryTreeValidator:
    """Validates parent assignments, deletions and category names."""

    def __init__(self, max_level: int = MAX_LEVEL):
        self.max_level = max_level

    @staticmethod
    def index(categories: Sequence[Category]) -> Dict[UUID, Category]:
        return {category.id: category for category in categories}

    def ancestors(self, category_id: UUID, index: Dict[UUID, Category]) -> List[Category]:
        """Parent first, root last. A missing parent ends the chain."""
        chain: List[Category] = []
        seen = {category_id}
        current = index[category_id].parent_id if category_id in index else None
        while current is not None:
            if current in seen:
                raise InvalidHierarchyError("Category tree contains a cycle")
            node = index.get(current)
            if node is None:
                break
            seen.add(current)
            chain.append(node)
            current = node.parent_id
        return chain

    def resolve_level(self, category_id: UUID, index: Dict[UUID, Category]) -> int:
        return len(self.ancestors(category_id, index))

    def assign_levels(self, categories: Sequence[Category]) -> Dict[UUID, Category]:
        """Fill in the derived `level` of every category in the snapshot."""
        index = self.index(categories)
        for category in categories:
            category.level = self.resolve_level(category.id, index)
        return index

    def subtree_height(self, category_id: UUID, categories: Sequence[Category]) -> int:
        """Number of levels below the category (0 for a leaf)."""
        children: Dict[UUID, List[UUID]] = defaultdict(list)
        for category in categories:
            if category.parent_id is not None:
                children[category.parent_id].append(category.id)

        height = 0
        visited = {category_id}
        frontier = [category_id]
        while frontier:
            next_frontier = []
            for node_id in frontier:
                for child_id in children.get(node_id, ()):
                    if child_id not in visited:
                        visited.add(child_id)
                        next_frontier.append(child_id)
            if not next_frontier:
                break
            height += 1
            frontier = next_frontier
        return height

    def validate_parent_assignment(
        self,
        category_id: Optional[UUID],
        proposed_parent_id: Optional[UUID],
        categories: Sequence[Category],
    ) -> int:
        """
        Check a parent assignment and return the resulting level.

        Rejects self-parenting, unknown parents, moving a category under one
        of its own descendants, and any placement that would push the
        category or the deepest node of its subtree past `max_level`.
        """
        if proposed_parent_id is None:
            return 0
        if category_id is not None and proposed_parent_id == category_id:
            raise InvalidHierarchyError("Category cannot be its own parent")

        index = self.index(categories)
        parent = index.get(proposed_parent_id)
        if parent is None:
            raise CategoryNotFoundError(proposed_parent_id, field="parent_id")

        chain = self.ancestors(parent.id, index)
        if category_id is not None and any(node.id == category_id for node in chain):
            raise InvalidHierarchyError("Category cannot be moved under its own descendant")

        level = len(chain) + 1
        if level > self.max_level:
            raise DepthExceededError(level, self.max_level)

        if category_id is not None and category_id in index:
            deepest = level + self.subtree_height(category_id, categories)
            if deepest > self.max_level:
                raise DepthExceededError(deepest, self.max_level)

        return level

    def validate_deletable(
        self,
        category_id: UUID,
        categories: Sequence[Category],
        product_count_for_category: Callable[[UUID], int],
    ) -> None:
        children = sum(1 for category in categories if category.parent_id == category_id)
        if children:
            raise CategoryHasChildrenError(category_id, children)

        products = product_count_for_category(category_id)
        if products > 0:
            raise CategoryHasProductsError(category_id, products)

    def validate_name_unique(
        self,
        name: str,
        excluding_id: Optional[UUID],
        categories: Sequence[Category],
    ) -> None:
        if find_conflict(name, categories, key=lambda c: c.name, excluding_id=excluding_id):
            raise DuplicateNameError("Category", name)

    def validate_slug_unique(
        self,
        slug: str,
        excluding_id: Optional[UUID],
        categories: Sequence[Category],
    ) -> None:
        if find_conflict(slug, categories, key=lambda c: c.slug, excluding_id=excluding_id):
            raise DuplicateSlugError("Category", slug)
