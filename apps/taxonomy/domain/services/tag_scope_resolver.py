"""
Tag scoping and system tag protection.
"""
from typing import Dict, Iterable, List, Optional, Sequence
from uuid import UUID

from ..entities.tag import Tag
from ..exceptions import (
    DuplicateNameError,
    DuplicateSlugError,
    InvalidTaxonomyInputError,
    SystemTagProtectedError,
    TagNotFoundError,
)
from ..value_objects.tag_scope import TagScope
from .naming import find_conflict


class TagScopeResolver:
    """Uniqueness within scope, scope resolution and the system tag guard."""

    def resolve_effective_scope(self, tag: Tag) -> TagScope:
        if tag.category_id is None:
            return TagScope.GLOBAL
        return TagScope.scoped_to(tag.category_id)

    def _usable_from(self, tag: Tag, allowed: set) -> bool:
        scope = self.resolve_effective_scope(tag)
        return scope.is_global or scope.category_id in allowed

    def guard_mutable(self, tag: Tag) -> None:
        if tag.is_system:
            raise SystemTagProtectedError(tag.id)

    def _same_scope(self, category_scope: Optional[UUID], tags: Sequence[Tag]) -> List[Tag]:
        return [tag for tag in tags if tag.category_id == category_scope]

    def validate_name_unique_in_scope(
        self,
        name: str,
        category_scope: Optional[UUID],
        excluding_id: Optional[UUID],
        tags: Sequence[Tag],
    ) -> None:
        candidates = self._same_scope(category_scope, tags)
        if find_conflict(name, candidates, key=lambda t: t.name, excluding_id=excluding_id):
            raise DuplicateNameError("Tag", name)

    def validate_slug_unique_in_scope(
        self,
        slug: str,
        category_scope: Optional[UUID],
        excluding_id: Optional[UUID],
        tags: Sequence[Tag],
    ) -> None:
        candidates = self._same_scope(category_scope, tags)
        if find_conflict(slug, candidates, key=lambda t: t.slug, excluding_id=excluding_id):
            raise DuplicateSlugError("Tag", slug)

    def tags_available_for(
        self,
        category_id: UUID,
        ancestor_ids: Iterable[UUID],
        tags: Sequence[Tag],
    ) -> List[Tag]:
        """Global tags plus tags scoped to the category or one of its ancestors."""
        allowed = {category_id, *ancestor_ids}
        return [tag for tag in tags if self._usable_from(tag, allowed)]

    def validate_assignable(
        self,
        tag_ids: Iterable[UUID],
        category_id: UUID,
        ancestor_ids: Iterable[UUID],
        tags_by_id: Dict[UUID, Tag],
    ) -> None:
        """Every referenced tag must exist and be usable from the category."""
        allowed = {category_id, *ancestor_ids}
        for tag_id in tag_ids:
            tag = tags_by_id.get(tag_id)
            if tag is None:
                raise TagNotFoundError(tag_id, field="tag_ids")
            if not self._usable_from(tag, allowed):
                raise InvalidTaxonomyInputError(
                    f"Tag '{tag.name}' is scoped to another category",
                    field="tag_ids",
                )
