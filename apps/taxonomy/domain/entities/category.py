"""
Category entity.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..events.category_events import CategoryCreated, CategoryMoved
from ..exceptions import InvalidTaxonomyInputError
from ..field_rules import (
    clean_bool,
    clean_color,
    clean_int,
    clean_keywords,
    clean_name,
    clean_text,
)
from ..value_objects.slug import Slug

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
SLUG_MAX_LENGTH = 120
IMAGE_MAX_LENGTH = 500
ICON_MAX_LENGTH = 100


@dataclass(eq=False, kw_only=True)
class Category(AggregateRoot):
    """
    A node of the category forest.

    `level` and `product_count` are derived values filled in on read; they
    are never persisted and never taken from input.
    """
    name: str
    slug: str = ""
    description: str = ""
    short_description: str = ""
    image: str = ""
    icon: str = ""
    color: Optional[str] = None
    parent_id: Optional[UUID] = None
    sort_order: int = 0
    is_active: bool = True
    is_visible: bool = True
    is_featured: bool = False
    tag_ids: List[UUID] = field(default_factory=list)
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: List[str] = field(default_factory=list)
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    level: int = 0
    product_count: int = 0

    EDITABLE_FIELDS = (
        'name',
        'slug',
        'description',
        'short_description',
        'image',
        'icon',
        'color',
        'sort_order',
        'is_active',
        'is_visible',
        'is_featured',
        'seo_title',
        'seo_description',
        'seo_keywords',
    )

    @classmethod
    def create(
        cls,
        name: str,
        parent_id: Optional[UUID] = None,
        created_by: Optional[str] = None,
        **details: Any,
    ) -> 'Category':
        """Factory method to create a new category."""
        category = cls(
            name=clean_name(name, NAME_MIN_LENGTH, NAME_MAX_LENGTH),
            parent_id=parent_id,
            created_by=created_by,
            updated_by=created_by,
        )
        category.apply_changes(details)
        if not category.slug:
            category.slug = Slug.from_text(category.name, SLUG_MAX_LENGTH).value
        category.add_domain_event(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                parent_id=parent_id,
            )
        )
        return category

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def apply_changes(self, changes: Dict[str, Any], updated_by: Optional[str] = None) -> None:
        """
        Apply a partial update of plain fields.

        A rename re-derives the slug unless the same patch carries one.
        """
        unknown = sorted(set(changes) - set(self.EDITABLE_FIELDS))
        if unknown:
            raise InvalidTaxonomyInputError(
                f"Unknown category field(s): {', '.join(unknown)}", field=unknown[0]
            )

        for name, value in changes.items():
            if name == 'slug':
                continue
            setattr(self, name, self._clean(name, value))

        slug = changes.get('slug')
        if slug:
            self.slug = Slug(value=str(slug).strip(), max_length=SLUG_MAX_LENGTH).value
        elif 'name' in changes:
            self.slug = Slug.from_text(self.name, SLUG_MAX_LENGTH).value

        if updated_by is not None:
            self.updated_by = updated_by
        self.touch()

    def move_to(self, parent_id: Optional[UUID]) -> None:
        """Attach the category under another parent, or make it a root."""
        if parent_id == self.parent_id:
            return
        old_parent_id = self.parent_id
        self.parent_id = parent_id
        self.add_domain_event(
            CategoryMoved(
                category_id=self.id,
                old_parent_id=old_parent_id,
                new_parent_id=parent_id,
            )
        )
        self.touch()

    def assign_tags(self, tag_ids: Iterable[UUID]) -> None:
        """Replace the tag references, dropping duplicates."""
        self.tag_ids = list(dict.fromkeys(tag_ids))
        self.touch()

    def detach_tag(self, tag_id: UUID) -> bool:
        if tag_id not in self.tag_ids:
            return False
        self.tag_ids = [existing for existing in self.tag_ids if existing != tag_id]
        self.touch()
        return True

    def _clean(self, name: str, value: Any) -> Any:
        if name == 'name':
            return clean_name(value, NAME_MIN_LENGTH, NAME_MAX_LENGTH)
        if name == 'description':
            return clean_text(value, 500, name)
        if name == 'short_description':
            return clean_text(value, 200, name)
        if name == 'image':
            return clean_text(value, IMAGE_MAX_LENGTH, name)
        if name == 'icon':
            return clean_text(value, ICON_MAX_LENGTH, name)
        if name == 'color':
            return clean_color(value, name)
        if name == 'sort_order':
            return clean_int(value, name)
        if name in ('is_active', 'is_visible', 'is_featured'):
            return clean_bool(value, name)
        if name == 'seo_title':
            return clean_text(value, 60, name)
        if name == 'seo_description':
            return clean_text(value, 160, name)
        if name == 'seo_keywords':
            return clean_keywords(value, name)
        return value
