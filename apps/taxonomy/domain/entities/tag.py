"""
Tag entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from shared.domain import AggregateRoot, utc_now
from ..events.tag_events import TagCreated
from ..exceptions import InvalidTaxonomyInputError
from ..field_rules import clean_bool, clean_color, clean_int, clean_name, clean_text
from ..value_objects.slug import Slug
from ..value_objects.tag_scope import TagScope

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
SLUG_MAX_LENGTH = 60
DEFAULT_TAG_COLOR = "#6B7280"


@dataclass
class TagUsage:
    """Usage statistics, recomputed from products."""
    total_products: int = 0
    last_used: datetime = field(default_factory=utc_now)


@dataclass(eq=False, kw_only=True)
class Tag(AggregateRoot):
    """Flat label, global or scoped to one category."""
    name: str
    slug: str = ""
    description: str = ""
    color: str = DEFAULT_TAG_COLOR
    is_active: bool = True
    sort_order: int = 0
    category_id: Optional[UUID] = None
    is_system: bool = False
    metadata: TagUsage = field(default_factory=TagUsage)
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    EDITABLE_FIELDS = (
        'name',
        'slug',
        'description',
        'color',
        'is_active',
        'sort_order',
    )

    @classmethod
    def create(
        cls,
        name: str,
        category_id: Optional[UUID] = None,
        is_system: bool = False,
        created_by: Optional[str] = None,
        **details: Any,
    ) -> 'Tag':
        """Factory method to create a new tag."""
        tag = cls(
            name=clean_name(name, NAME_MIN_LENGTH, NAME_MAX_LENGTH),
            category_id=category_id,
            is_system=bool(is_system),
            created_by=created_by,
            updated_by=created_by,
        )
        tag.apply_changes(details)
        if not tag.slug:
            tag.slug = Slug.from_text(tag.name, SLUG_MAX_LENGTH).value
        tag.add_domain_event(
            TagCreated(
                tag_id=tag.id,
                name=tag.name,
                category_id=category_id,
                is_system=tag.is_system,
            )
        )
        return tag

    @property
    def scope(self) -> TagScope:
        if self.category_id is None:
            return TagScope.GLOBAL
        return TagScope.scoped_to(self.category_id)

    def apply_changes(self, changes: Dict[str, Any], updated_by: Optional[str] = None) -> None:
        """Apply a partial update of plain fields."""
        unknown = sorted(set(changes) - set(self.EDITABLE_FIELDS))
        if unknown:
            raise InvalidTaxonomyInputError(
                f"Unknown tag field(s): {', '.join(unknown)}", field=unknown[0]
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

    def rescope(self, category_id: Optional[UUID]) -> None:
        self.category_id = category_id
        self.touch()

    def record_usage(self, total_products: int) -> None:
        """Store a recomputed product count."""
        if total_products != self.metadata.total_products and total_products > 0:
            self.metadata.last_used = utc_now()
        self.metadata.total_products = total_products

    def _clean(self, name: str, value: Any) -> Any:
        if name == 'name':
            return clean_name(value, NAME_MIN_LENGTH, NAME_MAX_LENGTH)
        if name == 'description':
            return clean_text(value, 200, name)
        if name == 'color':
            return clean_color(value, name, required=True)
        if name == 'sort_order':
            return clean_int(value, name)
        if name == 'is_active':
            return clean_bool(value, name)
        return value
