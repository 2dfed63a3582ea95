"""
Tag DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from shared.application import UNSET
from ...domain.entities.tag import Tag, DEFAULT_TAG_COLOR
from ...domain.value_objects.tag_scope import TagScope


@dataclass
class TagCreateDTO:
    """DTO for creating a tag."""
    name: str
    slug: Optional[str] = None
    description: str = ""
    color: str = DEFAULT_TAG_COLOR
    is_active: bool = True
    sort_order: int = 0
    category_id: Optional[UUID] = None
    is_system: bool = False


@dataclass
class TagUpdateDTO:
    """DTO for a partial tag update. Unsent fields stay UNSET."""
    name: Any = UNSET
    slug: Any = UNSET
    description: Any = UNSET
    color: Any = UNSET
    is_active: Any = UNSET
    sort_order: Any = UNSET
    category_id: Any = UNSET


@dataclass
class TagFilterDTO:
    """
    Filters for tag listings.

    `scope` is a category id, `TagScope.GLOBAL` for global tags only, or
    None for every tag.
    """
    scope: Any = None
    include_inactive: bool = False
    search: str = ""


@dataclass
class TagDTO:
    """DTO for tag output."""
    id: UUID
    name: str
    slug: str
    description: str
    color: str
    is_active: bool
    sort_order: int
    category_id: Optional[UUID]
    scope: str
    is_system: bool
    total_products: int
    last_used: datetime
    created_by: Optional[str]
    updated_by: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, tag: Tag) -> 'TagDTO':
        """Create DTO from entity."""
        scope: TagScope = tag.scope
        return cls(
            id=tag.id,
            name=tag.name,
            slug=tag.slug,
            description=tag.description,
            color=tag.color,
            is_active=tag.is_active,
            sort_order=tag.sort_order,
            category_id=tag.category_id,
            scope="global" if scope.is_global else "category",
            is_system=tag.is_system,
            total_products=tag.metadata.total_products,
            last_used=tag.metadata.last_used,
            created_by=tag.created_by,
            updated_by=tag.updated_by,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
