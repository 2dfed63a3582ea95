"""
Category DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from shared.application import UNSET
from ...domain.entities.category import Category


@dataclass
class CategoryCreateDTO:
    """DTO for creating a category."""
    name: str
    slug: Optional[str] = None
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


@dataclass
class CategoryUpdateDTO:
    """DTO for a partial category update. Unsent fields stay UNSET."""
    name: Any = UNSET
    slug: Any = UNSET
    description: Any = UNSET
    short_description: Any = UNSET
    image: Any = UNSET
    icon: Any = UNSET
    color: Any = UNSET
    parent_id: Any = UNSET
    sort_order: Any = UNSET
    is_active: Any = UNSET
    is_visible: Any = UNSET
    is_featured: Any = UNSET
    tag_ids: Any = UNSET
    seo_title: Any = UNSET
    seo_description: Any = UNSET
    seo_keywords: Any = UNSET


@dataclass
class CategoryFilterDTO:
    """Filters and ordering for category listings."""
    parent_id: Optional[UUID] = None
    root_only: bool = False
    level: Optional[int] = None
    search: str = ""
    include_inactive: bool = False
    sort_by: Optional[str] = None
    sort_direction: str = "asc"


@dataclass
class CategoryRefDTO:
    """Minimal reference to a parent category."""
    id: UUID
    name: str


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: UUID
    name: str
    slug: str
    description: str
    short_description: str
    image: str
    icon: str
    color: Optional[str]
    parent: Optional[CategoryRefDTO]
    level: int
    sort_order: int
    is_active: bool
    is_visible: bool
    is_featured: bool
    tag_ids: List[UUID]
    seo_title: str
    seo_description: str
    seo_keywords: List[str]
    product_count: int
    created_by: Optional[str]
    updated_by: Optional[str]
    created_at: datetime
    updated_at: datetime

    @property
    def parent_id(self) -> Optional[UUID]:
        return self.parent.id if self.parent else None

    @classmethod
    def from_entity(cls, category: Category, parent: Optional[Category] = None) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            short_description=category.short_description,
            image=category.image,
            icon=category.icon,
            color=category.color,
            parent=CategoryRefDTO(id=parent.id, name=parent.name) if parent else None,
            level=category.level,
            sort_order=category.sort_order,
            is_active=category.is_active,
            is_visible=category.is_visible,
            is_featured=category.is_featured,
            tag_ids=list(category.tag_ids),
            seo_title=category.seo_title,
            seo_description=category.seo_description,
            seo_keywords=list(category.seo_keywords),
            product_count=category.product_count,
            created_by=category.created_by,
            updated_by=category.updated_by,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
