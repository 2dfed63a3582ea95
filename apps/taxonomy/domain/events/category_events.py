"""
Category domain events.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CategoryCreated(DomainEvent):
    """Event raised when a new category is created."""
    category_id: UUID
    name: str
    parent_id: Optional[UUID]


@dataclass(frozen=True, kw_only=True)
class CategoryMoved(DomainEvent):
    """Event raised when a category gets a new parent."""
    category_id: UUID
    old_parent_id: Optional[UUID]
    new_parent_id: Optional[UUID]
