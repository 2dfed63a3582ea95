"""
Tag domain events.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class TagCreated(DomainEvent):
    """Event raised when a new tag is created."""
    tag_id: UUID
    name: str
    category_id: Optional[UUID]
    is_system: bool
