"""
Tag repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.tag import Tag


class TagRepository(ABC):
    """Abstract repository for Tag."""

    @abstractmethod
    def save(self, tag: Tag) -> Tag:
        """Insert or update a tag."""
        pass

    @abstractmethod
    def find_by_id(self, tag_id: UUID) -> Optional[Tag]:
        """Find a tag by ID."""
        pass

    @abstractmethod
    def find_all(self) -> List[Tag]:
        """Return every stored tag, in no particular order."""
        pass

    @abstractmethod
    def count_scoped_to(self, category_id: UUID) -> int:
        """Live count of tags scoped to a category."""
        pass

    @abstractmethod
    def delete(self, tag_id: UUID) -> bool:
        """Delete a tag. Returns False when nothing was deleted."""
        pass
