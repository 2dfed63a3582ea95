"""
Tag scope value object.
"""
from dataclasses import dataclass
from typing import ClassVar, Optional
from uuid import UUID

from shared.domain import ValueObject


@dataclass(frozen=True)
class TagScope(ValueObject):
    """Either global or bound to a single category."""
    category_id: Optional[UUID] = None

    GLOBAL: ClassVar['TagScope']

    @classmethod
    def scoped_to(cls, category_id: UUID) -> 'TagScope':
        return cls(category_id=category_id)

    @property
    def is_global(self) -> bool:
        return self.category_id is None

    def __str__(self) -> str:
        return "global" if self.is_global else f"category:{self.category_id}"


TagScope.GLOBAL = TagScope()
