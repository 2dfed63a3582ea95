# Domain entities
from .category import Category
from .tag import Tag, TagUsage, DEFAULT_TAG_COLOR

__all__ = ['Category', 'Tag', 'TagUsage', 'DEFAULT_TAG_COLOR']
