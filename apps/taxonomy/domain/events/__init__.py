# Domain events
from .category_events import CategoryCreated, CategoryMoved
from .tag_events import TagCreated

__all__ = ['CategoryCreated', 'CategoryMoved', 'TagCreated']
