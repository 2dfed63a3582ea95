# Value objects
from .slug import Slug, derive_slug
from .tag_scope import TagScope

__all__ = ['Slug', 'derive_slug', 'TagScope']
