# Repository interfaces
from .category_repository import CategoryRepository
from .tag_repository import TagRepository
from .product_usage_counter import ProductUsageCounter

__all__ = ['CategoryRepository', 'TagRepository', 'ProductUsageCounter']
