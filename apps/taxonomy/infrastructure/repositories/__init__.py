# Repository implementations
from .django_category_repository import DjangoCategoryRepository
from .django_tag_repository import DjangoTagRepository
from .django_product_usage_counter import DjangoProductUsageCounter

__all__ = ['DjangoCategoryRepository', 'DjangoTagRepository', 'DjangoProductUsageCounter']
