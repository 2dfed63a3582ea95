# ORM models
from .category_model import CategoryModel
from .tag_model import TagModel
from .product_model import ProductModel

__all__ = ['CategoryModel', 'TagModel', 'ProductModel']
