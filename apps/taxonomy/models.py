# Django discovers models through this module.
from .infrastructure.models import CategoryModel, TagModel, ProductModel

__all__ = ['CategoryModel', 'TagModel', 'ProductModel']
