# Use cases
from .import_categories import ImportCategoriesUseCase

__all__ = ['ImportCategoriesUseCase']
