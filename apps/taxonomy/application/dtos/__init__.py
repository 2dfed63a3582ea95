# Application DTOs
from .category_dto import (
    CategoryCreateDTO,
    CategoryUpdateDTO,
    CategoryFilterDTO,
    CategoryRefDTO,
    CategoryDTO,
)
from .tag_dto import TagCreateDTO, TagUpdateDTO, TagFilterDTO, TagDTO
from .import_dto import ImportRowOutcome, ImportReport, ImportCategoriesDTO

__all__ = [
    'CategoryCreateDTO',
    'CategoryUpdateDTO',
    'CategoryFilterDTO',
    'CategoryRefDTO',
    'CategoryDTO',
    'TagCreateDTO',
    'TagUpdateDTO',
    'TagFilterDTO',
    'TagDTO',
    'ImportRowOutcome',
    'ImportReport',
    'ImportCategoriesDTO',
]
