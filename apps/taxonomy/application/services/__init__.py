# Application services
from .taxonomy_service import TaxonomyService

__all__ = ['TaxonomyService']
