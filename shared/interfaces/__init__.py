# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import AdminListPagination
from .permissions import IsTaxonomyAdmin, actor_id

__all__ = [
    'custom_exception_handler',
    'AdminListPagination',
    'IsTaxonomyAdmin',
    'actor_id',
]
