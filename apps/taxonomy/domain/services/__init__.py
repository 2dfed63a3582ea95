# Domain services
from .naming import find_conflict, normalize_name
from .category_tree_validator import CategoryTreeValidator, MAX_LEVEL
from .tag_scope_resolver import TagScopeResolver
from .tree_assembler import TreeAssembler, TreeNode

__all__ = [
    'find_conflict',
    'normalize_name',
    'CategoryTreeValidator',
    'MAX_LEVEL',
    'TagScopeResolver',
    'TreeAssembler',
    'TreeNode',
]
