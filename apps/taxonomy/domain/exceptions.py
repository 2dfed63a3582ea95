"""
Taxonomy domain exceptions.
"""
from shared.domain.exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    EntityNotFoundError,
    InvalidOperationError,
    PermissionDeniedError,
    StorageError,
    ValidationError,
)


class InvalidTaxonomyInputError(ValidationError):
    """Raised when a category or tag field fails validation."""

    def __init__(self, message: str, field: str):
        super().__init__(message=message, field=field)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id, field: str = None):
        super().__init__(entity_name="Category", entity_id=str(category_id), field=field)
        self.category_id = category_id


class TagNotFoundError(EntityNotFoundError):
    """Raised when a tag is not found."""

    def __init__(self, tag_id, field: str = None):
        super().__init__(entity_name="Tag", entity_id=str(tag_id), field=field)
        self.tag_id = tag_id


class DuplicateNameError(ConflictError):
    """Raised when a name is already taken within its uniqueness scope."""

    def __init__(self, entity_name: str, name: str):
        super().__init__(
            message=f"{entity_name} with name '{name}' already exists",
            field="name",
            value=name,
        )
        self.entity_name = entity_name


class DuplicateSlugError(ConflictError):
    """Raised when a slug is already taken within its uniqueness scope."""

    def __init__(self, entity_name: str, slug: str):
        super().__init__(
            message=f"{entity_name} with slug '{slug}' already exists",
            field="slug",
            value=slug,
        )
        self.entity_name = entity_name


class InvalidHierarchyError(BusinessRuleViolationError):
    """Raised when a parent assignment would break the tree shape."""

    def __init__(self, message: str):
        super().__init__(message=message, rule="hierarchy", code="INVALID_HIERARCHY")


class DepthExceededError(BusinessRuleViolationError):
    """Raised when a write would push a category below the maximum level."""

    def __init__(self, level: int, max_level: int):
        super().__init__(
            message=f"Category level {level} exceeds the maximum depth of {max_level}",
            rule="max_depth",
            code="DEPTH_EXCEEDED",
        )
        self.level = level
        self.max_level = max_level


class CategoryHasChildrenError(InvalidOperationError):
    """Raised when deleting a category that still has subcategories."""

    def __init__(self, category_id, children: int):
        super().__init__(
            message=f"Cannot delete category with subcategories ({children})",
            operation="delete",
            state="has_children",
            code="HAS_CHILDREN",
        )
        self.category_id = category_id
        self.children = children


class CategoryHasProductsError(InvalidOperationError):
    """Raised when deleting a category that products still reference."""

    def __init__(self, category_id, products: int):
        super().__init__(
            message=f"Cannot delete category used by {products} product(s)",
            operation="delete",
            state="has_products",
            code="HAS_PRODUCTS",
        )
        self.category_id = category_id
        self.products = products


class CategoryHasTagsError(InvalidOperationError):
    """Raised when deleting a category that still scopes tags."""

    def __init__(self, category_id, tags: int):
        super().__init__(
            message=f"Cannot delete category that scopes {tags} tag(s)",
            operation="delete",
            state="has_tags",
            code="HAS_TAGS",
        )
        self.category_id = category_id
        self.tags = tags


class TagInUseError(InvalidOperationError):
    """Raised when deleting a tag that products still carry."""

    def __init__(self, tag_id, products: int):
        super().__init__(
            message=(
                f"Cannot delete tag. It is currently being used by {products} product(s). "
                "Please remove the tag from all products first."
            ),
            operation="delete",
            state="in_use",
            code="HAS_PRODUCTS",
        )
        self.tag_id = tag_id
        self.products = products


class SystemTagProtectedError(PermissionDeniedError):
    """Raised on any attempt to modify or delete a system tag."""

    def __init__(self, tag_id):
        super().__init__(message="System tag cannot be modified", code="SYSTEM_TAG_PROTECTED")
        self.tag_id = tag_id


__all__ = [
    'InvalidTaxonomyInputError',
    'CategoryNotFoundError',
    'TagNotFoundError',
    'DuplicateNameError',
    'DuplicateSlugError',
    'InvalidHierarchyError',
    'DepthExceededError',
    'CategoryHasChildrenError',
    'CategoryHasProductsError',
    'CategoryHasTagsError',
    'TagInUseError',
    'SystemTagProtectedError',
    'StorageError',
]
