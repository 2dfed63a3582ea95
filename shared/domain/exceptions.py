"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, field: str = None):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code="NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.field = field


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainException):
    """Raised when a write collides with an existing record."""

    def __init__(self, message: str, field: str = None, value: str = None):
        super().__init__(message=message, code="CONFLICT")
        self.field = field
        self.value = value


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None, code: str = None):
        super().__init__(message=message, code=code or "BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None, code: str = None):
        super().__init__(message=message, code=code or "INVALID_OPERATION")
        self.operation = operation
        self.state = state


class PermissionDeniedError(DomainException):
    """Raised when a record may not be touched regardless of caller."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message=message, code=code or "FORBIDDEN")


class StorageError(DomainException):
    """Raised when the persistence layer fails for reasons other than validation."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message=message, code="STORAGE_ERROR")
