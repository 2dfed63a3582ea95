# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .base_value_object import ValueObject
from .clock import utc_now
from .domain_event import DomainEvent
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    ConflictError,
    BusinessRuleViolationError,
    InvalidOperationError,
    PermissionDeniedError,
    StorageError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'ValueObject',
    'utc_now',
    'DomainEvent',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'ConflictError',
    'BusinessRuleViolationError',
    'InvalidOperationError',
    'PermissionDeniedError',
    'StorageError',
]
