# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .patch import UNSET, provided_fields

__all__ = ['UseCase', 'UseCaseResult', 'UNSET', 'provided_fields']
