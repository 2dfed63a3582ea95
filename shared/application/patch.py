"""
Partial-update helpers for DTOs.
"""
from dataclasses import fields
from typing import Any, Dict


class _Unset:
    """Marks a DTO field the caller did not send."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'UNSET'


UNSET: Any = _Unset()


def provided_fields(dto: Any) -> Dict[str, Any]:
    """Fields of a dataclass DTO that were explicitly given."""
    return {
        f.name: getattr(dto, f.name)
        for f in fields(dto)
        if getattr(dto, f.name) is not UNSET
    }
