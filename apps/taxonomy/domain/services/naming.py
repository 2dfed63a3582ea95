"""
Name normalization and uniqueness lookup shared by categories and tags.
"""
from typing import Callable, Iterable, Optional, TypeVar
from uuid import UUID

T = TypeVar('T')


def normalize_name(name: str) -> str:
    """Case-insensitive comparison key for names."""
    return (name or '').strip().casefold()


def find_conflict(
    value: str,
    candidates: Iterable[T],
    key: Callable[[T], str],
    excluding_id: Optional[UUID] = None,
    normalize: Callable[[str], str] = normalize_name,
) -> Optional[T]:
    """
    Return the first candidate whose key matches value after normalization.

    The candidate carrying `excluding_id` is skipped so that a record can
    keep its own name on update.
    """
    target = normalize(value)
    for candidate in candidates:
        if excluding_id is not None and getattr(candidate, 'id', None) == excluding_id:
            continue
        if normalize(key(candidate)) == target:
            return candidate
    return None
