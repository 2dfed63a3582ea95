"""
Maps database failures onto domain exceptions.
"""
import logging
from contextlib import contextmanager
from typing import Dict, Optional

from django.db import DatabaseError, IntegrityError
from django.db.models import ProtectedError

from shared.domain.exceptions import ConflictError, StorageError

logger = logging.getLogger(__name__)

_UNIQUE_MARKERS = ('unique', 'duplicate key')


def _is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc).lower()
    return any(marker in message for marker in _UNIQUE_MARKERS)


def _conflicting_field(exc: IntegrityError, unique_values: Dict[str, Optional[str]]) -> Optional[str]:
    """
    First field whose name shows up in the constraint or column named by the
    database message. Keys are checked in order.
    """
    message = str(exc).lower()
    for field in unique_values:
        if field in message:
            return field
    return next(iter(unique_values), None)


@contextmanager
def translate_storage_errors(
    entity_name: str,
    label: Optional[str] = None,
    unique_values: Optional[Dict[str, Optional[str]]] = None,
):
    """
    Uniqueness violations become ConflictError, removed-while-referenced
    becomes ConflictError, every other database failure becomes StorageError.

    `unique_values` maps each uniquely constrained field to the value being
    written, so a conflict reports the field that actually collided.
    """
    try:
        yield
    except ProtectedError as exc:
        logger.warning(f"{entity_name} {label or ''} is still referenced: {exc}")
        raise ConflictError(f"{entity_name} is still referenced by other records") from exc
    except IntegrityError as exc:
        if _is_unique_violation(exc):
            unique_values = unique_values or {'name': label}
            field = _conflicting_field(exc, unique_values)
            value = unique_values.get(field, label)
            logger.warning(f"Unique constraint rejected {entity_name} {field} '{value}': {exc}")
            raise ConflictError(
                f"{entity_name} with this {field} '{value}' already exists",
                field=field,
                value=value,
            ) from exc
        logger.error(f"Integrity error while storing {entity_name}: {exc}")
        raise StorageError(f"{entity_name} could not be stored") from exc
    except DatabaseError as exc:
        logger.error(f"Database error while accessing {entity_name}: {exc}")
        raise StorageError(f"{entity_name} storage is unavailable") from exc
