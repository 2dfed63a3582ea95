"""
Field-level rules shared by categories and tags.
"""
import re
from typing import Iterable, List, Optional

from .exceptions import InvalidTaxonomyInputError

HEX_COLOR = re.compile(r'^#[0-9A-Fa-f]{6}$')


def clean_name(value, min_length: int, max_length: int, field: str = "name") -> str:
    if not isinstance(value, str):
        raise InvalidTaxonomyInputError("Name is required", field=field)
    name = value.strip()
    if len(name) < min_length:
        raise InvalidTaxonomyInputError(
            f"Name must be at least {min_length} characters", field=field
        )
    if len(name) > max_length:
        raise InvalidTaxonomyInputError(
            f"Name cannot exceed {max_length} characters", field=field
        )
    return name


def clean_text(value, max_length: Optional[int], field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidTaxonomyInputError(f"{field} must be a string", field=field)
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise InvalidTaxonomyInputError(
            f"{field} cannot exceed {max_length} characters", field=field
        )
    return text


def clean_color(value, field: str = "color", required: bool = False) -> Optional[str]:
    if value in (None, ""):
        if required:
            raise InvalidTaxonomyInputError("Color is required", field=field)
        return None
    if not isinstance(value, str) or not HEX_COLOR.match(value.strip()):
        raise InvalidTaxonomyInputError(
            "Color must be a valid hex color code", field=field
        )
    return value.strip().upper()


def clean_int(value, field: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTaxonomyInputError(f"{field} must be an integer", field=field)
    return value


def clean_bool(value, field: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidTaxonomyInputError(f"{field} must be a boolean", field=field)
    return value


def clean_keywords(values: Optional[Iterable[str]], field: str = "seo_keywords") -> List[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(',')
    keywords = []
    for keyword in values:
        if not isinstance(keyword, str):
            raise InvalidTaxonomyInputError("Keywords must be strings", field=field)
        keyword = keyword.strip()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
    return keywords
