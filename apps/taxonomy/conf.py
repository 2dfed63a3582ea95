"""
Taxonomy settings with defaults.

Projects override any key through the `TAXONOMY` dict in Django settings.
"""
from typing import Any

from django.conf import settings

DEFAULTS = {
    'MAX_CATEGORY_LEVEL': 3,
    'DEFAULT_TAG_COLOR': '#6B7280',
    'UNUSED_TAG_RETENTION_DAYS': 90,
    'SYSTEM_TAGS': [
        {'name': 'New Arrival', 'color': '#10B981', 'description': 'Recently added products'},
        {'name': 'Best Seller', 'color': '#F59E0B', 'description': 'Top selling products'},
        {'name': 'On Sale', 'color': '#EF4444', 'description': 'Discounted products'},
        {'name': 'Featured', 'color': '#3B82F6', 'description': 'Products highlighted by the team'},
    ],
}


def taxonomy_setting(name: str) -> Any:
    """Read a taxonomy setting, falling back to the default."""
    overrides = getattr(settings, 'TAXONOMY', {}) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
