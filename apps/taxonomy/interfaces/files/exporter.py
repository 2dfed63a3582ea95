"""
Category export in CSV and JSON.
"""
import csv
import io
from datetime import datetime
from typing import Any, Dict, List, Sequence

from ...application.dtos.category_dto import CategoryDTO

CSV_HEADERS = (
    'ID',
    'Name',
    'Slug',
    'Description',
    'Parent Category',
    'Level',
    'Is Active',
    'Sort Order',
    'Image',
    'Icon',
    'Meta Title',
    'Meta Description',
    'Keywords',
    'Created At',
    'Updated At',
)


class CategoryExporter:
    """Writes categories ordered by level, sort order and name."""

    def __init__(self, categories: Sequence[CategoryDTO]):
        self.categories = sorted(
            categories,
            key=lambda c: (c.level, c.sort_order, c.name.casefold(), str(c.id)),
        )

    @staticmethod
    def filename(extension: str, today: datetime) -> str:
        return f"categories-{today.date().isoformat()}.{extension}"

    def to_csv(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
        writer.writerow(CSV_HEADERS)
        for category in self.categories:
            writer.writerow([
                str(category.id),
                category.name,
                category.slug,
                category.description,
                category.parent.name if category.parent else '',
                category.level,
                'Yes' if category.is_active else 'No',
                category.sort_order,
                category.image,
                category.icon,
                category.seo_title,
                category.seo_description,
                ', '.join(category.seo_keywords),
                category.created_at.isoformat(),
                category.updated_at.isoformat(),
            ])
        return buffer.getvalue()

    def to_json(self, serialized: List[Dict[str, Any]], exported_at: datetime) -> Dict[str, Any]:
        """Wrap already serialized categories, keeping the export order."""
        return {
            'categories': serialized,
            'exported_at': exported_at.isoformat(),
            'total': len(serialized),
        }
