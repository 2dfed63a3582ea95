"""
Parsing of category import files.

CSV files use the export headers; JSON files hold either a list of objects,
a single object, or an object with a `categories` list. Every row comes out
keyed by category field names, with blank cells dropped.
"""
import csv
import io
import json
import logging
import re
from typing import Any, Dict, List

from ...domain.exceptions import InvalidTaxonomyInputError

logger = logging.getLogger(__name__)

# Normalized header (lowercase, letters and digits only) -> row key.
COLUMN_MAP = {
    'name': 'name',
    'slug': 'slug',
    'description': 'description',
    'shortdescription': 'short_description',
    'parent': 'parent',
    'parentcategory': 'parent',
    'parentid': 'parent',
    'image': 'image',
    'icon': 'icon',
    'color': 'color',
    'sortorder': 'sort_order',
    'isactive': 'is_active',
    'isvisible': 'is_visible',
    'isfeatured': 'is_featured',
    'metatitle': 'seo_title',
    'seotitle': 'seo_title',
    'metadescription': 'seo_description',
    'seodescription': 'seo_description',
    'keywords': 'seo_keywords',
    'seokeywords': 'seo_keywords',
}

BOOLEAN_FIELDS = ('is_active', 'is_visible', 'is_featured')
INTEGER_FIELDS = ('sort_order',)
TRUE_VALUES = ('yes', 'true', '1')
FALSE_VALUES = ('no', 'false', '0')


def _normalize_header(header: str) -> str:
    return re.sub(r'[^a-z0-9]', '', str(header).lower())


class CategoryFileParser:
    """Turns an uploaded CSV or JSON file into import rows."""

    SUPPORTED_EXTENSIONS = ('.csv', '.json')

    def parse(self, filename: str, content: bytes) -> List[Dict[str, Any]]:
        name = (filename or '').lower()
        try:
            text = content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise InvalidTaxonomyInputError("File must be UTF-8 encoded", field='file') from e

        if name.endswith('.csv'):
            records = self._read_csv(text)
        elif name.endswith('.json'):
            records = self._read_json(text)
        else:
            raise InvalidTaxonomyInputError(
                "Unsupported file type. Use a .csv or .json file", field='file'
            )

        rows = [self._to_row(record) for record in records]
        logger.info(f"Parsed {len(rows)} row(s) from {filename}")
        return rows

    def _read_csv(self, text: str) -> List[Dict[str, Any]]:
        reader = csv.DictReader(io.StringIO(text))
        if not reader.fieldnames:
            raise InvalidTaxonomyInputError("CSV file has no header row", field='file')
        return [
            record for record in reader
            if any((value or '').strip() for value in record.values() if isinstance(value, str))
        ]

    def _read_json(self, text: str) -> List[Dict[str, Any]]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidTaxonomyInputError(f"Invalid JSON: {e.msg}", field='file') from e

        if isinstance(data, dict):
            data = data.get('categories', [data])
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise InvalidTaxonomyInputError(
                "JSON file must contain a category object or a list of them", field='file'
            )
        return data

    def _to_row(self, record: Dict[str, Any]) -> Dict[str, Any]:
        row: Dict[str, Any] = {}
        for header, value in record.items():
            if header is None:
                continue
            key = COLUMN_MAP.get(_normalize_header(header))
            if key is None:
                continue
            if isinstance(value, str):
                value = value.strip()
            if value in (None, ''):
                continue
            row[key] = self._coerce(key, value)
        return row

    def _coerce(self, key: str, value: Any) -> Any:
        if key in BOOLEAN_FIELDS and isinstance(value, str):
            lowered = value.lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
        if key in INTEGER_FIELDS and isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return value
        if key == 'parent' and not isinstance(value, str):
            return str(value)
        return value
