"""
Import file parsing and export tests.
"""
import csv
import io
import json
from datetime import datetime, timezone

import pytest

from apps.taxonomy.application.dtos import CategoryFilterDTO
from apps.taxonomy.domain.exceptions import InvalidTaxonomyInputError
from apps.taxonomy.interfaces.files import CategoryExporter, CategoryFileParser


@pytest.fixture
def parser():
    return CategoryFileParser()


class TestParser:
    def test_csv_with_export_headers(self, parser):
        content = (
            '"ID","Name","Slug","Parent Category","Level","Is Active","Sort Order","Keywords"\n'
            '"","Phones","","Electronics","1","No","4","mobile, smart"\n'
        ).encode('utf-8')

        rows = parser.parse('categories.csv', content)

        assert rows == [{
            'name': 'Phones',
            'parent': 'Electronics',
            'is_active': False,
            'sort_order': 4,
            'seo_keywords': 'mobile, smart',
        }]

    def test_csv_skips_blank_lines(self, parser):
        content = 'Name,Description\nBooks,Paper\n,\n'.encode('utf-8')
        assert parser.parse('books.CSV', content) == [{'name': 'Books', 'description': 'Paper'}]

    def test_json_list_with_camel_case_keys(self, parser):
        content = json.dumps([
            {'name': 'Books', 'parentCategory': None, 'isActive': True, 'sortOrder': 2},
        ]).encode('utf-8')

        assert parser.parse('import.json', content) == [
            {'name': 'Books', 'is_active': True, 'sort_order': 2}
        ]

    def test_json_object_with_categories(self, parser):
        content = json.dumps({'categories': [{'name': 'Books'}, {'name': 'Music'}]}).encode('utf-8')
        assert [row['name'] for row in parser.parse('import.json', content)] == ['Books', 'Music']

    def test_invalid_json(self, parser):
        with pytest.raises(InvalidTaxonomyInputError) as exc_info:
            parser.parse('import.json', b'{not json')
        assert exc_info.value.field == 'file'

    def test_unsupported_extension(self, parser):
        with pytest.raises(InvalidTaxonomyInputError):
            parser.parse('import.xlsx', b'irrelevant')

    def test_uncoercible_values_are_passed_through(self, parser):
        rows = parser.parse('c.csv', b'Name,Sort Order,Is Active\nBooks,first,maybe\n')
        assert rows == [{'name': 'Books', 'sort_order': 'first', 'is_active': 'maybe'}]


class TestExporter:
    def test_csv_columns_and_order(self, service, make_category):
        electronics = make_category('Electronics', sort_order=1)
        make_category('Phones', electronics, seo_keywords=['mobile', 'smart'])
        make_category('Appliances', sort_order=1, is_active=False)

        categories = service.list_categories(CategoryFilterDTO(include_inactive=True))
        text = CategoryExporter(categories).to_csv()
        rows = list(csv.reader(io.StringIO(text)))

        assert rows[0][:5] == ['ID', 'Name', 'Slug', 'Description', 'Parent Category']
        assert [row[1] for row in rows[1:]] == ['Appliances', 'Electronics', 'Phones']
        phones = rows[3]
        assert phones[4] == 'Electronics'
        assert phones[5] == '1'
        assert phones[6] == 'Yes'
        assert phones[12] == 'mobile, smart'
        assert rows[1][6] == 'No'

    def test_exported_csv_can_be_parsed_back(self, service, make_category, parser):
        electronics = make_category('Electronics')
        make_category('Phones', electronics)

        text = CategoryExporter(service.list_categories()).to_csv()
        rows = parser.parse('export.csv', text.encode('utf-8'))

        assert [(row['name'], row.get('parent')) for row in rows] == [
            ('Electronics', None),
            ('Phones', 'Electronics'),
        ]

    def test_filename_and_json_envelope(self):
        exported_at = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        exporter = CategoryExporter([])

        assert exporter.filename('csv', exported_at) == 'categories-2026-03-01.csv'
        assert exporter.to_json([], exported_at) == {
            'categories': [],
            'exported_at': '2026-03-01T12:00:00+00:00',
            'total': 0,
        }
