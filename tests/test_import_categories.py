"""
Bulk import tests.
"""
import pytest

from apps.taxonomy.application.dtos import CategoryFilterDTO, ImportCategoriesDTO
from apps.taxonomy.application.use_cases import ImportCategoriesUseCase


@pytest.fixture
def import_categories(service):
    def _run(rows, update_existing=False):
        use_case = ImportCategoriesUseCase(taxonomy_service=service, actor='7')
        result = use_case.execute(ImportCategoriesDTO(rows=rows, update_existing=update_existing))
        assert result.success
        return result.data
    return _run


def statuses(report):
    return [(outcome.row, outcome.status) for outcome in report.rows]


def test_rows_are_created_in_file_order(service, import_categories):
    report = import_categories([
        {'name': 'Electronics'},
        {'name': 'Laptops', 'parent': 'electronics'},
        {'name': 'Gaming Laptops', 'parent': 'Laptops', 'sort_order': 2},
    ])

    assert statuses(report) == [(1, 'created'), (2, 'created'), (3, 'created')]
    levels = {c.name: c.level for c in service.list_categories()}
    assert levels == {'Electronics': 0, 'Laptops': 1, 'Gaming Laptops': 2}
    assert all(c.created_by == '7' for c in service.list_categories())


def test_existing_rows_are_skipped_by_default(make_category, import_categories):
    make_category('Books', description='Printed')

    report = import_categories([{'name': 'books', 'description': 'Imported'}])

    assert statuses(report) == [(1, 'skipped')]
    assert report.rows[0].reason == 'Category already exists'


def test_existing_rows_are_updated_on_request(service, make_category, import_categories):
    books = make_category('Books', description='Printed')

    report = import_categories([{'name': 'Books', 'description': 'Imported'}], update_existing=True)

    assert statuses(report) == [(1, 'updated')]
    assert service.get_category(books.id).description == 'Imported'


def test_errors_are_reported_per_row(service, import_categories):
    report = import_categories([
        {'description': 'No name'},
        {'name': 'Orphan', 'parent': 'Missing Parent'},
        {'name': 'Valid'},
        {'name': 'Bad Color', 'color': 'blue'},
    ])

    assert statuses(report) == [(1, 'error'), (2, 'error'), (3, 'created'), (4, 'error')]
    assert report.rows[0].reason == 'Name is required'
    assert 'Missing Parent' in report.rows[1].reason
    assert report.totals == {'total': 4, 'created': 1, 'updated': 0, 'skipped': 0, 'error': 3}
    assert [c.name for c in service.list_categories(CategoryFilterDTO(include_inactive=True))] == ['Valid']


def test_depth_rules_apply_to_imports(import_categories):
    report = import_categories([
        {'name': 'Level Zero'},
        {'name': 'Level One', 'parent': 'Level Zero'},
        {'name': 'Level Two', 'parent': 'Level One'},
        {'name': 'Level Three', 'parent': 'Level Two'},
        {'name': 'Level Four', 'parent': 'Level Three'},
    ])

    assert report.rows[-1].status == 'error'
    assert report.totals['created'] == 4


def test_parent_by_id(service, make_category, import_categories):
    parent = make_category('Garden')

    import_categories([{'name': 'Tools', 'parent': str(parent.id)}])

    tools = service.list_categories(CategoryFilterDTO(parent_id=parent.id))
    assert [c.name for c in tools] == ['Tools']
