"""
Management command tests.
"""
from io import StringIO

import pytest
from django.core.management import call_command

from apps.taxonomy.infrastructure.models import ProductModel, TagModel

pytestmark = pytest.mark.django_db


def test_seed_system_tags_is_idempotent(settings):
    settings.TAXONOMY = {
        'SYSTEM_TAGS': [
            {'name': 'New Arrival', 'color': '#10B981'},
            {'name': 'On Sale'},
        ],
    }

    out = StringIO()
    call_command('seed_system_tags', stdout=out)
    call_command('seed_system_tags', stdout=out)

    assert TagModel.objects.filter(is_system=True).count() == 2
    assert TagModel.objects.get(name='On Sale').color == '#6B7280'
    assert '0 created, 2 already present' in out.getvalue()


def test_refresh_tag_usage(settings):
    settings.TAXONOMY = {'SYSTEM_TAGS': [{'name': 'Featured'}]}
    call_command('seed_system_tags', stdout=StringIO())
    tag = TagModel.objects.get(name='Featured')
    product = ProductModel.objects.create(name='Widget')
    product.tags.add(tag)

    out = StringIO()
    call_command('refresh_tag_usage', '--cleanup', stdout=out)

    tag.refresh_from_db()
    assert tag.total_products == 1
    assert 'Updated usage counts for 1 tag(s).' in out.getvalue()
    assert 'Removed 0 unused tag(s)' in out.getvalue()
