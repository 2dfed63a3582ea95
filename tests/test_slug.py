"""
Slug derivation tests.
"""
import pytest

from apps.taxonomy.domain.exceptions import InvalidTaxonomyInputError
from apps.taxonomy.domain.value_objects import Slug, derive_slug


@pytest.mark.parametrize(
    'text, expected',
    [
        ('Home & Garden', 'home-garden'),
        ('  Men\'s   Shoes  ', 'mens-shoes'),
        ('Café Crème', 'cafe-creme'),
        ('--Already--slugged--', 'already-slugged'),
        ('4K TVs', '4k-tvs'),
    ],
)
def test_derive_slug(text, expected):
    assert derive_slug(text) == expected


def test_derive_slug_is_idempotent():
    once = derive_slug('Outdoor / Camping Gear!')
    assert derive_slug(once) == once


def test_slug_from_text_rejects_text_without_usable_characters():
    with pytest.raises(InvalidTaxonomyInputError) as exc_info:
        Slug.from_text('!!!')
    assert exc_info.value.field == 'slug'


def test_slug_rejects_non_canonical_value():
    with pytest.raises(InvalidTaxonomyInputError):
        Slug(value='Not A Slug')


def test_slug_accepts_canonical_value():
    assert str(Slug(value='kitchen-tools')) == 'kitchen-tools'


def test_slug_rejects_value_longer_than_limit():
    with pytest.raises(InvalidTaxonomyInputError) as exc_info:
        Slug(value='a' * 61, max_length=60)
    assert exc_info.value.field == 'slug'


def test_slug_limit_does_not_affect_equality():
    assert Slug(value='books', max_length=60) == Slug(value='books')
