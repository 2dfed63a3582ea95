"""
Category tree validator tests.
"""
import pytest

from apps.taxonomy.domain.entities import Category
from apps.taxonomy.domain.exceptions import (
    CategoryHasChildrenError,
    CategoryHasProductsError,
    CategoryNotFoundError,
    DepthExceededError,
    DuplicateNameError,
    DuplicateSlugError,
    InvalidHierarchyError,
)
from apps.taxonomy.domain.services import CategoryTreeValidator


def node(name, parent=None):
    return Category(
        name=name,
        slug=name.lower().replace(' ', '-'),
        parent_id=parent.id if parent else None,
    )


@pytest.fixture
def validator():
    return CategoryTreeValidator()


@pytest.fixture
def chain():
    """Electronics > Computers > Laptops, plus a standalone root."""
    electronics = node('Electronics')
    computers = node('Computers', electronics)
    laptops = node('Laptops', computers)
    garden = node('Garden')
    return electronics, computers, laptops, garden


class TestParentAssignment:
    def test_no_parent_is_level_zero(self, validator, chain):
        assert validator.validate_parent_assignment(None, None, list(chain)) == 0

    def test_level_follows_parent(self, validator, chain):
        electronics, computers, laptops, garden = chain
        assert validator.validate_parent_assignment(None, electronics.id, list(chain)) == 1
        assert validator.validate_parent_assignment(None, laptops.id, list(chain)) == 3

    def test_fourth_level_is_rejected(self, validator, chain):
        electronics, computers, laptops, garden = chain
        gaming = node('Gaming Laptops', laptops)
        categories = [*chain, gaming]

        with pytest.raises(DepthExceededError) as exc_info:
            validator.validate_parent_assignment(None, gaming.id, categories)
        assert exc_info.value.code == 'DEPTH_EXCEEDED'

    def test_self_parent_is_rejected(self, validator, chain):
        electronics = chain[0]
        with pytest.raises(InvalidHierarchyError):
            validator.validate_parent_assignment(electronics.id, electronics.id, list(chain))

    def test_unknown_parent_is_not_found(self, validator, chain):
        orphan_parent = node('Ghost')
        with pytest.raises(CategoryNotFoundError) as exc_info:
            validator.validate_parent_assignment(None, orphan_parent.id, list(chain))
        assert exc_info.value.field == 'parent_id'

    def test_moving_under_descendant_is_rejected(self, validator, chain):
        electronics, computers, laptops, garden = chain
        with pytest.raises(InvalidHierarchyError):
            validator.validate_parent_assignment(electronics.id, laptops.id, list(chain))

    def test_moving_under_direct_child_is_rejected(self, validator, chain):
        electronics, computers, laptops, garden = chain
        with pytest.raises(InvalidHierarchyError):
            validator.validate_parent_assignment(electronics.id, computers.id, list(chain))

    def test_moving_subtree_checks_deepest_descendant(self, validator, chain):
        electronics, computers, laptops, garden = chain
        # Computers has one level below it; under Garden it would reach level 2.
        assert validator.validate_parent_assignment(computers.id, garden.id, list(chain)) == 1

        outdoor = node('Outdoor', garden)
        patio = node('Patio', outdoor)
        categories = [*chain, outdoor, patio]
        assert validator.validate_parent_assignment(computers.id, outdoor.id, categories) == 2
        with pytest.raises(DepthExceededError):
            validator.validate_parent_assignment(computers.id, patio.id, categories)

    def test_corrupt_cycle_in_parent_chain_is_reported(self, validator):
        a = node('Alpha')
        b = node('Beta', a)
        a.parent_id = b.id
        other = node('Other')
        with pytest.raises(InvalidHierarchyError):
            validator.validate_parent_assignment(other.id, a.id, [a, b, other])

    def test_custom_max_level(self, chain):
        electronics, computers, laptops, garden = chain
        shallow = CategoryTreeValidator(max_level=1)
        assert shallow.validate_parent_assignment(None, electronics.id, list(chain)) == 1
        with pytest.raises(DepthExceededError):
            shallow.validate_parent_assignment(None, computers.id, list(chain))


class TestLevels:
    def test_assign_levels(self, validator, chain):
        electronics, computers, laptops, garden = chain
        validator.assign_levels(list(chain))
        assert [c.level for c in chain] == [0, 1, 2, 0]

    def test_missing_parent_ends_the_chain(self, validator):
        dangling = Category(name='Dangling', slug='dangling', parent_id=node('Gone').id)
        index = validator.index([dangling])
        assert validator.resolve_level(dangling.id, index) == 0

    def test_subtree_height(self, validator, chain):
        electronics, computers, laptops, garden = chain
        assert validator.subtree_height(electronics.id, list(chain)) == 2
        assert validator.subtree_height(laptops.id, list(chain)) == 0

    def test_ancestors_are_parent_first(self, validator, chain):
        electronics, computers, laptops, garden = chain
        index = validator.index(list(chain))
        assert [c.name for c in validator.ancestors(laptops.id, index)] == ['Computers', 'Electronics']


class TestDeletable:
    def test_category_with_children(self, validator, chain):
        electronics = chain[0]
        with pytest.raises(CategoryHasChildrenError) as exc_info:
            validator.validate_deletable(electronics.id, list(chain), lambda _: 0)
        assert exc_info.value.children == 1

    def test_category_with_products(self, validator, chain):
        laptops = chain[2]
        with pytest.raises(CategoryHasProductsError) as exc_info:
            validator.validate_deletable(laptops.id, list(chain), lambda _: 4)
        assert exc_info.value.products == 4

    def test_leaf_without_products(self, validator, chain):
        garden = chain[3]
        validator.validate_deletable(garden.id, list(chain), lambda _: 0)


class TestUniqueness:
    def test_name_is_case_insensitive(self, validator, chain):
        with pytest.raises(DuplicateNameError):
            validator.validate_name_unique('  ELECTRONICS ', None, list(chain))

    def test_own_name_is_allowed(self, validator, chain):
        electronics = chain[0]
        validator.validate_name_unique('electronics', electronics.id, list(chain))

    def test_slug(self, validator, chain):
        with pytest.raises(DuplicateSlugError):
            validator.validate_slug_unique('garden', None, list(chain))
