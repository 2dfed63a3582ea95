"""
Taxonomy service tests over in-memory repositories.
"""
from datetime import timedelta

import pytest

from apps.taxonomy.application.dtos import (
    CategoryCreateDTO,
    CategoryFilterDTO,
    CategoryUpdateDTO,
    TagCreateDTO,
    TagFilterDTO,
    TagUpdateDTO,
)
from apps.taxonomy.domain.exceptions import (
    CategoryHasChildrenError,
    CategoryHasProductsError,
    CategoryHasTagsError,
    CategoryNotFoundError,
    DepthExceededError,
    DuplicateNameError,
    DuplicateSlugError,
    InvalidHierarchyError,
    InvalidTaxonomyInputError,
    SystemTagProtectedError,
    TagInUseError,
    TagNotFoundError,
)
from apps.taxonomy.domain.value_objects import TagScope
from shared.domain import ConflictError, utc_now


class TestScenarios:
    def test_depth_is_bounded_at_three(self, make_category):
        electronics = make_category('Electronics')
        laptops = make_category('Laptops', electronics)
        gaming = make_category('Gaming Laptops', laptops)
        rtx = make_category('RTX Gaming Laptops', gaming)

        assert [c.level for c in (electronics, laptops, gaming, rtx)] == [0, 1, 2, 3]
        with pytest.raises(DepthExceededError):
            make_category('RTX 4090 Gaming Laptops', rtx)

    def test_names_are_unique_ignoring_case(self, make_category):
        make_category('Accessories')
        with pytest.raises(ConflictError):
            make_category('accessories')

    def test_delete_parent_after_child(self, service, make_category):
        a = make_category('Category A')
        b = make_category('Category B', a)

        with pytest.raises(CategoryHasChildrenError):
            service.delete_category(a.id)

        service.delete_category(b.id)
        service.delete_category(a.id)
        assert service.list_categories(CategoryFilterDTO(include_inactive=True)) == []

    def test_system_tag_cannot_be_renamed(self, service, make_tag):
        clearance = make_tag('Clearance', is_system=True)
        with pytest.raises(SystemTagProtectedError):
            service.update_tag(clearance.id, TagUpdateDTO(name='Sale'))

    def test_category_cannot_move_under_its_child(self, service, make_category):
        x = make_category('Category X')
        y = make_category('Category Y', x)

        with pytest.raises(InvalidHierarchyError):
            service.update_category(x.id, CategoryUpdateDTO(parent_id=y.id))

        assert service.get_category(x.id).parent is None


class TestCategoryCreate:
    def test_slug_and_parent_summary(self, make_category):
        parent = make_category('Home & Garden')
        child = make_category('Outdoor Furniture', parent)

        assert parent.slug == 'home-garden'
        assert child.parent.id == parent.id
        assert child.parent.name == 'Home & Garden'
        assert child.parent_id == parent.id

    def test_explicit_slug(self, make_category):
        category = make_category('Televisions', slug='tv')
        assert category.slug == 'tv'

    def test_duplicate_slug(self, make_category):
        make_category('Phones', slug='mobile')
        with pytest.raises(DuplicateSlugError):
            make_category('Mobiles', slug='mobile')

    def test_unknown_parent(self, service):
        from uuid import uuid4
        with pytest.raises(CategoryNotFoundError) as exc_info:
            service.create_category(CategoryCreateDTO(name='Lost', parent_id=uuid4()))
        assert exc_info.value.field == 'parent_id'

    @pytest.mark.parametrize('name', ['', ' ', 'A', 'x' * 101])
    def test_name_length(self, service, name):
        with pytest.raises(InvalidTaxonomyInputError) as exc_info:
            service.create_category(CategoryCreateDTO(name=name))
        assert exc_info.value.field == 'name'

    def test_invalid_color(self, make_category):
        with pytest.raises(InvalidTaxonomyInputError) as exc_info:
            make_category('Colorful', color='red')
        assert exc_info.value.field == 'color'

    def test_name_without_slug_characters(self, service):
        with pytest.raises(InvalidTaxonomyInputError) as exc_info:
            service.create_category(CategoryCreateDTO(name='!!!'))
        assert exc_info.value.field == 'slug'

    def test_actor_is_recorded(self, service):
        category = service.create_category(CategoryCreateDTO(name='Books'), actor='42')
        assert category.created_by == '42'
        assert category.updated_by == '42'

    def test_rejected_create_writes_nothing(self, service, make_category):
        make_category('Sports')
        with pytest.raises(ConflictError):
            make_category('SPORTS')
        assert len(service.list_categories()) == 1


class TestCategoryUpdate:
    def test_rename_rederives_slug(self, service, make_category):
        category = make_category('Kitchen')
        updated = service.update_category(category.id, CategoryUpdateDTO(name='Kitchen & Dining'))
        assert updated.slug == 'kitchen-dining'

    def test_rename_keeps_supplied_slug(self, service, make_category):
        category = make_category('Kitchen')
        updated = service.update_category(
            category.id, CategoryUpdateDTO(name='Kitchenware', slug='kitchen')
        )
        assert updated.name == 'Kitchenware'
        assert updated.slug == 'kitchen'

    def test_keeping_own_name_is_allowed(self, service, make_category):
        category = make_category('Toys')
        updated = service.update_category(category.id, CategoryUpdateDTO(name='Toys', sort_order=5))
        assert updated.sort_order == 5

    def test_case_only_rename_of_self(self, service, make_category):
        category = make_category('Toys')
        assert service.update_category(category.id, CategoryUpdateDTO(name='TOYS')).name == 'TOYS'

    def test_rename_to_existing_name(self, service, make_category):
        make_category('Toys')
        games = make_category('Games')
        with pytest.raises(DuplicateNameError):
            service.update_category(games.id, CategoryUpdateDTO(name='toys'))

    def test_unsent_fields_are_untouched(self, service, make_category):
        category = make_category('Garden', description='Plants and tools', sort_order=3)
        updated = service.update_category(category.id, CategoryUpdateDTO(is_featured=True))
        assert updated.description == 'Plants and tools'
        assert updated.sort_order == 3
        assert updated.is_featured is True

    def test_self_parent(self, service, make_category):
        category = make_category('Music')
        with pytest.raises(InvalidHierarchyError):
            service.update_category(category.id, CategoryUpdateDTO(parent_id=category.id))

    def test_two_step_cycle_is_rejected(self, service, make_category):
        a = make_category('Alpha')
        b = make_category('Beta')

        service.update_category(b.id, CategoryUpdateDTO(parent_id=a.id))
        with pytest.raises(InvalidHierarchyError):
            service.update_category(a.id, CategoryUpdateDTO(parent_id=b.id))

    def test_move_to_root(self, service, make_category):
        parent = make_category('Parent')
        child = make_category('Child', parent)
        moved = service.update_category(child.id, CategoryUpdateDTO(parent_id=None))
        assert moved.parent is None
        assert moved.level == 0

    def test_descendant_levels_follow_a_move(self, service, make_category):
        a = make_category('Alpha')
        b = make_category('Beta', a)
        c = make_category('Gamma', b)
        other = make_category('Other')

        service.update_category(b.id, CategoryUpdateDTO(parent_id=other.id))
        service.update_category(other.id, CategoryUpdateDTO(parent_id=a.id))

        levels = {dto.name: dto.level for dto in service.list_categories()}
        assert levels == {'Alpha': 0, 'Other': 1, 'Beta': 2, 'Gamma': 3}
        assert service.get_category(c.id).level == 3

    def test_moving_subtree_too_deep(self, service, make_category):
        a = make_category('Alpha')
        b = make_category('Beta', a)
        make_category('Gamma', b)
        x = make_category('Xray')
        y = make_category('Yankee', x)

        with pytest.raises(DepthExceededError):
            service.update_category(a.id, CategoryUpdateDTO(parent_id=y.id))
        assert service.get_category(a.id).parent is None

    def test_failed_update_leaves_record_untouched(self, service, make_category):
        a = make_category('Alpha')
        b = make_category('Beta', a)
        with pytest.raises(InvalidHierarchyError):
            service.update_category(a.id, CategoryUpdateDTO(name='Renamed', parent_id=b.id))
        assert service.get_category(a.id).name == 'Alpha'

    def test_unknown_category(self, service):
        from uuid import uuid4
        with pytest.raises(CategoryNotFoundError):
            service.update_category(uuid4(), CategoryUpdateDTO(name='Nope'))


class TestCategoryDelete:
    def test_products_block_delete(self, service, make_category, product_counter):
        category = make_category('Cameras')
        product_counter.add_product(category_id=category.id)
        with pytest.raises(CategoryHasProductsError):
            service.delete_category(category.id)

    def test_soft_deleted_products_do_not_block(self, service, make_category, product_counter):
        category = make_category('Cameras')
        product_counter.add_product(category_id=category.id, deleted=True)
        service.delete_category(category.id)
        with pytest.raises(CategoryNotFoundError):
            service.get_category(category.id)

    def test_scoped_tags_block_delete(self, service, make_category, make_tag):
        category = make_category('Shoes')
        make_tag('Leather', category)
        with pytest.raises(CategoryHasTagsError):
            service.delete_category(category.id)

    def test_unknown_category(self, service):
        from uuid import uuid4
        with pytest.raises(CategoryNotFoundError):
            service.delete_category(uuid4())


class TestCategoryReads:
    def test_default_order_is_deterministic(self, service, make_category):
        make_category('Zeta', sort_order=1)
        make_category('alpha', sort_order=2)
        make_category('Beta', sort_order=1)

        first = [c.name for c in service.list_categories()]
        second = [c.name for c in service.list_categories()]
        assert first == ['Beta', 'Zeta', 'alpha']
        assert first == second

    def test_filters(self, service, make_category):
        electronics = make_category('Electronics')
        make_category('Phones', electronics, description='Smart phones')
        make_category('Tablets', electronics, is_active=False)
        make_category('Garden')

        assert [c.name for c in service.list_categories(CategoryFilterDTO(root_only=True))] == [
            'Electronics', 'Garden'
        ]
        assert [c.name for c in service.list_categories(CategoryFilterDTO(parent_id=electronics.id))] == [
            'Phones'
        ]
        assert [
            c.name for c in service.list_categories(
                CategoryFilterDTO(parent_id=electronics.id, include_inactive=True)
            )
        ] == ['Phones', 'Tablets']
        assert [c.name for c in service.list_categories(CategoryFilterDTO(level=1))] == ['Phones']
        assert [c.name for c in service.list_categories(CategoryFilterDTO(search='smart'))] == ['Phones']

    def test_sort_by_name_descending(self, service, make_category):
        for name in ('Beta', 'Alpha', 'Gamma'):
            make_category(name)
        ordered = service.list_categories(CategoryFilterDTO(sort_by='name', sort_direction='desc'))
        assert [c.name for c in ordered] == ['Gamma', 'Beta', 'Alpha']

    def test_unknown_sort_field(self, service):
        with pytest.raises(InvalidTaxonomyInputError) as exc_info:
            service.list_categories(CategoryFilterDTO(sort_by='color'))
        assert exc_info.value.field == 'sort_by'

    def test_product_counts(self, service, make_category, product_counter):
        category = make_category('Cameras')
        product_counter.add_product(category_id=category.id)
        product_counter.add_product(category_id=category.id)
        assert service.get_category(category.id).product_count == 2
        assert service.list_categories()[0].product_count == 2

    def test_stats(self, service, make_category):
        make_category('Active')
        make_category('Inactive', is_active=False)
        assert service.category_stats() == {
            'total_categories': 2,
            'active_categories': 1,
            'inactive_categories': 1,
        }

    def test_path(self, service, make_category):
        a = make_category('Alpha')
        b = make_category('Beta', a)
        c = make_category('Gamma', b)
        assert [dto.name for dto in service.category_path(c.id)] == ['Alpha', 'Beta', 'Gamma']

    def test_tree_hides_hidden_subtrees(self, service, make_category, product_counter):
        root = make_category('Root')
        hidden = make_category('Hidden', root, is_visible=False)
        make_category('Under Hidden', hidden)
        shown = make_category('Shown', root)
        product_counter.add_product(category_id=shown.id)

        roots = service.category_tree(visible_only=True)

        assert [n.category.name for n in roots] == ['Root']
        assert [n.category.name for n in roots[0].children] == ['Shown']
        assert roots[0].total_product_count == 1


class TestTags:
    def test_create_global_and_scoped(self, make_category, make_tag):
        shoes = make_category('Shoes')
        global_tag = make_tag('Sale')
        scoped = make_tag('Leather', shoes)

        assert global_tag.scope == 'global'
        assert global_tag.color == '#6B7280'
        assert scoped.scope == 'category'
        assert scoped.category_id == shoes.id

    def test_same_name_allowed_in_other_scope(self, make_category, make_tag):
        shoes = make_category('Shoes')
        bags = make_category('Bags')
        make_tag('Leather', shoes)
        make_tag('Leather', bags)
        with pytest.raises(DuplicateNameError):
            make_tag('LEATHER', shoes)

    def test_scope_must_exist(self, service):
        from uuid import uuid4
        with pytest.raises(CategoryNotFoundError) as exc_info:
            service.create_tag(TagCreateDTO(name='Orphan', category_id=uuid4()))
        assert exc_info.value.field == 'category_id'

    def test_color_is_validated(self, make_tag):
        with pytest.raises(InvalidTaxonomyInputError):
            make_tag('Loud', color='#GGGGGG')

    def test_system_tag_rejects_noop_patch(self, service, make_tag):
        tag = make_tag('New Arrival', is_system=True)
        with pytest.raises(SystemTagProtectedError):
            service.update_tag(tag.id, TagUpdateDTO())

    def test_guard_tag_mutable(self, service, make_tag):
        system_tag = make_tag('New Arrival', is_system=True)
        regular = make_tag('Eco')

        with pytest.raises(SystemTagProtectedError):
            service.guard_tag_mutable(system_tag.id)
        service.guard_tag_mutable(regular.id)

    def test_system_tag_cannot_be_deleted(self, service, make_tag):
        tag = make_tag('New Arrival', is_system=True)
        with pytest.raises(SystemTagProtectedError):
            service.delete_tag(tag.id)

    def test_update_tag(self, service, make_tag):
        tag = make_tag('Eco')
        updated = service.update_tag(tag.id, TagUpdateDTO(name='Eco Friendly', color='#10b981'))
        assert updated.slug == 'eco-friendly'
        assert updated.color == '#10B981'

    def test_rescope_checks_assignments(self, service, make_category, make_tag):
        shoes = make_category('Shoes')
        bags = make_category('Bags')
        tag = make_tag('Leather')
        service.update_category(bags.id, CategoryUpdateDTO(tag_ids=[tag.id]))

        with pytest.raises(InvalidTaxonomyInputError):
            service.update_tag(tag.id, TagUpdateDTO(category_id=shoes.id))

        rescoped = service.update_tag(tag.id, TagUpdateDTO(category_id=bags.id))
        assert rescoped.category_id == bags.id

    def test_delete_in_use_tag(self, service, make_tag, product_counter):
        tag = make_tag('Popular')
        product_counter.add_product(tag_ids=[tag.id])
        with pytest.raises(TagInUseError) as exc_info:
            service.delete_tag(tag.id)
        assert exc_info.value.products == 1

    def test_delete_detaches_from_categories(self, service, make_category, make_tag):
        tag = make_tag('Seasonal')
        category = make_category('Holiday', tag_ids=[tag.id])

        service.delete_tag(tag.id)

        assert service.get_category(category.id).tag_ids == []
        with pytest.raises(TagNotFoundError):
            service.get_tag(tag.id)

    def test_list_tags_by_scope(self, service, make_category, make_tag):
        shoes = make_category('Shoes')
        make_tag('Sale', sort_order=2)
        make_tag('Clearance', sort_order=1)
        make_tag('Leather', shoes)
        make_tag('Hidden', is_active=False)

        assert [t.name for t in service.list_tags()] == ['Leather', 'Clearance', 'Sale']
        assert [t.name for t in service.list_tags(TagFilterDTO(scope=TagScope.GLOBAL))] == [
            'Clearance', 'Sale'
        ]
        assert [t.name for t in service.list_tags(TagFilterDTO(scope=shoes.id))] == ['Leather']
        assert 'Hidden' in [t.name for t in service.list_tags(TagFilterDTO(include_inactive=True))]

    def test_tags_for_category_include_ancestors(self, service, make_category, make_tag):
        clothing = make_category('Clothing')
        shirts = make_category('Shirts', clothing)
        shoes = make_category('Shoes')
        make_tag('Sale')
        make_tag('Cotton', clothing)
        make_tag('Leather', shoes)

        assert sorted(t.name for t in service.tags_for_category(shirts.id)) == ['Cotton', 'Sale']

    def test_assigning_foreign_scoped_tag(self, service, make_category, make_tag):
        shoes = make_category('Shoes')
        bags = make_category('Bags')
        leather = make_tag('Leather', shoes)
        with pytest.raises(InvalidTaxonomyInputError):
            service.update_category(bags.id, CategoryUpdateDTO(tag_ids=[leather.id]))

    def test_assigning_ancestor_scoped_tag(self, service, make_category, make_tag):
        clothing = make_category('Clothing')
        cotton = make_tag('Cotton', clothing)
        shirts = make_category('Shirts', clothing, tag_ids=[cotton.id])
        assert shirts.tag_ids == [cotton.id]


class TestTagMaintenance:
    def test_refresh_usage(self, service, make_tag, product_counter):
        popular = make_tag('Popular')
        quiet = make_tag('Quiet')
        product_counter.add_product(tag_ids=[popular.id])
        product_counter.add_product(tag_ids=[popular.id])

        assert service.refresh_tag_usage() == 1
        assert service.get_tag(popular.id).total_products == 2
        assert service.get_tag(quiet.id).total_products == 0

    def test_clean_unused(self, service, make_tag, product_counter):
        stale = make_tag('Stale')
        used = make_tag('Used')
        system = make_tag('System', is_system=True)
        product_counter.add_product(tag_ids=[used.id])

        removed = service.clean_unused_tags(older_than_days=90, now=utc_now() + timedelta(days=91))

        assert removed == 1
        remaining = {t.name for t in service.list_tags(TagFilterDTO(include_inactive=True))}
        assert remaining == {'Used', 'System'}
        assert service.get_tag(system.id).is_system
        with pytest.raises(TagNotFoundError):
            service.get_tag(stale.id)

    def test_recent_unused_tags_are_kept(self, service, make_tag):
        make_tag('Fresh')
        assert service.clean_unused_tags(older_than_days=90) == 0
