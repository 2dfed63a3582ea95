"""
Taxonomy application service.

Orchestrates the tree validator and the tag scope resolver over the
repositories. Each operation reads a fresh snapshot, runs every check and
only then writes, so a rejected request leaves the store untouched.
"""
import logging
from contextlib import nullcontext
from datetime import datetime, timedelta
from typing import Callable, ContextManager, Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from shared.application import provided_fields
from shared.domain import AggregateRoot, ConflictError, utc_now
from ...domain.entities.category import Category
from ...domain.entities.tag import Tag
from ...domain.exceptions import (
    CategoryHasTagsError,
    CategoryNotFoundError,
    InvalidTaxonomyInputError,
    TagInUseError,
    TagNotFoundError,
)
from ...domain.repositories import CategoryRepository, ProductUsageCounter, TagRepository
from ...domain.services import (
    CategoryTreeValidator,
    TagScopeResolver,
    TreeAssembler,
    TreeNode,
)
from ...domain.value_objects.tag_scope import TagScope
from ..dtos.category_dto import (
    CategoryCreateDTO,
    CategoryDTO,
    CategoryFilterDTO,
    CategoryUpdateDTO,
)
from ..dtos.tag_dto import TagCreateDTO, TagDTO, TagFilterDTO, TagUpdateDTO

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ('sort_order', 'name', 'created_at', 'updated_at', 'level')

CATEGORY_DETAIL_FIELDS = (
    'slug',
    'description',
    'short_description',
    'image',
    'icon',
    'color',
    'sort_order',
    'is_active',
    'is_visible',
    'is_featured',
    'seo_title',
    'seo_description',
    'seo_keywords',
)


def _display_key(item) -> tuple:
    return (item.sort_order, item.name.casefold(), item.name, str(item.id))


class TaxonomyService:
    """Service for category and tag operations."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
        product_counter: ProductUsageCounter,
        tree_validator: Optional[CategoryTreeValidator] = None,
        scope_resolver: Optional[TagScopeResolver] = None,
        tree_assembler: Optional[TreeAssembler] = None,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self.category_repository = category_repository
        self.tag_repository = tag_repository
        self.product_counter = product_counter
        self.tree_validator = tree_validator or CategoryTreeValidator()
        self.scope_resolver = scope_resolver or TagScopeResolver()
        self.tree_assembler = tree_assembler or TreeAssembler()
        self.atomic = atomic or nullcontext

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def get_category(self, category_id: UUID) -> CategoryDTO:
        """Get a category with its live product count."""
        _, index = self._category_snapshot()
        category = self._require_category(category_id, index)
        category.product_count = self.product_counter.count_for_category(category.id)
        return self._to_dto(category, index)

    def list_categories(self, filters: Optional[CategoryFilterDTO] = None) -> List[CategoryDTO]:
        """
        List categories matching the filters.

        Default order is `sort_order` ascending, then name; identical calls
        without writes in between always return the same order.
        """
        filters = filters or CategoryFilterDTO()
        categories, index = self._category_snapshot()

        items = list(categories)
        if not filters.include_inactive:
            items = [c for c in items if c.is_active]
        if filters.root_only:
            items = [c for c in items if c.parent_id is None]
        elif filters.parent_id is not None:
            items = [c for c in items if c.parent_id == filters.parent_id]
        if filters.level is not None:
            items = [c for c in items if c.level == filters.level]
        if filters.search and filters.search.strip():
            term = filters.search.strip().casefold()
            items = [
                c for c in items
                if term in c.name.casefold() or term in (c.description or '').casefold()
            ]

        ordered = self._order(items, filters.sort_by, filters.sort_direction)
        counts = self.product_counter.counts_by_category()
        for category in ordered:
            category.product_count = counts.get(category.id, 0)
        return [self._to_dto(category, index) for category in ordered]

    def category_stats(self) -> Dict[str, int]:
        categories = self.category_repository.find_all()
        active = sum(1 for c in categories if c.is_active)
        return {
            'total_categories': len(categories),
            'active_categories': active,
            'inactive_categories': len(categories) - active,
        }

    def category_tree(self, include_inactive: bool = False, visible_only: bool = False) -> List[TreeNode]:
        """
        Build the category forest with product rollups.

        A hidden category hides its whole subtree.
        """
        categories, index = self._category_snapshot()

        def shown(category: Category) -> bool:
            if not include_inactive and not category.is_active:
                return False
            if visible_only and not category.is_visible:
                return False
            return True

        items = [
            category for category in categories
            if shown(category) and all(
                shown(ancestor) for ancestor in self.tree_validator.ancestors(category.id, index)
            )
        ]
        roots = self.tree_assembler.assemble(self._order(items))
        self.tree_assembler.rollup_product_counts(roots, self.product_counter.counts_by_category())
        return roots

    def category_path(self, category_id: UUID) -> List[CategoryDTO]:
        """Breadcrumb from the root down to the category."""
        _, index = self._category_snapshot()
        category = self._require_category(category_id, index)
        chain = list(reversed(self.tree_validator.ancestors(category.id, index)))
        chain.append(category)
        return [self._to_dto(node, index) for node in chain]

    def create_category(self, dto: CategoryCreateDTO, actor: Optional[str] = None) -> CategoryDTO:
        """Create a category after checking name, parent, depth and slug."""
        categories, index = self._category_snapshot()

        details = {name: getattr(dto, name) for name in CATEGORY_DETAIL_FIELDS}
        if not details['slug']:
            details.pop('slug')
        category = Category.create(
            name=dto.name,
            parent_id=dto.parent_id,
            created_by=actor,
            **details,
        )

        self.tree_validator.validate_name_unique(category.name, None, categories)
        level = self.tree_validator.validate_parent_assignment(category.id, dto.parent_id, categories)
        self.tree_validator.validate_slug_unique(category.slug, None, categories)

        if dto.tag_ids:
            self._validate_tag_assignment(dto.tag_ids, category.id, dto.parent_id, index)
            category.assign_tags(dto.tag_ids)

        category.level = level
        saved = self._save_category(category)
        saved.level = level
        self._publish(category)
        logger.info(f"Created category: {saved.name} ({saved.id}) at level {level}")
        return self._to_dto(saved, index)

    def update_category(
        self,
        category_id: UUID,
        dto: CategoryUpdateDTO,
        actor: Optional[str] = None,
    ) -> CategoryDTO:
        """
        Apply a partial update.

        A parent change is validated against the current snapshot, including
        the full ancestor chain of the new parent. Levels of descendants
        follow automatically since levels are derived on read.
        """
        categories, index = self._category_snapshot()
        category = self._require_category(category_id, index)

        changes = provided_fields(dto)
        parent_changed = 'parent_id' in changes
        new_parent_id = changes.pop('parent_id', category.parent_id)
        tag_ids = changes.pop('tag_ids', None)
        if 'slug' in changes and not changes['slug']:
            changes.pop('slug')

        old_slug = category.slug
        category.apply_changes(changes, updated_by=actor)

        if 'name' in changes:
            self.tree_validator.validate_name_unique(category.name, category.id, categories)
        if category.slug != old_slug:
            self.tree_validator.validate_slug_unique(category.slug, category.id, categories)

        level = category.level
        if parent_changed:
            level = self.tree_validator.validate_parent_assignment(category.id, new_parent_id, categories)

        if tag_ids is not None or parent_changed:
            final_tags = list(tag_ids) if tag_ids is not None else list(category.tag_ids)
            self._validate_tag_assignment(final_tags, category.id, new_parent_id, index)
            if tag_ids is not None:
                category.assign_tags(final_tags)

        category.move_to(new_parent_id)
        category.level = level
        saved = self._save_category(category)
        saved.level = level
        self._publish(category)
        logger.info(f"Updated category: {saved.name} ({saved.id})")
        return self._to_dto(saved, index)

    def delete_category(self, category_id: UUID) -> None:
        """
        Delete a leaf category that no product and no tag references.

        Children and product references are re-read right before the delete.
        """
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        self.tree_validator.validate_deletable(
            category_id,
            self.category_repository.find_all(),
            self.product_counter.count_for_category,
        )
        scoped_tags = self.tag_repository.count_scoped_to(category_id)
        if scoped_tags:
            raise CategoryHasTagsError(category_id, scoped_tags)

        if not self.category_repository.delete(category_id):
            raise CategoryNotFoundError(category_id)
        logger.info(f"Deleted category: {category.name} ({category_id})")

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def get_tag(self, tag_id: UUID) -> TagDTO:
        return TagDTO.from_entity(self._require_tag(tag_id))

    def list_tags(self, filters: Optional[TagFilterDTO] = None) -> List[TagDTO]:
        filters = filters or TagFilterDTO()
        tags = self.tag_repository.find_all()

        if not filters.include_inactive:
            tags = [t for t in tags if t.is_active]
        if filters.scope == TagScope.GLOBAL:
            tags = [t for t in tags if t.category_id is None]
        elif filters.scope is not None:
            tags = [t for t in tags if t.category_id == filters.scope]
        if filters.search and filters.search.strip():
            term = filters.search.strip().casefold()
            tags = [
                t for t in tags
                if term in t.name.casefold() or term in (t.description or '').casefold()
            ]
        return [TagDTO.from_entity(tag) for tag in sorted(tags, key=_display_key)]

    def tags_for_category(self, category_id: UUID) -> List[TagDTO]:
        """Active tags selectable for products of the category."""
        _, index = self._category_snapshot()
        category = self._require_category(category_id, index)
        ancestor_ids = [node.id for node in self.tree_validator.ancestors(category.id, index)]
        tags = self.scope_resolver.tags_available_for(
            category.id, ancestor_ids, self.tag_repository.find_all()
        )
        return [TagDTO.from_entity(tag) for tag in sorted(tags, key=_display_key) if tag.is_active]

    def create_tag(self, dto: TagCreateDTO, actor: Optional[str] = None) -> TagDTO:
        """Create a global or category-scoped tag."""
        if dto.category_id is not None:
            self._require_category(dto.category_id, field='category_id')

        tag = Tag.create(
            name=dto.name,
            category_id=dto.category_id,
            is_system=dto.is_system,
            created_by=actor,
            slug=dto.slug or None,
            description=dto.description,
            color=dto.color,
            is_active=dto.is_active,
            sort_order=dto.sort_order,
        )

        tags = self.tag_repository.find_all()
        self.scope_resolver.validate_name_unique_in_scope(tag.name, tag.category_id, None, tags)
        self.scope_resolver.validate_slug_unique_in_scope(tag.slug, tag.category_id, None, tags)

        saved = self._save_tag(tag)
        self._publish(tag)
        logger.info(f"Created tag: {saved.name} ({saved.id}) scope={saved.scope}")
        return TagDTO.from_entity(saved)

    def guard_tag_mutable(self, tag_id: UUID) -> None:
        """Reject edits to a system tag before the request body is read."""
        self.scope_resolver.guard_mutable(self._require_tag(tag_id))

    def update_tag(self, tag_id: UUID, dto: TagUpdateDTO, actor: Optional[str] = None) -> TagDTO:
        """
        Apply a partial update.

        System tags are rejected right after loading, before the patch is
        looked at.
        """
        tag = self._require_tag(tag_id)
        self.scope_resolver.guard_mutable(tag)

        changes = provided_fields(dto)
        scope_changed = 'category_id' in changes and changes['category_id'] != tag.category_id
        new_scope = changes.pop('category_id', tag.category_id)
        if 'slug' in changes and not changes['slug']:
            changes.pop('slug')

        old_slug = tag.slug
        tag.apply_changes(changes, updated_by=actor)

        if scope_changed:
            if new_scope is not None:
                self._require_category(new_scope, field='category_id')
            self._validate_rescope(tag, new_scope)

        tags = self.tag_repository.find_all()
        if 'name' in changes or scope_changed:
            self.scope_resolver.validate_name_unique_in_scope(tag.name, new_scope, tag.id, tags)
        if tag.slug != old_slug or scope_changed:
            self.scope_resolver.validate_slug_unique_in_scope(tag.slug, new_scope, tag.id, tags)

        if scope_changed:
            tag.rescope(new_scope)
        saved = self._save_tag(tag)
        logger.info(f"Updated tag: {saved.name} ({saved.id})")
        return TagDTO.from_entity(saved)

    def delete_tag(self, tag_id: UUID) -> None:
        """Delete a non-system tag that no product carries."""
        tag = self._require_tag(tag_id)
        self.scope_resolver.guard_mutable(tag)

        products = self.product_counter.count_for_tag(tag_id)
        if products:
            raise TagInUseError(tag_id, products)

        with self.atomic():
            self._remove_tag(tag)
        logger.info(f"Deleted tag: {tag.name} ({tag_id})")

    def refresh_tag_usage(self) -> int:
        """Recompute `metadata.total_products` for every tag."""
        counts = self.product_counter.counts_by_tag()
        updated = 0
        with self.atomic():
            for tag in self.tag_repository.find_all():
                total = counts.get(tag.id, 0)
                if total != tag.metadata.total_products:
                    tag.record_usage(total)
                    self._save_tag(tag)
                    updated += 1
        logger.info(f"Refreshed usage counts for {updated} tag(s)")
        return updated

    def clean_unused_tags(self, older_than_days: int = 90, now: Optional[datetime] = None) -> int:
        """Delete non-system tags without products that have not been used recently."""
        cutoff = (now or utc_now()) - timedelta(days=older_than_days)
        counts = self.product_counter.counts_by_tag()
        removed = 0
        with self.atomic():
            for tag in self.tag_repository.find_all():
                if tag.is_system or counts.get(tag.id, 0) > 0:
                    continue
                if tag.metadata.last_used >= cutoff:
                    continue
                self._remove_tag(tag)
                removed += 1
        logger.info(f"Removed {removed} unused tag(s) older than {older_than_days} days")
        return removed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _category_snapshot(self) -> Tuple[List[Category], Dict[UUID, Category]]:
        categories = self.category_repository.find_all()
        index = self.tree_validator.assign_levels(categories)
        return categories, index

    def _require_category(
        self,
        category_id: UUID,
        index: Optional[Dict[UUID, Category]] = None,
        field: Optional[str] = None,
    ) -> Category:
        if index is not None:
            category = index.get(category_id)
        else:
            category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id, field=field)
        return category

    def _require_tag(self, tag_id: UUID) -> Tag:
        tag = self.tag_repository.find_by_id(tag_id)
        if tag is None:
            raise TagNotFoundError(tag_id)
        return tag

    def _lineage(self, parent_id: Optional[UUID], index: Dict[UUID, Category]) -> List[UUID]:
        """The parent and all of its ancestors."""
        if parent_id is None or parent_id not in index:
            return []
        return [parent_id] + [node.id for node in self.tree_validator.ancestors(parent_id, index)]

    def _validate_tag_assignment(
        self,
        tag_ids: Sequence[UUID],
        category_id: UUID,
        parent_id: Optional[UUID],
        index: Dict[UUID, Category],
    ) -> None:
        if not tag_ids:
            return
        tags_by_id = {tag.id: tag for tag in self.tag_repository.find_all()}
        self.scope_resolver.validate_assignable(
            tag_ids, category_id, self._lineage(parent_id, index), tags_by_id
        )

    def _validate_rescope(self, tag: Tag, new_scope: Optional[UUID]) -> None:
        """A scoped tag may only stay on categories inside the new scope's subtree."""
        if new_scope is None:
            return
        categories, index = self._category_snapshot()
        for category in categories:
            if tag.id not in category.tag_ids:
                continue
            lineage = {category.id, *self._lineage(category.parent_id, index)}
            if new_scope not in lineage:
                raise InvalidTaxonomyInputError(
                    f"Tag is assigned to category '{category.name}' outside the new scope",
                    field='category_id',
                )

    def _remove_tag(self, tag: Tag) -> None:
        for category in self.category_repository.find_all():
            if category.detach_tag(tag.id):
                self._save_category(category)
        if not self.tag_repository.delete(tag.id):
            raise TagNotFoundError(tag.id)

    def _save_category(self, category: Category) -> Category:
        try:
            return self.category_repository.save(category)
        except ConflictError:
            logger.warning(f"Storage rejected category {category.id} ({category.name}) as a duplicate")
            raise

    def _save_tag(self, tag: Tag) -> Tag:
        try:
            return self.tag_repository.save(tag)
        except ConflictError:
            logger.warning(f"Storage rejected tag {tag.id} ({tag.name}) as a duplicate")
            raise

    def _order(
        self,
        categories: Sequence[Category],
        sort_by: Optional[str] = None,
        direction: str = "asc",
    ) -> List[Category]:
        if not sort_by:
            return sorted(categories, key=_display_key)
        if sort_by not in SORTABLE_FIELDS:
            raise InvalidTaxonomyInputError(
                f"Cannot sort by '{sort_by}'. Use one of: {', '.join(SORTABLE_FIELDS)}",
                field='sort_by',
            )
        if sort_by == 'name':
            key = lambda c: (c.name.casefold(), c.name, str(c.id))  # noqa: E731
        else:
            key = lambda c: (getattr(c, sort_by), c.name.casefold(), c.name, str(c.id))  # noqa: E731
        return sorted(categories, key=key, reverse=direction == "desc")

    def _to_dto(self, category: Category, index: Dict[UUID, Category]) -> CategoryDTO:
        parent = index.get(category.parent_id) if category.parent_id else None
        return CategoryDTO.from_entity(category, parent=parent)

    def _publish(self, aggregate: AggregateRoot) -> None:
        for event in aggregate.clear_domain_events():
            logger.info(f"Domain event {event.event_type}: {event}")
