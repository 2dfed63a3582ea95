"""
Django ORM implementation of CategoryRepository.
"""
from typing import List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Prefetch

from shared.infrastructure.persistence import translate_storage_errors
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel
from ..models.tag_model import TagModel


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation."""

    def _queryset(self):
        return CategoryModel.objects.prefetch_related(
            Prefetch('tags', queryset=TagModel.objects.only('id').order_by('sort_order', 'name'))
        )

    def save(self, category: Category) -> Category:
        """Save a category entity."""
        with translate_storage_errors(
            'Category',
            category.name,
            unique_values={'slug': category.slug, 'name': category.name},
        ):
            with transaction.atomic():
                model, created = CategoryModel.objects.update_or_create(
                    id=category.id,
                    defaults={
                        'name': category.name,
                        'slug': category.slug,
                        'description': category.description,
                        'short_description': category.short_description,
                        'image': category.image,
                        'icon': category.icon,
                        'color': category.color,
                        'parent_id': category.parent_id,
                        'sort_order': category.sort_order,
                        'is_active': category.is_active,
                        'is_visible': category.is_visible,
                        'is_featured': category.is_featured,
                        'seo_title': category.seo_title,
                        'seo_description': category.seo_description,
                        'seo_keywords': list(category.seo_keywords),
                        'created_by': category.created_by,
                        'updated_by': category.updated_by,
                        'created_at': category.created_at,
                        'updated_at': category.updated_at,
                    }
                )
                model.tags.set(category.tag_ids)
            saved = self._to_entity(model, tag_ids=list(category.tag_ids))
        saved.level = category.level
        return saved

    def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""
        with translate_storage_errors('Category', str(category_id)):
            model = self._queryset().filter(id=category_id).first()
            if model is None:
                return None
            return self._to_entity(model)

    def find_all(self) -> List[Category]:
        """Return every stored category."""
        with translate_storage_errors('Category'):
            return [self._to_entity(model) for model in self._queryset()]

    def delete(self, category_id: UUID) -> bool:
        """Delete a category."""
        with translate_storage_errors('Category', str(category_id)):
            with transaction.atomic():
                deleted, _ = CategoryModel.objects.filter(id=category_id).delete()
        return deleted > 0

    def _to_entity(self, model: CategoryModel, tag_ids: Optional[List[UUID]] = None) -> Category:
        """Convert Django model to domain entity."""
        if tag_ids is None:
            tag_ids = [tag.id for tag in model.tags.all()]
        return Category(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            short_description=model.short_description,
            image=model.image,
            icon=model.icon,
            color=model.color,
            parent_id=model.parent_id,
            sort_order=model.sort_order,
            is_active=model.is_active,
            is_visible=model.is_visible,
            is_featured=model.is_featured,
            tag_ids=tag_ids,
            seo_title=model.seo_title,
            seo_description=model.seo_description,
            seo_keywords=list(model.seo_keywords or []),
            created_by=model.created_by,
            updated_by=model.updated_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
