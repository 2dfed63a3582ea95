"""
Django ORM implementation of TagRepository.
"""
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from shared.infrastructure.persistence import translate_storage_errors
from ...domain.entities.tag import Tag, TagUsage
from ...domain.repositories.tag_repository import TagRepository
from ..models.tag_model import TagModel


class DjangoTagRepository(TagRepository):
    """Django ORM based tag repository implementation."""

    def save(self, tag: Tag) -> Tag:
        """Save a tag entity."""
        with translate_storage_errors(
            'Tag',
            tag.name,
            unique_values={'slug': tag.slug, 'name': tag.name},
        ):
            with transaction.atomic():
                model, created = TagModel.objects.update_or_create(
                    id=tag.id,
                    defaults={
                        'name': tag.name,
                        'slug': tag.slug,
                        'description': tag.description,
                        'color': tag.color,
                        'is_active': tag.is_active,
                        'sort_order': tag.sort_order,
                        'category_id': tag.category_id,
                        'is_system': tag.is_system,
                        'total_products': tag.metadata.total_products,
                        'last_used': tag.metadata.last_used,
                        'created_by': tag.created_by,
                        'updated_by': tag.updated_by,
                        'created_at': tag.created_at,
                        'updated_at': tag.updated_at,
                    }
                )
            return self._to_entity(model)

    def find_by_id(self, tag_id: UUID) -> Optional[Tag]:
        """Find a tag by ID."""
        with translate_storage_errors('Tag', str(tag_id)):
            model = TagModel.objects.filter(id=tag_id).first()
            return self._to_entity(model) if model else None

    def find_all(self) -> List[Tag]:
        """Return every stored tag."""
        with translate_storage_errors('Tag'):
            return [self._to_entity(model) for model in TagModel.objects.all()]

    def count_scoped_to(self, category_id: UUID) -> int:
        with translate_storage_errors('Tag'):
            return TagModel.objects.filter(category_id=category_id).count()

    def delete(self, tag_id: UUID) -> bool:
        """Delete a tag. Category and product links go with it."""
        with translate_storage_errors('Tag', str(tag_id)):
            with transaction.atomic():
                deleted, _ = TagModel.objects.filter(id=tag_id).delete()
        return deleted > 0

    def _to_entity(self, model: TagModel) -> Tag:
        """Convert Django model to domain entity."""
        return Tag(
            id=model.id,
            name=model.name,
            slug=model.slug,
            description=model.description,
            color=model.color,
            is_active=model.is_active,
            sort_order=model.sort_order,
            category_id=model.category_id,
            is_system=model.is_system,
            metadata=TagUsage(
                total_products=model.total_products,
                last_used=model.last_used,
            ),
            created_by=model.created_by,
            updated_by=model.updated_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
