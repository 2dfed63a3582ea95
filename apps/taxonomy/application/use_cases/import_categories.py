"""
Import categories use case.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from shared.domain import DomainException
from ...domain.exceptions import CategoryNotFoundError
from ...domain.services.naming import normalize_name
from ..dtos.category_dto import (
    CategoryCreateDTO,
    CategoryDTO,
    CategoryFilterDTO,
    CategoryUpdateDTO,
)
from ..dtos.import_dto import (
    CREATED,
    ERROR,
    SKIPPED,
    UPDATED,
    ImportCategoriesDTO,
    ImportReport,
    ImportRowOutcome,
)
from ..services.taxonomy_service import TaxonomyService

logger = logging.getLogger(__name__)

IMPORTABLE_FIELDS = (
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


@dataclass
class ImportCategoriesUseCase(UseCase[ImportCategoriesDTO, ImportReport]):
    """
    Apply the single-record create/update contract to every imported row.

    Rows are processed in file order, so a parent listed earlier in the file
    can be referenced by name further down. Existing categories are matched
    by name (case-insensitive) or slug and are either updated or skipped.
    """

    taxonomy_service: TaxonomyService
    actor: Optional[str] = None

    def execute(self, input_dto: ImportCategoriesDTO) -> UseCaseResult[ImportReport]:
        report = ImportReport()
        for position, row in enumerate(input_dto.rows, start=1):
            report.add(self._import_row(position, row, input_dto.update_existing))

        logger.info(f"Category import finished: {report.totals}")
        return UseCaseResult.ok(report)

    def _import_row(self, position: int, row: Dict[str, Any], update_existing: bool) -> ImportRowOutcome:
        name = row.get('name')
        if not isinstance(name, str) or not name.strip():
            return ImportRowOutcome(row=position, status=ERROR, reason="Name is required")
        name = name.strip()

        try:
            existing_categories = self.taxonomy_service.list_categories(
                CategoryFilterDTO(include_inactive=True)
            )
            existing = self._find_existing(name, row.get('slug'), existing_categories)
            fields = {key: row[key] for key in IMPORTABLE_FIELDS if key in row}

            if existing is not None:
                if not update_existing:
                    return ImportRowOutcome(
                        row=position,
                        status=SKIPPED,
                        name=name,
                        category_id=existing.id,
                        reason="Category already exists",
                    )
                patch = CategoryUpdateDTO(name=name, **fields)
                if 'parent' in row:
                    patch.parent_id = self._resolve_parent(row['parent'], existing_categories)
                updated = self.taxonomy_service.update_category(existing.id, patch, actor=self.actor)
                return ImportRowOutcome(row=position, status=UPDATED, name=name, category_id=updated.id)

            parent_id = None
            if 'parent' in row:
                parent_id = self._resolve_parent(row['parent'], existing_categories)
            created = self.taxonomy_service.create_category(
                CategoryCreateDTO(name=name, parent_id=parent_id, **fields),
                actor=self.actor,
            )
            return ImportRowOutcome(row=position, status=CREATED, name=name, category_id=created.id)
        except DomainException as exc:
            return ImportRowOutcome(row=position, status=ERROR, name=name, reason=exc.message)

    def _find_existing(
        self,
        name: str,
        slug: Optional[str],
        categories: List[CategoryDTO],
    ) -> Optional[CategoryDTO]:
        key = normalize_name(name)
        for category in categories:
            if normalize_name(category.name) == key or (slug and category.slug == slug):
                return category
        return None

    def _resolve_parent(self, reference: Any, categories: List[CategoryDTO]) -> Optional[UUID]:
        """Parent by id first, then by case-insensitive name."""
        if reference in (None, ''):
            return None
        text = str(reference).strip()
        try:
            parent_id = UUID(text)
        except ValueError:
            parent_id = None

        for category in categories:
            if parent_id is not None and category.id == parent_id:
                return category.id
        key = normalize_name(text)
        for category in categories:
            if normalize_name(category.name) == key:
                return category.id
        raise CategoryNotFoundError(text, field='parent_id')
