"""
Tag Django ORM model.
"""
import uuid

from django.db import models
from django.db.models import Q
from django.db.models.functions import Lower

from ...domain.entities.tag import DEFAULT_TAG_COLOR


class TagModel(models.Model):
    """Tag row. Names and slugs are unique per scope (global or one category)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, db_index=True)
    slug = models.SlugField(max_length=60)
    description = models.CharField(max_length=200, blank=True, default='')
    color = models.CharField(max_length=7, default=DEFAULT_TAG_COLOR)
    is_active = models.BooleanField(default=True)
    sort_order = models.IntegerField(default=0)
    category = models.ForeignKey(
        'taxonomy.CategoryModel',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='scoped_tags',
    )
    is_system = models.BooleanField(default=False)
    total_products = models.PositiveIntegerField(default=0)
    last_used = models.DateTimeField()
    created_by = models.CharField(max_length=64, null=True, blank=True)
    updated_by = models.CharField(max_length=64, null=True, blank=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        app_label = 'taxonomy'
        db_table = 'tags'
        ordering = ['sort_order', 'name']
        constraints = [
            models.UniqueConstraint(
                Lower('name'),
                name='uniq_global_tag_name_ci',
                condition=Q(category__isnull=True),
            ),
            models.UniqueConstraint(
                Lower('name'),
                'category',
                name='uniq_scoped_tag_name_ci',
                condition=Q(category__isnull=False),
            ),
            models.UniqueConstraint(
                fields=['slug'],
                name='uniq_global_tag_slug',
                condition=Q(category__isnull=True),
            ),
            models.UniqueConstraint(
                fields=['slug', 'category'],
                name='uniq_scoped_tag_slug',
                condition=Q(category__isnull=False),
            ),
        ]
        indexes = [
            models.Index(fields=['is_active', 'sort_order'], name='tags_active_sort_idx'),
            models.Index(fields=['category', 'is_active'], name='tags_category_active_idx'),
        ]

    def __str__(self):
        return self.name
