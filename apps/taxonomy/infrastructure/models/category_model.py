"""
Category Django ORM model.
"""
import uuid

from django.db import models
from django.db.models.functions import Lower


class CategoryModel(models.Model):
    """Category row. The tree level is derived on read and not stored."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, db_index=True)
    slug = models.SlugField(max_length=120, unique=True)
    description = models.TextField(blank=True, default='')
    short_description = models.CharField(max_length=200, blank=True, default='')
    image = models.CharField(max_length=500, blank=True, default='')
    icon = models.CharField(max_length=100, blank=True, default='')
    color = models.CharField(max_length=7, null=True, blank=True)
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
    )
    sort_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True, db_index=True)
    is_visible = models.BooleanField(default=True)
    is_featured = models.BooleanField(default=False)
    tags = models.ManyToManyField(
        'taxonomy.TagModel',
        blank=True,
        related_name='categories',
    )
    seo_title = models.CharField(max_length=60, blank=True, default='')
    seo_description = models.CharField(max_length=160, blank=True, default='')
    seo_keywords = models.JSONField(default=list, blank=True)
    created_by = models.CharField(max_length=64, null=True, blank=True)
    updated_by = models.CharField(max_length=64, null=True, blank=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        app_label = 'taxonomy'
        db_table = 'categories'
        verbose_name = 'Category'
        verbose_name_plural = 'Categories'
        ordering = ['sort_order', 'name']
        constraints = [
            models.UniqueConstraint(Lower('name'), name='uniq_category_name_ci'),
        ]
        indexes = [
            models.Index(fields=['is_active', 'sort_order'], name='categories_active_sort_idx'),
        ]

    def __str__(self):
        if self.parent_id:
            return f"{self.parent.name} > {self.name}"
        return self.name
