"""
Product Django ORM model.

Only the columns the taxonomy reads to count category and tag usage.
"""
import uuid

from django.db import models


class ProductModel(models.Model):
    """Product reference to a category and its tags."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    category = models.ForeignKey(
        'taxonomy.CategoryModel',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='products',
    )
    tags = models.ManyToManyField(
        'taxonomy.TagModel',
        blank=True,
        related_name='products',
    )
    deleted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        app_label = 'taxonomy'
        db_table = 'taxonomy_products'
        ordering = ['-created_at']

    def __str__(self):
        return self.name
