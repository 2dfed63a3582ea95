"""
Taxonomy admin configuration.

Writes go through the API so that tree and scope rules are enforced; the
Django admin is a read-only window on the tables.
"""
from django.contrib import admin

from ..infrastructure.models import CategoryModel, TagModel


class ReadOnlyAdmin(admin.ModelAdmin):
    """Admin without add, change or delete."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(CategoryModel)
class CategoryAdmin(ReadOnlyAdmin):
    """Admin configuration for Category model."""
    list_display = ('name', 'slug', 'parent', 'sort_order', 'is_active', 'is_visible', 'updated_at')
    list_filter = ('is_active', 'is_visible', 'is_featured')
    search_fields = ('name', 'slug', 'description')
    ordering = ('sort_order', 'name')
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(TagModel)
class TagAdmin(ReadOnlyAdmin):
    """Admin configuration for Tag model."""
    list_display = ('name', 'slug', 'category', 'is_system', 'is_active', 'total_products', 'last_used')
    list_filter = ('is_system', 'is_active')
    search_fields = ('name', 'slug', 'description')
    ordering = ('sort_order', 'name')
    readonly_fields = ('id', 'created_at', 'updated_at')
