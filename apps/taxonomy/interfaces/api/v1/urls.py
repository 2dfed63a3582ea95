"""
Taxonomy API v1 URLs.
"""
from django.urls import path

from .views import (
    CategoryListCreateView,
    CategoryDetailView,
    CategoryPathView,
    CategoryTagsView,
    CategoryTreeView,
    CategoryImportView,
    CategoryExportView,
    TagListCreateView,
    TagDetailView,
    TagMaintenanceView,
)

urlpatterns = [
    # Categories
    path('categories/', CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/tree/', CategoryTreeView.as_view(), name='category-tree'),
    path('categories/import/', CategoryImportView.as_view(), name='category-import'),
    path('categories/export/', CategoryExportView.as_view(), name='category-export'),
    path('categories/<uuid:category_id>/', CategoryDetailView.as_view(), name='category-detail'),
    path('categories/<uuid:category_id>/path/', CategoryPathView.as_view(), name='category-path'),
    path('categories/<uuid:category_id>/tags/', CategoryTagsView.as_view(), name='category-tags'),

    # Tags
    path('tags/', TagListCreateView.as_view(), name='tag-list-create'),
    path('tags/maintenance/', TagMaintenanceView.as_view(), name='tag-maintenance'),
    path('tags/<uuid:tag_id>/', TagDetailView.as_view(), name='tag-detail'),
]
