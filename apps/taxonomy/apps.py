"""
Taxonomy app configuration.
Category tree and tag management for the admin console.
"""
from django.apps import AppConfig


class TaxonomyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.taxonomy'
    label = 'taxonomy'
    verbose_name = 'Taxonomy'

    def ready(self):
        from .interfaces import admin  # noqa: F401
