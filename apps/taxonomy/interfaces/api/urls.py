"""
Taxonomy API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.taxonomy.interfaces.api.v1.urls')),
]
