"""
Tag serializers.
"""
from rest_framework import serializers

from .fields import ParentReferenceField


class TagSerializer(serializers.Serializer):
    """Serializer for tag output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    sort_order = serializers.IntegerField(read_only=True)
    category_id = serializers.UUIDField(read_only=True, allow_null=True)
    scope = serializers.CharField(read_only=True)
    is_system = serializers.BooleanField(read_only=True)
    total_products = serializers.IntegerField(read_only=True)
    last_used = serializers.DateTimeField(read_only=True)
    created_by = serializers.CharField(read_only=True, allow_null=True)
    updated_by = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class TagWriteSerializer(serializers.Serializer):
    """Serializer for tag creation and updates. `category_id` null means global."""
    name = serializers.CharField()
    slug = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    color = serializers.CharField(required=False)
    is_active = serializers.BooleanField(required=False)
    sort_order = serializers.IntegerField(required=False)
    category_id = ParentReferenceField(required=False)


class TagMaintenanceSerializer(serializers.Serializer):
    """Serializer for tag maintenance requests."""
    ACTIONS = ('refresh', 'cleanup')

    action = serializers.ChoiceField(choices=ACTIONS)
    older_than_days = serializers.IntegerField(required=False, min_value=1)


class TagMaintenanceResultSerializer(serializers.Serializer):
    """Serializer for tag maintenance results."""
    action = serializers.CharField(read_only=True)
    affected = serializers.IntegerField(read_only=True)
