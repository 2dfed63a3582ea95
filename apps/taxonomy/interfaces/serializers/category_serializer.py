"""
Category serializers.
"""
from collections.abc import Mapping

from rest_framework import serializers

from .fields import PARENT_REFERENCE_ALIAS, ParentReferenceField


class CategoryReferenceSerializer(serializers.Serializer):
    """Serializer for the parent summary."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    slug = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    short_description = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)
    icon = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True, allow_null=True)
    parent = CategoryReferenceSerializer(read_only=True, allow_null=True)
    parent_id = serializers.UUIDField(read_only=True, allow_null=True)
    level = serializers.IntegerField(read_only=True)
    sort_order = serializers.IntegerField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    is_visible = serializers.BooleanField(read_only=True)
    is_featured = serializers.BooleanField(read_only=True)
    tag_ids = serializers.ListField(child=serializers.UUIDField(), read_only=True)
    seo_title = serializers.CharField(read_only=True)
    seo_description = serializers.CharField(read_only=True)
    seo_keywords = serializers.ListField(child=serializers.CharField(), read_only=True)
    product_count = serializers.IntegerField(read_only=True)
    created_by = serializers.CharField(read_only=True, allow_null=True)
    updated_by = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class CategoryWriteSerializer(serializers.Serializer):
    """
    Serializer for category creation and updates.

    Length and format rules live in the domain; this layer only checks types.
    """
    name = serializers.CharField()
    slug = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    short_description = serializers.CharField(required=False, allow_blank=True)
    image = serializers.CharField(required=False, allow_blank=True)
    icon = serializers.CharField(required=False, allow_blank=True)
    color = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    parent_id = ParentReferenceField(required=False)
    sort_order = serializers.IntegerField(required=False)
    is_active = serializers.BooleanField(required=False)
    is_visible = serializers.BooleanField(required=False)
    is_featured = serializers.BooleanField(required=False)
    tag_ids = serializers.ListField(child=serializers.UUIDField(), required=False)
    seo_title = serializers.CharField(required=False, allow_blank=True)
    seo_description = serializers.CharField(required=False, allow_blank=True)
    seo_keywords = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False
    )

    def to_internal_value(self, data):
        # The parent may also be sent under the list filter's name.
        if isinstance(data, Mapping) and PARENT_REFERENCE_ALIAS in data:
            if 'parent_id' in data:
                raise serializers.ValidationError({
                    PARENT_REFERENCE_ALIAS: 'Send either parent_id or parentCategory, not both.',
                })
            data = data.copy()
            data['parent_id'] = data[PARENT_REFERENCE_ALIAS]
            del data[PARENT_REFERENCE_ALIAS]
        return super().to_internal_value(data)


class CategoryTreeNodeSerializer(serializers.Serializer):
    """Serializer for a node of the category forest."""
    id = serializers.UUIDField(source='category.id', read_only=True)
    name = serializers.CharField(source='category.name', read_only=True)
    slug = serializers.CharField(source='category.slug', read_only=True)
    icon = serializers.CharField(source='category.icon', read_only=True)
    image = serializers.CharField(source='category.image', read_only=True)
    color = serializers.CharField(source='category.color', read_only=True, allow_null=True)
    level = serializers.IntegerField(source='category.level', read_only=True)
    sort_order = serializers.IntegerField(source='category.sort_order', read_only=True)
    is_featured = serializers.BooleanField(source='category.is_featured', read_only=True)
    product_count = serializers.IntegerField(read_only=True)
    total_product_count = serializers.IntegerField(read_only=True)
    children = serializers.SerializerMethodField()

    def get_children(self, node):
        return CategoryTreeNodeSerializer(node.children, many=True, context=self.context).data
