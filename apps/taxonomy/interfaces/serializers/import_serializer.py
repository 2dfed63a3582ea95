"""
Import and export serializers.
"""
from rest_framework import serializers


class CategoryImportSerializer(serializers.Serializer):
    """Serializer for an uploaded import file."""
    file = serializers.FileField()
    update_existing = serializers.BooleanField(required=False, default=False)


class ImportRowOutcomeSerializer(serializers.Serializer):
    """Serializer for the outcome of one imported row."""
    row = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    category_id = serializers.UUIDField(read_only=True, allow_null=True)
    reason = serializers.CharField(read_only=True, allow_null=True)


class ImportReportSerializer(serializers.Serializer):
    """Serializer for a bulk import report."""
    totals = serializers.DictField(child=serializers.IntegerField(), read_only=True)
    rows = ImportRowOutcomeSerializer(many=True, read_only=True)


class CategoryExportQuerySerializer(serializers.Serializer):
    """Serializer for export query parameters."""
    format = serializers.ChoiceField(choices=('csv', 'json'), required=False, default='csv')
    includeInactive = serializers.BooleanField(required=False, default=True)
