"""
Custom serializer fields.
"""
from uuid import UUID

from rest_framework import serializers

ROOT_REFERENCE = 'root'
PARENT_REFERENCE_ALIAS = 'parentCategory'


class ParentReferenceField(serializers.Field):
    """
    Parent category reference.

    Accepts a category id, or null, an empty string or "root" to mean no
    parent.
    """
    default_error_messages = {
        'invalid': 'Must be a category id, null or "root".',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if data in ('', ROOT_REFERENCE):
            return None
        if isinstance(data, UUID):
            return data
        try:
            return UUID(str(data))
        except ValueError:
            self.fail('invalid')

    def to_representation(self, value):
        return str(value) if value is not None else None
