# Serializers
from .category_serializer import (
    CategorySerializer,
    CategoryWriteSerializer,
    CategoryTreeNodeSerializer,
)
from .tag_serializer import (
    TagSerializer,
    TagWriteSerializer,
    TagMaintenanceSerializer,
    TagMaintenanceResultSerializer,
)
from .import_serializer import (
    CategoryImportSerializer,
    ImportReportSerializer,
    CategoryExportQuerySerializer,
)

__all__ = [
    'CategorySerializer',
    'CategoryWriteSerializer',
    'CategoryTreeNodeSerializer',
    'TagSerializer',
    'TagWriteSerializer',
    'TagMaintenanceSerializer',
    'TagMaintenanceResultSerializer',
    'CategoryImportSerializer',
    'ImportReportSerializer',
    'CategoryExportQuerySerializer',
]
