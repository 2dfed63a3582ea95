# Import / export file formats
from .parser import CategoryFileParser
from .exporter import CategoryExporter

__all__ = ['CategoryFileParser', 'CategoryExporter']
