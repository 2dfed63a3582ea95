# Persistence helpers
from .errors import translate_storage_errors

__all__ = ['translate_storage_errors']
