"""
Storage module for URL mappings.
Implements Strategy Pattern for flexible database backends.
"""

from .strategies import MappingStore, MongoMappingStore, SQLAlchemyMappingStore
from .factory import MappingStoreBackend, MappingStoreFactory

__all__ = [
    "MappingStore",
    "MongoMappingStore",
    "SQLAlchemyMappingStore",
    "MappingStoreBackend",
    "MappingStoreFactory",
]
