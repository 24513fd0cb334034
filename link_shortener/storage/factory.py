"""
Factory for creating mapping store instances.
Simple, clean factory with a singleton MongoDB client.
"""

import threading
from enum import Enum
from typing import Optional

from loguru import logger
from pymongo import MongoClient
from sqlalchemy.orm import Session

from .strategies import MappingStore, MongoMappingStore, SQLAlchemyMappingStore
from link_shortener.config import settings


class MappingStoreBackend(Enum):
    """Available mapping store backends"""
    MONGODB = "mongodb"
    SQLALCHEMY = "sqlalchemy"


class MappingStoreFactory:
    """
    Simple factory for creating mapping stores.

    The MongoDB client pools its own connections, so one client is created
    and reused for the life of the process. SQLAlchemy stores wrap the
    request-scoped session they are given.
    """

    _client: Optional[MongoClient] = None  # Single cached client
    _lock = threading.Lock()  # Guards first creation from threadpool workers

    @classmethod
    def create(
        cls,
        backend: MappingStoreBackend,
        db: Optional[Session] = None
    ) -> MappingStore:
        """
        Create a mapping store.

        Args:
            backend: Type of storage backend (from enum)
            db: Session to wrap, required for the sqlalchemy backend

        Returns:
            MappingStore instance

        Raises:
            ValueError: If the backend is unknown or db is missing
        """
        if backend == MappingStoreBackend.MONGODB:
            collection = cls.get_client()[settings.mongodb_database][
                settings.mongodb_collection
            ]
            return MongoMappingStore(collection)

        if backend == MappingStoreBackend.SQLALCHEMY:
            if db is None:
                raise ValueError("The sqlalchemy backend needs a database session")
            return SQLAlchemyMappingStore(db)

        raise ValueError(f"Unknown storage backend: {backend}")

    @classmethod
    def get_client(cls) -> MongoClient:
        """Return the shared MongoClient, creating it on first use"""
        if cls._client is None:
            with cls._lock:
                if cls._client is None:
                    # Connection is lazy; the first query opens the pool
                    cls._client = MongoClient(settings.mongodb_uri, tz_aware=True)
                    logger.info(
                        "MongoDB client initialized for database '{}'",
                        settings.mongodb_database
                    )
        return cls._client

    @classmethod
    def close(cls):
        """Close the shared MongoClient if one was created"""
        with cls._lock:
            if cls._client is not None:
                cls._client.close()
                cls._client = None
                logger.info("MongoDB client closed")
