"""
FastAPI dependencies for dependency injection.

This module provides the mapping store and the URL service that are
injected into routes. Tests override get_db (or get_mapping_store) to run
against a throwaway database.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from link_shortener.config import settings
from link_shortener.database.connection import get_db
from link_shortener.storage.factory import MappingStoreBackend, MappingStoreFactory
from link_shortener.storage.strategies import MappingStore


def get_mapping_store(db: Session = Depends(get_db)) -> MappingStore:
    """
    Get the configured mapping store for one request.

    MongoDB stores share the process-wide client and ignore the session.
    SQLAlchemy stores wrap the request session, which get_db closes when
    the request finishes. Sessions only connect on first query, so the
    unused one costs nothing on the MongoDB backend.
    """
    backend = MappingStoreBackend(settings.storage_backend)
    if backend == MappingStoreBackend.SQLALCHEMY:
        return MappingStoreFactory.create(backend, db=db)
    return MappingStoreFactory.create(backend)


def get_url_service(store: MappingStore = Depends(get_mapping_store)):
    """Get URLService with the mapping store injected"""
    from link_shortener.services.url_service import URLService
    return URLService(store=store)
