"""
Tests for the MongoDB mapping store against a mocked pymongo collection.
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from link_shortener.config import settings
from link_shortener.schemas.url import UrlMapping
from link_shortener.storage.factory import MappingStoreBackend, MappingStoreFactory
from link_shortener.storage.strategies import MongoMappingStore, SQLAlchemyMappingStore

CREATED_AT = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def mongo_store(collection):
    return MongoMappingStore(collection)


class TestMongoMappingStore:
    """Test the document mapping and update operators"""

    def test_insert_uses_camel_case_document(self, mongo_store, collection):
        mapping = UrlMapping(
            short_code="Ab3dE9",
            url="https://example.com",
            clicks=0,
            created_at=CREATED_AT,
        )

        mongo_store.insert(mapping)

        collection.insert_one.assert_called_once_with({
            "shortCode": "Ab3dE9",
            "url": "https://example.com",
            "clicks": 0,
            "createdAt": CREATED_AT,
        })

    def test_find_reads_document(self, mongo_store, collection):
        collection.find_one.return_value = {
            "_id": "65a000000000000000000000",
            "shortCode": "Ab3dE9",
            "url": "https://example.com",
            "clicks": 3,
            "createdAt": CREATED_AT,
        }

        mapping = mongo_store.find("Ab3dE9")

        collection.find_one.assert_called_once_with({"shortCode": "Ab3dE9"})
        assert mapping.short_code == "Ab3dE9"
        assert mapping.clicks == 3
        assert mapping.created_at == CREATED_AT

    def test_find_missing(self, mongo_store, collection):
        collection.find_one.return_value = None
        assert mongo_store.find("nope00") is None

    def test_increment_clicks(self, mongo_store, collection):
        collection.update_one.return_value.matched_count = 1

        assert mongo_store.increment_clicks("Ab3dE9") is True
        collection.update_one.assert_called_once_with(
            {"shortCode": "Ab3dE9"}, {"$inc": {"clicks": 1}}
        )

    def test_update_url(self, mongo_store, collection):
        collection.update_one.return_value.matched_count = 1

        assert mongo_store.update_url("Ab3dE9", "https://new.example.com") is True
        collection.update_one.assert_called_once_with(
            {"shortCode": "Ab3dE9"}, {"$set": {"url": "https://new.example.com"}}
        )

    def test_update_url_not_matched(self, mongo_store, collection):
        collection.update_one.return_value.matched_count = 0
        assert mongo_store.update_url("nope00", "https://example.com") is False

    def test_delete(self, mongo_store, collection):
        collection.delete_one.return_value.deleted_count = 1

        assert mongo_store.delete("Ab3dE9") is True
        collection.delete_one.assert_called_once_with({"shortCode": "Ab3dE9"})

    def test_delete_not_matched(self, mongo_store, collection):
        collection.delete_one.return_value.deleted_count = 0
        assert mongo_store.delete("nope00") is False


class TestMappingStoreFactory:
    """Test store factory"""

    def test_creates_sqlalchemy_store(self, db_session):
        store = MappingStoreFactory.create(MappingStoreBackend.SQLALCHEMY, db=db_session)
        assert isinstance(store, SQLAlchemyMappingStore)

    def test_sqlalchemy_store_needs_session(self):
        with pytest.raises(ValueError):
            MappingStoreFactory.create(MappingStoreBackend.SQLALCHEMY)

    def test_creates_mongo_store(self, monkeypatch):
        """The Mongo client is created once and shared"""
        client = MagicMock()
        monkeypatch.setattr(MappingStoreFactory, "_client", client)

        store = MappingStoreFactory.create(MappingStoreBackend.MONGODB)

        assert isinstance(store, MongoMappingStore)
        assert MappingStoreFactory.get_client() is client
        client.__getitem__.assert_called_once_with(settings.mongodb_database)
