"""
Mapping storage strategies using Strategy Pattern.

Allows switching the database that holds short code -> URL mappings:
- MongoDB: default, one document per mapping in a single collection
- SQLAlchemy: relational table, used for local development and tests
"""

from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy.orm import Session

from link_shortener.models.url_mapping import UrlMappingRecord
from link_shortener.schemas.url import UrlMapping


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    Every method addresses the first record whose short code matches.
    Short codes are not unique, so duplicates are possible; stores never
    check for them.

    Methods are sync: both drivers are blocking and each call is a single
    round trip to the database.
    """

    @abstractmethod
    def find(self, short_code: str) -> Optional[UrlMapping]:
        """
        Look up a mapping.

        Returns:
            The mapping, or None if no record matches
        """
        pass

    @abstractmethod
    def insert(self, mapping: UrlMapping) -> None:
        """Persist a new mapping"""
        pass

    @abstractmethod
    def increment_clicks(self, short_code: str) -> bool:
        """
        Add 1 to the click counter.

        Returns:
            True if a record matched, False otherwise
        """
        pass

    @abstractmethod
    def update_url(self, short_code: str, url: str) -> bool:
        """
        Replace the destination URL (clicks and created_at untouched).

        Returns:
            True if a record matched, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, short_code: str) -> bool:
        """
        Remove a mapping.

        Returns:
            True if a record was deleted, False otherwise
        """
        pass


class MongoMappingStore(MappingStore):
    """
    MongoDB implementation over a single pymongo collection.

    Documents use camelCase field names:
    {shortCode, url, clicks, createdAt}
    """

    def __init__(self, collection):
        """
        Initialize Mongo store.

        Args:
            collection: pymongo Collection holding the mappings
        """
        self.collection = collection

    def find(self, short_code: str) -> Optional[UrlMapping]:
        document = self.collection.find_one({"shortCode": short_code})
        if document is None:
            return None
        return UrlMapping.model_validate(document)

    def insert(self, mapping: UrlMapping) -> None:
        self.collection.insert_one(mapping.model_dump(by_alias=True))

    def increment_clicks(self, short_code: str) -> bool:
        result = self.collection.update_one(
            {"shortCode": short_code},
            {"$inc": {"clicks": 1}}
        )
        return result.matched_count > 0

    def update_url(self, short_code: str, url: str) -> bool:
        result = self.collection.update_one(
            {"shortCode": short_code},
            {"$set": {"url": url}}
        )
        return result.matched_count > 0

    def delete(self, short_code: str) -> bool:
        result = self.collection.delete_one({"shortCode": short_code})
        return result.deleted_count > 0


class SQLAlchemyMappingStore(MappingStore):
    """
    Relational implementation on top of a SQLAlchemy session.

    The session is request-scoped; the store commits after each write.
    """

    def __init__(self, db: Session):
        self.db = db

    def _first(self, short_code: str) -> Optional[UrlMappingRecord]:
        return (
            self.db.query(UrlMappingRecord)
            .filter(UrlMappingRecord.short_code == short_code)
            .order_by(UrlMappingRecord.id)
            .first()
        )

    def find(self, short_code: str) -> Optional[UrlMapping]:
        record = self._first(short_code)
        if record is None:
            return None
        return UrlMapping.model_validate(record)

    def insert(self, mapping: UrlMapping) -> None:
        record = UrlMappingRecord(
            short_code=mapping.short_code,
            url=mapping.url,
            clicks=mapping.clicks,
            created_at=mapping.created_at,
        )
        self.db.add(record)
        self.db.commit()

    def increment_clicks(self, short_code: str) -> bool:
        record = self._first(short_code)
        if record is None:
            return False
        # Incremented in SQL so concurrent hits are not lost
        record.clicks = UrlMappingRecord.clicks + 1
        self.db.commit()
        return True

    def update_url(self, short_code: str, url: str) -> bool:
        record = self._first(short_code)
        if record is None:
            return False
        record.url = url
        self.db.commit()
        return True

    def delete(self, short_code: str) -> bool:
        record = self._first(short_code)
        if record is None:
            return False
        self.db.delete(record)
        self.db.commit()
        return True
