from sqlalchemy import Column, DateTime, Integer, String
from link_shortener.config import settings
from link_shortener.database.connection import Base


class UrlMappingRecord(Base):
    """
    Relational row for a short code -> URL mapping.

    Used by the sqlalchemy storage backend. short_code is indexed for lookups
    but not unique: codes are random and never checked for
    collisions, so duplicate rows are possible and lookups take the first.
    """
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    short_code = Column(String(settings.short_code_length), nullable=False, index=True)
    url = Column(String, nullable=False)
    clicks = Column(Integer, nullable=False, default=0)
    # Set by the service at creation time, never updated
    created_at = Column(DateTime(timezone=True), nullable=False)
