"""
Database models for the URL shortener.

Only the relational backend needs an ORM model; MongoDB documents are
validated straight into the UrlMapping schema.
"""

from .url_mapping import UrlMappingRecord

__all__ = ["UrlMappingRecord"]
