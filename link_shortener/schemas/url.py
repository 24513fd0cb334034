from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged in camelCase (shortCode, createdAt)

    populate_by_name lets services build models with snake_case keywords,
    from_attributes lets them read SQLAlchemy rows directly.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class URLRequest(BaseModel):
    # Optional so a missing url reaches the service and is reported as 400
    url: Optional[str] = Field(
        None,
        description="The destination URL",
        examples=["https://example.com"],
    )


class ShortenResponse(CamelModel):
    short_code: str = Field(..., examples=["Ab3dE9"])
    url: str = Field(..., examples=["https://example.com"])


class UrlMapping(CamelModel):
    """A persisted mapping, also returned verbatim by the stats endpoint"""
    short_code: str
    url: str
    clicks: int = 0
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset; timestamps are always written in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
