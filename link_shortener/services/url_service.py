from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from link_shortener.config import settings
from link_shortener.schemas.url import UrlMapping
from link_shortener.services.exceptions import MissingURLError, ShortCodeNotFoundError
from link_shortener.services.short_code import RandomShortCodeGenerator
from link_shortener.storage.strategies import MappingStore


class URLService:
    """
    URL Service with dependency injection for the mapping store.

    Every operation is a direct lookup or write against the store; the
    service holds no state between requests.
    """

    def __init__(
        self,
        store: MappingStore,
        generator: Optional[RandomShortCodeGenerator] = None
    ):
        """
        Initialize URL service with dependencies.

        Args:
            store: Mapping store (MongoDB or SQLAlchemy)
            generator: Short code generator (defaults to settings length)
        """
        self.store = store
        self.generator = generator or RandomShortCodeGenerator(
            length=settings.short_code_length
        )

    @staticmethod
    def _require_url(url: Optional[str]) -> str:
        if not url:
            raise MissingURLError()
        return url

    async def create_short_url(self, url: Optional[str]) -> UrlMapping:
        """Create a new short URL

        The url is stored as given, without format validation. The code
        is not checked for collisions and is never retried.
        """
        url = self._require_url(url)
        mapping = UrlMapping(
            short_code=self.generator.generate(),
            url=url,
            clicks=0,
            created_at=datetime.now(timezone.utc),
        )
        self.store.insert(mapping)

        logger.info("Created short code {} for {}", mapping.short_code, url)
        return mapping

    async def get_mapping(self, short_code: str) -> UrlMapping:
        """Get the stored mapping (used by the stats endpoint)"""
        mapping = self.store.find(short_code)
        if mapping is None:
            logger.warning("Short code {} not found", short_code)
            raise ShortCodeNotFoundError(short_code)
        return mapping

    async def resolve_for_redirect(self, short_code: str) -> str:
        """
        Get the destination URL and count the visit.

        Lookup and increment are two separate store operations; a delete
        landing between them leaves the redirect going to the old URL.
        """
        mapping = await self.get_mapping(short_code)
        self.store.increment_clicks(short_code)
        return mapping.url

    async def update_url(self, short_code: str, url: Optional[str]) -> None:
        """Replace the destination URL; clicks and created_at are kept"""
        url = self._require_url(url)
        if not self.store.update_url(short_code, url):
            logger.warning("Short code {} not found for update", short_code)
            raise ShortCodeNotFoundError(short_code)

        logger.info("Updated short code {} to {}", short_code, url)

    async def delete_url(self, short_code: str) -> None:
        """Delete a short URL"""
        if not self.store.delete(short_code):
            logger.warning("Short code {} not found for delete", short_code)
            raise ShortCodeNotFoundError(short_code)

        logger.info("Deleted short code {}", short_code)
