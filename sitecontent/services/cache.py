"""
Content cache.

Holds the `post` and `page` collections for the lifetime of one cache
object (one build or one app instance). Each collection is fetched from the
content source at most once; a failed fetch is cached as an empty list.
"""
import logging
from typing import Dict, List, Optional

from sitecontent.schemas.content import ContentRecord
from sitecontent.sources.base import ContentSource, RawRecord

logger = logging.getLogger(__name__)


def normalize_record(item: RawRecord) -> ContentRecord:
    if isinstance(item, ContentRecord):
        return item
    return ContentRecord.model_validate(item)


class ContentCache:
    """Memoizes content collections fetched from a ContentSource."""

    def __init__(self, source: ContentSource):
        self.source = source
        self._collections: Dict[str, List[ContentRecord]] = {}

    async def get_collection(self, name: str) -> List[ContentRecord]:
        cached = self._collections.get(name)
        if cached is not None:
            return cached

        # No lock: two concurrent first reads may both fetch, the last one wins
        try:
            raw = await self.source.fetch_collection(name)
            records = [normalize_record(item) for item in raw]
        except Exception as exc:
            logger.warning("%s collection not found, using empty list: %s", name, exc)
            records = []

        self._collections[name] = records
        return records

    async def get_posts(self) -> List[ContentRecord]:
        return await self.get_collection("post")

    async def get_pages(self) -> List[ContentRecord]:
        return await self.get_collection("page")

    def is_cached(self, name: str) -> bool:
        return name in self._collections

    def reset(self, name: Optional[str] = None) -> None:
        """Forget one collection, or all of them; the next read fetches again."""
        if name is None:
            self._collections.clear()
        else:
            self._collections.pop(name, None)
