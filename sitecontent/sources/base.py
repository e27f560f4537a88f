from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence, Union

from sitecontent.errors import ContentSourceError
from sitecontent.schemas.content import ContentRecord

COLLECTIONS = ("post", "page")

RawRecord = Union[ContentRecord, Mapping[str, Any]]


class ContentSource(ABC):
    """
    Supplies the `post` and `page` collections.

    Items may be ContentRecord instances or raw mappings shaped like front
    matter plus `slug` and `body`; the cache normalizes them.
    """

    @abstractmethod
    async def fetch_collection(self, name: str) -> Sequence[RawRecord]:
        ...

    def check_collection(self, name: str) -> None:
        if name not in COLLECTIONS:
            raise ContentSourceError(name, "unknown collection")
