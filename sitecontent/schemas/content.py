import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitecontent.formatting import coerce_datetime

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ContentRecord(BaseModel):
    """A post or page entry, normalized once when it enters the cache."""

    slug: str = Field(..., min_length=1)
    title: str
    description: str
    body: str = ""
    category: Optional[str] = None
    tags: List[str] = []
    author: Optional[str] = None
    publish_date: Optional[datetime] = Field(None, alias="publishDate")
    update_date: Optional[datetime] = Field(None, alias="updateDate")
    image: Optional[str] = None
    image_alt: Optional[str] = Field(None, alias="imageAlt")
    featured: bool = False
    draft: bool = False

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @field_validator("body", mode="before")
    @classmethod
    def default_body(cls, v: Any) -> str:
        return "" if v is None else v

    @field_validator("category", mode="before")
    @classmethod
    def blank_category(cls, v: Any) -> Optional[str]:
        return v or None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> List[str]:
        # Anything but a list of tags (a bare string included) means no tags
        if not isinstance(v, (list, tuple)):
            return []
        return [str(tag) for tag in v if tag]

    @field_validator("publish_date", "update_date", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Optional[datetime]:
        # A bad date only loses the date, not the record
        try:
            return coerce_datetime(v)
        except (ValueError, OverflowError):
            logger.warning("Ignoring unparsable date %r", v)
            return None

    @field_validator("featured", "draft", mode="before")
    @classmethod
    def default_flags(cls, v: Any) -> bool:
        return False if v is None else v

    @property
    def url(self) -> str:
        return f"/{self.slug}"

    @property
    def sort_date(self) -> datetime:
        return self.publish_date or EPOCH


class CategoryCount(BaseModel):
    category: str
    count: int


class TagCount(BaseModel):
    tag: str
    count: int


class PostSummary(BaseModel):
    slug: str
    url: str
    title: str
    description: str
    category: Optional[str]
    tags: List[str]
    author: Optional[str]
    publish_date: Optional[datetime]
    formatted_date: Optional[str]
    image: Optional[str]
    image_alt: Optional[str]
    featured: bool
    excerpt: str


class PostDetail(PostSummary):
    update_date: Optional[datetime]
    html: str
