from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel

class SearchResult(BaseModel):
    title: str
    url: str
    description: str
    type: Literal["post", "page"]
    category: str
    date: Optional[datetime] = None
    author: Optional[str] = None
    image: Optional[str] = None
    source: Literal["static"] = "static"

class SearchResultItem(SearchResult):
    formatted_date: Optional[str] = None
    badge_color: str

class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultItem]
    total_count: int
    search_time_ms: float
