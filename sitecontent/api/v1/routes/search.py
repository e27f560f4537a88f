from typing import Any

from fastapi import APIRouter, Depends, Query

from sitecontent.api.v1.dependencies import get_search_service
from sitecontent.formatting import format_date, get_type_badge_color
from sitecontent.schemas.search import SearchResponse, SearchResultItem
from sitecontent.services.search import SearchService

router = APIRouter()

@router.get("/", response_model=SearchResponse)
async def search_content(
    q: str = Query("", description="Search query; empty returns everything"),
    service: SearchService = Depends(get_search_service)
) -> Any:
    """
    Substring search over posts, pages and the site navigation pages.
    """
    results, duration = await service.search_timed(q)

    items = [
        SearchResultItem(
            **result.model_dump(),
            formatted_date=format_date(result.date) if result.date else None,
            badge_color=get_type_badge_color(result.type),
        )
        for result in results
    ]

    return {
        "query": q,
        "results": items,
        "total_count": len(items),
        "search_time_ms": duration
    }
