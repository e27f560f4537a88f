from fastapi import Depends, Request

from sitecontent.services.cache import ContentCache
from sitecontent.services.content import ContentService
from sitecontent.services.search import SearchService

def get_content_cache(request: Request) -> ContentCache:
    return request.app.state.content_cache

def get_content_service(cache: ContentCache = Depends(get_content_cache)) -> ContentService:
    return ContentService(cache)

def get_search_service(cache: ContentCache = Depends(get_content_cache)) -> SearchService:
    return SearchService(cache)
