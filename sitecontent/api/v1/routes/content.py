from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sitecontent.api.v1.dependencies import get_content_service
from sitecontent.config import settings
from sitecontent.formatting import format_date, render_markdown, strip_html
from sitecontent.schemas.content import CategoryCount, ContentRecord, PostDetail, PostSummary, TagCount
from sitecontent.services.content import ContentService

router = APIRouter()

def summarize(post: ContentRecord, html: str = "") -> dict:
    html = html or render_markdown(post.body)
    return {
        "slug": post.slug,
        "url": post.url,
        "title": post.title,
        "description": post.description,
        "category": post.category,
        "tags": post.tags,
        "author": post.author,
        "publish_date": post.publish_date,
        "formatted_date": format_date(post.publish_date) if post.publish_date else None,
        "image": post.image,
        "image_alt": post.image_alt,
        "featured": post.featured,
        "excerpt": strip_html(html, settings.EXCERPT_LENGTH),
    }

@router.get("/categories", response_model=List[CategoryCount])
async def list_categories(service: ContentService = Depends(get_content_service)) -> Any:
    return await service.get_categories()

@router.get("/tags", response_model=List[TagCount])
async def list_tags(service: ContentService = Depends(get_content_service)) -> Any:
    return await service.get_tags()

@router.get("/posts/recent", response_model=List[PostSummary])
async def recent_posts(
    limit: int = Query(settings.RECENT_POSTS_LIMIT, ge=1, le=50),
    service: ContentService = Depends(get_content_service)
) -> Any:
    posts = await service.get_recent_posts(limit=limit)
    return [summarize(post) for post in posts]

@router.get("/posts/featured", response_model=List[PostSummary])
async def featured_posts(
    limit: int = Query(settings.FEATURED_POSTS_LIMIT, ge=1, le=50),
    service: ContentService = Depends(get_content_service)
) -> Any:
    posts = await service.get_featured_posts(limit=limit)
    return [summarize(post) for post in posts]

@router.get("/categories/{category}", response_model=List[PostSummary])
async def posts_in_category(category: str, service: ContentService = Depends(get_content_service)) -> Any:
    posts = await service.get_posts_by_category(category)
    return [summarize(post) for post in posts]

@router.get("/tags/{tag}", response_model=List[PostSummary])
async def posts_with_tag(tag: str, service: ContentService = Depends(get_content_service)) -> Any:
    posts = await service.get_posts_by_tag(tag)
    return [summarize(post) for post in posts]

@router.get("/posts/{slug:path}", response_model=PostDetail)
async def read_post(slug: str, service: ContentService = Depends(get_content_service)) -> Any:
    """
    Single post with rendered HTML.

    `recent` and `featured` are routed to the listings above, so posts with
    those slugs are only reachable through listings and search.
    """
    post = await service.get_post(slug)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

    html = render_markdown(post.body)
    return {**summarize(post, html), "update_date": post.update_date, "html": html}
