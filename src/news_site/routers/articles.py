"""Reader article endpoints."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from article_store.models import Article
from article_store.store import ArticleStore
from news_site.config import SiteConfig, get_config
from news_site.dependencies import get_store
from news_site.models.article import (
    ArticleDetailResponse,
    ArticleListResponse,
    ArticleResponse,
    CategoryResponse,
    HomeResponse,
    TopicSectionResponse,
)
from news_site.services.article_service import ArticleService

router = APIRouter(tags=["articles"])


def get_article_service(
    store: Annotated[ArticleStore, Depends(get_store)],
    config: Annotated[SiteConfig, Depends(get_config)],
) -> ArticleService:
    """Dependency to get article service."""
    return ArticleService(store, page_size=config.page_size)


def to_response(article: Article) -> ArticleResponse:
    return ArticleResponse(**asdict(article))


@router.get("/", response_model=HomeResponse)
async def home(service: Annotated[ArticleService, Depends(get_article_service)]):
    """Home feed: featured, latest, popular and the Deep Dives section."""
    feed = service.home()
    section = feed["topic_section"]
    return HomeResponse(
        featured=[to_response(a) for a in feed["featured"]],
        latest=[to_response(a) for a in feed["latest"]],
        popular=[to_response(a) for a in feed["popular"]],
        topic_section=TopicSectionResponse(
            title=section["title"],
            subtitle=section["subtitle"],
            link_label=section["link_label"],
            link_href=section["link_href"],
            articles=[to_response(a) for a in section["articles"]],
        ),
    )


@router.get("/articles", response_model=ArticleListResponse)
async def list_articles(
    service: Annotated[ArticleService, Depends(get_article_service)],
    q: Annotated[str | None, Query(description="Search title, excerpt, author or category")] = None,
    category: Annotated[str | None, Query(description="Filter by category slug")] = None,
    page: Annotated[int, Query(description="Page number (clamped to available pages)")] = 1,
):
    """List articles, newest first, 12 per page."""
    result = service.list_articles(q=q, category=category, page=page)
    return ArticleListResponse(
        articles=[to_response(a) for a in result.articles],
        total=result.total,
        page=result.page,
        total_pages=result.total_pages,
        page_size=result.page_size,
        q=result.q,
        category=result.category,
        category_name=result.category_name,
    )


@router.get("/articles/{slug}", response_model=ArticleDetailResponse)
async def get_article(
    slug: str,
    service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Get a single article by slug, with same-category recommendations."""
    found = service.get_article(slug)
    if found is None:
        raise HTTPException(status_code=404, detail="Article not found")

    article, recommendations = found
    return ArticleDetailResponse(
        article=to_response(article),
        recommendations=[to_response(a) for a in recommendations],
    )


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(service: Annotated[ArticleService, Depends(get_article_service)]):
    return [CategoryResponse(name=c.name, slug=c.slug) for c in service.categories()]
