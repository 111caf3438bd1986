"""Liveness and sitemap endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from article_store.store import ArticleStore
from news_site.config import SiteConfig, get_config
from news_site.dependencies import get_store
from news_site.sitemap import build_sitemap

router = APIRouter(tags=["site"])


@router.get("/health")
async def health(store: Annotated[ArticleStore, Depends(get_store)]):
    return {"status": "ok", "database": "configured" if store.configured else "fixtures"}


@router.get("/sitemap.xml")
async def sitemap(
    store: Annotated[ArticleStore, Depends(get_store)],
    config: Annotated[SiteConfig, Depends(get_config)],
):
    body = build_sitemap(config.site.url, store.get_categories(), store.get_all_articles())
    return Response(content=body, media_type="application/xml")
