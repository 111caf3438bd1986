"""Batch trigger for trending-topic articles."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from article_store.store import ArticleStore
from generate_articles.config import GenerationConfig
from news_site.dependencies import get_generation_config, get_store
from news_site.models.trending import BatchReportResponse
from publish_trending.publish_trending import publish_trending_articles

router = APIRouter(prefix="/api", tags=["trending"])


def run_trending_batch(
    store: Annotated[ArticleStore, Depends(get_store)],
    config: Annotated[GenerationConfig, Depends(get_generation_config)],
):
    report = publish_trending_articles(config, store)
    if report.error:
        return JSONResponse(status_code=502, content={"error": report.error})
    return BatchReportResponse(
        ok=report.ok,
        created=report.created,
        articles=[asdict(o) for o in report.articles],
        message=report.message,
    )


router.add_api_route(
    "/generate-trending-articles",
    run_trending_batch,
    methods=["GET", "POST"],
    response_model=BatchReportResponse,
    response_model_exclude_none=True,
)
