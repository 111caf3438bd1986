"""FastAPI dependencies shared by the routers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from article_store.store import ArticleStore
from generate_articles.config import GenerationConfig
from news_site.auth import COOKIE_NAME, verify_session_cookie
from news_site.config import SiteConfig, get_config


@lru_cache(maxsize=4)
def _store_for(database_url: str | None, init_schema: bool) -> ArticleStore:
    store = ArticleStore.from_database_url(database_url)
    if init_schema:
        store.init_schema()
    return store


def get_store(config: Annotated[SiteConfig, Depends(get_config)]) -> ArticleStore:
    """One store (and engine) per database URL for the process."""
    return _store_for(config.database.url, config.database.init_schema)


@lru_cache(maxsize=1)
def get_generation_config() -> GenerationConfig:
    """Model list and keys, read from the environment once per process."""
    return GenerationConfig.from_env()


def is_admin_logged_in(
    request: Request,
    config: Annotated[SiteConfig, Depends(get_config)],
) -> bool:
    return verify_session_cookie(request.cookies.get(COOKIE_NAME), config.admin)
