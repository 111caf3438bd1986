"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from common.cli_helpers import setup_logging
from news_site.config import get_config
from news_site.routers import admin, articles, health, trending

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="NTR",
        description="News Trends and Reports: articles, admin editing and AI-generated trending stories",
        version="1.0.0",
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(articles.router)
    app.include_router(admin.router)
    app.include_router(trending.router)

    return app


app = create_app()


def main():
    """Run the site server."""
    import uvicorn

    setup_logging()
    config = get_config()
    logger.info("Starting %s on %s:%d", config.site.name, config.server.host, config.server.port)

    uvicorn.run(
        "news_site.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
    )


if __name__ == "__main__":
    main()
