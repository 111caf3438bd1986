"""Helper functions for generate_articles CLI."""

from __future__ import annotations

import argparse

from common.config import env_str


def parse_generate_article_args() -> argparse.Namespace:
    """Parse CLI arguments for generate_article."""

    parser = argparse.ArgumentParser()

    parser.add_argument(
        "--prompt",
        required=True,
        help="Free-text description of the article to write",
    )
    parser.add_argument(
        "--models",
        default=None,
        help="Comma-separated model list overriding $OPENROUTER_MODELS",
    )

    # Output options
    parser.add_argument("--load-rds", action="store_true", help="Persist the generated article")
    parser.add_argument(
        "--database-url",
        default=env_str("DATABASE_URL"),
        help="SQLAlchemy URL used with --load-rds (default: $DATABASE_URL)",
    )

    return parser.parse_args()
