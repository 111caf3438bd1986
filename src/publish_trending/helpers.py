"""Helper functions for publish_trending CLI."""

from __future__ import annotations

import argparse

from common.config import env_str


def parse_publish_trending_args() -> argparse.Namespace:
    """Parse CLI arguments for publish_trending."""

    parser = argparse.ArgumentParser()

    # Input options
    parser.add_argument(
        "--database-url",
        default=env_str("DATABASE_URL"),
        help="SQLAlchemy URL of the article database (default: $DATABASE_URL)",
    )
    parser.add_argument(
        "--models",
        default=None,
        help="Comma-separated model list overriding $OPENROUTER_MODELS",
    )

    # Output options
    parser.add_argument("--load-s3", action="store_true", help="Upload per-category outcomes to S3")
    parser.add_argument("--load-local", action="store_true", help="Save per-category outcomes to local file")

    return parser.parse_args()
