"""CLI for generating a single article from a prompt."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from article_store.store import ArticleStore
from common.cli_helpers import print_json, setup_logging
from common.config import split_csv
from common.serialization import serialize_dataclass
from generate_articles.config import GenerationConfig
from generate_articles.generate_articles import generate_article_from_prompt_internal
from generate_articles.helpers import parse_generate_article_args
from publish_trending.publish_trending import build_article_input, create_with_slug_retry

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main() -> None:
    args = parse_generate_article_args()

    config = GenerationConfig.from_env()
    if args.models:
        config.models = split_csv(args.models)

    result = generate_article_from_prompt_internal(args.prompt, config)
    if not result.ok or result.data is None:
        logger.error(result.error)
        sys.exit(1)

    print_json(serialize_dataclass(result.data))

    if args.load_rds:
        store = ArticleStore.from_database_url(args.database_url)
        store.init_schema()
        stored = create_with_slug_retry(store, build_article_input(result.data))
        if not stored.ok or stored.article is None:
            logger.error("Failed to store article: %s", stored.error)
            sys.exit(1)
        logger.info("Stored article %s (%s)", stored.article.slug, stored.article.id)


if __name__ == "__main__":
    main()
