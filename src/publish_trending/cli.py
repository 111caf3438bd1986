"""CLI for publishing one trending article per category."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from article_store.store import ArticleStore
from common.aws import upload_jsonl_records_to_s3
from common.cli_helpers import setup_logging
from common.config import split_csv
from common.local_io import save_jsonl_records_local
from generate_articles.config import GenerationConfig
from publish_trending.helpers import parse_publish_trending_args
from publish_trending.publish_trending import publish_trending_articles

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)

REPORT_PREFIX = "publish_reports"


def main() -> None:
    args = parse_publish_trending_args()

    config = GenerationConfig.from_env()
    if args.models:
        config.models = split_csv(args.models)

    store = ArticleStore.from_database_url(args.database_url)
    if not store.configured:
        logger.warning("No database configured; every create will fail")
    store.init_schema()

    report = publish_trending_articles(config, store)
    if report.error:
        logger.error(report.error)
        sys.exit(1)

    for outcome in report.articles:
        logger.info(
            "  %s | %s",
            outcome.category,
            outcome.slug or f"error={outcome.error}",
        )
    logger.info(report.message)

    if args.load_s3:
        upload_jsonl_records_to_s3(report.articles, REPORT_PREFIX)

    if args.load_local:
        save_jsonl_records_local(report.articles, REPORT_PREFIX)

    if not report.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
