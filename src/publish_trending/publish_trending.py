"""Generate and persist one article per canonical category from trending topics."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, Callable

from article_store.models import ArticleInput, StoreResult
from common.utils import parse_read_time, to_base36
from generate_articles.categories import ALLOWED_CATEGORIES
from generate_articles.config import GenerationConfig
from generate_articles.generate_articles import generate_article_from_prompt_internal
from generate_articles.instructions import build_category_prompt
from generate_articles.models import GeneratedArticleData
from generate_articles.trending_topics import get_trending_topics
from publish_trending.models import BatchReport, CategoryOutcome

logger = logging.getLogger(__name__)

TOPICS_UNAVAILABLE_ERROR = (
    "Failed to fetch trending topics from AI. Check OPENROUTER_API_KEY and OPENROUTER_MODELS."
)
MISSING_TOPIC_ERROR = "Missing topic"


def build_article_input(data: GeneratedArticleData) -> ArticleInput:
    """Map a generated payload onto the store's create input (never featured)."""
    return ArticleInput(
        slug=data.slug,
        title=data.title,
        excerpt=data.excerpt,
        category=data.category,
        category_slug=data.category_slug,
        author=data.author,
        image=data.image,
        image_alt=data.image_alt,
        featured=False,
        read_time=parse_read_time(data.read_time),
        body=data.body,
    )


def unique_slug(slug: str, now_ms: int) -> str:
    """Suffix a slug with a base-36 millisecond timestamp."""
    return f"{slug}-{to_base36(now_ms)}"


def create_with_slug_retry(
    store: Any,
    article_input: ArticleInput,
    clock: Callable[[], float] = time.time,
) -> StoreResult:
    """Create an article, retrying once with a suffixed slug on a duplicate slug."""
    result = store.create_article(article_input)
    if result.ok or not result.is_duplicate_slug:
        return result

    retry_slug = unique_slug(article_input.slug, int(clock() * 1000))
    logger.info("Slug %r taken, retrying as %r", article_input.slug, retry_slug)
    return store.create_article(replace(article_input, slug=retry_slug))


def summarize(outcomes: list[CategoryOutcome]) -> BatchReport:
    created = sum(1 for o in outcomes if o.slug)
    failed = sum(1 for o in outcomes if o.error)
    if failed == 0:
        message = f"Created {created} articles."
    else:
        message = f"Created {created} articles; {failed} failed."
    return BatchReport(ok=failed == 0, created=created, articles=outcomes, message=message)


def publish_trending_articles(
    config: GenerationConfig,
    store: Any,
    clock: Callable[[], float] = time.time,
) -> BatchReport:
    """
    Publish one AI-written article per canonical category.

    Categories are processed in canonical order, one at a time. A failure in
    one category is recorded and never stops the rest of the batch.

    Args:
        config: Model list and API keys
        store: Article store exposing create_article(ArticleInput) -> StoreResult
        clock: Time source in seconds, used for the slug retry suffix

    Returns:
        BatchReport with per-category outcomes. When topics are unavailable the
        report has ok=False, no outcomes, and error set.
    """
    topics = get_trending_topics(config)
    if not topics:
        logger.error(TOPICS_UNAVAILABLE_ERROR)
        return BatchReport(ok=False, error=TOPICS_UNAVAILABLE_ERROR)

    outcomes: list[CategoryOutcome] = []
    for category in ALLOWED_CATEGORIES:
        topic = topics.get(category)
        if not topic:
            logger.warning("%s: %s", category, MISSING_TOPIC_ERROR)
            outcomes.append(CategoryOutcome(category=category, error=MISSING_TOPIC_ERROR))
            continue

        generated = generate_article_from_prompt_internal(build_category_prompt(topic, category), config)
        if not generated.ok or generated.data is None:
            logger.warning("%s: generation failed: %s", category, generated.error)
            outcomes.append(CategoryOutcome(category=category, error=generated.error))
            continue

        result = create_with_slug_retry(store, build_article_input(generated.data), clock)
        if not result.ok or result.article is None:
            logger.warning("%s: store failed: %s", category, result.error)
            outcomes.append(CategoryOutcome(category=category, error=result.error))
            continue

        logger.info("%s: published %s", category, result.article.slug)
        outcomes.append(CategoryOutcome(category=category, slug=result.article.slug))

    report = summarize(outcomes)
    logger.info(report.message)
    return report
