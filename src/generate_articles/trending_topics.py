"""Ask the model list for one trending topic per canonical category."""

from __future__ import annotations

import logging
from typing import Any

from generate_articles.call_model import call_model
from generate_articles.categories import ALLOWED_CATEGORIES
from generate_articles.config import GenerationConfig
from generate_articles.generate_articles import configuration_error
from generate_articles.instructions import TRENDING_TOPICS_INSTRUCTIONS, TRENDING_TOPICS_PROMPT
from generate_articles.parse_response import load_json_object

logger = logging.getLogger(__name__)


def parse_trending_topics(content: str) -> dict[str, str] | None:
    """Extract a complete {category: topic} mapping, or None if any is missing."""
    obj: dict[str, Any] | None = load_json_object(content)
    if obj is None:
        return None

    topics: dict[str, str] = {}
    for category in ALLOWED_CATEGORIES:
        value = obj.get(category)
        if not isinstance(value, str) or not value.strip():
            logger.debug("Trending topics missing category %s", category)
            return None
        topics[category] = value.strip()
    return topics


def get_trending_topics(config: GenerationConfig) -> dict[str, str] | None:
    """Return one topic per category, or None when no model delivers all five."""
    config_error = configuration_error(config)
    if config_error:
        logger.error("Cannot fetch trending topics: %s", config_error)
        return None

    for model in config.models:
        content = call_model(
            model,
            TRENDING_TOPICS_PROMPT,
            config,
            system_prompt=TRENDING_TOPICS_INSTRUCTIONS,
        )
        if not content:
            continue

        topics = parse_trending_topics(content)
        if topics:
            logger.info("Fetched trending topics with model %s", model)
            return topics
        logger.warning("Model %s returned incomplete trending topics", model)

    logger.error("No model returned a complete set of trending topics")
    return None
