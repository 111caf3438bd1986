"""Generate an article by falling back across the configured model list."""

from __future__ import annotations

import logging
from dataclasses import replace

from generate_articles.call_model import call_model
from generate_articles.config import GenerationConfig
from generate_articles.models import GeneratedArticleData, GenerationResult
from generate_articles.parse_response import parse_and_validate
from generate_articles.resolve_image import search_image

logger = logging.getLogger(__name__)

NOT_LOGGED_IN_ERROR = "You must be logged in to use this feature."
EMPTY_PROMPT_ERROR = "Please enter a prompt describing the article."
NO_MODELS_ERROR = (
    "No OpenRouter models configured. Set OPENROUTER_MODELS in your environment "
    "(e.g. openai/gpt-4o-mini,anthropic/claude-3-haiku)."
)
NO_API_KEY_ERROR = "OpenRouter API key is not set (OPENROUTER_API_KEY)."
INVALID_JSON_ERROR = "Model returned invalid or incomplete JSON."
ALL_MODELS_FAILED_ERROR = (
    "All models failed. Try again or check your API key and OPENROUTER_MODELS."
)


def configuration_error(config: GenerationConfig) -> str | None:
    """Actionable message when the model list or API key is missing."""
    if not config.has_models:
        return NO_MODELS_ERROR
    if not config.api_key:
        return NO_API_KEY_ERROR
    return None


def _with_searched_image(
    data: GeneratedArticleData,
    config: GenerationConfig,
) -> GeneratedArticleData:
    if not config.image_search_api_key or not data.image_keywords:
        return data
    image = search_image(config.image_search_api_key, data.image_keywords)
    if not image:
        return data
    return replace(data, image=image)


def generate_article_from_prompt_internal(
    prompt: str,
    config: GenerationConfig,
) -> GenerationResult:
    """Generate an article without an authentication check.

    Used by trusted server-side jobs. Models are tried strictly in order and
    the first one yielding a valid payload wins.
    """
    trimmed = (prompt or "").strip()
    if not trimmed:
        return GenerationResult.failure(EMPTY_PROMPT_ERROR)

    config_error = configuration_error(config)
    if config_error:
        return GenerationResult.failure(config_error)

    last_error: str | None = None
    for model in config.models:
        content = call_model(model, trimmed, config)
        if not content:
            last_error = f"Model {model} failed or returned no content."
            continue

        data = parse_and_validate(content)
        if data is None:
            logger.warning("Model %s returned invalid or incomplete JSON", model)
            last_error = INVALID_JSON_ERROR
            continue

        logger.info("Generated article %r with model %s", data.slug, model)
        return GenerationResult.success(_with_searched_image(data, config))

    return GenerationResult.failure(last_error or ALL_MODELS_FAILED_ERROR)


def generate_article_with_ai(
    prompt: str,
    config: GenerationConfig,
    logged_in: bool,
) -> GenerationResult:
    """Admin-facing entry point: requires an authenticated caller."""
    if not logged_in:
        return GenerationResult.failure(NOT_LOGGED_IN_ERROR)
    return generate_article_from_prompt_internal(prompt, config)
