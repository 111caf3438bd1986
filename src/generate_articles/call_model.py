"""Single best-effort chat-completion call against one hosted model."""

from __future__ import annotations

import logging

import openai
from openai import OpenAI

from generate_articles.config import GenerationConfig
from generate_articles.instructions import GENERATE_ARTICLE_INSTRUCTIONS

logger = logging.getLogger(__name__)


def build_client(config: GenerationConfig) -> OpenAI:
    """OpenAI-compatible client for the configured endpoint.

    SDK retries are disabled; falling back across the model list is the only
    retry policy.
    """
    return OpenAI(api_key=config.api_key, base_url=config.base_url, max_retries=0)


def call_model(
    model: str,
    prompt: str,
    config: GenerationConfig,
    system_prompt: str | None = None,
    client: OpenAI | None = None,
) -> str | None:
    """Send one prompt to one model and return the first choice's text.

    Returns None when the API key is unset, the request fails, the status is
    not successful, or the response carries no string content.
    """
    if not config.api_key:
        logger.warning("No API key configured, skipping model %s", model)
        return None

    client = client or build_client(config)

    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt or GENERATE_ARTICLE_INSTRUCTIONS},
                {"role": "user", "content": prompt},
            ],
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    except openai.APIStatusError as e:
        logger.error("Model %s returned status %s: %s", model, e.status_code, e.message)
        return None
    except openai.OpenAIError as e:
        logger.error("Model %s request failed: %s", model, e)
        return None

    choices = getattr(response, "choices", None) or []
    if not choices:
        logger.error("Model %s returned no choices", model)
        return None

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        logger.error("Model %s returned no text content", model)
        return None

    return content
