"""Turn raw model output into a validated article payload."""

import json
import logging
import re
from typing import Any

from generate_articles.categories import category_slug, normalize_category
from generate_articles.models import AUTHOR_NAME, GeneratedArticleData

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)
_COMMA_SPACING = re.compile(r"\s*,\s*")
_WHITESPACE = re.compile(r"\s+")

KEYWORD_IMAGE_URL = "https://loremflickr.com/800/450/{tags}"
PLACEHOLDER_IMAGE_URL = "https://picsum.photos/800/450"
DEFAULT_IMAGE_ALT = "Article image"
DEFAULT_READ_TIME = "5"


def strip_code_fence(content: str) -> str:
    """Trim the text and unwrap a surrounding ``` or ```json fence."""
    text = content.strip()
    match = _CODE_FENCE.fullmatch(text)
    if match:
        text = match.group(1).strip()
    return text


def load_json_object(content: str) -> dict[str, Any] | None:
    """Parse model output as a JSON object, or None if it is not one."""
    try:
        obj = json.loads(strip_code_fence(content))
    except (json.JSONDecodeError, TypeError):
        return None
    return obj if isinstance(obj, dict) else None


def _string_field(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def _read_time_field(obj: dict[str, Any]) -> str:
    value = obj.get("readTime")
    if isinstance(value, bool):
        return DEFAULT_READ_TIME
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value
    return DEFAULT_READ_TIME


def build_image_url(keywords: str) -> str:
    """Keyword-tagged placeholder URL, or the generic placeholder."""
    tags = _WHITESPACE.sub("-", _COMMA_SPACING.sub(",", keywords.strip()))
    if not tags:
        return PLACEHOLDER_IMAGE_URL
    return KEYWORD_IMAGE_URL.format(tags=tags)


def normalize_slug(slug: str) -> str:
    return _WHITESPACE.sub("-", slug.strip()).lower()


def parse_and_validate(content: str) -> GeneratedArticleData | None:
    """Parse a model response into a GeneratedArticleData.

    Wrong-typed fields count as absent. Returns None when the text is not a
    JSON object or when slug, title or body is empty; never raises.
    """
    obj = load_json_object(content)
    if obj is None:
        logger.debug("Model output is not a JSON object")
        return None

    slug = normalize_slug(_string_field(obj, "slug"))
    title = _string_field(obj, "title")
    body = _string_field(obj, "body")
    if not slug or not title or not body:
        logger.debug("Model output missing slug, title or body")
        return None

    category = normalize_category(_string_field(obj, "category"))
    keywords = _string_field(obj, "imageKeywords").strip()

    return GeneratedArticleData(
        slug=slug,
        title=title,
        excerpt=_string_field(obj, "excerpt") or title,
        body=body,
        category=category,
        category_slug=category_slug(category),
        author=AUTHOR_NAME,
        image=build_image_url(keywords),
        image_alt=obj["imageAlt"] if isinstance(obj.get("imageAlt"), str) else DEFAULT_IMAGE_ALT,
        read_time=_read_time_field(obj),
        image_keywords=keywords,
    )
