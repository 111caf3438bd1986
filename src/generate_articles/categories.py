"""Canonical article categories."""

from common.utils import slugify_category

ALLOWED_CATEGORIES: tuple[str, ...] = ("Movies", "TV", "Gaming", "Tech", "Culture")
DEFAULT_CATEGORY = ALLOWED_CATEGORIES[0]


def normalize_category(category: str | None) -> str:
    """Map free text onto a canonical category, case-insensitively.

    Unknown or empty input falls back to the first canonical category.
    """
    wanted = (category or "").strip().lower()
    for allowed in ALLOWED_CATEGORIES:
        if allowed.lower() == wanted:
            return allowed
    return DEFAULT_CATEGORY


def category_slug(category: str) -> str:
    """Slug used in URLs and for category filtering, e.g. "TV" -> "tv"."""
    return slugify_category(category)
