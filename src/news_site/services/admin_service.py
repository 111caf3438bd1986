"""Admin create/update actions with form validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from article_store.models import ArticleInput, StoreErrorKind, StoreResult
from article_store.store import ArticleStore
from common.utils import parse_read_time, slugify_category
from news_site.models.admin import ArticleForm

logger = logging.getLogger(__name__)

CREATE_NOT_LOGGED_IN_ERROR = "You must be logged in to create articles."
UPDATE_NOT_LOGGED_IN_ERROR = "You must be logged in to update articles."
MISSING_FIELDS_ERROR = "Missing required fields: slug, title, excerpt, category, author, image."
MISSING_BODY_ERROR = "Article body is required."
MISSING_ID_ERROR = "Missing article id."
ARTICLE_NOT_FOUND_ERROR = "Article not found."


class ActionError(str, Enum):
    UNAUTHORIZED = "unauthorized"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    DUPLICATE_SLUG = "duplicate_slug"
    NOT_CONFIGURED = "not_configured"
    BACKEND = "backend"


_STORE_ERRORS = {
    StoreErrorKind.NOT_CONFIGURED: ActionError.NOT_CONFIGURED,
    StoreErrorKind.DUPLICATE_SLUG: ActionError.DUPLICATE_SLUG,
    StoreErrorKind.NOT_FOUND: ActionError.NOT_FOUND,
    StoreErrorKind.BACKEND: ActionError.BACKEND,
}


@dataclass
class ActionResult:
    ok: bool
    message: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[ActionError] = None

    @classmethod
    def success(cls, message: str) -> "ActionResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, kind: ActionError, error: str) -> "ActionResult":
        return cls(ok=False, error=error, kind=kind)

    @classmethod
    def from_store(cls, result: StoreResult) -> "ActionResult":
        kind = _STORE_ERRORS.get(result.error_kind, ActionError.BACKEND)
        return cls.failure(kind, result.error or "Unknown error.")


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _is_checked(value: bool | str | None) -> bool:
    if isinstance(value, bool):
        return value
    return _clean(value).lower() in ("on", "true")


def form_to_input(form: ArticleForm) -> ArticleInput | str:
    """Validate editor fields and build store input, or return an error message."""
    slug = _clean(form.slug)
    title = _clean(form.title)
    excerpt = _clean(form.excerpt)
    category = _clean(form.category)
    author = _clean(form.author)
    image = _clean(form.image)
    body = _clean(form.body)

    if not (slug and title and excerpt and category and author and image):
        return MISSING_FIELDS_ERROR
    if not body:
        return MISSING_BODY_ERROR

    return ArticleInput(
        slug=slug,
        title=title,
        excerpt=excerpt,
        category=category,
        category_slug=_clean(form.category_slug).lower() or slugify_category(category),
        author=author,
        image=image,
        image_alt=_clean(form.image_alt) or None,
        featured=_is_checked(form.featured),
        read_time=parse_read_time(form.read_time),
        body=body,
    )


class AdminService:
    """Service for admin article edits."""

    def __init__(self, store: ArticleStore):
        self.store = store

    def create_article(self, form: ArticleForm, logged_in: bool) -> ActionResult:
        if not logged_in:
            return ActionResult.failure(ActionError.UNAUTHORIZED, CREATE_NOT_LOGGED_IN_ERROR)

        data = form_to_input(form)
        if isinstance(data, str):
            return ActionResult.failure(ActionError.INVALID, data)

        result = self.store.create_article(data)
        if not result.ok or result.article is None:
            logger.warning("Admin create of %s failed: %s", data.slug, result.error)
            return ActionResult.from_store(result)

        article = result.article
        return ActionResult.success(
            f'Article "{article.title}" created. View: /article/{article.slug}'
        )

    def update_article(self, article_id: str | None, form: ArticleForm, logged_in: bool) -> ActionResult:
        if not logged_in:
            return ActionResult.failure(ActionError.UNAUTHORIZED, UPDATE_NOT_LOGGED_IN_ERROR)

        article_id = _clean(article_id)
        if not article_id:
            return ActionResult.failure(ActionError.INVALID, MISSING_ID_ERROR)
        if self.store.get_article_by_id(article_id) is None:
            return ActionResult.failure(ActionError.NOT_FOUND, ARTICLE_NOT_FOUND_ERROR)

        data = form_to_input(form)
        if isinstance(data, str):
            return ActionResult.failure(ActionError.INVALID, data)

        result = self.store.update_article(article_id, data)
        if not result.ok or result.article is None:
            logger.warning("Admin update of %s failed: %s", article_id, result.error)
            return ActionResult.from_store(result)

        return ActionResult.success(f'Article "{result.article.title}" updated.')
