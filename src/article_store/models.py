"""Data models for the article store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass
class Article:
    """Persisted article."""
    id: str
    slug: str
    title: str
    excerpt: str
    category: str
    category_slug: str
    author: str
    published_at: datetime
    image: str
    image_alt: Optional[str] = None
    featured: Optional[bool] = None
    read_time: Optional[int] = None
    body: Optional[str] = None


@dataclass
class ArticleInput:
    """Editable article fields for create and update."""
    slug: str
    title: str
    excerpt: str
    category: str
    category_slug: str
    author: str
    image: str
    image_alt: Optional[str] = None
    featured: bool = False
    read_time: Optional[int] = None
    body: Optional[str] = None
    published_at: Optional[datetime] = None


@dataclass
class Category:
    name: str
    slug: str


class StoreErrorKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    DUPLICATE_SLUG = "duplicate_slug"
    NOT_FOUND = "not_found"
    BACKEND = "backend"


@dataclass
class StoreResult:
    """Outcome of a write: the stored article, or an error and its kind."""
    ok: bool
    article: Optional[Article] = None
    error: Optional[str] = None
    error_kind: Optional[StoreErrorKind] = None

    @classmethod
    def success(cls, article: Article) -> "StoreResult":
        return cls(ok=True, article=article)

    @classmethod
    def failure(cls, kind: StoreErrorKind, error: str) -> "StoreResult":
        return cls(ok=False, error=error, error_kind=kind)

    @property
    def is_duplicate_slug(self) -> bool:
        return self.error_kind is StoreErrorKind.DUPLICATE_SLUG
