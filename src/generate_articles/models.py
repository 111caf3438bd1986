"""Data models for generate_articles pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

AUTHOR_NAME = "ntr"


@dataclass
class GeneratedArticleData:
    """Article payload produced from one model response, ready for the store."""
    slug: str
    title: str
    excerpt: str
    body: str
    category: str
    category_slug: str
    image: str
    image_alt: str
    read_time: str
    author: str = AUTHOR_NAME
    # Raw comma-joined keywords from the model, used for image search only.
    image_keywords: str = field(default="", repr=False)


@dataclass
class GenerationResult:
    """Outcome of a generation request: a payload or an error message."""
    ok: bool
    data: Optional[GeneratedArticleData] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: GeneratedArticleData) -> "GenerationResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "GenerationResult":
        return cls(ok=False, error=error)
