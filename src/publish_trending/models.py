"""Data models for publish_trending pipeline stage."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CategoryOutcome:
    """Per-category result: the stored slug on success, otherwise an error."""
    category: str
    slug: Optional[str] = None
    error: Optional[str] = None


@dataclass
class BatchReport:
    """Aggregate result of one trending-articles run."""
    ok: bool
    created: int = 0
    articles: list[CategoryOutcome] = field(default_factory=list)
    message: str = ""
    # Set only when the run aborted before any category was attempted.
    error: Optional[str] = None
