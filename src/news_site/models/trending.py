"""Batch trigger response models."""

from pydantic import BaseModel


class CategoryOutcomeResponse(BaseModel):
    category: str
    slug: str | None = None
    error: str | None = None


class BatchReportResponse(BaseModel):
    ok: bool
    created: int
    articles: list[CategoryOutcomeResponse]
    message: str
