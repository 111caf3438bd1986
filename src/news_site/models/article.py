"""Article Pydantic models."""

from datetime import datetime

from pydantic import BaseModel


class ArticleResponse(BaseModel):
    """Article response model."""

    id: str
    slug: str
    title: str
    excerpt: str
    category: str
    category_slug: str
    author: str
    published_at: datetime
    image: str
    image_alt: str | None = None
    featured: bool | None = None
    read_time: int | None = None
    body: str | None = None


class ArticleListResponse(BaseModel):
    """Paginated, filtered list of articles."""

    articles: list[ArticleResponse]
    total: int
    page: int
    total_pages: int
    page_size: int
    q: str | None = None
    category: str | None = None
    category_name: str | None = None


class ArticleDetailResponse(BaseModel):
    """One article plus same-category recommendations."""

    article: ArticleResponse
    recommendations: list[ArticleResponse]


class TopicSectionResponse(BaseModel):
    title: str
    subtitle: str
    link_label: str
    link_href: str
    articles: list[ArticleResponse]


class HomeResponse(BaseModel):
    """Home page feed."""

    featured: list[ArticleResponse]
    latest: list[ArticleResponse]
    popular: list[ArticleResponse]
    topic_section: TopicSectionResponse


class CategoryResponse(BaseModel):
    name: str
    slug: str
