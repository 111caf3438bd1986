"""Reader-facing article queries: home feed, listing, detail."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from article_store import fixtures
from article_store.models import Article, Category
from article_store.store import ArticleStore

FEATURED_LIMIT = 5
LATEST_LIMIT = 6
POPULAR_LIMIT = 4
DEEP_DIVES_LIMIT = 3
RECOMMENDATIONS_LIMIT = 3


@dataclass
class ArticlePage:
    articles: list[Article]
    total: int
    page: int
    total_pages: int
    page_size: int
    q: str | None = None
    category: str | None = None
    category_name: str | None = None


def _matches_query(article: Article, query: str) -> bool:
    haystacks = (article.title, article.excerpt, article.author, article.category)
    return any(query in (value or "").lower() for value in haystacks)


class ArticleService:
    """Service for reading articles from the store."""

    def __init__(self, store: ArticleStore, page_size: int = 12):
        self.store = store
        self.page_size = page_size

    def home(self) -> dict[str, Any]:
        """Build the home feed.

        The unconfigured store serves the curated sample sections as they are.
        Otherwise sections are derived from all articles, newest first.
        """
        if not self.store.configured:
            return {
                "featured": fixtures.FEATURED_ARTICLES,
                "latest": fixtures.LATEST_ARTICLES,
                "popular": fixtures.POPULAR_ARTICLES,
                "topic_section": fixtures.TOPIC_SECTION,
            }

        articles = self.store.get_all_articles()
        deep_dives = sorted(articles, key=lambda a: a.read_time or 0, reverse=True)
        return {
            "featured": [a for a in articles if a.featured][:FEATURED_LIMIT],
            "latest": articles[:LATEST_LIMIT],
            "popular": articles[LATEST_LIMIT:LATEST_LIMIT + POPULAR_LIMIT],
            "topic_section": {
                **{k: v for k, v in fixtures.TOPIC_SECTION.items() if k != "articles"},
                "articles": deep_dives[:DEEP_DIVES_LIMIT],
            },
        }

    def list_articles(
        self,
        q: str | None = None,
        category: str | None = None,
        page: int = 1,
    ) -> ArticlePage:
        """List articles with optional search and category filter.

        Args:
            q: Case-insensitive substring of title, excerpt, author or category
            category: Category slug (case-insensitive)
            page: 1-based page number, clamped to the available range

        Returns:
            ArticlePage with the requested slice and paging metadata
        """
        articles = self.store.get_all_articles()

        category_slug = (category or "").strip().lower() or None
        category_name = None
        if category_slug:
            articles = [a for a in articles if a.category_slug.lower() == category_slug]
            category_name = self._category_name(category_slug)

        query = (q or "").strip()
        if query:
            articles = [a for a in articles if _matches_query(a, query.lower())]

        total = len(articles)
        total_pages = max(1, math.ceil(total / self.page_size))
        page = min(max(page, 1), total_pages)
        start = (page - 1) * self.page_size

        return ArticlePage(
            articles=articles[start:start + self.page_size],
            total=total,
            page=page,
            total_pages=total_pages,
            page_size=self.page_size,
            q=query or None,
            category=category_slug,
            category_name=category_name,
        )

    def get_article(self, slug: str) -> tuple[Article, list[Article]] | None:
        """Return an article and up to three same-category recommendations."""
        article = self.store.get_article_by_slug(slug)
        if article is None:
            return None
        recommendations = self.store.get_articles_by_category(
            article.category_slug,
            exclude_id=article.id,
            limit=RECOMMENDATIONS_LIMIT,
        )
        return article, recommendations

    def categories(self) -> list[Category]:
        return self.store.get_categories()

    def _category_name(self, slug: str) -> str | None:
        for category in self.store.get_categories():
            if category.slug.lower() == slug:
                return category.name
        return None
