"""Article persistence backed by SQLAlchemy, with a fixture fallback for reads."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from article_store import fixtures
from article_store.connection import build_engine, build_session_factory
from article_store.models import Article, ArticleInput, Category, StoreErrorKind, StoreResult
from article_store.tables import ArticleRow, Base, CategoryRow

logger = logging.getLogger(__name__)

NOT_CONFIGURED_ERROR = "Article database is not configured. Set DATABASE_URL to enable writes."
NO_ROW_UPDATED_ERROR = "No row was updated. The article may not exist."


def _row_to_article(row: ArticleRow) -> Article:
    published_at = row.published_at
    if published_at.tzinfo is None:
        published_at = published_at.replace(tzinfo=timezone.utc)
    return Article(
        id=row.id,
        slug=row.slug,
        title=row.title,
        excerpt=row.excerpt,
        category=row.category,
        category_slug=row.category_slug,
        author=row.author,
        published_at=published_at,
        image=row.image,
        image_alt=row.image_alt,
        featured=row.featured,
        read_time=row.read_time,
        body=row.body,
    )


def _optional_strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def _editable_fields(data: ArticleInput) -> dict:
    return {
        "slug": data.slug.strip().lower(),
        "title": data.title.strip(),
        "excerpt": data.excerpt.strip(),
        "category": data.category.strip(),
        "category_slug": data.category_slug.strip().lower(),
        "author": data.author.strip(),
        "image": data.image.strip(),
        "image_alt": _optional_strip(data.image_alt),
        "featured": bool(data.featured),
        "read_time": data.read_time,
        "body": _optional_strip(data.body),
    }


class ArticleStore:
    """Read and write articles.

    Without a session factory the store is unconfigured: reads serve the
    fixture dataset and writes fail with NOT_CONFIGURED. Read errors from a
    configured backend are logged and also fall back to fixtures.
    """

    def __init__(self, session_factory: Callable[[], Session] | None = None):
        self._session_factory = session_factory

    @classmethod
    def from_database_url(cls, database_url: str | None) -> "ArticleStore":
        if not database_url:
            logger.info("DATABASE_URL not set, serving fixture articles")
            return cls()
        engine = build_engine(database_url)
        return cls(build_session_factory(engine))

    @property
    def configured(self) -> bool:
        return self._session_factory is not None

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if self._session_factory is None:
            raise RuntimeError("Article store is not configured")
        session = self._session_factory()
        try:
            yield session
        finally:
            session.close()

    def init_schema(self) -> None:
        """Create the tables if they do not exist and seed the canonical categories."""
        if self._session_factory is None:
            return
        with self._session() as session:
            Base.metadata.create_all(session.get_bind())
        self.ensure_categories(fixtures.CATEGORIES)

    # Reads

    def get_all_articles(self) -> list[Article]:
        if not self.configured:
            return fixtures.get_all_articles()
        try:
            with self._session() as session:
                rows = session.query(ArticleRow).order_by(ArticleRow.published_at.desc()).all()
                return [_row_to_article(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("get_all_articles failed: %s", exc)
            return fixtures.get_all_articles()

    def get_article_by_slug(self, slug: str) -> Article | None:
        if not self.configured:
            return fixtures.get_article_by_slug(slug)
        normalized = slug.strip().lower()
        try:
            with self._session() as session:
                row = (
                    session.query(ArticleRow)
                    .filter(func.lower(ArticleRow.slug) == normalized)
                    .first()
                )
                return _row_to_article(row) if row else None
        except SQLAlchemyError as exc:
            logger.error("get_article_by_slug(%s) failed: %s", slug, exc)
            return fixtures.get_article_by_slug(slug)

    def get_article_by_id(self, article_id: str) -> Article | None:
        if not self.configured:
            return None
        try:
            with self._session() as session:
                row = session.get(ArticleRow, article_id)
                return _row_to_article(row) if row else None
        except SQLAlchemyError as exc:
            logger.error("get_article_by_id(%s) failed: %s", article_id, exc)
            return None

    def get_articles_by_category(
        self,
        category_slug: str,
        exclude_id: str | None = None,
        limit: int = 6,
    ) -> list[Article]:
        if not self.configured:
            return fixtures.get_articles_by_category(category_slug, exclude_id, limit)
        slug = category_slug.strip().lower()
        try:
            with self._session() as session:
                query = session.query(ArticleRow).filter(func.lower(ArticleRow.category_slug) == slug)
                if exclude_id:
                    query = query.filter(ArticleRow.id != exclude_id)
                rows = query.order_by(ArticleRow.published_at.desc()).limit(limit).all()
                return [_row_to_article(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("get_articles_by_category(%s) failed: %s", category_slug, exc)
            return fixtures.get_articles_by_category(category_slug, exclude_id, limit)

    def get_categories(self) -> list[Category]:
        if not self.configured:
            return list(fixtures.CATEGORIES)
        try:
            with self._session() as session:
                rows = session.query(CategoryRow).order_by(CategoryRow.slug).all()
                categories = [Category(name=row.name, slug=row.slug) for row in rows]
        except SQLAlchemyError as exc:
            logger.error("get_categories failed: %s", exc)
            return list(fixtures.CATEGORIES)
        return categories or list(fixtures.CATEGORIES)

    # Writes

    def _slug_taken(self, session: Session, slug: str, exclude_id: str | None = None) -> bool:
        query = session.query(ArticleRow.id).filter(func.lower(ArticleRow.slug) == slug.lower())
        if exclude_id:
            query = query.filter(ArticleRow.id != exclude_id)
        return query.first() is not None

    def _integrity_failure(
        self,
        session: Session,
        exc: IntegrityError,
        slug: str,
        exclude_id: str | None = None,
    ) -> StoreResult:
        session.rollback()
        message = str(exc.orig) if exc.orig is not None else str(exc)
        try:
            duplicate = self._slug_taken(session, slug, exclude_id)
        except SQLAlchemyError:
            duplicate = False
        if duplicate:
            logger.warning("Slug %r already exists", slug)
            return StoreResult.failure(StoreErrorKind.DUPLICATE_SLUG, message)
        return StoreResult.failure(StoreErrorKind.BACKEND, message)

    def create_article(self, data: ArticleInput) -> StoreResult:
        if not self.configured:
            return StoreResult.failure(StoreErrorKind.NOT_CONFIGURED, NOT_CONFIGURED_ERROR)

        fields = _editable_fields(data)
        row = ArticleRow(
            **fields,
            published_at=data.published_at or datetime.now(timezone.utc),
        )
        with self._session() as session:
            try:
                session.add(row)
                session.commit()
            except IntegrityError as exc:
                return self._integrity_failure(session, exc, fields["slug"])
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("create_article(%s) failed: %s", fields["slug"], exc)
                return StoreResult.failure(StoreErrorKind.BACKEND, str(exc))
            article = _row_to_article(row)

        logger.info("Created article %s (%s)", article.slug, article.id)
        return StoreResult.success(article)

    def update_article(self, article_id: str, data: ArticleInput) -> StoreResult:
        if not self.configured:
            return StoreResult.failure(StoreErrorKind.NOT_CONFIGURED, NOT_CONFIGURED_ERROR)

        fields = _editable_fields(data)
        with self._session() as session:
            try:
                row = session.get(ArticleRow, article_id)
                if row is None:
                    return StoreResult.failure(StoreErrorKind.NOT_FOUND, NO_ROW_UPDATED_ERROR)
                for name, value in fields.items():
                    setattr(row, name, value)
                row.updated_at = datetime.now(timezone.utc)
                session.commit()
            except IntegrityError as exc:
                return self._integrity_failure(session, exc, fields["slug"], exclude_id=article_id)
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("update_article(%s) failed: %s", article_id, exc)
                return StoreResult.failure(StoreErrorKind.BACKEND, str(exc))
            article = _row_to_article(row)

        logger.info("Updated article %s (%s)", article.slug, article.id)
        return StoreResult.success(article)

    def ensure_categories(self, categories: list[Category]) -> None:
        """Insert any missing category rows."""
        if not self.configured:
            return
        with self._session() as session:
            for category in categories:
                if session.get(CategoryRow, category.slug) is None:
                    session.add(CategoryRow(slug=category.slug, name=category.name))
            session.commit()
