"""Tests for publish_trending.publish_trending module."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from article_store.models import Article, ArticleInput, StoreErrorKind, StoreResult
from generate_articles.config import GenerationConfig
from generate_articles.models import GeneratedArticleData, GenerationResult
from publish_trending import publish_trending as publisher
from publish_trending.publish_trending import (
    MISSING_TOPIC_ERROR,
    TOPICS_UNAVAILABLE_ERROR,
    build_article_input,
    publish_trending_articles,
    unique_slug,
)

TOPICS = {
    "Movies": "movie topic",
    "TV": "tv topic",
    "Gaming": "gaming topic",
    "Tech": "tech topic",
    "Culture": "culture topic",
}

CONFIG = GenerationConfig(models=["a"], api_key="k")


def _generated(category: str) -> GeneratedArticleData:
    return GeneratedArticleData(
        slug=f"{category.lower()}-story",
        title=f"{category} story",
        excerpt="excerpt",
        body="body",
        category=category,
        category_slug=category.lower(),
        image="https://img",
        image_alt="alt",
        read_time="7",
    )


def _article(data: ArticleInput) -> Article:
    return Article(
        id=f"id-{data.slug}",
        slug=data.slug,
        title=data.title,
        excerpt=data.excerpt,
        category=data.category,
        category_slug=data.category_slug,
        author=data.author,
        published_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        image=data.image,
    )


class FakeStore:
    """Store that fails scripted slugs with a scripted error kind."""

    def __init__(self, failures: dict[str, list[StoreErrorKind]] | None = None) -> None:
        self.failures = failures or {}
        self.inputs: list[ArticleInput] = []

    def create_article(self, data: ArticleInput) -> StoreResult:
        self.inputs.append(data)
        kinds = self.failures.get(data.category, [])
        if kinds:
            kind = kinds.pop(0)
            return StoreResult.failure(kind, f"{kind.value} failure")
        return StoreResult.success(_article(data))


@pytest.fixture
def generate_all(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    prompts: list[str] = []

    def fake_generate(prompt, config):
        prompts.append(prompt)
        category = next(c for c in TOPICS if f"Category is {c}." in prompt)
        return GenerationResult.success(_generated(category))

    monkeypatch.setattr(publisher, "get_trending_topics", lambda config: dict(TOPICS))
    monkeypatch.setattr(publisher, "generate_article_from_prompt_internal", fake_generate)
    return prompts


class TestPublishTrendingArticles:
    def test_all_categories_created(self, generate_all: list[str]) -> None:
        store = FakeStore()

        report = publish_trending_articles(CONFIG, store)

        assert report.ok
        assert report.created == 5
        assert report.message == "Created 5 articles."
        assert [o.category for o in report.articles] == ["Movies", "TV", "Gaming", "Tech", "Culture"]
        assert report.articles[0].slug == "movies-story"
        assert "movie topic" in generate_all[0]
        assert "6-8 paragraphs" in generate_all[0]

    def test_store_input_is_never_featured_and_read_time_parsed(self, generate_all: list[str]) -> None:
        store = FakeStore()

        publish_trending_articles(CONFIG, store)

        assert all(i.featured is False for i in store.inputs)
        assert all(i.read_time == 7 for i in store.inputs)

    def test_duplicate_slug_retried_with_suffix(self, generate_all: list[str]) -> None:
        store = FakeStore({"TV": [StoreErrorKind.DUPLICATE_SLUG]})

        report = publish_trending_articles(CONFIG, store, clock=lambda: 1700000000.0)

        tv = report.articles[1]
        assert tv.slug == "tv-story-loyw3v28"
        assert tv.error is None
        assert report.ok
        assert report.created == 5

    def test_second_duplicate_recorded_as_failure(self, generate_all: list[str]) -> None:
        store = FakeStore({"TV": [StoreErrorKind.DUPLICATE_SLUG, StoreErrorKind.DUPLICATE_SLUG]})

        report = publish_trending_articles(CONFIG, store)

        assert report.articles[1].slug is None
        assert report.articles[1].error == "duplicate_slug failure"
        assert len([i for i in store.inputs if i.category == "TV"]) == 2

    def test_other_store_failure_not_retried(self, generate_all: list[str]) -> None:
        store = FakeStore({"Gaming": [StoreErrorKind.BACKEND]})

        report = publish_trending_articles(CONFIG, store)

        assert not report.ok
        assert report.created == 4
        assert report.message == "Created 4 articles; 1 failed."
        gaming = report.articles[2]
        assert gaming.error == "backend failure"
        assert gaming.slug is None
        assert len([i for i in store.inputs if i.category == "Gaming"]) == 1

    def test_generation_failure_continues(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_generate(prompt, config):
            if "Category is Tech." in prompt:
                return GenerationResult.failure("All models failed.")
            category = next(c for c in TOPICS if f"Category is {c}." in prompt)
            return GenerationResult.success(_generated(category))

        monkeypatch.setattr(publisher, "get_trending_topics", lambda config: dict(TOPICS))
        monkeypatch.setattr(publisher, "generate_article_from_prompt_internal", fake_generate)

        report = publish_trending_articles(CONFIG, FakeStore())

        assert report.created == 4
        assert report.articles[3].error == "All models failed."

    def test_missing_topic(self, monkeypatch: pytest.MonkeyPatch) -> None:
        topics = {**TOPICS, "Culture": ""}
        monkeypatch.setattr(publisher, "get_trending_topics", lambda config: topics)
        monkeypatch.setattr(
            publisher,
            "generate_article_from_prompt_internal",
            lambda prompt, config: GenerationResult.success(_generated("Movies")),
        )

        report = publish_trending_articles(CONFIG, FakeStore())

        assert report.articles[4].error == MISSING_TOPIC_ERROR
        assert not report.ok

    def test_topics_unavailable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(publisher, "get_trending_topics", lambda config: None)

        report = publish_trending_articles(CONFIG, FakeStore())

        assert not report.ok
        assert report.error == TOPICS_UNAVAILABLE_ERROR
        assert report.articles == []


class TestHelpers:
    def test_unique_slug(self) -> None:
        assert unique_slug("story", 36) == "story-10"

    def test_build_article_input_drops_bad_read_time(self) -> None:
        data = _generated("Tech")
        data.read_time = "soon"
        assert build_article_input(data).read_time is None
