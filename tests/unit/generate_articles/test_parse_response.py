"""Tests for generate_articles.parse_response module."""

import json

from generate_articles.models import AUTHOR_NAME
from generate_articles.parse_response import (
    PLACEHOLDER_IMAGE_URL,
    build_image_url,
    load_json_object,
    parse_and_validate,
    strip_code_fence,
)


def _payload(**overrides) -> dict:
    payload = {
        "slug": "A Sci-Fi Review",
        "title": "A Sci-Fi Review",
        "excerpt": "Short take.",
        "body": "First paragraph.\n\n## Verdict\n\nSecond paragraph.",
        "category": "movies",
        "imageKeywords": "sci-fi movie, cinema,space",
        "imageAlt": "A cinema screen",
        "readTime": "6",
    }
    payload.update(overrides)
    return payload


class TestStripCodeFence:
    def test_json_fence(self) -> None:
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self) -> None:
        assert strip_code_fence('  ```\n{"a": 1}\n```  ') == '{"a": 1}'

    def test_unfenced_is_trimmed(self) -> None:
        assert strip_code_fence('  {"a": 1} \n') == '{"a": 1}'


class TestLoadJsonObject:
    def test_invalid_json(self) -> None:
        assert load_json_object("not json") is None

    def test_non_object(self) -> None:
        assert load_json_object("[1, 2]") is None


class TestBuildImageUrl:
    def test_keywords_become_tags(self) -> None:
        assert build_image_url("sci-fi movie, cinema,space") == (
            "https://loremflickr.com/800/450/sci-fi-movie,cinema,space"
        )

    def test_empty_uses_placeholder(self) -> None:
        assert build_image_url("  ") == PLACEHOLDER_IMAGE_URL


class TestParseAndValidate:
    def test_full_payload(self) -> None:
        data = parse_and_validate(json.dumps(_payload()))

        assert data is not None
        assert data.slug == "a-sci-fi-review"
        assert data.category == "Movies"
        assert data.category_slug == "movies"
        assert data.author == AUTHOR_NAME
        assert data.image == "https://loremflickr.com/800/450/sci-fi-movie,cinema,space"
        assert data.image_alt == "A cinema screen"
        assert data.read_time == "6"
        assert data.image_keywords == "sci-fi movie, cinema,space"

    def test_fenced_equals_unfenced(self) -> None:
        raw = json.dumps(_payload())
        assert parse_and_validate(f"```json\n{raw}\n```") == parse_and_validate(raw)

    def test_missing_required_fields_invalid(self) -> None:
        for key in ("slug", "title", "body"):
            payload = _payload()
            del payload[key]
            assert parse_and_validate(json.dumps(payload)) is None

    def test_blank_slug_invalid(self) -> None:
        assert parse_and_validate(json.dumps(_payload(slug="   "))) is None

    def test_wrong_typed_field_treated_as_absent(self) -> None:
        assert parse_and_validate(json.dumps(_payload(title=123))) is None

    def test_defaults_for_optional_fields(self) -> None:
        payload = _payload()
        for key in ("excerpt", "category", "imageKeywords", "imageAlt", "readTime"):
            del payload[key]

        data = parse_and_validate(json.dumps(payload))

        assert data is not None
        assert data.excerpt == "A Sci-Fi Review"
        assert data.category == "Movies"
        assert data.image == PLACEHOLDER_IMAGE_URL
        assert data.image_alt == "Article image"
        assert data.read_time == "5"

    def test_numeric_read_time_becomes_string(self) -> None:
        data = parse_and_validate(json.dumps(_payload(readTime=8)))
        assert data is not None
        assert data.read_time == "8"

    def test_invalid_category_defaults(self) -> None:
        data = parse_and_validate(json.dumps(_payload(category="Sports")))
        assert data is not None
        assert data.category == "Movies"

    def test_garbage_never_raises(self) -> None:
        assert parse_and_validate("```json\n{broken\n```") is None
        assert parse_and_validate("") is None
