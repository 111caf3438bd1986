"""Tests for generate_articles.resolve_image module."""

from unittest.mock import MagicMock, patch

import requests

from generate_articles.resolve_image import IMAGE_SEARCH_URL, build_search_query, search_image


def _response(status: int = 200, payload=None) -> MagicMock:
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.json.return_value = payload
    return response


class TestBuildSearchQuery:
    def test_commas_become_spaces(self) -> None:
        assert build_search_query("sci-fi movie,cinema, space") == "sci-fi movie cinema space"

    def test_capped_at_100_chars(self) -> None:
        assert len(build_search_query("word," * 60)) <= 100


class TestSearchImage:
    def test_empty_keywords_skip_request(self) -> None:
        with patch("generate_articles.resolve_image.requests.get") as mock_get:
            assert search_image("key", " , ") is None
        mock_get.assert_not_called()

    def test_returns_large_image_url(self) -> None:
        payload = {"hits": [{"largeImageURL": "https://img/large.jpg", "webformatURL": "https://img/web.jpg"}]}
        with patch("generate_articles.resolve_image.requests.get", return_value=_response(payload=payload)) as mock_get:
            assert search_image("key", "cinema,space") == "https://img/large.jpg"

        args, kwargs = mock_get.call_args
        assert args[0] == IMAGE_SEARCH_URL
        assert kwargs["params"]["key"] == "key"
        assert kwargs["params"]["q"] == "cinema space"
        assert kwargs["params"]["per_page"] == 3

    def test_falls_back_to_webformat_url(self) -> None:
        payload = {"hits": [{"webformatURL": "https://img/web.jpg"}]}
        with patch("generate_articles.resolve_image.requests.get", return_value=_response(payload=payload)):
            assert search_image("key", "cinema") == "https://img/web.jpg"

    def test_no_hits(self) -> None:
        with patch("generate_articles.resolve_image.requests.get", return_value=_response(payload={"hits": []})):
            assert search_image("key", "cinema") is None

    def test_error_status(self) -> None:
        with patch("generate_articles.resolve_image.requests.get", return_value=_response(status=429)):
            assert search_image("key", "cinema") is None

    def test_network_error(self) -> None:
        with patch(
            "generate_articles.resolve_image.requests.get",
            side_effect=requests.ConnectionError("down"),
        ):
            assert search_image("key", "cinema") is None

    def test_invalid_json(self) -> None:
        response = _response()
        response.json.side_effect = ValueError("bad json")
        with patch("generate_articles.resolve_image.requests.get", return_value=response):
            assert search_image("key", "cinema") is None

    def test_hits_not_a_list(self) -> None:
        payload = {"hits": {"total": 0}}
        with patch("generate_articles.resolve_image.requests.get", return_value=_response(payload=payload)):
            assert search_image("key", "cinema") is None
