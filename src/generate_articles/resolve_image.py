import logging
import re
from typing import Optional

import requests

logger = logging.getLogger(__name__)

IMAGE_SEARCH_URL = "https://pixabay.com/api/"
MAX_QUERY_LENGTH = 100

_SEPARATORS = re.compile(r"[\s,]+")


def build_search_query(keywords: str) -> str:
    """Collapse comma-joined keywords into one space-separated query."""
    return _SEPARATORS.sub(" ", keywords or "").strip()[:MAX_QUERY_LENGTH].strip()


def search_image(
    api_key: str,
    keywords: str,
    per_page: int = 3,
    timeout: int = 10,
) -> Optional[str]:
    """
    Find a photo for the given keywords via the image-search API.

    Returns the first hit's large image URL (falling back to the web-format
    URL), or None when the query is empty, the request fails, or nothing
    matches. Errors are logged and never raised.
    """
    query = build_search_query(keywords)
    if not query:
        return None

    try:
        response = requests.get(
            IMAGE_SEARCH_URL,
            params={
                "key": api_key,
                "q": query,
                "per_page": per_page,
                "image_type": "photo",
                "orientation": "horizontal",
                "safesearch": "true",
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning("Image search failed for %r: %s", query, e)
        return None

    if not response.ok:
        logger.warning("Image search for %r returned status %s", query, response.status_code)
        return None

    try:
        data = response.json()
    except ValueError:
        logger.warning("Image search for %r returned invalid JSON", query)
        return None

    hits = data.get("hits") if isinstance(data, dict) else None
    if not isinstance(hits, list) or not hits or not isinstance(hits[0], dict):
        logger.info("No image found for %r", query)
        return None

    first = hits[0]
    url = first.get("largeImageURL") or first.get("webformatURL")
    return url if isinstance(url, str) and url else None
