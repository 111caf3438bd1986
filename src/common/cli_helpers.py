"""Common CLI helper utilities."""

from __future__ import annotations

import json
import logging
from typing import Any


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools and the web app."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def print_json(payload: Any) -> None:
    """Print a JSON document to stdout (datetimes rendered as strings)."""
    print(json.dumps(payload, default=str, ensure_ascii=False, indent=2))
