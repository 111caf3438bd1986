"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime
from enum import Enum


def _convert(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _convert(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert(v) for v in value]
    return value


def serialize_dataclass(obj, drop_none: bool = False) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings.

    Args:
        obj: Dataclass instance
        drop_none: Omit keys whose value is None

    Returns:
        JSON-ready dict
    """
    data = {key: _convert(value) for key, value in asdict(obj).items()}
    if drop_none:
        data = {key: value for key, value in data.items() if value is not None}
    return data
