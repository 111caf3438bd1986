"""Signed admin session cookies.

A cookie value is ``<payload>.<signature>``: the payload is base64url JSON
``{"email": ..., "exp": <epoch ms>}`` and the signature is base64url
HMAC-SHA256 of the encoded payload, keyed with the admin password.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import time

from news_site.config import AdminConfig

COOKIE_NAME = "admin_session"
SESSION_SECONDS = 7 * 24 * 60 * 60

LOGIN_NOT_CONFIGURED_ERROR = "Admin login is not configured (missing ADMIN_EMAIL/ADMIN_PASSWORD)."
INVALID_CREDENTIALS_ERROR = "Invalid email or password."


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def _sign(payload_b64: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload_b64.encode("utf-8"), hashlib.sha256).digest()
    return _b64encode(digest)


def _now_ms() -> int:
    return int(time.time() * 1000)


def create_session_cookie(email: str, secret: str, now_ms: int | None = None) -> str:
    now_ms = _now_ms() if now_ms is None else now_ms
    payload = json.dumps({"email": email, "exp": now_ms + SESSION_SECONDS * 1000}, separators=(",", ":"))
    payload_b64 = _b64encode(payload.encode("utf-8"))
    return f"{payload_b64}.{_sign(payload_b64, secret)}"


def verify_session_cookie(
    cookie: str | None,
    admin: AdminConfig,
    now_ms: int | None = None,
) -> bool:
    """True when the cookie is signed with the admin password, unexpired, and for the admin email."""
    if not cookie or not admin.is_configured:
        return False

    parts = cookie.split(".")
    if len(parts) != 2:
        return False
    payload_b64, signature = parts

    if not hmac.compare_digest(_sign(payload_b64, admin.password).encode(), signature.encode("utf-8")):
        return False

    try:
        payload = json.loads(_b64decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return False
    if not isinstance(payload, dict):
        return False

    exp = payload.get("exp")
    now_ms = _now_ms() if now_ms is None else now_ms
    if not isinstance(exp, (int, float)) or isinstance(exp, bool) or now_ms > exp:
        return False
    return payload.get("email") == admin.email


def check_credentials(email: str | None, password: str | None, admin: AdminConfig) -> str | None:
    """Return an error message, or None when the credentials match."""
    if not admin.is_configured:
        return LOGIN_NOT_CONFIGURED_ERROR
    if (email or "").strip() != admin.email or (password or "") != admin.password:
        return INVALID_CREDENTIALS_ERROR
    return None
