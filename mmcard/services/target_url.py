"""Canonical public URL for a card slug, shared by the page and the QR payload."""
from __future__ import annotations

import urllib.parse as urlparse

from fastapi import Request

from mmcard.core.config import Settings

# Same unreserved set as JavaScript's encodeURIComponent.
_SLUG_SAFE = "-_.!~*'()"


def encode_slug(slug: str) -> str:
    return urlparse.quote(slug or "", safe=_SLUG_SAFE)


def request_origin(request: Request) -> str:
    """Scheme and host the client used, honouring a reverse proxy's forwarded proto."""
    forwarded = (request.headers.get("x-forwarded-proto") or "").split(",")[0].strip()
    scheme = forwarded or request.url.scheme or "http"
    host = (request.headers.get("host") or "").strip() or request.url.netloc
    return f"{scheme}://{host}"


def public_base(request: Request, settings: Settings) -> str:
    base = (settings.public_base_url or "").strip()
    return base.rstrip("/") if base else request_origin(request)


def canonical_url(slug: str, base: str) -> str:
    return f"{(base or '').rstrip('/')}/{encode_slug(slug)}"
