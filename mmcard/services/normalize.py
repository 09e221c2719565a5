"""Field normalization helpers for profile values shown on the card."""
from __future__ import annotations

import re
import urllib.parse as urlparse
from typing import Any, Optional

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query="

_SCHEME_RE = re.compile(r"^(https?://|mailto:|tel:)", re.IGNORECASE)
_HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")


def clean_text(value: Any) -> Optional[str]:
    """
    Turn a loose record value into optional text.
    None and blank strings become None; present text is kept as stored.
    """
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return None
    return text


def normalize_website(raw: str | None) -> Optional[str]:
    """
    Prefix https:// when the stored website has no scheme.
    mailto: and tel: values are kept as-is.
    """
    v = (raw or "").strip()
    if not v:
        return None
    if _SCHEME_RE.match(v):
        return v
    return "https://" + v.lstrip("/")


def safe_hex_color(raw: str | None, fallback: str) -> str:
    """Return raw only when it is exactly '#RRGGBB'; anything else yields fallback."""
    if isinstance(raw, str) and _HEX_COLOR_RE.fullmatch(raw):
        return raw
    return fallback


def maps_link(location: str | None) -> Optional[str]:
    loc = (location or "").strip()
    if not loc:
        return None
    return MAPS_SEARCH_URL + urlparse.quote(loc, safe="")


def phone_href(phone: str | None) -> Optional[str]:
    s = (phone or "").strip()
    if not s:
        return None
    keep_plus = s.startswith("+")
    digits = re.sub(r"\D", "", s)
    if not digits:
        return "tel:" + urlparse.quote(s, safe="")
    return "tel:" + (("+" + digits) if keep_plus else digits)


def email_href(email: str | None) -> Optional[str]:
    e = (email or "").strip()
    return f"mailto:{e}" if e else None
