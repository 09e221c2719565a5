"""Icon classification for custom card links."""
from __future__ import annotations

from enum import Enum


class IconCategory(str, Enum):
    MESSAGING = "messaging"
    PROFESSIONAL = "professional"
    PHOTO = "photo"
    SOCIAL = "social"
    GENERIC = "generic"


# Ordered by priority: the first row with a matching marker wins.
LINK_RULES: tuple[tuple[IconCategory, tuple[str, ...]], ...] = (
    (IconCategory.MESSAGING, ("wa.me", "whatsapp.com", "api.whatsapp", "t.me/", "telegram.me")),
    (IconCategory.PROFESSIONAL, ("linkedin.com", "lnkd.in")),
    (IconCategory.PHOTO, ("instagram.com", "instagr.am")),
    (IconCategory.SOCIAL, ("facebook.com", "fb.com", "fb.me", "m.me/")),
)


def classify(url: str | None) -> IconCategory:
    s = (url or "").lower()
    if not s:
        return IconCategory.GENERIC
    for category, markers in LINK_RULES:
        if any(marker in s for marker in markers):
            return category
    return IconCategory.GENERIC
