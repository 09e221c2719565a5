"""Explicit profile schema built from the loosely-typed stored record."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from mmcard.services.normalize import clean_text

# Links without an explicit order go after every ordered link.
UNORDERED_SENTINEL = math.inf


class ThemeName(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    FULL = "full"
    GRADIENT = "gradient"

    @classmethod
    def parse(cls, value: Any) -> "ThemeName":
        """Map a stored theme identifier to the closed set, defaulting to light."""
        if isinstance(value, cls):
            return value
        key = (value if isinstance(value, str) else "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.LIGHT


def _int_or_none(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class LinkEntry:
    id: str
    label: Optional[str]
    url: Optional[str]
    sort_order: Optional[int] = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any], position: int = 0) -> "LinkEntry":
        ident = clean_text(record.get("id")) or str(position)
        return cls(
            id=ident,
            label=clean_text(record.get("label")),
            url=clean_text(record.get("url")),
            sort_order=_int_or_none(record.get("sort_order")),
        )

    @property
    def sort_key(self) -> float:
        return UNORDERED_SENTINEL if self.sort_order is None else self.sort_order


def sort_links(links: Iterable[LinkEntry]) -> list[LinkEntry]:
    """Ascending sort_order, unordered links last; ties keep their input order."""
    return sorted(links, key=lambda link: link.sort_key)


_TEXT_FIELDS = (
    "full_name",
    "title",
    "company",
    "email",
    "phone",
    "website",
    "location",
    "bio",
    "logo_url",
    "avatar_url",
    "theme_color",
    "theme_gradient_from",
    "theme_gradient_to",
)


@dataclass(frozen=True)
class Profile:
    """A stored card profile; every text field is optional and None when absent."""

    slug: str
    full_name: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    logo_url: Optional[str] = None
    avatar_url: Optional[str] = None
    theme: ThemeName = ThemeName.LIGHT
    theme_color: Optional[str] = None
    theme_gradient_from: Optional[str] = None
    theme_gradient_to: Optional[str] = None
    links: tuple[LinkEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        links: Iterable[Mapping[str, Any] | LinkEntry] = (),
    ) -> "Profile":
        """
        Build a Profile from an untyped record (SQL JSON column or JSON file entry).

        Missing keys, nulls and blank strings all become None; an unknown theme
        becomes light.
        """
        slug = (clean_text(record.get("slug")) or "").strip()
        if not slug:
            raise ValueError("profile record without slug")
        values = {name: clean_text(record.get(name)) for name in _TEXT_FIELDS}
        entries = tuple(
            item if isinstance(item, LinkEntry) else LinkEntry.from_record(item, position)
            for position, item in enumerate(links or ())
        )
        return cls(slug=slug, theme=ThemeName.parse(record.get("theme")), links=entries, **values)

    def sorted_links(self) -> list[LinkEntry]:
        return sort_links(self.links)
