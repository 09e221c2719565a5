"""Helpers for card display: builds the ordered CardView rendered by card.html."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from mmcard.domain.profile import LinkEntry, Profile
from mmcard.services.link_classifier import classify
from mmcard.services.normalize import email_href, maps_link, normalize_website, phone_href
from mmcard.services.target_url import encode_slug
from mmcard.services.theme import ThemeVariant, resolve_profile_theme

DEFAULT_LOGO = "/static/img/mm.svg"
NAME_FALLBACK = "Unnamed"
SUBTITLE_SEPARATOR = " · "
SAVE_CONTACT_LABEL = "Save Contact"
QR_CAPTION = "Scan to open this card"


@dataclass(frozen=True)
class ContactRow:
    kind: str
    icon: str
    label: str
    href: str
    external: bool = False


# Fixed contact rows: (profile field, icon, href builder, opens in new tab).
CONTACT_FIELDS: tuple[tuple[str, str, Callable[[Optional[str]], Optional[str]], bool], ...] = (
    ("phone", "phone", phone_href, False),
    ("email", "email", email_href, False),
    ("website", "website", normalize_website, True),
    ("location", "location", maps_link, True),
)


@dataclass(frozen=True)
class CardView:
    slug: str
    canonical_url: str
    theme: ThemeVariant
    logo_url: str
    name: str
    save_contact_url: str
    qr_url: str
    avatar_url: Optional[str] = None
    subtitle: Optional[str] = None
    rows: tuple[ContactRow, ...] = field(default_factory=tuple)
    bio: Optional[str] = None
    qr_caption: str = QR_CAPTION
    save_contact_label: str = SAVE_CONTACT_LABEL

    def blocks(self) -> tuple[str, ...]:
        """Visual blocks present on this card, top to bottom."""
        order = ["logo"]
        if self.avatar_url:
            order.append("avatar")
        order.append("name")
        if self.subtitle:
            order.append("subtitle")
        order.append("save_contact")
        if self.rows:
            order.append("contacts")
        if self.bio:
            order.append("bio")
        order.append("qr")
        return tuple(order)


def resolve_logo(logo_url: str | None, default: str = DEFAULT_LOGO) -> str:
    if logo_url and logo_url.strip():
        return logo_url.strip()
    return default


def build_subtitle(title: str | None, company: str | None) -> Optional[str]:
    parts = [p.strip() for p in (title, company) if p and p.strip()]
    return SUBTITLE_SEPARATOR.join(parts) if parts else None


def contact_rows(profile: Profile) -> list[ContactRow]:
    rows: list[ContactRow] = []
    for field_name, icon, href_builder, external in CONTACT_FIELDS:
        raw = getattr(profile, field_name)
        href = href_builder(raw) if raw else None
        if not href:
            continue
        rows.append(ContactRow(kind=field_name, icon=icon, label=raw.strip(), href=href, external=external))
    return rows


def link_row(link: LinkEntry) -> Optional[ContactRow]:
    href = normalize_website(link.url)
    if not href:
        return None
    label = (link.label or link.url or "").strip()
    return ContactRow(kind="link", icon=classify(href).value, label=label, href=href, external=True)


def build_card_view(profile: Profile, canonical_url: str, *, default_logo: str = DEFAULT_LOGO) -> CardView:
    theme = resolve_profile_theme(profile)
    slug_q = encode_slug(profile.slug)
    rows = contact_rows(profile)
    rows.extend(row for row in map(link_row, profile.sorted_links()) if row)
    avatar = profile.avatar_url.strip() if (theme.full_bleed and profile.avatar_url) else None
    return CardView(
        slug=profile.slug,
        canonical_url=canonical_url,
        theme=theme,
        logo_url=resolve_logo(profile.logo_url, default_logo),
        avatar_url=avatar or None,
        name=(profile.full_name or "").strip() or NAME_FALLBACK,
        subtitle=build_subtitle(profile.title, profile.company),
        save_contact_url=f"/api/vcf?slug={slug_q}",
        rows=tuple(rows),
        bio=profile.bio.strip() if profile.bio else None,
        qr_url=f"/api/qr?slug={slug_q}",
    )
