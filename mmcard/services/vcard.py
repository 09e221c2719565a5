"""vCard 3.0 serialization of a card profile."""
from __future__ import annotations

import re
import urllib.parse as urlparse
from typing import Callable, Optional

from mmcard.domain.profile import Profile
from mmcard.services.normalize import normalize_website

MEDIA_TYPE = "text/vcard; charset=utf-8"
EXTENSION = "vcf"
LINE_BREAK = "\r\n"

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

# (property prefix, value getter), emitted in this order when the value is present.
VCARD_FIELDS: tuple[tuple[str, Callable[[Profile], Optional[str]]], ...] = (
    ("FN:{}", lambda p: p.full_name),
    ("N:{};;;;", lambda p: p.full_name),
    ("ORG:{}", lambda p: p.company),
    ("TITLE:{}", lambda p: p.title),
    ("TEL;TYPE=CELL:{}", lambda p: p.phone),
    ("EMAIL;TYPE=INTERNET:{}", lambda p: p.email),
    ("URL:{}", lambda p: normalize_website(p.website)),
)


def escape_value(value: str) -> str:
    """Escape commas, semicolons and line breaks; every other character is kept."""
    v = _NEWLINE_RE.sub(r"\\n", str(value))
    return v.replace(",", "\\,").replace(";", "\\;")


def build_lines(profile: Profile) -> list[str]:
    lines = ["BEGIN:VCARD", "VERSION:3.0"]
    for template, getter in VCARD_FIELDS:
        value = getter(profile)
        if value:
            lines.append(template.format(escape_value(value)))
    lines.append("END:VCARD")
    return lines


def serialize(profile: Profile) -> bytes:
    return LINE_BREAK.join(build_lines(profile)).encode("utf-8")


def filename(slug: str) -> str:
    return f"{slug}.{EXTENSION}"


def content_disposition(slug: str) -> str:
    """
    Attachment header safe for latin-1 transport.

    The plain filename is an ASCII fallback; filename* carries the UTF-8 name (RFC 6266).
    """
    name = filename(slug)
    ascii_name = "".join(ch if 32 <= ord(ch) < 127 and ch not in '"\\' else "_" for ch in name)
    header = f'attachment; filename="{ascii_name}"'
    if ascii_name != name:
        header += "; filename*=UTF-8''" + urlparse.quote(name, safe="")
    return header
