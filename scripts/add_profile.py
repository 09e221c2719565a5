#!/usr/bin/env python3
"""
Register a card profile (and optional links) directly in the SQL database.

Usage:
  python scripts/add_profile.py --slug alice --name "Alice Lee" [--phone 555-1234] \
      [--theme gradient --gradient-from "#0B2D4D" --gradient-to "#1E6091"] \
      [--link "LinkedIn=https://linkedin.com/in/alice"]
"""
from __future__ import annotations

import argparse
import sys

from mmcard.db import create_schema
from mmcard.domain.profile import ThemeName
from mmcard.repositories.sql_repository import SQLProfileRepository

TEXT_OPTIONS = {
    "name": "full_name",
    "title": "title",
    "company": "company",
    "email": "email",
    "phone": "phone",
    "website": "website",
    "location": "location",
    "bio": "bio",
    "logo": "logo_url",
    "avatar": "avatar_url",
    "theme_color": "theme_color",
    "gradient_from": "theme_gradient_from",
    "gradient_to": "theme_gradient_to",
}


def parse_link(value: str, position: int) -> dict:
    label, sep, url = value.partition("=")
    if not sep:
        label, url = "", value
    url = url.strip()
    if not url:
        raise SystemExit(f"Invalid link: {value!r}")
    return {"label": label.strip() or None, "url": url, "sort_order": position}


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a card profile in the SQL database")
    ap.add_argument("--slug", required=True, help="Public slug (ex.: alice)")
    for option in TEXT_OPTIONS:
        ap.add_argument("--" + option.replace("_", "-"), dest=option)
    ap.add_argument("--theme", choices=[t.value for t in ThemeName], default=ThemeName.LIGHT.value)
    ap.add_argument("--create-tables", action="store_true", help="Create the schema before inserting")
    ap.add_argument("--link", action="append", default=[], help="LABEL=URL, repeatable; order is kept")
    args = ap.parse_args()

    if args.create_tables:
        create_schema()
    repo = SQLProfileRepository()
    slug = (args.slug or "").strip()
    if not slug:
        raise SystemExit("Invalid slug")
    if repo.slug_exists(slug):
        raise SystemExit(f"Slug '{slug}' is already in use")

    fields = {
        column: (getattr(args, option) or "").strip() or None
        for option, column in TEXT_OPTIONS.items()
    }
    repo.create_profile(slug, theme=args.theme, **fields)
    links = [parse_link(value, position) for position, value in enumerate(args.link, start=1)]
    if links:
        repo.add_links(slug, links)
    print("OK: profile registered")
    print(f"  Slug: {slug}")
    print(f"  Theme: {args.theme}")
    if links:
        print(f"  Links: {len(links)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
