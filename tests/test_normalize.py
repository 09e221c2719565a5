from __future__ import annotations

import pytest

from mmcard.services.normalize import (
    MAPS_SEARCH_URL,
    clean_text,
    email_href,
    maps_link,
    normalize_website,
    phone_href,
    safe_hex_color,
)

FALLBACK = "#000000"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("example.com", "https://example.com"),
        ("  example.com  ", "https://example.com"),
        ("https://example.com/a", "https://example.com/a"),
        ("HTTP://Example.com", "HTTP://Example.com"),
        ("mailto:a@b.co", "mailto:a@b.co"),
        ("tel:+1555", "tel:+1555"),
        ("//cdn.example.com", "https://cdn.example.com"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_normalize_website(raw, expected):
    assert normalize_website(raw) == expected


@pytest.mark.parametrize("raw", ["#0b2d4d", "#0B2D4D", "#abcDEF"])
def test_safe_hex_color_passes_valid_values_unchanged(raw):
    assert safe_hex_color(raw, FALLBACK) == raw


@pytest.mark.parametrize(
    "raw",
    ["red", "#fff", "#12345", "#1234567", "0B2D4D", " #0B2D4D", "#0B2D4G", "", None, "#000000;background:url(x)"],
)
def test_safe_hex_color_falls_back_on_anything_else(raw):
    assert safe_hex_color(raw, "#123456") == "#123456"


@pytest.mark.parametrize("raw", ["#0B2D4D", "red", "#fff", None, "#12345"])
def test_safe_hex_color_is_idempotent(raw):
    once = safe_hex_color(raw, FALLBACK)
    assert safe_hex_color(once, FALLBACK) == once


def test_maps_link_percent_encodes_location():
    assert maps_link("Austin, TX") == MAPS_SEARCH_URL + "Austin%2C%20TX"
    assert maps_link("R. Augusta & Co/1") == MAPS_SEARCH_URL + "R.%20Augusta%20%26%20Co%2F1"


def test_maps_link_empty_location():
    assert maps_link("") is None
    assert maps_link("  ") is None
    assert maps_link(None) is None


def test_phone_and_email_hrefs():
    assert phone_href("+1 (555) 123-4567") == "tel:+15551234567"
    assert phone_href("555-1234") == "tel:5551234"
    assert phone_href("") is None
    assert email_href(" a@b.co ") == "mailto:a@b.co"
    assert email_href(None) is None


def test_clean_text_treats_blank_as_absent():
    assert clean_text(None) is None
    assert clean_text("") is None
    assert clean_text(" \n ") is None
    assert clean_text(" Alice ") == " Alice "
    assert clean_text(42) == "42"
