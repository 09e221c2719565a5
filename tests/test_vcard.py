from __future__ import annotations

from mmcard.domain.profile import Profile
from mmcard.services import vcard


def test_alice_scenario_exact_payload():
    profile = Profile.from_record({"slug": "alice", "full_name": "Alice Lee", "phone": "555-1234", "theme": "light"})
    assert vcard.serialize(profile) == (
        b"BEGIN:VCARD\r\nVERSION:3.0\r\nFN:Alice Lee\r\nN:Alice Lee;;;;\r\n"
        b"TEL;TYPE=CELL:555-1234\r\nEND:VCARD"
    )
    assert vcard.filename("alice") == "alice.vcf"


def test_field_order_and_normalized_website():
    profile = Profile.from_record(
        {
            "slug": "bob",
            "website": "example.com",
            "email": "bob@example.com",
            "phone": "+1 555",
            "title": "CTO",
            "company": "Acme",
            "full_name": "Bob Ray",
            "location": "Ignored City",
            "bio": "Ignored bio",
        }
    )
    lines = vcard.serialize(profile).decode("utf-8").split("\r\n")
    assert lines == [
        "BEGIN:VCARD",
        "VERSION:3.0",
        "FN:Bob Ray",
        "N:Bob Ray;;;;",
        "ORG:Acme",
        "TITLE:CTO",
        "TEL;TYPE=CELL:+1 555",
        "EMAIL;TYPE=INTERNET:bob@example.com",
        "URL:https://example.com",
        "END:VCARD",
    ]


def test_empty_profile_has_only_header_and_footer():
    profile = Profile.from_record({"slug": "x", "full_name": "", "company": "  "})
    assert vcard.serialize(profile) == b"BEGIN:VCARD\r\nVERSION:3.0\r\nEND:VCARD"


def test_escape_value():
    assert vcard.escape_value("a,b;c\nd") == r"a\,b\;c\nd"
    assert vcard.escape_value("one\r\ntwo\rthree") == r"one\ntwo\nthree"
    assert vcard.escape_value("R&D: 100% <ok> \\ done") == "R&D: 100% <ok> \\ done"


def test_escaped_label_stays_on_one_line():
    label = "Acme, Inc; R&D\nLab"
    profile = Profile.from_record({"slug": "x", "company": label})
    lines = vcard.serialize(profile).decode("utf-8").split("\r\n")
    assert lines == ["BEGIN:VCARD", "VERSION:3.0", r"ORG:Acme\, Inc\; R&D\nLab", "END:VCARD"]
    org = lines[2][len("ORG:"):]
    assert org.replace(r"\,", ",").replace(r"\;", ";").replace(r"\n", "\n") == label


def test_unicode_is_utf8_encoded():
    profile = Profile.from_record({"slug": "j", "full_name": "João Ñúñez"})
    assert "FN:João Ñúñez".encode("utf-8") in vcard.serialize(profile)


def test_content_disposition_ascii_slug():
    assert vcard.content_disposition("alice") == 'attachment; filename="alice.vcf"'


def test_content_disposition_non_ascii_slug_is_latin1_safe():
    header = vcard.content_disposition("josé-李")
    assert header == "attachment; filename=\"jos_-_.vcf\"; filename*=UTF-8''jos%C3%A9-%E6%9D%8E.vcf"
    header.encode("latin-1")


def test_content_disposition_strips_quotes_from_fallback():
    assert vcard.content_disposition('a"b') == (
        "attachment; filename=\"a_b.vcf\"; filename*=UTF-8''a%22b.vcf"
    )
