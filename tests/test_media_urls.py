"""Tests for derived media URLs."""

from database.media import build_resized_urls, build_webp_urls

HOST = "https://statics.example.com/images"


def test_resized_urls_follow_pattern():
    resized = build_resized_urls(HOST, "abc123", "png")
    assert resized.original == f"{HOST}/abc123.png"
    assert resized.w480 == f"{HOST}/abc123-w480.png"
    assert resized.w2400 == f"{HOST}/abc123-w2400.png"


def test_extension_defaults_to_jpg():
    assert build_resized_urls(HOST, "abc123").w800 == f"{HOST}/abc123-w800.jpg"


def test_webp_always_uses_webp():
    assert build_webp_urls(HOST, "abc123").w1200 == f"{HOST}/abc123-w1200.webp"


def test_empty_file_id_yields_empty_urls():
    resized = build_resized_urls(HOST, "", "png")
    assert resized.to_dict() == {
        "original": "", "w480": "", "w800": "", "w1200": "", "w1600": "", "w2400": "",
    }


def test_trailing_slash_on_host_is_ignored():
    assert build_resized_urls(HOST + "/", "x").original == build_resized_urls(HOST, "x").original


def test_urls_are_deterministic():
    assert build_resized_urls(HOST, "x", "gif") == build_resized_urls(HOST, "x", "gif")
