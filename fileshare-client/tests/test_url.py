"""Tests for URL helpers."""

import pytest

from fileshare_client.url import (
    append_to_url_path,
    encode_path_segment,
    get_url_path,
    redact_url,
)


class TestEncodePathSegment:
    """Tests for single segment encoding."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("plain", "plain"),
            ("with space", "with%20space"),
            ("a/b", "a%2Fb"),
            ("100%", "100%25"),
            ("keep-_.!~*'()", "keep-_.!~*'()"),
            ("ü", "%C3%BC"),
            ("q?x#y", "q%3Fx%23y"),
        ],
    )
    def test_encoding(self, name, expected):
        assert encode_path_segment(name) == expected


class TestAppendToUrlPath:
    """Tests for child address composition."""

    def test_append(self):
        assert append_to_url_path("https://h/share/dir", "child") == "https://h/share/dir/child"

    def test_append_after_trailing_slash(self):
        assert append_to_url_path("https://h/share/", "child") == "https://h/share/child"

    def test_append_to_host_only(self):
        assert append_to_url_path("https://h", "share") == "https://h/share"

    def test_query_preserved(self):
        url = "https://h/share/dir?sv=2018-03-28&sig=abc%3D"
        assert append_to_url_path(url, "child") == "https://h/share/dir/child?sv=2018-03-28&sig=abc%3D"

    def test_parent_not_reencoded(self):
        url = "https://h/share/my%20dir%25"
        assert append_to_url_path(url, "x%20y") == "https://h/share/my%20dir%25/x%20y"


class TestGetUrlPath:
    """Tests for path extraction."""

    def test_decoded_path(self):
        assert get_url_path("https://h/share/my%20dir?sig=x") == "/share/my dir"

    def test_no_path(self):
        assert get_url_path("https://h") is None


class TestRedactUrl:
    """Tests for masking SAS signatures in log output."""

    def test_signature_masked(self):
        redacted = redact_url(
            "https://myaccount.file.core.windows.net/myshare?sv=2018-03-28&sig=secret&restype=directory"
        )
        assert "secret" not in redacted
        assert "sig=REDACTED" in redacted
        assert "sv=2018-03-28" in redacted
        assert "restype=directory" in redacted

    def test_url_without_signature_unchanged(self):
        url = "https://myaccount.file.core.windows.net/myshare/dir?restype=directory"
        assert redact_url(url) == url
