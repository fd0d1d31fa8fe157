"""Tests for urlpick.scanner"""
import io

import pytest

from urlpick.scanner import is_url, scan


@pytest.mark.parametrize("text,expected", [
    ("https://example.com", ["https://example.com"]),
    ("   https://example.com", ["https://example.com"]),
    ("   https://example.com  ", ["https://example.com"]),
    ("   https://example1.com  \n https://example2.com  ", ["https://example1.com", "https://example2.com"]),
    ("   example1.com  \n https://example2.com  ", ["example1.com", "https://example2.com"]),
    ("word", []),
    ("a word is not a URL. even with a fullstop.", []),
    ("https://laptop", ["https://laptop"]),
    ("I mistyped.the sentence.", []),
    ("shut.the.front.door", []),
    ("<https://laptop>", ["https://laptop"]),
    ("Head over to https://sentence/test and see what you think", ["https://sentence/test"]),
    (
        "Head over to https://sentence2/test and see what you think. "
        "Also, cast your eye over example.com and report back.",
        ["https://sentence2/test", "example.com"],
    ),
])
def test_scan(text, expected):
    assert scan(text) == expected


class TestScan:
    def test_reads_streams(self):
        assert scan(io.StringIO("see https://a.example/x")) == ["https://a.example/x"]

    def test_duplicates_offered_once(self):
        assert scan("example.com then example.com again") == ["example.com"]

    def test_parenthesised(self):
        assert scan("(see https://docs.python.org/3/)") == ["https://docs.python.org/3/"]

    def test_empty(self):
        assert scan("") == []

    def test_coloured_output(self):
        text = "see \x1b[01;34mhttps://x.example\x1b[0m now\x1b[K"
        assert scan(text) == ["https://x.example"]


class TestIsUrl:
    def test_scheme(self):
        assert is_url("ftp://files.local/pub")

    def test_host_with_path(self):
        assert is_url("github.com/a-h/urlscan")

    def test_host_with_port(self):
        assert is_url("example.org:8080/x")

    def test_abbreviation(self):
        assert not is_url("e.g")

    def test_unknown_tld(self):
        assert not is_url("file.txt")
