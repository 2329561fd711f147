"""Tests for pulling the first IPv4 address out of a lookup page."""

import logging

import pytest

from adapters.lookup.extractor import extract_address, extract_first_ipv4


def _page(*items: str) -> str:
    lis = "".join(f"<li>{item}</li>" for item in items)
    return f"<html><body><ul class='comma-separated'>{lis}</ul></body></html>"


class TestExtractFirstIPv4:
    """Verify the selector-based extraction."""

    def test_saved_page(self, lookup_page: str) -> None:
        """The saved github.com page should yield its first IPv4 address."""
        assert extract_first_ipv4(lookup_page) == "192.30.253.112"

    def test_skips_ipv6_and_garbage(self) -> None:
        """IPv6 and non-address entries should be skipped."""
        html = _page("::1", "n/a", "fe80::1", "140.82.112.3")
        assert extract_first_ipv4(html) == "140.82.112.3"

    def test_first_match_wins(self) -> None:
        """Only the first IPv4 entry should be returned."""
        assert extract_first_ipv4(_page("1.1.1.1", "2.2.2.2")) == "1.1.1.1"

    def test_whitespace_trimmed(self) -> None:
        """Entry text should be trimmed before parsing."""
        assert extract_first_ipv4(_page("\n   20.205.243.166  \n")) == "20.205.243.166"

    def test_missing_container(self) -> None:
        """A page without the list should return None."""
        assert extract_first_ipv4("<html><ul><li>1.2.3.4</li></ul></html>") is None

    def test_container_without_ipv4(self) -> None:
        """A list holding only IPv6 or text should return an empty string."""
        assert extract_first_ipv4(_page("2606:50c0:8000::153", "unknown")) == ""

    def test_empty_container(self) -> None:
        """An empty list should return an empty string."""
        assert extract_first_ipv4(_page()) == ""

    def test_only_first_container_used(self) -> None:
        """Addresses in later lists must not leak in."""
        html = _page("::1") + "<ul class='comma-separated'><li>9.9.9.9</li></ul>"
        assert extract_first_ipv4(html) == ""

    def test_custom_selector(self) -> None:
        """The container selector should be swappable."""
        html = "<ol id='ips'><li>3.3.3.3</li></ol>"
        assert extract_first_ipv4(html, "ol#ips") == "3.3.3.3"


class TestExtractAddress:
    """Verify the logging wrapper."""

    def test_found(self, lookup_page: str) -> None:
        """A found address should be returned unchanged."""
        assert extract_address(lookup_page, "github.com") == "192.30.253.112"

    def test_missing_container_logs_body(self, caplog: pytest.LogCaptureFixture) -> None:
        """A missing list should log the domain and body and return ''."""
        body = "<html><p>rate limited</p></html>"
        with caplog.at_level(logging.WARNING, logger="adapters.lookup.extractor"):
            assert extract_address(body, "github.com") == ""
        assert "github.com" in caplog.text
        assert "rate limited" in caplog.text
