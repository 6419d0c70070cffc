"""Tests for small helpers."""
import pytest

from estatebot.core.utils import format_inr, normalize_text, weak_etag


@pytest.mark.parametrize("amount, expected", [
    (0, "₹0"),
    (999, "₹999"),
    (1000, "₹1,000"),
    (100000, "₹1,00,000"),
    (1234567, "₹12,34,567"),
    (57620000, "₹5,76,20,000"),
    (-250000, "-₹2,50,000"),
])
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_normalize_text():
    assert normalize_text("  Hello   THERE \n") == "hello there"


def test_weak_etag_is_stable():
    assert weak_etag(b"abc") == weak_etag(b"abc")
    assert weak_etag(b"abc") != weak_etag(b"abd")
    assert weak_etag(b"abc").startswith('W/"')
