"""
Unit tests for price label parsing.
"""

from decimal import Decimal

import pytest

from saucedemo_suite.pricing import PriceFormatError, format_price, parse_price, total


pytestmark = pytest.mark.unit


def test_parse_price_reads_exact_decimal():
    assert parse_price("$29.99") == Decimal("29.99")


def test_parse_price_ignores_surrounding_whitespace():
    """Test that labels read with padding still parse."""
    # Act
    price = parse_price("  $7.99\n")

    # Assert
    assert price == Decimal("7.99")


@pytest.mark.parametrize(
    "label",
    ["29.99", "$29.9", "$29", "$ 29.99", "USD 29.99", "$29.999", "", "$-1.00"],
)
def test_parse_price_rejects_malformed_labels(label):
    with pytest.raises(PriceFormatError):
        parse_price(label)


def test_parse_price_rejects_missing_label():
    """Test that an element without text content is reported, not parsed as zero."""
    with pytest.raises(PriceFormatError, match="missing"):
        parse_price(None)


def test_price_format_error_is_a_value_error():
    assert issubclass(PriceFormatError, ValueError)


def test_format_price_pads_to_two_places():
    assert format_price(Decimal("15.9")) == "$15.90"
    assert format_price(Decimal("49.99")) == "$49.99"


def test_total_is_exact():
    """Test that three storefront prices add up without float drift."""
    # Arrange
    prices = [Decimal("29.99"), Decimal("9.99"), Decimal("15.99")]

    # Act
    result = total(prices)

    # Assert
    assert result == Decimal("55.97")
    assert str(result) == "55.97"


def test_total_of_nothing_is_zero():
    assert total([]) == Decimal("0.00")
