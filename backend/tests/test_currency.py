import math
from decimal import Decimal

import pytest

from babel.numbers import get_currency_precision

from utils.currency import (
    CURRENCY_METADATA,
    DEFAULT_CURRENCY,
    resolve_default_currency,
    get_currency_info,
    get_supported_currencies,
    is_supported_currency,
    format_currency,
    to_minor_units,
    from_minor_units,
    to_decimal
)


def test_currency_table():
    assert len(CURRENCY_METADATA) == 20
    # Fraction digits in the locale data must agree with the minor units used for conversion
    for code, (_, _, minor_units) in CURRENCY_METADATA.items():
        assert get_currency_precision(code) == minor_units


def test_get_currency_info():
    info = get_currency_info("EUR")
    assert info.code == "EUR"
    assert info.name == "Euro"
    assert info.symbol == "€"
    assert info.locale == "de-DE"
    assert info.minor_units == 2

    assert get_currency_info("JPY").minor_units == 0


def test_unknown_currency_falls_back_to_usd():
    info = get_currency_info("XYZ")
    assert info.code == DEFAULT_CURRENCY
    assert info.name == "US Dollar"


def test_supported_currencies():
    currencies = get_supported_currencies()
    names = [c.name for c in currencies]

    assert len(currencies) == 20
    assert names == sorted(names)
    assert is_supported_currency("GBP")
    assert not is_supported_currency("XYZ")


@pytest.mark.parametrize("amount,currency,expected", [
    (1234.5, "USD", "$1,234.50"),
    (1234.5, "EUR", "1.234,50\xa0€"),
    (1234.5, "GBP", "£1,234.50"),
    (1234.5, "JPY", "￥1,235"),
    (123456.78, "INR", "₹1,23,456.78"),
    (0, "USD", "$0.00"),
    (-12.3, "USD", "-$12.30"),
])
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_currency_uses_non_breaking_group_separator():
    formatted = format_currency(1234.5, "SEK")

    assert formatted[1] in ("\xa0", "\u202f")
    assert formatted.startswith("1") and "234,50" in formatted
    assert formatted.endswith("kr")
    assert " " not in formatted


def test_format_currency_rounds_half_up():
    assert format_currency(0.125, "USD") == "$0.13"
    assert format_currency(2.5, "JPY") == "￥3"
    assert format_currency(-0.001, "USD") == "$0.00"


def test_jpy_symbol_comes_from_locale_data():
    assert get_currency_info("JPY").symbol == "￥"


def test_resolve_default_currency():
    assert DEFAULT_CURRENCY == "USD"
    assert resolve_default_currency("eur") == "EUR"
    assert resolve_default_currency("XYZ") == "USD"
    assert resolve_default_currency("") == "USD"


def test_format_currency_defaults_to_usd():
    assert format_currency(5) == "$5.00"
    assert format_currency(5, "XYZ") == "$5.00"


def test_to_minor_units():
    assert to_minor_units(12.34, "USD") == 1234
    assert to_minor_units(1234, "JPY") == 1234
    assert to_minor_units(0.1 + 0.2, "USD") == 30
    assert to_minor_units(1.005, "USD") == 101
    assert to_minor_units(-1.005, "USD") == -101


def test_to_minor_units_non_finite():
    assert to_minor_units(math.inf) == 0
    assert to_minor_units(-math.inf) == 0
    assert to_minor_units(math.nan) == 0


def test_from_minor_units():
    assert from_minor_units(1234, "USD") == 12.34
    assert from_minor_units(1234, "JPY") == 1234
    assert from_minor_units(5) == 0.05


def test_from_minor_units_non_finite():
    assert from_minor_units(math.inf) == 0
    assert from_minor_units(math.nan) == 0


def test_to_decimal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) == 0
    assert to_decimal(math.nan) == 0
    assert to_decimal(Decimal("Infinity")) == 0
