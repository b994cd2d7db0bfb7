"""Currency-related utilities: metadata lookup, formatting, and minor-unit conversion."""

import math
from decimal import Decimal, ROUND_HALF_UP

from babel import Locale
from babel.numbers import format_currency as babel_format_currency, get_currency_symbol

import schemas
from config import DEFAULT_CURRENCY as CONFIGURED_DEFAULT_CURRENCY


FALLBACK_CURRENCY = "USD"

# code -> (name, locale, minor_units); symbols come from the locale data
CURRENCY_METADATA = {
    "USD": ("US Dollar", "en-US", 2),
    "EUR": ("Euro", "de-DE", 2),
    "GBP": ("British Pound", "en-GB", 2),
    "CAD": ("Canadian Dollar", "en-CA", 2),
    "AUD": ("Australian Dollar", "en-AU", 2),
    "JPY": ("Japanese Yen", "ja-JP", 0),
    "CNY": ("Chinese Yuan", "zh-CN", 2),
    "INR": ("Indian Rupee", "en-IN", 2),
    "MXN": ("Mexican Peso", "es-MX", 2),
    "CHF": ("Swiss Franc", "de-CH", 2),
    "SEK": ("Swedish Krona", "sv-SE", 2),
    "NZD": ("New Zealand Dollar", "en-NZ", 2),
    "SGD": ("Singapore Dollar", "en-SG", 2),
    "HKD": ("Hong Kong Dollar", "en-HK", 2),
    "NOK": ("Norwegian Krone", "nb-NO", 2),
    "DKK": ("Danish Krone", "da-DK", 2),
    "PLN": ("Polish Zloty", "pl-PL", 2),
    "BRL": ("Brazilian Real", "pt-BR", 2),
    "KRW": ("South Korean Won", "ko-KR", 0),
    "TRY": ("Turkish Lira", "tr-TR", 2),
}


def babel_locale(locale: str) -> Locale:
    """Parse a BCP 47 tag like "en-US" into a Babel Locale."""
    return Locale.parse(locale, sep="-")


def resolve_default_currency(currency: str) -> str:
    """Use the configured default currency when it is supported, else US Dollar."""
    currency = (currency or "").strip().upper()
    return currency if currency in CURRENCY_METADATA else FALLBACK_CURRENCY


DEFAULT_CURRENCY = resolve_default_currency(CONFIGURED_DEFAULT_CURRENCY)

CURRENCIES = {
    code: schemas.CurrencyInfo(
        code=code,
        name=name,
        symbol=get_currency_symbol(code, locale=babel_locale(locale)),
        locale=locale,
        minor_units=minor_units
    )
    for code, (name, locale, minor_units) in CURRENCY_METADATA.items()
}


def to_decimal(value) -> Decimal:
    """
    Convert a monetary value to an exact Decimal.

    Goes through str() so 0.1 becomes Decimal("0.1") rather than the binary
    expansion of the float. None and non-finite values become zero.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    try:
        if not math.isfinite(value):
            return Decimal(0)
    except TypeError:
        return Decimal(0)
    return Decimal(str(value))


def is_supported_currency(currency: str) -> bool:
    return currency in CURRENCY_METADATA


def get_currency_info(currency: str) -> schemas.CurrencyInfo:
    """Get currency metadata, falling back to the default currency for unknown codes."""
    return CURRENCIES.get(currency, CURRENCIES[DEFAULT_CURRENCY])


def get_supported_currencies() -> list[schemas.CurrencyInfo]:
    """All supported currencies sorted by display name."""
    return sorted(CURRENCIES.values(), key=lambda info: info.name)


def format_currency(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format an amount in major units for display in the currency's locale.

    Args:
        amount: Amount in major units (e.g., 1234.5 for $1,234.50)
        currency: Currency code (e.g., "USD", "EUR")

    Returns:
        Formatted string (e.g., "$1,234.50", "1.234,50 €", "₹1,23,456.78")
    """
    info = get_currency_info(currency)

    # Round half up here; Babel would otherwise round half to even
    quantum = Decimal(1).scaleb(-info.minor_units)
    value = to_decimal(amount).quantize(quantum, rounding=ROUND_HALF_UP)
    if value.is_zero():
        value = abs(value)

    return babel_format_currency(
        value,
        info.code,
        locale=babel_locale(info.locale),
        currency_digits=True,
        format_type="standard"
    )


def to_minor_units(amount: float, currency: str = DEFAULT_CURRENCY) -> int:
    """
    Convert an amount in major units to the currency's minor units.

    Example: to_minor_units(12.34, "USD") -> 1234, to_minor_units(1234, "JPY") -> 1234.
    Rounds half up to the nearest minor unit; non-finite input yields 0.
    """
    info = get_currency_info(currency)
    try:
        if not math.isfinite(amount):
            return 0
    except TypeError:
        return 0

    minor = to_decimal(amount).scaleb(info.minor_units)
    return int(minor.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def from_minor_units(amount_minor: float, currency: str = DEFAULT_CURRENCY) -> float:
    """
    Convert an amount in minor units back to major units.

    Example: from_minor_units(1234, "USD") -> 12.34. Non-finite input yields 0.
    """
    info = get_currency_info(currency)
    try:
        if not math.isfinite(amount_minor):
            return 0
    except TypeError:
        return 0

    return float(to_decimal(amount_minor).scaleb(-info.minor_units))
