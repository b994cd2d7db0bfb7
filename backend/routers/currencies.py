"""Currencies router: supported currency metadata and amount formatting."""

from fastapi import APIRouter, HTTPException

import schemas
from utils.currency import (
    get_currency_info,
    get_supported_currencies,
    is_supported_currency,
    format_currency,
    to_minor_units
)


router = APIRouter(prefix="/currencies", tags=["currencies"])


def get_supported_currency_or_404(code: str) -> schemas.CurrencyInfo:
    """Look up a currency by code (case-insensitive) or raise 404 if unsupported."""
    code = code.upper()
    if not is_supported_currency(code):
        raise HTTPException(status_code=404, detail=f"Currency {code} is not supported")
    return get_currency_info(code)


@router.get("", response_model=list[schemas.CurrencyInfo])
def list_currencies():
    return get_supported_currencies()


@router.get("/{code}", response_model=schemas.CurrencyInfo)
def get_currency(code: str):
    return get_supported_currency_or_404(code)


@router.get("/{code}/format", response_model=schemas.FormattedAmount)
def format_amount(code: str, amount: float):
    """
    Format an amount in major units for display.

    Args:
        code: Currency code (e.g., "USD", "jpy")
        amount: Amount in major units (e.g., 12.34)

    Returns:
        The formatted display string and the amount in minor units
    """
    currency = get_supported_currency_or_404(code)
    return schemas.FormattedAmount(
        currency=currency.code,
        amount=amount,
        formatted=format_currency(amount, currency.code),
        minor_units=to_minor_units(amount, currency.code)
    )
