"""Utility functions for the loan calculator.

This module provides helpers for parsing user input into Python data types
and for rounding monetary values. Raw input coming from a form or the command
line may contain thousands separators ("10,000") or whitespace; these helpers
strip that formatting before numeric parsing so the engine only ever sees
plain numbers.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext

from .errors import InvalidParameter

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round ``value`` to cents, half away from zero.

    The context is widened when the integer part alone needs more digits than
    the current precision allows.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _clean(value: str) -> str:
    return value.strip().replace(",", "")


def decimal_from_str(value: str, field: str = "value") -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas and surrounding whitespace and handles both
    integer and float-like strings. It raises ``InvalidParameter`` naming
    ``field`` if conversion fails.
    """
    cleaned = _clean(value)
    if not cleaned:
        raise InvalidParameter(field, "a number is required")
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidParameter(field, f"invalid numeric value {value!r}") from exc


def int_from_str(value: str, field: str = "value") -> int:
    """Convert a whole-number string such as ``"1,200"`` into an ``int``."""
    cleaned = _clean(value)
    if not cleaned:
        raise InvalidParameter(field, "a whole number is required")
    try:
        return int(cleaned)
    except ValueError as exc:
        raise InvalidParameter(field, f"invalid whole number {value!r}") from exc


def parse_amount(value: str, field: str = "principal") -> Decimal:
    """Parse a money amount with optional suffixes.

    Accepts plain numbers ("500000", "500,000") and shorthand with ``k``/``m``
    suffixes (e.g. "500k" meaning 500 000).
    """
    cleaned = _clean(value).lower()
    factor = Decimal(1)
    if cleaned.endswith("k"):
        factor = Decimal(1_000)
        cleaned = cleaned[:-1]
    elif cleaned.endswith("m"):
        factor = Decimal(1_000_000)
        cleaned = cleaned[:-1]
    return decimal_from_str(cleaned, field) * factor
