from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal

_CENT = Decimal("0.01")
_DOLLAR = Decimal("1")
_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

NOT_AVAILABLE = "n/a"

_LARGE_UNITS = (
    (1_000_000_000_000, "trillion"),
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
)
_ONE_IN_UNITS = (
    (1_000_000_000, "billion"),
    (1_000_000, "million"),
    (1_000, "thousand"),
)


def to_decimal(value: float | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _quantize(value: Decimal, exponent: Decimal) -> Decimal:
    # the default 28-digit context cannot hold the integer part of huge values
    context = Context(prec=max(28, value.adjusted() + 4), rounding=ROUND_HALF_UP)
    return value.quantize(exponent, context=context)


def round_cents(value: float | Decimal) -> float:
    dec = to_decimal(value)
    if not dec.is_finite():
        return float(dec)
    return float(_quantize(dec, _CENT))


def format_currency(amount: float, show_cents: bool = True) -> str:
    """Dollars with cents for small amounts, whole dollars otherwise."""
    dec = to_decimal(amount)
    if not dec.is_finite():
        return NOT_AVAILABLE
    if show_cents and dec < 100:
        return f"${_quantize(dec, _CENT):,.2f}".replace("$-", "-$")
    return f"${_quantize(dec, _DOLLAR):,.0f}".replace("$-", "-$")


def format_large_number(amount: float) -> str:
    if not to_decimal(amount).is_finite():
        return NOT_AVAILABLE
    for size, unit in _LARGE_UNITS:
        if amount >= size:
            return f"${amount / size:,.1f} {unit}"
    return format_currency(amount, show_cents=False)


def format_proportion(proportion: float) -> str:
    if to_decimal(proportion).is_nan():
        return NOT_AVAILABLE
    if proportion <= 0:
        return "0"
    if proportion >= 1:
        return "100%"
    inverse = to_decimal(1 / proportion)
    if not inverse.is_finite():
        # subnormal proportions overflow the inverse
        return "0"
    one_in = int(_quantize(inverse, _DOLLAR))
    for size, unit in _ONE_IN_UNITS:
        if one_in >= size:
            return f"1 in {one_in / size:,.1f} {unit}"
    return f"1 in {one_in:,}"


def parse_currency_input(text: str) -> float:
    cleaned = _NON_NUMERIC.sub("", text or "")
    match = _LEADING_NUMBER.match(cleaned)
    return float(match.group(0)) if match else 0.0


__all__ = [
    "NOT_AVAILABLE",
    "format_currency",
    "format_large_number",
    "format_proportion",
    "parse_currency_input",
    "round_cents",
    "to_decimal",
]
