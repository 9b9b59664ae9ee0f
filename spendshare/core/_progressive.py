from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Iterable

from spendshare.core.tables.base import Bracket


def income_basis(value: object) -> float:
    """Coerce a gross income to a usable basis.

    Negative, non-numeric (``None``, strings, booleans) and non-finite values
    all become ``0.0`` rather than raising.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return 0.0
    amount = float(value)
    if not math.isfinite(amount) or amount <= 0:
        return 0.0
    return amount


def tax_from_brackets(taxable: float, brackets: Iterable[Bracket]) -> float:
    tax, prev = 0.0, 0.0
    for b in brackets:
        if taxable <= prev:
            break
        amt = min(taxable, b.up_to) - prev
        if amt > 0:
            tax += amt * b.rate
        prev = b.up_to
    return tax


__all__ = ["income_basis", "tax_from_brackets"]
