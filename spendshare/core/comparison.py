from __future__ import annotations

import math

from spendshare.core.tables import ComparisonTier, ReferenceData, get_reference_data

DAYS_PER_YEAR = 365


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def days_of_tax(share: float, annual_tax: float) -> int:
    daily = annual_tax / DAYS_PER_YEAR
    return round_half_up(share / daily) if daily > 0 else 0


def find_tier(share: float, tiers: tuple[ComparisonTier, ...]) -> ComparisonTier | None:
    # Thresholds are exclusive upper bounds: a share equal to a threshold
    # belongs to the following tier.
    for tier in tiers:
        if share < tier.threshold_max:
            return tier
    return None


def get_comparison(share: float, annual_tax: float, data: ReferenceData | None = None) -> str:
    ref = data or get_reference_data()
    tier = find_tier(share, ref.comparisons)
    if tier is None:
        return ""
    text = tier.template
    if "{cents}" in text:
        text = text.replace("{cents}", str(round_half_up(share * 100)))
    if "{days}" in text:
        text = text.replace("{days}", str(days_of_tax(share, annual_tax)))
    return text


__all__ = ["days_of_tax", "find_tier", "get_comparison", "round_half_up"]
