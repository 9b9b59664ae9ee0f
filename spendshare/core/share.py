from __future__ import annotations

import logging
from dataclasses import dataclass

from spendshare.core.errors import ReferenceDataError, UnknownCategoryError
from spendshare.core.tables import FundingCategory, ReferenceData, TaxSource, get_reference_data

logger = logging.getLogger("spendshare.core")

TAX_TYPE_LABELS: dict[str, str] = {
    "income": "Federal Income Tax",
    "fica": "Payroll Tax (FICA)",
    "mixed": "Mixed (Income Tax + FICA)",
}


@dataclass(frozen=True)
class ShareBreakdown:
    tax_type: str
    your_tax: float
    proportion: float
    # None for mixed categories, which draw on two revenue totals
    total_revenue: float | None = None
    income_contribution: float | None = None
    fica_contribution: float | None = None


@dataclass(frozen=True)
class ShareResult:
    your_share: float
    spending_amount: float
    category: str
    category_key: str
    tax_source: TaxSource
    budget_pool: float
    breakdown: ShareBreakdown
    exceeds_budget: bool
    deficit_note: str


def get_category(key: str, data: ReferenceData | None = None) -> FundingCategory:
    ref = data or get_reference_data()
    try:
        return ref.categories[key]
    except (KeyError, TypeError) as exc:
        raise UnknownCategoryError(key, ref.category_keys()) from exc


def _single_source(tax: float, spending: float, category: FundingCategory) -> tuple[float, ShareBreakdown]:
    proportion = tax / category.revenue_pool
    breakdown = ShareBreakdown(
        tax_type=TAX_TYPE_LABELS[category.tax_source],
        your_tax=tax,
        proportion=proportion,
        total_revenue=category.revenue_pool,
    )
    return proportion * spending, breakdown


def _mixed_source(
    income_tax: float,
    fica_tax: float,
    spending: float,
    category: FundingCategory,
    ref: ReferenceData,
) -> tuple[float, ShareBreakdown]:
    if category.income_share_percent is None or category.fica_share_percent is None:
        raise ReferenceDataError(f"Mixed category {category.key!r} has no split weights")
    income_slice = (income_tax / ref.budget.individual_income_tax) * spending * category.income_share_percent
    fica_slice = (fica_tax / ref.budget.payroll_tax) * spending * category.fica_share_percent
    share = income_slice + fica_slice
    breakdown = ShareBreakdown(
        tax_type=TAX_TYPE_LABELS["mixed"],
        your_tax=income_tax + fica_tax,
        proportion=share / spending if spending else 0.0,
        income_contribution=income_slice,
        fica_contribution=fica_slice,
    )
    return share, breakdown


def calculate_share(
    income_tax: float,
    fica_tax: float,
    spending_amount: float,
    category: str,
    data: ReferenceData | None = None,
) -> ShareResult:
    """Work out what part of ``spending_amount`` the taxpayer paid for.

    Income and payroll categories scale the user's tax against the category's
    revenue pool. Mixed categories split spending by the category weights and
    price each slice against the economy-wide income and payroll totals.
    ``exceeds_budget`` is advisory and never changes the share.
    """
    ref = data or get_reference_data()
    record = get_category(category, ref)
    income_tax = float(income_tax)
    fica_tax = float(fica_tax)
    spending = float(spending_amount)

    if record.tax_source == "income":
        share, breakdown = _single_source(income_tax, spending, record)
    elif record.tax_source == "fica":
        share, breakdown = _single_source(fica_tax, spending, record)
    elif record.tax_source == "mixed":
        share, breakdown = _mixed_source(income_tax, fica_tax, spending, record, ref)
    else:
        raise ReferenceDataError(f"Category {record.key!r} has unknown tax source {record.tax_source!r}")

    logger.debug("share category=%s spending=%.2f share=%.6f", record.key, spending, share)
    return ShareResult(
        your_share=share,
        spending_amount=spending,
        category=record.name,
        category_key=record.key,
        tax_source=record.tax_source,
        budget_pool=record.budget_pool,
        breakdown=breakdown,
        exceeds_budget=spending > record.budget_pool,
        deficit_note=ref.deficit_note,
    )


__all__ = [
    "ShareBreakdown",
    "ShareResult",
    "TAX_TYPE_LABELS",
    "calculate_share",
    "get_category",
]
