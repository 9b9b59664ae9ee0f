from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Mapping

from spendshare.core.filing import FilingStatus

TaxSource = Literal["income", "fica", "mixed"]
TAX_SOURCES: tuple[TaxSource, ...] = ("income", "fica", "mixed")


@dataclass(frozen=True)
class Bracket:
    up_to: float
    rate: float


@dataclass(frozen=True)
class PayrollRates:
    social_security_rate: float
    wage_base: float
    medicare_rate: float
    additional_medicare_rate: float
    additional_medicare_threshold: Mapping[FilingStatus, float]


@dataclass(frozen=True)
class FederalBudget:
    individual_income_tax: float
    payroll_tax: float
    corporate_tax: float
    other_revenue: float
    total_revenue: float
    spending: Mapping[str, float]
    total_spending: float
    deficit: float


@dataclass(frozen=True)
class FundingCategory:
    key: str
    name: str
    examples: str
    tax_source: TaxSource
    budget_pool: float
    revenue_pool: float
    # Only meaningful for mixed categories; weights sum to 1.
    income_share_percent: float | None = None
    fica_share_percent: float | None = None


@dataclass(frozen=True)
class ComparisonTier:
    threshold_max: float
    template: str


@dataclass(frozen=True)
class NotableSpending:
    key: str
    label: str
    value: float
    source: str
    last_verified: str
    category: str
    notes: str
    multi_year: bool = False
    is_savings: bool = False
    trending: bool = False


@dataclass(frozen=True)
class ReferenceData:
    year: int
    last_updated: str
    standard_deductions: Mapping[FilingStatus, float]
    brackets: Mapping[FilingStatus, tuple[Bracket, ...]]
    payroll: PayrollRates
    budget: FederalBudget
    categories: Mapping[str, FundingCategory]
    comparisons: tuple[ComparisonTier, ...]
    notable_spending: tuple[NotableSpending, ...] = field(default_factory=tuple)
    deficit_note: str = ""

    def category_keys(self) -> tuple[str, ...]:
        return tuple(self.categories)


def table_issues(data: ReferenceData) -> list[str]:
    """Report structural problems in a snapshot; an empty list means sound.

    Only used when registering snapshots and in tests. The calculators assume a
    sound table and never re-check it per call.
    """
    issues: list[str] = []
    for status, brackets in data.brackets.items():
        if not brackets:
            issues.append(f"{status}: no brackets")
            continue
        previous_up_to = 0.0
        previous_rate = 0.0
        for index, bracket in enumerate(brackets):
            if bracket.up_to <= previous_up_to:
                issues.append(f"{status}: bracket {index} bound not increasing")
            if bracket.rate < previous_rate:
                issues.append(f"{status}: bracket {index} rate decreases")
            previous_up_to, previous_rate = bracket.up_to, bracket.rate
        if not math.isinf(brackets[-1].up_to):
            issues.append(f"{status}: last bracket must be unbounded")
        if status not in data.standard_deductions:
            issues.append(f"{status}: missing standard deduction")
        if status not in data.payroll.additional_medicare_threshold:
            issues.append(f"{status}: missing additional Medicare threshold")
    for key, category in data.categories.items():
        if key != category.key:
            issues.append(f"category {key}: key mismatch ({category.key})")
        if category.tax_source not in TAX_SOURCES:
            issues.append(f"category {key}: unknown tax source {category.tax_source!r}")
        if category.revenue_pool <= 0:
            issues.append(f"category {key}: revenue pool must be positive")
        if category.tax_source == "mixed":
            weights = (category.income_share_percent, category.fica_share_percent)
            if None in weights:
                issues.append(f"category {key}: mixed source without split weights")
            elif not math.isclose(sum(weights), 1.0):  # type: ignore[arg-type]
                issues.append(f"category {key}: split weights do not sum to 1")
    if data.budget.individual_income_tax <= 0 or data.budget.payroll_tax <= 0:
        issues.append("budget revenue totals must be positive")
    previous_max = -math.inf
    for index, tier in enumerate(data.comparisons):
        if tier.threshold_max <= previous_max:
            issues.append(f"comparison tier {index} threshold not increasing")
        previous_max = tier.threshold_max
    if not data.comparisons or not math.isinf(data.comparisons[-1].threshold_max):
        issues.append("last comparison tier must be unbounded")
    for item in data.notable_spending:
        if item.category not in data.categories:
            issues.append(f"notable spending {item.key}: unknown category {item.category!r}")
    return issues


__all__ = [
    "Bracket",
    "ComparisonTier",
    "FederalBudget",
    "FundingCategory",
    "NotableSpending",
    "PayrollRates",
    "ReferenceData",
    "TAX_SOURCES",
    "TaxSource",
    "table_issues",
]
