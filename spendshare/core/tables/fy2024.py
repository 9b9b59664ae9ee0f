"""FY 2024 federal tax and budget snapshot.

Sources: IRS (brackets, deductions, payroll), CBO and U.S. Treasury Fiscal
Data (budget totals), Tax Foundation. Amounts are dollars.
"""
from __future__ import annotations

import math
from types import MappingProxyType

from spendshare.core.tables.base import (
    Bracket,
    ComparisonTier,
    FederalBudget,
    FundingCategory,
    NotableSpending,
    PayrollRates,
    ReferenceData,
)

YEAR = 2024
LAST_UPDATED = "2025-01-10"

STANDARD_DEDUCTIONS_2024 = MappingProxyType({
    "single": 14_600.0,
    "married": 29_200.0,
})

BRACKETS_2024 = MappingProxyType({
    "single": (
        Bracket(11_600, 0.10),
        Bracket(47_150, 0.12),
        Bracket(100_525, 0.22),
        Bracket(191_950, 0.24),
        Bracket(243_725, 0.32),
        Bracket(609_350, 0.35),
        Bracket(math.inf, 0.37),
    ),
    "married": (
        Bracket(23_200, 0.10),
        Bracket(94_300, 0.12),
        Bracket(201_050, 0.22),
        Bracket(383_900, 0.24),
        Bracket(487_450, 0.32),
        Bracket(731_200, 0.35),
        Bracket(math.inf, 0.37),
    ),
})

# Employee share only.
PAYROLL_2024 = PayrollRates(
    social_security_rate=0.062,
    wage_base=168_600,
    medicare_rate=0.0145,
    additional_medicare_rate=0.009,
    additional_medicare_threshold=MappingProxyType({
        "single": 200_000.0,
        "married": 250_000.0,
    }),
)

_SPENDING_2024 = MappingProxyType({
    "social_security": 1_400_000_000_000.0,
    "medicare_medicaid": 1_700_000_000_000.0,
    "defense": 900_000_000_000.0,
    "other_discretionary": 900_000_000_000.0,
    "other_mandatory": 1_000_000_000_000.0,
    "net_interest": 900_000_000_000.0,
})

BUDGET_2024 = FederalBudget(
    individual_income_tax=2_400_000_000_000,
    payroll_tax=1_700_000_000_000,
    corporate_tax=500_000_000_000,
    other_revenue=300_000_000_000,
    total_revenue=4_900_000_000_000,
    spending=_SPENDING_2024,
    total_spending=6_800_000_000_000,
    deficit=1_900_000_000_000,
)

_MEDICARE_INCOME_SHARE = 0.60
_MEDICARE_FICA_SHARE = 0.40

CATEGORIES_2024 = MappingProxyType({
    category.key: category
    for category in (
        FundingCategory(
            key="defense",
            name="Defense & Military",
            examples="Pentagon, weapons systems, military bases, VA healthcare & benefits",
            tax_source="income",
            budget_pool=_SPENDING_2024["defense"],
            revenue_pool=BUDGET_2024.individual_income_tax,
        ),
        FundingCategory(
            key="general",
            name="General Government",
            examples=(
                "SNAP, WIC, TANF, child care (CCAP/CCDBG), education grants, housing assistance, "
                "transportation, federal agencies, research"
            ),
            tax_source="income",
            budget_pool=_SPENDING_2024["other_discretionary"] + _SPENDING_2024["other_mandatory"],
            revenue_pool=BUDGET_2024.individual_income_tax,
        ),
        FundingCategory(
            key="socialSecurity",
            name="Social Security",
            examples="Retirement benefits, disability (SSDI), survivors benefits",
            tax_source="fica",
            budget_pool=_SPENDING_2024["social_security"],
            revenue_pool=BUDGET_2024.payroll_tax,
        ),
        FundingCategory(
            key="medicare",
            name="Medicare & Medicaid",
            examples="Medicare, Medicaid, CHIP, ACA marketplace subsidies",
            tax_source="mixed",
            budget_pool=_SPENDING_2024["medicare_medicaid"],
            # Blended pool is shown to users; the mixed formula uses the two
            # economy-wide revenue totals instead.
            revenue_pool=(
                BUDGET_2024.individual_income_tax * _MEDICARE_INCOME_SHARE
                + BUDGET_2024.payroll_tax * _MEDICARE_FICA_SHARE
            ),
            income_share_percent=_MEDICARE_INCOME_SHARE,
            fica_share_percent=_MEDICARE_FICA_SHARE,
        ),
        FundingCategory(
            key="interest",
            name="Interest on Debt",
            examples="Treasury bond payments, debt service",
            tax_source="income",
            budget_pool=_SPENDING_2024["net_interest"],
            revenue_pool=BUDGET_2024.individual_income_tax,
        ),
    )
})

COMPARISONS_2024 = (
    ComparisonTier(0.01, "Less than a penny"),
    ComparisonTier(0.10, "About {cents} cents"),
    ComparisonTier(1.00, "About {cents} cents"),
    ComparisonTier(5.00, "About the cost of a coffee"),
    ComparisonTier(15.00, "About the cost of a fast food meal"),
    ComparisonTier(25.00, "About the cost of a movie ticket"),
    ComparisonTier(75.00, "About the cost of a tank of gas"),
    ComparisonTier(150.00, "About the cost of a nice dinner out"),
    ComparisonTier(500.00, "About the cost of a monthly utility bill"),
    ComparisonTier(math.inf, "About {days} days of your annual tax contribution"),
)

NOTABLE_SPENDING_2024 = (
    NotableSpending(
        key="jamesWebbTelescope",
        label="James Webb Space Telescope",
        value=10_000_000_000,
        source="NASA",
        last_verified=LAST_UPDATED,
        category="general",
        notes="Total lifecycle development cost",
        multi_year=True,
    ),
    NotableSpending(
        key="geraldRFordCarrier",
        label="Gerald R. Ford Aircraft Carrier",
        value=13_300_000_000,
        source="Congressional Research Service",
        last_verified=LAST_UPDATED,
        category="defense",
        notes="Total acquisition cost for lead ship CVN-78",
        multi_year=True,
    ),
    NotableSpending(
        key="defenseBudgetProposal",
        label="$1.5T Defense Budget Proposal",
        value=1_500_000_000_000,
        source="White House / CRFB analysis",
        last_verified="2026-01-15",
        category="defense",
        notes="Proposed FY2027 defense budget, up from roughly $1T",
        trending=True,
    ),
    NotableSpending(
        key="dogeClaimedSavings",
        label="DOGE Claimed Savings (1 Year)",
        value=214_000_000_000,
        source="DOGE official claims",
        last_verified="2026-01-15",
        category="general",
        notes="Claimed first-year savings; accuracy disputed",
        is_savings=True,
        trending=True,
    ),
    NotableSpending(
        key="medicaidCuts",
        label="Medicaid Cuts (10-Year)",
        value=911_000_000_000,
        source="Congressional Budget Office",
        last_verified="2026-01-15",
        category="medicare",
        notes="Projected reductions through 2034",
        is_savings=True,
        trending=True,
    ),
    NotableSpending(
        key="iceEnforcement",
        label="ICE Enforcement Funding",
        value=75_000_000_000,
        source="One Big Beautiful Bill Act",
        last_verified="2026-01-15",
        category="general",
        notes="Enforcement funding allocated through 2029",
        trending=True,
    ),
    NotableSpending(
        key="caHighSpeedRail",
        label="CA High-Speed Rail (Spent)",
        value=15_000_000_000,
        source="U.S. Department of Transportation",
        last_verified="2026-01-15",
        category="general",
        notes="Total spent to date on the 800-mile project",
        trending=True,
    ),
    NotableSpending(
        key="snapCuts",
        label="SNAP Cuts (10-Year)",
        value=186_000_000_000,
        source="Congressional Budget Office",
        last_verified="2026-01-15",
        category="general",
        notes="Projected food assistance reductions through 2034",
        is_savings=True,
        trending=True,
    ),
)

DEFICIT_NOTE_2024 = (
    "About 28% of federal spending is deficit-financed (borrowed), "
    "not directly from current taxes."
)

REFERENCE_2024 = ReferenceData(
    year=YEAR,
    last_updated=LAST_UPDATED,
    standard_deductions=STANDARD_DEDUCTIONS_2024,
    brackets=BRACKETS_2024,
    payroll=PAYROLL_2024,
    budget=BUDGET_2024,
    categories=CATEGORIES_2024,
    comparisons=COMPARISONS_2024,
    notable_spending=NOTABLE_SPENDING_2024,
    deficit_note=DEFICIT_NOTE_2024,
)
