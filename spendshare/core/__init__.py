from __future__ import annotations

from spendshare.core.comparison import get_comparison
from spendshare.core.errors import (
    ReferenceDataError,
    SpendShareError,
    UnknownCategoryError,
    UnknownFilingStatusError,
    UnsupportedDataYearError,
)
from spendshare.core.filing import FilingStatus, resolve_filing_status
from spendshare.core.income_tax import calculate_income_tax
from spendshare.core.liability import (
    TaxLiability,
    liability_from_declared_tax,
    liability_from_income,
)
from spendshare.core.payroll import PayrollTax, calculate_fica
from spendshare.core.share import ShareBreakdown, ShareResult, calculate_share

__all__ = [
    "FilingStatus",
    "PayrollTax",
    "ReferenceDataError",
    "ShareBreakdown",
    "ShareResult",
    "SpendShareError",
    "TaxLiability",
    "UnknownCategoryError",
    "UnknownFilingStatusError",
    "UnsupportedDataYearError",
    "calculate_fica",
    "calculate_income_tax",
    "calculate_share",
    "get_comparison",
    "liability_from_declared_tax",
    "liability_from_income",
    "resolve_filing_status",
]
