from __future__ import annotations

import logging
from dataclasses import dataclass

from spendshare.core._progressive import income_basis
from spendshare.core.filing import resolve_filing_status
from spendshare.core.tables import ReferenceData, get_reference_data

logger = logging.getLogger("spendshare.core")


@dataclass(frozen=True)
class PayrollTax:
    social_security: float
    medicare: float
    total: float


def social_security_tax(gross_income: object, data: ReferenceData | None = None) -> float:
    rates = (data or get_reference_data()).payroll
    wages = min(income_basis(gross_income), rates.wage_base)
    return wages * rates.social_security_rate


def medicare_tax(gross_income: object, filing_status: str | None = "single", data: ReferenceData | None = None) -> float:
    rates = (data or get_reference_data()).payroll
    income = income_basis(gross_income)
    tax = income * rates.medicare_rate
    threshold = rates.additional_medicare_threshold[resolve_filing_status(filing_status)]
    # exclusive: income equal to the threshold owes no additional tax
    if income > threshold:
        tax += (income - threshold) * rates.additional_medicare_rate
    return tax


def calculate_fica(
    gross_income: object,
    filing_status: str | None = "single",
    data: ReferenceData | None = None,
) -> PayrollTax:
    ref = data or get_reference_data()
    status = resolve_filing_status(filing_status)
    ss = social_security_tax(gross_income, ref)
    medicare = medicare_tax(gross_income, status, ref)
    logger.debug("fica status=%s social_security=%.2f medicare=%.2f", status, ss, medicare)
    return PayrollTax(social_security=ss, medicare=medicare, total=ss + medicare)


__all__ = ["PayrollTax", "calculate_fica", "medicare_tax", "social_security_tax"]
