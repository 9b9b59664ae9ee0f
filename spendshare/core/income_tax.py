from __future__ import annotations

import logging

from spendshare.core._progressive import income_basis, tax_from_brackets
from spendshare.core.filing import resolve_filing_status
from spendshare.core.tables import ReferenceData, get_reference_data

logger = logging.getLogger("spendshare.core")


def taxable_income(gross_income: object, filing_status: str | None = None, data: ReferenceData | None = None) -> float:
    ref = data or get_reference_data()
    status = resolve_filing_status(filing_status)
    return max(0.0, income_basis(gross_income) - ref.standard_deductions[status])


def calculate_income_tax(
    gross_income: object,
    filing_status: str | None = "single",
    data: ReferenceData | None = None,
) -> float:
    """Federal income tax on gross income after the standard deduction.

    Unrounded; callers format for display. Bad income input is a zero basis,
    an unrecognised filing status raises ``UnknownFilingStatusError``.
    """
    ref = data or get_reference_data()
    status = resolve_filing_status(filing_status)
    taxable = taxable_income(gross_income, status, ref)
    tax = tax_from_brackets(taxable, ref.brackets[status])
    logger.debug("income tax status=%s taxable=%.2f tax=%.2f", status, taxable, tax)
    return tax


__all__ = ["calculate_income_tax", "taxable_income"]
