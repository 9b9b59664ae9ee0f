from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from spendshare.core._progressive import income_basis
from spendshare.core.filing import FilingStatus, resolve_filing_status
from spendshare.core.income_tax import calculate_income_tax
from spendshare.core.payroll import PayrollTax, calculate_fica
from spendshare.core.tables import ReferenceData, get_reference_data

InputMode = Literal["income", "tax"]

# Rough effective rate used to back out an income from a declared tax bill,
# only so payroll tax can be estimated.
DECLARED_TAX_EFFECTIVE_RATE = 0.15


@dataclass(frozen=True)
class TaxLiability:
    input_mode: InputMode
    filing_status: FilingStatus
    gross_income: float
    income_tax: float
    fica: PayrollTax

    @property
    def fica_tax(self) -> float:
        return self.fica.total

    @property
    def annual_tax(self) -> float:
        return self.income_tax + self.fica.total

    @property
    def effective_rate(self) -> float | None:
        if self.gross_income <= 0:
            return None
        return self.income_tax / self.gross_income


def liability_from_income(
    gross_income: object,
    filing_status: str | None = "single",
    data: ReferenceData | None = None,
) -> TaxLiability:
    ref = data or get_reference_data()
    status = resolve_filing_status(filing_status)
    income = income_basis(gross_income)
    return TaxLiability(
        input_mode="income",
        filing_status=status,
        gross_income=income,
        income_tax=calculate_income_tax(income, status, ref),
        fica=calculate_fica(income, status, ref),
    )


def liability_from_declared_tax(
    declared_tax: object,
    filing_status: str | None = "single",
    data: ReferenceData | None = None,
) -> TaxLiability:
    """Build a liability from an income tax amount the user typed in.

    The declared figure is taken as the income tax as-is; gross income is an
    estimate and only feeds the payroll calculation.
    """
    ref = data or get_reference_data()
    status = resolve_filing_status(filing_status)
    tax = income_basis(declared_tax)
    estimated_income = tax / DECLARED_TAX_EFFECTIVE_RATE
    return TaxLiability(
        input_mode="tax",
        filing_status=status,
        gross_income=estimated_income,
        income_tax=tax,
        fica=calculate_fica(estimated_income, status, ref),
    )


__all__ = [
    "DECLARED_TAX_EFFECTIVE_RATE",
    "InputMode",
    "TaxLiability",
    "liability_from_declared_tax",
    "liability_from_income",
]
