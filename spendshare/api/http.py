from __future__ import annotations

import logging
import math
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field, model_validator

from spendshare.config import get_settings
from spendshare.core.comparison import get_comparison
from spendshare.core.errors import UnknownCategoryError, UnknownFilingStatusError
from spendshare.core.formatting import format_currency, format_large_number, format_proportion
from spendshare.core.liability import TaxLiability, liability_from_declared_tax, liability_from_income
from spendshare.core.share import calculate_share
from spendshare.core.tables import ReferenceData, get_reference_data
from spendshare.lifespan import build_application_lifespan
from spendshare.wizard.fields import BILLION

logger = logging.getLogger("spendshare.api")


class ShareRequest(BaseModel):
    income: float | None = Field(default=None, allow_inf_nan=False, description="Annual gross income")
    declared_tax: float | None = Field(
        default=None, allow_inf_nan=False, description="Federal income tax paid, instead of income"
    )
    filing_status: str | None = Field(default=None, description="single or married")
    spending_amount: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Spending in dollars"
    )
    spending_billions: float | None = Field(
        default=None, ge=0, allow_inf_nan=False, description="Spending in billions"
    )
    category: str = Field(..., description="Funding category key, e.g. defense")
    multi_year: bool = False

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_sources(self) -> "ShareRequest":
        if (self.income is None) == (self.declared_tax is None):
            raise ValueError("Provide exactly one of income or declared_tax")
        if (self.spending_amount is None) == (self.spending_billions is None):
            raise ValueError("Provide exactly one of spending_amount or spending_billions")
        return self

    def spending_dollars(self) -> float:
        if self.spending_amount is not None:
            return self.spending_amount
        return (self.spending_billions or 0.0) * BILLION


def _reference(request: Request) -> ReferenceData:
    ref = getattr(request.app.state, "reference_data", None)
    return ref if ref is not None else get_reference_data(get_settings().data_year)


def _filing_status(request: Request, value: str | None) -> str:
    if value is not None:
        return value
    settings = getattr(request.app.state, "settings", None) or get_settings()
    return settings.default_filing_status


def _liability_payload(liability: TaxLiability) -> dict[str, Any]:
    return {
        "input_mode": liability.input_mode,
        "filing_status": liability.filing_status,
        "gross_income": liability.gross_income,
        "income_tax": liability.income_tax,
        "fica": asdict(liability.fica),
        "annual_tax": liability.annual_tax,
        "effective_rate": liability.effective_rate,
        "display": {
            "income_tax": format_currency(liability.income_tax),
            "annual_tax": format_currency(liability.annual_tax),
        },
    }


app = FastAPI(
    title="spendshare",
    description="Your personal share of a federal spending figure.",
    lifespan=build_application_lifespan("api"),
)


@app.get("/health")
def health(request: Request):
    settings = getattr(request.app.state, "settings", None) or get_settings()
    ref = _reference(request)
    return {
        "status": "ok",
        "data_year": ref.year,
        "data_last_updated": ref.last_updated,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


@app.get("/tax/estimate")
def estimate(request: Request, income: float, filing_status: str | None = None):
    try:
        liability = liability_from_income(income, _filing_status(request, filing_status), _reference(request))
    except UnknownFilingStatusError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _liability_payload(liability)


@app.post("/share")
def share(request: Request, payload: ShareRequest):
    ref = _reference(request)
    status = _filing_status(request, payload.filing_status)
    try:
        if payload.declared_tax is not None:
            liability = liability_from_declared_tax(payload.declared_tax, status, ref)
        else:
            liability = liability_from_income(payload.income, status, ref)
        result = calculate_share(
            liability.income_tax,
            liability.fica_tax,
            payload.spending_dollars(),
            payload.category,
            ref,
        )
    except UnknownFilingStatusError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UnknownCategoryError as exc:
        logger.warning("Rejected share request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not math.isfinite(result.your_share):
        raise HTTPException(status_code=400, detail="Spending amount is too large to compute a share.")

    return {
        "result": asdict(result),
        "comparison": get_comparison(result.your_share, liability.annual_tax, ref),
        "liability": _liability_payload(liability),
        "multi_year": payload.multi_year,
        "display": {
            "your_share": format_currency(result.your_share),
            "spending_amount": format_large_number(result.spending_amount),
            "proportion": format_proportion(result.breakdown.proportion),
        },
    }


@app.get("/categories")
def categories(request: Request):
    ref = _reference(request)
    return {"data_year": ref.year, "categories": [asdict(c) for c in ref.categories.values()]}


@app.get("/spending/notable")
def notable_spending(request: Request):
    ref = _reference(request)
    return {"data_year": ref.year, "items": [asdict(item) for item in ref.notable_spending]}
