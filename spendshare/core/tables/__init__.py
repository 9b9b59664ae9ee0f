from __future__ import annotations

import logging
from typing import Iterable

from spendshare.core.errors import ReferenceDataError, UnsupportedDataYearError
from spendshare.core.tables.base import (
    Bracket,
    ComparisonTier,
    FederalBudget,
    FundingCategory,
    NotableSpending,
    PayrollRates,
    ReferenceData,
    TAX_SOURCES,
    TaxSource,
    table_issues,
)
from spendshare.core.tables.fy2024 import REFERENCE_2024

logger = logging.getLogger("spendshare.tables")

_REGISTRY: dict[int, ReferenceData] = {}


def register_reference_data(snapshots: Iterable[ReferenceData]) -> None:
    for snapshot in snapshots:
        issues = table_issues(snapshot)
        if issues:
            raise ReferenceDataError(
                f"Reference data for {snapshot.year} is malformed: " + "; ".join(issues)
            )
        _REGISTRY[snapshot.year] = snapshot
        logger.debug("Registered reference data year=%s categories=%s", snapshot.year, len(snapshot.categories))


register_reference_data((REFERENCE_2024,))

SUPPORTED_DATA_YEARS: tuple[int, ...] = tuple(sorted(_REGISTRY))
DEFAULT_DATA_YEAR = SUPPORTED_DATA_YEARS[-1]


def get_reference_data(year: int | None = None) -> ReferenceData:
    target = DEFAULT_DATA_YEAR if year is None else year
    try:
        return _REGISTRY[target]
    except KeyError as exc:
        raise UnsupportedDataYearError(target, tuple(sorted(_REGISTRY))) from exc


__all__ = [
    "Bracket",
    "ComparisonTier",
    "DEFAULT_DATA_YEAR",
    "FederalBudget",
    "FundingCategory",
    "NotableSpending",
    "PayrollRates",
    "ReferenceData",
    "SUPPORTED_DATA_YEARS",
    "TAX_SOURCES",
    "TaxSource",
    "get_reference_data",
    "register_reference_data",
    "table_issues",
]
