from __future__ import annotations

from typing import Literal, cast

from spendshare.core.errors import UnknownFilingStatusError

FilingStatus = Literal["single", "married"]

FILING_STATUSES: tuple[FilingStatus, ...] = ("single", "married")
DEFAULT_FILING_STATUS: FilingStatus = "single"

_ALIASES = {
    "single": "single",
    "s": "single",
    "married": "married",
    "m": "married",
    "mfj": "married",
    "joint": "married",
    "married_filing_jointly": "married",
    "married filing jointly": "married",
}


def resolve_filing_status(value: str | None) -> FilingStatus:
    """Normalize a filing status, defaulting to single only when omitted.

    Anything that is neither omitted nor a recognised spelling raises
    ``UnknownFilingStatusError``; it is never silently treated as single.
    """
    if value is None:
        return DEFAULT_FILING_STATUS
    if not isinstance(value, str):
        raise UnknownFilingStatusError(value)
    key = value.strip().lower().replace("-", "_")
    try:
        return cast(FilingStatus, _ALIASES[key])
    except KeyError as exc:
        raise UnknownFilingStatusError(value) from exc


__all__ = [
    "DEFAULT_FILING_STATUS",
    "FILING_STATUSES",
    "FilingStatus",
    "resolve_filing_status",
]
