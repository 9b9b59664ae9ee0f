from __future__ import annotations

import math
from typing import Any

from spendshare.core.filing import resolve_filing_status
from spendshare.core.formatting import round_cents

SESSION_NUMERIC_FIELDS = {"income", "direct_tax"}
SESSION_SAVE_ORDER = [
    "input_mode",
    "filing_status",
    "income",
    "direct_tax",
    "last_visit",
]
INPUT_MODES = {"income", "tax"}

NUM_SUFFIXES = {
    "k": 1_000.0,
    "m": 1_000_000.0,
    "b": 1_000_000_000.0,
    "t": 1_000_000_000_000.0,
}

BILLION = 1_000_000_000.0


def parse_number(text: str) -> float:
    cleaned = text.strip().lower()
    if not cleaned:
        raise ValueError("Please enter a number.")
    multiplier = 1.0
    suffix = cleaned[-1]
    if suffix in NUM_SUFFIXES:
        multiplier = NUM_SUFFIXES[suffix]
        cleaned = cleaned[:-1]
    cleaned = cleaned.replace("$", "").replace(",", "").replace(" ", "").replace("_", "")
    cleaned = cleaned.replace("−", "-").replace("–", "-")
    if cleaned in {"", "-", "."}:
        raise ValueError("Please enter a number.")
    try:
        value = float(cleaned) * multiplier
    except ValueError as exc:
        raise ValueError(f"Could not understand number '{text}'.") from exc
    if not math.isfinite(value):
        raise ValueError(f"Could not understand number '{text}'.")
    return value


def parse_spending_billions(text: str) -> float:
    """Spending typed as billions ("13.3" -> 13.3e9); suffixes win over the default unit."""
    stripped = text.strip().lower()
    if stripped and stripped[-1] in NUM_SUFFIXES:
        return parse_number(stripped)
    return parse_number(stripped) * BILLION


def coerce_session_field(field: str, value: Any) -> Any:
    if value is None:
        return None
    if field in SESSION_NUMERIC_FIELDS:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return round_cents(float(value))
        return round_cents(parse_number(str(value)))
    if field == "filing_status":
        return resolve_filing_status(str(value))
    if field == "input_mode":
        mode = str(value).strip().lower()
        if mode not in INPUT_MODES:
            raise ValueError(f"Input mode must be 'income' or 'tax', got {value!r}.")
        return mode
    return str(value).strip()


def canonicalize_session(raw: Any, errors: list[str] | None = None) -> dict[str, Any]:
    """Coerce known session keys.

    Without ``errors`` the first bad value raises. With it, bad keys are
    dropped and described in ``errors`` so the rest of the session survives.
    """
    if not isinstance(raw, dict):
        raise ValueError("Session data must be a table of key/value pairs.")
    data: dict[str, Any] = {}
    for key in SESSION_SAVE_ORDER:
        if key not in raw or raw[key] is None:
            continue
        try:
            data[key] = coerce_session_field(key, raw[key])
        except ValueError as exc:
            if errors is None:
                raise
            errors.append(f"{key}: {exc}")
    return data


__all__ = [
    "BILLION",
    "INPUT_MODES",
    "NUM_SUFFIXES",
    "SESSION_NUMERIC_FIELDS",
    "SESSION_SAVE_ORDER",
    "canonicalize_session",
    "coerce_session_field",
    "parse_number",
    "parse_spending_billions",
]
