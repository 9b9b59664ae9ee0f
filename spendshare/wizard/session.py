from __future__ import annotations

import logging
import tomllib
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from spendshare.config import get_settings
from spendshare.core.formatting import round_cents
from spendshare.wizard.fields import SESSION_NUMERIC_FIELDS, SESSION_SAVE_ORDER, canonicalize_session

logger = logging.getLogger("spendshare.session")


def session_path() -> Path:
    return get_settings().session_path


def load_session(path: Path | None = None) -> tuple[dict[str, Any], list[str]]:
    """Return the saved session and any problems reading it.

    A missing file is an empty session. A corrupt file is reported, never
    raised, so a bad save cannot lock the user out of the calculator.
    """
    target = path or session_path()
    if not target.exists():
        return {}, []
    errors: list[str] = []
    try:
        with target.open("rb") as handle:
            raw = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        errors.append(f"{target.name}: {exc}")
        logger.warning("Could not read session %s: %s", target, exc)
        return {}, errors
    field_errors: list[str] = []
    try:
        data = canonicalize_session(raw, field_errors)
    except ValueError as exc:
        errors.append(f"{target.name}: {exc}")
        data = {}
    for message in field_errors:
        errors.append(f"{target.name}: {message}")
        logger.warning("Dropped session value in %s: %s", target, message)
    return data, errors


def write_session(data: dict[str, Any], path: Path) -> None:
    lines: list[str] = []
    for key in SESSION_SAVE_ORDER:
        value = data.get(key)
        if value is None:
            continue
        if key in SESSION_NUMERIC_FIELDS:
            lines.append(f"{key} = {round_cents(float(value)):.2f}")
        else:
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'{key} = "{escaped}"')
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def save_session(data: dict[str, Any], path: Path | None = None) -> dict[str, Any]:
    target = path or session_path()
    existing, _ = load_session(target)
    merged = {
        **existing,
        **canonicalize_session({k: v for k, v in data.items() if v is not None}),
        "last_visit": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
    # an explicit None forgets a saved value
    for key, value in data.items():
        if value is None:
            merged.pop(key, None)
    write_session(merged, target)
    logger.debug("Saved session to %s", target)
    return merged


def clear_session(path: Path | None = None) -> bool:
    target = path or session_path()
    if not target.exists():
        return False
    target.unlink()
    return True


__all__ = [
    "clear_session",
    "load_session",
    "save_session",
    "session_path",
    "write_session",
]
