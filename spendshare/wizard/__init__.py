from .fields import (
    BILLION,
    SESSION_SAVE_ORDER,
    canonicalize_session,
    coerce_session_field,
    parse_number,
    parse_spending_billions,
)
from .session import clear_session, load_session, save_session, session_path

__all__ = [
    "BILLION",
    "SESSION_SAVE_ORDER",
    "canonicalize_session",
    "clear_session",
    "coerce_session_field",
    "load_session",
    "parse_number",
    "parse_spending_billions",
    "save_session",
    "session_path",
]
