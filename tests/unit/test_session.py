import pytest

from spendshare.wizard import clear_session, load_session, save_session, session_path
from spendshare.wizard.fields import (
    canonicalize_session,
    coerce_session_field,
    parse_number,
    parse_spending_billions,
)


def test_missing_session_is_empty():
    assert load_session() == ({}, [])


def test_save_and_reload_round_trip():
    save_session({"input_mode": "income", "filing_status": "married", "income": 75_000})
    data, errors = load_session()
    assert errors == []
    assert data["filing_status"] == "married"
    assert data["income"] == 75_000.00
    assert data["input_mode"] == "income"
    assert "last_visit" in data


def test_save_merges_with_existing():
    save_session({"filing_status": "married", "income": 75_000})
    save_session({"income": 90_000})
    data, _ = load_session()
    assert data["filing_status"] == "married"
    assert data["income"] == 90_000


def test_none_forgets_a_saved_value():
    save_session({"input_mode": "tax", "direct_tax": 9_400})
    save_session({"input_mode": "income", "income": 60_000, "direct_tax": None})
    data, _ = load_session()
    assert "direct_tax" not in data
    assert data["income"] == 60_000


def test_corrupt_session_is_reported_not_raised():
    path = session_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("income = [unclosed\n", encoding="utf-8")
    data, errors = load_session()
    assert data == {}
    assert errors and "session.toml" in errors[0]


def test_invalid_value_drops_only_that_field():
    path = session_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('filing_status = "widowed"\nincome = 60000.00\n', encoding="utf-8")
    data, errors = load_session()
    assert data == {"income": 60_000.0}
    assert len(errors) == 1
    assert "filing_status" in errors[0]


def test_save_over_partly_invalid_session_keeps_good_fields():
    path = session_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('input_mode = "vibes"\nincome = 60000.00\n', encoding="utf-8")
    save_session({"filing_status": "married"})
    data, errors = load_session()
    assert errors == []
    assert data["income"] == 60_000
    assert data["filing_status"] == "married"
    assert "input_mode" not in data


def test_canonicalize_raises_without_error_list():
    with pytest.raises(ValueError):
        canonicalize_session({"filing_status": "widowed"})


@pytest.mark.parametrize("text", ["inf", "-inf", "nan", "1e400"])
def test_parse_number_rejects_non_finite(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_clear_session():
    assert clear_session() is False
    save_session({"income": 1_000})
    assert clear_session() is True
    assert load_session() == ({}, [])


@pytest.mark.parametrize(
    "text,expected",
    [("75k", 75_000.0), ("$1,200", 1_200.0), ("2.4t", 2.4e12), ("-5", -5.0)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == pytest.approx(expected)


def test_parse_number_rejects_garbage():
    with pytest.raises(ValueError):
        parse_number("lots")
    with pytest.raises(ValueError):
        parse_number("  ")


def test_parse_spending_billions():
    assert parse_spending_billions("13.3") == pytest.approx(13.3e9)
    assert parse_spending_billions("500m") == pytest.approx(500e6)


def test_coerce_input_mode():
    assert coerce_session_field("input_mode", "TAX") == "tax"
    with pytest.raises(ValueError):
        coerce_session_field("input_mode", "vibes")
