import math
from dataclasses import replace

import pytest

from spendshare.core.errors import ReferenceDataError, UnsupportedDataYearError
from spendshare.core.tables import (
    DEFAULT_DATA_YEAR,
    SUPPORTED_DATA_YEARS,
    get_reference_data,
    register_reference_data,
    table_issues,
)


def test_fy2024_snapshot_is_sound():
    ref = get_reference_data(2024)
    assert table_issues(ref) == []
    assert ref.year == 2024
    assert 2024 in SUPPORTED_DATA_YEARS
    assert get_reference_data() is get_reference_data(DEFAULT_DATA_YEAR)


def test_brackets_contiguous_and_unbounded():
    ref = get_reference_data()
    for status, brackets in ref.brackets.items():
        bounds = [b.up_to for b in brackets]
        rates = [b.rate for b in brackets]
        assert bounds == sorted(bounds)
        assert rates == sorted(rates)
        assert math.isinf(bounds[-1])


def test_category_catalog():
    ref = get_reference_data()
    assert set(ref.categories) == {"defense", "general", "socialSecurity", "medicare", "interest"}
    medicare = ref.categories["medicare"]
    assert medicare.tax_source == "mixed"
    assert medicare.income_share_percent + medicare.fica_share_percent == pytest.approx(1.0)
    assert ref.categories["socialSecurity"].revenue_pool == ref.budget.payroll_tax


def test_notable_spending_points_at_known_categories():
    ref = get_reference_data()
    assert ref.notable_spending
    carrier = next(item for item in ref.notable_spending if item.key == "geraldRFordCarrier")
    assert carrier.multi_year is True
    assert carrier.category == "defense"
    assert any(item.is_savings for item in ref.notable_spending)


def test_unknown_year_raises():
    with pytest.raises(UnsupportedDataYearError) as excinfo:
        get_reference_data(1999)
    assert "1999" in str(excinfo.value)


def test_malformed_snapshot_is_rejected():
    ref = get_reference_data()
    broken = replace(ref, year=1900, comparisons=ref.comparisons[:-1])
    assert table_issues(broken)
    with pytest.raises(ReferenceDataError):
        register_reference_data((broken,))
    with pytest.raises(UnsupportedDataYearError):
        get_reference_data(1900)


def test_default_year_is_latest_registered():
    assert DEFAULT_DATA_YEAR == max(SUPPORTED_DATA_YEARS)
    assert get_reference_data().year == max(SUPPORTED_DATA_YEARS)
