from dataclasses import replace
from types import MappingProxyType

import pytest

from spendshare.core.errors import ReferenceDataError, UnknownCategoryError
from spendshare.core.share import calculate_share
from spendshare.core.tables import get_reference_data

CATEGORIES = ["defense", "general", "socialSecurity", "medicare", "interest"]


def test_defense_end_to_end_share():
    result = calculate_share(9_400, 0, 10_000_000_000, "defense")
    assert result.your_share == pytest.approx(39.17, abs=0.005)
    assert result.category == "Defense & Military"
    assert result.tax_source == "income"
    assert result.breakdown.tax_type == "Federal Income Tax"
    assert result.breakdown.your_tax == 9_400
    assert result.breakdown.total_revenue == 2_400_000_000_000
    assert result.breakdown.proportion == pytest.approx(9_400 / 2_400_000_000_000)
    assert result.exceeds_budget is False
    assert "deficit-financed" in result.deficit_note


def test_fica_category_uses_payroll_tax():
    result = calculate_share(99_999, 5_000, 1_400_000_000_000, "socialSecurity")
    assert result.breakdown.tax_type == "Payroll Tax (FICA)"
    assert result.breakdown.your_tax == 5_000
    assert result.your_share == pytest.approx(5_000 / 1_700_000_000_000 * 1_400_000_000_000)


def test_mixed_category_uses_economy_wide_totals():
    result = calculate_share(10_000, 5_000, 1_000_000_000, "medicare")
    income_slice = 10_000 / 2_400_000_000_000 * 1_000_000_000 * 0.60
    fica_slice = 5_000 / 1_700_000_000_000 * 1_000_000_000 * 0.40
    assert result.breakdown.income_contribution == pytest.approx(income_slice)
    assert result.breakdown.fica_contribution == pytest.approx(fica_slice)
    assert result.your_share == pytest.approx(income_slice + fica_slice)
    assert result.breakdown.your_tax == 15_000
    assert result.breakdown.total_revenue is None
    assert result.breakdown.proportion == pytest.approx(result.your_share / 1_000_000_000)

    blended = get_reference_data().categories["medicare"].revenue_pool
    assert result.your_share != pytest.approx(15_000 / blended * 1_000_000_000)


@pytest.mark.parametrize("income_tax,fica_tax", [(8_341.0, 5_737.5), (1.0, 0.0), (0.0, 1.0), (123_456.78, 14_000.0)])
def test_mixed_slices_sum_to_share(income_tax, fica_tax):
    result = calculate_share(income_tax, fica_tax, 911_000_000_000, "medicare")
    breakdown = result.breakdown
    assert breakdown.income_contribution + breakdown.fica_contribution == result.your_share


@pytest.mark.parametrize("category", CATEGORIES)
def test_share_linear_in_spending(category):
    single = calculate_share(8_341, 5_737.5, 13_300_000_000, category)
    double = calculate_share(8_341, 5_737.5, 26_600_000_000, category)
    assert double.your_share == pytest.approx(2 * single.your_share, rel=1e-12)


@pytest.mark.parametrize("category", CATEGORIES)
def test_share_linear_in_tax(category):
    base = calculate_share(4_000, 3_000, 75_000_000_000, category)
    tripled = calculate_share(12_000, 9_000, 75_000_000_000, category)
    assert tripled.your_share == pytest.approx(3 * base.your_share, rel=1e-12)


@pytest.mark.parametrize("category", CATEGORIES)
def test_zero_spending_is_zero_share(category):
    result = calculate_share(10_000, 5_000, 0, category)
    assert result.your_share == 0
    if category == "medicare":
        assert result.breakdown.proportion == 0.0


def test_zero_tax_input_contributes_nothing():
    assert calculate_share(0, 5_000, 1_000_000_000, "defense").your_share == 0
    assert calculate_share(5_000, 0, 1_000_000_000, "socialSecurity").your_share == 0
    mixed = calculate_share(0, 5_000, 1_000_000_000, "medicare")
    assert mixed.breakdown.income_contribution == 0
    assert mixed.your_share == mixed.breakdown.fica_contribution


def test_exceeds_budget_is_advisory():
    pool = get_reference_data().categories["defense"].budget_pool
    at_pool = calculate_share(9_400, 0, pool, "defense")
    over = calculate_share(9_400, 0, pool * 2, "defense")
    assert at_pool.exceeds_budget is False
    assert over.exceeds_budget is True
    assert over.your_share == pytest.approx(2 * at_pool.your_share)
    assert over.budget_pool == pool


def test_unknown_category_raises_with_key():
    with pytest.raises(UnknownCategoryError) as excinfo:
        calculate_share(9_400, 0, 1_000_000, "space_lasers")
    assert "space_lasers" in str(excinfo.value)
    assert excinfo.value.key == "space_lasers"
    assert "defense" in excinfo.value.known


def test_unknown_category_is_a_key_error():
    with pytest.raises(KeyError):
        calculate_share(9_400, 0, 1_000_000, "")


def test_unknown_tax_source_in_table_raises():
    ref = get_reference_data()
    broken = replace(ref.categories["defense"], tax_source="tariff")
    data = replace(ref, categories=MappingProxyType({**ref.categories, "defense": broken}))
    with pytest.raises(ReferenceDataError):
        calculate_share(9_400, 0, 1_000_000, "defense", data)


def test_result_echoes_inputs():
    result = calculate_share(9_400, 700, 75_000_000_000, "general")
    assert result.spending_amount == 75_000_000_000
    assert result.category_key == "general"
    assert result.category == "General Government"
