import pytest

from spendshare.core.comparison import days_of_tax, find_tier, get_comparison
from spendshare.core.tables import get_reference_data


def test_boundary_belongs_to_next_tier():
    assert get_comparison(4.99, 10_000) == "About the cost of a coffee"
    assert get_comparison(5.00, 10_000) == "About the cost of a fast food meal"


@pytest.mark.parametrize(
    "share,expected",
    [
        (0.0, "Less than a penny"),
        (0.009, "Less than a penny"),
        (0.01, "About 1 cents"),
        (0.05, "About 5 cents"),
        (0.50, "About 50 cents"),
        (1.00, "About the cost of a coffee"),
        (14.99, "About the cost of a fast food meal"),
        (15.00, "About the cost of a movie ticket"),
        (39.17, "About the cost of a tank of gas"),
        (149.99, "About the cost of a nice dinner out"),
        (499.99, "About the cost of a monthly utility bill"),
    ],
)
def test_tiers(share, expected):
    assert get_comparison(share, 12_000) == expected


def test_days_placeholder():
    # 36,500 a year is 100 a day
    assert get_comparison(1_000, 36_500) == "About 10 days of your annual tax contribution"
    assert get_comparison(500, 36_500) == "About 5 days of your annual tax contribution"


def test_days_with_zero_annual_tax():
    assert get_comparison(750, 0) == "About 0 days of your annual tax contribution"
    assert days_of_tax(750, 0) == 0
    assert days_of_tax(750, -10) == 0


def test_days_rounds_to_nearest():
    assert days_of_tax(149, 36_500) == 1
    assert days_of_tax(151, 36_500) == 2


def test_no_tier_returns_empty_string():
    tiers = get_reference_data().comparisons[:-1]
    assert find_tier(10_000, tiers) is None
    assert get_comparison(float("nan"), 1_000) == ""
