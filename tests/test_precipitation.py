import pytest
from hypothesis import given, strategies as st

from wbmcell.precipitation import (
    DEFAULT_WET_DAYS,
    downscale_precipitation,
    fraction_precipitation,
    is_event,
    wet_day_precipitation,
    wet_days,
)


def test_downscale_identity_when_reference_equals_monthly():
    assert downscale_precipitation(7.5, 3.0, 3.0) == pytest.approx(7.5)


@pytest.mark.parametrize("monthly,reference", [(0.0, 2.0), (2.0, 0.0), (-1.0, 2.0)])
def test_downscale_zero_without_positive_means(monthly, reference):
    assert downscale_precipitation(5.0, monthly, reference) == 0.0


def test_downscale_scales_with_reference():
    doubled = downscale_precipitation(4.0, 2.0, 4.0)
    single = downscale_precipitation(4.0, 2.0, 2.0)
    assert doubled == pytest.approx(2.0 * single)


@pytest.mark.parametrize("n", [28, 30, 31])
def test_fraction_even_spread_returns_daily_rate(n):
    assert fraction_precipitation(3.0, None, n) == pytest.approx(3.0)
    assert fraction_precipitation(3.0, 1.0 / n, n) == pytest.approx(3.0)


def test_fraction_rejects_bad_month_length():
    with pytest.raises(ValueError):
        fraction_precipitation(3.0, 0.1, 0)


def test_event_when_all_steps_are_events():
    assert all(is_event(10, 10, s) for s in range(10))


def test_no_events():
    assert not any(is_event(10, 0, s) for s in range(1, 11))


def test_event_rejects_negative():
    with pytest.raises(ValueError):
        is_event(-1, 2, 1)


@given(st.integers(min_value=1, max_value=31), st.data())
def test_event_count_matches(n, data):
    k = data.draw(st.integers(min_value=1, max_value=n))
    assert sum(is_event(n, k, s) for s in range(1, n + 1)) == k


@given(
    st.integers(min_value=28, max_value=31),
    st.floats(min_value=0.0, max_value=50.0),
    st.data(),
)
def test_wet_day_total_matches_month(n, monthly, data):
    k = data.draw(st.integers(min_value=1, max_value=n))
    total = sum(wet_day_precipitation(monthly, k, d, n) for d in range(1, n + 1))
    assert total == pytest.approx(monthly * n)


def test_wet_day_default_uses_default_count():
    values = [wet_day_precipitation(2.0, None, d, 31) for d in range(1, 32)]
    assert DEFAULT_WET_DAYS == 31
    assert values == [pytest.approx(2.0)] * 31


def test_wet_days_minimum_one_with_zero_beta():
    assert wet_days(100.0, 1.0, 0.0, 30) == 1


@given(
    st.floats(min_value=0.0, max_value=1000.0),
    st.floats(min_value=0.0, max_value=3.0),
    st.floats(min_value=-1.0, max_value=0.0),
    st.integers(min_value=28, max_value=31),
)
def test_wet_days_within_month(precip, alpha, beta, n):
    assert 1 <= wet_days(precip, alpha, beta, n) <= n


def test_wet_days_saturates_for_heavy_rain():
    assert wet_days(1000.0, 2.0, -1.0, 30) == 30