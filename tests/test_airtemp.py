import pytest
from hypothesis import given
from hypothesis import strategies as st

from wbmcell.airtemp import downscale_air_temperature, elevation_adjustment

temps = st.floats(min_value=-60.0, max_value=60.0, allow_nan=False)


def test_all_missing_gives_missing():
    assert downscale_air_temperature(None, None, None) is None


def test_only_reference():
    assert downscale_air_temperature(None, None, 5.0) == 5.0


def test_no_daily_uses_reference():
    assert downscale_air_temperature(None, 3.0, 7.0) == 7.0


def test_no_daily_no_reference_uses_monthly():
    assert downscale_air_temperature(None, 3.0, None) == 3.0


def test_daily_without_monthly_is_daily():
    assert downscale_air_temperature(12.5, None, 4.0) == 12.5


def test_daily_missing_reference_falls_back_to_monthly():
    assert downscale_air_temperature(10.0, 8.0, None) == pytest.approx(10.0)


def test_daily_shifted_by_offset():
    assert downscale_air_temperature(10.0, 8.0, 12.0) == pytest.approx(14.0)


@given(temps, temps)
def test_reference_equal_to_monthly_keeps_daily(daily, monthly):
    assert downscale_air_temperature(daily, monthly, monthly) == pytest.approx(daily, abs=1e-9)


def test_adjustment_missing_temperature():
    assert elevation_adjustment(None, 100.0, 200.0, 0.01) is None


def test_adjustment_missing_elevation_unchanged():
    assert elevation_adjustment(15.0, None, 200.0) == 15.0
    assert elevation_adjustment(15.0, 100.0, None) == 15.0


def test_adjustment_same_elevation_unchanged():
    assert elevation_adjustment(15.0, 500.0, 500.0) == pytest.approx(15.0)


def test_adjustment_default_lapse_rate():
    assert elevation_adjustment(20.0, 1000.0, 0.0) == pytest.approx(10.2)


@given(temps, st.floats(min_value=0.0, max_value=5000.0), st.floats(min_value=1.0, max_value=3000.0))
def test_higher_cell_is_colder(temp, ref, rise):
    assert elevation_adjustment(temp, ref + rise, ref, 0.0065) < temp