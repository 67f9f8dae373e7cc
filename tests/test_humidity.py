import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wbmcell.humidity import (
    MISSING_VALUE,
    REFERENCE_VAPOR_PRESSURE,
    dew_point_temperature,
    relative_humidity,
    saturated_vapor_pressure,
    specific_humidity,
    vapor_pressure,
    wet_bulb_temperature,
)


def test_saturated_vapor_pressure_at_freezing_is_reference():
    assert saturated_vapor_pressure(0.0) == pytest.approx(611.0)


def test_dew_point_at_reference_pressure_is_zero():
    assert dew_point_temperature(REFERENCE_VAPOR_PRESSURE) == pytest.approx(0.0)


@given(st.floats(min_value=-40.0, max_value=50.0))
def test_dew_point_inverts_saturated_vapor_pressure(temp):
    assert dew_point_temperature(saturated_vapor_pressure(temp)) == pytest.approx(temp, abs=1e-6)


@given(st.floats(min_value=-40.0, max_value=49.0))
def test_saturated_vapor_pressure_increases_with_temperature(temp):
    assert saturated_vapor_pressure(temp + 1.0) > saturated_vapor_pressure(temp)


@pytest.mark.parametrize("pressure", [0.0, -5.0])
def test_dew_point_rejects_non_positive_pressure(pressure):
    with pytest.raises(ValueError):
        dew_point_temperature(pressure)


def test_relative_humidity_is_capped():
    assert relative_humidity(1000.0, 1500.0) == 100.0
    assert relative_humidity(1000.0, 1000.0) == 100.0


def test_relative_humidity_half_saturation():
    assert relative_humidity(2000.0, 1000.0) == pytest.approx(50.0)


@given(
    st.floats(min_value=80000.0, max_value=105000.0),
    st.floats(min_value=-30.0, max_value=40.0),
    st.floats(min_value=1.0, max_value=100.0),
)
def test_specific_humidity_and_vapor_pressure_round_trip(pressure, temp, rh):
    svp = saturated_vapor_pressure(temp)
    q = specific_humidity(pressure, svp, rh)
    assert vapor_pressure(q, pressure) == pytest.approx(rh / 100.0 * svp, rel=1e-9)


def test_specific_humidity_zero_when_dry():
    assert specific_humidity(101325.0, 2000.0, 0.0) == 0.0
    assert vapor_pressure(0.0, 101325.0) == 0.0


def test_wet_bulb_negative_temperature_is_zero():
    assert wet_bulb_temperature(-5.0, 0.001, 101325.0, 50.0) == 0.0


def test_wet_bulb_saturated_equals_air_temperature():
    assert wet_bulb_temperature(20.0, 0.02, 101325.0, 100.0) == 20.0


def test_wet_bulb_below_air_temperature_when_dry():
    result = wet_bulb_temperature(20.0, 0.005, 101325.0, 34.0)
    assert 0.0 < result < 20.0


def test_wet_bulb_converged_ignores_relative_humidity():
    first = wet_bulb_temperature(20.0, 0.005, 101325.0, 10.0)
    second = wet_bulb_temperature(20.0, 0.005, 101325.0, 90.0)
    assert first == second
    assert math.isfinite(first)


def test_wet_bulb_increases_with_humidity():
    drier = wet_bulb_temperature(25.0, 0.004, 101325.0, 20.0)
    wetter = wet_bulb_temperature(25.0, 0.012, 101325.0, 60.0)
    assert drier < wetter <= 25.0


def test_wet_bulb_missing_marker_passes_through():
    assert wet_bulb_temperature(MISSING_VALUE, 0.005, 101325.0, 50.0) == 32800.0