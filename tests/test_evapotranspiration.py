import pytest
from hypothesis import given, strategies as st

from wbmcell.evapotranspiration import evapotranspiration, pet_jensen, pet_turc


def test_total_without_irrigation():
    assert evapotranspiration(2.5) == 2.5


def test_total_with_irrigation():
    assert evapotranspiration(2.5, 1.5) == pytest.approx(4.0)


def test_jensen_pinned_value():
    assert pet_jensen(0.0, 100.0) == pytest.approx(3.198)


def test_jensen_zero_without_radiation():
    assert pet_jensen(25.0, 0.0) == 0.0


@given(
    st.floats(min_value=-20.0, max_value=45.0),
    st.floats(min_value=0.0, max_value=400.0),
)
def test_jensen_linear_in_radiation(air_temp, radiation):
    assert pet_jensen(air_temp, 2.0 * radiation) == pytest.approx(
        2.0 * pet_jensen(air_temp, radiation), abs=1e-9
    )


@pytest.mark.parametrize("air_temp", [0.0, -1.0, -25.0])
def test_turc_zero_when_freezing(air_temp):
    assert pet_turc(air_temp, 20.0) == 0.0


def test_turc_increases_with_temperature_and_radiation():
    assert pet_turc(20.0, 15.0) > pet_turc(10.0, 15.0) > 0.0
    assert pet_turc(20.0, 25.0) > pet_turc(20.0, 15.0)


@given(
    st.floats(min_value=0.1, max_value=45.0),
    st.floats(min_value=0.0, max_value=40.0),
)
def test_turc_positive_when_warm(air_temp, radiation):
    assert pet_turc(air_temp, radiation) > 0.0