# wbmcell

Process equations of a grid-based water balance model, evaluated for one
grid cell and one time step. Each function takes plain numbers (a cell's
state and forcing) and returns the updated values, so the pieces can be
combined into a model loop of your own or used on their own. The package
has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `wbmcell.aux`: conversions and running bookkeeping.
  `depth_to_flow` turns a depth in mm per step over a cell area into m3/s,
  `storage_change_to_flow` turns a storage change in m3 into m3/s,
  `accumulate` adds a step's flow to a total, `accumulated_balance` gives the
  residual of the accumulated vertical balance, and `running_mean`,
  `discharge_max` and `discharge_min` update running statistics
  (`discharge_min` keeps the initial minimum on step zero).
  `RunningStatistics` is a dataclass holding `step`, `mean`, `maximum` and
  `minimum`, advanced by its `update` method.
- `wbmcell.airtemp`: `downscale_air_temperature` shifts a daily temperature
  by the difference between reference and monthly means, with missing inputs
  passed as `None`; `elevation_adjustment` corrects a temperature for
  elevation with a lapse rate (default `DEFAULT_LAPSE_RATE`, 0.0098 degC/m).
- `wbmcell.radiation`: clear-sky radiation (`gross_radiation_standard`,
  `gross_radiation_otto`), `cloud_cover`, solar radiation from cloud cover or
  sunshine (`solar_radiation_cloud`, `solar_radiation_sun`), `day_length` as
  a fraction of the day and `potential_insolation` in MJ/m2.
- `wbmcell.humidity`: `saturated_vapor_pressure`, `vapor_pressure`,
  `relative_humidity` (capped at 100 %), `specific_humidity`,
  `dew_point_temperature` and `wet_bulb_temperature`.
- `wbmcell.precipitation`: `downscale_precipitation`,
  `fraction_precipitation`, `wet_day_precipitation` (which uses `is_event` to
  spread wet days evenly over the month) and `wet_days`, which estimates the
  number of wet days from monthly precipitation, clamped to between one day
  and the month length.
- `wbmcell.wind`: `wind_adjustment`, the ratio of wind speed at a reference
  height to the speed measured at a weather station.
- `wbmcell.snowpack`: `snow_pack_change` advances a degree-day snow pack and
  returns a `SnowPackStep` (`snow_fall`, `snow_melt`, `snow_pack`, `change`).
- `wbmcell.evapotranspiration`: `pet_jensen` and `pet_turc` potential
  evapotranspiration, and `evapotranspiration`, the sum of rainfed and
  optional irrigated evapotranspiration.
- `wbmcell.soil`: `available_water_capacity`, `rain_soil_moisture_change`
  (returns `RainSoilMoistureStep`) and `combine_soil_moisture`, which adds
  irrigated terms and returns `SoilMoistureStep` with relative moisture.
- `wbmcell.runoff`: `infiltrate` (returns `InfiltrationStep`),
  `rain_water_surplus`, `base_flow` (returns `BaseFlowStep`, with optional
  irrigation uptake from groundwater), `total_runoff` and `runoff_flow`.
- `wbmcell.waterbalance`: `water_balance` returns a `WaterBalanceResult`
  with the vertical balance residual and, when `IrrigationFluxes` are given,
  the irrigation and uptake residuals.

Invalid arguments, such as a negative step count, a zero gross radiation or
an infiltration fraction outside [0, 1], raise `ValueError`.

## Example

```python
from wbmcell.snowpack import snow_pack_change
from wbmcell.evapotranspiration import pet_turc
from wbmcell.aux import RunningStatistics

step = snow_pack_change(air_temp=-5.0, precip=3.0, snow_pack=10.0)
print(step.snow_pack, step.snow_fall)   # 13.0 3.0

pet = pet_turc(air_temp=15.0, solar_radiation=20.0)

stats = RunningStatistics()
for discharge in (1.0, 3.0, 2.0):
    stats.update(discharge)
print(stats.step, stats.mean, stats.maximum)   # 3 2.0 3.0
```

Depths are in mm per time step, flows in m3/s and temperatures in degC;
pressures are in Pa or kPa as stated in each function's docstring.

## What the package does not do

The package works on one cell and one time step at a time. It does not read
or write gridded data, hold model state across a grid, route water between
cells or drive a simulation over time; the caller supplies each cell's inputs
and keeps its state. Of the potential evapotranspiration methods only Jensen
and Turc are provided, and irrigation demand, return flow and uptake are
taken as inputs rather than computed.