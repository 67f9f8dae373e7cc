[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wbmcell"
version = "0.1.0"
description = "Per-cell process equations of a grid-based water balance model: climate forcing, evapotranspiration, soil moisture, snow, runoff and balance checks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hydrology",
    "water balance",
    "evapotranspiration",
    "runoff",
    "snow",
    "soil moisture",
    "humidity",
    "radiation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Hydrology",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["wbmcell"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
