"""Per-cell, per-step process equations of a grid-based water balance model."""

__version__ = "0.1.0"

__all__ = [
    "aux",
    "airtemp",
    "radiation",
    "humidity",
    "precipitation",
    "wind",
    "snowpack",
    "evapotranspiration",
    "soil",
    "waterbalance",
    "runoff",
]