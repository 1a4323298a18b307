# sensusultra/core/__init__.py
"""
Core domain objects for sensusultra.

This module defines the format-agnostic dive model:
- Calibration / ClockSync: depth calibration and device clock rebasing
- FieldType / SampleType / DiveSample: summary field and sample kinds
- ProfileSeries: validated 1D profile channel over elapsed seconds
- Dive: one decoded dive (summary fields + profile series)

The core layer is independent from the binary format.
"""

from .calibration import Calibration, ClockSync
from .fields import FieldType, SampleType, DiveSample
from .timeseries import ProfileSeries, LazyProfileSeries, ProfileSeriesLike
from .dive import Dive
from .metadata import DiveMeta
from .exceptions import (
    Status,
    ParserError,
    InvalidArgs,
    DataFormatError,
    UnsupportedField,
    InvalidProfile,
    InvalidDive,
    SeriesNotFound,
)


__all__ = [
    # configuration
    "Calibration",
    "ClockSync",

    # field and sample kinds
    "FieldType",
    "SampleType",
    "DiveSample",

    # profile series
    "ProfileSeries",
    "LazyProfileSeries",
    "ProfileSeriesLike",

    # domain objects
    "Dive",
    "DiveMeta",

    # exceptions
    "Status",
    "ParserError",
    "InvalidArgs",
    "DataFormatError",
    "UnsupportedField",
    "InvalidProfile",
    "InvalidDive",
    "SeriesNotFound",
]
