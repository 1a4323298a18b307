# sensusultra/io/__init__.py
"""Binary decoding of ReefNet Sensus Ultra dive buffers."""

from .buffer import RawBuffer
from .statistics import DiveStatistics, scan_statistics
from .samples import RawSample, iter_raw_samples
from .parser import (
    DiveParser,
    Family,
    SensusUltraParser,
    create,
    create_parser,
    set_calibration,
)
from .load import load_dive


__all__ = [
    "RawBuffer",
    "DiveStatistics",
    "scan_statistics",
    "RawSample",
    "iter_raw_samples",
    "DiveParser",
    "Family",
    "SensusUltraParser",
    "create",
    "create_parser",
    "set_calibration",
    "load_dive",
]
