# sensusultra/core/fields.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class FieldType(Enum):
    """Summary fields a dive parser may be asked for."""

    DIVE_TIME = "divetime"
    MAX_DEPTH = "maxdepth"
    GASMIX_COUNT = "gasmix_count"
    GASMIX = "gasmix"
    AVERAGE_DEPTH = "avgdepth"
    TEMPERATURE_MINIMUM = "temperature_minimum"


class SampleType(Enum):
    """Kinds of values emitted per profile sample."""

    TIME = "time"
    TEMPERATURE = "temperature"
    DEPTH = "depth"


@dataclass(frozen=True, slots=True)
class DiveSample:
    """One profile point: elapsed seconds, temperature (C), depth (m)."""
    time: int
    temperature: float
    depth: float

    def values(self) -> Iterator[tuple[SampleType, float]]:
        """Yield the tagged values in emission order."""
        yield SampleType.TIME, self.time
        yield SampleType.TEMPERATURE, self.temperature
        yield SampleType.DEPTH, self.depth
