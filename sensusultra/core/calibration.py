# sensusultra/core/calibration.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from numbers import Integral, Real
from typing import Any, Mapping

from .exceptions import DataFormatError, InvalidArgs
from .units import ATM, GRAVITY, SEAWATER_DENSITY

_UINT32_MOD = 1 << 32


@dataclass(frozen=True, slots=True)
class Calibration:
    """
    Depth calibration constants.

    - atmospheric: surface pressure in Pa, subtracted from the absolute reading
    - hydrostatic: density * gravity, the Pa-per-metre divisor

    No plausibility checks are made: a zero hydrostatic factor divides by
    zero, a negative one inverts the sign of every depth.
    """
    atmospheric: float = ATM
    hydrostatic: float = SEAWATER_DENSITY * GRAVITY

    def __post_init__(self) -> None:
        for name in ("atmospheric", "hydrostatic"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidArgs(f"Calibration.{name} must be a real number, got {value!r}.")
            object.__setattr__(self, name, float(value))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "Calibration":
        """
        Build a Calibration from a config mapping.

        Both a nested and a flat shape are accepted::

            calibration:
              atmospheric: 101325.0
              hydrostatic: 10051.8

        Missing keys keep their defaults.
        """
        payload: Mapping[str, Any] = mapping or {}
        if not isinstance(payload, Mapping):
            raise InvalidArgs("Calibration config must be a mapping.")

        block = payload.get("calibration", payload)
        if not isinstance(block, Mapping):
            raise InvalidArgs("'calibration' config block must be a mapping.")

        return cls(
            atmospheric=block.get("atmospheric", ATM),
            hydrostatic=block.get("hydrostatic", SEAWATER_DENSITY * GRAVITY),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {"calibration": {"atmospheric": self.atmospheric, "hydrostatic": self.hydrostatic}}


@dataclass(frozen=True, slots=True)
class ClockSync:
    """
    Clock synchronization pair: at device tick `devtime` the host clock
    read `systime` (seconds since the epoch).
    """
    devtime: int
    systime: int

    def __post_init__(self) -> None:
        if isinstance(self.devtime, bool) or not isinstance(self.devtime, Integral):
            raise InvalidArgs("ClockSync.devtime must be an integer.")
        if not 0 <= self.devtime < _UINT32_MOD:
            raise InvalidArgs(f"ClockSync.devtime out of uint32 range: {self.devtime}.")
        if isinstance(self.systime, bool) or not isinstance(self.systime, Integral):
            raise InvalidArgs("ClockSync.systime must be an integer.")
        object.__setattr__(self, "devtime", int(self.devtime))
        object.__setattr__(self, "systime", int(self.systime))

    def to_host_ticks(self, device_ticks: int) -> int:
        # The counter difference is unsigned 32-bit, so a wrap between the
        # dive and the synchronization still rebases correctly.
        return self.systime - ((self.devtime - device_ticks) % _UINT32_MOD)

    def to_datetime(self, device_ticks: int, tz: tzinfo | None = timezone.utc) -> datetime:
        ticks = self.to_host_ticks(device_ticks)
        try:
            return datetime.fromtimestamp(ticks, tz=tz)
        except (OverflowError, OSError, ValueError) as e:
            raise DataFormatError(f"Tick value {ticks} has no calendar representation.") from e
