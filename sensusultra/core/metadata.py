# sensusultra/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .calibration import Calibration
from .exceptions import InvalidDive


@dataclass(frozen=True, slots=True)
class DiveMeta:
    """
    Metadata attached to a Dive.

    - family: device family name the dive was decoded with
    - source: origin of the raw buffer (file name, download session, ...)
    - calibration: constants used for the depth conversion
    - attrs: arbitrary additional fields (raw header values, ...)
    """
    family: str | None = None
    source: str | None = None
    calibration: Calibration = field(default_factory=Calibration)
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.calibration, Calibration):
            raise InvalidDive("DiveMeta.calibration must be a Calibration instance.")
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidDive("DiveMeta.attrs must be a dict.")

    def copy(self) -> "DiveMeta":
        return DiveMeta(
            family=self.family,
            source=self.source,
            calibration=self.calibration,
            attrs=self.attrs.copy(),
        )
