# sensusultra/io/parser.py
from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from enum import Enum
from typing import Any, Callable, Iterator, Protocol, runtime_checkable

from sensusultra.core.calibration import Calibration, ClockSync
from sensusultra.core.exceptions import InvalidArgs, UnsupportedField
from sensusultra.core.fields import DiveSample, FieldType, SampleType
from sensusultra.core.units import centikelvin_to_celsius, pressure_to_depth
from sensusultra.io.buffer import RawBuffer
from sensusultra.io.samples import iter_raw_samples
from sensusultra.io.statistics import STATISTICS_MIN_SIZE, DiveStatistics, scan_statistics

log = logging.getLogger(__name__)

TIMESTAMP_OFFSET = 4
TIMESTAMP_MIN_SIZE = 8

SampleCallback = Callable[[SampleType, Any, Any], Any]


class Family(Enum):
    """Device families with a parser implementation."""

    REEFNET_SENSUSULTRA = "reefnet_sensusultra"


@runtime_checkable
class DiveParser(Protocol):
    """Protocol for device-family dive parsers.

    A parser is fed one downloaded buffer at a time and answers summary
    and profile queries about it.
    """

    family: Family

    def set_data(self, data) -> None:
        ...

    def get_datetime(self, tz: tzinfo | None = timezone.utc) -> datetime:
        ...

    def get_field(self, kind: FieldType | str) -> Any:
        ...

    def samples(self) -> Iterator[DiveSample]:
        ...

    def samples_foreach(self, callback: SampleCallback | None = None, userdata: Any = None) -> None:
        ...

    def close(self) -> None:
        ...


def _coerce_field(kind: FieldType | str) -> FieldType:
    if isinstance(kind, FieldType):
        return kind
    if isinstance(kind, str):
        try:
            return FieldType[kind.upper()]
        except KeyError:
            pass
        try:
            return FieldType(kind.lower())
        except ValueError:
            pass
    raise UnsupportedField(kind)


class SensusUltraParser:
    """Parser for ReefNet Sensus Ultra dive buffers.

    Parameters
    ----------
    devtime, systime:
        Clock synchronization pair: the device tick counter and the host
        clock (epoch seconds) read at the same moment during the download.
    calibration:
        Depth calibration; defaults to standard atmosphere and seawater.

    The statistics scan is cached until the next ``set_data``. Calibration
    is applied at query time and survives buffer replacement.
    """

    family = Family.REEFNET_SENSUSULTRA

    def __init__(self, devtime: int, systime: int, calibration: Calibration | None = None):
        self._clock = ClockSync(devtime=devtime, systime=systime)
        self._calibration = calibration if calibration is not None else Calibration()
        if not isinstance(self._calibration, Calibration):
            raise InvalidArgs("calibration must be a Calibration instance.")
        self._buffer = RawBuffer()
        self._stats: DiveStatistics | None = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(devtime={self._clock.devtime}, "
            f"systime={self._clock.systime}, size={self._buffer.size})"
        )

    def __enter__(self) -> "SensusUltraParser":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def clock(self) -> ClockSync:
        return self._clock

    @property
    def calibration(self) -> Calibration:
        return self._calibration

    @property
    def buffer(self) -> RawBuffer:
        return self._buffer

    def set_calibration(self, atmospheric: float, hydrostatic: float) -> None:
        self._calibration = Calibration(atmospheric=atmospheric, hydrostatic=hydrostatic)

    def set_data(self, data) -> None:
        """Install a new buffer and drop the cached statistics."""
        self._buffer = RawBuffer(data)
        self._stats = None
        log.debug("Installed %d byte buffer", self._buffer.size)

    def close(self) -> None:
        self._buffer.release()
        self._buffer = RawBuffer()
        self._stats = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_ticks(self) -> int:
        """Dive start as host epoch seconds."""
        self._buffer.require(TIMESTAMP_MIN_SIZE, "dive timestamp")
        timestamp = self._buffer.uint32_le(TIMESTAMP_OFFSET)
        return self._clock.to_host_ticks(timestamp)

    def get_datetime(self, tz: tzinfo | None = timezone.utc) -> datetime:
        self._buffer.require(TIMESTAMP_MIN_SIZE, "dive timestamp")
        timestamp = self._buffer.uint32_le(TIMESTAMP_OFFSET)
        return self._clock.to_datetime(timestamp, tz=tz)

    def statistics(self) -> DiveStatistics:
        if self._stats is None:
            self._stats = scan_statistics(self._buffer)
            log.debug("Cached statistics: %s", self._stats)
        return self._stats

    def get_field(self, kind: FieldType | str) -> Any:
        """Return a summary field.

        DIVE_TIME is in seconds, MAX_DEPTH in metres; GASMIX_COUNT is
        always 0 since the device records no gas mixes.
        """
        self._buffer.require(STATISTICS_MIN_SIZE, "dive statistics")
        kind = _coerce_field(kind)

        if kind is FieldType.GASMIX_COUNT:
            return 0
        if kind is FieldType.DIVE_TIME:
            return self.statistics().divetime
        if kind is FieldType.MAX_DEPTH:
            return self._depth(self.statistics().maxdepth)
        raise UnsupportedField(kind)

    def samples(self) -> Iterator[DiveSample]:
        """Yield the decoded profile of the first record; re-scans on every call."""
        for raw in iter_raw_samples(self._buffer):
            yield DiveSample(
                time=raw.time,
                temperature=centikelvin_to_celsius(raw.temperature),
                depth=self._depth(raw.depth),
            )

    def samples_foreach(self, callback: SampleCallback | None = None, userdata: Any = None) -> None:
        """Report every sample as TIME, TEMPERATURE, DEPTH callback calls."""
        if callback is not None and not callable(callback):
            raise InvalidArgs("callback must be callable or None.")

        for sample in self.samples():
            if callback is None:
                continue
            for sample_type, value in sample.values():
                callback(sample_type, value, userdata)

    def _depth(self, raw):
        return pressure_to_depth(raw, self._calibration.atmospheric, self._calibration.hydrostatic)


def create(devtime: int, systime: int) -> SensusUltraParser:
    return SensusUltraParser(devtime, systime)


def set_calibration(parser: DiveParser, atmospheric: float, hydrostatic: float) -> None:
    """Set the depth calibration of a Sensus Ultra parser."""
    if not isinstance(parser, SensusUltraParser):
        raise InvalidArgs(f"Not a Sensus Ultra parser: {parser!r}")
    parser.set_calibration(atmospheric, hydrostatic)


_PARSERS: dict[Family, type] = {
    Family.REEFNET_SENSUSULTRA: SensusUltraParser,
}


def create_parser(family: Family | str, **kwargs) -> DiveParser:
    """Instantiate the parser registered for `family`."""
    try:
        family = Family(family)
    except ValueError as e:
        raise UnsupportedField(family) from e
    return _PARSERS[family](**kwargs)
