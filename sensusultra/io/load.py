# sensusultra/io/load.py
from __future__ import annotations

import numpy as np

from sensusultra.core import Calibration, Dive, DiveMeta, FieldType, LazyProfileSeries
from sensusultra.io.parser import SensusUltraParser
from sensusultra.io.statistics import INTERVAL_OFFSET, THRESHOLD_OFFSET


def _profile_loader(parser: SensusUltraParser, attr: str):
    def _loader() -> tuple[np.ndarray, np.ndarray]:
        samples = list(parser.samples())
        t = np.fromiter((s.time for s in samples), dtype=np.int64, count=len(samples))
        v = np.fromiter((getattr(s, attr) for s in samples), dtype=np.float64, count=len(samples))
        return t, v

    return _loader


def load_dive(
    data,
    devtime: int,
    systime: int,
    *,
    calibration: Calibration | None = None,
    name: str | None = None,
    source: str | None = None,
) -> Dive:
    """Decode one downloaded buffer into a Dive.

    Summary fields are computed eagerly; the depth (m) and temperature (C)
    series decode the buffer on first access. The caller must keep `data`
    alive until the series are loaded.
    """
    parser = SensusUltraParser(devtime, systime, calibration=calibration)
    parser.set_data(data)

    when = parser.get_datetime()
    stats = parser.statistics()

    series = {
        "depth": LazyProfileSeries(loader=_profile_loader(parser, "depth"), unit="m", name="depth"),
        "temperature": LazyProfileSeries(
            loader=_profile_loader(parser, "temperature"), unit="degC", name="temperature"
        ),
    }

    return Dive(
        name=name or when.strftime("%Y%m%dT%H%M%S"),
        datetime=when,
        divetime=parser.get_field(FieldType.DIVE_TIME),
        maxdepth=parser.get_field(FieldType.MAX_DEPTH),
        series=series,
        meta=DiveMeta(
            family=parser.family.value,
            source=source,
            calibration=parser.calibration,
            attrs={
                "interval": parser.buffer.uint16_le(INTERVAL_OFFSET),
                "threshold": parser.buffer.uint16_le(THRESHOLD_OFFSET),
                "nsamples": stats.nsamples,
                "maxdepth_raw": stats.maxdepth,
            },
        ),
    )
