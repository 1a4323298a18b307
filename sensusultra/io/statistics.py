# sensusultra/io/statistics.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from sensusultra.io.buffer import RawBuffer

log = logging.getLogger(__name__)

# Header layout
HEADER_SIZE = 16
INTERVAL_OFFSET = 8
THRESHOLD_OFFSET = 10
STATISTICS_MIN_SIZE = 20

FOOTER = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class DiveStatistics:
    """Summary derived from one pass over the sample region.

    divetime is in seconds, maxdepth is the raw pressure value of the
    deepest qualifying sample (0 when none qualified).
    """
    divetime: int
    maxdepth: int
    nsamples: int


def scan_statistics(buffer: RawBuffer) -> DiveStatistics:
    """Scan the sample region that starts right after the buffer header.

    Only samples whose depth reaches the header threshold count towards
    the dive time and the maximum depth. The region ends at the first
    0xFFFFFFFF unit or at the last whole unit of the buffer.
    """
    buffer.require(STATISTICS_MIN_SIZE, "dive statistics")

    interval = buffer.uint16_le(INTERVAL_OFFSET)
    threshold = buffer.uint16_le(THRESHOLD_OFFSET)

    units = buffer.units(HEADER_SIZE)
    footer = np.flatnonzero(units == FOOTER)
    if footer.size:
        units = units[: footer[0]]

    depth = units >> 16
    qualifying = depth[depth >= threshold]

    nsamples = int(qualifying.size)
    maxdepth = int(qualifying.max()) if nsamples else 0

    log.debug(
        "Scanned %d sample units: %d qualifying (threshold=%d, interval=%ds)",
        units.size, nsamples, threshold, interval,
    )
    return DiveStatistics(divetime=nsamples * interval, maxdepth=maxdepth, nsamples=nsamples)
