# sensusultra/io/samples.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from sensusultra.io.buffer import RawBuffer, UNIT_SIZE
from sensusultra.io.statistics import HEADER_SIZE, INTERVAL_OFFSET

log = logging.getLogger(__name__)

RECORD_HEADER = b"\x00\x00\x00\x00"
RECORD_FOOTER = b"\xff\xff\xff\xff"


class _ScanState(Enum):
    SEEK_HEADER = auto()
    IN_RECORD = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class RawSample:
    """One undecoded sample unit of a record."""
    time: int
    temperature: int   # 0.01 K
    depth: int         # absolute pressure, millibar


def iter_raw_samples(buffer: RawBuffer) -> Iterator[RawSample]:
    """Yield the samples of the first record found in `buffer`.

    A record starts at the first four zero bytes (searched byte by byte)
    and is followed by a 16-byte header. Samples run until the footer or
    the last whole unit; records after the first one are not decoded.
    A buffer without a record header yields nothing.
    """
    state = _ScanState.SEEK_HEADER
    offset = 0
    interval = 0
    time = 0

    while state is not _ScanState.DONE:
        if state is _ScanState.SEEK_HEADER:
            start = buffer.find(RECORD_HEADER, 0)
            if start < 0:
                log.debug("No record header in %d bytes", buffer.size)
                state = _ScanState.DONE
                continue

            buffer.require(start + HEADER_SIZE, f"record header at offset {start}")
            interval = buffer.uint16_le(start + INTERVAL_OFFSET)
            log.debug("Record header at offset %d (interval=%ds)", start, interval)

            offset = start + HEADER_SIZE
            state = _ScanState.IN_RECORD

        elif state is _ScanState.IN_RECORD:
            if offset + UNIT_SIZE > buffer.size or buffer.matches(offset, RECORD_FOOTER):
                state = _ScanState.DONE
                continue

            time += interval
            yield RawSample(
                time=time,
                temperature=buffer.uint16_le(offset),
                depth=buffer.uint16_le(offset + 2),
            )
            offset += UNIT_SIZE
