# test/conftest.py
import struct

import pytest

FOOTER = b"\xff\xff\xff\xff"


def make_header(timestamp=0, interval=10, threshold=0, lead=b"\x00\x00\x00\x00", reserved=b"\x01\x00\x00\x00"):
    """16-byte header: [lead:4][timestamp:4][interval:2][threshold:2][reserved:4]."""
    return lead + struct.pack("<IHH", timestamp, interval, threshold) + reserved


def make_samples(*pairs):
    """Pack (temperature_raw, depth_raw) pairs into 4-byte sample units."""
    return b"".join(struct.pack("<HH", t, d) for t, d in pairs)


def make_dive(samples=(), *, timestamp=0, interval=10, threshold=0, footer=True, **kwargs):
    data = make_header(timestamp, interval, threshold, **kwargs) + make_samples(*samples)
    if footer:
        data += FOOTER
    return data


@pytest.fixture
def dive_bytes():
    """Three samples (30.01, 30.01, 29.81 C) at 1013 / 2013 / 1513 mbar, threshold 1100."""
    return make_dive(
        [(30316, 1013), (30316, 2013), (30296, 1513)],
        timestamp=900,
        interval=10,
        threshold=1100,
    )
