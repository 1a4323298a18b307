# test/test_statistics.py
import pytest

from conftest import FOOTER, make_dive, make_header, make_samples
from sensusultra.core import DataFormatError
from sensusultra.io.buffer import RawBuffer
from sensusultra.io.statistics import DiveStatistics, scan_statistics


def test_threshold_filtering():
    data = make_dive([(30000, 50), (30000, 200)], interval=10, threshold=100)
    stats = scan_statistics(RawBuffer(data))
    assert stats == DiveStatistics(divetime=10, maxdepth=200, nsamples=1)


def test_threshold_is_inclusive():
    data = make_dive([(0, 100), (0, 99), (0, 101)], interval=5, threshold=100)
    stats = scan_statistics(RawBuffer(data))
    assert stats.nsamples == 2
    assert stats.divetime == 10
    assert stats.maxdepth == 101


def test_no_qualifying_samples():
    data = make_dive([(0, 10), (0, 20)], interval=5, threshold=1000)
    stats = scan_statistics(RawBuffer(data))
    assert stats == DiveStatistics(divetime=0, maxdepth=0, nsamples=0)


def test_stops_at_footer():
    data = make_dive([(0, 500)], interval=2, threshold=0) + make_samples((0, 900))
    stats = scan_statistics(RawBuffer(data))
    assert stats.maxdepth == 500
    assert stats.divetime == 2


def test_stops_at_last_whole_unit_without_footer():
    data = make_dive([(0, 300), (0, 400)], interval=3, threshold=0, footer=False) + b"\x01\x02"
    stats = scan_statistics(RawBuffer(data))
    assert stats.nsamples == 2
    assert stats.maxdepth == 400


def test_footer_right_after_header():
    data = make_header(interval=10, threshold=0) + FOOTER
    assert scan_statistics(RawBuffer(data)) == DiveStatistics(0, 0, 0)


def test_scan_ignores_record_sentinel():
    # no zero sentinel at all: the header is still read at offset 0
    data = make_header(timestamp=900, interval=10, threshold=0, lead=b"\x05\x05\x05\x05")
    data += make_samples((0, 700))
    stats = scan_statistics(RawBuffer(data))
    assert stats == DiveStatistics(divetime=10, maxdepth=700, nsamples=1)


@pytest.mark.parametrize("size", [0, 8, 16, 19])
def test_short_buffer_raises(size):
    with pytest.raises(DataFormatError):
        scan_statistics(RawBuffer(bytes(size)))
