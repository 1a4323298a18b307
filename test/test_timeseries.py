# test/test_timeseries.py
import numpy as np
import pytest

from sensusultra.core.timeseries import (
    InvalidProfile,
    LazyProfileSeries,
    ProfileSeries,
    ProfileSeriesLike,
)


def test_init_ok_basic():
    s = ProfileSeries(time=np.array([10, 20, 30]), values=np.array([1.5, 3.0, 2.0]), unit="m", name="depth")

    assert s.n == 3
    assert s.t_start == 10
    assert s.t_end == 30
    assert s.interval == 10
    assert s.unit == "m"
    assert s.values.dtype == np.float64


def test_empty_series():
    s = ProfileSeries(time=[], values=[])
    assert s.n == 0
    assert s.t_start is None
    assert s.interval is None
    assert s.max() is None
    assert s.slice_time(0, 10) is s


def test_init_rejects_non_1d():
    with pytest.raises(InvalidProfile):
        ProfileSeries(time=np.array([[10, 20]]), values=np.array([1.0, 2.0]))


def test_init_rejects_length_mismatch():
    with pytest.raises(InvalidProfile):
        ProfileSeries(time=np.array([10, 20, 30]), values=np.array([1.0, 2.0]))


def test_init_rejects_float_time():
    with pytest.raises(InvalidProfile):
        ProfileSeries(time=np.array([10.0, 20.0]), values=np.array([1.0, 2.0]))


@pytest.mark.parametrize("time", [[10, 10, 20], [10, 30, 20]])
def test_init_rejects_non_increasing_time(time):
    with pytest.raises(InvalidProfile):
        ProfileSeries(time=np.array(time), values=np.array([1.0, 2.0, 3.0]))


def test_slice_time_closed_variants():
    s = ProfileSeries(time=np.array([10, 20, 30, 40]), values=np.array([1.0, 2.0, 3.0, 4.0]))

    assert np.array_equal(s.slice_time(20, 30).time, [20, 30])
    assert np.array_equal(s.slice_time(20, 30, closed="left").time, [20])
    assert np.array_equal(s.slice_time(20, 30, closed="right").time, [30])
    assert s.slice_time(20, 30, closed="neither").n == 0
    assert np.array_equal(s.slice_time(t_min=30).values, [3.0, 4.0])

    with pytest.raises(ValueError):
        s.slice_time(0, 1, closed="bogus")


def test_stats():
    s = ProfileSeries(time=np.array([10, 20, 30]), values=np.array([1.0, 5.0, 3.0]))
    assert s.min() == 1.0
    assert s.max() == 5.0
    assert s.mean() == pytest.approx(3.0)


def test_to_numpy_copy():
    s = ProfileSeries(time=np.array([10, 20]), values=np.array([1.0, 2.0]))
    t, v = s.to_numpy()
    assert t is s.time
    t2, v2 = s.to_numpy(copy=True)
    assert t2 is not s.time
    assert np.array_equal(v2, v)


def test_lazy_loads_once():
    calls = []

    def loader():
        calls.append(1)
        return np.array([5, 10]), np.array([20.0, 19.5])

    s = LazyProfileSeries(loader=loader, unit="degC", name="temperature")
    assert not s.loaded
    assert calls == []

    assert s.n == 2
    assert s.t_end == 10
    assert s.min() == 19.5
    assert s.loaded
    assert len(calls) == 1


def test_lazy_validates_on_load():
    s = LazyProfileSeries(loader=lambda: (np.array([5, 5]), np.array([1.0, 2.0])))
    with pytest.raises(InvalidProfile):
        s.n


def test_lazy_rejects_non_callable():
    with pytest.raises(InvalidProfile):
        LazyProfileSeries(loader=42)  # type: ignore[arg-type]


def test_lazy_slice_materializes():
    s = LazyProfileSeries(loader=lambda: (np.array([5, 10, 15]), np.array([1.0, 2.0, 3.0])), unit="m")
    out = s.slice_time(6, 15)
    assert isinstance(out, ProfileSeries)
    assert out.unit == "m"
    assert np.array_equal(out.time, [10, 15])


def test_protocol():
    eager = ProfileSeries(time=np.array([1]), values=np.array([1.0]))
    lazy = LazyProfileSeries(loader=lambda: (np.array([1]), np.array([1.0])))
    assert isinstance(eager, ProfileSeriesLike)
    assert isinstance(lazy, ProfileSeriesLike)
