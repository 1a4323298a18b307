# sensusultra/core/timeseries.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, runtime_checkable

import numpy as np

from .exceptions import InvalidProfile


@runtime_checkable
class ProfileSeriesLike(Protocol):
    """Structural interface implemented by both eager and lazy profile series."""

    @property
    def time(self) -> np.ndarray: ...

    @property
    def values(self) -> np.ndarray: ...

    unit: str | None
    name: str | None

    @property
    def n(self) -> int: ...

    @property
    def t_start(self) -> int | None: ...

    @property
    def t_end(self) -> int | None: ...

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "ProfileSeriesLike": ...

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]: ...


def _validate(time: Any, values: Any) -> tuple[np.ndarray, np.ndarray]:
    t = np.asarray(time)
    v = np.asarray(values, dtype=np.float64)

    if t.ndim != 1:
        raise InvalidProfile(f"`time` must be 1D, got shape {t.shape}")
    if v.ndim != 1:
        raise InvalidProfile(f"`values` must be 1D, got shape {v.shape}")
    if t.size != v.size:
        raise InvalidProfile(
            f"`time` and `values` must have same length, got {t.size} vs {v.size}"
        )
    if t.size == 0:
        return t.astype(np.int64), v

    if not np.issubdtype(t.dtype, np.integer):
        raise InvalidProfile(f"`time` must hold integer seconds, got dtype {t.dtype}")
    if np.any(np.diff(t) <= 0):
        raise InvalidProfile("`time` must be strictly increasing.")

    return t.astype(np.int64), v


@dataclass(frozen=True, slots=True)
class ProfileSeries:
    """Immutable dive-profile channel: elapsed seconds + physical values."""

    time: np.ndarray = field(repr=False)
    values: np.ndarray = field(repr=False)
    unit: str | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        t, v = _validate(self.time, self.values)
        object.__setattr__(self, "time", t)
        object.__setattr__(self, "values", v)

    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def t_start(self) -> int | None:
        return None if self.n == 0 else int(self.time[0])

    @property
    def t_end(self) -> int | None:
        return None if self.n == 0 else int(self.time[-1])

    @property
    def interval(self) -> int | None:
        """Sampling interval, when the series holds at least two points."""
        if self.n < 2:
            return None
        return int(self.time[1] - self.time[0])

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "ProfileSeries":
        if closed not in {"both", "left", "right", "neither"}:
            raise ValueError("closed must be one of: both, left, right, neither")

        if self.n == 0:
            return self

        t = self.time
        mask = np.ones_like(t, dtype=bool)
        if t_min is not None:
            mask &= (t >= t_min) if closed in {"both", "left"} else (t > t_min)
        if t_max is not None:
            mask &= (t <= t_max) if closed in {"both", "right"} else (t < t_max)

        return ProfileSeries(time=t[mask], values=self.values[mask], unit=self.unit, name=self.name)

    def min(self) -> float | None:
        return None if self.n == 0 else float(np.min(self.values))

    def max(self) -> float | None:
        return None if self.n == 0 else float(np.max(self.values))

    def mean(self) -> float | None:
        return None if self.n == 0 else float(np.mean(self.values))

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.values.copy()
        return self.time, self.values


@dataclass(slots=True)
class LazyProfileSeries:
    """Profile series that decodes on first access and caches the arrays."""

    loader: Callable[[], tuple[np.ndarray, np.ndarray]] = field(repr=False)
    unit: str | None = None
    name: str | None = None

    _series: ProfileSeries | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not callable(self.loader):
            raise InvalidProfile("LazyProfileSeries.loader must be callable.")

    @property
    def loaded(self) -> bool:
        return self._series is not None

    def materialize(self) -> ProfileSeries:
        if self._series is None:
            t, v = self.loader()
            self._series = ProfileSeries(time=t, values=v, unit=self.unit, name=self.name)
        return self._series

    @property
    def time(self) -> np.ndarray:
        return self.materialize().time

    @property
    def values(self) -> np.ndarray:
        return self.materialize().values

    @property
    def n(self) -> int:
        return self.materialize().n

    @property
    def t_start(self) -> int | None:
        return self.materialize().t_start

    @property
    def t_end(self) -> int | None:
        return self.materialize().t_end

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> ProfileSeries:
        # Slicing materializes.
        return self.materialize().slice_time(t_min, t_max, closed=closed)

    def min(self) -> float | None:
        return self.materialize().min()

    def max(self) -> float | None:
        return self.materialize().max()

    def mean(self) -> float | None:
        return self.materialize().mean()

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        return self.materialize().to_numpy(copy=copy)
