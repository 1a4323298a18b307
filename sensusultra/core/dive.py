# sensusultra/core/dive.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator, Mapping

from .exceptions import InvalidDive, SeriesNotFound
from .metadata import DiveMeta
from .timeseries import LazyProfileSeries, ProfileSeries, ProfileSeriesLike


@dataclass(frozen=True, slots=True)
class Dive:
    """
    A Dive is one decoded record: summary fields plus its profile series.

    Design goals:
    - easy access: dive["depth"]
    - safe: validate series container and names
    - predictable: immutable; transformations return new Dive
    """
    name: str
    datetime: datetime | None = None
    divetime: int = 0
    maxdepth: float = 0.0
    series: Mapping[str, ProfileSeriesLike] = field(default_factory=dict, repr=False)
    meta: DiveMeta = field(default_factory=DiveMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidDive("Dive.name must be a non-empty string.")
        if self.datetime is not None and not isinstance(self.datetime, datetime):
            raise InvalidDive("Dive.datetime must be a datetime or None.")
        if not isinstance(self.series, Mapping):
            raise InvalidDive("Dive.series must be a mapping (e.g., dict).")
        if not isinstance(self.meta, DiveMeta):
            raise InvalidDive("Dive.meta must be a DiveMeta instance.")

        normalized: dict[str, ProfileSeriesLike] = {}
        for key, s in self.series.items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidDive("Dive.series keys must be non-empty strings.")
            if not isinstance(s, (ProfileSeries, LazyProfileSeries)):
                raise InvalidDive("Dive.series values must be ProfileSeries-like objects.")
            normalized[key] = s

        object.__setattr__(self, "series", normalized)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[str]:
        return iter(self.series)

    def __contains__(self, name: object) -> bool:
        return name in self.series

    def __getitem__(self, name: str) -> ProfileSeriesLike:
        try:
            return self.series[name]
        except KeyError as e:
            raise SeriesNotFound(name) from e

    def keys(self) -> Iterable[str]:
        return self.series.keys()

    def items(self) -> Iterable[tuple[str, ProfileSeriesLike]]:
        return self.series.items()

    def get(self, name: str, default: ProfileSeriesLike | None = None) -> ProfileSeriesLike | None:
        return self.series.get(name, default)

    # ---- derived time bounds ----
    @property
    def t_start(self) -> int | None:
        starts = [s.t_start for s in self.series.values() if s.t_start is not None]
        return None if not starts else min(starts)

    @property
    def t_end(self) -> int | None:
        ends = [s.t_end for s in self.series.values() if s.t_end is not None]
        return None if not ends else max(ends)

    # ---- transformations ----
    def select(self, names: Iterable[str], *, missing: str = "raise") -> "Dive":
        """
        Keep only the given series names.

        missing:
          - "raise": error if any name is missing
          - "ignore": skip missing names
        """
        selected: dict[str, ProfileSeriesLike] = {}
        for n in names:
            if n in self.series:
                selected[n] = self.series[n]
            elif missing == "raise":
                raise SeriesNotFound(n)
        return self._replace_series(selected)

    def slice_time(
        self,
        t_min: float | None = None,
        t_max: float | None = None,
        *,
        closed: str = "both",
    ) -> "Dive":
        """Slice every series by elapsed time. Summary fields are kept as decoded."""
        sliced = {
            name: s.slice_time(t_min, t_max, closed=closed) for name, s in self.series.items()
        }
        return self._replace_series(sliced)

    def _replace_series(self, series: Mapping[str, ProfileSeriesLike]) -> "Dive":
        return Dive(
            name=self.name,
            datetime=self.datetime,
            divetime=self.divetime,
            maxdepth=self.maxdepth,
            series=series,
            meta=self.meta.copy(),
        )
