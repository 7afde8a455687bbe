"""Annual series: float values indexed by calendar year.

A series covers a fixed, inclusive range of years chosen at construction.
Changing the range means building a new series (see ``AnnualSeries.resized``).
"""

from collections.abc import Iterable, Iterator

import numpy as np


class RangeError(IndexError):
    """A year or alternative number falls outside the valid bounds."""


class AnnualSeries:
    """Values for years ``first_year .. last_year`` (inclusive).

    Example:
        wages = AnnualSeries(2020, 2025)
        wages[2021] = 3.5
        wages.assign(4.0, 2023, 2030)  # clamped to 2023-2025
    """

    def __init__(self, first_year: int, last_year: int, fill: float = 0.0):
        if last_year < first_year:
            raise RangeError(f"invalid year range {first_year}-{last_year}")
        self._first_year = int(first_year)
        self._last_year = int(last_year)
        self._values = np.full(self._last_year - self._first_year + 1, float(fill))

    @classmethod
    def from_values(cls, first_year: int, values: Iterable[float]) -> "AnnualSeries":
        """Build a series starting at ``first_year`` with one value per year."""
        data = np.asarray(list(values), dtype=float)
        if data.size == 0:
            raise RangeError("cannot build a series from no values")
        series = cls(first_year, first_year + data.size - 1)
        series._values[:] = data
        return series

    @property
    def first_year(self) -> int:
        return self._first_year

    @property
    def last_year(self) -> int:
        return self._last_year

    @property
    def base_year(self) -> int:
        """First year of the series (the engine calls this the base year)."""
        return self._first_year

    def __len__(self) -> int:
        return self._values.size

    def __contains__(self, year: object) -> bool:
        return isinstance(year, (int, np.integer)) and self._first_year <= year <= self._last_year

    def _offset(self, year: int) -> int:
        if not self._first_year <= year <= self._last_year:
            raise RangeError(
                f"year {year} outside series range {self._first_year}-{self._last_year}"
            )
        return year - self._first_year

    def get(self, year: int) -> float:
        return float(self._values[self._offset(year)])

    def set(self, year: int, value: float) -> None:
        self._values[self._offset(year)] = value

    __getitem__ = get
    __setitem__ = set

    def assign(
        self,
        source: "AnnualSeries | float",
        start_year: int,
        end_year: int,
    ) -> None:
        """Copy a series (or fill a constant) into ``start_year .. end_year``.

        The range is clamped to this series' years and, for a series source,
        to the source's years. Raises RangeError only if the range is
        inverted or lies entirely outside this series.
        """
        if start_year > end_year:
            raise RangeError(f"inverted year range {start_year}-{end_year}")
        lo = max(start_year, self._first_year)
        hi = min(end_year, self._last_year)
        if lo > hi:
            raise RangeError(
                f"year range {start_year}-{end_year} outside series range "
                f"{self._first_year}-{self._last_year}"
            )

        if isinstance(source, AnnualSeries):
            lo = max(lo, source.first_year)
            hi = min(hi, source.last_year)
            if lo > hi:
                return
            self._values[lo - self._first_year : hi - self._first_year + 1] = source._values[
                lo - source.first_year : hi - source.first_year + 1
            ]
        else:
            self._values[lo - self._first_year : hi - self._first_year + 1] = float(source)

    def years(self) -> range:
        return range(self._first_year, self._last_year + 1)

    def values(self) -> np.ndarray:
        """Copy of the underlying values, ordered by year."""
        return self._values.copy()

    def items(self) -> Iterator[tuple[int, float]]:
        for year, value in zip(self.years(), self._values):
            yield year, float(value)

    def to_dict(self) -> dict[int, float]:
        return dict(self.items())

    def copy(self) -> "AnnualSeries":
        return self.resized(self._first_year, self._last_year)

    def resized(self, first_year: int, last_year: int) -> "AnnualSeries":
        """New series over another range, keeping values where the ranges overlap."""
        series = AnnualSeries(first_year, last_year)
        series.assign(self, first_year, last_year)
        return series

    def __repr__(self) -> str:
        return f"AnnualSeries({self._first_year}, {self._last_year})"
