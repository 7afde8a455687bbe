"""The active wage-growth series read by the benefit engine."""

from dataclasses import dataclass

from .series import AnnualSeries


@dataclass
class ActiveSelection:
    """Series and title of the most recently selected alternative.

    The series is a private copy sized to the engine's year range. Selecting
    another alternative overwrites it in place; it is never resized.
    """

    series: AnnualSeries
    title: str = ""

    @classmethod
    def for_years(cls, first_year: int, last_year: int) -> "ActiveSelection":
        return cls(series=AnnualSeries(first_year, last_year))

    @property
    def first_year(self) -> int:
        return self.series.first_year

    @property
    def last_year(self) -> int:
        return self.series.last_year

    @property
    def base_year(self) -> int:
        return self.series.base_year

    def __getitem__(self, year: int) -> float:
        return self.series[year]

    def to_dict(self) -> dict[int, float]:
        return self.series.to_dict()
