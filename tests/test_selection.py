"""Tests for the active selection read by the benefit engine."""

import pytest

from awinc.selection import ActiveSelection
from awinc.series import AnnualSeries, RangeError


class TestActiveSelection:
    def test_for_years(self):
        active = ActiveSelection.for_years(1951, 2100)
        assert active.first_year == 1951
        assert active.base_year == 1951
        assert active.last_year == 2100
        assert active.title == ""
        assert active[2000] == 0.0

    def test_reads_through_to_series(self):
        series = AnnualSeries.from_values(2020, [1.0, 2.0])
        active = ActiveSelection(series=series, title="Mine")
        assert active[2021] == 2.0
        assert active.to_dict() == {2020: 1.0, 2021: 2.0}

    def test_out_of_range_year(self):
        active = ActiveSelection.for_years(2020, 2030)
        with pytest.raises(RangeError):
            active[2031]
