"""Assumption store for projected average wage increases.

Holds one continuous annual series per Trustees Report alternative, spliced
from three published segments:

    historical start .. base_year - 2      historical record (all alternatives)
    base_year - 1 .. short_range_end       the alternative's short-range table
    short_range_end + 1 .. last year       the alternative's ultimate rate

There is no smoothing between the last short-range year and the first
ultimate year. Overrides made with ``set_series`` and ``set_title`` live in
memory only; ``restore`` brings an alternative back to its published values.

Example:
    store = AssumptionStore(1951, 2100)
    store.select(2)
    store.active[2030]   # 2023 Trustees Report, Alternative II
    store.active.title   # "2023 Trustees Report Alternative II"
"""

import logging

from .assumption_type import AssumptionType
from .published import ConfigurationError, PublishedAssumptions, load_published
from .selection import ActiveSelection
from .series import AnnualSeries, RangeError

logger = logging.getLogger(__name__)


class AssumptionStore:
    """Published and overridden average wage increases, by alternative.

    Args:
        first_year: First year the engine needs.
        last_year: Last year the engine needs.
        published: Published tables. Defaults to the packaged default vintage.
        assumption_type: Alternative numbering policy. Defaults to one
            Trustees Report alternative per published alternative.

    Not thread-safe: callers serialize mutations of the same alternative.
    """

    def __init__(
        self,
        first_year: int,
        last_year: int,
        published: PublishedAssumptions | None = None,
        assumption_type: AssumptionType | None = None,
    ):
        self.published = published if published is not None else load_published()
        self.assumption_type = (
            assumption_type
            if assumption_type is not None
            else AssumptionType.for_published(self.published)
        )
        if self.assumption_type.num_trustees > self.published.num_alternatives:
            raise ConfigurationError(
                f"{self.assumption_type.num_trustees} Trustees Report alternatives requested, "
                f"{self.published.num_alternatives} published"
            )

        self.first_year = first_year
        self.last_year = last_year
        self.active = ActiveSelection.for_years(first_year, last_year)

        # Wide enough for the historical record and the whole short range
        self.store_first_year = min(self.published.historical_start_year, first_year)
        self.store_last_year = max(self.published.short_range_end, last_year)

        n = self.assumption_type.num_trustees
        self._series: list[AnnualSeries] = []
        self._titles: list[str] = []
        for alt in self.published.alternatives[:n]:
            self._series.append(AnnualSeries(self.store_first_year, self.store_last_year))
            self._titles.append(alt.title)
        for alt_num in range(1, n + 1):
            self.restore(alt_num)

        logger.info(
            "Average wage increase store: %d alternatives, %d-%d, vintage %s",
            n,
            self.store_first_year,
            self.store_last_year,
            self.published.vintage,
        )

    @property
    def num_alternatives(self) -> int:
        """Number of Trustees Report alternatives held by the store."""
        return self.assumption_type.num_trustees

    def _tr_index(self, alt_num: int) -> int:
        self.assumption_type.check(alt_num)
        if not self.assumption_type.is_tr(alt_num):
            raise RangeError(f"alternative {alt_num} is not a Trustees Report alternative")
        return alt_num - 1

    def restore(self, alt_num: int) -> None:
        """Reset an alternative's title and series to the published values.

        The historical years are rewritten too, so this also undoes
        ``set_series`` overrides made before the base year.

        Raises:
            ConfigurationError: the published tables cannot be spliced into
                the stored series
        """
        i = self._tr_index(alt_num)
        published = self.published
        alt = published.alternative(alt_num)
        series = self._series[i]
        try:
            self._titles[i] = alt.title
            for year in range(published.historical_start_year, published.historical_end_year + 1):
                series[year] = published.historical_value(year)
            for offset, value in enumerate(alt.short_range):
                series[published.short_range_start + offset] = value
            if published.short_range_end < series.last_year:
                series.assign(alt.ultimate, published.short_range_end + 1, series.last_year)
        except (RangeError, ValueError, KeyError) as e:
            raise ConfigurationError(
                f"In AssumptionStore.restore (alternative {alt_num}): {e}"
            ) from e
        logger.debug("Restored alternative %d to published %s values", alt_num, published.vintage)

    def save(self, alt_num: int) -> None:
        """Overrides are kept in memory only; there is nothing to write."""

    def stored_series(self, alt_num: int) -> AnnualSeries:
        """Copy of the full stored series for a Trustees Report alternative."""
        return self._series[self._tr_index(alt_num)].copy()

    def stored_title(self, alt_num: int) -> str:
        return self._titles[self._tr_index(alt_num)]

    def get_series(self, alt_num: int, active: ActiveSelection | None = None) -> ActiveSelection:
        """Copy an alternative's values into the active series.

        Years from ``max(first_year, active.base_year)`` through the end of
        the active series are overwritten. Non-Trustees-Report alternatives
        get zeros; their values come from elsewhere in the engine.

        Raises:
            RangeError: a Trustees Report alternative is selected into years
                the store does not hold
        """
        self.assumption_type.check(alt_num)
        active = active if active is not None else self.active
        i1 = max(self.first_year, active.base_year)
        if self.assumption_type.is_tr(alt_num):
            if active.last_year > self.store_last_year:
                raise RangeError(
                    f"active years {i1}-{active.last_year} outside stored years "
                    f"{self.store_first_year}-{self.store_last_year}"
                )
            active.series.assign(self._series[alt_num - 1], i1, active.last_year)
        else:
            active.series.assign(0.0, i1, active.last_year)
        logger.debug("Active average wage increases set from alternative %d", alt_num)
        return active

    def set_series(
        self,
        alt_num: int,
        new_data: AnnualSeries,
        active: ActiveSelection | None = None,
    ) -> ActiveSelection:
        """Store custom values for an alternative, then make them active.

        Stored years from ``first_year`` on are replaced where ``new_data``
        has values; earlier years are left alone. Non-Trustees-Report
        alternatives store nothing.
        """
        self.assumption_type.check(alt_num)
        if self.assumption_type.is_tr(alt_num):
            stored = self._series[alt_num - 1]
            stored.assign(new_data, self.first_year, stored.last_year)
            logger.debug("Overrode alternative %d from %d", alt_num, self.first_year)
        return self.get_series(alt_num, active)

    def get_title(self, alt_num: int, active: ActiveSelection | None = None) -> str:
        """Make an alternative's title the active title and return it."""
        self.assumption_type.check(alt_num)
        active = active if active is not None else self.active
        if self.assumption_type.is_not_tr(alt_num):
            active.title = self.assumption_type.non_tr_title(alt_num)
        else:
            active.title = self._titles[alt_num - 1]
        return active.title

    def set_title(
        self,
        alt_num: int,
        new_title: str | None = None,
        active: ActiveSelection | None = None,
    ) -> str:
        """Store a new title for a Trustees Report alternative and make it active.

        Without ``new_title`` this is the same as ``get_title``. Titles of
        other alternatives come from the numbering policy and cannot be changed.
        """
        self.assumption_type.check(alt_num)
        if new_title is not None and self.assumption_type.is_tr(alt_num):
            self._titles[alt_num - 1] = new_title
            logger.debug("Retitled alternative %d: %s", alt_num, new_title)
        return self.get_title(alt_num, active)

    def select(self, alt_num: int, active: ActiveSelection | None = None) -> ActiveSelection:
        """Make an alternative's series and title active."""
        active = self.get_series(alt_num, active)
        self.get_title(alt_num, active)
        return active
