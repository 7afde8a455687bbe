"""Average wage increase assumptions for Social Security benefit projections.

Historical average wage increases plus the projected alternatives of a
Trustees Report, spliced into one annual series per alternative.

Example:
    from awinc import AssumptionStore

    store = AssumptionStore(first_year=1951, last_year=2100)
    active = store.select(2)
    print(active.title, active[2040])
"""

__version__ = "0.1.0"

from .assumption_type import AssumptionType
from .published import (
    DEFAULT_VINTAGE,
    ConfigurationError,
    PublishedAlternative,
    PublishedAssumptions,
    list_vintages,
    load_published,
)
from .selection import ActiveSelection
from .series import AnnualSeries, RangeError
from .store import AssumptionStore

__all__ = [
    # Series
    "AnnualSeries",
    "RangeError",
    # Published data
    "PublishedAssumptions",
    "PublishedAlternative",
    "ConfigurationError",
    "load_published",
    "list_vintages",
    "DEFAULT_VINTAGE",
    # Store
    "AssumptionStore",
    "AssumptionType",
    "ActiveSelection",
]
