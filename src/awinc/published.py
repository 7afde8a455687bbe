"""Published average wage increase assumptions.

Each Trustees Report vintage ships as a YAML file under ``data/`` holding:
1. HISTORICAL - actual average wage increases, first published year
   through two years before the base year
2. SHORT RANGE - per-alternative values for a fixed window starting the
   year before the base year
3. ULTIMATE - per-alternative long-run rate for every later year

Files are loaded once per process and validated into frozen models, so the
published tables are read-only for everyone who shares them.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

logger = logging.getLogger(__name__)

DEFAULT_VINTAGE = "2023"
DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class ConfigurationError(ValueError):
    """Published assumptions are missing, malformed, or cannot be applied."""


class PublishedAlternative(BaseModel):
    """One Trustees Report alternative as published."""

    model_config = ConfigDict(frozen=True)

    title: str
    short_range: tuple[float, ...]
    ultimate: float


class PublishedAssumptions(BaseModel):
    """Historical record plus every published alternative for one vintage."""

    model_config = ConfigDict(frozen=True)

    vintage: str
    source: str = ""
    base_year: int
    historical_start_year: int
    historical: tuple[float, ...]
    short_range_years: int
    alternatives: tuple[PublishedAlternative, ...]

    @model_validator(mode="after")
    def check_tables(self) -> "PublishedAssumptions":
        expected = self.historical_end_year - self.historical_start_year + 1
        if len(self.historical) != expected:
            raise ValueError(
                f"historical has {len(self.historical)} values, expected {expected} "
                f"for {self.historical_start_year}-{self.historical_end_year}"
            )
        if self.short_range_years < 1:
            raise ValueError("short_range_years must be positive")
        if not self.alternatives:
            raise ValueError("no alternatives published")
        for i, alt in enumerate(self.alternatives, start=1):
            if len(alt.short_range) != self.short_range_years:
                raise ValueError(
                    f"alternative {i} has {len(alt.short_range)} short-range values, "
                    f"expected {self.short_range_years}"
                )
        return self

    @property
    def historical_end_year(self) -> int:
        return self.base_year - 2

    @property
    def short_range_start(self) -> int:
        """First short-range year; the table's first entry is the year before the base year."""
        return self.base_year - 1

    @property
    def short_range_end(self) -> int:
        return self.base_year + self.short_range_years - 2

    @property
    def num_alternatives(self) -> int:
        return len(self.alternatives)

    def historical_value(self, year: int) -> float:
        if not self.historical_start_year <= year <= self.historical_end_year:
            raise KeyError(f"no historical average wage increase for {year}")
        return self.historical[year - self.historical_start_year]

    def alternative(self, alt_num: int) -> PublishedAlternative:
        """Published alternative by 1-based number."""
        if not 1 <= alt_num <= self.num_alternatives:
            raise KeyError(f"no published alternative {alt_num}")
        return self.alternatives[alt_num - 1]

    @classmethod
    def from_yaml_data(cls, data: dict) -> "PublishedAssumptions":
        """Build from the parsed YAML layout (nested ``historical`` block)."""
        historical = data.get("historical") or {}
        if not isinstance(historical, dict):
            raise ValueError(
                f"historical must be a mapping with start_year and values, got {type(historical).__name__}"
            )
        return cls(
            vintage=str(data.get("vintage", "")),
            source=data.get("source", ""),
            base_year=data.get("base_year"),
            historical_start_year=historical.get("start_year"),
            historical=historical.get("values", []),
            short_range_years=data.get("short_range_years"),
            alternatives=data.get("alternatives", []),
        )


_cache: dict[tuple[Path, str], PublishedAssumptions] = {}


def load_published(
    vintage: str = DEFAULT_VINTAGE,
    data_dir: str | Path | None = None,
) -> PublishedAssumptions:
    """Load the published assumptions for a Trustees Report vintage.

    Args:
        vintage: Report year, e.g. "2023"
        data_dir: Directory holding ``trustees_<vintage>.yaml`` files.
            Defaults to the data shipped with this package.

    Raises:
        ConfigurationError: file missing, not valid YAML, or tables malformed
    """
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
    key = (data_dir.resolve(), vintage)
    if key in _cache:
        return _cache[key]

    path = data_dir / f"trustees_{vintage}.yaml"
    if not path.exists():
        raise ConfigurationError(f"No published assumptions for vintage {vintage}: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping in {path}")

    try:
        published = PublishedAssumptions.from_yaml_data(data)
    except (ValidationError, ValueError) as e:
        raise ConfigurationError(f"Invalid published assumptions in {path}: {e}") from e

    logger.debug(
        "Loaded %s: %d alternatives, base year %d",
        path.name,
        published.num_alternatives,
        published.base_year,
    )
    _cache[key] = published
    return published


def list_vintages(data_dir: str | Path | None = None) -> list[str]:
    """List available published vintages."""
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
    return sorted(p.stem.removeprefix("trustees_") for p in data_dir.glob("trustees_*.yaml"))
