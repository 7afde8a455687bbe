"""Tests for loading published Trustees Report assumptions."""

import pytest
import yaml
from pydantic import ValidationError

from awinc.published import (
    DEFAULT_VINTAGE,
    ConfigurationError,
    PublishedAssumptions,
    list_vintages,
    load_published,
)


def _tables(**changes) -> dict:
    data = {
        "vintage": "2030",
        "source": "test report",
        "base_year": 2030,
        "historical": {"start_year": 2025, "values": [1.0, 2.0, 3.0, 4.0]},
        "short_range_years": 3,
        "alternatives": [
            {"title": "Intermediate", "short_range": [5.0, 6.0, 7.0], "ultimate": 4.0},
            {"title": "Low cost", "short_range": [6.0, 7.0, 8.0], "ultimate": 5.0},
        ],
    }
    data.update(changes)
    return data


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding one small vintage."""
    with open(tmp_path / "trustees_2030.yaml", "w") as f:
        yaml.dump(_tables(), f)
    return tmp_path


class TestPackagedVintage:
    """The 2023 Trustees Report data shipped with the package."""

    def test_default_vintage_loads(self):
        published = load_published()
        assert published.vintage == DEFAULT_VINTAGE
        assert published.base_year == 2023
        assert published.num_alternatives == 4

    def test_historical_record(self):
        published = load_published()
        assert published.historical_start_year == 1978
        assert published.historical_end_year == 2021
        assert published.historical_value(1978) == 7.941048
        assert published.historical_value(2009) == -1.508069
        assert published.historical_value(2021) == 8.891955

    def test_short_range_window(self):
        published = load_published()
        assert published.short_range_years == 16
        assert published.short_range_start == 2022
        assert published.short_range_end == 2037

    def test_alternatives(self):
        published = load_published()
        alt1 = published.alternative(1)
        assert alt1.title == "2023 Trustees Report Alternative I"
        assert alt1.short_range[0] == 4.716759
        assert [published.alternative(i).ultimate for i in range(1, 5)] == [4.8, 3.6, 2.4, 0.0]
        assert published.alternative(4).title == "No increase beyond 2021 average wage"

    def test_listed(self):
        assert DEFAULT_VINTAGE in list_vintages()

    def test_loaded_once(self):
        assert load_published() is load_published()

    def test_tables_are_read_only(self):
        published = load_published()
        with pytest.raises(ValidationError):
            published.base_year = 2024
        with pytest.raises(TypeError):
            published.historical[0] = 0.0


class TestLoadFromDirectory:
    """Loading vintages from another data directory."""

    def test_load_custom_vintage(self, data_dir):
        published = load_published("2030", data_dir)
        assert published.short_range_start == 2029
        assert published.short_range_end == 2031
        assert published.historical_value(2028) == 4.0
        assert list_vintages(data_dir) == ["2030"]

    def test_missing_vintage(self, data_dir):
        with pytest.raises(ConfigurationError, match="1999"):
            load_published("1999", data_dir)

    def test_historical_not_a_mapping(self, tmp_path):
        with open(tmp_path / "trustees_2034.yaml", "w") as f:
            yaml.dump(_tables(historical=[1.0]), f)
        with pytest.raises(ConfigurationError, match="historical must be a mapping"):
            load_published("2034", tmp_path)

    def test_unparsable_yaml(self, tmp_path):
        (tmp_path / "trustees_2031.yaml").write_text("alternatives: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            load_published("2031", tmp_path)

    def test_not_a_mapping(self, tmp_path):
        (tmp_path / "trustees_2032.yaml").write_text("- 1.0\n- 2.0\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_published("2032", tmp_path)


class TestValidation:
    """Malformed tables are rejected at load time."""

    def test_historical_length_must_match_years(self):
        data = _tables(historical={"start_year": 2025, "values": [1.0, 2.0]})
        with pytest.raises(ValidationError, match="historical"):
            PublishedAssumptions.from_yaml_data(data)

    def test_short_range_length_must_match_window(self):
        data = _tables(
            alternatives=[{"title": "Short", "short_range": [5.0, 6.0], "ultimate": 4.0}]
        )
        with pytest.raises(ValidationError, match="short-range"):
            PublishedAssumptions.from_yaml_data(data)

    def test_needs_alternatives(self):
        with pytest.raises(ValidationError, match="no alternatives"):
            PublishedAssumptions.from_yaml_data(_tables(alternatives=[]))

    def test_missing_base_year(self):
        data = _tables()
        del data["base_year"]
        with pytest.raises(ValidationError):
            PublishedAssumptions.from_yaml_data(data)

    def test_invalid_file_is_configuration_error(self, tmp_path):
        with open(tmp_path / "trustees_2033.yaml", "w") as f:
            yaml.dump(_tables(short_range_years=5), f)
        with pytest.raises(ConfigurationError, match="Invalid published assumptions"):
            load_published("2033", tmp_path)
