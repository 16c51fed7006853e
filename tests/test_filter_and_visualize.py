"""
Tests for state filtering, coordinate cleaning and the state map.
"""

import polars as pl
import pytest

import filter_and_visualize
from filter_and_visualize import clean_coordinates, fars_map_state, filter_state


@pytest.fixture
def accidents():
    return pl.DataFrame(
        {
            "STATE": [1, 1, 6],
            "MONTH": [1, 2, 3],
            "LATITUDE": [32.1, 99.9999, 36.7],
            "LONGITUD": [999.9999, -87.0, -119.7],
        }
    )


class TestFilterState:

    def test_keeps_only_state(self, accidents):
        result = filter_state(accidents, 1)
        assert result["STATE"].to_list() == [1, 1]

    def test_accepts_string_code(self, accidents):
        assert filter_state(accidents, "6").height == 1

    def test_invalid_state(self, accidents):
        with pytest.raises(ValueError, match="invalid STATE number: 42"):
            filter_state(accidents, 42)


class TestCleanCoordinates:

    def test_sentinels_become_null(self, accidents):
        cleaned = clean_coordinates(accidents)

        assert cleaned["LONGITUD"].to_list() == [None, -87.0, -119.7]
        assert cleaned["LATITUDE"].to_list() == [32.1, None, 36.7]

    def test_input_unchanged(self, accidents):
        clean_coordinates(accidents)
        assert accidents["LONGITUD"].to_list()[0] == 999.9999


class TestFarsMapState:

    def test_writes_map(self, data_dir, output_dir, capsys):
        result = fars_map_state(1, "2014", data_dir=str(data_dir), output_dir=str(output_dir))

        assert result is None
        map_file = output_dir / "fars_map_state_1_2014.html"
        assert map_file.exists()
        assert "plotly" in map_file.read_text(encoding="utf-8")
        assert "Map saved as" in capsys.readouterr().out

    def test_sentinel_points_left_out(self, data_dir, output_dir):
        # Both 2013 state 1 accidents with a sentinel are dropped, one point remains
        fars_map_state(1, 2013, data_dir=str(data_dir), output_dir=str(output_dir))
        assert (output_dir / "fars_map_state_1_2013.html").exists()

    def test_invalid_state(self, data_dir, output_dir):
        with pytest.raises(ValueError, match="invalid STATE number: 99"):
            fars_map_state(99, 2013, data_dir=str(data_dir), output_dir=str(output_dir))
        assert list(output_dir.iterdir()) == []

    def test_missing_year(self, data_dir, output_dir):
        with pytest.raises(FileNotFoundError):
            fars_map_state(1, 2020, data_dir=str(data_dir), output_dir=str(output_dir))

    def test_no_accidents_to_plot(self, data_dir, output_dir, capsys, monkeypatch):
        monkeypatch.setattr(
            filter_and_visualize, "filter_state", lambda df, state_num: df.head(0)
        )

        result = fars_map_state(1, 2013, data_dir=str(data_dir), output_dir=str(output_dir))

        assert result is None
        assert "no accidents to plot" in capsys.readouterr().out
        assert list(output_dir.iterdir()) == []
