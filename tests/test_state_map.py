import logging

import plotly.graph_objects as go
import pytest

from fars import InvalidStateError, fars_map_state
from fars.reports import generators
from fars.reports.generators import ReportGenerator


class TestFarsMapState:

    def test_returns_figure_with_points(self, in_data_dir):
        fig = fars_map_state(1, 2013)

        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        trace = fig.data[0]
        assert isinstance(trace, go.Scattergeo)
        assert list(trace.lon) == [-86.5, -87.0]
        assert list(trace.lat) == [32.5, 33.0]

    def test_sentinels_excluded_from_bounds(self, in_data_dir):
        fig = fars_map_state(1, 2013)

        assert list(fig.layout.geo.lonaxis.range) == [-87.0, -85.0]
        assert list(fig.layout.geo.lataxis.range) == [32.5, 34.0]

    def test_state_map_shows_state_outlines(self, in_data_dir):
        fig = fars_map_state(6, 2013)
        assert fig.layout.geo.showsubunits is True

    def test_coerces_arguments(self, data_dir):
        fig = fars_map_state("6", 2014.0, data_dir=data_dir)
        assert len(fig.data[0].lon) == 2

    def test_invalid_state(self, in_data_dir):
        with pytest.raises(InvalidStateError, match="99"):
            fars_map_state(99, 2013)

    def test_missing_year_file(self, in_data_dir):
        with pytest.raises(FileNotFoundError, match="accident_2001.csv.bz2"):
            fars_map_state(1, 2001)

    def test_no_rows_is_silent_no_op(self, in_data_dir, monkeypatch, caplog):
        # filter_state raises for states absent from the file, so real data
        # never reaches the empty branch; force an empty result instead.
        caplog.set_level(logging.INFO, logger="fars")
        monkeypatch.setattr(
            generators, "filter_state", lambda df, state_num: df.iloc[0:0],
        )

        assert fars_map_state(1, 2013) is None
        assert "no accidents to plot" in [r.getMessage() for r in caplog.records]


class TestReportGenerator:

    def test_save_state_map(self, data_dir, tmp_path):
        out_dir = tmp_path / "reports"
        gen = ReportGenerator(data_dir=data_dir, output_dir=out_dir)

        path = gen.save_state_map(6, 2014)

        assert path == out_dir / "state_6_2014.html"
        assert path.exists()
        assert "plotly" in path.read_text(encoding="utf-8").lower()

    def test_save_state_map_nothing_to_plot(self, data_dir, tmp_path, monkeypatch):
        # Empty filter result forced as above; not reachable with real files.
        monkeypatch.setattr(
            generators, "filter_state", lambda df, state_num: df.iloc[0:0],
        )
        gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

        assert gen.save_state_map(1, 2013) is None
        assert not (tmp_path / "out").exists()

    def test_save_summary(self, data_dir, tmp_path):
        gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

        path = gen.save_summary([2013, 2014])

        assert path.name == "summary_2013-2014.csv"
        header = path.read_text().splitlines()[0]
        assert header == "MONTH,2013,2014"

    def test_save_summary_float_years_named_as_integers(self, data_dir, tmp_path):
        gen = ReportGenerator(data_dir=data_dir, output_dir=tmp_path / "out")

        assert gen.save_summary([2013.0]).name == "summary_2013.csv"
        assert gen.save_summary([2013.0, 2014.0]).name == "summary_2013-2014.csv"
