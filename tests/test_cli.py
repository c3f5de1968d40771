"""
Tests for the render_chart CLI.
"""

import json

from weatherwheel.cli.render_chart import main, parse_args
from weatherwheel import config


class TestRenderChartCli:
    """Test argument parsing and chart output."""

    def test_defaults(self):
        """Test default arguments."""
        args = parse_args([])
        assert args.data == str(config.DEFAULT_DATA_FILE)
        assert args.output == "weather_wheel.html"
        assert args.width == config.CHART_WIDTH

    def test_writes_html(self, tmp_path):
        """Test a chart is written for the bundled sample data."""
        output = tmp_path / "wheel.html"
        assert main(["--output", str(output)]) == 0
        assert output.is_file()
        assert "plotly" in output.read_text(encoding="utf-8").lower()

    def test_empty_dataset(self, tmp_path, capsys):
        """Test an empty document fails without writing output."""
        data = tmp_path / "empty.json"
        data.write_text(json.dumps([]))
        output = tmp_path / "wheel.html"

        assert main([str(data), "--output", str(output)]) == 1
        assert not output.exists()
        assert "Error" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        """Test a missing data file."""
        assert main([str(tmp_path / "missing.json"), "-o", str(tmp_path / "x.html")]) == 1
