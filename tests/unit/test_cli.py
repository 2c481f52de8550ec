"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from polyfinder import __version__
from polyfinder.cli import app
from polyfinder.cli.app import parse_sizes
from polyfinder.domain import Point
from polyfinder.io import PointReader

runner = CliRunner()


@pytest.fixture
def points_file(tmp_path: Path) -> Path:
    """Rectangle plus interior point."""
    path = tmp_path / "points.txt"
    path.write_text(
        "x=0, y=0\nx=4, y=0\nx=4, y=3\nx=0, y=3\nx=2, y=1\n", encoding="utf-8"
    )
    return path


class TestParseSizes:
    def test_parse(self):
        assert parse_sizes("3,4,5") == [3, 4, 5]
        assert parse_sizes(" 4 , 6 ") == [4, 6]

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_sizes("3,four")


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_file(self, points_file: Path):
        result = runner.invoke(app, ["search", str(points_file)])
        assert result.exit_code == 0, result.output
        assert "6.00" in result.output
        assert "12.00" in result.output
        assert "not found" in result.output

    def test_search_quiet(self, points_file: Path):
        result = runner.invoke(app, ["search", str(points_file), "--quiet", "--sizes", "4"])
        assert result.exit_code == 0, result.output
        assert "12.00" in result.output
        assert "PolyFinder" not in result.output

    def test_search_greedy_verbose(self, points_file: Path):
        result = runner.invoke(
            app, ["search", str(points_file), "--method", "greedy", "--sizes", "4", "-v"]
        )
        assert result.exit_code == 0, result.output
        assert "12.00" in result.output
        assert "(4, 3)" in result.output

    def test_search_random(self):
        result = runner.invoke(
            app, ["search", "--random", "12", "--seed", "1", "--method", "greedy", "-q"]
        )
        assert result.exit_code == 0, result.output

    def test_search_writes_report(self, points_file: Path, tmp_path: Path):
        report_path = tmp_path / "report.json"
        result = runner.invoke(
            app, ["search", str(points_file), "--output", str(report_path)]
        )
        assert result.exit_code == 0, result.output

        data = json.loads(report_path.read_text(encoding="utf-8"))
        assert data["point_count"] == 5
        assert [r["vertex_count"] for r in data["results"]] == [3, 4, 5]
        assert data["results"][1]["area"] == pytest.approx(12.0)

    def test_missing_points(self):
        result = runner.invoke(app, ["search"])
        assert result.exit_code == 1
        assert "No points to search" in result.output

    def test_file_and_random_conflict(self, points_file: Path):
        result = runner.invoke(app, ["search", str(points_file), "--random", "10"])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["search", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_method(self, points_file: Path):
        result = runner.invoke(app, ["search", str(points_file), "--method", "magic"])
        assert result.exit_code == 1
        assert "Invalid method" in result.output

    @pytest.mark.parametrize("sizes", ["2,3", "3,x", "4,4"])
    def test_invalid_sizes(self, points_file: Path, sizes: str):
        result = runner.invoke(app, ["search", str(points_file), "--sizes", sizes])
        assert result.exit_code == 1

    def test_verbose_and_quiet(self, points_file: Path):
        result = runner.invoke(app, ["search", str(points_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_file_without_points(self, tmp_path: Path):
        path = tmp_path / "empty.txt"
        path.write_text("hello\n", encoding="utf-8")
        result = runner.invoke(app, ["search", str(path)])
        assert result.exit_code == 1
        assert "Invalid points file" in result.output

    def test_not_enough_points(self, tmp_path: Path):
        path = tmp_path / "two.txt"
        path.write_text("x=0, y=0\nx=4, y=0\n", encoding="utf-8")
        result = runner.invoke(app, ["search", str(path)])
        assert result.exit_code == 1
        assert "Not enough points" in result.output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate(self, tmp_path: Path):
        path = tmp_path / "points.txt"
        result = runner.invoke(
            app, ["generate", str(path), "--count", "20", "--min", "0", "--max", "9", "--seed", "4"]
        )
        assert result.exit_code == 0, result.output

        with PointReader(path) as reader:
            points = reader.points
        assert len(points) == 20
        assert all(0 <= p.x <= 9 and 0 <= p.y <= 9 for p in points)

    def test_generate_is_reproducible(self, tmp_path: Path):
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        runner.invoke(app, ["generate", str(first), "--seed", "8"])
        runner.invoke(app, ["generate", str(second), "--seed", "8"])
        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_generate_inverted_range(self, tmp_path: Path):
        result = runner.invoke(
            app, ["generate", str(tmp_path / "p.txt"), "--min", "5", "--max", "1"]
        )
        assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_points_file_fixture_shape(points_file: Path):
    with PointReader(points_file) as reader:
        assert reader.points[-1] == Point(2, 1)
