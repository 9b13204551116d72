"""
Tests for console summaries, unit display and capacity charts.
"""

import json

import pytest

from hollowcore.chart import build_series, render_chart
from hollowcore.cli.readable_output import (
    describe_result,
    format_result,
    overload_message,
    print_readable_output,
)
from hollowcore.models.inputs import Requirement, UnitSystem
from hollowcore.models.outputs import (
    AlternativeOptions,
    CalculationReport,
    ChartSeries,
    ExactMatch,
    InfeasibleRequest,
)
from hollowcore.models.records import ConfigurationRecord, RankedConfiguration
from hollowcore.units import format_load, format_span, load_quantity, magnitude_in, span_quantity


def _report(result, span=24, load=120, system=UnitSystem.IMPERIAL, thickness="8''"):
    requirement = Requirement(thickness=thickness, span=span, load=load, system=system)
    return CalculationReport(
        requirement=requirement,
        result=result,
        chart=ChartSeries(system=system, thickness=thickness),
        catalog_size=0,
    )


class TestUnits:
    """Tests for unit display helpers."""

    def test_integral_values(self):
        assert format_span(24.0, UnitSystem.IMPERIAL) == "24 ft"
        assert format_load(120.0, UnitSystem.IMPERIAL) == "120 psf"

    def test_fractional_values(self):
        assert format_span(7.3, UnitSystem.METRIC) == "7.30 m"
        assert format_load(5.754, UnitSystem.METRIC) == "5.75 kPa"

    def test_quantities(self):
        assert magnitude_in(span_quantity(10, UnitSystem.IMPERIAL), "inch") == pytest.approx(120)
        assert magnitude_in(load_quantity(1, UnitSystem.METRIC), "pascal") == pytest.approx(1000)

    def test_psf_definition(self):
        assert magnitude_in(load_quantity(1000, UnitSystem.IMPERIAL), "kilopascal") == pytest.approx(
            47.88, rel=1e-3
        )


class TestFormatResult:
    """Tests for the summary block."""

    def test_block(self):
        text = format_result(UnitSystem.IMPERIAL, 24, 120, "8''", 6, 120)
        lines = text.splitlines()

        assert lines[0] == "Hollow-Core Slab Calculation"
        assert "Thickness   : 8''" in lines
        assert "Strands req.: 6" in lines
        assert "Superimposed: 120 psf" in lines


class TestDescribeResult:
    """Tests for per-kind console lines."""

    def test_exact(self):
        best = ConfigurationRecord(thickness="8''", span=28, capacity=130, strands=7)
        lines = describe_result(_report(ExactMatch(best=best)))

        assert "Span        : 24 ft" in lines
        assert lines[-1] == "Selected span: 28 ft"

    def test_infeasible(self):
        report = _report(InfeasibleRequest(requested_load=500, max_available_capacity=360), load=500)

        assert describe_result(report) == [overload_message(report)]
        assert overload_message(report) == "The requested load (500 psf) exceeds maximum (360 psf)."

    def test_infeasible_metric(self):
        report = _report(
            InfeasibleRequest(requested_load=30, max_available_capacity=19.52),
            system=UnitSystem.METRIC,
            thickness="200 mm",
            load=30,
        )
        assert overload_message(report) == "The requested load (30 kPa) exceeds maximum (19.52 kPa)."

    def test_no_candidates(self):
        lines = describe_result(_report(AlternativeOptions(ranked=[]), thickness="9''"))
        assert lines == ["No configurations available for 9''."]

    def test_alternatives_table(self):
        ranked = [
            RankedConfiguration(thickness="8''", span=32, capacity=90, strands=8, distance=8.1),
            RankedConfiguration(thickness="8''", span=32, capacity=68, strands=6, distance=8.2),
        ]
        lines = describe_result(_report(AlternativeOptions(ranked=ranked), span=40, load=90))

        assert lines[0] == "No exact configuration found. Closest:"
        assert len(lines) == 4
        assert "90 psf" in lines[2]


class TestPrintReadableOutput:
    """Tests for printing from reports, dicts and files."""

    def test_from_file(self, tmp_path, capsys):
        report = _report(InfeasibleRequest(requested_load=500, max_available_capacity=360), load=500)
        path = tmp_path / "report.json"
        path.write_text(report.model_dump_json())

        print_readable_output(path)

        assert "exceeds maximum" in capsys.readouterr().out

    def test_from_dict(self, capsys):
        report = _report(AlternativeOptions(ranked=[]))
        print_readable_output(json.loads(report.model_dump_json()))

        assert "No configurations available" in capsys.readouterr().out


class TestBuildSeries:
    """Tests for chart series construction."""

    def test_sorted_same_thickness(self, mixed_catalog):
        series = build_series(mixed_catalog, "8''", UnitSystem.IMPERIAL, 24, 120)

        assert [p.span for p in series.points] == [16, 20, 20, 24, 24, 28]
        assert series.has_target

    def test_unknown_thickness(self, mixed_catalog):
        series = build_series(mixed_catalog, "14''", UnitSystem.IMPERIAL)
        assert series.is_empty


class TestRenderChart:
    """Tests for chart image output."""

    def test_png_written(self, tmp_path, mixed_catalog):
        pytest.importorskip("matplotlib")
        series = build_series(mixed_catalog, "8''", UnitSystem.IMPERIAL, 24, 120)

        path = render_chart(series, tmp_path / "chart.png")

        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_empty_series(self, tmp_path):
        pytest.importorskip("matplotlib")
        series = ChartSeries(system=UnitSystem.METRIC, thickness="200 mm")

        path = render_chart(series, tmp_path / "empty.svg")

        assert path.exists()
        assert "<svg" in path.read_text()
