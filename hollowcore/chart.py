"""
Capacity trend charts.

A chart shows capacity against span for every catalog record of one
thickness, joined in span order, with the requested (span, load) point
highlighted when both values are given.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from hollowcore.catalog.selector import thickness_points
from hollowcore.models.inputs import UnitSystem
from hollowcore.models.outputs import ChartPoint, ChartSeries
from hollowcore.models.records import ConfigurationRecord

LINE_COLOR = "#2196F3"
TARGET_COLOR = "#FF5722"


def build_series(
    catalog: Sequence[ConfigurationRecord],
    thickness: str,
    system: UnitSystem,
    target_span: Optional[float] = None,
    target_load: Optional[float] = None,
) -> ChartSeries:
    """Capacity trend for one thickness: same-thickness records sorted by span."""
    points = [
        ChartPoint(span=r.span, capacity=r.capacity, strands=r.strands)
        for r in thickness_points(catalog, thickness)
    ]
    return ChartSeries(
        system=system,
        thickness=thickness,
        points=points,
        target_span=target_span,
        target_load=target_load,
    )


def render_chart(series: ChartSeries, output: Union[str, Path], dpi: int = 120) -> Path:
    """
    Draw a capacity curve to an image file.

    Args:
        series: Points and optional target to draw
        output: Image path; the format follows the suffix (.png, .svg, ...)
        dpi: Output resolution

    Returns:
        The written path
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    system = series.system
    fig, ax = plt.subplots(figsize=(6, 4))
    ax.set_title(f"Capacity curve - {series.thickness}")
    ax.set_xlabel(f"Span ({system.span_unit})")
    ax.set_ylabel(f"Capacity ({system.load_unit})")

    if series.is_empty:
        ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)
    else:
        spans = [p.span for p in series.points]
        capacities = [p.capacity for p in series.points]
        ax.plot(
            spans,
            capacities,
            color=LINE_COLOR,
            linewidth=2,
            marker="o",
            markerfacecolor="white",
            markersize=5,
        )
        if series.has_target:
            ax.scatter(
                [series.target_span],
                [series.target_load],
                color=TARGET_COLOR,
                s=60,
                zorder=3,
                label="Requested",
            )
            ax.legend()
        ax.grid(True, color="#eeeeee")

    output_path = Path(output)
    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
    return output_path
