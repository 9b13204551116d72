"""
Helpers to turn selection reports into compact, human-readable console text.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from hollowcore.models.inputs import UnitSystem
from hollowcore.models.outputs import (
    CalculationReport,
    ExactMatch,
    InfeasibleRequest,
)
from hollowcore.units import format_load, format_span


def format_result(
    system: UnitSystem,
    span: float,
    load: float,
    thickness: str,
    strands: int,
    capacity: float,
) -> str:
    """Fixed-width text block summarizing a chosen configuration."""
    lines = [
        "Hollow-Core Slab Calculation",
        f"System      : {system.value}",
        f"Span        : {format_span(span, system)}",
        f"Superimposed: {format_load(load, system)}",
        f"Thickness   : {thickness}",
        f"Strands req.: {strands}",
        f"Capacity    : {format_load(capacity, system)}",
    ]
    return "\n".join(lines)


def overload_message(report: CalculationReport) -> str:
    """Message shown when the requested load exceeds the catalog maximum."""
    result = report.result
    system = report.requirement.system
    return (
        f"The requested load ({format_load(result.requested_load, system)}) "
        f"exceeds maximum ({format_load(result.max_available_capacity, system)})."
    )


def describe_result(report: CalculationReport) -> list[str]:
    """Render a report as console lines for each result kind."""
    requirement = report.requirement
    system = requirement.system
    result = report.result

    if isinstance(result, ExactMatch):
        best = result.best
        return format_result(
            system,
            requirement.span,
            requirement.load,
            best.thickness,
            best.strands,
            best.capacity,
        ).splitlines() + [
            f"Selected span: {format_span(best.span, system)}",
        ]

    if isinstance(result, InfeasibleRequest):
        return [overload_message(report)]

    if not result.ranked:
        return [f"No configurations available for {requirement.thickness}."]

    lines = [
        "No exact configuration found. Closest:",
        f"  {'Strands':>7}  {'Span':>10}  {'Capacity':>12}",
    ]
    for alt in result.ranked:
        lines.append(
            f"  {alt.strands:>7}  {format_span(alt.span, system):>10}  "
            f"{format_load(alt.capacity, system):>12}"
        )
    return lines


def print_readable_output(source: Union[CalculationReport, Path, str, dict[str, Any]]) -> None:
    """
    Print a report, a report dict, or a JSON file holding a report.
    """
    if isinstance(source, CalculationReport):
        report = source
    elif isinstance(source, dict):
        report = CalculationReport.model_validate(source)
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))
        report = CalculationReport.model_validate(data)

    for line in describe_result(report):
        print(line)
