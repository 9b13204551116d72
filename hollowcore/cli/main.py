"""
Command-line interface for the hollow-core slab selector.

Usage:
    python -m hollowcore evaluate "24+4"
    python -m hollowcore thicknesses --system metric
    python -m hollowcore calculate --system imperial --thickness "8''" --span 24+4 --load 120
    python -m hollowcore calculate --input request.json --output report.json
    python -m hollowcore make-example [--output example_request.json]
    python -m hollowcore chart --thickness "8''" --span 24 --load 120 --output chart.png
    python -m hollowcore catalog-status
    python -m hollowcore serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from hollowcore import __version__
from hollowcore.calculator import InvalidInputError, SlabCalculator
from hollowcore.catalog.loader import CatalogLoadError, catalog_path, load_catalog
from hollowcore.expressions import evaluate_expression, format_number, is_valid_number
from hollowcore.logging_config import setup_logging
from hollowcore.models.inputs import CalculationRequest, UnitSystem


def _unit_system(value: str) -> UnitSystem:
    try:
        return UnitSystem(value)
    except ValueError:
        choices = ", ".join(s.value for s in UnitSystem)
        raise argparse.ArgumentTypeError(f"invalid unit system '{value}' (choose from {choices})")


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--system", "-s",
        type=_unit_system,
        default=UnitSystem.IMPERIAL,
        help="Unit system: Imperial (ft / psf) or Metric (m / kPa) (default: Imperial)",
    )
    parser.add_argument(
        "--thickness", "-t",
        default="",
        help="Slab thickness label, e.g. \"8''\" or \"200 mm\"",
    )
    parser.add_argument(
        "--span",
        default="",
        help="Required span, arithmetic allowed (e.g. 24 or 24+4)",
    )
    parser.add_argument(
        "--load",
        default="",
        help="Superimposed load, arithmetic allowed (e.g. 120 or 100*1.2)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a catalog JSON file (default: packaged catalog for the system)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hollowcore",
        description="Hollow-Core Slab Selector - pick a precast hollow-core slab configuration "
                    "(strands, thickness) for a required span and superimposed load.",
    )
    parser.add_argument("--version", action="version", version=f"hollowcore {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # evaluate command
    evaluate_parser = subparsers.add_parser(
        "evaluate",
        help="Evaluate an arithmetic expression the way input fields do",
    )
    evaluate_parser.add_argument("expression", help="Expression, e.g. 24+4")

    # thicknesses command
    thk_parser = subparsers.add_parser(
        "thicknesses",
        help="List the thickness options of a unit system",
    )
    thk_parser.add_argument(
        "--system", "-s",
        type=_unit_system,
        default=UnitSystem.IMPERIAL,
        help="Unit system (default: Imperial)",
    )

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example request JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_request.json"),
        help="Output path for example file (default: example_request.json)",
    )

    # calculate command
    calc_parser = subparsers.add_parser(
        "calculate",
        help="Select a slab configuration",
    )
    _add_request_arguments(calc_parser)
    calc_parser.add_argument(
        "--input", "-i",
        type=Path,
        default=None,
        help="Read the request from a JSON file instead of flags",
    )
    calc_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Save the JSON report to this path",
    )
    calc_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON report instead of a readable summary",
    )
    calc_parser.add_argument(
        "--normalized",
        action="store_true",
        help="Rank alternatives by axis-normalized distance",
    )

    # chart command
    chart_parser = subparsers.add_parser(
        "chart",
        help="Draw the capacity curve for a thickness",
    )
    _add_request_arguments(chart_parser)
    chart_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("capacity_chart.png"),
        help="Image path (default: capacity_chart.png)",
    )

    # catalog-status command
    status_parser = subparsers.add_parser(
        "catalog-status",
        help="Show where catalogs are loaded from and how many records they hold",
    )
    status_parser.add_argument(
        "--system", "-s",
        type=_unit_system,
        default=None,
        help="Only check one unit system",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _calculator(args: argparse.Namespace) -> SlabCalculator:
    if args.catalog is None:
        return SlabCalculator()
    return SlabCalculator(catalog_provider=lambda system: load_catalog(system, args.catalog))


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate an expression."""
    value = evaluate_expression(args.expression)
    if not is_valid_number(value):
        print(f"Error: '{args.expression}' is not a valid expression", file=sys.stderr)
        return 1
    print(format_number(value))
    return 0


def cmd_thicknesses(args: argparse.Namespace) -> int:
    """List thickness options."""
    for label in args.system.thickness_options:
        print(label)
    return 0


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example request JSON file."""
    example = CalculationRequest(
        system=UnitSystem.IMPERIAL,
        thickness="8''",
        span="24+4",
        load="100*1.2",
    )

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2))

    print(f"Created example request file: {args.output}")
    print("\nRun a calculation with:")
    print(f"  python -m hollowcore calculate --input {args.output}")

    return 0


def cmd_calculate(args: argparse.Namespace) -> int:
    """Select a configuration."""
    from hollowcore.cli.readable_output import print_readable_output

    try:
        if args.input:
            with open(args.input) as f:
                request = CalculationRequest.model_validate(json.load(f))
        else:
            request = CalculationRequest(
                system=args.system,
                thickness=args.thickness,
                span=args.span,
                load=args.load,
                normalized_distance=args.normalized,
            )

        report = _calculator(args).calculate(request)
        output_json = report.model_dump_json(indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output_json)
            print(f"Report saved to {args.output}", file=sys.stderr)

        if args.json:
            print(output_json)
        else:
            print_readable_output(report)

        return 0

    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, CatalogLoadError) as e:
        print(f"Error: Could not load data file: {e}", file=sys.stderr)
        return 1


def cmd_chart(args: argparse.Namespace) -> int:
    """Draw a capacity curve."""
    from hollowcore.chart import build_series, render_chart

    if not args.thickness.strip():
        print("Error: --thickness is required", file=sys.stderr)
        return 1

    span = evaluate_expression(args.span) if args.span else None
    load = evaluate_expression(args.load) if args.load else None
    target_span = span if is_valid_number(span) else None
    target_load = load if is_valid_number(load) else None

    try:
        catalog = load_catalog(args.system, args.catalog)
    except (FileNotFoundError, CatalogLoadError) as e:
        print(f"Error: Could not load data file: {e}", file=sys.stderr)
        return 1

    series = build_series(catalog, args.thickness, args.system, target_span, target_load)
    if series.is_empty:
        print(f"Warning: no {args.thickness} records in the {args.system.value} catalog", file=sys.stderr)

    path = render_chart(series, args.output)
    print(f"Chart saved to {path}", file=sys.stderr)
    return 0


def cmd_catalog_status(args: argparse.Namespace) -> int:
    """Report catalog locations and sizes."""
    systems = [args.system] if args.system else list(UnitSystem)
    status = 0
    for system in systems:
        path = catalog_path(system)
        try:
            records = load_catalog(system, path)
        except (FileNotFoundError, CatalogLoadError) as e:
            print(f"{system.value}: unavailable ({e})")
            status = 1
            continue
        print(f"{system.value}: {len(records)} configurations from {path}")
    return status


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print("\nStarting Hollow-Core Slab Selector API", file=sys.stderr)
        print(f"UI: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "hollowcore.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv=None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "evaluate": cmd_evaluate,
        "thicknesses": cmd_thicknesses,
        "make-example": cmd_make_example,
        "calculate": cmd_calculate,
        "chart": cmd_chart,
        "catalog-status": cmd_catalog_status,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
