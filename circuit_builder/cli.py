"""
Command-line interface for circuit builder batch operations.

Analyze, validate, and sweep grid circuits without the builder UI.

Usage::

    circuit-builder analyze circuit.json
    circuit-builder analyze circuit.json --format csv --output results.csv
    circuit-builder validate circuit.json
    circuit-builder preset parallel --output parallel.json
    circuit-builder sweep circuit.json R1 --start 50 --stop 500 --points 10
    circuit-builder batch circuits/ --output-dir results/
"""

import argparse
import glob
import json
import logging
import sys
from pathlib import Path

from analysis.analyzer import analyze_model
from analysis.circuit_validator import validate_circuit
from analysis.csv_exporter import export_analysis_results, export_sweep_results
from analysis.presets import PresetManager
from analysis.sweep import compute_sweep_statistics, sweep_parameter, sweep_values
from controllers.file_controller import validate_circuit_data
from models.circuit import CircuitModel

logger = logging.getLogger(__name__)


def try_load_circuit(filepath: str) -> tuple[CircuitModel | None, str]:
    """Load and validate a circuit JSON file without exiting.

    Args:
        filepath: Path to the circuit JSON file.

    Returns:
        (model, "") on success, or (None, error_message) on failure.
    """
    path = Path(filepath)
    if not path.exists():
        return None, f"file not found: {filepath}"

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return None, f"invalid JSON in {filepath}: {e}"
    except OSError as e:
        return None, f"cannot read {filepath}: {e}"

    try:
        validate_circuit_data(data)
        model = CircuitModel.from_dict(data)
        for component in model.components.values():
            component.validate()
    except ValueError as e:
        return None, f"invalid circuit file: {e}"

    return model, ""


def load_circuit(filepath: str) -> CircuitModel:
    """Load and validate a circuit JSON file.

    Args:
        filepath: Path to the circuit JSON file.

    Returns:
        A populated CircuitModel.

    Raises:
        SystemExit: On file read or validation errors.
    """
    model, error = try_load_circuit(filepath)
    if model is None:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)
    return model


def _emit(text: str, output, label: str) -> None:
    if output:
        Path(output).write_text(text)
        print(f"{label} written to {output}", file=sys.stderr)
    else:
        print(text)


def _format_result(result, model: CircuitModel, fmt: str, circuit_name: str = "") -> str:
    """Format an analysis result as text."""
    if fmt == "csv":
        components, _ = model.snapshot()
        return export_analysis_results(result, components, circuit_name)
    return json.dumps(result.to_dict(), indent=2)


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze a circuit and output the results."""
    model = load_circuit(args.circuit)
    result = analyze_model(model)

    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    _emit(_format_result(result, model, args.format, Path(args.circuit).stem), args.output, "Results")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a circuit without analyzing it."""
    model = load_circuit(args.circuit)
    components, wires = model.snapshot()

    is_valid, errors, warnings = validate_circuit(components, wires)

    if is_valid:
        print(f"Circuit is valid: {args.circuit}")
        for warning in warnings:
            print(f"  Warning: {warning}")
        return 0
    else:
        print(f"Circuit has errors: {args.circuit}", file=sys.stderr)
        for err in errors:
            print(f"  - {err}", file=sys.stderr)
        return 1


def cmd_preset(args: argparse.Namespace) -> int:
    """Write a preset circuit as circuit JSON."""
    manager = PresetManager(args.preset_file) if args.preset_file else PresetManager()
    try:
        model = manager.load_preset(args.name)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Available presets: " + ", ".join(manager.get_preset_names()), file=sys.stderr)
        return 1

    _emit(json.dumps(model.to_dict(), indent=2), args.output, "Circuit")
    return 0


def _sweep_to_json(sweep) -> str:
    output = {
        "component": sweep.component_id,
        "parameter": sweep.parameter,
        "points": [
            dict(zip(("value", "status", "total_current", "total_power", "component_current"), row))
            for row in sweep.to_rows()
        ],
        "statistics": {
            "total_current": compute_sweep_statistics(sweep.total_current),
            "total_power": compute_sweep_statistics(sweep.total_power),
        },
    }
    return json.dumps(output, indent=2)


def cmd_sweep(args: argparse.Namespace) -> int:
    """Step one component's value and analyze at each point."""
    model = load_circuit(args.circuit)
    components, wires = model.snapshot()

    try:
        values = sweep_values(args.start, args.stop, args.points)
        sweep = sweep_parameter(components, wires, args.component, values)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "csv":
        text = export_sweep_results(sweep, Path(args.circuit).stem)
    else:
        text = _sweep_to_json(sweep)
    _emit(text, args.output, "Sweep results")
    return 0


def cmd_batch(args: argparse.Namespace) -> int:
    """Analyze multiple circuit files."""
    # Resolve input files
    pattern = args.path
    path = Path(pattern)
    if path.is_dir():
        files = sorted(path.glob("*.json"))
    elif "*" in pattern or "?" in pattern:
        files = sorted(Path(p) for p in glob.glob(pattern))
    else:
        print(f"Error: {pattern} is not a directory or glob pattern", file=sys.stderr)
        return 1

    if not files:
        print(f"No .json circuit files found matching: {pattern}", file=sys.stderr)
        return 1

    # Create output directory if specified
    output_dir = None
    if args.output_dir:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    fmt = args.format
    results_summary = []
    any_failed = False

    for filepath in files:
        name = filepath.stem
        model, error = try_load_circuit(str(filepath))

        if model is None:
            results_summary.append({"file": filepath.name, "status": "LOAD_ERROR", "error": error})
            any_failed = True
            if args.fail_fast:
                break
            continue

        result = analyze_model(model)
        results_summary.append(
            {
                "file": filepath.name,
                "status": "OK",
                "analysis": f"{result.status.value} I={result.total_current:g} A",
            }
        )

        # Write per-file results if output directory specified
        if output_dir:
            ext = "csv" if fmt == "csv" else "json"
            out_path = output_dir / f"{name}.{ext}"
            out_path.write_text(_format_result(result, model, fmt, name))

    # Print summary table
    print(f"\n{'File':<40} {'Status':<12} {'Details'}")
    print("-" * 70)
    for entry in results_summary:
        status = entry["status"]
        details = entry.get("analysis", entry.get("error", ""))
        print(f"{entry['file']:<40} {status:<12} {details}")

    total = len(results_summary)
    passed = sum(1 for e in results_summary if e["status"] == "OK")
    failed = total - passed
    print(f"\n{passed}/{total} succeeded, {failed} failed")

    return 1 if any_failed else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="circuit-builder",
        description="Circuit builder batch operations: analyze, validate, and sweep grid circuits.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # analyze
    an_parser = subparsers.add_parser("analyze", help="Analyze a circuit and output results")
    an_parser.add_argument("circuit", help="Path to circuit JSON file")
    an_parser.add_argument("--format", choices=["json", "csv"], default="json", help="Output format (default: json)")
    an_parser.add_argument("--output", "-o", help="Write results to file instead of stdout")

    # validate
    val_parser = subparsers.add_parser("validate", help="Check circuit for errors without analyzing")
    val_parser.add_argument("circuit", help="Path to circuit JSON file")

    # preset
    preset_parser = subparsers.add_parser("preset", help="Write a preset circuit as circuit JSON")
    preset_parser.add_argument("name", help="Preset name (series, parallel, wheatstone, or a saved preset)")
    preset_parser.add_argument("--output", "-o", help="Write circuit to file instead of stdout")
    preset_parser.add_argument("--preset-file", help="User presets file (default: ~/.circuit-builder/presets.json)")

    # sweep
    sweep_parser = subparsers.add_parser("sweep", help="Sweep a battery voltage or resistance")
    sweep_parser.add_argument("circuit", help="Path to circuit JSON file")
    sweep_parser.add_argument("component", help="Id of the component to sweep (e.g. B1, R1)")
    sweep_parser.add_argument("--start", type=float, required=True, help="First value")
    sweep_parser.add_argument("--stop", type=float, required=True, help="Last value")
    sweep_parser.add_argument("--points", type=int, default=11, help="Number of points (default: 11)")
    sweep_parser.add_argument("--format", choices=["json", "csv"], default="json", help="Output format (default: json)")
    sweep_parser.add_argument("--output", "-o", help="Write results to file instead of stdout")

    # batch
    batch_parser = subparsers.add_parser("batch", help="Analyze multiple circuit files")
    batch_parser.add_argument("path", help="Directory or glob pattern matching circuit JSON files")
    batch_parser.add_argument(
        "--format", choices=["json", "csv"], default="json", help="Output format for per-file results (default: json)"
    )
    batch_parser.add_argument("--output-dir", help="Write per-file results to this directory")
    batch_parser.add_argument("--fail-fast", action="store_true", help="Stop on first error")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "analyze": cmd_analyze,
        "validate": cmd_validate,
        "preset": cmd_preset,
        "sweep": cmd_sweep,
        "batch": cmd_batch,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
