"""
analysis/csv_exporter.py

Export analysis results to CSV format.
Writing the file is the caller's responsibility.
"""

import csv
import io
from datetime import datetime

from .results import SHORT_CIRCUIT_SENTINEL


def _write_header(writer, analysis_type, circuit_name):
    writer.writerow(["# Analysis Type", analysis_type])
    writer.writerow(["# Date", datetime.now().strftime("%Y-%m-%d %H:%M:%S")])
    if circuit_name:
        writer.writerow(["# Circuit", circuit_name])


def export_analysis_results(result, components, circuit_name=""):
    """
    Export one circuit analysis to CSV string.

    Args:
        result: AnalysisResult
        components: sequence of ComponentData, in display order
        circuit_name: optional circuit filename

    Returns:
        str: CSV content
    """
    output = io.StringIO()
    writer = csv.writer(output)

    _write_header(writer, "Circuit Analysis", circuit_name)
    writer.writerow(["# Status", result.status.value])
    if result.short_circuit:
        writer.writerow(["# Note", f"Short circuit: {SHORT_CIRCUIT_SENTINEL:g} marks a fault, not a reading"])
    for warning in result.warnings:
        writer.writerow(["# Warning", warning])
    writer.writerow([])

    writer.writerow(["Quantity", "Value"])
    writer.writerow(["Total Voltage (V)", result.total_voltage])
    writer.writerow(["Total Resistance (Ohm)", result.total_resistance])
    writer.writerow(["Total Current (A)", result.total_current])
    writer.writerow(["Total Power (W)", result.total_power])
    writer.writerow([])

    writer.writerow(["Component", "Type", "Value", "Voltage (V)", "Current (A)", "Power (W)"])
    for comp in components:
        reading = result.get(comp.component_id)
        if reading is None:
            continue
        writer.writerow([
            comp.component_id,
            comp.component_type,
            comp.get_value_label(),
            reading.voltage,
            reading.current,
            reading.power,
        ])

    return output.getvalue()


def export_sweep_results(sweep, circuit_name=""):
    """
    Export parameter sweep results to CSV string.

    Args:
        sweep: SweepResult
        circuit_name: optional circuit filename

    Returns:
        str: CSV content
    """
    output = io.StringIO()
    writer = csv.writer(output)

    _write_header(writer, "Parameter Sweep", circuit_name)
    writer.writerow(["# Swept", f"{sweep.component_id} {sweep.parameter}"])
    writer.writerow([])

    writer.writerow(sweep.headers)
    for row in sweep.to_rows():
        writer.writerow(row)

    return output.getvalue()
