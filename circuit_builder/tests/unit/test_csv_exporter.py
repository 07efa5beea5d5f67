"""Tests for CSV export of analysis and sweep results."""

import csv
import io

import pytest
from analysis.analyzer import analyze_circuit
from analysis.csv_exporter import export_analysis_results, export_sweep_results
from analysis.sweep import sweep_parameter


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


class TestExportAnalysisResults:
    def test_header(self, single_loop_circuit):
        components, wires = single_loop_circuit
        rows = _rows(export_analysis_results(analyze_circuit(components, wires), components, "loop"))
        assert rows[0] == ["# Analysis Type", "Circuit Analysis"]
        assert rows[1][0] == "# Date"
        assert rows[2] == ["# Circuit", "loop"]
        assert rows[3] == ["# Status", "closed"]

    def test_no_circuit_name_row(self, single_loop_circuit):
        components, wires = single_loop_circuit
        text = export_analysis_results(analyze_circuit(components, wires), components)
        assert "# Circuit" not in text

    def test_component_rows(self, series_circuit):
        components, wires = series_circuit
        rows = _rows(export_analysis_results(analyze_circuit(components, wires), components))
        header = rows.index(["Component", "Type", "Value", "Voltage (V)", "Current (A)", "Power (W)"])
        body = rows[header + 1:]
        assert [r[0] for r in body] == ["B1", "R1", "R2"]
        assert float(body[1][4]) == pytest.approx(0.03)
        assert body[2][2] == "200 Ω"

    def test_totals(self, parallel_circuit):
        components, wires = parallel_circuit
        rows = _rows(export_analysis_results(analyze_circuit(components, wires), components))
        totals = {r[0]: r[1] for r in rows if len(r) == 2 and not r[0].startswith("#")}
        assert float(totals["Total Resistance (Ohm)"]) == pytest.approx(50.0)
        assert float(totals["Total Current (A)"]) == pytest.approx(0.18)

    def test_short_circuit_note(self, short_circuit):
        components, wires = short_circuit
        text = export_analysis_results(analyze_circuit(components, wires), components)
        assert "# Note" in text
        assert "short_circuit" in text

    def test_invalid_circuit_has_no_component_rows(self, disconnected_circuit):
        components, wires = disconnected_circuit
        rows = _rows(export_analysis_results(analyze_circuit(components, wires), components))
        assert rows[-1][0] == "Component"
        assert any(r[0] == "# Warning" for r in rows)


class TestExportSweepResults:
    def test_layout(self, single_loop_circuit):
        sweep = sweep_parameter(*single_loop_circuit, "B1", [3.0, 6.0])
        rows = _rows(export_sweep_results(sweep, "loop"))
        assert rows[0] == ["# Analysis Type", "Parameter Sweep"]
        assert ["# Swept", "B1 voltage"] in rows
        header = rows.index(sweep.headers)
        assert len(rows[header + 1:]) == 2
        assert float(rows[header + 1][0]) == 3.0
        assert rows[header + 1][1] == "closed"
