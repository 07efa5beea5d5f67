"""
analysis/analyzer.py

Entry point of the circuit analysis engine.

analyze_circuit() is a pure function of (components, wires): it reads the
snapshot, never mutates it, keeps no state between calls, and always
returns a complete AnalysisResult. Callers re-run it after every edit.
"""

import logging
from typing import Sequence

from models.circuit import CircuitModel
from models.component import ComponentData
from models.wire import WireData

from .connectivity import resolve_connectivity
from .graph import build_adjacency, build_conductor_adjacency
from .network_solver import (open_circuit_readings, short_circuit_readings,
                             solve_network)
from .results import SHORT_CIRCUIT_SENTINEL, AnalysisResult, assemble_result
from .topology import CircuitStatus, classify_topology

logger = logging.getLogger(__name__)


def _warnings_for(report) -> list[str]:
    warnings = []
    if report.disconnected_ids:
        warnings.append("Not connected to the rest of the circuit: " + ", ".join(report.disconnected_ids))
    if report.open_switch_ids:
        warnings.append("Open switch: " + ", ".join(report.open_switch_ids))
    return warnings


def analyze_circuit(components: Sequence[ComponentData], wires: Sequence[WireData]) -> AnalysisResult:
    """
    Analyze a circuit snapshot.

    Args:
        components: Placed components, in placement order.
        wires: Wire segments.

    Returns:
        The AnalysisResult for the snapshot.

    Raises:
        InvalidComponentError: If a component has an unknown type or
            orientation, or a negative or non-finite value.
    """
    components = tuple(components)
    wires = tuple(wires)
    for comp in components:
        comp.validate()

    connectivity = resolve_connectivity(build_adjacency(components, wires))
    report = classify_topology(components, connectivity)
    warnings = _warnings_for(report)
    resistive_ids = [comp.component_id for comp in report.resistive]

    if report.status in (CircuitStatus.NO_SOURCE, CircuitStatus.DISCONNECTED):
        result = assemble_result(report.status, total_voltage=report.total_voltage, warnings=warnings)

    elif report.status == CircuitStatus.OPEN:
        result = assemble_result(
            report.status,
            readings=open_circuit_readings(components),
            total_voltage=report.total_voltage,
            resistive_ids=resistive_ids,
            warnings=warnings,
        )

    elif report.status == CircuitStatus.SHORT_CIRCUIT:
        result = assemble_result(
            report.status,
            readings=short_circuit_readings(report),
            total_current=SHORT_CIRCUIT_SENTINEL,
            total_power=SHORT_CIRCUIT_SENTINEL,
            total_voltage=report.total_voltage,
            warnings=warnings,
        )

    elif not report.resistive:
        # Batteries at 0 V with nothing to drive
        result = assemble_result(
            report.status,
            readings=open_circuit_readings(components),
            total_voltage=report.total_voltage,
            warnings=warnings,
        )

    else:
        conductors = resolve_connectivity(build_conductor_adjacency(components, wires))
        solution = solve_network(report, conductors)
        logger.debug(
            "%d resistive parts in %d groups", len(report.resistive), len(solution.groups)
        )
        result = assemble_result(
            report.status,
            readings=solution.readings,
            total_resistance=solution.total_resistance,
            total_current=solution.total_current,
            total_power=solution.total_power,
            total_voltage=report.total_voltage,
            resistive_ids=resistive_ids,
            warnings=warnings,
        )

    logger.debug(
        "Analysis: %s, R=%.6g I=%.6g P=%.6g",
        result.status.value, result.total_resistance, result.total_current, result.total_power,
    )
    return result


def analyze_model(model: CircuitModel) -> AnalysisResult:
    """Analyze the current state of a CircuitModel."""
    components, wires = model.snapshot()
    return analyze_circuit(components, wires)
