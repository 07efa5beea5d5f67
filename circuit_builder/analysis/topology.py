"""
analysis/topology.py

Classifies a resolved circuit before any numbers are computed: missing
source, disconnected parts, open switches, and short circuits are all
ordinary user states and are reported as a status, never raised.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from models.component import ComponentData

from .connectivity import UnionFind
from .graph import component_terminal_keys

logger = logging.getLogger(__name__)


class CircuitStatus(Enum):
    """Outcome of topology classification, in rule precedence order."""

    NO_SOURCE = "no_source"
    DISCONNECTED = "disconnected"
    OPEN = "open"
    SHORT_CIRCUIT = "short_circuit"
    CLOSED = "closed"


@dataclass
class TopologyReport:
    """Classification outcome plus the component lists later stages need."""

    status: CircuitStatus
    batteries: list[ComponentData] = field(default_factory=list)
    resistive: list[ComponentData] = field(default_factory=list)
    switches: list[ComponentData] = field(default_factory=list)
    conductors: list[ComponentData] = field(default_factory=list)
    total_voltage: float = 0.0
    disconnected_ids: list[str] = field(default_factory=list)
    open_switch_ids: list[str] = field(default_factory=list)

    @property
    def solvable(self) -> bool:
        return self.status == CircuitStatus.CLOSED


def find_disconnected(components: Sequence[ComponentData], connectivity: UnionFind) -> list[str]:
    """
    Return ids of components not reachable from the first component.

    The reference is the class of the first component's first terminal.
    Every component joins its own two terminals in the reachability
    graph, so checking one terminal per component is enough.
    """
    if not components:
        return []

    reference = connectivity.find(component_terminal_keys(components[0])[0])
    return [
        comp.component_id
        for comp in components
        if connectivity.find(component_terminal_keys(comp)[0]) != reference
    ]


def classify_topology(components: Sequence[ComponentData], connectivity: UnionFind) -> TopologyReport:
    """
    Classify the circuit.

    Rules, first match wins:
        1. no Battery                          -> NO_SOURCE
        2. parts not all in one connected set  -> DISCONNECTED
        3. any open Switch                     -> OPEN
        4. no resistive part and EMF sum > 0   -> SHORT_CIRCUIT
        5. otherwise                           -> CLOSED

    Args:
        components: Placed components in placement order.
        connectivity: Union-find built from the full reachability graph.
    """
    report = TopologyReport(status=CircuitStatus.CLOSED)
    for comp in components:
        if comp.is_battery:
            report.batteries.append(comp)
        elif comp.is_resistive:
            report.resistive.append(comp)
        elif comp.is_switch:
            report.switches.append(comp)
            if not comp.closed:
                report.open_switch_ids.append(comp.component_id)
        else:
            report.conductors.append(comp)

    report.total_voltage = sum(b.voltage for b in report.batteries)

    if not report.batteries:
        report.status = CircuitStatus.NO_SOURCE
        return report

    report.disconnected_ids = find_disconnected(components, connectivity)
    if report.disconnected_ids:
        logger.debug("Disconnected components: %s", report.disconnected_ids)
        report.status = CircuitStatus.DISCONNECTED
        return report

    if report.open_switch_ids:
        report.status = CircuitStatus.OPEN
        return report

    if not report.resistive and report.total_voltage > 0:
        report.status = CircuitStatus.SHORT_CIRCUIT
        return report

    return report
