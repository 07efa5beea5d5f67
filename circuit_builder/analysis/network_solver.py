"""
analysis/network_solver.py

Series/parallel solver for a closed, resistor-bearing circuit.

Resistive parts that bridge the same pair of electrical nodes form a
parallel group; the groups are then taken to be in series with each
other. This is exact for chains of parallel banks and an approximation
for bridge-like networks, which are not solved as a mesh.
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from models.component import ComponentData

from .connectivity import UnionFind
from .graph import component_terminal_keys
from .results import SHORT_CIRCUIT_SENTINEL, ComponentReading
from .topology import TopologyReport

logger = logging.getLogger(__name__)

# Smallest total resistance used for I = V / R
RESISTANCE_FLOOR = 0.001


@dataclass
class ParallelGroup:
    """Resistive parts bridging one unordered pair of electrical nodes."""

    node_pair: tuple
    members: list[ComponentData] = field(default_factory=list)

    @property
    def resistances(self) -> list[float]:
        return [float(m.resistance) for m in self.members]

    @property
    def equivalent_resistance(self) -> float:
        return equivalent_resistance(self.resistances)


@dataclass
class NetworkSolution:
    """Totals and per-component readings from solve_network()."""

    total_resistance: float
    total_current: float
    total_power: float
    readings: dict[str, ComponentReading]
    groups: list[ParallelGroup]


def equivalent_resistance(resistances: Sequence[float]) -> float:
    """
    Combine resistances in parallel.

    A single value is returned as is. Any zero member shorts the whole
    group, so the result is 0.0 rather than a division by zero.
    """
    if not resistances:
        raise ValueError("A parallel group needs at least one resistance")
    if any(r == 0 for r in resistances):
        return 0.0
    if len(resistances) == 1:
        return resistances[0]
    return 1.0 / sum(1.0 / r for r in resistances)


def group_parallel(resistive: Sequence[ComponentData], conductors: UnionFind) -> list[ParallelGroup]:
    """
    Group resistive parts by the electrical nodes their terminals sit on.

    The node pair is sorted so (A, B) and (B, A) land in the same group.
    Groups keep the order in which their first member was seen.
    """
    groups: dict[tuple, ParallelGroup] = {}
    for comp in resistive:
        key_a, key_b = component_terminal_keys(comp)
        pair = tuple(sorted((conductors.find(key_a), conductors.find(key_b))))
        group = groups.get(pair)
        if group is None:
            group = groups[pair] = ParallelGroup(node_pair=pair)
        group.members.append(comp)
    return list(groups.values())


def _member_currents(group: ParallelGroup, total_current: float) -> list[float]:
    """Split the group current among its members."""
    if len(group.members) == 1:
        return [total_current]

    resistances = group.resistances
    shorted = [r == 0 for r in resistances]
    if any(shorted):
        # Zero-resistance members carry everything, shared equally
        share = total_current / sum(shorted)
        return [share if s else 0.0 for s in shorted]

    group_voltage = total_current * group.equivalent_resistance
    return [group_voltage / r for r in resistances]


def solve_network(report: TopologyReport, conductors: UnionFind) -> NetworkSolution:
    """
    Compute totals and distribute voltage, current, and power.

    Args:
        report: A CLOSED topology report (at least one battery and one
            resistive part, no open switch, fully connected).
        conductors: Union-find built from the zero-resistance graph.
    """
    groups = group_parallel(report.resistive, conductors)

    total_resistance = 0.0
    for group in groups:
        total_resistance += group.equivalent_resistance
    if total_resistance < RESISTANCE_FLOOR:
        logger.debug("Total resistance %.6g clamped to %g", total_resistance, RESISTANCE_FLOOR)
        total_resistance = RESISTANCE_FLOOR

    total_voltage = report.total_voltage
    total_current = total_voltage / total_resistance
    total_power = total_voltage * total_current

    readings: dict[str, ComponentReading] = {}
    for group in groups:
        currents = _member_currents(group, total_current)
        for member, current in zip(group.members, currents):
            r = float(member.resistance)
            readings[member.component_id] = ComponentReading(
                voltage=current * r,
                current=current,
                power=current * current * r,
            )

    for battery in report.batteries:
        readings[battery.component_id] = ComponentReading(
            voltage=battery.voltage,
            current=total_current,
            power=battery.voltage * total_current,
        )

    # Ideal conductors: no voltage drop, no dissipation
    for comp in report.switches + report.conductors:
        readings[comp.component_id] = ComponentReading(voltage=0.0, current=total_current, power=0.0)

    return NetworkSolution(
        total_resistance=total_resistance,
        total_current=total_current,
        total_power=total_power,
        readings=readings,
        groups=groups,
    )


def open_circuit_readings(components: Sequence[ComponentData]) -> dict[str, ComponentReading]:
    """Zero current everywhere; batteries still show their EMF."""
    readings = {}
    for comp in components:
        voltage = comp.voltage if comp.is_battery else 0.0
        readings[comp.component_id] = ComponentReading(voltage=voltage, current=0.0, power=0.0)
    return readings


def short_circuit_readings(report: TopologyReport) -> dict[str, ComponentReading]:
    """Batteries report the fault sentinel as their current."""
    return {
        battery.component_id: ComponentReading(
            voltage=battery.voltage,
            current=SHORT_CIRCUIT_SENTINEL,
            power=battery.voltage * SHORT_CIRCUIT_SENTINEL,
        )
        for battery in report.batteries
    }
