"""
analysis/results.py

Immutable result values handed to the rendering layer. A result is built
once per analysis and replaced wholesale by the next one.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .topology import CircuitStatus

# Fault magnitude reported for current/power when a source is shorted.
# Never a measurement; check AnalysisResult.short_circuit first.
SHORT_CIRCUIT_SENTINEL = 999.0

_STATUS_DETAILS = {
    CircuitStatus.NO_SOURCE: "No battery in the circuit",
    CircuitStatus.DISCONNECTED: "Components are not all connected",
    CircuitStatus.OPEN: "Open switch: no current flows",
    CircuitStatus.SHORT_CIRCUIT: "Short circuit: battery has no load",
    CircuitStatus.CLOSED: "Circuit complete",
}


@dataclass(frozen=True)
class ComponentReading:
    """Voltage across, current through, and power of one component."""

    voltage: float = 0.0
    current: float = 0.0
    power: float = 0.0

    def to_dict(self) -> dict:
        return {"voltage": self.voltage, "current": self.current, "power": self.power}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete outcome of one circuit analysis.

    When ``valid`` is False the per-component data is empty and nothing
    should be displayed. When ``short_circuit`` is True the totals hold
    SHORT_CIRCUIT_SENTINEL and must be shown as a fault, not a reading.
    """

    status: CircuitStatus
    total_resistance: float = 0.0
    total_current: float = 0.0
    total_power: float = 0.0
    total_voltage: float = 0.0
    component_data: Mapping[str, ComponentReading] = field(default_factory=lambda: MappingProxyType({}))
    resistive_ids: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """False when there is nothing meaningful to display."""
        return self.status not in (CircuitStatus.NO_SOURCE, CircuitStatus.DISCONNECTED)

    @property
    def short_circuit(self) -> bool:
        return self.status == CircuitStatus.SHORT_CIRCUIT

    @property
    def current_flowing(self) -> bool:
        """True when per-component currents can drive the animation."""
        return self.valid and not self.short_circuit

    @property
    def status_detail(self) -> str:
        return _STATUS_DETAILS[self.status]

    @property
    def dissipated_power(self) -> float:
        """Sum of the power reported by resistive components."""
        return sum(self.component_data[cid].power for cid in self.resistive_ids if cid in self.component_data)

    def get(self, component_id: str) -> Optional[ComponentReading]:
        """Return the reading for a component, or None."""
        return self.component_data.get(component_id)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "status": self.status.value,
            "valid": self.valid,
            "short_circuit": self.short_circuit,
            "total_voltage": self.total_voltage,
            "total_resistance": self.total_resistance,
            "total_current": self.total_current,
            "total_power": self.total_power,
            "components": {cid: reading.to_dict() for cid, reading in self.component_data.items()},
            "warnings": list(self.warnings),
        }


def assemble_result(
    status: CircuitStatus,
    readings: Optional[dict[str, ComponentReading]] = None,
    total_resistance: float = 0.0,
    total_current: float = 0.0,
    total_power: float = 0.0,
    total_voltage: float = 0.0,
    resistive_ids=(),
    warnings=(),
) -> AnalysisResult:
    """Freeze computed values into an AnalysisResult."""
    if status in (CircuitStatus.NO_SOURCE, CircuitStatus.DISCONNECTED):
        # Nothing per-component is meaningful for an invalid circuit
        readings = {}
        total_resistance = total_current = total_power = 0.0

    return AnalysisResult(
        status=status,
        total_resistance=float(total_resistance),
        total_current=float(total_current),
        total_power=float(total_power),
        total_voltage=float(total_voltage),
        component_data=MappingProxyType(dict(readings or {})),
        resistive_ids=tuple(resistive_ids),
        warnings=tuple(warnings),
    )
