"""
analysis/sweep.py

Parameter sweep: re-run the analyzer while stepping one component's value
(battery voltage or resistance) across a range, collecting the totals.
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from .analyzer import analyze_circuit
from .results import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Totals from each step of a parameter sweep."""

    component_id: str
    parameter: str
    values: np.ndarray
    total_current: np.ndarray
    total_power: np.ndarray
    component_current: np.ndarray
    statuses: list[str] = field(default_factory=list)
    results: list[AnalysisResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def to_rows(self) -> list[list]:
        """One row per step: value, status, total current, total power, component current."""
        return [
            [float(v), s, float(i), float(p), float(c)]
            for v, s, i, p, c in zip(
                self.values, self.statuses, self.total_current, self.total_power, self.component_current
            )
        ]

    @property
    def headers(self) -> list[str]:
        unit = "V" if self.parameter == "voltage" else "Ohm"
        return [
            f"{self.component_id} {self.parameter} ({unit})",
            "Status",
            "Total Current (A)",
            "Total Power (W)",
            f"{self.component_id} Current (A)",
        ]


def sweep_values(start: float, stop: float, points: int) -> np.ndarray:
    """Evenly spaced sweep values including both end points."""
    if points < 1:
        raise ValueError(f"Sweep needs at least one point, got {points}")
    if start < 0 or stop < 0:
        raise ValueError("Sweep values must be non-negative")
    return np.linspace(start, stop, points)


def sweep_parameter(components, wires, component_id: str, values) -> SweepResult:
    """
    Analyze the circuit once per value of a component's parameter.

    Args:
        components: Sequence of ComponentData
        wires: Sequence of WireData
        component_id: Component whose value is stepped
        values: Iterable of voltages (battery) or resistances

    Returns:
        SweepResult with one entry per value. The components passed in are
        never modified.

    Raises:
        ValueError: If the component does not exist or has no sweepable value.
    """
    components = list(components)
    index = next((i for i, c in enumerate(components) if c.component_id == component_id), None)
    if index is None:
        raise ValueError(f"No component with id '{component_id}'")
    target = components[index]
    if target.is_battery:
        parameter = "voltage"
    elif target.is_resistive:
        parameter = "resistance"
    else:
        raise ValueError(f"{component_id} ({target.component_type}) has no value to sweep")

    values = np.asarray(values, dtype=float)
    totals_i, totals_p, comp_i = [], [], []
    statuses, results = [], []
    for value in values:
        trial = list(components)
        trial[index] = target.with_value(float(value))
        result = analyze_circuit(trial, wires)
        reading = result.get(component_id)
        totals_i.append(result.total_current)
        totals_p.append(result.total_power)
        comp_i.append(reading.current if reading is not None else 0.0)
        statuses.append(result.status.value)
        results.append(result)

    logger.debug("Swept %s %s over %d points", component_id, parameter, len(values))
    return SweepResult(
        component_id=component_id,
        parameter=parameter,
        values=values,
        total_current=np.array(totals_i, dtype=float),
        total_power=np.array(totals_p, dtype=float),
        component_current=np.array(comp_i, dtype=float),
        statuses=statuses,
        results=results,
    )


def compute_sweep_statistics(values):
    """Compute statistics for a list of numeric values.

    Args:
        values: list or array of float values

    Returns:
        dict with mean, std, min, max, median, count
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise ValueError("No values to summarize")
    return {
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "median": float(np.median(arr)),
        "count": len(arr),
    }
