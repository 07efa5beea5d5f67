"""
analysis/circuit_validator.py

Pre-analysis circuit checks for file loading and the command line.
The analyzer itself never needs this: it classifies bad topology on its
own. This module turns the same problems into readable messages.
"""

from models.component import InvalidComponentError

from .connectivity import resolve_connectivity
from .graph import build_adjacency, position_key
from .topology import find_disconnected

# Grid size of the builder board
GRID_ROWS = 15
GRID_COLS = 20


def _on_grid(position) -> bool:
    row, col = position
    return 0 <= row < GRID_ROWS and 0 <= col < GRID_COLS


def validate_circuit(components, wires):
    """
    Validate a circuit before analysis.

    Args:
        components: Sequence of ComponentData
        wires: Sequence of WireData

    Returns:
        (is_valid, errors, warnings) where:
            is_valid: False if any errors found
            errors: problems that make the data unusable
            warnings: the circuit will analyze, but not as a working loop
    """
    errors = []
    warnings = []

    # 1. Circuit must have components
    if not components:
        errors.append("Circuit has no components. Add a battery and a load.")
        return False, errors, warnings

    # 2. Component records must honour the data contract
    seen_ids = set()
    for comp in components:
        if comp.component_id in seen_ids:
            errors.append(f"Duplicate component id '{comp.component_id}'.")
        seen_ids.add(comp.component_id)
        try:
            comp.validate()
        except InvalidComponentError as e:
            errors.append(str(e))

    if errors:
        return False, errors, warnings

    # 3. Must have a source
    if not any(comp.is_battery for comp in components):
        errors.append("Circuit has no battery. Add a battery to drive current.")

    # 4. Placement checks
    for comp in components:
        off_grid = [t for t in comp.get_terminal_positions() if not _on_grid(t)]
        if off_grid:
            warnings.append(f"{comp.component_id} ({comp.component_type}) extends off the board at {off_grid[0]}.")

    for i, wire in enumerate(wires):
        if wire.start == wire.end:
            warnings.append(f"Wire #{i + 1} starts and ends at {wire.start}.")
        elif not wire.is_adjacent():
            warnings.append(f"Wire #{i + 1} joins non-adjacent points {wire.start} and {wire.end}.")

    # 5. Terminals with nothing attached
    use_count: dict[str, int] = {}
    for wire in wires:
        for end in wire.get_endpoints():
            key = position_key(end)
            use_count[key] = use_count.get(key, 0) + 1
    for comp in components:
        for t in comp.get_terminal_positions():
            key = position_key(t)
            use_count[key] = use_count.get(key, 0) + 1

    for comp in components:
        loose = [i for i, t in enumerate(comp.get_terminal_positions()) if use_count[position_key(t)] < 2]
        if len(loose) == 2:
            warnings.append(
                f"{comp.component_id} ({comp.component_type}) has no connections. "
                f"Wire its terminals into the circuit."
            )
        elif loose:
            warnings.append(
                f"{comp.component_id} ({comp.component_type}) has unconnected terminal(s): {loose}."
            )

    # 6. Topology checks
    connectivity = resolve_connectivity(build_adjacency(components, wires))
    disconnected = find_disconnected(components, connectivity)
    if disconnected:
        warnings.append("Components not connected to the rest of the circuit: " + ", ".join(disconnected) + ".")

    open_switches = [comp.component_id for comp in components if comp.is_open_switch]
    if open_switches:
        warnings.append("Open switch(es) " + ", ".join(open_switches) + " stop all current.")

    if not any(comp.is_resistive for comp in components):
        warnings.append("Circuit has no resistor or lightbulb. A closed loop would be a short circuit.")

    is_valid = len(errors) == 0
    return is_valid, errors, warnings
