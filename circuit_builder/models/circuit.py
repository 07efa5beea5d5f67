"""
CircuitModel - Central data store for circuit state.

Holds the placed components and wire segments. The analysis engine never
sees this object directly; it reads the immutable snapshot returned by
snapshot().
"""

from dataclasses import dataclass, field
from typing import Optional

from .component import COMPONENT_SYMBOLS, ComponentData
from .wire import WireData


@dataclass
class CircuitModel:
    """
    Central data store holding all circuit state.

    Components are kept in insertion order, which is also the order the
    analysis engine sees them in. Wire segments are independent of
    components: deleting a component leaves the wires around it in place.
    """

    components: dict[str, ComponentData] = field(default_factory=dict)
    wires: list[WireData] = field(default_factory=list)
    component_counter: dict[str, int] = field(default_factory=dict)

    # --- Component operations ---

    def next_component_id(self, component_type: str, reserve: bool = True) -> str:
        """Generate the next free id for a component type (R1, R2, B1, ...).

        With ``reserve=False`` the id is returned without advancing the counter.
        """
        symbol = COMPONENT_SYMBOLS.get(component_type, "X")
        count = self.component_counter.get(symbol, 0)
        while True:
            count += 1
            component_id = f"{symbol}{count}"
            if component_id not in self.components:
                break
        if reserve:
            self.component_counter[symbol] = count
        return component_id

    def add_component(self, component: ComponentData) -> None:
        """Add a component to the circuit."""
        self.components[component.component_id] = component

    def remove_component(self, component_id: str) -> Optional[ComponentData]:
        """Remove a component and return it, or None if it was not present."""
        return self.components.pop(component_id, None)

    # --- Wire operations ---

    def add_wire(self, wire: WireData) -> None:
        """Add a wire segment."""
        self.wires.append(wire)

    def remove_wire(self, wire_index: int) -> None:
        """Remove a wire by index."""
        if 0 <= wire_index < len(self.wires):
            del self.wires[wire_index]

    def find_wire(self, start: tuple[int, int], end: tuple[int, int]) -> int:
        """Return the index of the wire joining two positions, or -1."""
        for i, wire in enumerate(self.wires):
            if {wire.start, wire.end} == {start, end}:
                return i
        return -1

    # --- Circuit operations ---

    def snapshot(self) -> tuple[tuple[ComponentData, ...], tuple[WireData, ...]]:
        """Return the (components, wires) sequences handed to the analyzer."""
        return tuple(self.components.values()), tuple(self.wires)

    def clear(self) -> None:
        """Clear all circuit data."""
        self.components.clear()
        self.wires.clear()
        self.component_counter.clear()

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize circuit to dictionary (circuit JSON format)."""
        return {
            "components": [c.to_dict() for c in self.components.values()],
            "wires": [w.to_dict() for w in self.wires],
            "counters": self.component_counter.copy(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CircuitModel":
        """Deserialize circuit from dictionary."""
        model = cls()
        model.component_counter = dict(data.get("counters", {}))

        for comp_data in data.get("components", []):
            component = ComponentData.from_dict(comp_data)
            model.components[component.component_id] = component

        for wire_data in data.get("wires", []):
            model.wires.append(WireData.from_dict(wire_data))

        return model
