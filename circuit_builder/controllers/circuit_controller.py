"""
CircuitController - Orchestrates component and wire edits.

This module contains no UI dependencies. It manages the CircuitModel,
re-runs the analysis after every change and notifies views through an
observer pattern.
"""

import logging
from typing import Any, Callable, Optional

from analysis.analyzer import analyze_model
from analysis.presets import PresetManager
from analysis.results import AnalysisResult
from models.circuit import CircuitModel
from models.component import HORIZONTAL, ComponentData
from models.wire import WireData

logger = logging.getLogger(__name__)


class CircuitController:
    """
    Controller for circuit component and wire operations.

    Manages the CircuitModel and notifies registered observers when
    the model changes. Views register callbacks to stay in sync.

    Observer events:
        component_added (ComponentData) - A new component was added
        component_removed (str) - A component was removed (by ID)
        component_value_changed (ComponentData) - A component's value changed
        switch_toggled (ComponentData) - A switch was opened or closed
        wire_added (WireData) - A new wire was added
        wire_removed (int) - A wire was removed (by index)
        circuit_cleared (None) - The entire circuit was cleared
        model_loaded (None) - A preset or file replaced the circuit
        analysis_updated (AnalysisResult) - Fresh analysis of the circuit
    """

    def __init__(self, model: Optional[CircuitModel] = None,
                 preset_manager: Optional[PresetManager] = None):
        self.model = model or CircuitModel()
        self._preset_manager = preset_manager
        self._observers: list[Callable[[str, Any], None]] = []
        self._analysis = analyze_model(self.model)

    @property
    def analysis(self) -> AnalysisResult:
        """Result of the latest analysis of the current circuit."""
        return self._analysis

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    def _reanalyze(self) -> AnalysisResult:
        """Replace the analysis wholesale and tell observers."""
        self._analysis = analyze_model(self.model)
        self._notify('analysis_updated', self._analysis)
        return self._analysis

    # --- Component operations ---

    def add_component(self, component_type: str, position: tuple[int, int],
                      orientation: str = HORIZONTAL,
                      value: Optional[float] = None) -> ComponentData:
        """
        Create and add a new component to the circuit.

        Generates a unique ID using the component counter (B1, R1, R2, etc.).
        ``value`` sets the battery voltage or the resistance; the type's
        default is used when omitted.

        Returns:
            The newly created ComponentData.

        Raises:
            InvalidComponentError: If the type, orientation or value is invalid.
        """
        component = ComponentData(
            component_id=self.model.next_component_id(component_type, reserve=False),
            component_type=component_type,
            position=tuple(position),
            orientation=orientation,
        )
        if value is not None:
            component = component.with_value(value)
        component.validate()

        self.model.next_component_id(component_type)
        self.model.add_component(component)
        self._notify('component_added', component)
        self._reanalyze()
        return component

    def remove_component(self, component_id: str) -> None:
        """Remove a component. Wires around it stay in place."""
        if self.model.remove_component(component_id) is None:
            return
        self._notify('component_removed', component_id)
        self._reanalyze()

    def update_component_value(self, component_id: str, value: float) -> None:
        """Update a battery's voltage or a resistor/lightbulb's resistance."""
        component = self.model.components.get(component_id)
        if component is None:
            return
        updated = component.with_value(value)
        updated.validate()
        self.model.components[component_id] = updated
        self._notify('component_value_changed', updated)
        self._reanalyze()

    def toggle_switch(self, component_id: str) -> Optional[ComponentData]:
        """Open a closed switch or close an open one."""
        component = self.model.components.get(component_id)
        if component is None or not component.is_switch:
            return None
        component.closed = not component.closed
        self._notify('switch_toggled', component)
        self._reanalyze()
        return component

    # --- Wire operations ---

    def add_wire(self, start: tuple[int, int], end: tuple[int, int]) -> Optional[WireData]:
        """
        Add a wire segment between two grid positions.

        Returns:
            The new WireData, or None if the segment already exists or has
            zero length.
        """
        start, end = tuple(start), tuple(end)
        if start == end or self.model.find_wire(start, end) >= 0:
            return None
        wire = WireData(start=start, end=end)
        self.model.add_wire(wire)
        self._notify('wire_added', wire)
        self._reanalyze()
        return wire

    def remove_wire(self, wire_index: int) -> None:
        """Remove a wire by index."""
        if 0 <= wire_index < len(self.model.wires):
            self.model.remove_wire(wire_index)
            self._notify('wire_removed', wire_index)
            self._reanalyze()

    # --- Circuit operations ---

    def clear_circuit(self) -> None:
        """Clear the entire circuit."""
        self.model.clear()
        self._notify('circuit_cleared', None)
        self._reanalyze()

    def load_model(self, model: CircuitModel) -> None:
        """Replace the circuit with another model."""
        self.model = model
        self._notify('model_loaded', None)
        self._reanalyze()

    def load_preset(self, name: str) -> None:
        """Replace the circuit with a built-in or user preset."""
        if self._preset_manager is None:
            self._preset_manager = PresetManager()
        self.load_model(self._preset_manager.load_preset(name))
        logger.info("Loaded preset '%s'", name)
