"""
FileController - Handles circuit file I/O.

File dialog interaction is the responsibility of the view layer.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from models.circuit import CircuitModel

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_circuit_data(data) -> None:
    """
    Validate JSON structure before loading.

    Raises ValueError with a descriptive message if anything is wrong.
    Electrical values are range-checked later by ComponentData.validate().
    """
    if not isinstance(data, dict):
        raise ValueError("File does not contain a valid circuit object.")

    if "components" not in data or not isinstance(data["components"], list):
        raise ValueError("Missing or invalid 'components' list.")
    if "wires" not in data or not isinstance(data["wires"], list):
        raise ValueError("Missing or invalid 'wires' list.")
    if "counters" in data and not isinstance(data["counters"], dict):
        raise ValueError("Invalid 'counters' object.")

    comp_ids = set()
    for i, comp in enumerate(data["components"]):
        if not isinstance(comp, dict):
            raise ValueError(f"Component #{i + 1} is not an object.")
        for key in ("id", "type", "row", "col"):
            if key not in comp:
                raise ValueError(f"Component #{i + 1} is missing required field '{key}'.")
        if not _is_int(comp["row"]) or not _is_int(comp["col"]):
            raise ValueError(f"Component '{comp['id']}' position values must be integers.")
        for key in ("voltage", "resistance"):
            if key in comp and (isinstance(comp[key], bool) or not isinstance(comp[key], (int, float))):
                raise ValueError(f"Component '{comp['id']}' {key} must be numeric.")
        if "closed" in comp and not isinstance(comp["closed"], bool):
            raise ValueError(f"Component '{comp['id']}' closed must be true or false.")
        if str(comp["id"]) in comp_ids:
            raise ValueError(f"Duplicate component id '{comp['id']}'.")
        comp_ids.add(str(comp["id"]))

    for i, wire in enumerate(data["wires"]):
        if not isinstance(wire, dict):
            raise ValueError(f"Wire #{i + 1} is not an object.")
        for key in ("r1", "c1", "r2", "c2"):
            if key not in wire:
                raise ValueError(f"Wire #{i + 1} is missing required field '{key}'.")
            if not _is_int(wire[key]):
                raise ValueError(f"Wire #{i + 1} field '{key}' must be an integer.")


class FileController:
    """
    Manages circuit file I/O.

    Handles saving/loading circuit data as JSON and tracking
    the current file path for quick-save.
    """

    def __init__(self, model: Optional[CircuitModel] = None, circuit_ctrl=None):
        self.model = model or CircuitModel()
        self.circuit_ctrl = circuit_ctrl  # For observer notifications and re-analysis
        self.current_file: Optional[Path] = None

    def new_circuit(self) -> None:
        """Clear the circuit and reset file state."""
        self.model.clear()
        self.current_file = None
        if self.circuit_ctrl:
            self.circuit_ctrl.load_model(self.model)

    def save_circuit(self, filepath) -> None:
        """
        Save circuit to JSON file.

        Args:
            filepath: Path or string to save to.

        Raises:
            OSError: If the file cannot be written.
        """
        filepath = Path(filepath)
        data = self.model.to_dict()
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        self.current_file = filepath
        logger.debug("Saved circuit to %s", filepath)

        if self.circuit_ctrl:
            self.circuit_ctrl._notify("model_saved", None)

    def load_circuit(self, filepath) -> None:
        """
        Load circuit from JSON file.

        Validates JSON structure before loading. Updates the model
        in place (preserving the reference so views stay connected).

        Args:
            filepath: Path or string to load from.

        Raises:
            json.JSONDecodeError: If file is not valid JSON.
            ValueError: If file structure or a component is invalid.
            OSError: If the file cannot be read.
        """
        filepath = Path(filepath)
        with open(filepath, "r") as f:
            data = json.load(f)

        validate_circuit_data(data)

        new_model = CircuitModel.from_dict(data)
        for component in new_model.components.values():
            component.validate()

        # Update current model in place (preserving reference)
        self.model.clear()
        self.model.components = new_model.components
        self.model.wires = new_model.wires
        self.model.component_counter = new_model.component_counter

        self.current_file = filepath
        logger.debug("Loaded circuit from %s", filepath)

        if self.circuit_ctrl:
            self.circuit_ctrl.load_model(self.model)

    def has_file(self) -> bool:
        """Return whether a current file path is set (for quick-save)."""
        return self.current_file is not None
