"""Preset circuits - built-in example boards plus user-saved circuits."""

import json
import logging
from pathlib import Path
from typing import Optional

from models.circuit import CircuitModel
from models.component import VERTICAL, ComponentData
from models.wire import WireData

logger = logging.getLogger(__name__)


def wire_run(start: tuple[int, int], end: tuple[int, int]) -> list[WireData]:
    """
    Lay a straight run of unit wire segments from start to end.

    Raises:
        ValueError: If the points are not on the same row or column.
    """
    (r1, c1), (r2, c2) = start, end
    if r1 != r2 and c1 != c2:
        raise ValueError(f"Wire run must be straight: {start} -> {end}")

    d_row = (r2 > r1) - (r2 < r1)
    d_col = (c2 > c1) - (c2 < c1)
    segments = []
    row, col = r1, c1
    while (row, col) != (r2, c2):
        nxt = (row + d_row, col + d_col)
        segments.append(WireData(start=(row, col), end=nxt))
        row, col = nxt
    return segments


def _build(components: list[ComponentData], runs: list[tuple]) -> CircuitModel:
    model = CircuitModel()
    for comp in components:
        model.add_component(comp)
        symbol = comp.component_id.rstrip("0123456789")
        count = int(comp.component_id[len(symbol):])
        model.component_counter[symbol] = max(model.component_counter.get(symbol, 0), count)
    for start, end in runs:
        for segment in wire_run(start, end):
            model.add_wire(segment)
    return model


def _series() -> CircuitModel:
    """Battery, resistor, lightbulb and switch in one loop."""
    return _build(
        [
            ComponentData("B1", "Battery", (4, 1), VERTICAL, voltage=9.0),
            ComponentData("R1", "Resistor", (2, 3), resistance=100.0),
            ComponentData("L1", "Lightbulb", (2, 7), resistance=200.0),
            ComponentData("S1", "Switch", (2, 11), closed=True),
        ],
        [
            ((4, 1), (2, 1)),
            ((2, 1), (2, 3)),
            ((2, 5), (2, 7)),
            ((2, 9), (2, 11)),
            ((2, 13), (8, 13)),
            ((8, 13), (8, 1)),
            ((8, 1), (6, 1)),
        ],
    )


def _parallel() -> CircuitModel:
    """Two resistors between the same pair of bus bars."""
    return _build(
        [
            ComponentData("B1", "Battery", (4, 1), VERTICAL, voltage=12.0),
            ComponentData("R1", "Resistor", (2, 5), resistance=200.0),
            ComponentData("R2", "Resistor", (4, 5), resistance=300.0),
            ComponentData("S1", "Switch", (6, 8), closed=True),
        ],
        [
            ((4, 1), (2, 1)),
            ((2, 1), (2, 5)),
            ((2, 4), (4, 4)),
            ((4, 4), (4, 5)),
            ((2, 7), (2, 8)),
            ((2, 8), (6, 8)),
            ((4, 7), (4, 8)),
            ((6, 10), (8, 10)),
            ((8, 10), (8, 1)),
            ((8, 1), (6, 1)),
        ],
    )


def _wheatstone() -> CircuitModel:
    """
    Two two-resistor arms between the battery rails.

    Every resistor bridges its own node pair, so the series/parallel
    solver sums all four in series (750 Ω) instead of combining the arms.
    """
    return _build(
        [
            ComponentData("B1", "Battery", (4, 1), VERTICAL, voltage=10.0),
            ComponentData("R1", "Resistor", (2, 3), resistance=100.0),
            ComponentData("R2", "Resistor", (2, 7), resistance=200.0),
            ComponentData("R3", "Resistor", (8, 3), resistance=150.0),
            ComponentData("R4", "Resistor", (8, 7), resistance=300.0),
        ],
        [
            ((4, 1), (4, 3)),
            ((2, 3), (8, 3)),
            ((2, 5), (2, 7)),
            ((8, 5), (8, 7)),
            ((2, 9), (8, 9)),
            ((6, 1), (10, 1)),
            ((10, 1), (10, 11)),
            ((10, 11), (5, 11)),
            ((5, 11), (5, 9)),
        ],
    )


# Built-in presets shipped with the builder
BUILTIN_PRESETS = {
    "series": _series,
    "parallel": _parallel,
    "wheatstone": _wheatstone,
}

PRESET_NAMES = list(BUILTIN_PRESETS)


def build_preset(name: str) -> CircuitModel:
    """Return a fresh CircuitModel for a built-in preset."""
    try:
        factory = BUILTIN_PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset '{name}'. Choose from: {', '.join(PRESET_NAMES)}") from None
    return factory()


class PresetManager:
    """Manages circuit presets (built-in + user-defined).

    User presets are stored as circuit JSON in a user-writable file.
    Built-in presets are always available and cannot be deleted.
    """

    def __init__(self, preset_file: Optional[Path] = None):
        if preset_file is None:
            preset_file = self._default_preset_path()
        self._preset_file = Path(preset_file)
        self._user_presets: dict[str, dict] = {}
        self._load()

    @staticmethod
    def _default_preset_path() -> Path:
        """Return the default path for the user presets file."""
        return Path.home() / ".circuit-builder" / "presets.json"

    # --- Public API ---

    def get_preset_names(self) -> list[str]:
        """Return built-in names followed by user preset names."""
        return PRESET_NAMES + sorted(self._user_presets)

    def is_builtin(self, name: str) -> bool:
        return name in BUILTIN_PRESETS

    def load_preset(self, name: str) -> CircuitModel:
        """Build a CircuitModel for a preset by name."""
        if name in BUILTIN_PRESETS:
            return build_preset(name)
        if name in self._user_presets:
            return CircuitModel.from_dict(self._user_presets[name])
        raise ValueError(f"Unknown preset '{name}'")

    def save_preset(self, name: str, model: CircuitModel) -> None:
        """Save a user preset. Overwrites an existing user preset of that name."""
        if name in BUILTIN_PRESETS:
            raise ValueError(f"Cannot overwrite built-in preset '{name}'")
        self._user_presets[name] = model.to_dict()
        self._save()

    def delete_preset(self, name: str) -> bool:
        """Delete a user preset. Returns True if deleted, False if not found or built-in."""
        if name in BUILTIN_PRESETS or name not in self._user_presets:
            return False
        del self._user_presets[name]
        self._save()
        return True

    # --- Persistence ---

    def _load(self):
        """Load user presets from disk."""
        if not self._preset_file.exists():
            self._user_presets = {}
            return
        try:
            data = json.loads(self._preset_file.read_text())
            self._user_presets = dict(data.get("presets", {}))
        except (json.JSONDecodeError, OSError, AttributeError) as e:
            logger.warning("Failed to load presets from %s: %s", self._preset_file, e)
            self._user_presets = {}

    def _save(self):
        """Write user presets to disk."""
        try:
            self._preset_file.parent.mkdir(parents=True, exist_ok=True)
            data = {"presets": self._user_presets}
            self._preset_file.write_text(json.dumps(data, indent=2))
        except OSError as e:
            logger.error("Failed to save presets to %s: %s", self._preset_file, e)
