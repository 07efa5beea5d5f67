"""
ComponentData - Pure Python data model for placed circuit components.

Components sit on a rectangular grid. A component's anchor is a
(row, col) grid position and its orientation decides where the second
terminal lands, always TERMINAL_SPAN grid units away from the anchor.

Component types use display names as canonical identifiers:
'Battery', 'Resistor', 'Wire', 'Lightbulb', 'Switch'
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

# Component type definitions using display names (canonical)
COMPONENT_TYPES = [
    "Battery",
    "Resistor",
    "Wire",
    "Lightbulb",
    "Switch",
]

# Lightbulbs are resistors electrically; they only render differently
RESISTIVE_TYPES = {"Resistor", "Lightbulb"}

# Zero-resistance parts (a Switch only while closed)
CONDUCTOR_TYPES = {"Wire", "Switch"}

# Mapping of component types to id prefixes (B1, R1, W1, L1, S1)
COMPONENT_SYMBOLS = {
    "Battery": "B",
    "Resistor": "R",
    "Wire": "W",
    "Lightbulb": "L",
    "Switch": "S",
}

HORIZONTAL = "horizontal"
VERTICAL = "vertical"
ORIENTATIONS = (HORIZONTAL, VERTICAL)

# Short forms used by older circuit files
_ORIENTATION_ALIASES = {
    "h": HORIZONTAL,
    "v": VERTICAL,
    HORIZONTAL: HORIZONTAL,
    VERTICAL: VERTICAL,
}

# Distance in grid units between a component's two terminals
TERMINAL_SPAN = 2

# Default electrical values per component type
DEFAULT_VALUES = {
    "Battery": {"voltage": 9.0},
    "Resistor": {"resistance": 100.0},
    "Lightbulb": {"resistance": 100.0},
    "Switch": {"closed": False},
    "Wire": {},
}


class InvalidComponentError(ValueError):
    """Raised when a component record breaks the data contract.

    Unknown kinds and negative or non-finite electrical values are
    programming errors upstream, not user mistakes, so they are never
    folded into the analysis result.
    """


def normalize_orientation(orientation: str) -> str:
    """Map an orientation (or its one-letter alias) to its canonical name."""
    try:
        return _ORIENTATION_ALIASES[orientation]
    except (KeyError, TypeError):
        raise InvalidComponentError(f"Unknown orientation: {orientation!r}") from None


@dataclass
class ComponentData:
    """
    Pure Python data class representing a placed circuit component.

    Only the attribute matching the component type is meaningful:
    ``voltage`` for a Battery, ``resistance`` for a Resistor or
    Lightbulb, ``closed`` for a Switch.
    """

    component_id: str
    component_type: str
    position: tuple[int, int]  # (row, col) grid anchor
    orientation: str = HORIZONTAL
    voltage: Optional[float] = None
    resistance: Optional[float] = None
    closed: Optional[bool] = None

    def __post_init__(self):
        """Fill in the default electrical value for the component type."""
        defaults = DEFAULT_VALUES.get(self.component_type, {})
        if self.voltage is None and "voltage" in defaults:
            self.voltage = defaults["voltage"]
        if self.resistance is None and "resistance" in defaults:
            self.resistance = defaults["resistance"]
        if self.closed is None:
            # Switches are placed open
            self.closed = defaults.get("closed", True)

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    @property
    def is_battery(self) -> bool:
        return self.component_type == "Battery"

    @property
    def is_resistive(self) -> bool:
        return self.component_type in RESISTIVE_TYPES

    @property
    def is_switch(self) -> bool:
        return self.component_type == "Switch"

    @property
    def is_open_switch(self) -> bool:
        return self.is_switch and not self.closed

    @property
    def is_conductor(self) -> bool:
        """True for parts with no resistance between their terminals."""
        if self.is_switch:
            return self.closed
        return self.component_type in CONDUCTOR_TYPES

    def get_terminal_positions(self) -> list[tuple[int, int]]:
        """
        Return the two terminal positions as (row, col) grid coordinates.

        Horizontal parts extend to the right of the anchor, vertical parts
        extend downwards.
        """
        row, col = self.position
        if normalize_orientation(self.orientation) == HORIZONTAL:
            return [(row, col), (row, col + TERMINAL_SPAN)]
        return [(row, col), (row + TERMINAL_SPAN, col)]

    def validate(self) -> None:
        """
        Check the component against the data contract.

        Raises:
            InvalidComponentError: On an unknown type or orientation, or a
                negative or non-finite resistance/EMF.
        """
        if self.component_type not in COMPONENT_TYPES:
            raise InvalidComponentError(
                f"{self.component_id}: unknown component type {self.component_type!r}"
            )
        normalize_orientation(self.orientation)

        if self.is_battery:
            _check_magnitude(self.component_id, "voltage", self.voltage)
        elif self.is_resistive:
            _check_magnitude(self.component_id, "resistance", self.resistance)

    def with_value(self, value: float) -> "ComponentData":
        """Return a copy with the type's electrical magnitude replaced."""
        if self.is_battery:
            return replace(self, voltage=value)
        if self.is_resistive:
            return replace(self, resistance=value)
        raise InvalidComponentError(f"{self.component_id} ({self.component_type}) has no adjustable value")

    def get_value_label(self) -> str:
        """Short human readable value, e.g. '9 V', '100 Ω', 'open'."""
        if self.is_battery:
            return f"{self.voltage:g} V"
        if self.is_resistive:
            return f"{self.resistance:g} Ω"
        if self.is_switch:
            return "closed" if self.closed else "open"
        return ""

    def to_dict(self) -> dict:
        """Serialize component to dictionary (circuit JSON format)."""
        data = {
            "id": self.component_id,
            "type": self.component_type,
            "row": self.position[0],
            "col": self.position[1],
            "orientation": self.orientation,
        }
        if self.is_battery:
            data["voltage"] = self.voltage
        elif self.is_resistive:
            data["resistance"] = self.resistance
        elif self.is_switch:
            data["closed"] = self.closed
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ComponentData":
        """
        Deserialize component from dictionary.

        Accepts lower-case type names ('battery', 'lightbulb') and the
        one-letter orientations ('h', 'v') written by older files.
        """
        raw_type = data["type"]
        component_type = _TYPE_ALIASES.get(str(raw_type).lower(), raw_type)

        return cls(
            component_id=str(data["id"]),
            component_type=component_type,
            position=(int(data["row"]), int(data["col"])),
            orientation=normalize_orientation(data.get("orientation", HORIZONTAL)),
            voltage=data.get("voltage"),
            resistance=data.get("resistance"),
            closed=data.get("closed"),
        )

    def __repr__(self) -> str:
        return (
            f"ComponentData(id={self.component_id!r}, type={self.component_type!r}, "
            f"pos={self.position}, {self.orientation}, {self.get_value_label() or '-'})"
        )


_TYPE_ALIASES = {name.lower(): name for name in COMPONENT_TYPES}


def _check_magnitude(component_id: str, attribute: str, value) -> None:
    """Reject missing, negative, or non-finite electrical magnitudes."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidComponentError(f"{component_id}: {attribute} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidComponentError(f"{component_id}: {attribute} must be finite, got {value!r}")
    if value < 0:
        raise InvalidComponentError(f"{component_id}: {attribute} must not be negative, got {value!r}")
