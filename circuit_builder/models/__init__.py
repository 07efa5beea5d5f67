"""
Pure Python data models for the circuit builder.

This package holds the plain data classes describing a circuit: placed
components, wire segments, and the electrical nodes derived from them.
"""

from .circuit import CircuitModel
from .component import (
    COMPONENT_SYMBOLS,
    COMPONENT_TYPES,
    DEFAULT_VALUES,
    HORIZONTAL,
    ORIENTATIONS,
    RESISTIVE_TYPES,
    TERMINAL_SPAN,
    VERTICAL,
    ComponentData,
    InvalidComponentError,
)
from .node import NodeData
from .wire import WireData

__all__ = [
    "CircuitModel",
    "ComponentData",
    "COMPONENT_TYPES",
    "COMPONENT_SYMBOLS",
    "DEFAULT_VALUES",
    "RESISTIVE_TYPES",
    "ORIENTATIONS",
    "HORIZONTAL",
    "VERTICAL",
    "TERMINAL_SPAN",
    "InvalidComponentError",
    "WireData",
    "NodeData",
]
