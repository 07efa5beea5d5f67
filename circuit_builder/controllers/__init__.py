"""
Controllers for the circuit builder.

This package contains UI-free controller classes that orchestrate
operations between models and views using an observer pattern.
"""

from .circuit_controller import CircuitController
from .file_controller import FileController, validate_circuit_data

__all__ = [
    "CircuitController",
    "FileController",
    "validate_circuit_data",
]
