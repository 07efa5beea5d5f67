from .analyzer import analyze_circuit, analyze_model
from .circuit_validator import validate_circuit
from .connectivity import UnionFind, resolve_connectivity
from .graph import build_adjacency, build_conductor_adjacency, node_key
from .presets import PRESET_NAMES, PresetManager, build_preset
from .results import SHORT_CIRCUIT_SENTINEL, AnalysisResult, ComponentReading
from .sweep import SweepResult, compute_sweep_statistics, sweep_parameter, sweep_values
from .topology import CircuitStatus, classify_topology

__all__ = [
    'analyze_circuit', 'analyze_model', 'validate_circuit',
    'UnionFind', 'resolve_connectivity',
    'build_adjacency', 'build_conductor_adjacency', 'node_key',
    'PRESET_NAMES', 'PresetManager', 'build_preset',
    'SHORT_CIRCUIT_SENTINEL', 'AnalysisResult', 'ComponentReading',
    'SweepResult', 'compute_sweep_statistics', 'sweep_parameter', 'sweep_values',
    'CircuitStatus', 'classify_topology',
]
