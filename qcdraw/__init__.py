"""
qcdraw - Quantum Circuit Diagrams
=================================

Static, labeled quantum circuit diagrams: qubit lines with gate symbols
placed along a time axis, drawn through a small set of vector primitives.

Features:
- Hadamard, Pauli, S/T, rotation and CNOT gates
- One column per gate, in insertion order
- Configurable spacing, sizes, colors and fonts (plus named presets)
- Pluggable graphics surfaces: matplotlib (svg/png/pdf/raster) or recording

Quick Start:
    >>> from qcdraw import Circuit, draw_circuit
    >>> circuit = Circuit(2)
    >>> circuit.h(0).cnot(0, 1)
    >>> fig = draw_circuit(circuit, "bell.svg", gate_fill="#e0f7fa")
"""

__version__ = "0.1.0"

from .gates import (
    CircuitError,
    GateKind,
    Gate,
    HadamardGate,
    PauliXGate,
    PauliYGate,
    PauliZGate,
    SGate,
    TGate,
    CNOTGate,
    RotationGate,
)

from .circuit import Circuit

from .styles import (
    StyleConfig,
    DEFAULT_STYLE,
    STYLE_PRESETS,
    resolve_style,
)

from .surfaces import (
    GraphicsSurface,
    RecordingSurface,
    DrawCall,
    MatplotlibSurface,
)

from .renderer import (
    Renderer,
    draw,
    draw_circuit,
)

__all__ = [
    'CircuitError',
    'GateKind',
    'Gate',
    'HadamardGate',
    'PauliXGate',
    'PauliYGate',
    'PauliZGate',
    'SGate',
    'TGate',
    'CNOTGate',
    'RotationGate',
    'Circuit',
    'StyleConfig',
    'DEFAULT_STYLE',
    'STYLE_PRESETS',
    'resolve_style',
    'GraphicsSurface',
    'RecordingSurface',
    'DrawCall',
    'MatplotlibSurface',
    'Renderer',
    'draw',
    'draw_circuit',
]
