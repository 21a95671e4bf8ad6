"""
Pytest configuration and fixtures for qcdraw tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the parent directory to path so qcdraw can be imported
sys.path.insert(0, str(Path(__file__).parent.parent))

import matplotlib
matplotlib.use("Agg")


# =============================================================================
# Test Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line(
        "markers", "integration: marks tests that render through matplotlib"
    )


# =============================================================================
# Fixtures - Circuits
# =============================================================================

@pytest.fixture
def empty_circuit():
    """Two qubits, no gates."""
    from qcdraw import Circuit
    return Circuit(2)


@pytest.fixture
def bell_circuit():
    """H on qubit 0 followed by CNOT(0 -> 1)."""
    from qcdraw import Circuit
    return Circuit(2).h(0).cnot(0, 1)


@pytest.fixture
def mixed_circuit():
    """Every gate family on three qubits, including an upward CNOT."""
    from qcdraw import Circuit
    circuit = Circuit(3)
    circuit.h(0).x(1).rz(2, np.pi / 2).cnot(2, 0).y(2).z(0)
    return circuit


# =============================================================================
# Fixtures - Surfaces and Styles
# =============================================================================

@pytest.fixture
def recording_surface():
    """Fresh recording surface."""
    from qcdraw import RecordingSurface
    return RecordingSurface()


@pytest.fixture
def default_style():
    from qcdraw import DEFAULT_STYLE
    return DEFAULT_STYLE


@pytest.fixture
def custom_overrides():
    """Partial override mapping touching geometry and colors."""
    return {
        "qubit_spacing": 60,
        "gate_spacing": 90,
        "gate_width": 30,
        "gate_height": 24,
        "gate_fill": "#e0f7fa",
        "gate_stroke": "#006064",
        "font_size": 16,
    }


# =============================================================================
# Utility Functions
# =============================================================================

@pytest.fixture
def render():
    """Fixture providing a draw-and-record helper."""
    def _render(circuit, styles=None):
        from qcdraw import RecordingSurface, draw
        surface = RecordingSurface()
        draw(circuit, surface, styles)
        return surface
    return _render


@pytest.fixture
def gate_calls():
    """Fixture returning the calls emitted after the baselines."""
    def _gate_calls(surface, num_qubits):
        # resize + one line per qubit
        return surface.calls[1 + num_qubits:]
    return _gate_calls
