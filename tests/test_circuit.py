"""
Tests for the Circuit model.
"""

import numpy as np
import pytest

from qcdraw import (
    Circuit,
    CircuitError,
    CNOTGate,
    GateKind,
    HadamardGate,
    PauliXGate,
    RotationGate,
)


class TestCircuitCreation:
    """Tests for circuit initialization."""

    def test_create(self):
        circuit = Circuit(3)
        assert circuit.num_qubits == 3
        assert circuit.gates == ()
        assert len(circuit) == 0

    def test_invalid_qubit_count_zero(self):
        """Zero qubits should raise ValueError."""
        with pytest.raises(ValueError):
            Circuit(0)

    def test_invalid_qubit_count_negative(self):
        """Negative qubits should raise ValueError."""
        with pytest.raises(CircuitError):
            Circuit(-1)

    @pytest.mark.parametrize("value", [1.0, "2", None, True])
    def test_invalid_qubit_count_type(self, value):
        """Non-integer qubit counts should raise CircuitError."""
        with pytest.raises(CircuitError):
            Circuit(value)

    def test_numpy_integer_count(self):
        assert Circuit(np.int32(4)).num_qubits == 4

    def test_repr(self, bell_circuit):
        """Repr should show qubit and gate counts."""
        r = repr(bell_circuit)
        assert "2 qubits" in r
        assert "2 gates" in r


class TestAddGate:
    """Tests for appending gates."""

    def test_insertion_order_preserved(self):
        """Gates come back in the order they were added."""
        circuit = Circuit(3)
        a, b, c = PauliXGate(2), HadamardGate(0), CNOTGate(1, 0)
        circuit.add_gate(a)
        circuit.add_gate(b)
        circuit.add_gate(c)
        assert circuit.gates == (a, b, c)
        assert list(circuit) == [a, b, c]

    def test_add_gate_returns_circuit(self):
        circuit = Circuit(1)
        assert circuit.add_gate(HadamardGate(0)) is circuit

    def test_gates_view_is_read_only(self, bell_circuit):
        """Mutating the returned view does not touch the circuit."""
        gates = bell_circuit.gates
        assert isinstance(gates, tuple)
        with pytest.raises(AttributeError):
            gates.append(HadamardGate(0))
        assert len(bell_circuit) == 2

    def test_out_of_range_target_rejected(self):
        """Qubit index >= num_qubits fails at append time."""
        circuit = Circuit(2)
        with pytest.raises(CircuitError):
            circuit.add_gate(HadamardGate(2))
        assert len(circuit) == 0

    def test_out_of_range_cnot_target_rejected(self):
        circuit = Circuit(2)
        with pytest.raises(CircuitError):
            circuit.add_gate(CNOTGate(0, 5))
        with pytest.raises(CircuitError):
            circuit.cnot(3, 1)
        assert len(circuit) == 0

    def test_non_gate_rejected(self):
        with pytest.raises(TypeError):
            Circuit(1).add_gate("H")

    def test_num_qubits_read_only(self):
        circuit = Circuit(2)
        with pytest.raises(AttributeError):
            circuit.num_qubits = 5


class TestBuilders:
    """Tests for fluent gate builders."""

    def test_chain(self):
        """Builders append and return the circuit."""
        circuit = Circuit(2)
        circuit.h(0).x(1).y(0).z(1).s(0).t(1).cnot(0, 1).cx(1, 0)
        labels = [g.label for g in circuit.gates]
        assert labels == ["H", "X", "Y", "Z", "S", "T", "CNOT", "CNOT"]
        assert circuit.gates[-1].targets == (1, 0)

    def test_rotation_builders(self):
        circuit = Circuit(1)
        circuit.rx(0, np.pi / 2).ry(0, np.pi / 4).rz(0, np.pi)
        assert [g.label for g in circuit.gates] == ["RX(90.0°)", "RY(45.0°)", "RZ(180.0°)"]
        assert all(g.kind is GateKind.ROTATION for g in circuit.gates)
        assert circuit.gates[2] == RotationGate("Z", 0, np.pi)

    def test_builder_validates(self):
        """Builders surface gate construction errors."""
        circuit = Circuit(2)
        with pytest.raises(CircuitError):
            circuit.cnot(1, 1)
        with pytest.raises(CircuitError):
            circuit.h(-1)
