"""
Circuit model

An ordered, append-only list of gates on a fixed number of qubits.
Insertion order is the left-to-right column order of the diagram.

Example:
--------
    >>> from qcdraw import Circuit
    >>>
    >>> circuit = Circuit(2)
    >>> circuit.h(0).cnot(0, 1)
    >>> len(circuit)
    2
"""

from typing import Iterator, Tuple
import numbers

from .gates import (
    CircuitError,
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


class Circuit:
    """
    Quantum circuit diagram model.

    Args:
        num_qubits: Number of qubit lines (positive integer)

    Example:
        >>> circuit = Circuit(3)
        >>> circuit.add_gate(HadamardGate(0))
        >>> circuit.cnot(0, 1).cnot(1, 2)
    """

    def __init__(self, num_qubits: int):
        if isinstance(num_qubits, bool) or not isinstance(num_qubits, numbers.Integral):
            raise CircuitError(f"num_qubits must be a positive integer, got {num_qubits!r}")
        if num_qubits < 1:
            raise CircuitError(f"num_qubits must be a positive integer, got {num_qubits}")

        self._num_qubits = int(num_qubits)
        self._gates = []

    @property
    def num_qubits(self) -> int:
        return self._num_qubits

    @property
    def gates(self) -> Tuple[Gate, ...]:
        """Gates in insertion (column) order."""
        return tuple(self._gates)

    def add_gate(self, gate: Gate) -> 'Circuit':
        """
        Append a gate as the next column.

        Raises:
            TypeError: if ``gate`` is not a Gate
            CircuitError: if a gate qubit is outside ``[0, num_qubits)``
        """
        if not isinstance(gate, Gate):
            raise TypeError(f"Expected a Gate, got {type(gate).__name__}")
        for qubit in gate.targets:
            if qubit >= self._num_qubits:
                raise CircuitError(
                    f"Qubit {qubit} out of range for {self._num_qubits}-qubit circuit"
                )
        self._gates.append(gate)
        return self

    # Builders
    def h(self, qubit: int) -> 'Circuit':
        """Add Hadamard gate."""
        return self.add_gate(HadamardGate(qubit))

    def x(self, qubit: int) -> 'Circuit':
        """Add Pauli-X gate."""
        return self.add_gate(PauliXGate(qubit))

    def y(self, qubit: int) -> 'Circuit':
        """Add Pauli-Y gate."""
        return self.add_gate(PauliYGate(qubit))

    def z(self, qubit: int) -> 'Circuit':
        """Add Pauli-Z gate."""
        return self.add_gate(PauliZGate(qubit))

    def s(self, qubit: int) -> 'Circuit':
        """Add S gate."""
        return self.add_gate(SGate(qubit))

    def t(self, qubit: int) -> 'Circuit':
        """Add T gate."""
        return self.add_gate(TGate(qubit))

    def rx(self, qubit: int, angle: float) -> 'Circuit':
        """Add RX rotation gate (angle in radians)."""
        return self.add_gate(RotationGate("X", qubit, angle))

    def ry(self, qubit: int, angle: float) -> 'Circuit':
        """Add RY rotation gate (angle in radians)."""
        return self.add_gate(RotationGate("Y", qubit, angle))

    def rz(self, qubit: int, angle: float) -> 'Circuit':
        """Add RZ rotation gate (angle in radians)."""
        return self.add_gate(RotationGate("Z", qubit, angle))

    def cnot(self, control: int, target: int) -> 'Circuit':
        """Add CNOT gate."""
        return self.add_gate(CNOTGate(control, target))

    # CNOT alias
    def cx(self, control: int, target: int) -> 'Circuit':
        """Add CNOT gate (alias for cnot)."""
        return self.cnot(control, target)

    def __len__(self) -> int:
        return len(self._gates)

    def __iter__(self) -> Iterator[Gate]:
        return iter(tuple(self._gates))

    def __repr__(self) -> str:
        return f"Circuit({self._num_qubits} qubits, {len(self._gates)} gates)"
