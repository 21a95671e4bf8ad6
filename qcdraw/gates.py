"""
Gate records for circuit diagrams

Every gate carries a closed ``GateKind`` tag that tells the renderer which
glyph to draw, a display label, and the qubit indices it acts on.

Example:
--------
    >>> from qcdraw.gates import HadamardGate, CNOTGate, RotationGate
    >>> HadamardGate(0).label
    'H'
    >>> RotationGate("Y", 1, math.pi / 4).label
    'RY(45.0°)'
"""

from typing import Optional, Tuple
from dataclasses import dataclass
from enum import Enum
import math
import numbers


class CircuitError(ValueError):
    """Exception raised for invalid gates and circuits"""
    pass


class GateKind(Enum):
    """Glyph families understood by the renderer"""
    SINGLE = "single"                   # Labeled box on one qubit
    ROTATION = "rotation"               # Labeled box, smaller label font
    CONTROL_TARGET = "control_target"   # Control dot, connector, target circle

    @property
    def arity(self) -> int:
        """Number of qubits a gate of this kind acts on."""
        return 2 if self is GateKind.CONTROL_TARGET else 1


ROTATION_AXES = ("X", "Y", "Z")


def _check_qubit(qubit) -> int:
    if isinstance(qubit, bool) or not isinstance(qubit, numbers.Integral):
        raise CircuitError(f"Qubit index must be an integer, got {qubit!r}")
    if qubit < 0:
        raise CircuitError(f"Qubit index must be a non-negative integer, got {qubit}")
    return int(qubit)


@dataclass(frozen=True)
class Gate:
    """
    Gate placed on a circuit diagram.

    Parameters:
    -----------
    kind : GateKind
        Glyph family used to draw the gate
    label : str
        Text shown inside the gate box
    targets : tuple of int
        Qubit indices, ``(control, target)`` for control-target gates
    angle : float, optional
        Rotation angle in radians (rotation gates only)
    """
    kind: GateKind
    label: str
    targets: Tuple[int, ...]
    angle: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.kind, GateKind):
            raise CircuitError(f"Gate kind must be a GateKind, got {self.kind!r}")

        targets = tuple(_check_qubit(q) for q in self.targets)
        if len(targets) != self.kind.arity:
            raise CircuitError(
                f"{self.kind.value} gate needs {self.kind.arity} qubit(s), got {len(targets)}"
            )
        if len(set(targets)) != len(targets):
            raise CircuitError("Control qubit and target qubit must be different.")

        if self.kind is GateKind.ROTATION:
            if self.angle is None:
                raise CircuitError("Rotation gates require an angle")
            object.__setattr__(self, "angle", float(self.angle))
        elif self.angle is not None:
            raise CircuitError(f"Only rotation gates carry an angle, got {self.kind.value}")

        object.__setattr__(self, "targets", targets)

    @property
    def qubits(self) -> Tuple[int, ...]:
        """Alias for ``targets``."""
        return self.targets


class HadamardGate(Gate):
    """Hadamard gate, drawn as an ``H`` box."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "H", (qubit,))


class PauliXGate(Gate):
    """Pauli-X (NOT) gate."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "X", (qubit,))


class PauliYGate(Gate):
    """Pauli-Y gate."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "Y", (qubit,))


class PauliZGate(Gate):
    """Pauli-Z (phase flip) gate."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "Z", (qubit,))


class SGate(Gate):
    """S (sqrt Z) gate."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "S", (qubit,))


class TGate(Gate):
    """T (pi/8) gate."""

    def __init__(self, qubit: int):
        super().__init__(GateKind.SINGLE, "T", (qubit,))


class CNOTGate(Gate):
    """
    Controlled-NOT gate.

    Drawn as a control dot on ``control`` joined by a vertical line to a
    circled plus on ``target``. The control may sit above or below the
    target.
    """

    def __init__(self, control: int, target: int):
        super().__init__(GateKind.CONTROL_TARGET, "CNOT", (control, target))

    @property
    def control(self) -> int:
        return self.targets[0]

    @property
    def target(self) -> int:
        return self.targets[1]


class RotationGate(Gate):
    """
    Rotation about the X, Y or Z axis.

    The label shows the axis and the angle in degrees with one decimal,
    e.g. ``RX(90.0°)``; ``angle`` keeps the radians value.

    Parameters:
    -----------
    axis : str
        Rotation axis, one of ``'X'``, ``'Y'``, ``'Z'``
    qubit : int
        Qubit the rotation acts on
    angle : float
        Rotation angle in radians
    """

    def __init__(self, axis: str, qubit: int, angle: float):
        _check_qubit(qubit)
        if not isinstance(axis, str) or axis not in ROTATION_AXES:
            raise CircuitError(f"Axis must be 'X', 'Y', or 'Z', got {axis!r}")
        if isinstance(angle, bool) or not isinstance(angle, numbers.Real):
            raise CircuitError(f"Rotation angle must be a real number, got {angle!r}")
        object.__setattr__(self, "axis", axis)
        super().__init__(GateKind.ROTATION, self.format_label(axis, angle), (qubit,), angle)

    @staticmethod
    def format_label(axis: str, angle: float) -> str:
        """Format ``R<axis>(<degrees>°)`` with one decimal place."""
        # + 0.0 turns -0.0 into 0.0
        degrees = math.degrees(float(angle)) + 0.0
        return f"R{axis}({degrees:.1f}°)"
