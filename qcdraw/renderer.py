"""
Circuit diagram renderer

Turns a ``Circuit`` and a ``StyleConfig`` into primitive draw calls on a
``GraphicsSurface``:

1. resize the canvas to ``gate_spacing * (gates + 1)`` by
   ``qubit_spacing * (qubits + 1)``
2. draw one baseline per qubit across the full width
3. draw every gate in its own column, in circuit order

Example:
--------
    >>> from qcdraw import Circuit, draw, RecordingSurface
    >>>
    >>> circuit = Circuit(2).h(0).cnot(0, 1)
    >>> surface = RecordingSurface()
    >>> draw(circuit, surface, {"gate_fill": "#e0f7fa"})
    >>> fig = draw_circuit(circuit, "bell.svg")
"""

from typing import Tuple
import logging

from matplotlib.figure import Figure

from .circuit import Circuit
from .gates import Gate, GateKind
from .styles import StyleConfig, StyleLike, resolve_style
from .surfaces import GraphicsSurface, MatplotlibSurface

logger = logging.getLogger(__name__)

# Fixed glyph geometry (pixels), independent of the style
CONTROL_DOT_DIAMETER = 8
TARGET_DIAMETER = 20
TARGET_CROSS_HALF = 5
TARGET_FILL = "#fff"
ROTATION_FONT_REDUCTION = 2


def qubit_y(qubit: int, style: StyleConfig) -> float:
    """Vertical position of the baseline of ``qubit``."""
    return style.qubit_spacing * (qubit + 1)


def column_x(index: int, style: StyleConfig) -> float:
    """Horizontal center of the gate at sequence position ``index``."""
    return style.gate_spacing * (index + 1)


def canvas_size(circuit: Circuit, style: StyleConfig) -> Tuple[float, float]:
    """Canvas (width, height) with one spacing unit of margin on each edge."""
    width = style.gate_spacing * (len(circuit.gates) + 1)
    height = style.qubit_spacing * (circuit.num_qubits + 1)
    return width, height


class Renderer:
    """
    Draws a circuit on a graphics surface.

    The renderer keeps only its three inputs; every ``draw()`` recomputes
    the layout from the circuit.

    Args:
        circuit: Circuit to render
        surface: Backend receiving the draw calls
        styles: None, preset name, StyleConfig or partial override mapping

    Example:
        >>> renderer = Renderer(circuit, MatplotlibSurface(), {"gate_fill": "#e0f7fa"})
        >>> renderer.draw()
    """

    def __init__(self, circuit: Circuit, surface: GraphicsSurface, styles: StyleLike = None):
        self.circuit = circuit
        self.surface = surface
        self.styles = resolve_style(styles)

    def draw(self) -> None:
        """Size the canvas, then draw baselines and gates in order."""
        circuit, surface, style = self.circuit, self.surface, self.styles
        gates = circuit.gates

        width, height = canvas_size(circuit, style)
        logger.debug("Drawing %d qubits, %d gates on %sx%s canvas",
                     circuit.num_qubits, len(gates), width, height)
        surface.resize(width, height)

        # Qubit baselines
        for qubit in range(circuit.num_qubits):
            y = qubit_y(qubit, style)
            surface.draw_line(0, y, width, y, style.line_color, style.line_width)

        # Gates, one column each
        for index, gate in enumerate(gates):
            x = column_x(index, style)

            if gate.kind is GateKind.CONTROL_TARGET:
                self._draw_control_target(gate, x)
            elif gate.kind is GateKind.ROTATION:
                self._draw_box(gate, x, style.font_size - ROTATION_FONT_REDUCTION)
            elif gate.kind is GateKind.SINGLE:
                self._draw_box(gate, x, style.font_size)
            else:
                raise ValueError(f"Unsupported gate kind: {gate.kind!r}")

    def _draw_box(self, gate: Gate, x: float, font_size: float):
        """Labeled rectangle centered on the gate's qubit line."""
        style = self.styles
        for qubit in gate.targets:
            y = qubit_y(qubit, style) - style.gate_height / 2
            self.surface.draw_rect(x - style.gate_width / 2, y,
                                   style.gate_width, style.gate_height,
                                   style.gate_fill, style.gate_stroke,
                                   style.gate_stroke_width)
            self.surface.draw_text(gate.label, x, y + style.gate_height / 2,
                                   font_size, style.font_family, style.font_color,
                                   h_align="center", v_align="middle")

    def _draw_control_target(self, gate: Gate, x: float):
        """Control dot, connector and circled plus on the target."""
        style = self.styles
        control, target = gate.targets
        y1 = qubit_y(control, style)
        y2 = qubit_y(target, style)

        self.surface.draw_circle(x, y1, CONTROL_DOT_DIAMETER, style.gate_stroke)

        self.surface.draw_line(x, y1, x, y2, style.line_color, style.line_width)

        self.surface.draw_circle(x, y2, TARGET_DIAMETER, TARGET_FILL,
                                 style.gate_stroke, style.gate_stroke_width)
        self.surface.draw_line(x - TARGET_CROSS_HALF, y2, x + TARGET_CROSS_HALF, y2,
                               style.gate_stroke, style.gate_stroke_width)
        self.surface.draw_line(x, y2 - TARGET_CROSS_HALF, x, y2 + TARGET_CROSS_HALF,
                               style.gate_stroke, style.gate_stroke_width)


def draw(circuit: Circuit, surface: GraphicsSurface, styles: StyleLike = None) -> None:
    """
    Render ``circuit`` onto ``surface``.

    Parameters:
    -----------
    circuit : Circuit
        Circuit to draw; it is only read
    surface : GraphicsSurface
        Backend receiving the primitive calls
    styles : None, str, StyleConfig or mapping
        Style overrides merged over the defaults
    """
    Renderer(circuit, surface, styles).draw()


def draw_circuit(circuit: Circuit, filename: str = None, *, ax=None, dpi: float = 100,
                 styles: StyleLike = None, **overrides) -> Figure:
    """
    Quick function to draw a circuit with matplotlib.

    Parameters:
    -----------
    circuit : Circuit
        Circuit to draw
    filename : str, optional
        Save the figure here ('svg', 'png', 'pdf', ... from the extension)
    ax : matplotlib.axes.Axes, optional
        Draw into existing axes instead of a new figure
    dpi : float
        Resolution of a newly created figure
    styles : None, str, StyleConfig or mapping
        Base style
    **overrides
        Individual style options applied on top of ``styles``

    Returns:
    --------
    matplotlib.figure.Figure : Rendered circuit
    """
    if not isinstance(circuit, Circuit):
        raise TypeError(f"Expected Circuit, got {type(circuit).__name__}")

    style = resolve_style(styles).merged(overrides)
    surface = MatplotlibSurface(ax=ax, dpi=dpi)
    draw(circuit, surface, style)

    if filename is not None:
        surface.save(filename)
    return surface.figure
