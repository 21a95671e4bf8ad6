"""
Graphics surfaces

The renderer only ever talks to a ``GraphicsSurface`` through five
primitives: ``resize``, ``draw_line``, ``draw_rect``, ``draw_circle`` and
``draw_text``. Coordinates are pixels with the origin at the top-left
corner and y growing downward.

Surfaces:
---------
RecordingSurface : captures the primitive calls for inspection
MatplotlibSurface : draws into a matplotlib figure (svg, png, pdf, raster)
"""

from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from pathlib import Path
import logging

import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.patches import Circle, Rectangle

logger = logging.getLogger(__name__)


class GraphicsSurface:
    """
    Base class for drawing backends

    Subclasses implement every primitive. Errors raised by a backend are
    not caught by the renderer.
    """

    def resize(self, width: float, height: float):
        """Set the canvas size in pixels."""
        raise NotImplementedError()

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  color: str, width: float):
        """Draw a straight stroked segment."""
        raise NotImplementedError()

    def draw_rect(self, x: float, y: float, width: float, height: float,
                  fill: str, stroke: str, stroke_width: float):
        """Draw a filled, stroked rectangle with top-left corner ``(x, y)``."""
        raise NotImplementedError()

    def draw_circle(self, cx: float, cy: float, diameter: float, fill: str,
                    stroke: Optional[str] = None, stroke_width: Optional[float] = None):
        """Draw a circle centered on ``(cx, cy)``; unstroked when ``stroke`` is None."""
        raise NotImplementedError()

    def draw_text(self, content: str, x: float, y: float, font_size: float,
                  font_family: str, color: str,
                  h_align: str = "center", v_align: str = "middle"):
        """Draw text anchored at ``(x, y)``."""
        raise NotImplementedError()


# ============================================================================
# RECORDING
# ============================================================================

@dataclass
class DrawCall:
    """One primitive call captured by RecordingSurface"""
    op: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.params[key]


class RecordingSurface(GraphicsSurface):
    """
    Surface that records every call in order instead of drawing.

    Example:
        >>> surface = RecordingSurface()
        >>> draw(circuit, surface)
        >>> surface.ops()
        ['resize', 'line', 'line', 'rect', 'text', ...]
    """

    def __init__(self):
        self.calls: List[DrawCall] = []
        self.width: Optional[float] = None
        self.height: Optional[float] = None

    def _record(self, op: str, **params):
        self.calls.append(DrawCall(op, params))

    def resize(self, width, height):
        self.width = width
        self.height = height
        self._record("resize", width=width, height=height)

    def draw_line(self, x1, y1, x2, y2, color, width):
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2, color=color, width=width)

    def draw_rect(self, x, y, width, height, fill, stroke, stroke_width):
        self._record("rect", x=x, y=y, width=width, height=height,
                     fill=fill, stroke=stroke, stroke_width=stroke_width)

    def draw_circle(self, cx, cy, diameter, fill, stroke=None, stroke_width=None):
        self._record("circle", cx=cx, cy=cy, diameter=diameter,
                     fill=fill, stroke=stroke, stroke_width=stroke_width)

    def draw_text(self, content, x, y, font_size, font_family, color,
                  h_align="center", v_align="middle"):
        self._record("text", content=content, x=x, y=y, font_size=font_size,
                     font_family=font_family, color=color,
                     h_align=h_align, v_align=v_align)

    def ops(self) -> List[str]:
        """Names of the recorded primitives, in call order."""
        return [call.op for call in self.calls]

    def calls_of(self, op: str) -> List[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def __len__(self) -> int:
        return len(self.calls)


# ============================================================================
# MATPLOTLIB
# ============================================================================

_H_ALIGN = {"left": "left", "center": "center", "right": "right"}
_V_ALIGN = {"top": "top", "middle": "center", "bottom": "bottom", "baseline": "baseline"}


def _font_families(font_family: str) -> List[str]:
    """Split a CSS-style family list ("Arial, sans-serif") for matplotlib."""
    names = [name.strip().strip("'\"") for name in font_family.split(",")]
    return [name for name in names if name] or ["sans-serif"]


class MatplotlibSurface(GraphicsSurface):
    """
    Draws primitives onto a matplotlib figure.

    Pixel sizes (line widths, font sizes) are converted to points using the
    figure DPI so that a saved raster matches the requested pixel geometry.
    Each primitive gets a higher z-order than the previous one, so later
    calls paint over earlier ones regardless of artist type.

    Parameters:
    -----------
    ax : matplotlib.axes.Axes, optional
        Existing axes to draw into. The figure is left at its current size;
        only the axes limits follow ``resize``. When omitted, a headless
        Agg figure is created and sized to the canvas.
    dpi : float
        Resolution of a newly created figure
    """

    def __init__(self, ax=None, dpi: float = 100):
        if ax is None:
            self.figure = Figure(dpi=dpi)
            FigureCanvasAgg(self.figure)
            self.ax = self.figure.add_axes([0, 0, 1, 1])
            self._owns_figure = True
        else:
            self.ax = ax
            self.figure = ax.figure
            self._owns_figure = False

        self.ax.set_axis_off()
        self.width = 0.0
        self.height = 0.0
        self._zorder = 0

    @property
    def dpi(self) -> float:
        return self.figure.dpi

    def _points(self, pixels: float) -> float:
        return pixels * 72.0 / self.dpi

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    def resize(self, width, height):
        self.width = width
        self.height = height
        if self._owns_figure:
            self.figure.set_size_inches(width / self.dpi, height / self.dpi)
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_aspect('equal')
        logger.debug("Resized matplotlib surface to %sx%s px", width, height)

    def draw_line(self, x1, y1, x2, y2, color, width):
        self.ax.plot([x1, x2], [y1, y2], color=color, linewidth=self._points(width),
                     solid_capstyle='butt', zorder=self._next_zorder())

    def draw_rect(self, x, y, width, height, fill, stroke, stroke_width):
        self.ax.add_patch(Rectangle((x, y), width, height,
                                    facecolor=fill, edgecolor=stroke,
                                    linewidth=self._points(stroke_width),
                                    zorder=self._next_zorder()))

    def draw_circle(self, cx, cy, diameter, fill, stroke=None, stroke_width=None):
        if stroke is None:
            edgecolor, linewidth = 'none', 0.0
        else:
            edgecolor = stroke
            linewidth = self._points(stroke_width if stroke_width is not None else 1)
        self.ax.add_patch(Circle((cx, cy), diameter / 2,
                                 facecolor=fill, edgecolor=edgecolor,
                                 linewidth=linewidth, zorder=self._next_zorder()))

    def draw_text(self, content, x, y, font_size, font_family, color,
                  h_align="center", v_align="middle"):
        self.ax.text(x, y, content,
                     fontsize=self._points(font_size),
                     fontfamily=_font_families(font_family),
                     color=color,
                     ha=_H_ALIGN[h_align], va=_V_ALIGN[v_align],
                     zorder=self._next_zorder())

    def save(self, filename, format: str = None, dpi: float = None):
        """
        Save the figure to file.

        Parameters:
        -----------
        filename : str or Path
            Output filename
        format : str, optional
            File format ('svg', 'png', 'pdf'). Auto-detected from extension.
        dpi : float, optional
            Resolution for raster formats (defaults to the figure DPI)
        """
        if format is None:
            format = Path(filename).suffix.lstrip('.').lower() or None
        self.figure.savefig(filename, format=format, dpi=dpi or self.dpi)
        logger.info("Saved circuit diagram to %s", filename)

    def to_array(self) -> np.ndarray:
        """Render to an RGBA array of shape (height, width, 4)."""
        self.figure.canvas.draw()
        return np.asarray(self.figure.canvas.buffer_rgba()).copy()

    def canvas_shape(self) -> Tuple[int, int]:
        """Figure size in whole pixels as (width, height)."""
        w, h = self.figure.get_size_inches() * self.dpi
        return int(round(w)), int(round(h))
