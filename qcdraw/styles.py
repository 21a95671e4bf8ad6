"""
Styling configuration for circuit diagrams

A ``StyleConfig`` holds the twelve geometric and visual knobs used by the
renderer. Callers pass a partial mapping of overrides which is merged over
the defaults; values are not range-checked, so negative spacing or a zero
font size give degenerate but well-defined geometry.

Example:
--------
    >>> from qcdraw.styles import StyleConfig, resolve_style
    >>>
    >>> style = resolve_style({"gate_fill": "#e0f7fa", "font_size": 16})
    >>> style.gate_fill
    '#e0f7fa'
    >>> StyleConfig.preset("minimal").font_family
    'monospace'
"""

from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import asdict, dataclass, fields, replace


@dataclass(frozen=True)
class StyleConfig:
    """
    Visual parameters of a circuit diagram (sizes in pixels).

    Attributes:
    -----------
    qubit_spacing : float
        Vertical distance between qubit lines
    gate_spacing : float
        Horizontal distance between gate columns
    gate_width, gate_height : float
        Size of gate boxes
    line_color, line_width
        Qubit lines and control connectors
    gate_fill, gate_stroke, gate_stroke_width
        Gate boxes and control/target markers
    font_size, font_family, font_color
        Gate labels (rotation labels use ``font_size - 2``)
    """
    qubit_spacing: float = 50
    gate_spacing: float = 70
    gate_width: float = 40
    gate_height: float = 40
    line_color: str = "#000"
    line_width: float = 2
    gate_fill: str = "#fff"
    gate_stroke: str = "#000"
    gate_stroke_width: float = 2
    font_size: float = 14
    font_family: str = "Arial, sans-serif"
    font_color: str = "#000"

    @classmethod
    def option_names(cls):
        return tuple(f.name for f in fields(cls))

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> 'StyleConfig':
        """
        Return a copy with ``overrides`` applied (override wins).

        Options given as ``None`` count as absent and keep their current value.
        """
        if not overrides:
            return self
        unknown = sorted(set(overrides) - set(self.option_names()))
        if unknown:
            raise ValueError(
                f"Unknown style option(s) {unknown}; expected any of {list(self.option_names())}"
            )
        present = {name: value for name, value in overrides.items() if value is not None}
        return replace(self, **present)

    @classmethod
    def preset(cls, name: str) -> 'StyleConfig':
        """Look up a named preset: 'default', 'colorful', 'minimal'."""
        try:
            return STYLE_PRESETS[name]
        except KeyError:
            raise ValueError(
                f"Unknown style preset {name!r}; expected one of {sorted(STYLE_PRESETS)}"
            ) from None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_STYLE = StyleConfig()

STYLE_PRESETS: Dict[str, StyleConfig] = {
    'default': DEFAULT_STYLE,
    'colorful': DEFAULT_STYLE.merged({
        'line_color': '#444444',
        'gate_fill': '#e3f2fd',
        'gate_stroke': '#1976d2',
        'font_family': 'sans-serif',
        'font_color': '#0d47a1',
    }),
    'minimal': DEFAULT_STYLE.merged({
        'line_color': '#666666',
        'line_width': 1,
        'gate_fill': '#f5f5f5',
        'gate_stroke': '#333333',
        'gate_stroke_width': 1,
        'font_size': 12,
        'font_family': 'monospace',
        'font_color': '#333333',
    }),
}


StyleLike = Union[None, str, StyleConfig, Mapping[str, Any]]


def resolve_style(styles: StyleLike = None) -> StyleConfig:
    """
    Turn any accepted style argument into a complete ``StyleConfig``.

    Parameters:
    -----------
    styles : None, str, StyleConfig or mapping
        ``None`` gives the defaults, a string names a preset, a mapping is
        merged over the defaults.
    """
    if styles is None:
        return DEFAULT_STYLE
    if isinstance(styles, StyleConfig):
        return styles
    if isinstance(styles, str):
        return StyleConfig.preset(styles)
    if isinstance(styles, Mapping):
        return DEFAULT_STYLE.merged(styles)
    raise TypeError(f"Expected StyleConfig, mapping or preset name, got {type(styles).__name__}")
