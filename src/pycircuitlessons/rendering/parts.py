"""
Reusable drawing parts shared by the component renderers.

This module provides the small building blocks every component is made of:
- Component captions (suppressed when the label is empty)
- Polarity glyphs
- Lead lines ending in a terminal dot
- Highlight outlines sized from a component's bounds
"""

from pycircuitlessons.model.constants import (
    COLOR_TEXT,
    HIGHLIGHT_PADDING,
    TEXT_SIZE_LABEL,
)
from pycircuitlessons.model.parts import Component

from .surface import DrawingSurface


def draw_label(surface: DrawingSurface, x: float, y: float, label: str) -> None:
    """
    Draw a bold component caption centered at (x, y).

    An empty label draws nothing rather than an empty text node.
    """
    if not label:
        return
    surface.add_text(x, y, label, TEXT_SIZE_LABEL, COLOR_TEXT, "middle", "bold")


def draw_polarity(
    surface: DrawingSurface, x: float, y: float, glyph: str, color: str, size: int = 13
) -> None:
    """Draw a bold ``+`` or ``-`` glyph next to a terminal."""
    surface.add_text(x, y, glyph, size, color, "middle", "bold")


def draw_lead(
    surface: DrawingSurface,
    start: tuple[float, float],
    end: tuple[float, float],
    color: str = "#666",
    width: float = 3,
    dot_radius: float = 4,
) -> None:
    """Draw a component lead with a round cap and a connection dot at *end*."""
    surface.add_line(start[0], start[1], end[0], end[1], color, width, "round")
    surface.add_circle(end[0], end[1], dot_radius, color)


def draw_highlight(surface: DrawingSurface, component: Component) -> None:
    """Outline *component* with the dashed glow box used for the current step."""
    dx, dy, width, height = component.bounds
    pad = HIGHLIGHT_PADDING
    surface.add_highlight_box(
        component.x + dx - pad,
        component.y + dy - pad,
        width + 2 * pad,
        height + 2 * pad,
    )
