"""
Wire rendering.

Short wires are drawn as straight segments; longer ones as a single cubic
bezier whose control points pull horizontally away from each end, which
keeps wires visually separate from the components they join.
"""

from pycircuitlessons.model.constants import (
    WIRE_CURVE_FACTOR,
    WIRE_DOT_RADIUS,
    WIRE_DOT_STROKE,
    WIRE_STRAIGHT_THRESHOLD,
    WIRE_WIDTH,
    WIRE_WIDTH_HIGHLIGHT,
)
from pycircuitlessons.model.parts import WireConnection
from pycircuitlessons.rendering.surface import DrawingSurface


def is_straight(wire: WireConnection) -> bool:
    """True when the wire is short enough to be drawn as a straight segment."""
    return wire.length < WIRE_STRAIGHT_THRESHOLD


def render_wire(surface: DrawingSurface, wire: WireConnection) -> None:
    """
    Draw *wire* with terminal dots at both ends.

    Args:
        surface: Target drawing surface.
        wire: The connection to draw. Highlighted wires glow and are thicker.
    """
    start, end = wire.start, wire.end
    width = WIRE_WIDTH_HIGHLIGHT if wire.highlighted else WIRE_WIDTH
    glow = "glow" if wire.highlighted else None
    css_class = "wire highlighted" if wire.highlighted else "wire"

    with surface.group(css_class=css_class):
        if is_straight(wire):
            surface.add_line(
                start.x, start.y, end.x, end.y, wire.color, width, "round", filter=glow
            )
        else:
            dx = end.x - start.x
            surface.add_cubic(
                (start.x, start.y),
                (start.x + dx * WIRE_CURVE_FACTOR, start.y),
                (end.x - dx * WIRE_CURVE_FACTOR, end.y),
                (end.x, end.y),
                wire.color,
                width,
                filter=glow,
            )

        surface.add_circle(start.x, start.y, WIRE_DOT_RADIUS, wire.color, WIRE_DOT_STROKE, 2)
        surface.add_circle(end.x, end.y, WIRE_DOT_RADIUS, wire.color, WIRE_DOT_STROKE, 2)
