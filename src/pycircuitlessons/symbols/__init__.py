"""
Component renderers.

``render_component`` dispatches on the component's type to the matching
``draw_*`` function and wraps the output in a ``<g>`` carrying the
component key, its kind and, for the current step, a highlight outline.
"""

from functools import singledispatch
from typing import Any

from pycircuitlessons.model.parts import (
    Battery,
    Buzzer,
    Component,
    Led,
    PushButton,
    Resistor,
    Switch,
)
from pycircuitlessons.rendering.parts import draw_highlight
from pycircuitlessons.rendering.surface import DrawingSurface

from .controls import draw_push_button, draw_switch
from .indicators import draw_buzzer, draw_led
from .passives import draw_resistor
from .sources import draw_battery
from .wires import is_straight, render_wire


@singledispatch
def draw(component: Any, surface: DrawingSurface) -> None:
    """Draw the body of *component*. Unknown types are a programming error."""
    raise TypeError(f"No renderer registered for {type(component).__name__}")


draw.register(Led, draw_led)
draw.register(Battery, draw_battery)
draw.register(Resistor, draw_resistor)
draw.register(Switch, draw_switch)
draw.register(PushButton, draw_push_button)
draw.register(Buzzer, draw_buzzer)


def render_component(surface: DrawingSurface, component: Component) -> None:
    """
    Draw *component* inside its own group.

    Args:
        surface: Target drawing surface.
        component: Any placed component.
    """
    css_class = f"component {component.kind.value}"
    if component.highlighted:
        css_class += " highlighted"

    with surface.group(css_class=css_class, element_id=component.key):
        if component.highlighted:
            draw_highlight(surface, component)
        draw(component, surface)


__all__ = [
    "draw",
    "draw_battery",
    "draw_buzzer",
    "draw_led",
    "draw_push_button",
    "draw_resistor",
    "draw_switch",
    "is_straight",
    "render_component",
    "render_wire",
]
