"""
Control symbols.

This module contains functions to draw the user-operated parts:
- Toggle switch (lever tilts right when on)
- Push button (cap sinks when pressed)
"""

from pycircuitlessons.model.constants import COLOR_FAILURE, COLOR_SUCCESS
from pycircuitlessons.model.parts import PushButton, Switch
from pycircuitlessons.rendering.parts import draw_label, draw_lead
from pycircuitlessons.rendering.surface import DrawingSurface

CONTACT_FILL = "#FFD54F"
CONTACT_STROKE = "#F57F17"


def draw_switch(switch: Switch, surface: DrawingSurface) -> None:
    """
    Draw a toggle switch with an ON/OFF caption.

    Symbol Layout (off):
          o
           \\
      -[o   o]-

    The lever pivots just left of center and ends up-left when off,
    up-right when on.
    """
    x, y = switch.x, switch.y

    surface.add_rectangle(x - 35, y - 20, 70, 40, "#607D8B", "#37474F", 2, 5)

    surface.add_circle(x - 25, y, 6, CONTACT_FILL, CONTACT_STROKE, 2)
    surface.add_circle(x + 25, y, 6, CONTACT_FILL, CONTACT_STROKE, 2)

    lever_x = x + 15 if switch.on else x - 15
    lever_y = y - 15
    surface.add_line(x - 5, y, lever_x, lever_y, "#FF5722", 5, "round")
    surface.add_circle(lever_x, lever_y, 7, "#FF5722", "#BF360C", 2)

    draw_lead(surface, (x - 35, y), (x - 45, y))
    draw_lead(surface, (x + 35, y), (x + 45, y))

    draw_label(surface, x, y - 35, switch.label)

    state_text = "ON" if switch.on else "OFF"
    state_color = COLOR_SUCCESS if switch.on else COLOR_FAILURE
    surface.add_text(x, y + 40, state_text, 12, state_color, "middle", "bold")


def draw_push_button(button: PushButton, surface: DrawingSurface) -> None:
    """Draw a momentary push button seen from above."""
    x, y = button.x, button.y

    surface.add_circle(x, y, 30, "#FF5722", "#BF360C", 3)

    cap_y = y + 5 if button.pressed else y - 5
    surface.add_circle(x, cap_y, 20, "#FF7043", "#D84315", 2)
    surface.add_circle(x - 8, cap_y - 8, 6, "#FFCCBC")

    # Pins sit under the base, leads run down to the anchors
    surface.add_circle(x - 20, y + 35, 5, CONTACT_FILL, CONTACT_STROKE, 2)
    surface.add_circle(x + 20, y + 35, 5, CONTACT_FILL, CONTACT_STROKE, 2)
    draw_lead(surface, (x - 20, y + 40), (x - 20, y + 50))
    draw_lead(surface, (x + 20, y + 40), (x + 20, y + 50))

    draw_label(surface, x, y - 45, button.label)

    if button.pressed:
        surface.add_text(x, y + 70, "PRESSED", 11, COLOR_SUCCESS, "middle", "bold")
