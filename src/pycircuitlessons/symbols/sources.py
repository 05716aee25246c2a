"""
Power source symbols.
"""

from pycircuitlessons.model.parts import Battery
from pycircuitlessons.rendering.parts import draw_label
from pycircuitlessons.rendering.surface import DrawingSurface


def draw_battery(battery: Battery, surface: DrawingSurface) -> None:
    """
    Draw a cylindrical cell standing upright.

    Symbol Layout:
         _
        | |     raised positive terminal
      +-----+
      |  +  |
      |     |   body
      |  -  |
      +-----+
       ===      flat negative terminal

    Anchors:
        positive: top of the terminal bump (0, -60)
        negative: bottom plate (0, +55)
    """
    x, y = battery.x, battery.y

    surface.add_rectangle(x - 30, y - 50, 60, 100, "#4CAF50", "#2E7D32", 2, 8)
    surface.add_rectangle(x - 10, y - 60, 20, 10, "#FF5252", "#C62828", 2, 2)
    surface.add_rectangle(x - 15, y + 50, 30, 5, "#2196F3", "#1565C0", 2)

    surface.add_text(x, y - 20, "+", 24, "#fff", "middle", "bold")
    surface.add_text(x, y + 30, "-", 24, "#fff", "middle", "bold")

    positive = battery.anchor("positive")
    negative = battery.anchor("negative")
    surface.add_circle(positive.x, positive.y, 5, "#FF5252")
    surface.add_circle(negative.x, negative.y, 5, "#2196F3")

    draw_label(surface, x, y - 75, battery.label)
