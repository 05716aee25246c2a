from pycircuitlessons.model.constants import RESISTOR_MAX_BANDS
from pycircuitlessons.model.parts import Resistor
from pycircuitlessons.rendering.parts import draw_label, draw_lead
from pycircuitlessons.rendering.surface import DrawingSurface


def draw_resistor(resistor: Resistor, surface: DrawingSurface) -> None:
    """
    Draw an axial resistor lying horizontally.

    Bands are appearance only; extra bands beyond the third are ignored.
    """
    x, y = resistor.x, resistor.y

    surface.add_rectangle(x - 40, y - 10, 80, 20, "#F5DEB3", "#8B4513", 2, 3)

    for i, band in enumerate(resistor.bands[:RESISTOR_MAX_BANDS]):
        surface.add_rectangle(x - 25 + i * 20, y - 10, 8, 20, band)

    draw_lead(surface, (x - 40, y), (x - 50, y))
    draw_lead(surface, (x + 40, y), (x + 50, y))

    draw_label(surface, x, y - 25, resistor.label)
