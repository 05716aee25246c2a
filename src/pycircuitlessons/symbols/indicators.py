"""
Indicator symbols.

This module contains the output devices a lesson drives:
- LED (dome, rim, long positive leg, short negative leg)
- Buzzer (cylinder with sound waves when active)
"""

from pycircuitlessons.model.constants import COLOR_FAILURE
from pycircuitlessons.model.parts import Buzzer, Led
from pycircuitlessons.rendering.parts import draw_label, draw_polarity
from pycircuitlessons.rendering.surface import DrawingSurface

LED_OFF_FILL = "#E8E8E8"
LED_OFF_EDGE = "#BDBDBD"
LED_LIT_EDGE = "#FFD54F"
LEG_COLOR = "#888"
POSITIVE_DOT = ("#FF5252", "#C62828")
NEGATIVE_DOT = ("#2196F3", "#1565C0")


def draw_led(led: Led, surface: DrawingSurface) -> None:
    """
    Draw an LED.

    Symbol Layout:
          ___
         /   \\     dome (lit: colored with glow rings)
        |     |
        |_____|    rim
         |   |
         |   |     long leg (+) on the right
             |

    Anchors:
        positive: long leg tip (+12, +55)
        negative: short leg tip (-12, +45)
    """
    x, y = led.x, led.y
    bulb = led.color if led.lit else LED_OFF_FILL
    edge = LED_LIT_EDGE if led.lit else LED_OFF_EDGE

    surface.add_ellipse(x, y - 5, 22, 28, bulb, edge, 2, opacity=0.9)

    if led.lit:
        # Inner glow, specular highlight, then outer rings
        surface.add_circle(x, y, 15, led.color)
        surface.add_circle(x, y, 15, led.color, opacity=0.6)
        surface.add_ellipse(x - 5, y - 10, 8, 12, "#FFFFFF", opacity=0.4)
        surface.add_circle(x, y, 32, led.color, opacity=0.2)
        surface.add_circle(x, y, 38, led.color, opacity=0.1)
    else:
        surface.add_ellipse(x - 6, y - 12, 6, 10, "#FFFFFF", opacity=0.3)

    # Rim
    surface.add_rectangle(x - 18, y + 20, 36, 8, "#757575", rx=2)
    surface.add_rectangle(x - 16, y + 22, 32, 4, "#9E9E9E", rx=1)

    pos_dx, pos_dy = led.anchors["positive"]
    neg_dx, neg_dy = led.anchors["negative"]

    surface.add_line(x + pos_dx, y + 28, x + pos_dx, y + pos_dy, LEG_COLOR, 4, "round")
    surface.add_line(x + neg_dx, y + 28, x + neg_dx, y + neg_dy, LEG_COLOR, 4, "round")

    surface.add_circle(x + pos_dx, y + pos_dy, 5, *POSITIVE_DOT, 2)
    surface.add_circle(x + neg_dx, y + neg_dy, 5, *NEGATIVE_DOT, 2)

    draw_label(surface, x, y - 50, led.label)

    draw_polarity(surface, x + pos_dx, y + pos_dy + 15, "+", POSITIVE_DOT[0])
    draw_polarity(surface, x + neg_dx, y + neg_dy + 15, "-", NEGATIVE_DOT[0])


def draw_buzzer(buzzer: Buzzer, surface: DrawingSurface) -> None:
    """
    Draw a piezo buzzer.

    Active buzzers get three concentric sound waves that fade outwards.
    The red lead is positive, the black lead negative.
    """
    x, y = buzzer.x, buzzer.y

    surface.add_circle(x, y, 35, "#212121", "#000", 2)
    surface.add_circle(x, y - 5, 30, "#424242", "#212121", 2)
    surface.add_circle(x, y - 5, 15, "#757575", "#424242", 1)

    if buzzer.active:
        for i in range(1, 4):
            radius = 40 + i * 12
            opacity = 0.4 - i * 0.1
            surface.add_circle(x, y - 5, radius, "none", "#FFC107", 3, opacity=opacity)

    pos_dx, pos_dy = buzzer.anchors["positive"]
    neg_dx, neg_dy = buzzer.anchors["negative"]

    surface.add_line(x + pos_dx, y + 35, x + pos_dx, y + pos_dy, COLOR_FAILURE, 4, "round")
    surface.add_line(x + neg_dx, y + 35, x + neg_dx, y + neg_dy, "#212121", 4, "round")
    surface.add_circle(x + pos_dx, y + pos_dy, 5, COLOR_FAILURE)
    surface.add_circle(x + neg_dx, y + neg_dy, 5, "#212121")

    draw_polarity(surface, x + pos_dx, y + pos_dy + 15, "+", COLOR_FAILURE, 12)
    draw_polarity(surface, x + neg_dx, y + neg_dy + 15, "-", "#212121", 12)

    draw_label(surface, x, y - 55, buzzer.label)
