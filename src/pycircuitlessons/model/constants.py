"""
Global constants for the lesson diagram engine.
All geometric and stylistic parameters should be defined here.
Per-run settings (output paths, resistor conventions) live in ``config``.
"""

# Canvas
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
GRID_SIZE = 40  # px, background grid pitch

# Text & Fonts
TEXT_FONT_FAMILY = "Arial, sans-serif"
TEXT_SIZE_LABEL = 14  # Component labels like "LED 1"
TEXT_SIZE_STEP_TITLE = 24
TEXT_SIZE_MAIN_TITLE = 28
TEXT_SIZE_SUBTITLE = 18
TEXT_SIZE_DESCRIPTION = 14
TEXT_SIZE_TIP = 12
TEXT_LINE_SPACING = 4  # px added to font size between wrapped lines
CHAR_WIDTH_FACTOR = 0.5  # average glyph width as a fraction of font size

# Colors
COLOR_BACKGROUND = "#f8fcff"
COLOR_GRID = "#e8f4f8"
COLOR_TEXT = "#333"
COLOR_TEXT_MUTED = "#666"
COLOR_TITLE = "#1976D2"
COLOR_HIGHLIGHT = "#FFC107"
COLOR_ARROW = "#FF9800"
COLOR_SUCCESS = "#4CAF50"
COLOR_FAILURE = "#F44336"

# Wire colors
WIRE_POSITIVE = "#F44336"  # current path
WIRE_NEGATIVE = "#2196F3"  # return path
WIRE_LINK = "#9C27B0"  # LED-to-LED and battery-to-battery links
WIRE_DEFAULT = "#E91E63"
WIRE_DOT_STROKE = "#C2185B"
WIRE_WIDTH = 4
WIRE_WIDTH_HIGHLIGHT = 6
WIRE_DOT_RADIUS = 5
WIRE_STRAIGHT_THRESHOLD = 50.0  # px, shorter spans are drawn straight
WIRE_CURVE_FACTOR = 0.3  # bezier control offset as a fraction of the x span

# Component defaults
LED_DEFAULT_COLOR = "#FFC107"
RESISTOR_DEFAULT_BANDS = ("#FF9800", "#FF9800", "#8B4513")  # 330 ohm
RESISTOR_MAX_BANDS = 3

# Anchor offsets (dx, dy) from each component origin
LED_ANCHORS = {"positive": (12, 55), "negative": (-12, 45)}
BATTERY_ANCHORS = {"positive": (0, -60), "negative": (0, 55)}
RESISTOR_ANCHORS = {"in": (-50, 0), "out": (50, 0)}
SWITCH_ANCHORS = {"in": (-45, 0), "out": (45, 0)}
PUSH_BUTTON_ANCHORS = {"in": (-20, 50), "out": (20, 50)}
BUZZER_ANCHORS = {"positive": (-15, 60), "negative": (15, 60)}

# Highlight boxes (dx, dy, width, height) relative to each component origin
HIGHLIGHT_PADDING = 10
LED_BOUNDS = (-40, -60, 80, 135)
BATTERY_BOUNDS = (-35, -85, 70, 145)
RESISTOR_BOUNDS = (-55, -40, 110, 55)
SWITCH_BOUNDS = (-50, -50, 100, 100)
PUSH_BUTTON_BOUNDS = (-35, -60, 70, 135)
BUZZER_BOUNDS = (-40, -70, 80, 150)

# Layout template
LAYOUT_BATTERY_X = 150
LAYOUT_LED_MARGIN = 150  # LED column sits this far from the right edge
LAYOUT_RESISTOR_OFFSET = 150  # resistor column sits this far left of the LEDs
LAYOUT_SWITCH_OFFSET = -80  # first switch relative to the canvas center
LAYOUT_SWITCH_SPACING = 120
LAYOUT_PAIR_SPREAD = 80  # +/- spread for two batteries or two LEDs
LAYOUT_TRIPLE_SPREAD = 100  # spread for three LEDs or stacked resistors

# Step diagram furniture
TITLE_Y = 40
SUBTITLE_Y = 70
DESCRIPTION_Y = 560
DESCRIPTION_WIDTH = 600
TIP_BOX_MARGIN = 30
TIP_BOX_HEIGHT = 60
TIP_BOX_BOTTOM_OFFSET = 90  # tip box top = canvas height - offset
BANNER_WIDTH = 400
BANNER_HEIGHT = 50

# Document
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
