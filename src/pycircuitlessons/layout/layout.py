"""
Component classification and placement.

This module turns a lesson's parts list into a table of placed components.
Key features include:
- Case-insensitive keyword classification of free-text part names
- Quantities summed across every line item of the same kind
- A fixed placement template (battery left, LEDs right, resistors between,
  switches and buttons in the middle) so every diagram of a lesson puts
  each part in exactly the same spot

Part names that match no known kind (jumper wires, tape, cardboard) are
left out of the diagrams entirely.
"""

import logging
from collections.abc import Iterable

from pycircuitlessons.config import DiagramConfig
from pycircuitlessons.model.constants import (
    LAYOUT_BATTERY_X,
    LAYOUT_LED_MARGIN,
    LAYOUT_PAIR_SPREAD,
    LAYOUT_RESISTOR_OFFSET,
    LAYOUT_SWITCH_OFFSET,
    LAYOUT_SWITCH_SPACING,
    LAYOUT_TRIPLE_SPREAD,
)
from pycircuitlessons.model.core import Point
from pycircuitlessons.model.lesson import ComponentRequirement
from pycircuitlessons.model.parts import (
    Battery,
    Buzzer,
    ComponentKind,
    Led,
    PlacedComponent,
    PushButton,
    Resistor,
    Switch,
)

logger = logging.getLogger(__name__)

# Most instances of each kind the template has a slot for
MAX_PER_KIND = {
    ComponentKind.BATTERY: 2,
    ComponentKind.LED: 3,
    ComponentKind.RESISTOR: 3,
    ComponentKind.SWITCH: 2,
    ComponentKind.PUSH_BUTTON: 1,
    ComponentKind.BUZZER: 1,
}

ONE_K_BANDS = ("#8B4513", "#000000", "#F44336")  # brown black red


def classify_component(name: str) -> list[ComponentKind]:
    """
    Return every component kind a part name counts towards.

    Matching is case-insensitive substring search. A name containing
    "button" or "push" is a push button and never a switch, so
    "Push Button Switch" counts as a button only.

    Args:
        name: Free-text part name, e.g. "AA Battery" or "Red LED".

    Returns:
        list[ComponentKind]: Matching kinds in canonical order, possibly empty.
    """
    lowered = name.lower()
    is_button = "button" in lowered or "push" in lowered

    kinds = []
    if "led" in lowered:
        kinds.append(ComponentKind.LED)
    if "battery" in lowered or "aa" in lowered:
        kinds.append(ComponentKind.BATTERY)
    if "resistor" in lowered:
        kinds.append(ComponentKind.RESISTOR)
    if "switch" in lowered and not is_button:
        kinds.append(ComponentKind.SWITCH)
    if is_button:
        kinds.append(ComponentKind.PUSH_BUTTON)
    if "buzzer" in lowered:
        kinds.append(ComponentKind.BUZZER)
    return kinds


def count_components(
    requirements: Iterable[ComponentRequirement],
) -> dict[ComponentKind, int]:
    """
    Sum required quantities per component kind.

    Returns:
        dict: A count for every kind, zero when the lesson needs none.
    """
    counts = {kind: 0 for kind in ComponentKind}
    for requirement in requirements:
        kinds = classify_component(requirement.name)
        if not kinds:
            logger.debug("Part '%s' is not drawn", requirement.name)
            continue
        for kind in kinds:
            counts[kind] += requirement.quantity
    return counts


def _fan(center: float, count: int) -> list[float]:
    """Vertical positions for 1-3 stacked parts around *center*."""
    if count == 1:
        return [center]
    if count == 2:
        return [center - LAYOUT_PAIR_SPREAD, center + LAYOUT_PAIR_SPREAD]
    return [center - LAYOUT_TRIPLE_SPREAD, center, center + LAYOUT_TRIPLE_SPREAD]


def _numbered(base: str, index: int, count: int) -> str:
    return f"{base} {index}" if count > 1 else base


def layout_components(
    requirements: Iterable[ComponentRequirement],
    config: DiagramConfig | None = None,
) -> dict[str, PlacedComponent]:
    """
    Place a lesson's parts on the canvas.

    The result is keyed by synthetic ids (``battery1``, ``led2``, ...)
    assigned per kind in placement order. Calling this twice with the same
    requirements yields equal tables.

    Args:
        requirements: The lesson's parts list.
        config: Canvas settings. Defaults to ``DiagramConfig()``.

    Returns:
        dict[str, PlacedComponent]: Placed components in drawing order.
    """
    config = config or DiagramConfig()
    counts = count_components(requirements)
    for kind, limit in MAX_PER_KIND.items():
        if counts[kind] > limit:
            logger.warning(
                "Lesson needs %d x %s but only %d can be drawn",
                counts[kind],
                kind.value,
                limit,
            )
            counts[kind] = limit

    center_x = config.canvas_width / 2
    center_y = config.canvas_height / 2
    led_x = config.canvas_width - LAYOUT_LED_MARGIN

    placed: dict[str, PlacedComponent] = {}

    # Batteries: left edge, stacked when there are two
    n_batteries = counts[ComponentKind.BATTERY]
    if n_batteries:
        for i, y in enumerate(_fan(center_y, n_batteries), start=1):
            key = f"battery{i}"
            label = _numbered("Battery", i, n_batteries)
            placed[key] = Battery(key, Point(LAYOUT_BATTERY_X, y), label)

    # LEDs: right edge, fanned vertically
    n_leds = counts[ComponentKind.LED]
    if n_leds:
        for i, y in enumerate(_fan(center_y, n_leds), start=1):
            key = f"led{i}"
            placed[key] = Led(key, Point(led_x, y), _numbered("LED", i, n_leds))

    # Resistors: a column between the controls and the LEDs
    n_resistors = counts[ComponentKind.RESISTOR]
    resistor_x = led_x - LAYOUT_RESISTOR_OFFSET
    for i in range(1, n_resistors + 1):
        key = f"resistor{i}"
        y = center_y + (i - 2) * LAYOUT_TRIPLE_SPREAD
        if i == 1:
            label = "330Ω" if n_resistors > 1 else "Resistor"
            placed[key] = Resistor(key, Point(resistor_x, y), label)
        elif i == 2 and not (n_leds >= 3 and n_resistors >= 3):
            # A second resistor is the higher-value replacement unless
            # the lesson gives every LED its own resistor
            placed[key] = Resistor(key, Point(resistor_x, y), "1KΩ", bands=ONE_K_BANDS)
        else:
            placed[key] = Resistor(key, Point(resistor_x, y), "330Ω")

    # Switches: horizontal pair left of center
    n_switches = counts[ComponentKind.SWITCH]
    for i in range(1, n_switches + 1):
        key = f"switch{i}"
        x = center_x + LAYOUT_SWITCH_OFFSET + (i - 1) * LAYOUT_SWITCH_SPACING
        placed[key] = Switch(key, Point(x, center_y), _numbered("Switch", i, n_switches))

    if counts[ComponentKind.PUSH_BUTTON]:
        placed["button1"] = PushButton("button1", Point(center_x, center_y), "Button")

    # A buzzer takes over the first LED slot
    if counts[ComponentKind.BUZZER]:
        placed["buzzer1"] = Buzzer("buzzer1", Point(led_x, center_y), "Buzzer")
        placed.pop("led1", None)

    return placed
