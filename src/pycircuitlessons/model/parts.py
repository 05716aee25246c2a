"""
Placed components and wire connections.

This module defines the closed set of component kinds the engine knows about.
Each kind is a frozen dataclass carrying its position, label, highlight flag
and kind-specific render state:
- Led (lit, color)
- Battery
- Resistor (color bands)
- Switch (on)
- PushButton (pressed)
- Buzzer (active)

State changes are expressed with ``dataclasses.replace`` so that a layout
template can be shared by every artifact of a lesson without leaking
highlights or energized state between them.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Union

from .constants import (
    BATTERY_ANCHORS,
    BATTERY_BOUNDS,
    BUZZER_ANCHORS,
    BUZZER_BOUNDS,
    LED_ANCHORS,
    LED_BOUNDS,
    LED_DEFAULT_COLOR,
    PUSH_BUTTON_ANCHORS,
    PUSH_BUTTON_BOUNDS,
    RESISTOR_ANCHORS,
    RESISTOR_BOUNDS,
    RESISTOR_DEFAULT_BANDS,
    SWITCH_ANCHORS,
    SWITCH_BOUNDS,
    WIRE_DEFAULT,
)
from .core import Point


class ComponentKind(str, Enum):
    """Component kinds understood by the layout engine and renderers."""

    LED = "led"
    BATTERY = "battery"
    RESISTOR = "resistor"
    SWITCH = "switch"
    PUSH_BUTTON = "button"
    BUZZER = "buzzer"


@dataclass(frozen=True)
class Component:
    """
    Fields shared by every placed component.

    Attributes:
        key: Stable synthetic identifier, e.g. ``"led1"`` or ``"battery2"``.
        position: Origin of the component on the canvas.
        label: Caption drawn above the component. Empty suppresses it.
        highlighted: Whether the component is emphasized in this artifact.
    """

    kind: ClassVar[ComponentKind]
    anchors: ClassVar[dict[str, tuple[float, float]]]
    bounds: ClassVar[tuple[float, float, float, float]]

    key: str
    position: Point
    label: str = ""
    highlighted: bool = False

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def anchor(self, name: str) -> Point:
        """
        Resolve a named wire anchor to an absolute canvas point.

        Args:
            name: Anchor name, e.g. ``"positive"`` or ``"in"``.

        Returns:
            Point: The anchor position.

        Raises:
            KeyError: If the kind has no such anchor.
        """
        if name not in self.anchors:
            raise KeyError(
                f"{type(self).__name__} '{self.key}' has no anchor '{name}'. "
                f"Available anchors: {list(self.anchors)}"
            )
        dx, dy = self.anchors[name]
        return self.position.offset(dx, dy)


@dataclass(frozen=True)
class Led(Component):
    kind: ClassVar[ComponentKind] = ComponentKind.LED
    anchors: ClassVar[dict[str, tuple[float, float]]] = LED_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = LED_BOUNDS

    lit: bool = False
    color: str = LED_DEFAULT_COLOR


@dataclass(frozen=True)
class Battery(Component):
    kind: ClassVar[ComponentKind] = ComponentKind.BATTERY
    anchors: ClassVar[dict[str, tuple[float, float]]] = BATTERY_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = BATTERY_BOUNDS


@dataclass(frozen=True)
class Resistor(Component):
    """Color bands are cosmetic; only the first three are drawn."""

    kind: ClassVar[ComponentKind] = ComponentKind.RESISTOR
    anchors: ClassVar[dict[str, tuple[float, float]]] = RESISTOR_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = RESISTOR_BOUNDS

    bands: tuple[str, ...] = RESISTOR_DEFAULT_BANDS


@dataclass(frozen=True)
class Switch(Component):
    kind: ClassVar[ComponentKind] = ComponentKind.SWITCH
    anchors: ClassVar[dict[str, tuple[float, float]]] = SWITCH_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = SWITCH_BOUNDS

    on: bool = False


@dataclass(frozen=True)
class PushButton(Component):
    kind: ClassVar[ComponentKind] = ComponentKind.PUSH_BUTTON
    anchors: ClassVar[dict[str, tuple[float, float]]] = PUSH_BUTTON_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = PUSH_BUTTON_BOUNDS

    pressed: bool = False


@dataclass(frozen=True)
class Buzzer(Component):
    kind: ClassVar[ComponentKind] = ComponentKind.BUZZER
    anchors: ClassVar[dict[str, tuple[float, float]]] = BUZZER_ANCHORS
    bounds: ClassVar[tuple[float, float, float, float]] = BUZZER_BOUNDS

    active: bool = False


PlacedComponent = Union[Led, Battery, Resistor, Switch, PushButton, Buzzer]


@dataclass(frozen=True)
class WireConnection:
    """
    A wire between two component anchors.

    Attributes:
        start: First endpoint on the canvas.
        end: Second endpoint on the canvas.
        color: Stroke color.
        highlighted: True when the wire was added by the current step.
        source: ``"key.anchor"`` reference of the start point.
        target: ``"key.anchor"`` reference of the end point.
    """

    start: Point
    end: Point
    color: str = WIRE_DEFAULT
    highlighted: bool = False
    source: str = ""
    target: str = ""

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass
class CircuitState:
    """
    Result of replaying a lesson's instructions up to one step.

    Intentionally mutable: the interpreter accumulates into it while
    replaying, then hands it to the diagram generator.

    Attributes:
        wires: Wires in the order they were added.
        highlighted: Keys of components emphasized at the requested step.
    """

    wires: list[WireConnection] = field(default_factory=list)
    highlighted: set[str] = field(default_factory=set)

    def clear_wires(self) -> None:
        self.wires.clear()


def energize(component: PlacedComponent) -> PlacedComponent:
    """
    Return the powered-up variant of a component.

    LEDs are lit, switches turned on and buzzers activated. Other kinds
    are returned unchanged.
    """
    if isinstance(component, Led):
        return replace(component, lit=True)
    if isinstance(component, Switch):
        return replace(component, on=True)
    if isinstance(component, Buzzer):
        return replace(component, active=True)
    return component
