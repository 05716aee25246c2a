from .core import Point
from .lesson import ComponentRequirement, InstructionStep, LessonSpec
from .parts import (
    Battery,
    Buzzer,
    CircuitState,
    Component,
    ComponentKind,
    Led,
    PlacedComponent,
    PushButton,
    Resistor,
    Switch,
    WireConnection,
    energize,
)
