"""
Phrase rules that turn instruction text into wires.

Each rule pairs a predicate over the lower-cased instruction description
with an action that adds wires to the circuit state. Rules are evaluated
top to bottom and the first match wins, so specific phrasings ("second led"
+ "long" + "positive") must stay ahead of the general ones they overlap
("battery" + "led" + "positive"). The order is fragile: moving a rule up can
shadow every rule below it that shares its keywords. Several entries are
already shadowed today (see the ``*-repeat`` rules and ``switch-battery-pack``)
and are kept so that the evaluation order matches the lesson corpus it was
tuned against.

A rule whose components are missing from the layout adds nothing. That is
the normal outcome for lessons that don't use a part, not an error.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from pycircuitlessons.config import DiagramConfig
from pycircuitlessons.model.constants import WIRE_LINK, WIRE_NEGATIVE, WIRE_POSITIVE
from pycircuitlessons.model.lesson import InstructionStep
from pycircuitlessons.model.parts import (
    CircuitState,
    Component,
    Led,
    PlacedComponent,
    WireConnection,
)

Predicate = Callable[[str], bool]

# ---------------------------------------------------------------------------
# Predicate combinators
# ---------------------------------------------------------------------------


def contains_all(*phrases: str) -> Predicate:
    """Match when every phrase occurs in the text."""
    return lambda text: all(p in text for p in phrases)


def contains_any(*phrases: str) -> Predicate:
    """Match when at least one phrase occurs in the text."""
    return lambda text: any(p in text for p in phrases)


def contains_none(*phrases: str) -> Predicate:
    return lambda text: not any(p in text for p in phrases)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda text: all(pred(text) for pred in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda text: any(pred(text) for pred in predicates)


# ---------------------------------------------------------------------------
# Evaluation context
# ---------------------------------------------------------------------------


@dataclass
class StepContext:
    """
    Everything a rule action may read or write while handling one step.

    Attributes:
        components: Placed components keyed by id. Never modified.
        state: Wire set and highlight keys being accumulated.
        step: The instruction being evaluated.
        text: Lower-cased description of ``step``.
        current: True when ``step`` is the step being drawn.
        config: Authoring conventions (resistor replacement).
    """

    components: Mapping[str, PlacedComponent]
    state: CircuitState
    step: InstructionStep
    text: str
    current: bool
    config: DiagramConfig

    def get(self, *keys: str) -> PlacedComponent | None:
        """Return the first of *keys* present in the layout, else None."""
        for key in keys:
            component = self.components.get(key)
            if component is not None:
                return component
        return None

    def emphasize(self, *components: Component | None) -> None:
        """Highlight *components*, but only when drawing this very step."""
        if not self.current:
            return
        for component in components:
            if component is not None:
                self.state.highlighted.add(component.key)

    def connect(
        self,
        source: Component | None,
        source_anchor: str,
        target: Component | None,
        target_anchor: str,
        color: str,
        emphasize: bool = True,
    ) -> bool:
        """
        Add a wire between two component anchors.

        Args:
            source: Component the wire starts at, or None.
            source_anchor: Anchor name on ``source``.
            target: Component the wire ends at, or None.
            target_anchor: Anchor name on ``target``.
            color: Wire color.
            emphasize: Also highlight both components on the current step.

        Returns:
            bool: False (and no wire) when either component is missing.
        """
        if source is None or target is None or source.key == target.key:
            return False

        self.state.wires.append(
            WireConnection(
                start=source.anchor(source_anchor),
                end=target.anchor(target_anchor),
                color=color,
                highlighted=self.current,
                source=f"{source.key}.{source_anchor}",
                target=f"{target.key}.{target_anchor}",
            )
        )
        if emphasize:
            self.emphasize(source, target)
        return True

    def wants_replacement(self, use_keywords: bool = True) -> bool:
        """Whether this step refers to the replacement (second) resistor."""
        conf = self.config
        if self.step.step_number >= conf.replacement_from_step:
            return True
        return use_keywords and any(k in self.text for k in conf.replacement_keywords)

    def resistor(self, use_keywords: bool = True) -> PlacedComponent | None:
        """Pick the resistor a battery/resistor/LED step refers to."""
        replacement = self.components.get("resistor2")
        if replacement is not None and self.wants_replacement(use_keywords):
            return replacement
        return self.components.get("resistor1")

    def return_battery(self) -> PlacedComponent | None:
        """Battery whose negative closes the loop: the second one when in series."""
        return self.get("battery2", "battery1")


@dataclass(frozen=True)
class Rule:
    """A named (predicate, action) pair."""

    name: str
    matches: Predicate
    apply: Callable[[StepContext], None]


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


def _second_led_positive(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "positive", ctx.get("led2"), "positive", WIRE_POSITIVE)


def _second_led_negative(ctx: StepContext) -> None:
    ctx.connect(ctx.get("led2"), "negative", ctx.return_battery(), "negative", WIRE_NEGATIVE)


def _first_led_positive(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "positive", ctx.get("led1"), "positive", WIRE_POSITIVE)


def _first_led_negative(ctx: StepContext) -> None:
    led1 = ctx.get("led1")
    if "battery" in ctx.text:
        ctx.connect(led1, "negative", ctx.return_battery(), "negative", WIRE_NEGATIVE)
    elif "second led" in ctx.text:
        ctx.connect(led1, "negative", ctx.get("led2"), "positive", WIRE_LINK)


def _battery_to_led(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "positive", ctx.get("led1"), "positive", WIRE_POSITIVE)


def _led_to_battery(ctx: StepContext) -> None:
    ctx.connect(ctx.get("led1"), "negative", ctx.get("battery1"), "negative", WIRE_NEGATIVE)


def _battery_to_resistor(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "positive", ctx.resistor(), "in", WIRE_POSITIVE)


def _battery_to_switch(ctx: StepContext) -> None:
    ctx.connect(
        ctx.get("battery1"), "positive", ctx.get("switch1", "button1"), "in", WIRE_POSITIVE
    )


def _second_switch_to_resistor(ctx: StepContext) -> None:
    ctx.connect(ctx.get("switch2"), "out", ctx.get("resistor1"), "in", WIRE_POSITIVE)


def _switch_to_load(ctx: StepContext) -> None:
    # The resistor is preferred even when the text names the LED
    target = ctx.get("resistor1", "led1")
    anchor = "positive" if isinstance(target, Led) else "in"
    ctx.connect(ctx.get("switch1", "button1"), "out", target, anchor, WIRE_POSITIVE)


def _parallel_resistor_fanout(ctx: StepContext) -> None:
    for i in range(1, 4):
        resistor = ctx.get(f"resistor{i}")
        led = ctx.get(f"led{i}")
        # Only the first pair is emphasized to keep the step readable
        ctx.connect(resistor, "out", led, "positive", WIRE_POSITIVE, emphasize=(i == 1))


def _resistor_to_led(ctx: StepContext) -> None:
    ctx.connect(ctx.resistor(), "out", ctx.get("led1"), "positive", WIRE_POSITIVE)


def _battery_series(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "negative", ctx.get("battery2"), "positive", WIRE_LINK)


def _buzzer(ctx: StepContext) -> None:
    buzzer = ctx.get("buzzer1")
    if buzzer is None:
        return
    button = ctx.get("button1")
    battery = ctx.get("battery1")
    if "button" in ctx.text and button is not None:
        ctx.connect(button, "out", buzzer, "positive", WIRE_POSITIVE)
    elif "negative" in ctx.text and battery is not None:
        ctx.connect(buzzer, "negative", battery, "negative", WIRE_NEGATIVE)


def _switch_series(ctx: StepContext) -> None:
    ctx.connect(ctx.get("switch1"), "out", ctx.get("switch2"), "in", WIRE_POSITIVE)


def _battery_to_button(ctx: StepContext) -> None:
    ctx.connect(ctx.get("battery1"), "positive", ctx.get("button1"), "in", WIRE_POSITIVE)


def _button_to_resistor(ctx: StepContext) -> None:
    ctx.connect(ctx.get("button1"), "out", ctx.get("resistor1"), "in", WIRE_POSITIVE)


def _led_series(ctx: StepContext) -> None:
    ctx.connect(ctx.get("led1"), "negative", ctx.get("led2"), "positive", WIRE_LINK)


def _second_led_negative_to_first_battery(ctx: StepContext) -> None:
    ctx.connect(ctx.get("led2"), "negative", ctx.get("battery1"), "negative", WIRE_NEGATIVE)


def _numbered_led_battery(ctx: StepContext) -> None:
    if "first" in ctx.text:
        led = ctx.get("led1")
    elif "second" in ctx.text:
        led = ctx.get("led2")
    else:
        led = ctx.get("led1")

    if "positive" in ctx.text and "long" in ctx.text:
        ctx.connect(ctx.get("battery1"), "positive", led, "positive", WIRE_POSITIVE)
    elif "negative" in ctx.text and "short" in ctx.text:
        ctx.connect(led, "negative", ctx.return_battery(), "negative", WIRE_NEGATIVE)


def _reconnect_battery(ctx: StepContext) -> None:
    battery = ctx.get("battery1")
    resistor = ctx.resistor(use_keywords=False)
    led = ctx.get("led1")
    if battery is None or resistor is None or led is None:
        return

    ctx.connect(battery, "positive", resistor, "in", WIRE_POSITIVE)
    ctx.connect(resistor, "out", led, "positive", WIRE_POSITIVE)
    ctx.connect(led, "negative", battery, "negative", WIRE_NEGATIVE)


def _switch_battery_pack(ctx: StepContext) -> None:
    switch = ctx.get("switch1")
    if switch is None:
        return
    ctx.connect(ctx.get("battery1"), "positive", switch, "in", WIRE_POSITIVE, emphasize=False)
    ctx.connect(switch, "out", ctx.get("resistor1"), "in", WIRE_POSITIVE, emphasize=False)
    ctx.emphasize(switch)


def _passive(ctx: StepContext) -> None:
    """Testing and assembly steps show the circuit as built so far."""


# ---------------------------------------------------------------------------
# Rule table (order matters, first match wins)
# ---------------------------------------------------------------------------

_GENERIC = contains_none("first", "second")

RULES: tuple[Rule, ...] = (
    Rule(
        "second-led-positive",
        contains_all("second led", "long", "positive"),
        _second_led_positive,
    ),
    Rule(
        "second-led-negative",
        contains_all("second led", "short", "negative"),
        _second_led_negative,
    ),
    Rule(
        "first-led-positive",
        contains_all("first led", "battery", "positive"),
        _first_led_positive,
    ),
    Rule(
        "first-led-negative",
        contains_all("first led", "short", "negative"),
        _first_led_negative,
    ),
    Rule(
        "battery-led-positive",
        all_of(contains_all("battery", "led", "positive"), _GENERIC),
        _battery_to_led,
    ),
    Rule(
        "battery-led-negative",
        all_of(contains_all("battery", "led", "negative"), _GENERIC),
        _led_to_battery,
    ),
    Rule("battery-resistor", contains_all("battery", "resistor"), _battery_to_resistor),
    Rule("battery-switch", contains_all("battery", "switch"), _battery_to_switch),
    Rule(
        "second-switch-resistor",
        contains_all("second switch", "resistor"),
        _second_switch_to_resistor,
    ),
    Rule(
        "switch-load",
        all_of(contains_all("switch"), contains_any("led", "resistor")),
        _switch_to_load,
    ),
    Rule(
        "parallel-resistor-fanout",
        contains_all("three", "parallel", "resistor"),
        _parallel_resistor_fanout,
    ),
    Rule("resistor-led", contains_all("resistor", "led"), _resistor_to_led),
    Rule("battery-series", contains_all("batteries", "series"), _battery_series),
    Rule("buzzer", contains_all("buzzer"), _buzzer),
    Rule(
        "switch-series",
        any_of(
            contains_all("first switch", "second switch"),
            contains_all("switch", "series"),
        ),
        _switch_series,
    ),
    Rule("battery-button", contains_all("battery", "button"), _battery_to_button),
    Rule("button-resistor", contains_all("button", "resistor"), _button_to_resistor),
    Rule("led-series", contains_all("led", "short", "long"), _led_series),
    # Same phrasing as the first two rules, so never reached. Kept in place
    # rather than merged: the second variant returns to battery1 only.
    Rule(
        "second-led-positive-repeat",
        contains_all("second led", "long", "positive"),
        _second_led_positive,
    ),
    Rule(
        "second-led-negative-repeat",
        contains_all("second led", "short", "negative"),
        _second_led_negative_to_first_battery,
    ),
    Rule(
        "numbered-led-battery",
        all_of(contains_any("first led", "second led"), contains_all("battery")),
        _numbered_led_battery,
    ),
    Rule("reconnect-battery", contains_all("reconnect", "battery"), _reconnect_battery),
    # "battery pack" also satisfies battery-switch above
    Rule(
        "switch-battery-pack",
        contains_all("switch", "battery pack", "led array"),
        _switch_battery_pack,
    ),
    Rule(
        "passive",
        contains_any(
            "flip",
            "test",
            "press",
            "lights",
            "light up",
            "should",
            "arrange",
            "mount",
            "tape",
            "secure",
            "cut",
            "line",
        ),
        _passive,
    ),
)


def match_rule(text: str, rules: tuple[Rule, ...] = RULES) -> Rule | None:
    """
    Return the first rule whose predicate matches *text*.

    Args:
        text: Instruction description. Matching is case-insensitive.
        rules: Ordered rule table.

    Returns:
        Rule | None: The winning rule, or None when nothing matches.
    """
    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule
    return None
