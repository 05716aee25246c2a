import pytest

from pycircuitlessons.config import DiagramConfig
from pycircuitlessons.interpreter.rules import (
    RULES,
    StepContext,
    all_of,
    any_of,
    contains_all,
    contains_any,
    contains_none,
    match_rule,
)
from pycircuitlessons.layout import layout_components
from pycircuitlessons.model.constants import WIRE_LINK, WIRE_NEGATIVE, WIRE_POSITIVE
from pycircuitlessons.model.lesson import ComponentRequirement, InstructionStep
from pycircuitlessons.model.parts import CircuitState


def _layout(*items):
    return layout_components([ComponentRequirement(name, qty) for name, qty in items])


def _apply(components, description, step_number=1, current=True):
    """Run the matching rule for one description and return the resulting state."""
    state = CircuitState()
    ctx = StepContext(
        components=components,
        state=state,
        step=InstructionStep(step_number, "", description),
        text=description.lower(),
        current=current,
        config=DiagramConfig(),
    )
    rule = match_rule(description)
    if rule is not None:
        rule.apply(ctx)
    return state


class TestPredicatesUnit:
    def test_combinators(self):
        assert contains_all("a", "b")("a b")
        assert not contains_all("a", "c")("a b")
        assert contains_any("x", "b")("a b")
        assert contains_none("x", "y")("a b")
        assert all_of(contains_any("a"), contains_none("z"))("a b")
        assert any_of(contains_all("z"), contains_all("b"))("a b")


class TestMatchRuleUnit:
    @pytest.mark.parametrize(
        "description, rule_name",
        [
            ("Connect the second LED long leg to the positive wire", "second-led-positive"),
            ("Connect the second LED short leg to the negative rail", "second-led-negative"),
            ("Connect the first LED to the battery positive", "first-led-positive"),
            ("Connect the first LED short leg to the negative", "first-led-negative"),
            ("Connect the battery positive to the LED long leg", "battery-led-positive"),
            ("Connect the LED short leg to the battery negative", "battery-led-negative"),
            ("Connect the battery to the resistor", "battery-resistor"),
            ("Connect the battery to the switch", "battery-switch"),
            ("Wire the second switch to the resistor", "second-switch-resistor"),
            ("Connect the switch to the LED", "switch-load"),
            ("Add three resistors in parallel", "parallel-resistor-fanout"),
            ("Connect the resistor to the LED long leg", "resistor-led"),
            ("Put the batteries in series", "battery-series"),
            ("Connect the buzzer to the button", "buzzer"),
            ("Wire the two switches in series", "switch-series"),
            ("Connect the battery to the button", "battery-button"),
            ("Connect the button to the resistor", "button-resistor"),
            ("Join one LED short leg to the other long leg", "led-series"),
            ("Connect the second LED to the battery", "numbered-led-battery"),
            ("Reconnect the battery", "reconnect-battery"),
            ("Flip the switch!", "passive"),
            ("Tape everything down", "passive"),
        ],
    )
    def test_first_match_wins(self, description, rule_name):
        assert match_rule(description).name == rule_name

    def test_no_match(self):
        assert match_rule("Admire your work") is None

    def test_matching_is_case_insensitive(self):
        assert match_rule("CONNECT THE BATTERY TO THE RESISTOR").name == "battery-resistor"

    def test_specific_rules_precede_generic_ones(self):
        names = [rule.name for rule in RULES]
        assert names.index("second-led-positive") < names.index("battery-led-positive")
        assert names.index("battery-switch") < names.index("switch-battery-pack")
        assert names[-1] == "passive"

    def test_shadowed_rules_are_unreachable(self):
        # Same keywords as earlier rules, kept for evaluation order
        assert match_rule("second led long positive").name == "second-led-positive"
        assert match_rule("switch between battery pack and led array").name == "battery-switch"


class TestRuleActionsUnit:
    def test_battery_led_positive_wire(self):
        comps = _layout(("LED", 1), ("Battery", 1))
        state = _apply(comps, "Connect the battery positive to the LED long leg")

        assert len(state.wires) == 1
        wire = state.wires[0]
        assert wire.start == comps["battery1"].anchor("positive")
        assert wire.end == comps["led1"].anchor("positive")
        assert wire.color == WIRE_POSITIVE
        assert wire.highlighted
        assert (wire.source, wire.target) == ("battery1.positive", "led1.positive")
        assert state.highlighted == {"battery1", "led1"}

    def test_earlier_step_is_not_highlighted(self):
        comps = _layout(("LED", 1), ("Battery", 1))
        state = _apply(comps, "Connect the LED short leg to the battery negative", current=False)
        assert state.wires[0].color == WIRE_NEGATIVE
        assert not state.wires[0].highlighted
        assert state.highlighted == set()

    def test_missing_component_is_a_no_op(self):
        comps = _layout(("LED", 1))
        state = _apply(comps, "Connect the battery positive to the LED long leg")
        assert state.wires == []
        assert state.highlighted == set()

    def test_switch_load_prefers_resistor(self):
        comps = _layout(("LED", 1), ("Resistor", 1), ("Switch", 1))
        state = _apply(comps, "Connect the switch to the LED")
        assert state.wires[0].target == "resistor1.in"

    def test_switch_falls_back_to_button(self):
        comps = _layout(("Battery", 1), ("Push Button", 1))
        state = _apply(comps, "Connect the battery to the switch")
        assert state.wires[0].target == "button1.in"

    def test_replacement_resistor_by_keyword(self):
        comps = _layout(("Resistor", 2), ("Battery", 1))
        state = _apply(comps, "Connect the battery to the 1k resistor", step_number=2)
        assert state.wires[0].target == "resistor2.in"

    def test_replacement_resistor_by_step_number(self):
        comps = _layout(("Resistor", 2), ("Battery", 1))
        early = _apply(comps, "Connect the battery to the resistor", step_number=2)
        late = _apply(comps, "Connect the battery to the resistor", step_number=4)
        assert early.wires[0].target == "resistor1.in"
        assert late.wires[0].target == "resistor2.in"

    def test_parallel_fanout_emphasizes_first_pair_only(self):
        comps = _layout(("LED", 3), ("Resistor", 3))
        state = _apply(comps, "Add three resistors in parallel, one per LED")
        assert [w.source for w in state.wires] == ["resistor1.out", "resistor2.out", "resistor3.out"]
        assert state.highlighted == {"resistor1", "led1"}

    def test_series_negative_returns_to_second_battery(self):
        comps = _layout(("LED", 1), ("AA Battery", 2))
        state = _apply(comps, "Connect the first LED short leg to the battery negative")
        assert state.wires[0].target == "battery2.negative"

    def test_led_series_link_is_purple(self):
        comps = _layout(("LED", 2))
        state = _apply(comps, "Join one LED short leg to the other LED long leg")
        assert state.wires[0].color == WIRE_LINK
        assert (state.wires[0].source, state.wires[0].target) == ("led1.negative", "led2.positive")

    def test_battery_series_link(self):
        comps = _layout(("AA Battery", 2))
        state = _apply(comps, "Connect the batteries in series")
        assert state.wires[0].color == WIRE_LINK
        assert state.wires[0].source == "battery1.negative"

    def test_buzzer_via_button_or_battery(self):
        comps = _layout(("Buzzer", 1), ("Button", 1), ("Battery", 1))
        via_button = _apply(comps, "Connect the button to the buzzer red wire")
        via_battery = _apply(comps, "Connect the buzzer black wire to the negative")
        assert via_button.wires[0].target == "buzzer1.positive"
        assert via_battery.wires[0].target == "battery1.negative"

    def test_reconnect_battery_closes_loop(self):
        comps = _layout(("LED", 1), ("Resistor", 2), ("Battery", 1))
        state = _apply(comps, "Reconnect the battery", step_number=5)
        assert [w.color for w in state.wires] == [WIRE_POSITIVE, WIRE_POSITIVE, WIRE_NEGATIVE]
        assert state.wires[0].target == "resistor2.in"
        assert state.wires[2].target == "battery1.negative"

    def test_reconnect_battery_ignores_keywords_before_threshold(self):
        comps = _layout(("LED", 1), ("Resistor", 2), ("Battery", 1))
        state = _apply(comps, "Reconnect the battery", step_number=3)
        assert state.wires[0].target == "resistor1.in"

    def test_passive_adds_nothing(self):
        comps = _layout(("LED", 1), ("Battery", 1))
        assert _apply(comps, "Test your circuit").wires == []

    def test_wire_never_joins_a_component_to_itself(self):
        comps = _layout(("Battery", 1))
        ctx = StepContext(comps, CircuitState(), InstructionStep(1, "", ""), "", True, DiagramConfig())
        battery = comps["battery1"]
        assert ctx.connect(battery, "positive", battery, "negative", WIRE_POSITIVE) is False
