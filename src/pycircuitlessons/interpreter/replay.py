"""
Instruction replay.

To draw step *n*, every instruction from step 1 through *n* is replayed from
an empty circuit. Wires added by earlier steps stay in their normal colors;
wires and parts touched by step *n* itself are highlighted. A step that says
"disconnect" wipes the wiring built so far, and when the step being drawn is
itself a disconnect step, only the bare components are shown.
"""

import logging
from collections.abc import Mapping

from pycircuitlessons.config import DiagramConfig
from pycircuitlessons.model.lesson import LessonSpec
from pycircuitlessons.model.parts import CircuitState, PlacedComponent

from .rules import RULES, Rule, StepContext, match_rule

logger = logging.getLogger(__name__)

DISCONNECT = "disconnect"
IDENTIFY_VERBS = ("look", "identify", "examine")

# (keyword, component key) pairs for "look at your LED" style steps
IDENTIFY_TARGETS = (
    ("led", "led1"),
    ("battery", "battery1"),
    ("resistor", "resistor1"),
    ("switch", "switch1"),
    ("button", "button1"),
    ("buzzer", "buzzer1"),
)


def _identify(ctx: StepContext) -> None:
    if not any(verb in ctx.text for verb in IDENTIFY_VERBS):
        return
    for keyword, key in IDENTIFY_TARGETS:
        if keyword in ctx.text:
            ctx.emphasize(ctx.get(key))


def replay(
    lesson: LessonSpec,
    components: Mapping[str, PlacedComponent],
    step_number: int,
    config: DiagramConfig | None = None,
    rules: tuple[Rule, ...] = RULES,
) -> CircuitState:
    """
    Compute the wires and highlights visible on the diagram for a step.

    Steps are visited in ascending order 1..step_number; numbers without an
    instruction are skipped.

    Args:
        lesson: The lesson being drawn.
        components: Layout table from ``layout_components``.
        step_number: The step being drawn. Use the last step for the
            complete circuit.
        config: Authoring conventions. Defaults to ``DiagramConfig()``.
        rules: Ordered rule table.

    Returns:
        CircuitState: A fresh state owned by the caller.
    """
    config = config or DiagramConfig()
    state = CircuitState()

    requested = lesson.instruction(step_number)
    if requested is not None and DISCONNECT in requested.description.lower():
        logger.debug("Lesson %s step %d disconnects, no wiring", lesson.id, step_number)
        return state

    for i in range(1, step_number + 1):
        step = lesson.instruction(i)
        if step is None:
            continue

        text = step.description.lower()
        if DISCONNECT in text:
            # i < step_number here, the requested step was handled above
            state.clear_wires()
            continue

        ctx = StepContext(
            components=components,
            state=state,
            step=step,
            text=text,
            current=(i == step_number),
            config=config,
        )
        rule = match_rule(text, rules)
        if rule is not None:
            logger.debug("Lesson %s step %d matched rule %s", lesson.id, i, rule.name)
            rule.apply(ctx)
        else:
            logger.debug("Lesson %s step %d matched no rule", lesson.id, i)

        if ctx.current:
            _identify(ctx)

    return state
