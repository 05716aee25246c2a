"""
Lesson records consumed by the diagram engine.

Lessons are read-only input: the engine never modifies them.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ComponentRequirement:
    """One line of a lesson's parts list, e.g. ``("AA Battery", 2)``."""

    name: str
    quantity: int = 1
    description: str = ""


@dataclass(frozen=True)
class InstructionStep:
    """
    A single numbered build step.

    Attributes:
        step_number: 1-based position in the lesson.
        title: Short heading, e.g. "Connect Positive".
        description: Free text interpreted to decide wiring and highlights.
        tip: Optional hint shown in a box at the bottom of the step diagram.
    """

    step_number: int
    title: str
    description: str
    tip: str | None = None


@dataclass(frozen=True)
class LessonSpec:
    """
    A lesson as far as diagram generation is concerned.

    Attributes:
        id: Numeric lesson identifier, used for output directory names.
        title: Lesson title shown on the main diagram.
        components: Parts list in authoring order.
        instructions: Build steps in authoring order.
        category: Curriculum zone, informational only.
        difficulty: 1-5, informational only.
    """

    id: int
    title: str
    components: tuple[ComponentRequirement, ...] = field(default_factory=tuple)
    instructions: tuple[InstructionStep, ...] = field(default_factory=tuple)
    category: str = ""
    difficulty: int = 0

    def instruction(self, step_number: int) -> InstructionStep | None:
        """Return the instruction with *step_number*, or None if absent."""
        for step in self.instructions:
            if step.step_number == step_number:
                return step
        return None

    @property
    def last_step_number(self) -> int:
        """Highest step number in the lesson, 0 when it has no steps."""
        return max((step.step_number for step in self.instructions), default=0)
