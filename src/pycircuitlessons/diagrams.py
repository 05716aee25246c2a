"""
Diagram generation for a single lesson.

Three kinds of document are produced on top of the layout, interpreter and
component renderers:
- a step diagram per instruction (progressive wiring, current step highlighted)
- the main diagram (every instruction replayed, circuit unpowered)
- the final view (every instruction replayed, circuit energized)

The layout is computed once per lesson so all documents agree on where each
part sits. Every document starts from its own copy of that layout and its
own replayed circuit state, so documents can be generated in any order, or
concurrently, without affecting each other.
"""

from dataclasses import replace

from pycircuitlessons.config import DiagramConfig
from pycircuitlessons.interpreter.replay import replay
from pycircuitlessons.layout.layout import layout_components
from pycircuitlessons.model.constants import (
    BANNER_HEIGHT,
    BANNER_WIDTH,
    COLOR_SUCCESS,
    COLOR_TEXT,
    COLOR_TEXT_MUTED,
    COLOR_TITLE,
    DESCRIPTION_WIDTH,
    DESCRIPTION_Y,
    SUBTITLE_Y,
    TEXT_LINE_SPACING,
    TEXT_SIZE_DESCRIPTION,
    TEXT_SIZE_MAIN_TITLE,
    TEXT_SIZE_STEP_TITLE,
    TEXT_SIZE_SUBTITLE,
    TEXT_SIZE_TIP,
    TIP_BOX_BOTTOM_OFFSET,
    TIP_BOX_HEIGHT,
    TIP_BOX_MARGIN,
    TITLE_Y,
)
from pycircuitlessons.model.lesson import LessonSpec
from pycircuitlessons.model.parts import CircuitState, PlacedComponent, energize
from pycircuitlessons.rendering.surface import DrawingSurface
from pycircuitlessons.symbols import render_component, render_wire


def wrap_text(
    text: str, max_width: float, font_size: int, char_width_factor: float = 0.5
) -> list[str]:
    """
    Break *text* into lines that fit *max_width* pixels.

    Widths are estimated as ``len(line) * font_size * char_width_factor``
    rather than measured. Lines break at spaces only; a single word wider
    than the limit gets a line of its own.

    Args:
        text: The text to wrap.
        max_width: Target line width in px.
        font_size: Font size in px.
        char_width_factor: Average glyph width relative to the font size.

    Returns:
        list[str]: The wrapped lines, empty for blank text.
    """
    char_width = font_size * char_width_factor
    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) * char_width > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


class DiagramGenerator:
    """
    Produces the SVG documents for one lesson.

    Usage::

        generator = DiagramGenerator(lesson)
        svg = generator.step_diagram(2)
        main = generator.main_diagram()
        final = generator.final_view()

    Args:
        lesson: The lesson to draw. Not modified.
        config: Canvas and authoring settings.
    """

    def __init__(self, lesson: LessonSpec, config: DiagramConfig | None = None):
        self.lesson = lesson
        self.config = config or DiagramConfig()
        self._layout = layout_components(lesson.components, self.config)

    @property
    def layout(self) -> dict[str, PlacedComponent]:
        """A copy of the placement table shared by every document."""
        return dict(self._layout)

    def circuit_state(self, step_number: int) -> CircuitState:
        """Replay the lesson through *step_number*."""
        return replay(self.lesson, self._layout, step_number, self.config)

    def components_for(
        self, state: CircuitState, energized: bool = False
    ) -> dict[str, PlacedComponent]:
        """
        Apply a replayed state to a fresh copy of the layout.

        Args:
            state: Result of ``circuit_state``.
            energized: Light every LED, turn on every switch and sound
                every buzzer regardless of the replayed state.

        Returns:
            dict[str, PlacedComponent]: New component instances.
        """
        components = {}
        for key, component in self._layout.items():
            if key in state.highlighted:
                component = replace(component, highlighted=True)
            if energized:
                component = energize(component)
            components[key] = component
        return components

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def step_diagram(self, step_number: int) -> str:
        """Render the diagram for one instruction step."""
        conf = self.config
        surface = self._new_surface()
        center_x = conf.canvas_width / 2

        instruction = self.lesson.instruction(step_number)
        if instruction is not None:
            surface.add_text(
                center_x,
                TITLE_Y,
                f"Step {step_number}: {instruction.title}",
                TEXT_SIZE_STEP_TITLE,
                COLOR_TITLE,
                "middle",
                "bold",
            )
            self._draw_wrapped(
                surface,
                instruction.description,
                center_x,
                DESCRIPTION_Y,
                DESCRIPTION_WIDTH,
                TEXT_SIZE_DESCRIPTION,
            )

        state = self.circuit_state(step_number)
        self._draw_circuit(surface, state)

        if instruction is not None and instruction.tip:
            self._draw_tip(surface, instruction.tip)

        surface.end()
        return surface.build()

    def main_diagram(self) -> str:
        """Render the assembled, unpowered circuit."""
        surface = self._new_surface()
        center_x = self.config.canvas_width / 2

        surface.add_text(
            center_x,
            TITLE_Y,
            self.lesson.title,
            TEXT_SIZE_MAIN_TITLE,
            COLOR_TITLE,
            "middle",
            "bold",
        )
        surface.add_text(
            center_x,
            SUBTITLE_Y,
            "Complete Circuit Diagram",
            TEXT_SIZE_SUBTITLE,
            COLOR_TEXT_MUTED,
            "middle",
        )

        state = self.circuit_state(self.lesson.last_step_number)
        self._draw_circuit(surface, state)

        surface.end()
        return surface.build()

    def final_view(self) -> str:
        """Render the finished circuit powered up, with a success banner."""
        conf = self.config
        surface = self._new_surface()
        center_x = conf.canvas_width / 2

        surface.add_text(
            center_x,
            TITLE_Y,
            "Your Completed Circuit!",
            TEXT_SIZE_MAIN_TITLE,
            COLOR_SUCCESS,
            "middle",
            "bold",
        )

        state = self.circuit_state(self.lesson.last_step_number)
        self._draw_circuit(surface, state, energized=True)

        banner_y = conf.canvas_height - 80
        surface.add_rectangle(
            center_x - BANNER_WIDTH / 2,
            banner_y,
            BANNER_WIDTH,
            BANNER_HEIGHT,
            "#C8E6C9",
            "#388E3C",
            2,
            8,
        )
        surface.add_text(
            center_x,
            banner_y + 30,
            "✓ Circuit Complete! Well Done!",
            18,
            "#1B5E20",
            "middle",
            "bold",
        )

        surface.end()
        return surface.build()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _new_surface(self) -> DrawingSurface:
        surface = DrawingSurface(self.config.canvas_width, self.config.canvas_height)
        surface.start()
        return surface

    def _draw_circuit(
        self, surface: DrawingSurface, state: CircuitState, energized: bool = False
    ) -> None:
        # Wires go first so the components sit on top of their ends
        for wire in state.wires:
            render_wire(surface, wire)
        for component in self.components_for(state, energized).values():
            render_component(surface, component)

    def _draw_tip(self, surface: DrawingSurface, tip: str) -> None:
        conf = self.config
        top = conf.canvas_height - TIP_BOX_BOTTOM_OFFSET
        left = TIP_BOX_MARGIN + 20

        surface.add_rectangle(
            TIP_BOX_MARGIN,
            top,
            conf.canvas_width - 2 * TIP_BOX_MARGIN,
            TIP_BOX_HEIGHT,
            "#FFF9C4",
            "#F57F17",
            2,
            8,
        )
        surface.add_text(left, top + 25, "💡 Tip:", 14, "#F57F17", "start", "bold")
        self._draw_wrapped(
            surface,
            tip,
            left,
            top + 45,
            conf.canvas_width - 100,
            TEXT_SIZE_TIP,
            COLOR_TEXT,
            "start",
        )

    def _draw_wrapped(
        self,
        surface: DrawingSurface,
        text: str,
        x: float,
        y: float,
        max_width: float,
        font_size: int,
        fill: str = COLOR_TEXT_MUTED,
        anchor: str = "middle",
    ) -> None:
        lines = wrap_text(text, max_width, font_size, self.config.char_width_factor)
        for i, line in enumerate(lines):
            surface.add_text(x, y + i * (font_size + TEXT_LINE_SPACING), line, font_size, fill, anchor)
