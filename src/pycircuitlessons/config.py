"""
Run configuration for diagram generation.

Geometry and colors are fixed in ``model.constants``; the settings here are
the ones that vary between runs or encode lesson-authoring conventions.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pycircuitlessons.model.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CHAR_WIDTH_FACTOR,
)


@dataclass(frozen=True)
class DiagramConfig:
    """
    Settings for a single lesson's diagrams.

    Attributes:
        canvas_width: Document width in px.
        canvas_height: Document height in px.
        char_width_factor: Average glyph width as a fraction of the font
            size, used to wrap description and tip text.
        replacement_keywords: Words that mark a step as using the
            replacement (second) resistor, e.g. "swap in the 1k resistor".
        replacement_from_step: From this step number on, battery/resistor
            wiring uses the replacement resistor when the lesson has one.
    """

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    char_width_factor: float = CHAR_WIDTH_FACTOR
    replacement_keywords: tuple[str, ...] = ("1k", "reconnect")
    replacement_from_step: int = 4


@dataclass(frozen=True)
class BatchConfig:
    """
    Settings for generating diagrams for a directory of lesson shards.

    Attributes:
        data_dir: Directory containing the lesson shard files.
        output_dir: Root directory for per-lesson output folders.
        shard_pattern: Glob selecting shard files inside ``data_dir``.
        max_shards: Only process the first N shards (sorted by name).
        id_width: Zero-padding width of lesson ids in folder names.
        lesson_ids: When set, only these lessons are generated.
        diagram: Settings passed to every lesson's generator.
    """

    data_dir: Path
    output_dir: Path
    shard_pattern: str = "levels-*.json"
    max_shards: int | None = None
    id_width: int = 3
    lesson_ids: frozenset[int] | None = None
    diagram: DiagramConfig = field(default_factory=DiagramConfig)

    def lesson_dir(self, lesson_id: int) -> Path:
        """Output folder for one lesson, e.g. ``<output>/level-007``."""
        return self.output_dir / f"level-{lesson_id:0{self.id_width}d}"
