"""
PyCircuitLessons Library.
"""

from .config import BatchConfig, DiagramConfig
from .content_loader import LoadResult, lesson_from_dict, load_lessons_from_dir, load_lessons_from_file
from .diagrams import DiagramGenerator, wrap_text
from .exceptions import ArtifactWriteError, LessonError, LessonParseError
from .interpreter import RULES, Rule, match_rule, replay
from .layout import classify_component, count_components, layout_components
from .model import (
    Battery,
    Buzzer,
    CircuitState,
    ComponentKind,
    ComponentRequirement,
    InstructionStep,
    Led,
    LessonSpec,
    Point,
    PushButton,
    Resistor,
    Switch,
    WireConnection,
)
from .project import BatchReport, LessonReport, generate_lesson_artifacts, process_batch
from .rendering import DrawingSurface
