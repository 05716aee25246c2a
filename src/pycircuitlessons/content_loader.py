"""Load lesson records from JSON shard files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import LessonParseError
from .model.lesson import ComponentRequirement, InstructionStep, LessonSpec

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Lessons that parsed, plus the errors for everything that didn't."""

    lessons: list[LessonSpec] = field(default_factory=list)
    errors: list[LessonParseError] = field(default_factory=list)


def _normalize(raw: Any, source: str, what: str) -> dict[str, Any]:
    """Key a JSON object case-insensitively: stepNumber, StepNumber and step_number agree."""
    if not isinstance(raw, dict):
        raise LessonParseError(source, f"{what} must be an object, got {type(raw).__name__}")
    return {str(key).lower().replace("_", ""): value for key, value in raw.items()}


def _as_int(value: Any, source: str, what: str) -> int:
    if isinstance(value, bool):
        raise LessonParseError(source, f"{what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise LessonParseError(source, f"{what} must be an integer, got {value!r}") from err


def _component_from_dict(raw: Any, source: str) -> ComponentRequirement:
    """Build a parts-list entry from raw JSON content."""
    data = _normalize(raw, source, "component")
    name = str(data.get("name", "")).strip()
    if not name:
        raise LessonParseError(source, "component has no name")
    quantity = _as_int(data.get("quantity", 1), source, f"quantity of '{name}'")
    if quantity < 0:
        raise LessonParseError(source, f"quantity of '{name}' is negative")
    return ComponentRequirement(
        name=name, quantity=quantity, description=str(data.get("description", ""))
    )


def _instruction_from_dict(raw: Any, source: str) -> InstructionStep:
    """Build an instruction step from raw JSON content."""
    data = _normalize(raw, source, "instruction")
    if "stepnumber" not in data:
        raise LessonParseError(source, "instruction has no stepNumber")
    tip = data.get("tip")
    return InstructionStep(
        step_number=_as_int(data["stepnumber"], source, "stepNumber"),
        title=str(data.get("title", "")),
        description=str(data.get("description", "")),
        tip=str(tip) if tip else None,
    )


def lesson_from_dict(raw: Any, source: str = "<memory>") -> LessonSpec:
    """
    Build a lesson from one raw JSON object.

    Fields the diagrams don't use (quiz, fun fact, safety notes, image
    URLs) are ignored.

    Raises:
        LessonParseError: If required fields are missing or mistyped.
    """
    data = _normalize(raw, source, "lesson")
    if "id" not in data:
        raise LessonParseError(source, "lesson has no id")
    lesson_id = _as_int(data["id"], source, "id")
    where = f"{source} (lesson {lesson_id})"

    components = data.get("components") or []
    instructions = data.get("instructions") or []
    if not isinstance(components, list) or not isinstance(instructions, list):
        raise LessonParseError(where, "components and instructions must be lists")

    return LessonSpec(
        id=lesson_id,
        title=str(data.get("title", "")),
        components=tuple(_component_from_dict(item, where) for item in components),
        instructions=tuple(_instruction_from_dict(item, where) for item in instructions),
        category=str(data.get("category", "")),
        difficulty=_as_int(data.get("difficulty", 0) or 0, where, "difficulty"),
    )


def load_lessons_from_file(path: Path) -> LoadResult:
    """
    Load every lesson in one shard.

    A record that fails to parse is logged and skipped; the rest of the
    shard is still returned.

    Raises:
        LessonParseError: If the file can't be read or isn't a JSON array.
    """
    source = str(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8-sig"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as err:
        raise LessonParseError(source, str(err)) from err
    if not isinstance(raw, list):
        raise LessonParseError(source, f"expected a list of lessons, got {type(raw).__name__}")

    result = LoadResult()
    for index, item in enumerate(raw):
        try:
            result.lessons.append(lesson_from_dict(item, f"{source}[{index}]"))
        except LessonParseError as err:
            logger.warning("Skipping lesson record: %s", err)
            result.errors.append(err)
    return result


def find_shards(data_dir: Path, pattern: str = "levels-*.json", max_shards: int | None = None) -> list[Path]:
    """Shard files in name order, optionally only the first *max_shards*."""
    shards = sorted(data_dir.glob(pattern))
    if max_shards is not None:
        shards = shards[:max_shards]
    return shards


def load_lessons_from_dir(
    data_dir: Path, pattern: str = "levels-*.json", max_shards: int | None = None
) -> LoadResult:
    """
    Load lessons from every shard in *data_dir*.

    Unreadable shards are logged and recorded in ``errors``; they never
    stop the remaining shards from loading.
    """
    result = LoadResult()
    for shard in find_shards(data_dir, pattern, max_shards):
        try:
            shard_result = load_lessons_from_file(shard)
        except LessonParseError as err:
            logger.error("Skipping shard: %s", err)
            result.errors.append(err)
            continue
        logger.info("Loaded %d lessons from %s", len(shard_result.lessons), shard.name)
        result.lessons.extend(shard_result.lessons)
        result.errors.extend(shard_result.errors)
    return result
