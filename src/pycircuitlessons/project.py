"""
Batch generation of lesson diagrams.

For every lesson the diagrams are written into their own folder::

    <output_dir>/level-007/step-1.svg
    <output_dir>/level-007/step-2.svg
    <output_dir>/level-007/main-diagram.svg
    <output_dir>/level-007/final-view.svg

A lesson that fails to parse or to write never stops the rest of the batch;
the failure is logged and recorded on the report instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pycircuitlessons.config import BatchConfig, DiagramConfig
from pycircuitlessons.content_loader import load_lessons_from_dir
from pycircuitlessons.diagrams import DiagramGenerator
from pycircuitlessons.exceptions import ArtifactWriteError, LessonError
from pycircuitlessons.model.lesson import LessonSpec

logger = logging.getLogger(__name__)

MAIN_DIAGRAM_NAME = "main-diagram.svg"
FINAL_VIEW_NAME = "final-view.svg"


def step_file_name(step_number: int) -> str:
    return f"step-{step_number}.svg"


@dataclass
class LessonReport:
    """
    Outcome of generating one lesson's diagrams.

    Attributes:
        lesson_id: Lesson identifier.
        title: Lesson title.
        step_numbers: Step diagrams written, in ascending order.
        paths: Every file written, step diagrams first.
        error: The failure that stopped this lesson, if any.
    """

    lesson_id: int
    title: str = ""
    step_numbers: list[int] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    error: LessonError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    """Aggregated outcome of a batch run."""

    lessons: list[LessonReport] = field(default_factory=list)
    skipped: list[LessonError] = field(default_factory=list)

    @property
    def lesson_count(self) -> int:
        return len(self.lessons)

    @property
    def diagram_count(self) -> int:
        return sum(len(report.paths) for report in self.lessons)

    @property
    def failures(self) -> list[LessonError]:
        return self.skipped + [r.error for r in self.lessons if r.error is not None]

    @property
    def ok(self) -> bool:
        return not self.failures


def _write(lesson_id: int, path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as err:
        raise ArtifactWriteError(lesson_id, str(path), str(err)) from err


def generate_lesson_artifacts(
    lesson: LessonSpec,
    output_dir: Path,
    config: DiagramConfig | None = None,
) -> LessonReport:
    """
    Write the step, main and final diagrams for one lesson.

    Args:
        lesson: The lesson to draw.
        output_dir: The lesson's own folder; created if missing.
        config: Diagram settings.

    Returns:
        LessonReport: What was written. A write failure is recorded in
        ``error`` and ends this lesson; files already written stay.
    """
    report = LessonReport(lesson_id=lesson.id, title=lesson.title)
    generator = DiagramGenerator(lesson, config)

    try:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise ArtifactWriteError(lesson.id, str(output_dir), str(err)) from err

        for step in sorted(lesson.instructions, key=lambda s: s.step_number):
            path = output_dir / step_file_name(step.step_number)
            _write(lesson.id, path, generator.step_diagram(step.step_number))
            report.step_numbers.append(step.step_number)
            report.paths.append(path)
            logger.info("Generated %s", path)

        for name, render in (
            (MAIN_DIAGRAM_NAME, generator.main_diagram),
            (FINAL_VIEW_NAME, generator.final_view),
        ):
            path = output_dir / name
            _write(lesson.id, path, render())
            report.paths.append(path)
            logger.info("Generated %s", path)
    except ArtifactWriteError as err:
        logger.error("%s", err)
        report.error = err

    return report


def process_lessons(lessons: list[LessonSpec], config: BatchConfig) -> BatchReport:
    """Generate diagrams for already loaded lessons."""
    batch = BatchReport()
    for lesson in lessons:
        if config.lesson_ids is not None and lesson.id not in config.lesson_ids:
            continue
        batch.lessons.append(
            generate_lesson_artifacts(lesson, config.lesson_dir(lesson.id), config.diagram)
        )
    return batch


def process_batch(config: BatchConfig) -> BatchReport:
    """
    Load every shard selected by *config* and generate all diagrams.

    Returns:
        BatchReport: Per-lesson reports plus the records and shards that
        could not be loaded.
    """
    loaded = load_lessons_from_dir(config.data_dir, config.shard_pattern, config.max_shards)
    batch = process_lessons(loaded.lessons, config)
    batch.skipped.extend(loaded.errors)
    logger.info(
        "Processed %d lessons, %d diagrams, %d skipped records",
        batch.lesson_count,
        batch.diagram_count,
        len(batch.skipped),
    )
    return batch
