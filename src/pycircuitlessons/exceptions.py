"""Custom exceptions for pycircuitlessons."""


class LessonError(Exception):
    """
    Base class for failures surfaced to batch callers.

    Rule evaluation never raises: a rule that references a missing component
    simply contributes no wire.
    """

    pass


class LessonParseError(LessonError):
    """Raised when a lesson shard or lesson record cannot be parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not parse lesson data from '{source}': {reason}")


class ArtifactWriteError(LessonError):
    """Raised when a rendered diagram cannot be written to storage."""

    def __init__(self, lesson_id: int, path: str, reason: str):
        self.lesson_id = lesson_id
        self.path = path
        self.reason = reason
        super().__init__(
            f"Failed to write diagram for lesson {lesson_id} to '{path}': {reason}"
        )
