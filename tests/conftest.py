import json
import os
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from pycircuitlessons.model.lesson import ComponentRequirement, InstructionStep, LessonSpec

SVG = "{http://www.w3.org/2000/svg}"


# Fixture to handle snapshot comparison for SVG content
@pytest.fixture
def snapshot_svg(request):
    """
    Fixture that returns a function to compare SVG content against a stored snapshot.
    Usage:
        def test_something(snapshot_svg):
            svg_content = generate_svg()
            snapshot_svg(svg_content, "something_snapshot")
    """
    snapshot_dir = Path(__file__).parent / "snapshots"
    snapshot_dir.mkdir(exist_ok=True)

    def _compare(content: str, snapshot_name: str):
        content = content.strip()
        snapshot_file = snapshot_dir / f"{snapshot_name}.svg"

        # Environment variable to force update snapshots: PYTEST_UPDATE_SNAPSHOTS=1
        update_snapshots = os.getenv("PYTEST_UPDATE_SNAPSHOTS") == "1"

        if not snapshot_file.exists() or update_snapshots:
            snapshot_file.write_text(content, encoding="utf-8")
            if update_snapshots:
                print(f"Updated snapshot: {snapshot_file}")
            else:
                print(f"Created new snapshot: {snapshot_file}")
            return

        expected_content = snapshot_file.read_text(encoding="utf-8").strip()
        assert content == expected_content, (
            f"Snapshot mismatch for {snapshot_name}. \n"
            f"Run with PYTEST_UPDATE_SNAPSHOTS=1 to update if this change is intentional."
        )

    return _compare


class SvgDoc:
    """Parsed SVG with lookups for the groups the renderers emit."""

    def __init__(self, markup: str):
        self.root = ET.fromstring(markup)

    def groups(self, css_class: str) -> list[ET.Element]:
        return [
            g
            for g in self.root.iter(f"{SVG}g")
            if css_class in (g.get("class") or "").split()
        ]

    @property
    def wires(self) -> list[ET.Element]:
        return self.groups("wire")

    @property
    def highlighted_wires(self) -> list[ET.Element]:
        return [g for g in self.wires if "highlighted" in g.get("class").split()]

    @property
    def components(self) -> dict[str, ET.Element]:
        return {g.get("id"): g for g in self.groups("component")}

    @property
    def highlighted_components(self) -> set[str]:
        return {
            key for key, g in self.components.items() if "highlighted" in g.get("class").split()
        }

    def texts(self) -> list[str]:
        return [t.text or "" for t in self.root.iter(f"{SVG}text")]

    @staticmethod
    def wire_color(group: ET.Element) -> str:
        stroke = group.find(f"{SVG}path")
        if stroke is None:
            stroke = group.find(f"{SVG}line")
        return stroke.get("stroke")


@pytest.fixture
def parse_svg():
    return SvgDoc


@pytest.fixture
def single_led_lesson():
    """1 LED + 1 battery, identify / positive / negative / light."""
    return LessonSpec(
        id=1,
        title="Light Up Your First LED",
        components=(
            ComponentRequirement("LED (any color)", 1),
            ComponentRequirement("AA Battery Pack", 1),
            ComponentRequirement("Jumper Wires", 2),
        ),
        instructions=(
            InstructionStep(1, "Meet the LED", "Identify the LED legs. The long leg is positive."),
            InstructionStep(
                2,
                "Connect Positive",
                "Connect the battery positive (+) wire to the LED long leg.",
                tip="Red wires carry current from the positive side.",
            ),
            InstructionStep(
                3,
                "Connect Negative",
                "Connect the LED short leg to the battery negative (-) wire.",
            ),
            InstructionStep(4, "See the Light", "Watch your LED light up!"),
        ),
    )


@pytest.fixture
def switch_lesson():
    """1 LED + 1 battery + 1 switch, three wiring steps and a test step."""
    return LessonSpec(
        id=2,
        title="Add a Switch",
        components=(
            ComponentRequirement("Red LED", 1),
            ComponentRequirement("Battery Holder", 1),
            ComponentRequirement("Slide Switch", 1),
        ),
        instructions=(
            InstructionStep(1, "Power to Switch", "Connect the battery positive wire to the switch."),
            InstructionStep(2, "Switch to LED", "Connect the switch to the LED long leg."),
            InstructionStep(3, "Close the Loop", "Connect the LED short leg to the battery negative."),
            InstructionStep(4, "Test It", "Flip the switch to test your circuit!"),
        ),
    )


@pytest.fixture
def lesson_record():
    """A raw lesson record as it appears in a shard file."""
    return {
        "id": 7,
        "title": "Resistors Protect LEDs",
        "category": "Beginner Zone",
        "difficulty": 2,
        "funFact": "Resistors turn extra energy into heat.",
        "components": [
            {"name": "LED", "quantity": 1, "description": "Any color"},
            {"name": "330 Ohm Resistor", "quantity": 1},
            {"name": "AA Battery", "quantity": 2},
        ],
        "instructions": [
            {
                "stepNumber": 1,
                "title": "Battery to Resistor",
                "description": "Connect the battery positive to the resistor.",
                "tip": "Resistors have no polarity.",
            },
            {
                "stepNumber": 2,
                "title": "Resistor to LED",
                "description": "Connect the resistor to the LED long leg.",
            },
        ],
        "quiz": {"question": "What does a resistor do?", "options": ["a", "b"]},
    }


@pytest.fixture
def shard_dir(tmp_path, lesson_record):
    """A data directory with two shards, the second holding a broken record."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "levels-001-010.json").write_text(json.dumps([lesson_record]), encoding="utf-8")

    second = dict(lesson_record, id=8, title="Second Lesson")
    (data_dir / "levels-011-020.json").write_text(
        json.dumps([second, {"title": "No id here"}]), encoding="utf-8"
    )
    return data_dir
