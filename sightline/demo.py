"""Fixed demonstration trace for the vector and camera primitives.

Prints expected-vs-actual results for a known set of cases. This is
documentation-as-output; the automated checks live in the test suite.

Usage:
    python -m sightline
    python -m sightline --verbose
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from rich.console import Console
from rich.table import Table

from .config import PI
from .core.camera import Camera2D
from .core.vec2 import Vec2D


logger = logging.getLogger(__name__)

Value = Union[bool, float, Vec2D]

# Looser than vector equality so rounded expectations like ~7.071 match
DISPLAY_TOLERANCE = 0.001


@dataclass
class DemoCheck:
    """One line of the demonstration trace."""
    section: str
    description: str
    expected: Value
    actual: Value

    @property
    def matches(self) -> bool:
        if isinstance(self.expected, bool) or isinstance(self.actual, bool):
            return self.expected is self.actual
        if isinstance(self.expected, Vec2D):
            return isinstance(self.actual, Vec2D) and self.actual.equals(
                self.expected, tolerance=DISPLAY_TOLERANCE
            )
        return math.isclose(self.actual, self.expected, abs_tol=DISPLAY_TOLERANCE)


def _fmt(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Vec2D):
        return f"({value.x:.4g}, {value.y:.4g})"
    return f"{value:.4g}"


def vector_checks() -> List[DemoCheck]:
    """Vector math cases."""
    origin = Vec2D(0.0, 0.0)
    unit_right = Vec2D.right()
    unit_up = Vec2D.up()
    unit_left = Vec2D.left()
    a = Vec2D(5.0, 5.0)
    b = Vec2D(42.0, -12.0)
    near_right = Vec2D(1.01, 0.0)

    section = "Vec2D"
    return [
        DemoCheck(section, "Parallel unit vectors, same direction: dot", 1.0, unit_right.dot_product(unit_right)),
        DemoCheck(section, "Orthogonal unit vectors: dot", 0.0, unit_right.dot_product(unit_up)),
        DemoCheck(section, "Parallel unit vectors, opposite directions: dot", -1.0, unit_right.dot_product(unit_left)),
        DemoCheck(section, "(5,5) dot (5,5)", 50.0, a.dot_product(a)),
        DemoCheck(section, "(5,5) dot (42,-12)", 150.0, a.dot_product(b)),
        DemoCheck(section, "Magnitude of (0,0)", 0.0, origin.magnitude()),
        DemoCheck(section, "Magnitude of (1,0)", 1.0, unit_right.magnitude()),
        DemoCheck(section, "Magnitude of (5,5)", 7.0711, a.magnitude()),
        DemoCheck(section, "Magnitude of (42,-12)", 43.6807, b.magnitude()),
        DemoCheck(section, "Normalized (1,0)", Vec2D(1.0, 0.0), unit_right.normalized()),
        DemoCheck(section, "Normalized (5,5)", Vec2D(0.7071, 0.7071), a.normalized()),
        DemoCheck(section, "Normalized (42,-12)", Vec2D(0.9615, -0.2747), b.normalized()),
        DemoCheck(section, "Normalized (0,0)", Vec2D(0.0, 0.0), origin.normalized()),
        DemoCheck(section, "(5,5) - (42,-12)", Vec2D(-37.0, 17.0), a - b),
        DemoCheck(section, "(5,5) + (42,-12)", Vec2D(47.0, -7.0), a + b),
        DemoCheck(section, "(1,0) == (1,0)", True, unit_right == unit_right),
        DemoCheck(section, "(1,0) == (1.01,0)", False, unit_right == near_right),
    ]


def camera_checks() -> List[DemoCheck]:
    """Camera at the origin facing up, 90 degree field of view, 100 view distance."""
    camera = Camera2D(Vec2D(0.0, 0.0), Vec2D(0.0, 1.0), PI / 2.0, 100.0)

    cases = [
        ("Target 300 units away, beyond view distance", Vec2D(0.0, 300.0), False),
        ("Target 50 units ahead", Vec2D(0.0, 50.0), True),
        ("Target in range but behind", Vec2D(0.0, -50.0), False),
        ("Target in range but to the right", Vec2D(50.0, 0.0), False),
        ("Target in range but to the left", Vec2D(-50.0, 0.0), False),
        ("Target on edge of vision", Vec2D(50.0, 50.0), False),
        ("Target just within edge of vision", Vec2D(50.0, 50.1), True),
        ("Target on edge of vision (opposite side)", Vec2D(-50.0, 50.0), False),
        ("Target just within edge of vision (opposite side)", Vec2D(-50.0, 50.1), True),
        ("Target on the camera's own position", Vec2D(0.0, 0.0), False),
    ]
    return [
        DemoCheck("Camera2D", description, expected, camera.can_see_target(target))
        for description, target, expected in cases
    ]


def build_checks() -> List[DemoCheck]:
    return vector_checks() + camera_checks()


def render_checks(checks: List[DemoCheck], console: Console) -> None:
    """Print checks grouped by section."""
    sections = []
    for check in checks:
        if check.section not in sections:
            sections.append(check.section)

    for section in sections:
        table = Table(title=f"{section} Tests", title_justify="left")
        table.add_column("Case")
        table.add_column("Expected", justify="right")
        table.add_column("Actual", justify="right")
        table.add_column("", justify="center")
        for check in checks:
            if check.section != section:
                continue
            marker = "[green]ok[/green]" if check.matches else "[bold red]MISMATCH[/bold red]"
            table.add_row(check.description, _fmt(check.expected), _fmt(check.actual), marker)
        console.print(table)
        console.print()


def run_demo(console: Optional[Console] = None) -> List[DemoCheck]:
    """Build, print, and return the demonstration trace."""
    console = console or Console()
    checks = build_checks()
    mismatches = [check for check in checks if not check.matches]
    if mismatches:
        logger.warning("%d of %d demo cases differ from expectations", len(mismatches), len(checks))
    render_checks(checks, console)
    return checks
