"""2D vector implementation.

All positions and directions used by the camera are Vec2D values.

Coordinate system:
    +X = Right
    +Y = Up (the default camera orientation)

Components are expected to be finite. Behavior with NaN or infinite
components is undefined.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import VECTOR_TOLERANCE
from ..errors import DegenerateVectorError


@dataclass(frozen=True, slots=True, eq=False)
class Vec2D:
    """Immutable 2D vector.

    Equality is approximate: two vectors are equal when each axis differs
    by less than ``VECTOR_TOLERANCE``. Because that relation cannot be
    hashed consistently, Vec2D is not hashable.

    Examples:
        >>> Vec2D(3, 4).magnitude()
        5.0
        >>> Vec2D(5.0, 5.0).dot_product(Vec2D(42.0, -12.0))
        150.0
        >>> Vec2D(0, 0).normalized()
        Vec2D(0.00, 0.00)
    """
    x: float = 0.0
    y: float = 0.0

    __hash__ = None

    # =========================================================================
    # Named Operations
    # =========================================================================

    def dot_product(self, other: Vec2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Euclidean length, always >= 0."""
        return math.hypot(self.x, self.y)

    def normalized(self, strict: bool = False) -> Vec2D:
        """Unit vector in the same direction.

        A zero vector has no direction. By default it normalizes to the
        zero vector, so callers that need a guaranteed unit vector must
        check the result with :meth:`is_zero`. Pass ``strict=True`` to get
        a :class:`DegenerateVectorError` instead.
        """
        length = self.magnitude()
        if length == 0:
            if strict:
                raise DegenerateVectorError("Cannot normalize a zero-length vector.")
            return Vec2D(0.0, 0.0)
        return Vec2D(self.x / length, self.y / length)

    def equals(self, other: Vec2D, tolerance: float = VECTOR_TOLERANCE) -> bool:
        """Per-axis approximate equality (not Euclidean distance)."""
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
        )

    def add(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x - other.x, self.y - other.y)

    # =========================================================================
    # Operators
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.equals(other)

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2D(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    # =========================================================================
    # Utility
    # =========================================================================

    def distance_to(self, other: Vec2D) -> float:
        """Euclidean distance to another point."""
        return (other - self).magnitude()

    def is_zero(self) -> bool:
        """True only for the exact zero vector."""
        return self.x == 0 and self.y == 0

    def with_x(self, x: float) -> Vec2D:
        """Return new vector with different x."""
        return Vec2D(x, self.y)

    def with_y(self, y: float) -> Vec2D:
        """Return new vector with different y."""
        return Vec2D(self.x, y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vec2D({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.4g}, {self.y:.4g})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2D:
        """Zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def up(cls) -> Vec2D:
        """Unit vector pointing up (+Y)."""
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> Vec2D:
        """Unit vector pointing down (-Y)."""
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> Vec2D:
        """Unit vector pointing left (-X)."""
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vec2D:
        """Unit vector pointing right (+X)."""
        return cls(1.0, 0.0)

    @classmethod
    def from_angle(cls, radians: float, length: float = 1.0) -> Vec2D:
        """Create vector from angle (measured from +X) and length."""
        return cls(math.cos(radians) * length, math.sin(radians) * length)


# =============================================================================
# Function forms
# =============================================================================

def dot_product(a: Vec2D, b: Vec2D) -> float:
    return a.dot_product(b)


def magnitude(v: Vec2D) -> float:
    return v.magnitude()


def normalized(v: Vec2D) -> Vec2D:
    return v.normalized()


def equals(a: Vec2D, b: Vec2D) -> bool:
    return a.equals(b)


def add(a: Vec2D, b: Vec2D) -> Vec2D:
    return a.add(b)


def subtract(a: Vec2D, b: Vec2D) -> Vec2D:
    return a.subtract(b)


__all__ = [
    "Vec2D",
    "dot_product",
    "magnitude",
    "normalized",
    "equals",
    "add",
    "subtract",
]
