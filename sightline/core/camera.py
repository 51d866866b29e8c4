"""Point camera with a cone of vision and a maximum view distance.

Visibility is purely angular plus range. There is no occlusion: a camera
sees a target whenever the target is within ``view_distance`` and strictly
inside the cone of ``field_of_view`` radians centered on ``orientation``.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional

from ..config import (
    DEFAULT_FIELD_OF_VIEW,
    DEFAULT_ORIENTATION,
    DEFAULT_POSITION,
    DEFAULT_VIEW_DISTANCE,
)
from .vec2 import Vec2D

if TYPE_CHECKING:
    from ..schemas import CameraOptions


logger = logging.getLogger(__name__)


class Camera2D:
    """A simple camera that can tell whether a location is within its sight line.

    Attributes:
        position: Camera location
        orientation: Facing direction, always stored normalized
        field_of_view: Total cone width in radians, half on each side
        view_distance: Maximum distance at which targets are visible

    Negative field of view and view distance values are made positive,
    both at construction and through the setters. Assigning a zero
    orientation leaves the camera degenerate (see :attr:`is_degenerate`).
    """

    def __init__(
        self,
        position: Optional[Vec2D] = None,
        orientation: Optional[Vec2D] = None,
        field_of_view: float = DEFAULT_FIELD_OF_VIEW,
        view_distance: float = DEFAULT_VIEW_DISTANCE,
    ) -> None:
        self._position = position if position is not None else Vec2D(*DEFAULT_POSITION)
        self._orientation = Vec2D.up()
        self._field_of_view = DEFAULT_FIELD_OF_VIEW
        self._view_distance = DEFAULT_VIEW_DISTANCE

        self.orientation = orientation if orientation is not None else Vec2D(*DEFAULT_ORIENTATION)
        self.field_of_view = field_of_view
        self.view_distance = view_distance

    # =========================================================================
    # Construction Options
    # =========================================================================

    @classmethod
    def from_options(cls, options: CameraOptions) -> Camera2D:
        """Build a camera from validated construction options."""
        return cls(
            position=options.position.to_vec(),
            orientation=options.orientation.to_vec(),
            field_of_view=options.field_of_view,
            view_distance=options.view_distance,
        )

    def to_options(self) -> CameraOptions:
        """Current state as construction options (orientation normalized)."""
        from ..schemas import CameraOptions, Vector2DSchema

        return CameraOptions(
            position=Vector2DSchema.from_vec(self._position),
            orientation=Vector2DSchema.from_vec(self._orientation),
            field_of_view=self._field_of_view,
            view_distance=self._view_distance,
        )

    # =========================================================================
    # State
    # =========================================================================

    @property
    def position(self) -> Vec2D:
        return self._position

    @position.setter
    def position(self, position: Vec2D) -> None:
        self._position = position

    @property
    def orientation(self) -> Vec2D:
        return self._orientation

    @orientation.setter
    def orientation(self, orientation: Vec2D) -> None:
        # Enforce orientation to be a unit vector
        self._orientation = orientation.normalized()
        if self._orientation.is_zero():
            logger.warning(
                "Camera orientation set to zero vector; visibility checks are degraded"
            )

    @property
    def field_of_view(self) -> float:
        """Field of view in radians."""
        return self._field_of_view

    @field_of_view.setter
    def field_of_view(self, angle_rad: float) -> None:
        if angle_rad < 0:
            logger.debug("Negative field of view %r made positive", angle_rad)
        self._field_of_view = abs(angle_rad)

    @property
    def view_distance(self) -> float:
        return self._view_distance

    @view_distance.setter
    def view_distance(self, distance: float) -> None:
        if distance < 0:
            logger.debug("Negative view distance %r made positive", distance)
        self._view_distance = abs(distance)

    @property
    def is_degenerate(self) -> bool:
        """True when the orientation has no direction.

        A degenerate camera always measures a right angle to its target,
        so it only sees anything when ``field_of_view`` exceeds pi.
        """
        return self._orientation.is_zero()

    def set_position(self, position: Vec2D) -> None:
        self.position = position

    def set_orientation(self, orientation: Vec2D) -> None:
        self.orientation = orientation

    def set_field_of_view(self, angle_rad: float) -> None:
        """Sets the field of view in radians."""
        self.field_of_view = angle_rad

    def set_view_distance(self, distance: float) -> None:
        self.view_distance = distance

    # =========================================================================
    # Queries
    # =========================================================================

    def distance_to_target(self, target_position: Vec2D) -> float:
        return (target_position - self._position).magnitude()

    def is_in_range(self, target_position: Vec2D) -> bool:
        """True when the target is no farther than ``view_distance``."""
        return self.distance_to_target(target_position) <= self._view_distance

    def angle_to_target(self, target_position: Vec2D) -> Optional[float]:
        """Unsigned angle (0 to pi) between orientation and the target.

        Returns None when the target coincides with the camera.
        """
        if target_position == self._position:
            return None
        vector_to_target = target_position - self._position
        return self._angle_to(vector_to_target, vector_to_target.magnitude())

    def _angle_to(self, vector_to_target: Vec2D, distance_to_target: float) -> float:
        # Orientation is a unit vector, otherwise its magnitude would be in the denominator
        cos_angle = self._orientation.dot_product(vector_to_target) / distance_to_target
        # Clamp to avoid floating point errors with acos
        cos_angle = max(-1.0, min(1.0, cos_angle))
        return math.acos(cos_angle)

    def can_see_target(self, target_position: Vec2D) -> bool:
        """Determine whether the target position is within sight of the camera.

        A target on the camera's own position, beyond ``view_distance``, or
        on or outside the edge of the field of view is not visible.
        """
        # Camera can't see something on its own position
        if target_position == self._position:
            logger.debug("Target %s coincides with camera", target_position)
            return False

        vector_to_target = target_position - self._position
        distance_to_target = vector_to_target.magnitude()

        if distance_to_target > self._view_distance:
            logger.debug(
                "Target %s out of range (%.4f > %.4f)",
                target_position, distance_to_target, self._view_distance,
            )
            return False

        angle_to_target = self._angle_to(vector_to_target, distance_to_target)
        visible = angle_to_target < self._field_of_view / 2.0
        logger.debug(
            "Target %s at angle %.6f, half field of view %.6f, visible=%s",
            target_position, angle_to_target, self._field_of_view / 2.0, visible,
        )
        return visible

    def __repr__(self) -> str:
        return (
            f"Camera2D(position={self._position!r}, orientation={self._orientation!r}, "
            f"field_of_view={self._field_of_view:.4f}, view_distance={self._view_distance:.4g})"
        )


__all__ = ["Camera2D"]
