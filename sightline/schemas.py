"""Pydantic schemas for camera construction options."""

from pydantic import BaseModel, Field

from .config import (
    DEFAULT_FIELD_OF_VIEW,
    DEFAULT_ORIENTATION,
    DEFAULT_POSITION,
    DEFAULT_VIEW_DISTANCE,
)
from .core.vec2 import Vec2D


class Vector2DSchema(BaseModel):
    """2D vector with finite components."""

    x: float = Field(default=0.0, allow_inf_nan=False)
    y: float = Field(default=0.0, allow_inf_nan=False)

    def to_vec(self) -> Vec2D:
        return Vec2D(self.x, self.y)

    @classmethod
    def from_vec(cls, vec: Vec2D) -> "Vector2DSchema":
        return cls(x=vec.x, y=vec.y)


class CameraOptions(BaseModel):
    """Recognized Camera2D construction options.

    Defaults:
        position: origin
        orientation: (0, 1), facing up
        field_of_view: pi radians (180 degrees)
        view_distance: largest finite float (unlimited)

    Negative angles and distances are accepted here and made positive by
    the camera. Non-finite numbers are rejected.
    """

    position: Vector2DSchema = Field(
        default_factory=lambda: Vector2DSchema(
            x=DEFAULT_POSITION[0], y=DEFAULT_POSITION[1]
        )
    )
    orientation: Vector2DSchema = Field(
        default_factory=lambda: Vector2DSchema(
            x=DEFAULT_ORIENTATION[0], y=DEFAULT_ORIENTATION[1]
        )
    )
    field_of_view: float = Field(default=DEFAULT_FIELD_OF_VIEW, allow_inf_nan=False)
    view_distance: float = Field(default=DEFAULT_VIEW_DISTANCE, allow_inf_nan=False)


__all__ = ["Vector2DSchema", "CameraOptions"]
