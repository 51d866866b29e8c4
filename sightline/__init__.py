"""Sightline - 2D vector math and field-of-view visibility checks."""

from sightline.config import (
    DEFAULT_FIELD_OF_VIEW,
    DEFAULT_ORIENTATION,
    DEFAULT_POSITION,
    DEFAULT_VIEW_DISTANCE,
    PI,
    VECTOR_TOLERANCE,
)
from sightline.core import Camera2D, Vec2D, dot_product
from sightline.errors import DegenerateVectorError, SightlineError
from sightline.schemas import CameraOptions, Vector2DSchema

__version__ = "0.1.0"

__all__ = [
    "Vec2D",
    "Camera2D",
    "dot_product",
    "CameraOptions",
    "Vector2DSchema",
    "SightlineError",
    "DegenerateVectorError",
    "PI",
    "VECTOR_TOLERANCE",
    "DEFAULT_POSITION",
    "DEFAULT_ORIENTATION",
    "DEFAULT_FIELD_OF_VIEW",
    "DEFAULT_VIEW_DISTANCE",
]
