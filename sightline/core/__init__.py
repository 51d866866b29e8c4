"""Core layer - vector math and camera visibility."""

from .vec2 import Vec2D, add, dot_product, equals, magnitude, normalized, subtract
from .camera import Camera2D

__all__ = [
    "Vec2D",
    "Camera2D",
    "dot_product",
    "magnitude",
    "normalized",
    "equals",
    "add",
    "subtract",
]
