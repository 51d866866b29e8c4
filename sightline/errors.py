"""Exceptions raised by sightline."""


class SightlineError(Exception):
    """Base exception for sightline errors."""
    pass


class DegenerateVectorError(SightlineError, ValueError):
    """Raised when a zero-length vector is used where a direction is required."""
    pass


__all__ = ["SightlineError", "DegenerateVectorError"]
