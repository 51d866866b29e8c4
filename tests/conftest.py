"""Shared pytest fixtures for Sightline tests."""

import pytest

from sightline.config import PI, reset_config
from sightline.core.camera import Camera2D
from sightline.core.vec2 import Vec2D


# =============================================================================
# Vector Fixtures
# =============================================================================


@pytest.fixture
def origin() -> Vec2D:
    """Zero vector."""
    return Vec2D(0.0, 0.0)


@pytest.fixture
def sample_vectors() -> list[Vec2D]:
    """Assorted non-zero vectors, including tiny and large ones."""
    return [
        Vec2D(1.0, 0.0),
        Vec2D(0.0, -1.0),
        Vec2D(5.0, 5.0),
        Vec2D(42.0, -12.0),
        Vec2D(-3.5, 0.25),
        Vec2D(1e-6, 2e-6),
        Vec2D(1e6, -7e5),
    ]


# =============================================================================
# Camera Fixtures
# =============================================================================


@pytest.fixture
def default_camera() -> Camera2D:
    """Camera with every option left at its default."""
    return Camera2D()


@pytest.fixture
def narrow_camera() -> Camera2D:
    """Camera at origin facing up, 90 degree field of view, 100 view distance."""
    return Camera2D(Vec2D(0.0, 0.0), Vec2D(0.0, 1.0), PI / 2.0, 100.0)


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def clean_config(monkeypatch):
    """Drop cached config and SIGHTLINE_* environment overrides."""
    monkeypatch.delenv("SIGHTLINE_LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
