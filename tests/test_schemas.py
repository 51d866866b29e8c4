"""Tests for camera construction options."""

import math
import sys

import pytest
from pydantic import ValidationError

from sightline.config import PI
from sightline.core.camera import Camera2D
from sightline.core.vec2 import Vec2D
from sightline.schemas import CameraOptions, Vector2DSchema


class TestCameraOptions:
    """Tests for CameraOptions defaults and validation."""

    def test_defaults(self):
        options = CameraOptions()
        assert options.position == Vector2DSchema(x=0.0, y=0.0)
        assert options.orientation == Vector2DSchema(x=0.0, y=1.0)
        assert options.field_of_view == PI
        assert options.view_distance == sys.float_info.max

    def test_from_dict(self):
        options = CameraOptions.model_validate({
            "position": {"x": 1, "y": 2},
            "orientation": {"x": 0, "y": 5},
            "field_of_view": 1.5,
            "view_distance": 40,
        })
        assert options.position.to_vec() == Vec2D(1, 2)
        assert options.view_distance == 40.0

    @pytest.mark.parametrize("field,value", [
        ("field_of_view", math.nan),
        ("field_of_view", math.inf),
        ("view_distance", -math.inf),
    ])
    def test_rejects_non_finite(self, field, value):
        with pytest.raises(ValidationError):
            CameraOptions(**{field: value})

    def test_rejects_non_finite_vector(self):
        with pytest.raises(ValidationError):
            Vector2DSchema(x=math.nan, y=0.0)

    def test_negative_values_accepted(self):
        """Sign correction is the camera's job, not the schema's."""
        options = CameraOptions(field_of_view=-1.0, view_distance=-5.0)
        camera = Camera2D.from_options(options)
        assert camera.field_of_view == 1.0
        assert camera.view_distance == 5.0


class TestCameraFromOptions:
    """Tests for Camera2D.from_options() and to_options()."""

    def test_from_default_options_matches_default_camera(self):
        camera = Camera2D.from_options(CameraOptions())
        default = Camera2D()
        assert camera.position == default.position
        assert camera.orientation == default.orientation
        assert camera.field_of_view == default.field_of_view
        assert camera.view_distance == default.view_distance

    def test_orientation_normalized(self):
        options = CameraOptions(orientation=Vector2DSchema(x=0.0, y=5.0))
        camera = Camera2D.from_options(options)
        assert camera.orientation == Vec2D(0, 1)

    def test_to_options_reports_normalized_state(self):
        camera = Camera2D(Vec2D(3, -2), Vec2D(10, 0), PI / 2, 100.0)
        options = camera.to_options()
        assert options.position.to_vec() == Vec2D(3, -2)
        assert options.orientation.to_vec() == Vec2D(1, 0)
        assert options.field_of_view == pytest.approx(PI / 2)
        assert options.view_distance == 100.0

    def test_options_round_trip_preserves_visibility(self, narrow_camera):
        copy = Camera2D.from_options(narrow_camera.to_options())
        for target in [Vec2D(50, 50), Vec2D(50, 50.1), Vec2D(0, 300)]:
            assert copy.can_see_target(target) is narrow_camera.can_see_target(target)
