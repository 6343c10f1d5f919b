import math

import numpy as np
import pytest

from actionkit.camera import Camera
from actionkit.vecmath import cross, dot, normalize, transform_coord

EYE = (0.0, 10.0, -10.0)
FOCUS = (0.0, 0.0, 0.0)
UP = (0.0, 1.0, 0.0)


@pytest.fixture
def camera():
    cam = Camera()
    cam.set_look_at(EYE, FOCUS, UP)
    return cam


def test_front_points_from_eye_to_focus(camera):
    expected = normalize(tuple(f - e for f, e in zip(FOCUS, EYE)))
    assert np.allclose(camera.front, expected)


def test_axes_are_orthonormal(camera):
    for axis in (camera.right, camera.up, camera.front):
        assert math.isclose(dot(axis, axis), 1.0)
    assert math.isclose(dot(camera.right, camera.up), 0.0, abs_tol=1e-12)
    assert math.isclose(dot(camera.right, camera.front), 0.0, abs_tol=1e-12)
    assert np.allclose(cross(camera.up, camera.front), camera.right)


def test_right_is_horizontal(camera):
    assert math.isclose(camera.right[1], 0.0, abs_tol=1e-12)


def test_eye_and_focus_stored(camera):
    assert camera.eye == EYE
    assert camera.focus == FOCUS


def test_view_maps_eye_to_origin(camera):
    assert np.allclose(transform_coord(EYE, camera.view), (0.0, 0.0, 0.0))


def test_degenerate_look_at_raises():
    with pytest.raises(ValueError):
        Camera().set_look_at(EYE, EYE, UP)


def test_perspective_depth_range():
    cam = Camera()
    cam.set_perspective_fov(math.radians(45), 1280 / 720, 0.1, 1000.0)
    assert cam.projection[2][3] == 1.0
    assert cam.projection[3][3] == 0.0
    assert math.isclose(transform_coord((0.0, 0.0, 1000.0), cam.projection)[2], 1.0)


def test_perspective_invalid_raises():
    with pytest.raises(ValueError):
        Camera().set_perspective_fov(math.radians(45), 1.0, 0.0, 10.0)


def test_view_projection_places_focus_in_center(camera):
    camera.set_perspective_fov(math.radians(45), 1280 / 720, 0.1, 1000.0)
    x, y, z = transform_coord(FOCUS, camera.view @ camera.projection)
    assert math.isclose(x, 0.0, abs_tol=1e-9)
    assert math.isclose(y, 0.0, abs_tol=1e-9)
    assert 0.0 < z < 1.0