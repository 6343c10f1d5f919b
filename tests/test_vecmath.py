import math

import numpy as np
import pytest

from actionkit.vecmath import (
    cross,
    dot,
    lerp,
    look_at_lh,
    normalize,
    perspective_fov_lh,
    random_range,
    rotation_axis,
    rotation_roll_pitch_yaw,
    scaling,
    transform_coord,
    transform_normal,
    translation,
)


def test_lerp_endpoints():
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_lerp_is_monotonic_between_endpoints():
    values = [lerp(-3.0, 7.0, t / 10) for t in range(11)]
    assert values == sorted(values)
    assert values[0] == -3.0 and values[-1] == 7.0


def test_random_range_stays_in_bounds():
    for _ in range(200):
        value = random_range(-2.0, 5.0)
        assert -2.0 <= value <= 5.0


def test_normalize_gives_unit_length():
    v = normalize((3.0, -4.0, 12.0))
    assert math.isclose(math.sqrt(dot(v, v)), 1.0)


def test_normalize_zero_stays_zero():
    assert normalize((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_normalize_rejects_wrong_size():
    with pytest.raises(ValueError):
        normalize((1.0, 2.0))


def test_cross_is_perpendicular():
    a, b = (1.0, 2.0, 3.0), (-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert math.isclose(dot(c, a), 0.0, abs_tol=1e-12)
    assert math.isclose(dot(c, b), 0.0, abs_tol=1e-12)


def test_cross_of_axes():
    assert cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)


def test_look_at_maps_eye_to_origin_and_focus_to_z_axis():
    eye, focus = (0.0, 10.0, -10.0), (0.0, 0.0, 0.0)
    view = look_at_lh(eye, focus, (0.0, 1.0, 0.0))
    assert np.allclose(transform_coord(eye, view), (0.0, 0.0, 0.0))
    fx, fy, fz = transform_coord(focus, view)
    assert math.isclose(fx, 0.0, abs_tol=1e-9)
    assert math.isclose(fy, 0.0, abs_tol=1e-9)
    assert fz > 0.0


def test_look_at_rejects_same_eye_and_focus():
    with pytest.raises(ValueError):
        look_at_lh((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))


def test_look_at_rejects_parallel_up():
    with pytest.raises(ValueError):
        look_at_lh((0.0, 0.0, 0.0), (0.0, 5.0, 0.0), (0.0, 1.0, 0.0))


def test_perspective_maps_near_and_far_to_depth_range():
    proj = perspective_fov_lh(math.radians(45), 16 / 9, 0.1, 1000.0)
    assert math.isclose(transform_coord((0.0, 0.0, 0.1), proj)[2], 0.0, abs_tol=1e-9)
    assert math.isclose(transform_coord((0.0, 0.0, 1000.0), proj)[2], 1.0, abs_tol=1e-9)


@pytest.mark.parametrize(
    "args",
    [(0.0, 1.0, 0.1, 10.0), (1.0, 0.0, 0.1, 10.0), (1.0, 1.0, 0.0, 10.0), (1.0, 1.0, 5.0, 5.0)],
)
def test_perspective_rejects_degenerate_arguments(args):
    with pytest.raises(ValueError):
        perspective_fov_lh(*args)


def test_rotation_axis_is_orthonormal_and_preserves_length():
    m = rotation_axis((1.0, 2.0, -1.0), 0.7)
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    v = (0.3, -2.0, 5.0)
    rotated = transform_normal(v, m)
    assert math.isclose(dot(rotated, rotated), dot(v, v))


def test_rotation_axis_keeps_axis_fixed():
    axis = normalize((1.0, 1.0, 0.0))
    assert np.allclose(transform_normal(axis, rotation_axis(axis, 1.2)), axis)


def test_rotation_axis_rejects_zero_axis():
    with pytest.raises(ValueError):
        rotation_axis((0.0, 0.0, 0.0), 1.0)


def test_yaw_matches_rotation_about_y():
    assert np.allclose(
        rotation_roll_pitch_yaw(0.0, 0.9, 0.0), rotation_axis((0.0, 1.0, 0.0), 0.9)
    )


def test_pitch_and_roll_match_axis_rotations():
    assert np.allclose(rotation_roll_pitch_yaw(0.4, 0.0, 0.0), rotation_axis((1.0, 0.0, 0.0), 0.4))
    assert np.allclose(rotation_roll_pitch_yaw(0.0, 0.0, 0.4), rotation_axis((0.0, 0.0, 1.0), 0.4))


def test_roll_pitch_yaw_order():
    combined = rotation_roll_pitch_yaw(0.3, 0.5, 0.7)
    ordered = (
        rotation_axis((0.0, 0.0, 1.0), 0.7)
        @ rotation_axis((1.0, 0.0, 0.0), 0.3)
        @ rotation_axis((0.0, 1.0, 0.0), 0.5)
    )
    assert np.allclose(combined, ordered)


def test_yaw_quarter_turn_turns_forward_to_right():
    assert np.allclose(
        transform_normal((0.0, 0.0, 1.0), rotation_roll_pitch_yaw(0.0, math.pi / 2, 0.0)),
        (1.0, 0.0, 0.0),
    )


def test_translation_moves_points_but_not_normals():
    m = translation(1.0, 2.0, 3.0)
    assert transform_coord((0.0, 0.0, 0.0), m) == (1.0, 2.0, 3.0)
    assert transform_normal((0.0, 0.0, 1.0), m) == (0.0, 0.0, 1.0)


def test_scaling_scales_components():
    assert transform_coord((1.0, 1.0, 1.0), scaling(3.0, 0.5, 2.0)) == (3.0, 0.5, 2.0)


def test_transform_coord_round_trip_through_inverse():
    world = scaling(3.0, 0.5, 3.0) @ rotation_roll_pitch_yaw(0.1, 1.0, 0.2) @ translation(4.0, 1.0, -2.0)
    point = (0.25, -1.5, 2.0)
    back = transform_coord(transform_coord(point, world), np.linalg.inv(world))
    assert np.allclose(back, point)


def test_transform_coord_zero_w_raises():
    m = np.zeros((4, 4))
    with pytest.raises(ZeroDivisionError):
        transform_coord((1.0, 1.0, 1.0), m)