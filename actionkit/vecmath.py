"""Scalar and 3D vector/matrix helpers using the row-vector, left-handed convention."""

from __future__ import annotations

import math
import random
from typing import Sequence

import numpy as np

Vec3 = tuple[float, float, float]

_EPSILON = 1e-12


def _vec(v: Sequence[float]) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _tuple(arr: np.ndarray) -> Vec3:
    return (float(arr[0]), float(arr[1]), float(arr[2]))


def _mat(m: Sequence[Sequence[float]]) -> np.ndarray:
    arr = np.asarray(m, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a * (1.0 - t) + b * t


def random_range(minimum: float, maximum: float) -> float:
    """A random value between minimum and maximum."""
    return minimum + (maximum - minimum) * random.random()


def normalize(v: Sequence[float]) -> Vec3:
    """Unit vector in the direction of v; the zero vector stays zero."""
    arr = _vec(v)
    length = float(np.linalg.norm(arr))
    if length <= _EPSILON:
        return (0.0, 0.0, 0.0)
    return _tuple(arr / length)


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Cross product of two 3D vectors."""
    return _tuple(np.cross(_vec(a), _vec(b)))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two 3D vectors."""
    return float(np.dot(_vec(a), _vec(b)))


def look_at_lh(eye: Sequence[float], focus: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Left-handed view matrix looking from eye towards focus."""
    eye_v = _vec(eye)
    direction = _vec(focus) - eye_v
    if float(np.linalg.norm(direction)) <= _EPSILON:
        raise ValueError("eye and focus must differ")
    z_axis = np.asarray(normalize(direction))
    x_raw = np.cross(_vec(up), z_axis)
    if float(np.linalg.norm(x_raw)) <= _EPSILON:
        raise ValueError("up must not be zero or parallel to the view direction")
    x_axis = x_raw / np.linalg.norm(x_raw)
    y_axis = np.cross(z_axis, x_axis)

    view = np.identity(4)
    view[:3, 0] = x_axis
    view[:3, 1] = y_axis
    view[:3, 2] = z_axis
    view[3, :3] = (-np.dot(x_axis, eye_v), -np.dot(y_axis, eye_v), -np.dot(z_axis, eye_v))
    return view


def perspective_fov_lh(fov_y: float, aspect: float, near_z: float, far_z: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth near..far to 0..1."""
    if abs(fov_y) <= 2e-5:
        raise ValueError("fov_y must not be zero")
    if abs(aspect) <= 2e-5:
        raise ValueError("aspect must not be zero")
    if near_z <= 0.0 or far_z <= 0.0:
        raise ValueError("clip distances must be positive")
    if abs(far_z - near_z) <= 2e-5:
        raise ValueError("near_z and far_z must differ")

    height = math.cos(fov_y * 0.5) / math.sin(fov_y * 0.5)
    width = height / aspect
    depth_range = far_z / (far_z - near_z)
    return np.array(
        [
            [width, 0.0, 0.0, 0.0],
            [0.0, height, 0.0, 0.0],
            [0.0, 0.0, depth_range, 1.0],
            [0.0, 0.0, -depth_range * near_z, 0.0],
        ]
    )


def rotation_axis(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation by angle radians about axis."""
    k = _vec(axis)
    length = float(np.linalg.norm(k))
    if length <= _EPSILON:
        raise ValueError("rotation axis must not be zero")
    x, y, z = k / length
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    m = np.identity(4)
    m[:3, :3] = [
        [t * x * x + c, t * x * y + s * z, t * x * z - s * y],
        [t * x * y - s * z, t * y * y + c, t * y * z + s * x],
        [t * x * z + s * y, t * y * z - s * x, t * z * z + c],
    ]
    return m


def rotation_roll_pitch_yaw(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Rotation applying roll (Z), then pitch (X), then yaw (Y)."""
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    cr, sr = math.cos(roll), math.sin(roll)
    rz = np.array([[cr, sr, 0.0], [-sr, cr, 0.0], [0.0, 0.0, 1.0]])
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cp, sp], [0.0, -sp, cp]])
    ry = np.array([[cy, 0.0, -sy], [0.0, 1.0, 0.0], [sy, 0.0, cy]])
    m = np.identity(4)
    m[:3, :3] = rz @ rx @ ry
    return m


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Scaling matrix."""
    return np.diag([float(x), float(y), float(z), 1.0])


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Translation matrix."""
    m = np.identity(4)
    m[3, :3] = (x, y, z)
    return m


def transform_coord(v: Sequence[float], m: Sequence[Sequence[float]]) -> Vec3:
    """Transform a point by m, dividing by the resulting w."""
    row = np.append(_vec(v), 1.0) @ _mat(m)
    if abs(row[3]) <= _EPSILON:
        raise ZeroDivisionError("transformed point has w of zero")
    return _tuple(row[:3] / row[3])


def transform_normal(v: Sequence[float], m: Sequence[Sequence[float]]) -> Vec3:
    """Transform a direction by m, ignoring translation."""
    row = np.append(_vec(v), 0.0) @ _mat(m)
    return _tuple(row[:3])