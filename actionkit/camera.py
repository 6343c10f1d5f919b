"""Camera holding view and projection matrices and its orientation axes."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from actionkit.vecmath import Vec3, look_at_lh, perspective_fov_lh


class Camera:
    """A view camera; orientation axes are derived from the view matrix."""

    def __init__(self) -> None:
        self.view: np.ndarray = np.identity(4)
        self.projection: np.ndarray = np.identity(4)
        self.eye: Vec3 = (0.0, 0.0, 0.0)
        self.focus: Vec3 = (0.0, 0.0, 0.0)
        self.up: Vec3 = (0.0, 1.0, 0.0)
        self.front: Vec3 = (0.0, 0.0, 1.0)
        self.right: Vec3 = (1.0, 0.0, 0.0)

    def set_look_at(
        self, eye: Sequence[float], focus: Sequence[float], up: Sequence[float]
    ) -> None:
        """Point the camera from eye towards focus."""
        self.view = look_at_lh(eye, focus, up)
        world = np.linalg.inv(self.view)
        self.right = tuple(float(x) for x in world[0, :3])
        self.up = tuple(float(x) for x in world[1, :3])
        self.front = tuple(float(x) for x in world[2, :3])
        self.eye = tuple(float(x) for x in eye)
        self.focus = tuple(float(x) for x in focus)

    def set_perspective_fov(
        self, fov_y: float, aspect: float, near_z: float, far_z: float
    ) -> None:
        self.projection = perspective_fov_lh(fov_y, aspect, near_z, far_z)