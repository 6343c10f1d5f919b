"""Projectiles flying straight or homing on a target, and the manager that owns them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterator, Sequence

import numpy as np

from actionkit.vecmath import Vec3, cross, dot, normalize, rotation_axis

_PROVISIONAL_UP: Vec3 = (0.001, 1.0, 0.0)
_ZERO: Vec3 = (0.0, 0.0, 0.0)


def _as_vec3(v: Sequence[float]) -> Vec3:
    x, y, z = v
    return (float(x), float(y), float(z))


class Projectile(ABC):
    """A projectile registered with its manager on creation."""

    def __init__(self, manager: ProjectileManager) -> None:
        self.manager = manager
        self.position: Vec3 = (0.0, 0.0, 0.0)
        self.direction: Vec3 = (0.0, 0.0, 1.0)
        self.scale: Vec3 = (1.0, 1.0, 1.0)
        self.transform: np.ndarray = np.identity(4)
        self.radius = 0.5
        manager.register(self)

    @abstractmethod
    def update(self, elapsed_time: float) -> None:
        """Advance the projectile by elapsed_time seconds."""

    def update_transform(self) -> None:
        """Rebuild the world matrix from direction, scale and position."""
        front = normalize(self.direction)
        up = normalize(_PROVISIONAL_UP)
        right = normalize(cross(up, front))
        up = normalize(cross(right, up))

        sx, sy, sz = self.scale
        matrix = np.identity(4)
        matrix[0, :3] = np.multiply(right, sx)
        matrix[1, :3] = np.multiply(up, sy)
        matrix[2, :3] = np.multiply(front, sz)
        matrix[3, :3] = self.position
        self.transform = matrix
        self.direction = front

    def destroy(self) -> None:
        """Ask the manager to remove this projectile after its current update."""
        self.manager.remove(self)


class StraightProjectile(Projectile):
    """Flies along its direction on the XZ plane until its lifetime runs out."""

    def __init__(
        self, manager: ProjectileManager, *, speed: float = 10.0, life_time: float = 3.0
    ) -> None:
        super().__init__(manager)
        self.scale = (3.0, 3.0, 3.0)
        self.speed = speed
        self.life_timer = life_time

    def update(self, elapsed_time: float) -> None:
        step = self.speed * elapsed_time
        x, y, z = self.position
        dx, _, dz = self.direction
        self.position = (x + dx * step, y, z + dz * step)

        self.update_transform()

        self.life_timer -= elapsed_time
        if self.life_timer <= 0.0:
            self.destroy()

    def launch(self, direction: Sequence[float], position: Sequence[float]) -> None:
        self.direction = _as_vec3(direction)
        self.position = _as_vec3(position)


class HomingProjectile(Projectile):
    """Flies forward while turning towards a target point."""

    def __init__(
        self,
        manager: ProjectileManager,
        *,
        move_speed: float = 10.0,
        turn_speed: float = math.radians(180.0),
        life_time: float = 3.0,
    ) -> None:
        super().__init__(manager)
        self.scale = (3.0, 3.0, 3.0)
        self.move_speed = move_speed
        self.turn_speed = turn_speed
        self.life_timer = life_time
        self.target: Vec3 = (0.0, 0.0, 0.0)

    def update(self, elapsed_time: float) -> None:
        self.life_timer -= elapsed_time
        if self.life_timer < 0.0:
            self.destroy()

        step = self.move_speed * elapsed_time
        self.position = _as_vec3(
            p + d * step for p, d in zip(self.position, self.direction)
        )

        self._turn(self.turn_speed * elapsed_time)
        self.update_transform()

    def _turn(self, max_angle: float) -> None:
        to_target = np.subtract(self.target, self.position)
        if float(np.dot(to_target, to_target)) <= 0.00001:
            return
        to_target_unit = normalize(to_target)
        facing = normalize(self.direction)

        # Unit vectors closer in angle give a dot product closer to one.
        rot = min(1.0 - dot(facing, to_target_unit), max_angle)
        if abs(rot) <= 0.0001:
            return

        axis = normalize(cross(facing, to_target_unit))
        if axis == _ZERO:
            return
        self.transform = self.transform @ rotation_axis(axis, rot)
        self.direction = normalize(self.transform[2, :3])

    def launch(
        self,
        direction: Sequence[float],
        position: Sequence[float],
        target: Sequence[float],
    ) -> None:
        self.direction = _as_vec3(direction)
        self.position = _as_vec3(position)
        self.target = _as_vec3(target)
        self.update_transform()


class ProjectileManager:
    """Owns projectiles; removals requested during an update take effect after it."""

    def __init__(self) -> None:
        self._projectiles: list[Projectile] = []
        self._removes: dict[Projectile, None] = {}

    @property
    def projectiles(self) -> tuple[Projectile, ...]:
        return tuple(self._projectiles)

    def __len__(self) -> int:
        return len(self._projectiles)

    def __iter__(self) -> Iterator[Projectile]:
        return iter(self._projectiles)

    def __getitem__(self, index: int) -> Projectile:
        return self._projectiles[index]

    def update(self, elapsed_time: float) -> None:
        for projectile in list(self._projectiles):
            projectile.update(elapsed_time)

        for projectile in self._removes:
            if projectile in self._projectiles:
                self._projectiles.remove(projectile)
        self._removes.clear()

    def register(self, projectile: Projectile) -> None:
        self._projectiles.append(projectile)

    def remove(self, projectile: Projectile) -> None:
        """Schedule projectile for removal at the end of the next update."""
        self._removes[projectile] = None

    def clear(self) -> None:
        self._projectiles.clear()