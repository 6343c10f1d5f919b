"""Stages that can be ray cast against, a manager for them, and a moving, rotating floor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

import numpy as np

from actionkit.vecmath import (
    Vec3,
    rotation_roll_pitch_yaw,
    scaling,
    transform_coord,
    transform_normal,
    translation,
)


@dataclass
class HitResult:
    """Where a ray hit a stage, the surface normal there and how far along the ray."""

    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    distance: float = 0.0
    material_index: int = -1
    rotation: Vec3 = (0.0, 0.0, 0.0)


ModelRayCast = Callable[[Vec3, Vec3], Optional[HitResult]]


def _as_vec3(v: Sequence[float]) -> Vec3:
    x, y, z = v
    return (float(x), float(y), float(z))


class Stage(ABC):
    """A piece of level geometry."""

    @abstractmethod
    def update(self, elapsed_time: float) -> None:
        """Advance the stage by elapsed_time seconds."""

    @abstractmethod
    def ray_cast(self, start: Sequence[float], end: Sequence[float]) -> Optional[HitResult]:
        """Intersect the segment from start to end with the stage; None on a miss."""


class StageManager:
    """Holds the stages of a level and ray casts against all of them."""

    def __init__(self) -> None:
        self._stages: list[Stage] = []

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self._stages)

    def update(self, elapsed_time: float) -> None:
        for stage in self._stages:
            stage.update(elapsed_time)

    def register(self, stage: Stage) -> None:
        self._stages.append(stage)

    def clear(self) -> None:
        self._stages.clear()

    def ray_cast(self, start: Sequence[float], end: Sequence[float]) -> Optional[HitResult]:
        """The nearest hit among all stages, or None if none was hit."""
        nearest: Optional[HitResult] = None
        for stage in self._stages:
            hit = stage.ray_cast(start, end)
            if hit is not None and (nearest is None or hit.distance < nearest.distance):
                nearest = hit
        return nearest


class MovingFloorStage(Stage):
    """A floor moving back and forth between two points while spinning by its torque.

    Ray casts go through model_ray_cast, which intersects a segment with the floor's
    model in its own local space.
    """

    def __init__(
        self,
        model_ray_cast: ModelRayCast,
        *,
        start: Sequence[float] = (0.0, 0.0, 0.0),
        goal: Sequence[float] = (0.0, 0.0, 0.0),
        torque: Sequence[float] = (0.0, 0.0, 0.0),
        move_speed: float = 2.0,
    ) -> None:
        self._model_ray_cast = model_ray_cast
        self.start: Vec3 = _as_vec3(start)
        self.goal: Vec3 = _as_vec3(goal)
        self.torque: Vec3 = _as_vec3(torque)
        self.move_speed = move_speed
        self.move_rate = 0.0
        self.position: Vec3 = (0.0, 0.0, 0.0)
        self.angle: Vec3 = (0.0, 0.0, 0.0)
        self.scale: Vec3 = (3.0, 0.5, 3.0)
        self.transform: np.ndarray = np.identity(4)
        self.old_transform: np.ndarray = np.identity(4)
        self.old_angle: Vec3 = (0.0, 0.0, 0.0)

    def update(self, elapsed_time: float) -> None:
        self.old_transform = self.transform.copy()
        self.old_angle = self.angle

        start = np.asarray(self.start)
        goal = np.asarray(self.goal)
        length = float(np.linalg.norm(goal - start))
        if length == 0.0:
            raise ValueError("start and goal points must differ")

        self.move_rate += self.move_speed * elapsed_time / length
        # Turn around on reaching either end.
        if self.move_rate <= 0.0 or self.move_rate >= 1.0:
            self.move_speed = -self.move_speed

        self.position = _as_vec3(start + (goal - start) * self.move_rate)
        self.angle = _as_vec3(
            a + t * elapsed_time for a, t in zip(self.angle, self.torque)
        )
        self.update_transform()

    def ray_cast(self, start: Sequence[float], end: Sequence[float]) -> Optional[HitResult]:
        """Cast in the previous frame's local space and report the hit in the current world.

        This carries whatever rests on the floor along with its latest movement.
        """
        inverse_old = np.linalg.inv(self.old_transform)
        local_start = transform_coord(start, inverse_old)
        local_end = transform_coord(end, inverse_old)

        local_hit = self._model_ray_cast(local_start, local_end)
        if local_hit is None:
            return None

        world_position = transform_coord(local_hit.position, self.transform)
        world_normal = transform_normal(local_hit.normal, self.transform)
        distance = float(np.linalg.norm(np.subtract(world_position, _as_vec3(start))))
        rotation = _as_vec3(a - o for a, o in zip(self.angle, self.old_angle))
        return HitResult(
            position=world_position,
            normal=world_normal,
            distance=distance,
            material_index=local_hit.material_index,
            rotation=rotation,
        )

    def update_transform(self) -> None:
        """Rebuild the world matrix as scale, then rotation, then translation."""
        s = scaling(*self.scale)
        r = rotation_roll_pitch_yaw(*self.angle)
        t = translation(*self.position)
        self.transform = s @ r @ t