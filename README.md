# actionkit

Small pieces for the logic side of a real-time action game. They do not depend
on any engine. Each piece is a plain Python object that you advance once per
frame.

## Modules

- `actionkit.vecmath` has vector and matrix helpers built on numpy. Matrices
  use the left-handed, row-vector convention.
  - Scalars: `lerp` and `random_range`.
  - Vectors: `normalize` (the zero vector stays zero), `cross` and `dot`.
  - Matrices: `look_at_lh`, `perspective_fov_lh` (maps depth to 0..1),
    `rotation_axis`, `rotation_roll_pitch_yaw`, `scaling` and `translation`.
  - Applying a matrix: `transform_coord` divides by w, and `transform_normal`
    ignores translation.
  - Degenerate input raises `ValueError` or `ZeroDivisionError`.
- `actionkit.timer`
  - `HighResolutionTimer` has `tick()`, `time_interval()` and `time_stamp()`.
    `time_stamp()` leaves out time spent between `stop()` and `start()`, and
    `reset()` starts the count again.
  - `Benchmark` measures seconds between `begin()` and `end()`.
  - Both accept a custom `clock` and `counts_per_second`, which makes
    deterministic tests possible.
- `actionkit.camera`: `Camera.set_look_at` builds the view matrix. It also
  updates the `right`, `up` and `front` axes and stores `eye` and `focus`.
  `Camera.set_perspective_fov` builds `projection`.
- `actionkit.input` holds input state. You feed that state in as values.
  - `GamePad.update(reading, keys)` takes an optional `PadReading` and the
    names of held keys. The keys emulate a pad:
    - `W`/`A`/`S`/`D` and the arrow keys (`UP`, `DOWN`, `LEFT`, `RIGHT`) move
      the left stick.
    - `I`/`J`/`K`/`L` move the right stick.
    - `Z`/`X`/`C`/`V` press A/B/X/Y.
  - The pad applies thumb dead zones and trigger thresholds. It exposes
    `button`, `button_down` and `button_up` as `GamePadButton` flags, the stick
    axes, and the triggers.
  - `Mouse.update(state)` takes a `MouseState`. It tracks `MouseButton` edges,
    the wheel (gathered with `add_wheel`), and the cursor position scaled to the
    screen size.
  - `Input` owns one `GamePad` and one `Mouse` and updates both.
- `actionkit.scene`
  - `Scene` is an abstract base with `initialize`, `finalize`, `update`,
    `render` and a `ready` flag.
  - `SceneManager.change_scene` switches scenes at the next `update()`. The
    old scene is finalized and the new one is initialized unless it is already
    ready.
  - `LoadingScene` initializes the next scene on a background thread and hands
    it to the manager once it is ready. Its `render()` returns a `SpriteDraw`
    for a spinning icon in the bottom-right corner. A failure during loading is
    raised from `update()` as a `RuntimeError`.
- `actionkit.projectile`
  - A projectile registers itself with a `ProjectileManager` when it is
    created.
  - `StraightProjectile` moves on the XZ plane until its lifetime ends.
  - `HomingProjectile` turns towards its `target` while it flies.
  - `destroy()` only schedules removal. The manager removes the projectile
    after the current update pass.
- `actionkit.stage`
  - `Stage` is an abstract base with `update` and `ray_cast`. `ray_cast`
    returns a `HitResult` or `None`.
  - `StageManager.ray_cast` returns the nearest hit across all registered
    stages.
  - `MovingFloorStage` travels back and forth between `start` and `goal` and
    spins by its `torque`. A hit on it reports `rotation`, the change in the
    floor's angle over the last frame.

## Example

```python
from actionkit.timer import HighResolutionTimer
from actionkit.projectile import ProjectileManager, StraightProjectile

timer = HighResolutionTimer()
projectiles = ProjectileManager()

shot = StraightProjectile(projectiles)
shot.launch((0.0, 0.0, 1.0), (0.0, 1.0, 0.0))

for _ in range(10):
    timer.tick()
    projectiles.update(1.0 / 60.0)

print(len(projectiles), shot.position)
```

## What it does not do

- There is no rendering, window, model loading or audio. `Scene.render`
  returns whatever a scene produces, and only `LoadingScene` describes a
  sprite placement.
- It does not poll devices. Pad, key and mouse state must come from your own
  platform layer.
- It does not intersect rays with meshes. `MovingFloorStage` takes a
  `model_ray_cast` callable that you supply, which intersects a segment with
  the floor in the floor's local space.
- There are no player, enemy or collision modules and no command to run.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```