"""Logic building blocks for a real-time action game: vector math, timers, camera, input, scenes, projectiles and stages."""

__version__ = "0.1.0"