[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionkit"
version = "0.1.0"
description = "Game-loop building blocks: vector math, timers, camera, input state, scenes, projectiles and stages"
requires-python = ">=3.10"
keywords = ["game", "game-loop", "camera", "projectile", "scene", "input"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["actionkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
