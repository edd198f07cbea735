[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshview"
version = "0.1.0"
description = "A small real-time mesh viewer with an OBJ loader, procedural primitives, ray picking and a fly-through camera"
requires-python = ">=3.10"
keywords = ["3d", "opengl", "renderer", "obj", "mesh", "quaternion", "viewer", "raycast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meshview = "meshview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["meshview"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
