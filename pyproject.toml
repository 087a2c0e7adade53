[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelweek"
version = "1.0.0"
description = "Building blocks of a voxel sandbox game: terrain noise, rays, integer vectors, items, keyboard input and render handles."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "terrain", "noise", "ray", "inventory", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["voxelweek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
