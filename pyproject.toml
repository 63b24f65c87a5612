[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchstudio"
version = "0.0.1"
description = "A small vector sketching studio: draw lines and shapes with snapping, undo/redo and export."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["vector", "drawing", "editor", "sketch", "snapping", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchstudio = "sketchstudio.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchstudio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
