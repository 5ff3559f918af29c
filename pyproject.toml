[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubraycaster"
version = "0.1.0"
description = "A grid-based first-person raycasting engine that plays .cub maps, with sliding doors, animated items and a minimap"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "cub", "first-person", "pygame", "dda", "minimap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubraycaster = "cubraycaster.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubraycaster"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
