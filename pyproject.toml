[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfcaster"
version = "0.1.0"
description = "A small raycasting first-person shooter with ghouls, a shotgun and a flashlight"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "fps", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wolfcaster = "wolfcaster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["wolfcaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
