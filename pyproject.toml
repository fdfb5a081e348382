[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moonbeam"
version = "0.1.0"
description = "A small 90s style raycasting game engine with pack-file resources and looping MIDI music"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["raycasting", "game", "engine", "retro", "dda", "midi", "zip"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
moonbeam = "moonbeam.game:main"

[tool.hatch.build.targets.wheel]
packages = ["moonbeam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
