[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "everest"
version = "0.1.0"
description = "A terminal simulation of a simple feature phone with a menu and small built-in apps"
requires-python = ">=3.10"
dependencies = []
keywords = ["phone", "simulator", "terminal", "emulator", "tui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
everest = "everest.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["everest"]

[tool.pytest.ini_options]
addopts = "-ra"
