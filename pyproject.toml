[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtone"
version = "0.1.0"
description = "Checks for plain-text ray tracing scene files, with small character, string, byte and output helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "scene", "configuration", "validation", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
