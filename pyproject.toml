[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ke2tools"
version = "0.1.0"
description = "Small engine utilities: vectors, matrices, events, connection slots, error reporting and a Wavefront .obj reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "events", "obj", "wavefront", "geometry", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ke2tools"]

[tool.pytest.ini_options]
addopts = "-ra"
