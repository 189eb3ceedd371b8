[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thermokernel"
version = "0.1.0"
description = "PID control, time-temperature curves and a prefixed key-value store for thermal process control"
requires-python = ">=3.10"
dependencies = []
keywords = ["pid", "controller", "temperature", "curve", "interpolation", "kiln", "embedded"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["thermokernel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
