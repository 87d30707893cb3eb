[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brewcontrol"
version = "0.1.0"
description = "Building blocks for fermentation temperature control: fixed-point low-pass filters, minimum switching times, a state-holding actuator, an interval timer, levelled logging and JSON file storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["brewing", "fermentation", "temperature", "control", "filter", "iir", "logging"]
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
    "Topic :: Home Automation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brewcontrol"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
