[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "switchyard"
version = "0.1.0"
description = "Power-envelope arithmetic, SoC derating, command delay and slew-rate primitives for microgrid simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["microgrid", "simulation", "power", "bounds", "ramp", "state-of-charge"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["switchyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
