[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cafeteria-sim"
version = "0.1.0"
description = "Discrete-time simulation of a cafeteria serving line with wait-time statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "queue", "queueing", "cafeteria", "discrete-time"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cafeteria-sim = "cafeteria_sim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["cafeteria_sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
