[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cyrengine"
version = "0.1.0"
description = "Rigid-body physics core: vector and matrix math, quaternions, sphere shapes, broad phase, contacts and impulse resolution"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "physics",
    "rigid body",
    "collision detection",
    "sweep and prune",
    "quaternion",
    "linear algebra",
    "projection matrix",
]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cyrengine"]

[tool.pytest.ini_options]
addopts = "-ra"
