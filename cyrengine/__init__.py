"""Rigid-body physics core: vector and matrix math, quaternions, sphere shapes, bodies, broad phase, intersection tests and contact resolution."""

__version__ = "0.1.0"