"""Particle and rigid-body physics sandbox: vectors, particles, force generators,
particle and solid systems, a camera, a player and a steppable demo world."""

__version__ = "0.1.0"