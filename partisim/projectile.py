"""Projectiles whose simulated speed is scaled while keeping their energy."""

from __future__ import annotations

from typing import Any

from .particle import Particle
from .vector import Vector3


class Projectile(Particle):
    """A particle whose velocity is scaled and mass adjusted to keep kinetic energy."""

    def __init__(
        self,
        pos: Vector3,
        vel: Vector3,
        acceleration: Vector3,
        damping: float,
        gravity: float,
        mass: float,
        scaling_factor: float,
        shape: Any = None,
        color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        super().__init__(
            pos, vel, acceleration, damping, gravity, mass, shape=shape, color=color
        )
        self.scaling_factor = scaling_factor
        self._scale()

    def _scale(self) -> None:
        new_vel = self.velocity * self.scaling_factor
        original_speed = self.velocity.magnitude()
        new_speed = new_vel.magnitude()
        if new_speed == 0.0:
            raise ValueError("projectile needs a non-zero scaled velocity")
        self.mass = self.mass * original_speed**2 / new_speed**2
        self.velocity = new_vel