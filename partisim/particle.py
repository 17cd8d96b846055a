"""Point particles integrated from the forces applied to them."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .vector import Vector3

_UP = Vector3(0.0, 1.0, 0.0)


class IntegrationMode(Enum):
    """Numerical scheme used by :meth:`Particle.integrate`."""

    EULER = "euler"
    SEMI = "semi"
    VERLET = "verlet"


class Particle:
    """A point mass with damping, constant gravity and accumulated forces."""

    integration_mode: IntegrationMode = IntegrationMode.SEMI

    def __init__(
        self,
        pos: Vector3,
        vel: Vector3,
        acceleration: Vector3 = Vector3(),
        damping: float = 1.0,
        gravity: float = 0.0,
        mass: float = 1.0,
        volume: float = 1.0,
        shape: Any = None,
        color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
    ) -> None:
        self.position = pos
        self.velocity = vel
        self.acceleration = acceleration
        self.damping = damping
        self.gravity = gravity
        self.mass = mass
        self.volume = volume
        self.shape = shape
        self.color = color
        self.force_applied = Vector3()

    def _advanced_velocity(self, t: float) -> Vector3:
        return self.velocity * (self.damping**t) + (
            self.acceleration + _UP * self.gravity
        ) * t

    def integrate(self, t: float) -> None:
        """Advance the particle by ``t`` seconds and clear the applied forces."""
        self.acceleration = self.force_applied / self.mass
        mode = self.integration_mode
        if mode is IntegrationMode.EULER:
            self.position = self.position + self.velocity * t
            self.velocity = self._advanced_velocity(t)
        elif mode is IntegrationMode.SEMI:
            self.velocity = self._advanced_velocity(t)
            self.position = self.position + self.velocity * t
        self.force_applied = Vector3()

    def apply_force(self, force: Vector3) -> None:
        """Add ``force`` to the forces acting during the next step."""
        self.force_applied = self.force_applied + force