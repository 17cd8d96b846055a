"""Particle generators that spawn particles around a particle system."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from .particle import Particle
from .vector import Vector3


@dataclass
class ParticleModel:
    """Template for the particles a system spawns."""

    acceleration: Vector3 = Vector3()
    damping: float = 1.0
    gravity: float = -9.8
    shape: Any = None
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    mass: float = 1.0


class _ParticleHost(Protocol):
    pos: Vector3
    model: ParticleModel

    def add_particle(self, particle: Particle) -> None: ...


class ParticleGenerator(ABC):
    """Spawns one particle into its system on every update."""

    def __init__(
        self,
        system: _ParticleHost,
        mean_vel: Vector3,
        mean_pos: Vector3,
        rng: random.Random | None = None,
    ) -> None:
        self.system = system
        self.mean_vel = mean_vel
        self.mean_pos = mean_pos
        self.rng = rng if rng is not None else random.Random()

    def update(self, t: float) -> None:
        """Add a freshly created particle to the system."""
        self.system.add_particle(self.create_particle())

    @abstractmethod
    def create_particle(self) -> Particle:
        """Build one particle from the system's model."""

    def _spawn(self, draw: Callable[[], float]) -> Particle:
        mp, mv = self.mean_pos, self.mean_vel
        pos = Vector3(mp.x * draw(), mp.y * draw(), mp.z * draw()) + self.system.pos
        vel = Vector3(mv.x * draw(), mv.y * draw(), mv.z * draw())
        model = self.system.model
        return Particle(
            pos,
            vel,
            model.acceleration,
            model.damping,
            model.gravity,
            model.mass,
            shape=model.shape,
            color=model.color,
        )


class UniformGenerator(ParticleGenerator):
    """Scales the means by factors drawn uniformly from [-1, 1]."""

    def __init__(
        self,
        system: _ParticleHost,
        mean_vel: Vector3,
        mean_pos: Vector3,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(system, mean_vel, mean_pos, rng)

    def create_particle(self) -> Particle:
        return self._spawn(lambda: self.rng.uniform(-1.0, 1.0))


class GaussianGenerator(ParticleGenerator):
    """Scales the means by normal draws centred on the mean speed."""

    def __init__(
        self,
        system: _ParticleHost,
        variation: float,
        mean_vel: Vector3,
        mean_pos: Vector3,
        rng: random.Random | None = None,
    ) -> None:
        if variation < 0:
            raise ValueError("variation must not be negative")
        super().__init__(system, mean_vel, mean_pos, rng)
        self.variation = variation
        self._mean_speed = mean_vel.magnitude()

    def create_particle(self) -> Particle:
        return self._spawn(lambda: self.rng.gauss(self._mean_speed, self.variation))