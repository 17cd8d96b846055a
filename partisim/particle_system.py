"""A particle system: spawning, forces, integration and culling."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .forces import (
    BuoyancyForceGenerator,
    ForceGenerator,
    GravityForceGenerator,
    ParticleSpringForceGenerator,
    RubberForceGenerator,
    SpringForceGenerator,
)
from .generators import GaussianGenerator, ParticleGenerator, ParticleModel, UniformGenerator
from .particle import Particle
from .vector import Vector3


class GeneratorType(Enum):
    """Distribution used by the system's particle generator."""

    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"


@dataclass
class _Entry:
    particle: Particle
    life: float = 0.0


class ParticleSystem:
    """Owns particles, spawns new ones and applies force generators to them.

    A ``particle_life`` of -1 makes particles live forever.
    """

    def __init__(
        self,
        particle_life: float = 100.0,
        pos: Vector3 = Vector3(),
        generator_type: GeneratorType = GeneratorType.UNIFORM,
        mean_vel: Vector3 = Vector3(),
        mean_pos: Vector3 = Vector3(),
        max_particles: float = 1000,
        max_distance: float = 1000.0,
        rng: random.Random | None = None,
    ) -> None:
        self.particle_life = particle_life
        self.pos = pos
        self.max_particles = max_particles
        self.max_distance = max_distance
        self.model = ParticleModel()
        self.force_generators: list[ForceGenerator] = []
        self._entries: list[_Entry] = []
        generator: ParticleGenerator
        if generator_type is GeneratorType.GAUSSIAN:
            generator = GaussianGenerator(self, 5.0, mean_vel, mean_pos, rng)
        else:
            generator = UniformGenerator(self, mean_vel, mean_pos, rng)
        self.generators: list[ParticleGenerator] = [generator]

    @property
    def particles(self) -> list[Particle]:
        """The live particles, oldest first."""
        return [entry.particle for entry in self._entries]

    def update(self, t: float) -> None:
        """Spawn, apply forces, integrate and cull for a step of ``t``."""
        if len(self._entries) < self.max_particles:
            for generator in self.generators:
                generator.update(t)
        if self.force_generators:
            self.update_force_generators(t)
        self._update_particles(t)

    def add_particle(self, particle: Particle) -> None:
        """Add a new particle with zero age."""
        self._entries.append(_Entry(particle))

    def add_force_generator(self, generator: ForceGenerator) -> None:
        """Register a force generator applied to every particle."""
        self.force_generators.append(generator)

    def update_force_generators(self, t: float) -> None:
        """Let every force generator act on every particle."""
        for generator in self.force_generators:
            for entry in self._entries:
                generator.update_force(entry.particle, t)

    def apply_force_to_particles(self, force: Vector3) -> None:
        """Apply ``force`` to every particle for the next step."""
        for entry in self._entries:
            entry.particle.apply_force(force)

    def _update_particles(self, t: float) -> None:
        survivors = []
        for entry in self._entries:
            dist = (entry.particle.position - self.pos).magnitude()
            young = entry.life < self.particle_life or self.particle_life == -1
            if young and dist < self.max_distance:
                entry.particle.integrate(t)
                entry.life += t
                survivors.append(entry)
        self._entries = survivors

    def create_spring1_demo(self) -> None:
        """One particle hanging from a spring anchored at the system position."""
        self.add_particle(Particle(Vector3(-10, 0, 0), Vector3(), Vector3(), 0.85, -10, 1.0))
        self.add_force_generator(SpringForceGenerator(5, 10, self.pos))

    def create_spring2_demo(self) -> None:
        """Two particles joined by springs."""
        p1 = Particle(Vector3(10, 0, 0), Vector3(), Vector3(), 0.85, 0, 1.0,
                      color=(1.0, 1.0, 0.0, 1.0))
        p2 = Particle(Vector3(-10, 0, 0), Vector3(), Vector3(), 0.85, 0, 1.0,
                      color=(1.0, 0.0, 1.0, 1.0))
        self.add_particle(p1)
        self.add_particle(p2)
        self.add_force_generator(ParticleSpringForceGenerator(5, 10, p1))
        self.add_force_generator(ParticleSpringForceGenerator(5, 10, p2))

    def create_spring_rubber_demo(self) -> None:
        """Two particles joined by rubber bands."""
        p1 = Particle(Vector3(-10, 0, 0), Vector3(), Vector3(), 0.85, 0, 1.0,
                      color=(1.0, 1.0, 0.0, 1.0))
        p2 = Particle(Vector3(10, 0, 0), Vector3(), Vector3(), 0.85, 0, 1.0,
                      color=(1.0, 0.0, 1.0, 1.0))
        self.add_particle(p1)
        self.add_particle(p2)
        self.add_force_generator(RubberForceGenerator(5, 20, p1))
        self.add_force_generator(RubberForceGenerator(5, 20, p2))

    def create_buoyancy_demo(self) -> None:
        """Three particles of different mass over a water surface at height 10."""
        for pos, mass, color in (
            (Vector3(0, 10, 0), 0.5, (1.0, 0.0, 0.0, 1.0)),
            (Vector3(10, 15, 0), 10.0, (0.0, 1.0, 0.0, 1.0)),
            (Vector3(-10, 15, 0), 0.1, (0.0, 0.0, 1.0, 1.0)),
        ):
            self.add_particle(
                Particle(pos, Vector3(), Vector3(), 0.85, 0, mass, 0.001, color=color)
            )
        water = Particle(Vector3(0, 10, 0), Vector3(), Vector3(), 0.85, 0, 1.0,
                         color=(0.0, 1.0, 1.0, 1.0))
        gravity = 10.0
        self.add_force_generator(BuoyancyForceGenerator(1, 1000, gravity, water))
        self.add_force_generator(GravityForceGenerator(-gravity))