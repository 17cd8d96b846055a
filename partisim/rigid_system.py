"""Systems that spawn, push and cull rigid solids."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .rigid import Box, Color, RigidSolid, Scene, Shape, SolidForceGenerator
from .vector import Vector3


class SolidGeneratorType(Enum):
    """Distribution used by a system's solid generator, if any."""

    NONE = "none"
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"


@dataclass
class SolidModel:
    """Template for the solids a system spawns."""

    shape: Shape = field(default_factory=lambda: Box(1, 1, 1))
    color: Color = (1.0, 0.0, 0.0, 1.0)
    tensor: Vector3 = Vector3()
    solid_life: float = 100.0


class SolidGenerator(ABC):
    """Spawns one solid into its system on every update."""

    def __init__(
        self,
        system: RigidSolidSystem,
        mean_vel: Vector3,
        mean_pos: Vector3,
        rng: random.Random | None = None,
    ) -> None:
        self.system = system
        self.mean_vel = mean_vel
        self.mean_pos = mean_pos
        self.rng = rng if rng is not None else random.Random()

    def update(self, t: float) -> None:
        """Add a freshly created solid to the system."""
        self.system.add_solid(self.create_solid())

    @abstractmethod
    def create_solid(self) -> RigidSolid:
        """Build one solid from the system's model."""

    def _spawn(self, draw: Callable[[], float]) -> RigidSolid:
        mp, mv = self.mean_pos, self.mean_vel
        pos = Vector3(mp.x * draw(), mp.y * draw(), mp.z * draw()) + self.system.pos
        vel = Vector3(mv.x * draw(), mv.y * draw(), mv.z * draw())
        model = self.system.model
        solid = RigidSolid(pos, model.shape, self.system.scene, model.color, model.solid_life)
        solid.inertia_tensor = model.tensor
        solid.velocity = vel
        return solid


class SolidUniformGenerator(SolidGenerator):
    """Scales the means by factors drawn uniformly from [-1, 1]."""

    def __init__(
        self,
        system: RigidSolidSystem,
        mean_vel: Vector3,
        mean_pos: Vector3,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(system, mean_vel, mean_pos, rng)

    def create_solid(self) -> RigidSolid:
        return self._spawn(lambda: self.rng.uniform(-1.0, 1.0))


class SolidGaussianGenerator(SolidGenerator):
    """Scales the means by normal draws centred on the mean speed."""

    def __init__(
        self,
        system: RigidSolidSystem,
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

    def create_solid(self) -> RigidSolid:
        return self._spawn(lambda: self.rng.gauss(self._mean_speed, self.variation))


class RigidSolidSystem:
    """Owns rigid solids, spawns new ones and applies force generators to them."""

    def __init__(
        self,
        scene: Scene,
        solid_life: float = 100.0,
        pos: Vector3 = Vector3(),
        generator_type: SolidGeneratorType = SolidGeneratorType.UNIFORM,
        mean_vel: Vector3 = Vector3(),
        mean_pos: Vector3 = Vector3(),
        max_solids: float = 1000,
        max_distance: float = 1000.0,
        rng: random.Random | None = None,
    ) -> None:
        self.scene = scene
        self.pos = pos
        self.max_solids = max_solids
        self.max_distance = max_distance
        self.model = SolidModel(solid_life=solid_life)
        self.solids: list[RigidSolid] = []
        self.force_generators: list[SolidForceGenerator] = []
        self.generators: list[SolidGenerator] = []
        if generator_type is SolidGeneratorType.UNIFORM:
            self.generators.append(SolidUniformGenerator(self, mean_vel, mean_pos, rng))
        elif generator_type is SolidGeneratorType.GAUSSIAN:
            self.generators.append(
                SolidGaussianGenerator(self, 5.0, mean_vel, mean_pos, rng)
            )

    def update(self, t: float) -> None:
        """Spawn, apply forces, age and cull for a step of ``t``."""
        if len(self.solids) < self.max_solids:
            for generator in self.generators:
                generator.update(t)
        if self.force_generators:
            self.update_force_generators(t)
        self._update_solids(t)

    def add_solid(self, solid: RigidSolid) -> None:
        """Take ownership of ``solid``."""
        self.solids.append(solid)

    def add_force_generator(self, generator: SolidForceGenerator) -> None:
        """Register a force generator applied to every solid."""
        self.force_generators.append(generator)

    def update_force_generators(self, t: float) -> None:
        """Let every force generator act on every solid."""
        for generator in self.force_generators:
            for solid in self.solids:
                generator.update_force(solid, t)

    def apply_force_to_solids(self, force: Vector3) -> None:
        """Apply ``force`` to every solid for the next step."""
        for solid in self.solids:
            solid.add_force(force)

    def _update_solids(self, t: float) -> None:
        survivors = []
        for solid in self.solids:
            dist = (solid.position - self.pos).magnitude()
            in_range = dist < self.max_distance or self.max_distance != -1
            if in_range and solid.alive:
                solid.update(t)
                survivors.append(solid)
            else:
                solid.destroy()
        self.solids = survivors