"""The demo world: particle systems, rigid solids, projectiles and the player."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .camera import Camera
from .forces import (
    ExplosionForceGenerator,
    GravityForceGenerator,
    WhirlwindForceGenerator,
    WindForceGenerator,
)
from .generators import ParticleModel
from .particle_system import GeneratorType, ParticleSystem
from .player import HOOK_NAME, PLAYER_NAME, Player
from .projectile import Projectile
from .rigid import Box, Color, RigidSolid, Scene, SolidWindGenerator, Sphere
from .rigid_system import RigidSolidSystem, SolidGeneratorType, SolidModel
from .vector import Vector3

DEFAULT_EYE = Vector3(50.0, 50.0, 50.0)
DEFAULT_DIRECTION = Vector3(-0.6, -0.2, -0.7)
PUSH_FORCE = Vector3(0.0, 100.0, 0.0)


class ProjectileType(Enum):
    """Kinds of projectile the camera can shoot."""

    BULLET = "bullet"
    FIREBALL = "fireball"
    ENERGY = "energy"


@dataclass(frozen=True)
class _ProjectileSpec:
    speed: float
    damping: float
    gravity: float
    mass: float
    scaling_factor: float
    shape: Any
    color: Color


_PROJECTILES = {
    ProjectileType.BULLET: _ProjectileSpec(
        100.0, 0.75, -9.8, 1.0, 0.5, Sphere(0.25), (0.75, 0.75, 0.75, 1.0)
    ),
    ProjectileType.FIREBALL: _ProjectileSpec(
        50.0, 0.75, -9.8, 10.0, 0.5, Sphere(1.5), (1.0, 0.0, 0.0, 1.0)
    ),
    ProjectileType.ENERGY: _ProjectileSpec(
        75.0, 0.75, 9.8, 100.0, 0.5, Box(0.5, 0.5, 0.5), (0.0, 0.5, 1.0, 1.0)
    ),
}

_NEXT_PROJECTILE = {
    ProjectileType.BULLET: ProjectileType.FIREBALL,
    ProjectileType.FIREBALL: ProjectileType.ENERGY,
    ProjectileType.ENERGY: ProjectileType.BULLET,
}


@dataclass(frozen=True)
class StaticBody:
    """A fixed, non-simulated object such as the ground or a marker."""

    position: Vector3
    shape: Any
    color: Color


class World:
    """Everything the simulation steps: systems, projectiles, solids and the player."""

    def __init__(
        self, camera: Camera | None = None, rng: random.Random | None = None
    ) -> None:
        self.camera = camera if camera is not None else Camera(DEFAULT_EYE, DEFAULT_DIRECTION)
        self.rng = rng if rng is not None else random.Random()
        self.scene = Scene(Vector3(0.0, -9.8, 0.0))
        self.projectiles: list[Projectile] = []
        self.particle_systems: list[ParticleSystem] = []
        self.solid_systems: list[RigidSolidSystem] = []
        self.statics: list[StaticBody] = []
        self.to_delete: list[RigidSolid] = []
        self.explosion: ExplosionForceGenerator | None = None
        self.current_projectile = ProjectileType.BULLET
        self.player: Player | None = None
        self.full_screen = True

    def shoot_projectile(self, kind: ProjectileType) -> Projectile:
        """Fire a projectile of ``kind`` from the camera along its view direction."""
        spec = _PROJECTILES[kind]
        projectile = Projectile(
            self.camera.transform().position,
            self.camera.direction * spec.speed,
            Vector3(),
            spec.damping,
            spec.gravity,
            spec.mass,
            spec.scaling_factor,
            spec.shape,
            spec.color,
        )
        self.projectiles.append(projectile)
        return projectile

    def cycle_projectile(self) -> ProjectileType:
        """Select the next projectile type and return it."""
        self.current_projectile = _NEXT_PROJECTILE[self.current_projectile]
        return self.current_projectile

    def step(self, t: float) -> None:
        """Advance the whole world by ``t`` seconds."""
        for projectile in self.projectiles:
            projectile.integrate(t)
        for system in self.particle_systems:
            system.update(t)
        for solid_system in self.solid_systems:
            solid_system.update(t)
        if self.player is not None:
            self.player.update(t)
        self.scene.simulate(t)

        pending = list(self.to_delete)
        if self.player is not None:
            pending.extend(s for s in self.player.to_delete if s not in pending)
            self.player.to_delete.clear()
        for solid in pending:
            solid.destroy()
            if self.player is not None:
                self.player.remove_hook_projectile()
        self.to_delete.clear()

    def _toggle_full_screen(self) -> None:
        self.full_screen = not self.full_screen

    def key_press(self, key: str) -> None:
        """React to a key press."""
        upper = key.upper()
        if self.player is not None:
            self.player.process_input(upper)
        match upper:
            case "0":
                self._toggle_full_screen()
            case "Z":
                self.shoot_projectile(self.current_projectile)
            case "P":
                self.cycle_projectile()
            case "F":
                if self.particle_systems:
                    self.particle_systems[0].apply_force_to_particles(PUSH_FORCE)
            case "E":
                if self.player is not None:
                    self.player.shoot_grappling_hook()
            case "R":
                if self.player is not None:
                    self.player.remove_grappling_hook()

    def on_collision(self, name1: str, name2: str) -> None:
        """Anchor the grappling hook when its projectile hits anything but the player."""
        if self.player is None:
            return
        if name1 == HOOK_NAME and name2 != PLAYER_NAME:
            self.player.create_grappling_hook()
        elif name2 == HOOK_NAME and name1 != PLAYER_NAME:
            self.player.create_grappling_hook()

    def _flow_system(
        self,
        particle_life: float,
        pos: Vector3,
        generator_type: GeneratorType,
        mean_vel: Vector3,
        color: Color,
        max_particles: float = 1000,
        max_distance: float = 1000.0,
    ) -> ParticleSystem:
        system = ParticleSystem(
            particle_life,
            pos,
            generator_type,
            mean_vel,
            Vector3(),
            max_particles,
            max_distance,
            rng=self.rng,
        )
        system.model = ParticleModel(
            acceleration=Vector3(),
            damping=1.0,
            gravity=0.0,
            shape=Sphere(1.0),
            color=color,
            mass=0.1,
        )
        self.particle_systems.append(system)
        return system

    def create_gravity_demo(self) -> ParticleSystem:
        """Particles pulled by two opposing gravity generators."""
        system = self._flow_system(
            10000, Vector3(), GeneratorType.GAUSSIAN, Vector3(10.0, 1.0, 0.1),
            (0.0, 0.75, 0.75, 1.0),
        )
        system.add_force_generator(GravityForceGenerator(-10))
        system.add_force_generator(GravityForceGenerator(100))
        return system

    def create_wind_demo(self) -> ParticleSystem:
        """Particles blown along -z."""
        system = self._flow_system(
            100, Vector3(), GeneratorType.GAUSSIAN, Vector3(10.0, 1.0, 0.1),
            (0.0, 0.75, 0.75, 1.0),
        )
        system.add_force_generator(WindForceGenerator(Vector3(0.0, 0.0, -100.0), 0.0, 1.0, 0.0))
        return system

    def create_whirlwind_demo(self) -> ParticleSystem:
        """Particles caught in a whirlwind around the origin."""
        system = self._flow_system(
            100, Vector3(), GeneratorType.GAUSSIAN, Vector3(10.0, 1.0, 10.0),
            (0.0, 0.75, 0.75, 1.0), 10000, 1000,
        )
        system.add_force_generator(
            WhirlwindForceGenerator(Vector3(), 0.0, 1.0, 0.0, 50.0, 50.0)
        )
        return system

    def create_explosion_demo(self) -> ParticleSystem:
        """Particles pushed away by an explosion at the origin."""
        system = self._flow_system(
            200, Vector3(0.1, 0.0, 0.1), GeneratorType.UNIFORM, Vector3(0.1, 0.1, 0.1),
            (1.0, 0.0, 0.0, 1.0),
        )
        self.explosion = ExplosionForceGenerator(Vector3(), 10.0, 500.0, 1.0)
        system.add_force_generator(self.explosion)
        return system

    def _demo_system(self, pos: Vector3) -> ParticleSystem:
        system = ParticleSystem(-1, pos, rng=self.rng)
        self.particle_systems.append(system)
        return system

    def create_spring1_demo(self) -> ParticleSystem:
        """A particle on a spring anchored at (0, 10, 0)."""
        pos = Vector3(0.0, 10.0, 0.0)
        system = self._demo_system(pos)
        system.create_spring1_demo()
        self.statics.append(StaticBody(pos, Box(1, 1, 1), (0.0, 0.0, 0.0, 1.0)))
        return system

    def create_spring2_demo(self) -> ParticleSystem:
        """Two particles joined by springs."""
        system = self._demo_system(Vector3())
        system.create_spring2_demo()
        return system

    def create_spring_rubber_demo(self) -> ParticleSystem:
        """Two particles joined by rubber bands."""
        system = self._demo_system(Vector3())
        system.create_spring_rubber_demo()
        return system

    def create_buoyancy_demo(self) -> ParticleSystem:
        """Particles of different mass floating on water."""
        system = self._demo_system(Vector3())
        system.create_buoyancy_demo()
        return system

    def create_game_scene(self) -> None:
        """Build the full scene: particle effects, falling solids, ground and the player."""
        self.create_whirlwind_demo()
        self.create_wind_demo()
        self.create_buoyancy_demo()

        solid_system = RigidSolidSystem(
            self.scene,
            10,
            Vector3(100.0, 5.0, 100.0),
            SolidGeneratorType.UNIFORM,
            Vector3(1.0, 1.0, 1.0),
            Vector3(0.5, 1.0, 0.5),
            100,
            100,
            rng=self.rng,
        )
        solid_system.model = SolidModel(
            shape=Box(3, 3, 3), color=(0.0, 0.0, 1.0, 1.0), tensor=Vector3(), solid_life=2
        )
        self.solid_systems.append(solid_system)

        self.statics.append(StaticBody(Vector3(), Box(100.0, 1.0, 100.0), (1.0, 1.0, 1.0, 1.0)))
        self.statics.append(
            StaticBody(Vector3(0.0, 50.0, 0.0), Box(5, 5, 5), (0.0, 0.0, 0.0, 1.0))
        )

        self.player = Player(Vector3(10.0, 5.0, 10.0), self.scene, self.camera)
        self.player.add_force_generator(SolidWindGenerator(Vector3(), 0, 0.1, 0))


def main(argv: list[str] | None = None) -> int:
    """Run the game scene for a number of fixed steps and report what is alive."""
    parser = argparse.ArgumentParser(description="Run the particle and rigid-body scene.")
    parser.add_argument("--frames", type=int, default=100, help="number of steps")
    parser.add_argument("--dt", type=float, default=1.0 / 30.0, help="step length in seconds")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")

    world = World(rng=random.Random(args.seed))
    world.create_game_scene()
    for _ in range(args.frames):
        world.step(args.dt)

    particles = sum(len(system.particles) for system in world.particle_systems)
    solids = sum(len(system.solids) for system in world.solid_systems)
    print(f"particles: {particles}, solids: {solids}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())