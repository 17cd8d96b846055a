"""Rigid solids in a simple scene and the force generators acting on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from .vector import Vector3

Color = tuple[float, float, float, float]


class Shape(Protocol):
    def volume(self) -> float: ...


@dataclass(frozen=True)
class Sphere:
    """Sphere of the given radius."""

    radius: float

    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius**3


@dataclass(frozen=True)
class Box:
    """Axis-aligned box given by its half extents."""

    hx: float
    hy: float
    hz: float

    def volume(self) -> float:
        return 8.0 * self.hx * self.hy * self.hz


@dataclass(frozen=True)
class Capsule:
    """Capsule along the x axis: a cylinder of length ``2 * half_height`` with round caps."""

    radius: float
    half_height: float

    def volume(self) -> float:
        cylinder = math.pi * self.radius**2 * 2.0 * self.half_height
        return cylinder + 4.0 / 3.0 * math.pi * self.radius**3


def _default_inertia(shape: Shape, mass: float) -> Vector3:
    if isinstance(shape, Sphere):
        i = 0.4 * mass * shape.radius**2
        return Vector3(i, i, i)
    if isinstance(shape, Box):
        return Vector3(
            mass / 3.0 * (shape.hy**2 + shape.hz**2),
            mass / 3.0 * (shape.hx**2 + shape.hz**2),
            mass / 3.0 * (shape.hx**2 + shape.hy**2),
        )
    if isinstance(shape, Capsule):
        r2 = shape.radius**2
        side = mass / 12.0 * (3.0 * r2 + (2.0 * shape.half_height) ** 2)
        return Vector3(0.5 * mass * r2, side, side)
    return Vector3()


class Scene:
    """A set of rigid bodies stepped together under uniform gravity."""

    def __init__(self, gravity: Vector3 = Vector3(0.0, -9.8, 0.0)) -> None:
        self.gravity = gravity
        self.bodies: list[RigidSolid] = []

    def add(self, body: RigidSolid) -> None:
        """Add ``body``; adding it again has no effect."""
        if body not in self.bodies:
            self.bodies.append(body)

    def remove(self, body: RigidSolid) -> None:
        """Remove ``body``; raises ValueError if it is not in the scene."""
        self.bodies.remove(body)

    def simulate(self, dt: float) -> None:
        """Advance every body by ``dt`` seconds."""
        for body in list(self.bodies):
            body.step(dt, self.gravity)


class RigidSolid:
    """A dynamic body with mass, velocity, accumulated force and an optional lifetime.

    A ``life`` of -1 means the solid never expires.
    """

    def __init__(
        self,
        pos: Vector3,
        shape: Shape,
        scene: Scene,
        color: Color = (1.0, 1.0, 1.0, 1.0),
        life: float = -1,
        density: float = 0.15,
    ) -> None:
        self.position = pos
        self.shape = shape
        self.scene = scene
        self.color = color
        self.life = life
        self.life_timer = 0.0
        self.alive = True
        self.name = ""
        self.velocity = Vector3()
        self.mass = density * shape.volume()
        self.inertia_tensor = _default_inertia(shape, self.mass)
        self.force_accumulated = Vector3()
        scene.add(self)

    def update(self, t: float) -> None:
        """Age the solid by ``t`` and mark it dead once its life is over."""
        if self.life != -1:
            self.life_timer += t
            if self.life_timer > self.life:
                self.alive = False

    def add_force(self, force: Vector3) -> None:
        """Add ``force`` to the forces acting during the next step."""
        self.force_accumulated = self.force_accumulated + force

    def step(self, dt: float, gravity: Vector3) -> None:
        """Integrate linear motion over ``dt`` and clear the accumulated force."""
        acceleration = self.force_accumulated / self.mass + gravity
        self.velocity = self.velocity + acceleration * dt
        self.position = self.position + self.velocity * dt
        self.force_accumulated = Vector3()

    def destroy(self) -> None:
        """Take the solid out of its scene."""
        if self in self.scene.bodies:
            self.scene.remove(self)
        self.alive = False


class SolidForceGenerator:
    """Base force generator for rigid solids; applies no force."""

    def __init__(self) -> None:
        self.force = Vector3()

    def update_force(self, solid: RigidSolid, t: float) -> None:
        """Apply this generator's force to ``solid`` for a step of ``t``."""


class SolidSpringForceGenerator(SolidForceGenerator):
    """Elastic pull towards a fixed anchor, only while stretched past its resting length."""

    def __init__(self, k: float, resting_length: float, anchor: Vector3) -> None:
        super().__init__()
        self.k = k
        self.resting_length = resting_length
        self.anchor = anchor

    def update_force(self, solid: RigidSolid, t: float) -> None:
        relative = self.anchor - solid.position
        stretch = relative.magnitude() - self.resting_length
        if stretch > 0.0:
            self.force = relative.normalized() * stretch * self.k
        else:
            self.force = Vector3()
        solid.add_force(self.force)


class SolidWindGenerator(SolidForceGenerator):
    """Drag towards a wind velocity with linear and quadratic terms."""

    def __init__(self, wind_vel: Vector3, wind_coef: float, k1: float, k2: float) -> None:
        super().__init__()
        self.wind_vel = wind_vel
        self.wind_coef = wind_coef
        self.k1 = k1
        self.k2 = k2

    def update_force(self, solid: RigidSolid, t: float) -> None:
        diff = self.wind_vel - solid.velocity
        self.force = self.k1 * diff + self.k2 * diff.magnitude() * diff
        solid.add_force(self.force)