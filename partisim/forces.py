"""Force generators acting on particles."""

from __future__ import annotations

from .particle import Particle
from .vector import Vector3

_E = 2.71828


class ForceGenerator:
    """Base force generator; applies no force."""

    def __init__(self) -> None:
        self.force = Vector3()

    def update_force(self, particle: Particle, t: float) -> None:
        """Apply this generator's force to ``particle`` for a step of ``t``."""


class GravityForceGenerator(ForceGenerator):
    """Vertical force proportional to the particle's mass."""

    def __init__(self, g_accel: float) -> None:
        super().__init__()
        self.g_accel = g_accel

    def update_force(self, particle: Particle, t: float) -> None:
        self.force = Vector3(0.0, particle.mass * self.g_accel, 0.0)
        particle.apply_force(self.force)


class WindForceGenerator(ForceGenerator):
    """Drag towards a wind velocity with linear and quadratic terms."""

    def __init__(self, wind_vel: Vector3, wind_coef: float, k1: float, k2: float) -> None:
        super().__init__()
        self.wind_vel = wind_vel
        self.wind_coef = wind_coef
        self.k1 = k1
        self.k2 = k2

    def update_force(self, particle: Particle, t: float) -> None:
        diff = self.wind_vel - particle.velocity
        self.force = self.k1 * diff + self.k2 * diff.magnitude() * diff
        particle.apply_force(self.force)


class WhirlwindForceGenerator(WindForceGenerator):
    """Wind that swirls around a vertical axis through ``centre``."""

    def __init__(
        self,
        centre: Vector3,
        wind_coef: float,
        k1: float,
        k2: float,
        whirlwind_force: float,
        height: float,
    ) -> None:
        super().__init__(Vector3(), wind_coef, k1, k2)
        self.centre = centre
        self.whirlwind_force = whirlwind_force
        self.height = height

    def update_force(self, particle: Particle, t: float) -> None:
        rel = particle.position - self.centre
        swirl = Vector3(-rel.z, self.height - rel.y, rel.x)
        self.wind_vel = self.whirlwind_force * swirl.normalized()
        super().update_force(particle, t)


class ExplosionForceGenerator(ForceGenerator):
    """Radial push from a point that decays over ``duration``."""

    def __init__(
        self, pos: Vector3, intensity: float, radius: float, duration: float
    ) -> None:
        super().__init__()
        self.pos = pos
        self.intensity = intensity
        self.radius = radius
        self.duration = duration
        self.time = 0.0

    def reset_time(self) -> None:
        """Restart the explosion."""
        self.time = 0.0

    def update_force(self, particle: Particle, t: float) -> None:
        if self.time >= self.duration:
            return
        offset = particle.position - self.pos
        distance = offset.magnitude()
        if 0.0 < distance < self.radius:
            decay = _E ** (-self.time / self.duration)
            self.force = (self.intensity / distance**2) * offset.normalized() * decay
        else:
            self.force = Vector3()
        self.time += t
        particle.apply_force(self.force)


class SpringForceGenerator(ForceGenerator):
    """Hooke spring between a particle and a fixed anchor point."""

    def __init__(self, k: float, resting_length: float, anchor: Vector3) -> None:
        super().__init__()
        self.k = k
        self.resting_length = resting_length
        self.anchor = anchor

    def _spring_force(self, particle: Particle) -> tuple[Vector3, float]:
        relative = self.anchor - particle.position
        stretch = relative.magnitude() - self.resting_length
        return relative.normalized(), stretch

    def update_force(self, particle: Particle, t: float) -> None:
        direction, stretch = self._spring_force(particle)
        self.force = direction * stretch * self.k
        particle.apply_force(self.force)


class ParticleSpringForceGenerator(SpringForceGenerator):
    """Spring anchored to another, moving particle."""

    def __init__(self, k: float, resting_length: float, other: Particle) -> None:
        super().__init__(k, resting_length, other.position)
        self.other = other

    def update_force(self, particle: Particle, t: float) -> None:
        self.anchor = self.other.position
        super().update_force(particle, t)


class RubberForceGenerator(ParticleSpringForceGenerator):
    """Elastic band: pulls only when stretched beyond its resting length."""

    def __init__(self, k: float, resting_length: float, other: Particle) -> None:
        super().__init__(k, resting_length, other)

    def update_force(self, particle: Particle, t: float) -> None:
        self.anchor = self.other.position
        direction, stretch = self._spring_force(particle)
        self.force = direction * stretch * self.k if stretch > 0.0 else Vector3()
        particle.apply_force(self.force)


class BuoyancyForceGenerator(ForceGenerator):
    """Upthrust from a liquid whose surface is at ``liquid_particle``'s height."""

    def __init__(
        self,
        height: float,
        liquid_density: float,
        gravity: float,
        liquid_particle: Particle,
    ) -> None:
        super().__init__()
        self.height = height
        self.liquid_density = liquid_density
        self.gravity = gravity
        self.liquid_particle = liquid_particle

    def update_force(self, particle: Particle, t: float) -> None:
        diff = particle.position.y - self.liquid_particle.position.y
        half = self.height * 0.5
        if diff > half:
            immersed = 0.0
        elif diff < half:
            immersed = 1.0
        else:
            immersed = diff / self.height + 0.5
        self.force = Vector3(
            0.0, self.liquid_density * particle.volume * immersed * self.gravity, 0.0
        )
        particle.apply_force(self.force)