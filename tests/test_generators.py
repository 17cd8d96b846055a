import math
import random

import pytest

from partisim.generators import (
    GaussianGenerator,
    ParticleGenerator,
    ParticleModel,
    UniformGenerator,
)
from partisim.vector import Vector3


class _Host:
    def __init__(self, pos=Vector3(), model=None):
        self.pos = pos
        self.model = model if model is not None else ParticleModel()
        self.added = []

    def add_particle(self, particle):
        self.added.append(particle)


def test_base_generator_is_abstract():
    with pytest.raises(TypeError):
        ParticleGenerator(_Host(), Vector3(), Vector3())


def test_uniform_particles_stay_within_means():
    host = _Host(pos=Vector3(10.0, 0.0, 0.0))
    mean_pos = Vector3(1.0, 2.0, 3.0)
    mean_vel = Vector3(4.0, 5.0, 6.0)
    gen = UniformGenerator(host, mean_vel, mean_pos, random.Random(1))
    for _ in range(200):
        p = gen.create_particle()
        rel = p.position - host.pos
        for value, bound in zip(rel, mean_pos):
            assert abs(value) <= bound
        for value, bound in zip(p.velocity, mean_vel):
            assert abs(value) <= bound


def test_uniform_with_zero_means_spawns_at_system_position():
    host = _Host(pos=Vector3(3.0, 4.0, 5.0))
    gen = UniformGenerator(host, Vector3(), Vector3(), random.Random(7))
    p = gen.create_particle()
    assert p.position == host.pos
    assert p.velocity == Vector3()


def test_seeded_generators_are_reproducible():
    host = _Host()
    a = UniformGenerator(host, Vector3(1, 1, 1), Vector3(2, 2, 2), random.Random(42))
    b = UniformGenerator(host, Vector3(1, 1, 1), Vector3(2, 2, 2), random.Random(42))
    pa, pb = a.create_particle(), b.create_particle()
    assert pa.position == pb.position
    assert pa.velocity == pb.velocity


def test_model_fields_are_copied():
    model = ParticleModel(damping=0.5, gravity=-3.0, color=(0.0, 0.75, 0.75, 1.0), mass=0.1)
    host = _Host(model=model)
    p = UniformGenerator(host, Vector3(), Vector3(), random.Random(0)).create_particle()
    assert p.mass == model.mass
    assert p.damping == model.damping
    assert p.gravity == model.gravity
    assert p.color == model.color


def test_update_adds_one_particle():
    host = _Host()
    gen = UniformGenerator(host, Vector3(), Vector3(), random.Random(0))
    gen.update(0.1)
    gen.update(0.1)
    assert len(host.added) == 2


def test_gaussian_without_variation_uses_mean_speed():
    host = _Host(pos=Vector3(1.0, 0.0, 0.0))
    mean_vel = Vector3(3.0, 4.0, 0.0)
    mean_pos = Vector3(1.0, 1.0, 1.0)
    gen = GaussianGenerator(host, 0.0, mean_vel, mean_pos, random.Random(3))
    p = gen.create_particle()
    speed = mean_vel.magnitude()
    assert p.velocity == mean_vel * speed
    assert p.position == mean_pos * speed + host.pos


def test_gaussian_draws_centre_on_mean_speed():
    host = _Host()
    mean_vel = Vector3(1.0, 0.0, 0.0)
    gen = GaussianGenerator(host, 0.5, mean_vel, Vector3(), random.Random(11))
    samples = [gen.create_particle().velocity.x for _ in range(4000)]
    average = sum(samples) / len(samples)
    assert math.isclose(average, mean_vel.magnitude(), abs_tol=0.05)


def test_gaussian_rejects_negative_variation():
    with pytest.raises(ValueError):
        GaussianGenerator(_Host(), -1.0, Vector3(), Vector3())