import random

from partisim.forces import GravityForceGenerator
from partisim.generators import ParticleModel
from partisim.particle import Particle
from partisim.particle_system import GeneratorType, ParticleSystem
from partisim.vector import Vector3


def _quiet_system(**kwargs):
    kwargs.setdefault("max_particles", 0)
    return ParticleSystem(rng=random.Random(0), **kwargs)


def test_update_spawns_one_particle_per_step():
    ps = ParticleSystem(particle_life=-1, rng=random.Random(0))
    for _ in range(5):
        ps.update(0.1)
    assert len(ps.particles) == 5


def test_max_particles_limits_spawning():
    ps = ParticleSystem(max_particles=3, particle_life=-1, rng=random.Random(0))
    for _ in range(10):
        ps.update(0.1)
    assert len(ps.particles) == 3


def test_particle_life_removes_old_particles():
    steps = 20
    ps = ParticleSystem(particle_life=0.25, rng=random.Random(0))
    for _ in range(steps):
        ps.update(0.1)
    assert 0 < len(ps.particles) < steps


def test_far_particles_are_culled():
    ps = _quiet_system(max_distance=50.0)
    near = Particle(Vector3(1, 0, 0), Vector3())
    far = Particle(Vector3(100, 0, 0), Vector3())
    ps.add_particle(near)
    ps.add_particle(far)
    ps.update(0.1)
    assert ps.particles == [near]


def test_force_generator_matches_direct_application():
    ps = _quiet_system()
    ps.add_force_generator(GravityForceGenerator(-10))
    inside = Particle(Vector3(), Vector3(), mass=2.0)
    reference = Particle(Vector3(), Vector3(), mass=2.0)
    ps.add_particle(inside)
    ps.update(0.5)
    GravityForceGenerator(-10).update_force(reference, 0.5)
    reference.integrate(0.5)
    assert inside.velocity == reference.velocity
    assert inside.position == reference.position
    assert inside.velocity.y < 0


def test_apply_force_to_particles_reaches_all():
    ps = _quiet_system()
    particles = [Particle(Vector3(i, 0, 0), Vector3()) for i in range(3)]
    for p in particles:
        ps.add_particle(p)
    force = Vector3(0, 100, 0)
    ps.apply_force_to_particles(force)
    assert all(p.force_applied == force for p in particles)


def test_model_is_used_for_new_particles():
    ps = ParticleSystem(rng=random.Random(0))
    ps.model = ParticleModel(mass=3.0, gravity=0.0)
    ps.update(0.1)
    assert ps.particles[0].mass == 3.0


def test_gaussian_system_spawns():
    ps = ParticleSystem(
        generator_type=GeneratorType.GAUSSIAN,
        mean_vel=Vector3(10.0, 1.0, 0.1),
        rng=random.Random(5),
    )
    ps.update(0.1)
    assert len(ps.particles) == 1
    assert ps.particles[0].velocity.magnitude() > 0


def test_spring2_demo_particles_pull_together():
    ps = _quiet_system(particle_life=-1)
    ps.create_spring2_demo()
    ps.update(0.1)
    right, left = ps.particles
    assert right.velocity.x < 0 < left.velocity.x
    assert abs(right.velocity.x + left.velocity.x) < 1e-9


def test_rubber_demo_at_rest_length_stays_still():
    ps = _quiet_system(particle_life=-1)
    ps.create_spring_rubber_demo()
    ps.update(0.1)
    assert all(p.velocity == Vector3() for p in ps.particles)


def test_buoyancy_demo_floats_submerged_and_drops_others():
    ps = _quiet_system(particle_life=-1)
    ps.create_buoyancy_demo()
    ps.update(0.1)
    submerged, heavy, light = ps.particles
    assert submerged.velocity.y > 0
    assert heavy.velocity.y < 0
    assert light.velocity.y < 0