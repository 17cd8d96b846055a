import pytest

from partisim.projectile import Projectile
from partisim.particle import Particle
from partisim.vector import Vector3


def make(vel=Vector3(0.0, 0.0, 100.0), mass=1.0, factor=0.5):
    return Projectile(Vector3(), vel, Vector3(), 0.75, -9.8, mass, factor)


def test_velocity_is_scaled():
    vel = Vector3(10.0, 0.0, 100.0)
    p = make(vel=vel, factor=0.5)
    assert p.velocity == vel * 0.5


@pytest.mark.parametrize("factor", [0.5, 0.25, 2.0])
def test_kinetic_energy_is_preserved(factor):
    vel = Vector3(3.0, 4.0, 50.0)
    mass = 10.0
    p = make(vel=vel, mass=mass, factor=factor)
    assert p.mass * p.velocity.magnitude() ** 2 == pytest.approx(
        mass * vel.magnitude() ** 2
    )


def test_slower_projectile_is_heavier():
    p = make(mass=1.0, factor=0.5)
    assert p.mass > 1.0


def test_is_a_particle_and_integrates():
    p = make()
    assert isinstance(p, Particle)
    p.integrate(0.1)
    assert p.position.z > 0
    assert p.velocity.y < 0


def test_zero_velocity_raises():
    with pytest.raises(ValueError):
        make(vel=Vector3())


def test_zero_factor_raises():
    with pytest.raises(ValueError):
        make(factor=0.0)