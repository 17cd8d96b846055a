# partisim

A small physics sandbox in plain Python with no runtime dependencies:

- point particles with damping, constant gravity and accumulated forces;
- force generators for gravity, wind, whirlwinds, explosions, springs,
  rubber bands and buoyancy;
- particle systems that spawn particles from uniform or Gaussian generators;
- simple rigid solids (spheres, boxes, capsules) stepped in a scene;
- a first-person camera, a player body with a grappling hook, and a `World`
  that ties everything together.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the game scene

```
partisim
```

This builds the game scene (a whirlwind and a wind particle system, the
buoyancy demo, a system of spawning boxes, a floor, a raised block and the
player), steps it a fixed number of times and prints how many particles and
solids are alive at the end, for example `particles: 123, solids: 45`.

Options:

- `--frames N` – number of steps (default 100; must not be negative)
- `--dt SECONDS` – length of each step (default 1/30)
- `--seed N` – seed for the random generators, for repeatable runs

## Using the library

```python
from partisim.vector import Vector3
from partisim.particle import Particle
from partisim.forces import SpringForceGenerator

p = Particle(pos=Vector3(-10, 0, 0), vel=Vector3(0, 0, 0), damping=0.85)
spring = SpringForceGenerator(k=5, resting_length=10, anchor=Vector3(0, 10, 0))

for _ in range(100):
    spring.update_force(p, 0.01)
    p.integrate(0.01)
```

### Vectors (`partisim.vector`)

`Vector3` is an immutable vector with `+`, `-`, unary `-`, multiplication and
division by a scalar, `magnitude()`, `normalized()` (the zero vector stays
zero), `cross()` and `dot()`.

### Particles and projectiles

- `partisim.particle.Particle` keeps position, velocity, damping, gravity,
  mass and volume. `apply_force` accumulates a force; `integrate(t)` sets the
  acceleration from the accumulated force, advances the particle and clears
  the accumulator. The scheme is chosen by `Particle.integration_mode`
  (`IntegrationMode.SEMI` by default, or `EULER`; `VERLET` leaves the
  particle where it is).
- `partisim.projectile.Projectile` is a particle whose velocity is multiplied
  by a scaling factor at creation, with its mass changed so that its kinetic
  energy stays the same. A velocity that scales to zero raises `ValueError`.

### Force generators (`partisim.forces`)

Each generator has `update_force(particle, t)`, which works out a force and
applies it to the particle:

- `GravityForceGenerator(g_accel)` – vertical force `mass * g_accel`.
- `WindForceGenerator(wind_vel, wind_coef, k1, k2)` – drag towards the wind
  velocity with a linear and a quadratic term.
- `WhirlwindForceGenerator(centre, wind_coef, k1, k2, whirlwind_force, height)`
  – wind swirling around a vertical axis through `centre`.
- `ExplosionForceGenerator(pos, intensity, radius, duration)` – radial push
  falling off with the square of the distance and decaying over `duration`;
  it stops acting once `duration` has passed, and `reset_time()` restarts it.
- `SpringForceGenerator(k, resting_length, anchor)` – Hooke spring to a fixed
  point.
- `ParticleSpringForceGenerator(k, resting_length, other)` – spring to
  another particle.
- `RubberForceGenerator(k, resting_length, other)` – pulls only while
  stretched beyond its resting length.
- `BuoyancyForceGenerator(height, liquid_density, gravity, liquid_particle)` –
  upthrust from a liquid whose surface is at the height of `liquid_particle`.

### Particle systems

`partisim.particle_system.ParticleSystem` owns particles, one particle
generator (`GeneratorType.UNIFORM` or `GeneratorType.GAUSSIAN`, from
`partisim.generators`) and any number of force generators. Each `update(t)`
spawns a particle while under `max_particles`, applies the force generators,
integrates, and removes particles that are too old or at least `max_distance`
from the system position. A particle life of `-1` makes particles live for
ever. Spawned particles are built from `system.model`, a `ParticleModel`.
Pass a `random.Random` as `rng` for repeatable runs.

`create_spring1_demo`, `create_spring2_demo`, `create_spring_rubber_demo` and
`create_buoyancy_demo` set up ready-made scenarios in a system.

### Rigid solids

`partisim.rigid` has the shapes `Sphere`, `Box` and `Capsule`, a `Scene`
that steps its bodies under uniform gravity, and `RigidSolid`, whose mass is
its density times its shape's volume. A solid accumulates forces with
`add_force`, ages with `update(t)` (a `life` of `-1` never expires) and leaves
its scene with `destroy()`. `SolidSpringForceGenerator` (pulls only while
stretched) and `SolidWindGenerator` act on solids.

`partisim.rigid_system.RigidSolidSystem` spawns solids from a `SolidModel`
with a uniform or Gaussian generator (or none, with
`SolidGeneratorType.NONE`), applies its force generators and drops solids
whose life has run out.

### Camera, player and world

- `partisim.camera.Camera` has an eye point and a unit direction;
  `handle_key` moves with W/A/S/D, `handle_analog_move` moves forward and
  sideways, `handle_motion(x, y, window_width, window_height)` turns by the
  pointer offset and returns the window centre, and `transform()` returns a
  `Transform` with position and `Quaternion` rotation.
- `partisim.player.Player` is a capsule body moved by forces relative to the
  camera, with a capped horizontal speed. It moves with W, A, S and D, jumps
  with the space bar, and `shoot_grappling_hook()` fires a
  `GrapplingProjectile`; `create_grappling_hook()` turns the projectile's
  position into a spring anchor.
- `partisim.scene.World` holds everything. `key_press(key)` handles input
  (`Z` shoots a projectile, `P` cycles the projectile type, `F` pushes the
  first particle system upward, `E` fires the grappling hook, `R` releases
  it, `0` toggles the `full_screen` flag), `step(t)` advances the whole
  simulation, and `on_collision(name1, name2)` anchors the hook when its
  projectile touches anything other than the player.

## What it does not do

- There is no window or rendering: shapes and colours are kept as data only,
  and the `partisim` command just steps the scene and prints counts.
- `Scene` does not detect collisions. Solids pass through the floor and other
  static bodies, which are not simulated at all; the grappling hook only
  anchors when `World.on_collision` is called by the caller.
- Rigid solids move linearly only; their inertia tensors are stored but no
  rotation is simulated.