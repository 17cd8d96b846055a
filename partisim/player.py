"""First-person player body with a spring grappling hook."""

from __future__ import annotations

from .camera import Camera
from .rigid import (
    Capsule,
    RigidSolid,
    Scene,
    Shape,
    SolidForceGenerator,
    SolidSpringForceGenerator,
    Sphere,
)
from .vector import Vector3

PLAYER_SPEED_LIMIT = 50.0
PLAYER_SPEED_FORCE = 1000.0
JUMP_FORCE = 100.0
HOOK_SPEED = 100.0
HOOK_DIST = 1000.0
HOOK_STIFFNESS = 100.0

PLAYER_NAME = "player"
HOOK_NAME = "hook_projectile"

_UP = Vector3(0.0, 1.0, 0.0)


class GrapplingProjectile(RigidSolid):
    """Projectile that anchors the grappling hook where it lands."""

    def __init__(self, scene: Scene, pos: Vector3, vel: Vector3, shape: Shape) -> None:
        super().__init__(pos, shape, scene, (1.0, 1.0, 0.0, 1.0))
        self.velocity = vel
        self.name = HOOK_NAME


class Player(RigidSolid):
    """Capsule body moved by forces, steered by the camera."""

    def __init__(self, pos: Vector3, scene: Scene, camera: Camera) -> None:
        super().__init__(pos, Capsule(0.5, 0.5), scene)
        self.camera = camera
        self.mass = 1.0
        # The player's rotation is locked, so its inertia tensor is left at zero.
        self.inertia_tensor = Vector3()
        self.name = PLAYER_NAME
        self.input_direction: tuple[float, float] = (0.0, 0.0)
        self.force_generators: list[SolidForceGenerator] = []
        self.grappling_hook: SolidSpringForceGenerator | None = None
        self.hook_projectile: GrapplingProjectile | None = None
        self.to_delete: list[RigidSolid] = []

    def _mark_for_deletion(self, solid: RigidSolid) -> None:
        if solid not in self.to_delete:
            self.to_delete.append(solid)

    def update(self, dt: float) -> None:
        """Move, follow with the camera, apply forces and check the hook range."""
        self.movement()
        self.camera.eye = self.position + Vector3(0.0, 2.0, 0.0)
        for generator in self.force_generators:
            generator.update_force(self, dt)
        if self.grappling_hook is not None:
            self.grappling_hook.update_force(self, dt)
        if self.hook_projectile is not None:
            dist = (self.hook_projectile.position - self.position).magnitude()
            if dist > HOOK_DIST:
                self._mark_for_deletion(self.hook_projectile)

    def movement(self) -> None:
        """Push in the input direction relative to the camera and cap the speed."""
        forward = Vector3(self.camera.direction.x, 0.0, self.camera.direction.z).normalized()
        right = _UP.cross(forward)
        right = Vector3(right.x, 0.0, right.z).normalized()
        ix, iy = self.input_direction
        direction = (forward * ix + right * iy).normalized()
        self.add_force(direction * PLAYER_SPEED_FORCE)

        vel = self.velocity
        if vel.magnitude() > PLAYER_SPEED_LIMIT:
            horizontal = Vector3(vel.x, 0.0, vel.z).normalized() * PLAYER_SPEED_LIMIT
            self.velocity = horizontal + Vector3(0.0, vel.y, 0.0)

        self.input_direction = (0.0, 0.0)

    def process_input(self, key: str) -> None:
        """Handle W/A/S/D movement and space to jump."""
        match key.upper():
            case "W":
                self.input_direction = (1.0, 0.0)
            case "A":
                self.input_direction = (0.0, 1.0)
            case "S":
                self.input_direction = (-1.0, 0.0)
            case "D":
                self.input_direction = (0.0, -1.0)
            case " ":
                self.jump()

    def jump(self) -> None:
        """Push upwards."""
        self.add_force(Vector3(0.0, JUMP_FORCE, 0.0))

    def shoot_grappling_hook(self) -> None:
        """Fire the hook projectile from the camera unless one is in flight."""
        if self.hook_projectile is None:
            self.hook_projectile = GrapplingProjectile(
                self.scene,
                self.camera.transform().position,
                self.camera.direction * HOOK_SPEED,
                Sphere(1.0),
            )

    def create_grappling_hook(self) -> None:
        """Attach a spring to where the hook projectile is now."""
        pos = Vector3()
        if self.hook_projectile is not None:
            pos = self.hook_projectile.position
            self._mark_for_deletion(self.hook_projectile)
        if self.grappling_hook is not None:
            self.remove_grappling_hook()
        length = (pos - self.position).magnitude()
        self.grappling_hook = SolidSpringForceGenerator(HOOK_STIFFNESS, length, pos)

    def remove_grappling_hook(self) -> None:
        """Detach the hook spring."""
        self.grappling_hook = None

    def remove_hook_projectile(self) -> None:
        """Forget the hook projectile once it has been deleted."""
        self.hook_projectile = None

    def add_force_generator(self, generator: SolidForceGenerator) -> None:
        """Register a force generator acting on the player."""
        self.force_generators.append(generator)