"""First-person camera with quaternion rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vector import Vector3

MOUSE_SENS = 0.1
_UP = Vector3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion with components ``(x, y, z, w)``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vector3) -> Quaternion:
        """Rotation by ``angle`` radians about the unit vector ``axis``."""
        s = math.sin(angle * 0.5)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(angle * 0.5))

    @classmethod
    def from_matrix(cls, col0: Vector3, col1: Vector3, col2: Vector3) -> Quaternion:
        """Quaternion of the rotation matrix given by its three columns."""
        if col2.z < 0:
            if col0.x > col1.y:
                t = 1 + col0.x - col1.y - col2.z
                q = (t, col0.y + col1.x, col2.x + col0.z, col1.z - col2.y)
            else:
                t = 1 - col0.x + col1.y - col2.z
                q = (col0.y + col1.x, t, col1.z + col2.y, col2.x - col0.z)
        elif col0.x < -col1.y:
            t = 1 - col0.x - col1.y + col2.z
            q = (col2.x + col0.z, col1.z + col2.y, t, col0.y - col1.x)
        else:
            t = 1 + col0.x + col1.y + col2.z
            q = (col1.z - col2.y, col2.x - col0.z, col0.y - col1.x, t)
        scale = 0.5 / math.sqrt(t)
        return cls(*(c * scale for c in q))

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate ``v`` by this (unit) quaternion."""
        u = Vector3(self.x, self.y, self.z)
        return (
            v * (2.0 * self.w * self.w - 1.0)
            + u.cross(v) * (2.0 * self.w)
            + u * (2.0 * u.dot(v))
        )


@dataclass(frozen=True)
class Transform:
    """Position plus orientation."""

    position: Vector3
    rotation: Quaternion = Quaternion()


class Camera:
    """Camera with an eye point and a unit view direction."""

    def __init__(self, eye: Vector3, direction: Vector3) -> None:
        self.eye = eye
        self.direction = direction.normalized()
        self.mouse_x = 0
        self.mouse_y = 0

    def _side(self) -> Vector3:
        return self.direction.cross(_UP).normalized()

    def handle_key(self, key: str, speed: float = 1.0) -> bool:
        """Move with W/A/S/D; return whether the key was handled."""
        step = 2.0 * speed
        match key.upper():
            case "W":
                self.eye = self.eye + self.direction * step
            case "S":
                self.eye = self.eye - self.direction * step
            case "A":
                self.eye = self.eye - self._side() * step
            case "D":
                self.eye = self.eye + self._side() * step
            case _:
                return False
        return True

    def handle_analog_move(self, x: float, y: float) -> None:
        """Move ``y`` forward and ``x`` sideways."""
        side = self._side()
        self.eye = self.eye + self.direction * y + side * x

    def handle_motion(
        self, x: int, y: int, window_width: int, window_height: int
    ) -> tuple[int, int]:
        """Turn by the pointer's offset and recentre it.

        Returns the window centre the pointer should be moved to.
        """
        dx = self.mouse_x - x
        dy = self.mouse_y - y
        side = self._side()
        qx = Quaternion.from_axis_angle(math.pi * (dx * MOUSE_SENS) / 180.0, _UP)
        self.direction = qx.rotate(self.direction)
        qy = Quaternion.from_axis_angle(math.pi * (dy * MOUSE_SENS * 0.25) / 180.0, side)
        self.direction = qy.rotate(self.direction).normalized()
        self.mouse_x = window_width // 2
        self.mouse_y = window_height // 2
        return self.mouse_x, self.mouse_y

    def transform(self) -> Transform:
        """Camera pose looking along its direction (down -z in camera space)."""
        side = self.direction.cross(_UP)
        if side.magnitude() < 1e-6:
            return Transform(self.eye)
        side = side.normalized()
        rotation = Quaternion.from_matrix(self.direction.cross(side), side, -self.direction)
        return Transform(self.eye, rotation)