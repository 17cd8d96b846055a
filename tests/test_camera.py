import math

import pytest

from partisim.camera import Camera, Quaternion
from partisim.vector import Vector3


def _close(a, b, tol=1e-9):
    return all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a, b))


def test_direction_is_normalized():
    cam = Camera(Vector3(50, 50, 50), Vector3(-0.6, -0.2, -0.7))
    assert math.isclose(cam.direction.magnitude(), 1.0)


def test_handle_key_moves_forward_and_back():
    cam = Camera(Vector3(), Vector3(0, 0, -1))
    assert cam.handle_key("w") is True
    assert _close(cam.eye, cam.direction * 2.0)
    assert cam.handle_key("S") is True
    assert _close(cam.eye, Vector3())


def test_strafe_keys_cancel():
    start = Vector3(1, 2, 3)
    cam = Camera(start, Vector3(1, 0, 1))
    assert cam.handle_key("A", speed=3.0) is True
    assert (cam.eye - start).magnitude() == pytest.approx(6.0)
    assert cam.eye.y == pytest.approx(2.0)
    assert cam.handle_key("D", speed=3.0) is True
    assert list(cam.eye) == pytest.approx([1.0, 2.0, 3.0])


def test_unknown_key_is_not_handled():
    cam = Camera(Vector3(1, 1, 1), Vector3(0, 0, -1))
    assert cam.handle_key("x") is False
    assert cam.eye == Vector3(1, 1, 1)


def test_analog_move():
    cam = Camera(Vector3(), Vector3(0, 0, -1))
    cam.handle_analog_move(2.0, 3.0)
    assert list(cam.eye) == pytest.approx([2.0, 0.0, -3.0], abs=1e-12)


def test_motion_without_offset_keeps_direction_and_recentres():
    cam = Camera(Vector3(), Vector3(1, 0, 0))
    assert cam.handle_motion(0, 0, 512, 512) == (256, 256)
    assert _close(cam.direction, Vector3(1, 0, 0))
    assert (cam.mouse_x, cam.mouse_y) == (256, 256)


def test_horizontal_motion_turns_about_up():
    cam = Camera(Vector3(), Vector3(1, 0, 0))
    cam.handle_motion(0, 0, 512, 512)
    before = cam.direction
    cam.handle_motion(246, 256, 512, 512)
    after = cam.direction
    assert math.isclose(after.magnitude(), 1.0)
    assert math.isclose(after.y, 0.0, abs_tol=1e-12)
    assert math.isclose(before.dot(after), math.cos(math.radians(1.0)))


def test_quarter_turn_about_z():
    q = Quaternion.from_axis_angle(math.pi / 2, Vector3(0, 0, 1))
    assert list(q.rotate(Vector3(1, 0, 0))) == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_rotation_preserves_length():
    q = Quaternion.from_axis_angle(1.234, Vector3(1, 2, 3).normalized())
    v = Vector3(4, -5, 6)
    assert math.isclose(q.rotate(v).magnitude(), v.magnitude())


def test_identity_matrix_gives_identity_quaternion():
    q = Quaternion.from_matrix(Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))
    assert q == Quaternion()


@pytest.mark.parametrize(
    "angle, axis",
    [
        (0.3, Vector3(0, 1, 0)),
        (2.9, Vector3(1, 0, 0)),
        (3.1, Vector3(0, 1, 0)),
        (3.0, Vector3(0, 0, 1)),
        (1.7, Vector3(1, 1, 1)),
    ],
)
def test_from_matrix_round_trip(angle, axis):
    q = Quaternion.from_axis_angle(angle, axis.normalized())
    cols = [q.rotate(e) for e in (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))]
    q2 = Quaternion.from_matrix(*cols)
    v = Vector3(0.3, -1.2, 2.5)
    assert _close(q2.rotate(v), q.rotate(v))
    assert math.isclose(math.hypot(q2.x, q2.y, q2.z, q2.w), 1.0)


def test_transform_looks_along_direction():
    cam = Camera(Vector3(1, 2, 3), Vector3(-0.6, -0.2, -0.7))
    tr = cam.transform()
    assert tr.position == cam.eye
    assert _close(tr.rotation.rotate(Vector3(0, 0, -1)), cam.direction)


def test_transform_looking_straight_down_has_no_rotation():
    cam = Camera(Vector3(0, 5, 0), Vector3(0, -1, 0))
    tr = cam.transform()
    assert tr.rotation == Quaternion()
    assert tr.position == Vector3(0, 5, 0)