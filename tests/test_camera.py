import math

import pytest

from warfield.camera import FlyingCamera, Vec3, battle_camera_position


def test_initial_placement():
    cam = FlyingCamera()
    assert cam.position == Vec3(0.0, 15.0, -10.0)
    assert cam.focus == Vec3(0.0, 0.0, 0.0)
    assert cam.opening


def test_vec3_arithmetic_round_trip():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert (a + b) - b == a
    assert a * 1.0 == a


def test_focus_on_hovers_over_point():
    cam = FlyingCamera()
    cam.moving = Vec3(0.5, 0.0, 0.5)
    cam.zoom = 0.3
    target = Vec3(4.0, 1.0, 6.0)
    cam.focus_on(target)
    assert cam.focus == target
    assert cam.zoom == FlyingCamera.MIN_ZOOM
    assert cam.position.x == target.x
    assert cam.position.y - target.y == pytest.approx(15.0)
    assert target.z - cam.position.z == pytest.approx(10.0)
    assert cam.moving == Vec3()


def test_pan_left_moves_focus_left():
    cam = FlyingCamera()
    cam.step(left=True)
    assert cam.focus.x < 0.0
    assert cam.position.x == cam.focus.x


def test_pan_is_clamped():
    cam = FlyingCamera()
    for _ in range(40):
        cam.step(left=True)
    assert cam.moving.x == -FlyingCamera.MAX_MOVING_VALUE
    for _ in range(40):
        cam.step(forward=True)
    assert cam.moving.z == FlyingCamera.MAX_MOVING_VALUE


def test_small_momentum_stops_without_moving():
    cam = FlyingCamera()
    cam.step(right=True)
    before = cam.focus
    cam.step()
    assert cam.moving.x == 0.0
    assert cam.focus == before


def test_large_momentum_decays_to_rest():
    cam = FlyingCamera()
    for _ in range(40):
        cam.step(right=True)
    cam.step()
    assert 0.0 < cam.moving.x < FlyingCamera.MAX_MOVING_VALUE
    for _ in range(20):
        cam.step()
    assert cam.moving.x == 0.0


def test_zoom_in_is_clamped():
    cam = FlyingCamera()
    for _ in range(500):
        cam.step(zoom_in=True)
    assert cam.zoom == FlyingCamera.MAX_ZOOM
    assert cam.position.y - cam.focus.y == pytest.approx(15.0 * cam.zoom)


def test_zoom_out_is_clamped():
    cam = FlyingCamera()
    for _ in range(10):
        cam.step(zoom_in=True)
    for _ in range(100):
        cam.step(zoom_out=True)
    assert cam.zoom == FlyingCamera.MIN_ZOOM


def test_forward_takes_precedence_over_zoom():
    cam = FlyingCamera()
    cam.step(forward=True, zoom_in=True)
    assert cam.zoom == 1.0
    assert cam.focus.z > 0.0


def test_opening_flies_forward_then_stops():
    cam = FlyingCamera()
    assert cam.opening_step(1.0) is True
    assert cam.focus.z > 0.0
    for _ in range(10):
        if not cam.opening_step(1.0):
            break
    assert not cam.opening
    assert cam.opening_count == 0.0
    assert cam.moving.z == 0.0
    assert cam.opening_step(1.0) is False


def test_battle_camera_is_side_on():
    attacker = Vec3(0.0, 0.0, 0.0)
    defender = Vec3(2.0, 0.0, 0.0)
    spot = battle_camera_position(attacker, defender)
    mid = (attacker + defender) * 0.5
    offset = spot - mid
    line = attacker - defender
    assert offset.y == pytest.approx(10.0)
    assert math.hypot(offset.x, offset.z) == pytest.approx(15.0)
    assert offset.x * line.x + offset.z * line.z == pytest.approx(0.0)


def test_battle_camera_same_square_sits_above_midpoint():
    point = Vec3(3.0, 1.0, 3.0)
    spot = battle_camera_position(point, point)
    assert spot.x == point.x and spot.z == point.z
    assert spot.y == pytest.approx(point.y + 10.0)


def test_battle_view_looks_at_attacker():
    cam = FlyingCamera()
    attacker = Vec3(1.0, 0.0, 5.0)
    defender = Vec3(1.0, 0.0, 8.0)
    cam.battle_view(attacker, defender)
    assert cam.focus == attacker
    assert cam.position == battle_camera_position(attacker, defender)