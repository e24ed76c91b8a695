"""Free-flying field camera and the side-on battle camera."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)


_BATTLE_DISTANCE = 15.0
_BATTLE_HEIGHT = 10.0
_HEIGHT_OFFSET = 15.0
_BACK_OFFSET = 10.0


def battle_camera_position(attacker: Vec3, defender: Vec3) -> Vec3:
    """Camera spot looking side-on at a fight between two positions."""
    mid = (attacker + defender) * 0.5
    dx = attacker.x - defender.x
    dz = attacker.z - defender.z
    # Cross product of the line of fire with the up vector lies in the XZ plane.
    px, pz = -dz, dx
    length = math.hypot(px, pz)
    if length > 0.0:
        px, pz = px / length, pz / length
    return Vec3(
        mid.x + px * _BATTLE_DISTANCE,
        mid.y + _BATTLE_HEIGHT,
        mid.z + pz * _BATTLE_DISTANCE,
    )


class FlyingCamera:
    """Camera that pans over the field with momentum and zoom."""

    MAX_MOVING_VALUE = 1.0
    ZOOM_SPEED = 0.005
    MAX_ZOOM = 0.1
    MIN_ZOOM = 1.0
    PAN_STEP = 0.05
    DECAY_STEP = 0.1
    DECAY_THRESHOLD = 0.3
    OPENING_DURATION = 2.5
    OPENING_SPEED = 0.4

    def __init__(self) -> None:
        self.position = Vec3(0.0, _HEIGHT_OFFSET, -_BACK_OFFSET)
        self.focus = Vec3(0.0, 0.0, 0.0)
        self.moving = Vec3()
        self.zoom = 1.0
        self.opening = True
        self.opening_count = 0.0

    def _clamp(self, value: float) -> float:
        return max(-self.MAX_MOVING_VALUE, min(self.MAX_MOVING_VALUE, value))

    def move(self) -> None:
        """Shift camera and focus by the current momentum."""
        mx = self._clamp(self.moving.x)
        mz = self._clamp(self.moving.z)
        self.moving = Vec3(mx, self.moving.y, mz)
        f = self.focus
        self.position = Vec3(
            f.x + mx,
            f.y + _HEIGHT_OFFSET * self.zoom,
            f.z - _BACK_OFFSET * self.zoom + mz,
        )
        self.focus = Vec3(f.x + mx, f.y, f.z + mz)

    def focus_on(self, position: Vec3) -> None:
        """Hover over a point at full zoom-out and stop any panning."""
        self.zoom = self.MIN_ZOOM
        self.position = Vec3(
            position.x,
            position.y + _HEIGHT_OFFSET * self.zoom,
            position.z - _BACK_OFFSET * self.zoom,
        )
        self.focus = position
        self.moving = Vec3()

    def _decay(self, value: float) -> tuple[float, bool]:
        if value > self.DECAY_THRESHOLD:
            return value - self.DECAY_STEP, True
        if value < -self.DECAY_THRESHOLD:
            return value + self.DECAY_STEP, True
        return 0.0, False

    def step(
        self,
        left: bool = False,
        right: bool = False,
        forward: bool = False,
        back: bool = False,
        zoom_in: bool = False,
        zoom_out: bool = False,
    ) -> None:
        """Apply one frame of player input."""
        if left:
            self.moving = Vec3(self.moving.x - self.PAN_STEP, self.moving.y, self.moving.z)
            self.move()
        elif right:
            self.moving = Vec3(self.moving.x + self.PAN_STEP, self.moving.y, self.moving.z)
            self.move()
        else:
            mx, moved = self._decay(self.moving.x)
            self.moving = Vec3(mx, self.moving.y, self.moving.z)
            if moved:
                self.move()

        if forward:
            self.moving = Vec3(self.moving.x, self.moving.y, self.moving.z + self.PAN_STEP)
            self.move()
        elif back:
            self.moving = Vec3(self.moving.x, self.moving.y, self.moving.z - self.PAN_STEP)
            self.move()
        elif zoom_in:
            self.zoom = max(self.MAX_ZOOM, self.zoom - self.ZOOM_SPEED)
            self.move()
        elif zoom_out:
            self.zoom = min(self.MIN_ZOOM, self.zoom + self.ZOOM_SPEED)
            self.move()
        else:
            mz, moved = self._decay(self.moving.z)
            self.moving = Vec3(self.moving.x, self.moving.y, mz)
            if moved:
                self.move()

    def opening_step(self, delta: float) -> bool:
        """Advance the opening fly-in; return True while it is still running."""
        if not self.opening:
            return False
        if self.opening_count < self.OPENING_DURATION:
            self.opening_count += delta
            self.moving = Vec3(self.moving.x, self.moving.y, self.OPENING_SPEED)
            self.move()
        elif self.opening_count > self.OPENING_DURATION:
            self.moving = Vec3(self.moving.x, self.moving.y, 0.0)
            self.move()
            self.opening = False
            self.opening_count = 0.0
        return self.opening

    def battle_view(self, attacker: Vec3, defender: Vec3) -> None:
        """Frame a fight from the side, looking at the attacker."""
        self.position = battle_camera_position(attacker, defender)
        self.focus = attacker