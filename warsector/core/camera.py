"""
First-person camera.

Coordinate convention: y is up, +z is forward at yaw 0. Yaw is a right-handed
rotation about y, kept in [0, 2*pi). Moving changes x and z only.
"""

import math
from typing import Tuple

import numpy as np

from warsector.core.point import Point

TWO_PI = 2 * math.pi

DEFAULT_SPEED = 1000.0               # world units / second
DEFAULT_ANGULAR_SPEED = math.pi / 3  # radians / second

MOVE_DIRECTIONS = ("forwards", "backwards")
TURN_DIRECTIONS = ("left", "right")


def floored_mod(a: float, n: float) -> float:
    """Modulo whose result takes the sign of n (never negative for n > 0)."""
    return (a % n + n) % n


class Camera:
    """
    Camera position + heading, owning the world->camera transform.

    The transform parameters (cos and sin of -yaw) are stored on the camera
    and recomputed whenever yaw changes, so transforming every vertex of a
    frame costs no trigonometry.
    """

    __slots__ = ('x', 'y', 'z', '_yaw', 'speed', 'angular_speed', '_cos', '_sin')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 yaw: float = 0.0,
                 speed: float = DEFAULT_SPEED,
                 angular_speed: float = DEFAULT_ANGULAR_SPEED):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.speed = float(speed)
        self.angular_speed = float(angular_speed)
        self._yaw = floored_mod(float(yaw), TWO_PI)
        self._update_transform()

    @property
    def yaw(self) -> float:
        """Heading in radians, always in [0, 2*pi)."""
        return self._yaw

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def heading_degrees(self) -> int:
        """Compass-style heading (0-359): increasing yaw decreases it."""
        return int(math.floor(floored_mod(360 - math.degrees(self._yaw), 360))) % 360

    def _update_transform(self):
        self._cos = math.cos(-self._yaw)
        self._sin = math.sin(-self._yaw)

    # ── Mutators ───────────────────────────────────────────────

    def move(self, seconds: float, direction: str = "forwards") -> None:
        """
        Move along the current heading.

        Args:
            seconds: Elapsed time; distance is seconds * speed
            direction: "forwards" or "backwards"

        Raises:
            ValueError: If direction is not recognised
        """
        if direction not in MOVE_DIRECTIONS:
            raise ValueError(f"Unknown move direction: {direction!r}")

        distance = seconds * self.speed
        if direction == "backwards":
            distance = -distance

        self.x += distance * math.cos(self._yaw + math.pi / 2)
        self.z += distance * math.sin(self._yaw + math.pi / 2)

    def turn(self, seconds: float, direction: str = "left") -> None:
        """
        Rotate about the up axis.

        Args:
            seconds: Elapsed time; angle is seconds * angular_speed
            direction: "left" (yaw increases) or "right"

        Raises:
            ValueError: If direction is not recognised
        """
        if direction not in TURN_DIRECTIONS:
            raise ValueError(f"Unknown turn direction: {direction!r}")

        angle = seconds * self.angular_speed
        if direction == "right":
            angle = -angle

        self._yaw = floored_mod(self._yaw + angle, TWO_PI)
        # floored_mod can round up to exactly 2*pi for tiny negative inputs
        if self._yaw >= TWO_PI:
            self._yaw = 0.0
        self._update_transform()

    # ── Transforms ─────────────────────────────────────────────

    def transform(self, point: Point) -> Point:
        """Map a world-space point to camera space (translate, then rotate by -yaw)."""
        dx = point.x - self.x
        dy = point.y - self.y
        dz = point.z - self.z
        c, s = self._cos, self._sin
        return Point(dx * c - dz * s, dy, dz * c + dx * s)

    def transform_array(self, coords: np.ndarray) -> np.ndarray:
        """Vectorised transform() for an (N, 3) array of world coordinates."""
        d = np.asarray(coords, dtype=float) - np.array([self.x, self.y, self.z])
        c, s = self._cos, self._sin
        out = np.empty_like(d)
        out[:, 0] = d[:, 0] * c - d[:, 2] * s
        out[:, 1] = d[:, 1]
        out[:, 2] = d[:, 2] * c + d[:, 0] * s
        return out

    def to_world(self, point: Point) -> Point:
        """Inverse of transform(): map a camera-space point back to world space."""
        c, s = self._cos, self._sin
        dx = point.x * c + point.z * s
        dz = point.z * c - point.x * s
        return Point(dx + self.x, point.y + self.y, dz + self.z)

    def __repr__(self):
        return (f"Camera(x={self.x:.1f}, y={self.y:.1f}, z={self.z:.1f}, "
                f"yaw={self._yaw:.3f})")
