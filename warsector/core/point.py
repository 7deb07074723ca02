"""
Point primitive.

A Point is a 3D coordinate. World-space points belong to a Shape and never
move; the same type is returned for camera-space results of
Camera.transform(). A world point also carries the screen position it
projected to in the current frame (or None when it is behind the camera).
"""

from typing import Iterator, Optional, Tuple

ScreenPoint = Tuple[float, float]


class Point:
    """Immutable 3D coordinate with a per-frame projection cache."""

    __slots__ = ('_x', '_y', '_z', 'projection')

    def __init__(self, x: float, y: float, z: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self.projection: Optional[ScreenPoint] = None

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y
        yield self._z

    def __repr__(self):
        return f"Point({self._x:.2f}, {self._y:.2f}, {self._z:.2f})"

    def to_list(self) -> list:
        """Coordinates as a plain list (for YAML serialization)."""
        return [self._x, self._y, self._z]
