"""
Perspective projection from camera space to screen pixels.

The screen origin sits at the horizontal center and two-thirds of the way
down, which puts the horizon below the middle of the window.
"""

from typing import Optional, Tuple

import numpy as np

from warsector.core.point import Point, ScreenPoint

# SDL takes pixel coordinates as C ints; points just past the near plane
# project arbitrarily far out.
SCREEN_LIMIT = 1_000_000


class Projector:
    """
    Pinhole projection onto a width x height surface.

    Depth is camera-space z. Points with depth <= 0 are behind (or on) the
    camera plane and have no projection.
    """

    __slots__ = ('width', 'height', 'focal_length', 'origin_x', 'origin_y')

    def __init__(self, width: int, height: int,
                 focal_length: Optional[float] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Screen size must be positive, got {width}x{height}")
        if focal_length is not None and focal_length <= 0:
            raise ValueError(f"Focal length must be positive, got {focal_length}")
        self.width = width
        self.height = height
        self.focal_length = float(focal_length) if focal_length is not None else width / 2
        self.origin_x = width / 2
        self.origin_y = height * 2 / 3

    @property
    def horizon_y(self) -> float:
        """Screen row of the horizon (the projection's vertical origin)."""
        return self.origin_y

    def project(self, point: Point) -> Optional[ScreenPoint]:
        """Project a camera-space point, or return None when it is behind the camera."""
        screen, visible = self.project_array(np.array([[point.x, point.y, point.z]]))
        if not visible[0]:
            return None
        return (float(screen[0, 0]), float(screen[0, 1]))

    def project_array(self, coords: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Vectorised projection for an (N, 3) camera-space array.

        Returns:
            (screen, visible): (N, 2) screen coordinates and an (N,) bool mask.
            Rows where visible is False hold NaN. Visible rows are finite and
            within +/-SCREEN_LIMIT.
        """
        coords = np.asarray(coords, dtype=float)
        depth = coords[:, 2]
        visible = depth > 0

        scale = np.full(depth.shape, np.nan)
        offsets = np.empty((coords.shape[0], 2))
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            # Depths just above zero overflow the scale to inf
            scale[visible] = self.focal_length / depth[visible]
            offsets[:, 0] = coords[:, 0] * scale
            offsets[:, 1] = coords[:, 1] * scale

        # 0 * inf: a point on the view axis stays on it
        offsets[visible & np.isnan(offsets[:, 0]), 0] = 0.0
        offsets[visible & np.isnan(offsets[:, 1]), 1] = 0.0

        screen = np.empty_like(offsets)
        screen[:, 0] = self.origin_x + offsets[:, 0]
        screen[:, 1] = self.origin_y - offsets[:, 1]
        np.clip(screen, -SCREEN_LIMIT, SCREEN_LIMIT, out=screen)
        return screen, visible
