"""
Wireframe drawing of scene shapes.
"""

from typing import List, Tuple

from warsector.core.camera import Camera
from warsector.core.projector import SCREEN_LIMIT, Projector
from warsector.core.shape import Shape
from warsector.rendering.renderer.base import Color, PixelPoint, Renderer


def to_pixel(point: Tuple[float, float]) -> PixelPoint:
    """Round a screen point to pixels, clamped to the drawable range."""
    x, y = point
    return (max(-SCREEN_LIMIT, min(SCREEN_LIMIT, round(x))),
            max(-SCREEN_LIMIT, min(SCREEN_LIMIT, round(y))))


def shape_lines(shape: Shape, camera: Camera,
                projector: Projector) -> List[Tuple[PixelPoint, PixelPoint]]:
    """Project shape for this frame and return its visible edges as pixel segments."""
    shape.project(camera, projector)
    return [(to_pixel(start), to_pixel(end)) for start, end in shape.segments()]


def draw_shape(renderer: Renderer, shape: Shape, camera: Camera,
               projector: Projector, color: Color, width: int = 2) -> int:
    """
    Draw one shape as a wireframe.

    Edges with an endpoint behind the camera are skipped.

    Returns:
        Number of edges drawn
    """
    lines = shape_lines(shape, camera, projector)
    if lines:
        renderer.draw_lines_batch(lines, color, width)
    return len(lines)
