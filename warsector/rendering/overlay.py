"""
Static screen decorations drawn under the scene every frame.

- Horizon: full-width line through the projector's horizon row
- HUD: camera position and compass heading, top-left
- Reticle: fixed gun-sight lines around the screen center
"""

import math

from warsector.config import (
    DEFAULT_FONT_SIZE, DEFAULT_HORIZON_COLOR, DEFAULT_HUD_COLOR, DEFAULT_LINE_WIDTH,
)
from warsector.core.camera import Camera
from warsector.core.projector import Projector
from warsector.rendering.renderer.base import Color, Renderer

HUD_POSITION = (32, 32)


def hud_text(camera: Camera) -> str:
    """One-line HUD: floored x/z position and heading in degrees."""
    return (f"x: {math.floor(camera.x)}  z: {math.floor(camera.z)}  "
            f"yaw: {camera.heading_degrees}°")


class Overlay:
    """Horizon, HUD and reticle layer."""

    def __init__(self,
                 horizon_color: Color = DEFAULT_HORIZON_COLOR,
                 hud_color: Color = DEFAULT_HUD_COLOR,
                 line_width: int = DEFAULT_LINE_WIDTH,
                 font_size: int = DEFAULT_FONT_SIZE):
        self.horizon_color = horizon_color
        self.hud_color = hud_color
        self.line_width = line_width
        self.font_size = font_size

    def draw(self, renderer: Renderer, camera: Camera, projector: Projector) -> None:
        """Draw the layer for a surface of the projector's size."""
        width, height = projector.width, projector.height
        self._draw_horizon(renderer, width, projector.horizon_y)
        renderer.draw_text(hud_text(camera), HUD_POSITION, self.hud_color, self.font_size)
        self._draw_reticle(renderer, width, height)

    def _draw_horizon(self, renderer: Renderer, w: int, horizon_y: float) -> None:
        y = round(horizon_y)
        renderer.draw_line((0, y), (w, y), self.horizon_color, self.line_width)

    def _draw_reticle(self, renderer: Renderer, w: int, h: int) -> None:
        """Upper sight (above the horizon) and lower sight (below it)."""
        cx = round(w / 2)
        left, right = round(w * 3 / 8), round(w * 5 / 8)
        color, width = self.horizon_color, self.line_width

        renderer.draw_line((cx, round(h / 3)), (cx, round(h / 2)), color, width)
        renderer.draw_lines([(left, round(h * 7 / 12)), (left, round(h / 2)),
                             (right, round(h / 2)), (right, round(h * 7 / 12))],
                            color, width)

        renderer.draw_line((cx, h), (cx, round(h * 5 / 6)), color, width)
        renderer.draw_lines([(left, round(h * 3 / 4)), (left, round(h * 5 / 6)),
                             (right, round(h * 5 / 6)), (right, round(h * 3 / 4))],
                            color, width)
