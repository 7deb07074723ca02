"""
Pygame software renderer implementation.
"""

import logging
from typing import List, Optional, Tuple

import pygame

from warsector.rendering.renderer.base import Color, PixelPoint

logger = logging.getLogger(__name__)

WINDOW_CAPTION = "Warsector"


class PygameRenderer:
    """Default renderer: a pygame window (or fullscreen surface)."""

    def __init__(self):
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.width: int = 0
        self.height: int = 0
        self._fonts: dict = {}  # font_size -> pygame.font.Font

    # ── Lifecycle ──────────────────────────────────────────────

    def init(self, size: Tuple[int, int], fullscreen: bool = False) -> None:
        """
        Initialize pygame and open the display.

        Args:
            size: (width, height) of the window; ignored when fullscreen
            fullscreen: Use the desktop resolution in fullscreen mode
        """
        pygame.init()

        sdl_version = pygame.get_sdl_version()
        logger.info(f"SDL version {sdl_version[0]}.{sdl_version[1]}.{sdl_version[2]} detected")

        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_CAPTION)

        self.clock = pygame.time.Clock()
        self.width, self.height = self.screen.get_size()
        logger.info(f"Display initialized: {self.width}x{self.height}"
                    f"{' (fullscreen)' if fullscreen else ''}")

    def get_size(self) -> Tuple[int, int]:
        """Get screen dimensions."""
        return (self.width, self.height)

    def clear(self, color: Color) -> None:
        """Clear screen with specified color."""
        if self.screen:
            self.screen.fill(color)

    def flip(self) -> None:
        """Update display."""
        pygame.display.flip()

    def tick(self, fps: int) -> float:
        """Tick clock and return time since last tick."""
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 0.0

    def get_events(self) -> List:
        """Get pygame events (for input handling)."""
        return pygame.event.get()

    def quit(self) -> None:
        """Cleanup and quit pygame."""
        pygame.quit()

    # ── Primitives ─────────────────────────────────────────────

    def draw_line(self, start: PixelPoint, end: PixelPoint,
                  color: Color, width: int = 1) -> None:
        if self.screen:
            pygame.draw.line(self.screen, color, start, end, width)

    def draw_lines(self, points: List[PixelPoint], color: Color,
                   width: int = 1, closed: bool = False) -> None:
        if self.screen and len(points) >= 2:
            pygame.draw.lines(self.screen, color, closed, points, width)

    def draw_lines_batch(self, lines: List[Tuple[PixelPoint, PixelPoint]],
                         color: Color, width: int = 1) -> None:
        """Draw independent segments with one color (direct draws, no blit)."""
        if not self.screen or not lines:
            return
        draw_line = pygame.draw.line
        screen = self.screen
        for start, end in lines:
            draw_line(screen, color, start, end, width)

    def draw_text(self, text: str, position: PixelPoint, color: Color,
                  font_size: int = 18) -> None:
        """Draw text with its top-left corner at position."""
        if not self.screen:
            return

        if font_size not in self._fonts:
            self._fonts[font_size] = pygame.font.SysFont("monospace", font_size)

        text_surface = self._fonts[font_size].render(text, True, color)
        self.screen.blit(text_surface, text_surface.get_rect(topleft=position))
