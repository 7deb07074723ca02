"""
Renderer protocol.

Isolates drawing behind a small interface so the render loop can run
against pygame or any other backend (tests use an in-memory recorder).
"""

from typing import List, Protocol, Tuple

Color = Tuple[int, int, int]
PixelPoint = Tuple[int, int]


class Renderer(Protocol):
    """Protocol for rendering backends."""

    # ── Lifecycle ──────────────────────────────────────────────

    def init(self, size: Tuple[int, int], fullscreen: bool = False) -> None:
        """Open the drawing surface at the requested size."""
        ...

    def get_size(self) -> Tuple[int, int]:
        """Get surface dimensions (width, height)."""
        ...

    def clear(self, color: Color) -> None:
        """Fill the whole surface with color."""
        ...

    def flip(self) -> None:
        """Present the finished frame."""
        ...

    def tick(self, fps: int) -> float:
        """Wait for the next frame slot; return seconds since the last tick."""
        ...

    def get_events(self) -> List:
        """Drain pending input events."""
        ...

    def quit(self) -> None:
        """Cleanup and close the surface."""
        ...

    # ── Primitives ─────────────────────────────────────────────

    def draw_line(self, start: PixelPoint, end: PixelPoint,
                  color: Color, width: int = 1) -> None:
        """Draw a single line segment."""
        ...

    def draw_lines(self, points: List[PixelPoint], color: Color,
                   width: int = 1, closed: bool = False) -> None:
        """Draw connected line segments."""
        ...

    def draw_lines_batch(self, lines: List[Tuple[PixelPoint, PixelPoint]],
                         color: Color, width: int = 1) -> None:
        """Draw many independent segments sharing one stroke style."""
        ...

    def draw_text(self, text: str, position: PixelPoint, color: Color,
                  font_size: int = 18) -> None:
        """Draw text with its top-left corner at position."""
        ...
