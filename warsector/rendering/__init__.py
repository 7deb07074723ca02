"""Rendering components for warsector."""

from warsector.rendering.renderer import Renderer, PygameRenderer
from warsector.rendering.wireframe import draw_shape
from warsector.rendering.overlay import Overlay

__all__ = [
    "Renderer",
    "PygameRenderer",
    "draw_shape",
    "Overlay",
]
