"""Renderer protocol and implementations."""

from warsector.rendering.renderer.base import Renderer
from warsector.rendering.renderer.pygame_renderer import PygameRenderer

__all__ = [
    "Renderer",
    "PygameRenderer",
]
