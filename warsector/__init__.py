"""
Warsector - real-time first-person wireframe renderer.

This package provides:
- Camera: position + yaw, world->camera transform, move/turn mutators
- Projector: perspective projection with a single near-plane test
- Shape/Scene: rigid wireframe polyhedra, loadable from YAML
- WarsectorApp: pygame render loop driven by held arrow keys
"""

from warsector.core.point import Point
from warsector.core.camera import Camera
from warsector.core.projector import Projector
from warsector.core.shape import Edge, Shape
from warsector.core.scene import Scene
from warsector.config import Config

__version__ = "1.0.0"
__all__ = [
    "Point",
    "Camera",
    "Projector",
    "Edge",
    "Shape",
    "Scene",
    "Config",
]
