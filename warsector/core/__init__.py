"""Core geometry for warsector: points, camera, projection, shapes."""

from warsector.core.point import Point
from warsector.core.camera import Camera
from warsector.core.projector import Projector
from warsector.core.shape import Edge, Shape
from warsector.core.scene import Scene

__all__ = [
    "Point",
    "Camera",
    "Projector",
    "Edge",
    "Shape",
    "Scene",
]
