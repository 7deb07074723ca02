"""
Rigid wireframe shapes.

A Shape is a fixed list of world-space vertices plus edges between them.
Topology is written as adjacency lists, one entry per start vertex:

    edges = [[0, [1, 2, 4]],   # 0-1, 0-2, 0-4
             [3, [1, 2, 7]]]

Plain [from, to] pairs are accepted as well.
"""

import itertools
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from warsector.core.camera import Camera
from warsector.core.point import Point, ScreenPoint
from warsector.core.projector import Projector

Segment = Tuple[ScreenPoint, ScreenPoint]


@dataclass(frozen=True)
class Edge:
    """Ordered pair of vertices of the owning shape (held by reference)."""
    start_index: int
    end_index: int
    start: Point
    end: Point

    def segment(self) -> Optional[Segment]:
        """Screen segment for this frame, or None when either end is not projected."""
        if self.start.projection is None or self.end.projection is None:
            return None
        return (self.start.projection, self.end.projection)


def _parse_vertex(index: int, raw) -> Point:
    try:
        coords = [float(c) for c in raw]
    except (TypeError, ValueError):
        raise ValueError(f"Vertex {index} is not a coordinate list: {raw!r}")
    if len(coords) != 3:
        raise ValueError(f"Vertex {index} must have 3 coordinates, got {len(coords)}")
    return Point(*coords)


def _expand_edges(edges) -> List[Tuple[int, int]]:
    """Flatten adjacency entries and plain pairs into (from, to) index pairs."""
    pairs = []
    for entry in edges:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"Edge entry must be [from, to] or [from, [to, ...]]: {entry!r}")
        start, targets = entry
        if isinstance(targets, (list, tuple)):
            pairs.extend((start, end) for end in targets)
        else:
            pairs.append((start, targets))
    return pairs


class Shape:
    """
    Immutable polyhedron: vertices + edges.

    Malformed topology (an edge naming a vertex that does not exist) raises
    ValueError here, at construction, never during rendering.
    """

    def __init__(self, vertices: Sequence[Sequence[float]],
                 edges: Sequence = (), name: str = "shape"):
        self.name = name
        self._vertices: Tuple[Point, ...] = tuple(
            _parse_vertex(i, v) for i, v in enumerate(vertices))
        count = len(self._vertices)

        built = []
        for start, end in _expand_edges(edges):
            for index in (start, end):
                if isinstance(index, bool) or not isinstance(index, int):
                    raise ValueError(f"Shape '{name}': edge index {index!r} is not an integer")
                if not 0 <= index < count:
                    raise ValueError(
                        f"Shape '{name}': edge references vertex {index}, "
                        f"but only {count} vertices exist")
            built.append(Edge(start, end, self._vertices[start], self._vertices[end]))
        self._edges: Tuple[Edge, ...] = tuple(built)

        coords = np.array([list(p) for p in self._vertices], dtype=float).reshape(-1, 3)
        coords.setflags(write=False)
        self._coords = coords

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def coords(self) -> np.ndarray:
        """Read-only (N, 3) array of world coordinates."""
        return self._coords

    def project(self, camera: Camera, projector: Projector) -> int:
        """
        Project every vertex through the camera, caching the result on it.

        Returns:
            Number of vertices that projected (in front of the camera)
        """
        if not self._vertices:
            return 0
        screen, visible = projector.project_array(camera.transform_array(self._coords))
        for vertex, (sx, sy), ok in zip(self._vertices, screen.tolist(), visible.tolist()):
            vertex.projection = (sx, sy) if ok else None
        return int(visible.sum())

    def segments(self) -> List[Segment]:
        """Screen segments of all edges whose endpoints both projected this frame."""
        result = []
        for edge in self._edges:
            seg = edge.segment()
            if seg is not None:
                result.append(seg)
        return result

    def to_dict(self) -> dict:
        """Serialize with edges grouped back into adjacency lists."""
        edges = [[start, [e.end_index for e in group]]
                 for start, group in itertools.groupby(self._edges, key=lambda e: e.start_index)]
        return {
            'name': self.name,
            'vertices': [v.to_list() for v in self._vertices],
            'edges': edges,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Shape":
        """Create from a dict with 'vertices', 'edges' and optional 'name'."""
        if 'vertices' not in data:
            raise ValueError(f"Shape definition is missing 'vertices': {data!r}")
        return cls(data['vertices'], data.get('edges', []), name=data.get('name', 'shape'))

    def __repr__(self):
        return f"Shape({self.name!r}, {len(self._vertices)} vertices, {len(self._edges)} edges)"
