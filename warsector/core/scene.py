"""
Scene: the flat list of shapes drawn every frame.

The built-in scene is a cube straight ahead of the start position and a
pyramid far off to the left. Scenes can also be loaded from YAML:

    shapes:
      - name: cube
        vertices: [[200, 400, 2000], [600, 400, 2000], ...]
        edges: [[0, [1, 2, 4]], ...]
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional

import yaml

from warsector.core.shape import Shape

logger = logging.getLogger(__name__)


CUBE = {
    'name': 'cube',
    'vertices': [[200, 400, 2000], [600, 400, 2000],
                 [200, 0, 2000], [600, 0, 2000],
                 [200, 400, 1600], [600, 400, 1600],
                 [200, 0, 1600], [600, 0, 1600]],
    'edges': [[0, [1, 2, 4]],
              [3, [1, 2, 7]],
              [5, [1, 4, 7]],
              [6, [2, 4, 7]]],
}

PYRAMID = {
    'name': 'pyramid',
    'vertices': [[-5300, 400, 6200],
                 [-5500, 0, 6400], [-5100, 0, 6400],
                 [-5500, 0, 6000], [-5100, 0, 6000]],
    'edges': [[0, [1, 2, 3, 4]],
              [1, [2, 3]],
              [4, [2, 3]]],
}


class Scene:
    """Ordered, fixed collection of shapes."""

    def __init__(self, shapes: Optional[List[Shape]] = None):
        self._shapes: List[Shape] = list(shapes or [])

    @property
    def shapes(self) -> List[Shape]:
        return list(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def to_dict(self) -> dict:
        return {'shapes': [shape.to_dict() for shape in self._shapes]}

    @classmethod
    def from_dict(cls, data: dict) -> "Scene":
        """Build from {'shapes': [...]}. Raises ValueError on malformed data."""
        if not isinstance(data, dict) or not isinstance(data.get('shapes'), list):
            raise ValueError("Scene data must be a mapping with a 'shapes' list")
        return cls([Shape.from_dict(item) for item in data['shapes']])

    @classmethod
    def default(cls) -> "Scene":
        """The built-in cube + pyramid scene."""
        return cls.from_dict({'shapes': [CUBE, PYRAMID]})

    @classmethod
    def load(cls, path) -> "Scene":
        """
        Load a scene from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file content is not a valid scene
        """
        scene_file = Path(path)
        with open(scene_file, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid scene YAML in {scene_file}: {e}") from e
        scene = cls.from_dict(data)
        logger.info(f"Scene loaded from {scene_file}: {len(scene)} shapes")
        return scene

    def dump(self) -> str:
        """Serialize to a YAML document."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=None)
