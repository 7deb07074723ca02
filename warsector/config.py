"""
Configuration for warsector.

Loaded from an optional YAML file with three sections plus a scene path:

    display:
      width: 800
      height: 600
      update_rate: 60
      fullscreen: false
      background_color: "#000000"
      font_size: 18
    camera:
      x: 0
      y: 200
      z: 0
      yaw: 0
      speed: 1000            # world units / second
      angular_speed: 1.047   # radians / second
      focal_length: null     # pixels; null = width / 2
    style:
      shape_color: "#00ff22"
      horizon_color: "#008811"
      hud_color: "#ff0022"
      line_width: 2
    scene: scenes/arena.yaml  # relative to this file

Every key is optional; missing keys keep their defaults.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import yaml

from warsector.core.camera import DEFAULT_ANGULAR_SPEED, DEFAULT_SPEED
from warsector.utils.color import parse_color

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_UPDATE_RATE = 60  # Hz
DEFAULT_BACKGROUND_COLOR = (0, 0, 0)
DEFAULT_FONT_SIZE = 18
DEFAULT_CAMERA_POSITION = (0.0, 200.0, 0.0)
DEFAULT_SHAPE_COLOR = (0, 255, 34)
DEFAULT_HORIZON_COLOR = (0, 136, 17)
DEFAULT_HUD_COLOR = (255, 0, 34)
DEFAULT_LINE_WIDTH = 2


def _positive(name: str, value, cast=float):
    try:
        value = cast(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass
class DisplayConfig:
    """Window and frame settings."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    update_rate: int = DEFAULT_UPDATE_RATE
    fullscreen: bool = False
    background_color: Tuple[int, int, int] = DEFAULT_BACKGROUND_COLOR
    font_size: int = DEFAULT_FONT_SIZE

    @classmethod
    def from_dict(cls, data: dict) -> "DisplayConfig":
        return cls(
            width=_positive("display.width", data.get('width', DEFAULT_WIDTH), int),
            height=_positive("display.height", data.get('height', DEFAULT_HEIGHT), int),
            update_rate=_positive("display.update_rate",
                                  data.get('update_rate', DEFAULT_UPDATE_RATE), int),
            fullscreen=bool(data.get('fullscreen', False)),
            background_color=parse_color(data.get('background_color',
                                                  list(DEFAULT_BACKGROUND_COLOR))),
            font_size=_positive("display.font_size",
                                data.get('font_size', DEFAULT_FONT_SIZE), int),
        )


@dataclass
class CameraConfig:
    """Initial pose and fixed motion/projection constants."""
    x: float = DEFAULT_CAMERA_POSITION[0]
    y: float = DEFAULT_CAMERA_POSITION[1]
    z: float = DEFAULT_CAMERA_POSITION[2]
    yaw: float = 0.0
    speed: float = DEFAULT_SPEED
    angular_speed: float = DEFAULT_ANGULAR_SPEED
    focal_length: Optional[float] = None  # None = half the screen width

    @classmethod
    def from_dict(cls, data: dict) -> "CameraConfig":
        focal_length = data.get('focal_length')
        if focal_length is not None:
            focal_length = _positive("camera.focal_length", focal_length)
        try:
            x, y, z, yaw = (float(data.get(k, d)) for k, d in
                            (('x', DEFAULT_CAMERA_POSITION[0]),
                             ('y', DEFAULT_CAMERA_POSITION[1]),
                             ('z', DEFAULT_CAMERA_POSITION[2]),
                             ('yaw', 0.0)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"camera pose must be numeric: {e}") from e
        return cls(
            x=x, y=y, z=z, yaw=yaw,
            speed=_positive("camera.speed", data.get('speed', DEFAULT_SPEED)),
            angular_speed=_positive("camera.angular_speed",
                                    data.get('angular_speed', DEFAULT_ANGULAR_SPEED)),
            focal_length=focal_length,
        )


@dataclass
class StyleConfig:
    """Stroke colors and widths."""
    shape_color: Tuple[int, int, int] = DEFAULT_SHAPE_COLOR
    horizon_color: Tuple[int, int, int] = DEFAULT_HORIZON_COLOR
    hud_color: Tuple[int, int, int] = DEFAULT_HUD_COLOR
    line_width: int = DEFAULT_LINE_WIDTH

    @classmethod
    def from_dict(cls, data: dict) -> "StyleConfig":
        return cls(
            shape_color=parse_color(data.get('shape_color', list(DEFAULT_SHAPE_COLOR))),
            horizon_color=parse_color(data.get('horizon_color', list(DEFAULT_HORIZON_COLOR))),
            hud_color=parse_color(data.get('hud_color', list(DEFAULT_HUD_COLOR))),
            line_width=_positive("style.line_width",
                                 data.get('line_width', DEFAULT_LINE_WIDTH), int),
        )


@dataclass
class Config:
    """Complete application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    camera: CameraConfig = field(default_factory=CameraConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    scene_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict], base_dir: Optional[Path] = None) -> "Config":
        """
        Build from parsed YAML. Raises ValueError on malformed values.

        Args:
            data: Parsed mapping (None or empty = all defaults)
            base_dir: Directory that a relative scene path is resolved against
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("Config root must be a mapping")
        for section in ('display', 'camera', 'style'):
            if not isinstance(data.get(section, {}), dict):
                raise ValueError(f"Config section '{section}' must be a mapping")

        scene_path = data.get('scene')
        if scene_path is not None:
            scene_path = Path(scene_path)
            if base_dir is not None and not scene_path.is_absolute():
                scene_path = base_dir / scene_path
            scene_path = str(scene_path)

        return cls(
            display=DisplayConfig.from_dict(data.get('display', {})),
            camera=CameraConfig.from_dict(data.get('camera', {})),
            style=StyleConfig.from_dict(data.get('style', {})),
            scene_path=scene_path,
        )

    @classmethod
    def load(cls, path) -> "Config":
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the content is malformed
        """
        config_file = Path(path)
        with open(config_file, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config YAML in {config_file}: {e}") from e
        config = cls.from_dict(data, base_dir=config_file.parent)
        logger.info(f"Config loaded from {config_file}: "
                    f"{config.display.width}x{config.display.height} "
                    f"@ {config.display.update_rate}Hz")
        return config
