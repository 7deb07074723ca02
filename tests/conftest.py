import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from warsector.config import Config
from warsector.core.camera import Camera
from warsector.core.projector import Projector

WIDTH = 800
HEIGHT = 600


class RecordingRenderer:
    """In-memory Renderer that records every draw call."""

    def __init__(self, size=(WIDTH, HEIGHT)):
        self.size = size
        self.initialized = False
        self.closed = False
        self.events = []
        self.calls = []

    def init(self, size, fullscreen=False):
        self.initialized = True

    def get_size(self):
        return self.size

    def clear(self, color):
        self.calls.append(("clear", color))

    def flip(self):
        self.calls.append(("flip",))

    def tick(self, fps):
        return 0.0

    def get_events(self):
        events, self.events = self.events, []
        return events

    def quit(self):
        self.closed = True

    def draw_line(self, start, end, color, width=1):
        self.calls.append(("line", start, end, color, width))

    def draw_lines(self, points, color, width=1, closed=False):
        self.calls.append(("lines", list(points), color, width))

    def draw_lines_batch(self, lines, color, width=1):
        self.calls.append(("batch", list(lines), color, width))

    def draw_text(self, text, position, color, font_size=18):
        self.calls.append(("text", text, position, color))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]

    def reset(self):
        self.calls = []


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def projector():
    return Projector(WIDTH, HEIGHT)


@pytest.fixture
def camera():
    return Camera(0.0, 0.0, 0.0, 0.0)


@pytest.fixture
def config():
    return Config()
