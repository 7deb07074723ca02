#!/usr/bin/env python3
"""
Headless flythrough example.

This example demonstrates:
1. Running WarsectorApp without a visible window (SDL dummy video driver)
2. Driving the camera by simulating held arrow keys
3. Saving the final frame as a PNG

Usage:
    python examples/headless_flythrough.py [output.png]
"""

import os
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from warsector.app import WarsectorApp
from warsector.utils.logging import setup_logging

FPS = 60


def hold(app: WarsectorApp, key: int, seconds: float, start: float) -> float:
    """Hold key for the given simulated time; returns the new clock value."""
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))
    now = start
    for _ in range(int(seconds * FPS)):
        now += 1.0 / FPS
        app.tick(now)
    app.handle_event(pygame.event.Event(pygame.KEYUP, key=key))
    return now


def main():
    output = sys.argv[1] if len(sys.argv) > 1 else "flythrough.png"
    setup_logging()

    app = WarsectorApp()
    if not app.init_display():
        sys.exit(1)

    now = 0.0
    app.tick(now)
    now = hold(app, pygame.K_UP, 1.0, now)       # 1000 units toward the cube
    now = hold(app, pygame.K_LEFT, 0.25, now)    # 15 degrees left
    print(f"Camera after flythrough: {app.camera}")

    pygame.image.save(app.renderer.screen, output)
    print(f"Saved {output}")
    app.shutdown()


if __name__ == "__main__":
    main()
