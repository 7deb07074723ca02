#!/usr/bin/env python3
"""
Warsector - first-person wireframe renderer.

This application provides:
1. A movable camera (arrow keys: turn left/right, move forward/backward)
2. Perspective projection of a fixed scene of wireframe polyhedra
3. Horizon, HUD and reticle overlay
4. YAML configuration and scene files
"""

import os
import sys
import time
import signal
import argparse
from typing import Callable, Dict, Optional

import pygame

from warsector.config import Config
from warsector.core.camera import Camera
from warsector.core.projector import Projector
from warsector.core.scene import Scene
from warsector.input import Control, HeldKeys
from warsector.rendering.overlay import Overlay
from warsector.rendering.renderer import Renderer, PygameRenderer
from warsector.rendering.wireframe import draw_shape
from warsector.utils.logging import setup_logging, get_logger
from warsector.utils.profiler import FrameProfiler


CAMERA_ACTIONS: Dict[Control, Callable[[Camera, float], None]] = {
    Control.TURN_LEFT: lambda camera, seconds: camera.turn(seconds, "left"),
    Control.TURN_RIGHT: lambda camera, seconds: camera.turn(seconds, "right"),
    Control.MOVE_FORWARD: lambda camera, seconds: camera.move(seconds, "forwards"),
    Control.MOVE_BACKWARD: lambda camera, seconds: camera.move(seconds, "backwards"),
}


class WarsectorApp:
    """
    Application state and render loop.

    Owns everything that changes while running: the camera, the held-key
    set, the renderer and the timestamp of the previous tick. Everything runs
    on one thread: events are drained at the top of each frame, then tick()
    advances the camera and draws.
    """

    def __init__(self, config: Optional[Config] = None,
                 scene: Optional[Scene] = None,
                 renderer: Optional[Renderer] = None):
        """
        Initialize the application.

        Args:
            config: Application configuration (defaults if None)
            scene: Shapes to draw (built-in scene if None)
            renderer: Drawing backend (PygameRenderer created in init_display if None)
        """
        self.config = config or Config()
        self.scene = scene if scene is not None else Scene.default()
        self.renderer: Optional[Renderer] = renderer
        self.projector: Optional[Projector] = None

        cam = self.config.camera
        self.camera = Camera(cam.x, cam.y, cam.z, cam.yaw,
                             speed=cam.speed, angular_speed=cam.angular_speed)
        self.keys = HeldKeys()

        style = self.config.style
        self.overlay = Overlay(horizon_color=style.horizon_color,
                               hud_color=style.hud_color,
                               line_width=style.line_width,
                               font_size=self.config.display.font_size)

        # Per-tick state
        self.last_time: Optional[float] = None
        self.frame_count = 0
        self.running = True

        # Profiler (None = disabled, set via enable_profiling())
        self._profiler: Optional[FrameProfiler] = None

        self.logger = get_logger(__name__)

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals. Second signal forces immediate exit."""
        signal_names = {signal.SIGTERM: "SIGTERM", signal.SIGINT: "SIGINT (Ctrl+C)"}
        signal_name = signal_names.get(signum, f"signal {signum}")

        if not self.running:
            self.logger.info(f"Force exit: Received {signal_name} during shutdown")
            os._exit(1)

        self.logger.info(f"Shutdown initiated: Received {signal_name}")
        self.running = False

    def enable_profiling(self, interval: float = 5.0):
        """Enable frame profiling with periodic log output.

        Args:
            interval: Seconds between profiling summary logs.
        """
        self._profiler = FrameProfiler(interval=interval)
        self.logger.info(f"Profiling enabled (report every {interval}s)")

    def init_display(self) -> bool:
        """
        Open the drawing surface and build the projector for its size.

        Returns:
            True if successful
        """
        display = self.config.display
        try:
            if self.renderer is None:
                self.logger.info("Using pygame software renderer")
                self.renderer = PygameRenderer()

            self.renderer.init((display.width, display.height),
                               fullscreen=display.fullscreen)

            width, height = self.renderer.get_size()
            self.projector = Projector(width, height, self.config.camera.focal_length)
            self.logger.info(f"Projection: {width}x{height}, "
                             f"focal length {self.projector.focal_length:.0f}px")
            return True

        except (pygame.error, ValueError) as e:
            self.logger.error(f"Failed to initialize display: {e}")
            return False

    # ── Input ──────────────────────────────────────────────────

    def handle_event(self, event) -> None:
        """Apply one pygame event to the held-key set / running flag."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            else:
                self.keys.press(event.key)
        elif event.type == pygame.KEYUP:
            self.keys.release(event.key)

    def process_events(self) -> None:
        for event in self.renderer.get_events():
            self.handle_event(event)

    # ── Frame ──────────────────────────────────────────────────

    def update(self, seconds: float) -> None:
        """Apply every held control to the camera once."""
        for control in self.keys.active_controls():
            CAMERA_ACTIONS[control](self.camera, seconds)

    def tick(self, now: float) -> float:
        """
        Advance one frame.

        Args:
            now: Current time in seconds (monotonic)

        Returns:
            Seconds elapsed since the previous tick (0 on the first tick)
        """
        seconds = 0.0 if self.last_time is None else now - self.last_time
        self.last_time = now

        self.update(seconds)
        self.render_frame()
        self.frame_count += 1
        return seconds

    def render_frame(self):
        """Render a single frame."""
        if not self.renderer or not self.projector:
            return

        p = self._profiler
        if p:
            p.begin_frame()

        self.renderer.clear(self.config.display.background_color)
        if p:
            p.mark("clear")

        self.overlay.draw(self.renderer, self.camera, self.projector)
        if p:
            p.mark("overlay")

        style = self.config.style
        edges_drawn = 0
        for shape in self.scene:
            edges_drawn += draw_shape(self.renderer, shape, self.camera, self.projector,
                                      style.shape_color, style.line_width)
        if p:
            p.mark("shapes")

        self.renderer.flip()

        if p:
            p.mark("flip")
            if p.frame_count % 60 == 0:
                self.logger.debug(f"Frame {self.frame_count}: {edges_drawn} edges, {self.camera}")
            p.end_frame()

    def run(self):
        """Main loop: runs until the window closes, Escape, or a signal."""
        previous_handlers = {
            signum: signal.signal(signum, self._signal_handler)
            for signum in (signal.SIGTERM, signal.SIGINT)
        }

        self.logger.info(f"Starting render loop ({len(self.scene)} shapes)...")

        try:
            while self.running:
                self.process_events()
                self.tick(time.perf_counter())
                self.renderer.tick(self.config.display.update_rate)

        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        except Exception as e:
            self.logger.error(f"Render loop error: {e}")
            raise
        finally:
            self.shutdown()
            for signum, handler in previous_handlers.items():
                signal.signal(signum, handler)

    def shutdown(self):
        """Clean shutdown."""
        self.logger.info("Shutting down...")
        self.running = False
        self.keys.clear()

        if self.renderer:
            try:
                self.renderer.quit()
            except pygame.error:
                pass

        self.logger.info(f"Shutdown complete after {self.frame_count} frames")


def main():
    """Entry point for the renderer."""
    parser = argparse.ArgumentParser(
        description="Warsector - first-person wireframe renderer"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration YAML"
    )
    parser.add_argument(
        "-s", "--scene",
        help="Path to scene YAML (default: built-in cube and pyramid)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--width",
        type=int,
        help="Window width in pixels"
    )
    parser.add_argument(
        "--height",
        type=int,
        help="Window height in pixels"
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        default=False,
        help="Use the desktop resolution in fullscreen mode"
    )
    parser.add_argument(
        "--dump-scene",
        action="store_true",
        help="Print the active scene as YAML and exit"
    )
    parser.add_argument(
        "--profile",
        nargs="?",
        const=5.0,
        type=float,
        metavar="INTERVAL",
        help="Enable frame profiling (optional: report interval in seconds, default 5)"
    )

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)
    logger = get_logger(__name__)

    # Load configuration
    try:
        config = Config.load(args.config) if args.config else Config()
    except FileNotFoundError:
        logger.error(f"Config file not found: {args.config}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    # Override with command line args
    if args.width:
        config.display.width = args.width
    if args.height:
        config.display.height = args.height
    if args.fullscreen:
        config.display.fullscreen = True
    if args.scene:
        config.scene_path = args.scene

    # Load scene
    try:
        scene = Scene.load(config.scene_path) if config.scene_path else Scene.default()
    except FileNotFoundError:
        logger.error(f"Scene file not found: {config.scene_path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load scene: {e}")
        sys.exit(1)

    if args.dump_scene:
        sys.stdout.write(scene.dump())
        return

    app = WarsectorApp(config=config, scene=scene)
    if args.profile is not None:
        app.enable_profiling(interval=args.profile)

    if not app.init_display():
        sys.exit(1)

    app.run()


if __name__ == "__main__":
    main()
