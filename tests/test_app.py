import math

import pygame
import pytest

from warsector.app import WarsectorApp
from warsector.config import Config
from warsector.core.scene import Scene
from warsector.core.shape import Shape


def key_event(kind: int, key: int) -> pygame.event.Event:
    return pygame.event.Event(kind, key=key)


@pytest.fixture
def app(renderer) -> WarsectorApp:
    app = WarsectorApp(config=Config(), renderer=renderer)
    assert app.init_display()
    return app


def test_init_display_builds_projector_for_surface_size(app: WarsectorApp, renderer) -> None:
    assert renderer.initialized
    assert (app.projector.width, app.projector.height) == (800, 600)
    assert app.projector.focal_length == 400


def test_first_tick_has_zero_elapsed_time(app: WarsectorApp) -> None:
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
    assert app.tick(12.5) == 0.0
    assert app.camera.position == pytest.approx((0.0, 200.0, 0.0))
    assert app.tick(12.75) == pytest.approx(0.25)
    assert app.camera.z == pytest.approx(250.0)


def test_simultaneous_keys_compose_in_one_tick(app: WarsectorApp) -> None:
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
    app.tick(0.0)
    app.tick(0.5)
    # Turn is applied before the move, so the move uses the new heading.
    yaw = 0.5 * app.camera.angular_speed
    assert app.camera.yaw == pytest.approx(yaw)
    assert app.camera.x == pytest.approx(-500.0 * math.sin(yaw))
    assert app.camera.z == pytest.approx(500.0 * math.cos(yaw))


def test_released_key_stops_motion(app: WarsectorApp) -> None:
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_DOWN))
    app.tick(0.0)
    app.tick(0.1)
    app.handle_event(key_event(pygame.KEYUP, pygame.K_DOWN))
    app.tick(1.0)
    assert app.camera.z == pytest.approx(-100.0)


def test_holding_turn_left_for_half_revolution_flips_heading(app: WarsectorApp) -> None:
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_LEFT))
    app.tick(0.0)
    app.tick(math.pi / app.camera.angular_speed)
    assert app.camera.yaw == pytest.approx(math.pi)
    yaw = app.camera.yaw
    assert app.camera.heading_degrees == math.floor((360 - math.degrees(yaw)) % 360) % 360
    assert (0 - app.camera.heading_degrees) % 360 == pytest.approx(180, abs=1)


def test_frame_draw_order(app: WarsectorApp, renderer) -> None:
    app.tick(0.0)
    kinds = [c[0] for c in renderer.calls]
    assert kinds[0] == "clear"
    assert kinds[-1] == "flip"
    assert kinds.index("text") < kinds.index("batch")
    assert renderer.calls[0][1] == (0, 0, 0)


def test_default_scene_cube_is_visible_from_start(app: WarsectorApp, renderer) -> None:
    app.tick(0.0)
    batches = renderer.of_kind("batch")
    # The cube is ahead; the pyramid is also within depth > 0 at yaw 0.
    assert sum(len(b[1]) for b in batches) == 12 + 8


def test_shapes_behind_camera_are_not_drawn(renderer) -> None:
    scene = Scene([Shape([[0, 0, -100], [50, 0, -100]], [[0, 1]], name="behind")])
    app = WarsectorApp(config=Config(), scene=scene, renderer=renderer)
    app.init_display()
    app.tick(0.0)
    assert renderer.of_kind("batch") == []


def test_escape_and_window_close_stop_the_loop(app: WarsectorApp) -> None:
    app.handle_event(key_event(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert not app.running

    app.running = True
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running


def test_run_processes_events_until_quit_then_shuts_down(app: WarsectorApp, renderer) -> None:
    renderer.events = [key_event(pygame.KEYDOWN, pygame.K_RIGHT), pygame.event.Event(pygame.QUIT)]
    app.run()
    assert app.frame_count == 1
    assert renderer.closed
    assert len(app.keys) == 0


def test_render_frame_without_display_is_a_no_op() -> None:
    app = WarsectorApp()
    app.render_frame()
    assert app.renderer is None


def test_profiling_does_not_change_output(app: WarsectorApp, renderer) -> None:
    app.tick(0.0)
    plain = list(renderer.calls)
    renderer.reset()
    app.enable_profiling(interval=60.0)
    app.tick(0.0)
    assert renderer.calls == plain


def test_main_dump_scene_prints_yaml(monkeypatch, capsys, tmp_path) -> None:
    from warsector import app as app_module

    monkeypatch.setattr("sys.argv", ["warsector", "--dump-scene"])
    monkeypatch.setattr(app_module, "setup_logging", lambda **kwargs: None)
    app_module.main()
    out = capsys.readouterr().out
    assert out.startswith("shapes:")
    assert "name: cube" in out and "name: pyramid" in out


def test_main_exits_when_config_is_missing(monkeypatch, tmp_path) -> None:
    from warsector import app as app_module

    monkeypatch.setattr("sys.argv", ["warsector", "-c", str(tmp_path / "missing.yaml")])
    monkeypatch.setattr(app_module, "setup_logging", lambda **kwargs: None)
    with pytest.raises(SystemExit) as excinfo:
        app_module.main()
    assert excinfo.value.code == 1
