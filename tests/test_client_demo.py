import logging

import pytest

import client_demo
from wireframe_cube.errors import DrawError, WindowInitError
from wireframe_cube.logging_config import setup_logging


def test_default_arguments():
    args = client_demo.parse_args([])
    assert args.max_frames is None
    assert args.log_level == "WARNING"


@pytest.mark.parametrize("value", ["0", "-3"])
def test_max_frames_must_be_positive(value):
    with pytest.raises(SystemExit):
        client_demo.parse_args(["--max-frames", value])


def test_errors_exit_with_status_one(monkeypatch, capsys):
    def fail(args):
        raise WindowInitError("no video device")

    monkeypatch.setattr(client_demo, "main", fail)
    assert client_demo.cli([]) == 1
    assert "Error: no video device" in capsys.readouterr().err


def test_keyboard_interrupt_exits_cleanly(monkeypatch):
    def interrupt(args):
        raise KeyboardInterrupt

    monkeypatch.setattr(client_demo, "main", interrupt)
    assert client_demo.cli(["--max-frames", "3"]) == 0


@pytest.fixture
def headless(monkeypatch):
    pygame = pytest.importorskip("pygame")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    return pygame


def test_capped_run_exits_cleanly(headless):
    assert client_demo.cli(["--max-frames", "2"]) == 0
    assert not headless.display.get_init()


def test_window_is_closed_after_draw_error(headless, monkeypatch, capsys):
    from wireframe_cube.renderer import Renderer

    def fail(self, canvas, angle_x, angle_y):
        raise DrawError("line rejected")

    monkeypatch.setattr(Renderer, "render", fail)
    assert client_demo.cli(["--max-frames", "2"]) == 1
    assert not headless.display.get_init()
    assert "Error: line rejected" in capsys.readouterr().err


def test_setup_logging_replaces_handlers():
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.INFO)
    assert logger.name == "wireframe_cube"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_setup_logging_ignores_ancestor_handlers():
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        package_logger = logging.getLogger("wireframe_cube")
        package_logger.handlers.clear()
        setup_logging(logging.INFO)
        assert len(package_logger.handlers) == 1
        assert marker in root.handlers
    finally:
        root.removeHandler(marker)
