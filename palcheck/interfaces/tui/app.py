"""
TUI Application
Main application factory and event loop management
"""
from prompt_toolkit.application import Application
from prompt_toolkit.styles import Style

from palcheck.core.config import Config
from palcheck.core.debounce import Debouncer
from palcheck.core.logger import PalCheckLogger
from palcheck.core.session import CheckSession

from .models import UIState
from .layout import create_layout, create_input_field, create_command_line
from .keybindings import create_keybindings
from .controllers import TUIController

STYLE = {
    "title": "bold",
    "statusbar": "fg:ansibrightblack",
    "separator": "fg:ansibrightblack",
    "dim": "fg:ansibrightblack",
    "green": "fg:ansigreen",
    "red": "fg:ansired",
    "heading": "bold underline",
    "pending": "fg:ansicyan",
    "success": "fg:ansigreen bold",
    "error": "fg:ansired bold",
}


def _build(state, controller, clipboard=None, full_screen=True):
    """Assemble widgets, layout and keybindings around a controller"""
    input_widget = create_input_field(state)
    cmd_widget = create_command_line(state)
    controller.attach_input_buffer(input_widget.buffer)

    layout, result_window = create_layout(state, input_widget, cmd_widget)
    key_bindings = create_keybindings(state, controller, input_widget, cmd_widget, result_window)

    kwargs = {}
    if clipboard is not None:
        kwargs["clipboard"] = clipboard

    return Application(
        layout=layout,
        key_bindings=key_bindings,
        full_screen=full_screen,
        style=Style.from_dict(STYLE),
        mouse_support=False,
        **kwargs,
    )


def create_app(config: Config = None) -> Application:
    """Create and configure the TUI application"""
    cfg = config or Config()
    logger = PalCheckLogger(log_dir=str(cfg.get_log_dir()), console_output=False)

    session = CheckSession(Debouncer(cfg.debounce_seconds), logger=logger)
    state = UIState(session=session)
    controller = TUIController(state, cfg, logger)

    logger.info(f"TUI started (debounce {cfg.debounce_ms}ms)")
    return _build(state, controller)


def create_app_for_test(tmp_path=None, debounce_seconds: float = 0.05, clipboard=None):
    """
    Create an Application wired with test doubles for integration testing.

    Args:
        tmp_path: Path for temporary files (default: None)
        debounce_seconds: debounce delay for the session
        clipboard: prompt_toolkit clipboard to use (default: in-memory)

    Returns:
        (app, state, controller, session, logger) tuple
    """
    from .testing_doubles import DummyConfig, DummyLogger

    config = DummyConfig(tmp_path, debounce_ms=int(debounce_seconds * 1000))
    logger = DummyLogger()

    session = CheckSession(Debouncer(debounce_seconds), logger=logger)
    state = UIState(session=session)
    controller = TUIController(state, config, logger, clipboard=clipboard)

    app = _build(state, controller, clipboard=clipboard, full_screen=False)
    return app, state, controller, session, logger
