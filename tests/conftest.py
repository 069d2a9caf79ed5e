"""
Test fixtures and utilities for PalCheck tests
"""
import pytest
from palcheck.core.debounce import Debouncer
from palcheck.core.session import CheckSession
from palcheck.interfaces.tui.models import UIState
from palcheck.interfaces.tui.controllers import TUIController
from palcheck.interfaces.tui.testing_doubles import (
    ManualLoop,
    DummyConfig,
    DummyLogger,
)


@pytest.fixture
def manual_loop():
    """Event loop stand-in whose clock only moves on advance()"""
    return ManualLoop()


@pytest.fixture
def session(manual_loop):
    """
    CheckSession with a 300ms debounce on a manual loop.

    Returns:
        tuple: (session, loop, logger)
    """
    logger = DummyLogger()
    sess = CheckSession(Debouncer(0.3, loop=manual_loop), logger=logger)
    return sess, manual_loop, logger


@pytest.fixture
def controller(tmp_path, manual_loop):
    """
    Create a TUIController with test doubles.

    Returns:
        tuple: (state, controller, loop, logger)
    """
    logger = DummyLogger()
    sess = CheckSession(Debouncer(0.3, loop=manual_loop), logger=logger)
    state = UIState(session=sess)
    config = DummyConfig(tmp_path)

    ctl = TUIController(state, config, logger, loop=manual_loop)

    return state, ctl, manual_loop, logger
