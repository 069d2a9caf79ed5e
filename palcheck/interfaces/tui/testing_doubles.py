"""
Test doubles (mocks/fakes) for TUI testing
Shared between unit tests and integration tests
"""
from pathlib import Path


class ManualHandle:
    """Timer handle returned by ManualLoop.call_later"""
    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    def cancelled(self):
        return self._cancelled


class ManualLoop:
    """
    Stand-in for an asyncio loop whose clock only moves on advance().

    Supports the call_later() subset Debouncer uses.
    """
    def __init__(self):
        self.now = 0.0
        self.handles = []

    def time(self):
        return self.now

    def call_later(self, delay, callback, *args):
        handle = ManualHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    def advance(self, seconds):
        """Move the clock forward, running every timer that comes due"""
        self.now += seconds
        due = sorted(
            (h for h in self.handles if not h.cancelled() and h.when <= self.now),
            key=lambda h: h.when,
        )
        self.handles = [h for h in self.handles if h not in due and not h.cancelled()]
        for handle in due:
            if not handle.cancelled():
                handle.callback(*handle.args)

    @property
    def pending_count(self):
        return sum(1 for h in self.handles if not h.cancelled())


class DummyConfig:
    """Mock Config for testing"""
    def __init__(self, tmp_path=None, debounce_ms=300):
        self._tmp_path = tmp_path or "/tmp"
        self.debounce_ms = debounce_ms

    @property
    def debounce_seconds(self):
        return self.debounce_ms / 1000.0

    def get_log_dir(self):
        return Path(self._tmp_path)


class DummyLogger:
    """Mock PalCheckLogger for testing"""
    def __init__(self):
        self.info_messages = []
        self.error_messages = []
        self.checks = []
        self.recorded = []
        self.scheduled = []
        self.cleared = 0

    def log_check_scheduled(self, text, delay):
        self.scheduled.append(text)

    def log_check_completed(self, text, result):
        self.checks.append((text, result))

    def log_history_recorded(self, entry, size):
        self.recorded.append(entry)

    def log_input_cleared(self, cancelled):
        self.cleared += 1

    def info(self, msg):
        self.info_messages.append(msg)

    def error(self, msg):
        self.error_messages.append(msg)


class FailingClipboard:
    """Clipboard whose writes always fail, like a terminal without access"""
    def __init__(self, error=None):
        self.error = error or RuntimeError("clipboard unavailable")

    def set_text(self, text):
        raise self.error

    def set_data(self, data):
        raise self.error

    def get_data(self):
        raise self.error
