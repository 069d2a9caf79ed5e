"""
Logging for PalCheck
Records scheduled and completed checks and history updates
"""
import logging
from pathlib import Path
from datetime import datetime

from .checker import CheckResult
from .history import HistoryEntry

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _preview(text: str, max_len: int = 60) -> str:
    """Single-line, length-limited rendering of user text for log lines"""
    flat = text.replace("\n", "\\n")
    if len(flat) <= max_len:
        return repr(flat)
    return repr(flat[:max_len - 3] + "...")


class PalCheckLogger:
    """Structured logger for checker activity"""

    def __init__(self, log_dir: str = "logs", console_output: bool = True):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"palcheck_{datetime.now():%Y%m%d}.log"

        self.logger = logging.getLogger("palcheck")
        self.logger.setLevel(logging.DEBUG)

        # One logger per process: drop handlers left by an earlier instance
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # The TUI owns the terminal, so it runs without the console handler
        if console_output:
            self._attach(logging.StreamHandler(), logging.INFO, CONSOLE_FORMAT)
        self._attach(logging.FileHandler(self.log_file, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)

    def _attach(self, handler: logging.Handler, level: int, fmt: str):
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        self.logger.addHandler(handler)

    def log_check_scheduled(self, text: str, delay: float):
        """Log a debounced check being (re)scheduled"""
        self.logger.debug(f"Check scheduled in {delay * 1000:.0f}ms: {_preview(text)}")

    def log_check_completed(self, text: str, result: CheckResult):
        """Log the outcome of a check"""
        verdict = "palindrome" if result.is_palindrome else "not a palindrome"
        self.logger.info(f"Checked {_preview(text)}: {verdict}")
        self.logger.debug(f"  Normalized: {result.normalized_text!r} ({result.length} chars)")

    def log_history_recorded(self, entry: HistoryEntry, size: int):
        """Log a history insert"""
        self.logger.debug(
            f"History recorded {_preview(entry.original_text)} "
            f"(palindrome={entry.is_palindrome}, size={size})"
        )

    def log_input_cleared(self, cancelled: bool):
        """Log input going back to idle"""
        suffix = " (pending check cancelled)" if cancelled else ""
        self.logger.debug(f"Input cleared{suffix}")

    def info(self, message: str):
        """Generic info log"""
        self.logger.info(message)

    def debug(self, message: str):
        """Generic debug log"""
        self.logger.debug(message)

    def error(self, message: str):
        """Generic error log"""
        self.logger.error(message)

    def warning(self, message: str):
        """Generic warning log"""
        self.logger.warning(message)
