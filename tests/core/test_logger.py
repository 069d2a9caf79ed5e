"""
Tests for PalCheckLogger - logging system
"""
import logging
from datetime import datetime

from palcheck.core.checker import check_palindrome
from palcheck.core.history import HistoryEntry
from palcheck.core.logger import PalCheckLogger


class TestLoggerSetup:
    """Tests for logger initialization"""

    def test_creates_log_directory(self, tmp_path):
        """Logger creates log directory if it doesn't exist"""
        log_dir = tmp_path / "logs"
        assert not log_dir.exists()

        PalCheckLogger(log_dir=str(log_dir))

        assert log_dir.exists()

    def test_creates_daily_log_file(self, tmp_path):
        """Logger creates dated log file"""
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)
        logger.info("test message")

        today = datetime.now().strftime("%Y%m%d")
        log_files = list(tmp_path.glob(f"palcheck_{today}.log"))

        assert len(log_files) == 1

    def test_console_output_disabled(self, tmp_path):
        """Logger can be created without console handler"""
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        handlers = logger.logger.handlers
        console_handlers = [h for h in handlers if isinstance(h, logging.StreamHandler)
                            and not isinstance(h, logging.FileHandler)]

        assert len(console_handlers) == 0

    def test_console_output_enabled(self, tmp_path):
        """Logger includes console handler when enabled"""
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=True)

        handlers = logger.logger.handlers
        console_handlers = [h for h in handlers if isinstance(h, logging.StreamHandler)
                            and not isinstance(h, logging.FileHandler)]

        assert len(console_handlers) == 1

    def test_no_duplicate_handlers(self, tmp_path):
        """Creating a second logger replaces the handlers instead of stacking them"""
        PalCheckLogger(log_dir=str(tmp_path), console_output=True)
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=True)

        assert len(logger.logger.handlers) == 2


class TestCheckLogging:
    """Tests for check-specific log methods"""

    def test_log_check_completed(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        with caplog.at_level(logging.DEBUG, logger="palcheck"):
            logger.log_check_completed("Race car", check_palindrome("Race car"))

        assert "'Race car': palindrome" in caplog.text
        assert "racecar" in caplog.text

    def test_log_check_completed_negative(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        with caplog.at_level(logging.INFO, logger="palcheck"):
            logger.log_check_completed("abc", check_palindrome("abc"))

        assert "not a palindrome" in caplog.text

    def test_log_check_scheduled(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        with caplog.at_level(logging.DEBUG, logger="palcheck"):
            logger.log_check_scheduled("aba", 0.3)

        assert "300ms" in caplog.text

    def test_long_text_is_truncated(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        with caplog.at_level(logging.DEBUG, logger="palcheck"):
            logger.log_check_scheduled("x" * 500, 0.3)

        assert "x" * 100 not in caplog.text
        assert "..." in caplog.text

    def test_log_history_recorded(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)
        entry = HistoryEntry("aba", True, datetime(2025, 1, 1))

        with caplog.at_level(logging.DEBUG, logger="palcheck"):
            logger.log_history_recorded(entry, 3)

        assert "palindrome=True" in caplog.text
        assert "size=3" in caplog.text

    def test_log_input_cleared(self, tmp_path, caplog):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)

        with caplog.at_level(logging.DEBUG, logger="palcheck"):
            logger.log_input_cleared(cancelled=True)

        assert "pending check cancelled" in caplog.text

    def test_messages_reach_log_file(self, tmp_path):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)
        logger.error("clipboard exploded")

        for handler in logger.logger.handlers:
            handler.flush()

        today = datetime.now().strftime("%Y%m%d")
        content = (tmp_path / f"palcheck_{today}.log").read_text()
        assert "ERROR - clipboard exploded" in content


class TestHandlerLifecycle:
    """Re-creating the logger replaces handlers cleanly"""

    def test_previous_file_handler_is_closed(self, tmp_path):
        first = PalCheckLogger(log_dir=str(tmp_path / "one"), console_output=False)
        old_handlers = list(first.logger.handlers)

        second = PalCheckLogger(log_dir=str(tmp_path / "two"), console_output=False)

        assert all(h not in second.logger.handlers for h in old_handlers)
        assert all(h.stream is None for h in old_handlers if isinstance(h, logging.FileHandler))

    def test_log_file_path(self, tmp_path):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)
        today = datetime.now().strftime("%Y%m%d")
        assert logger.log_file == tmp_path / f"palcheck_{today}.log"

    def test_non_ascii_text_written_to_file(self, tmp_path):
        logger = PalCheckLogger(log_dir=str(tmp_path), console_output=False)
        logger.log_check_completed("Ésé", check_palindrome("Ésé"))

        for handler in logger.logger.handlers:
            handler.flush()
        assert "Ésé" in logger.log_file.read_text(encoding="utf-8")
