"""
TUI Controllers
Business logic layer that interfaces with the PalCheck core
"""
from prompt_toolkit.application.current import get_app
from prompt_toolkit.document import Document

from palcheck.core.config import Config
from palcheck.core.debounce import Debouncer
from palcheck.core.logger import PalCheckLogger
from palcheck.core.session import EXAMPLE_INPUTS, CheckSession

from .models import UIState

COPIED_NOTICE_SECONDS = 2.0
COPIED_MESSAGE = "Copied to clipboard!"

HELP_TEXT = (
    "Commands: :check <text> | :example <1-7> | :clear | :copy | :stats | :help | :quit"
)


class TUIController:
    """Controller for TUI operations"""

    def __init__(
        self,
        state: UIState,
        config: Config,
        logger: PalCheckLogger,
        clipboard=None,
        loop=None,
    ):
        self.state = state
        self.session: CheckSession = state.session
        self.config = config
        self.logger = logger
        self.clipboard = clipboard
        self.input_buffer = None

        self._notice = Debouncer(COPIED_NOTICE_SECONDS, loop=loop)
        self.session.on_change = self._invalidate

    # ----- internal helpers -----

    def _invalidate(self):
        """Request a UI redraw (no-op outside a running application)."""
        try:
            get_app().invalidate()
        except Exception:
            pass

    def attach_input_buffer(self, buffer):
        """Wire the input field so typing feeds the session"""
        self.input_buffer = buffer
        buffer.on_text_changed += lambda buf: self.on_input_changed(buf.text)

    def _sync_input_buffer(self):
        """Push the session's input into the input field"""
        if self.input_buffer is None:
            return
        text = self.session.input_text
        if self.input_buffer.text != text:
            self.input_buffer.set_document(
                Document(text, cursor_position=len(text)), bypass_readonly=True
            )

    def _clear_copied_notice(self):
        self.state.copied = False
        if self.state.message == COPIED_MESSAGE:
            self.state.message = None
        self._invalidate()

    # ----- actions -----

    def on_input_changed(self, text: str):
        """Handle an edit of the input field"""
        self.session.set_input(text)

    def select_example(self, number: int):
        """Load example `number` (1-based, as shown on screen)"""
        try:
            example = self.session.select_example(number - 1)
        except IndexError as e:
            self.state.message = str(e)
            return
        self._sync_input_buffer()
        self.logger.info(f"TUI: loaded example {number}")
        self.state.message = f"Example {number}: {example}"

    def clear_input(self):
        """Empty the input field (history is kept)"""
        self.session.clear()
        self._sync_input_buffer()
        self.state.message = "Input cleared"

    def check_now(self):
        """Skip the rest of the debounce window"""
        if self.session.check_now():
            self.state.message = None
        elif not self.session.input_text.strip():
            self.state.message = "Nothing to check"

    def copy_input(self):
        """Copy the current input to the clipboard"""
        text = self.session.input_text
        if not text:
            self.state.message = "Nothing to copy"
            return

        try:
            clipboard = self.clipboard if self.clipboard is not None else get_app().clipboard
            clipboard.set_text(text)
        except Exception as e:
            self.logger.error(f"TUI: copy to clipboard failed: {e}")
            self.state.message = f"Copy failed: {e}"
            return

        self.state.copied = True
        self.state.message = COPIED_MESSAGE
        self._notice.submit(self._clear_copied_notice)

    def execute_command(self, line: str):
        """Execute a command entered in command mode"""
        line = line.strip()
        if not line:
            return

        name, _, rest = line.partition(" ")
        cmd = name.lower()
        rest = rest.strip()

        if cmd in ("check", "c"):
            self._cmd_check(rest)
        elif cmd in ("example", "ex", "e"):
            self._cmd_example(rest)
        elif cmd == "clear":
            self.clear_input()
        elif cmd in ("copy", "y"):
            self.copy_input()
        elif cmd == "stats":
            self._cmd_stats()
        elif cmd == "help" or cmd == "h":
            self._cmd_help()
        elif cmd == "quit" or cmd == "q":
            get_app().exit()
        else:
            self.state.message = f"Unknown command: {cmd}"

    def _cmd_check(self, text: str):
        """Handle :check <text> command (checks immediately)"""
        if not text:
            self.state.message = "Usage: :check <text>"
            return

        self.session.set_input(text)
        self._sync_input_buffer()
        self.session.check_now()

        result = self.session.result
        if result is None:
            self.state.message = "Nothing to check"
        elif result.is_palindrome:
            self.state.message = "This is a palindrome!"
        else:
            self.state.message = "Not a palindrome"

    def _cmd_example(self, arg: str):
        """Handle :example <n> command"""
        try:
            number = int(arg)
        except ValueError:
            self.state.message = f"Usage: :example <1-{len(EXAMPLE_INPUTS)}>"
            return
        self.select_example(number)

    def _cmd_stats(self):
        """Handle :stats command"""
        stats = self.session.stats
        self.state.message = (
            f"Palindromes: {stats.palindrome_count} | "
            f"Non-palindromes: {stats.non_palindrome_count}"
        )

    def _cmd_help(self):
        """Handle :help command"""
        self.state.message = HELP_TEXT
