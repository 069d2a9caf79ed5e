"""
TUI Widgets
prompt_toolkit UI components for PalCheck
"""
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout import Window
from prompt_toolkit.layout.dimension import Dimension

from palcheck.core.session import EXAMPLE_INPUTS, CheckPhase
from .models import UIState, entry_to_row


def _truncate(text: str, max_len: int) -> str:
    """Truncate text to max_len characters, adding '...' if truncated"""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def _one_line(text: str) -> str:
    return text.replace("\n", " ")


class ResultControl(FormattedTextControl):
    """Control for the verdict on the current input"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for the result panel"""
        session = self.state.session

        if session.phase == CheckPhase.IDLE:
            if session.input_text:
                return [("class:dim", "Waiting for text to check\n")]
            return [("class:dim", "Type or paste text to check (i to edit, 1-7 for examples)\n")]

        if session.phase == CheckPhase.PENDING:
            return [("class:pending", "⏳ Checking...\n")]

        result = session.result
        lines = []
        if result.is_palindrome:
            lines.append(("class:success", "✅ This is a palindrome!\n"))
        else:
            lines.append(("class:error", "❌ Not a palindrome\n"))

        if result.normalized_text:
            processed = _truncate(result.normalized_text, 200)
            lines.append(("class:dim", f'Processed: "{processed}" ({result.length} characters)\n'))

        return lines


class StatsControl(FormattedTextControl):
    """Control for palindrome / non-palindrome counts"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for stats"""
        session = self.state.session
        if not len(session.history):
            return []

        stats = session.stats
        return [
            ("class:heading", "Your Stats\n"),
            ("class:green", f"  {stats.palindrome_count} Palindromes\n"),
            ("class:red", f"  {stats.non_palindrome_count} Non-palindromes\n"),
        ]


class HistoryControl(FormattedTextControl):
    """Control for the recent checks list"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for history"""
        entries = self.state.session.history.entries
        lines = [("class:heading", "Recent Checks\n")]
        if not entries:
            lines.append(("class:dim", "  No checks yet\n"))
            return lines

        for entry in entries:
            row = entry_to_row(entry)
            text = _truncate(_one_line(row.text), 40)
            lines.append((row.verdict_color, f"  {row.verdict_emoji} {text}"))
            lines.append(("class:dim", f"  {row.checked_at}\n"))
        return lines


class ExamplesControl(FormattedTextControl):
    """Control for the numbered example list"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for examples"""
        current = self.state.session.input_text
        lines = [("class:heading", "Try these examples\n")]
        for number, example in enumerate(EXAMPLE_INPUTS, start=1):
            style = "reverse" if example == current else ""
            lines.append(("class:dim", f"  {number} "))
            lines.append((style, f'"{example}"\n'))
        return lines


class StatusBarControl(FormattedTextControl):
    """Control for the status bar"""

    def __init__(self, state: UIState):
        self.state = state
        super().__init__(self.get_text)

    def get_text(self):
        """Generate formatted text for status bar"""
        if self.state.command_active:
            mode = "COMMAND"
        elif self.state.editing:
            mode = "INSERT"
        else:
            mode = "NORMAL"

        msg = self.state.message or ""
        if self.state.editing:
            hints = "esc/c-c:done"
        else:
            hints = "i:edit 1-7:example x:clear y:copy enter:check q:quit :help"

        if self.state.copied:
            return [("class:statusbar", f" {mode} | "), ("class:success", "✔ Copied to clipboard!")]
        if msg and ("failed" in msg.lower() or "error" in msg.lower()):
            text = f" {mode} | {msg[:120]}"
        elif msg:
            text = f" {mode} | {hints} | {_truncate(_one_line(msg), 80)}"
        else:
            text = f" {mode} | {hints}"

        return [("class:statusbar", text)]


def create_result_window(state: UIState) -> Window:
    """Create the result window"""
    return Window(
        ResultControl(state),
        height=Dimension(min=2, max=3),
        wrap_lines=True,
        always_hide_cursor=True,
    )


def create_stats_window(state: UIState) -> Window:
    """Create the stats window"""
    return Window(
        StatsControl(state),
        height=Dimension(max=3),
        wrap_lines=False,
        always_hide_cursor=True,
    )


def create_history_window(state: UIState) -> Window:
    """Create the history window"""
    return Window(
        HistoryControl(state),
        wrap_lines=False,
        always_hide_cursor=True,
    )


def create_examples_window(state: UIState) -> Window:
    """Create the examples window"""
    return Window(
        ExamplesControl(state),
        wrap_lines=False,
        always_hide_cursor=True,
    )


def create_status_bar(state: UIState) -> Window:
    """Create the status bar window"""
    return Window(
        StatusBarControl(state),
        height=1,
        style="class:statusbar",
        always_hide_cursor=True,
    )
