"""
UI State Models
Dataclasses for TUI state management
"""
from dataclasses import dataclass
from typing import Optional

from palcheck.core.history import HistoryEntry
from palcheck.core.session import CheckSession


@dataclass
class HistoryRow:
    """Represents a history entry in the history panel"""
    text: str
    is_palindrome: bool
    checked_at: str
    # Derived fields
    verdict_emoji: str = ''
    verdict_color: str = ''


@dataclass
class UIState:
    """Global UI state for the TUI"""
    session: CheckSession

    # Modes
    editing: bool = False                 # input field focused, keys go to the buffer
    command_active: bool = False

    # Meta
    message: Optional[str] = None         # transient status bar text
    copied: bool = False                  # "Copied to clipboard!" notice visible


def entry_to_row(entry: HistoryEntry) -> HistoryRow:
    """Convert a HistoryEntry to a HistoryRow for display"""
    return HistoryRow(
        text=entry.original_text,
        is_palindrome=entry.is_palindrome,
        checked_at=entry.checked_at.strftime("%H:%M:%S"),
        verdict_emoji="✅" if entry.is_palindrome else "❌",
        verdict_color="class:green" if entry.is_palindrome else "class:red",
    )
