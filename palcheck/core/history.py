"""
Check History
Bounded, deduplicated log of recent checks with derived counts
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

MAX_HISTORY = 5


@dataclass(frozen=True)
class HistoryEntry:
    """One completed check, keyed by the exact original text"""
    original_text: str
    is_palindrome: bool
    checked_at: datetime


@dataclass(frozen=True)
class Stats:
    """Aggregate counts over the history"""
    palindrome_count: int = 0
    non_palindrome_count: int = 0

    @property
    def total(self) -> int:
        return self.palindrome_count + self.non_palindrome_count


def compute_stats(entries: Iterable[HistoryEntry]) -> Stats:
    """Fold entries into palindrome / non-palindrome counts"""
    palindromes = 0
    others = 0
    for entry in entries:
        if entry.is_palindrome:
            palindromes += 1
        else:
            others += 1
    return Stats(palindrome_count=palindromes, non_palindrome_count=others)


class CheckHistory:
    """
    Recent checks, newest first.

    Recording text that is already present moves it to the front instead
    of adding a duplicate. The list never grows past `capacity`; the
    oldest entry is dropped first.
    """

    def __init__(
        self,
        capacity: int = MAX_HISTORY,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock or datetime.now
        self._entries: List[HistoryEntry] = []

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries)

    def record_check(self, original_text: str, is_palindrome: bool) -> HistoryEntry:
        """Insert a check at the front, replacing any entry for the same text"""
        entry = HistoryEntry(
            original_text=original_text,
            is_palindrome=is_palindrome,
            checked_at=self._clock(),
        )
        kept = [e for e in self._entries if e.original_text != original_text]
        self._entries = [entry] + kept[: self.capacity - 1]
        return entry

    def compute_stats(self) -> Stats:
        return compute_stats(self._entries)
