"""
Check Session
Owns the current input, the latest result and the history, and drives the
idle / pending / settled cycle through a debouncer
"""
from enum import Enum
from typing import Callable, Optional

from .checker import CheckResult, check_palindrome
from .debounce import Debouncer
from .history import CheckHistory, Stats

EXAMPLE_INPUTS = (
    "A man, a plan, a canal: Panama",
    "race a car",
    "Was it a car or a cat I saw?",
    "No lemon, no melon",
    "Able was I, I saw Elba!",
    "12321",
    "Hello, world!",
)


class CheckPhase(str, Enum):
    """Where the session is in the check cycle"""
    IDLE = "idle"          # no (or blank) input, nothing displayed
    PENDING = "pending"    # input present, waiting for the quiet period
    SETTLED = "settled"    # result computed for the current input


class CheckSession:
    """
    Debounced palindrome checking for a single text field.

    Every input change restarts the debounce window; only the input that
    is still current when the window closes gets checked. Blank input
    returns to IDLE immediately. History is kept when the input is
    cleared.

    Args:
        debouncer: schedules the delayed check
        history: recent-checks log (a fresh one by default)
        logger: optional PalCheckLogger
        on_change: called with no arguments after every state change
    """

    def __init__(
        self,
        debouncer: Debouncer,
        history: Optional[CheckHistory] = None,
        logger=None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.debouncer = debouncer
        self.history = history if history is not None else CheckHistory()
        self.logger = logger
        self.on_change = on_change

        self.input_text: str = ""
        self.phase: CheckPhase = CheckPhase.IDLE
        self.result: Optional[CheckResult] = None

    # ----- derived state -----

    @property
    def is_loading(self) -> bool:
        return self.phase == CheckPhase.PENDING

    @property
    def normalized_text(self) -> str:
        return self.result.normalized_text if self.result else ""

    @property
    def stats(self) -> Stats:
        return self.history.compute_stats()

    # ----- transitions -----

    def set_input(self, text: str) -> bool:
        """
        Replace the input text. Returns False if the text did not change.
        """
        if text == self.input_text:
            return False
        self.input_text = text

        if not text.strip():
            self._go_idle()
            return True

        self.phase = CheckPhase.PENDING
        self.debouncer.submit(self._settle, text)
        if self.logger:
            self.logger.log_check_scheduled(text, self.debouncer.delay)
        self._notify()
        return True

    def clear(self):
        """Empty the input and return to IDLE"""
        self.input_text = ""
        self._go_idle()

    def select_example(self, index: int) -> str:
        """Load example `index` (0-based) into the input"""
        if not 0 <= index < len(EXAMPLE_INPUTS):
            raise IndexError(f"No example #{index + 1} (choose 1-{len(EXAMPLE_INPUTS)})")
        example = EXAMPLE_INPUTS[index]
        self.set_input(example)
        return example

    def check_now(self) -> bool:
        """Run a pending check immediately. Returns False if none was pending."""
        return self.debouncer.flush()

    # ----- internal helpers -----

    def _go_idle(self):
        cancelled = self.debouncer.cancel()
        self.phase = CheckPhase.IDLE
        self.result = None
        if self.logger:
            self.logger.log_input_cleared(cancelled)
        self._notify()

    def _settle(self, text: str):
        """Debounce callback: check `text` and record it"""
        if text != self.input_text:
            # Superseded input; a newer check is (or was) scheduled
            return

        result = check_palindrome(text)
        self.result = result
        self.phase = CheckPhase.SETTLED
        if self.logger:
            self.logger.log_check_completed(text, result)

        if result.normalized_text:
            entry = self.history.record_check(text, result.is_palindrome)
            if self.logger:
                self.logger.log_history_recorded(entry, len(self.history))

        self._notify()

    def _notify(self):
        if self.on_change is not None:
            self.on_change()
