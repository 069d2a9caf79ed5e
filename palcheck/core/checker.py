"""
Palindrome checker

Normalizes text (punctuation, whitespace and case are ignored) and tests
whether the result reads the same forward and backward.
"""
import re
from dataclasses import dataclass

# Anything that is not a word character or whitespace, plus underscore
_NON_WORD = re.compile(r"[^\w\s]|_")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single palindrome check"""
    is_palindrome: bool
    normalized_text: str

    @property
    def length(self) -> int:
        return len(self.normalized_text)


def normalize_text(text: str) -> str:
    """
    Reduce text to the characters that take part in the comparison.

    Word characters are Unicode-aware, so accented and non-Latin letters
    and digits survive. Lower-casing happens first: a few characters
    (e.g. "İ") lower-case into a letter plus a combining mark, and the
    mark must be stripped in the same pass for the result to be stable.

    Examples:
        >>> normalize_text("A man, a plan, a canal: Panama")
        'amanaplanacanalpanama'
        >>> normalize_text("snake_case")
        'snakecase'
    """
    lowered = text.lower()
    stripped = _NON_WORD.sub("", lowered)
    return _WHITESPACE.sub("", stripped)


def check_palindrome(text: str) -> CheckResult:
    """
    Check whether text is a palindrome.

    Empty normalized text is never a palindrome, so blank or
    all-punctuation input reports False.

    Examples:
        >>> check_palindrome("race a car").is_palindrome
        False
        >>> check_palindrome("12321").is_palindrome
        True
        >>> check_palindrome("?!").is_palindrome
        False
    """
    normalized = normalize_text(text)
    is_palindrome = bool(normalized) and normalized == normalized[::-1]
    return CheckResult(is_palindrome=is_palindrome, normalized_text=normalized)


def is_palindrome(text: str) -> bool:
    """Shortcut for check_palindrome(text).is_palindrome"""
    return check_palindrome(text).is_palindrome
