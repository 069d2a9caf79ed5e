"""
Tests for normalization and palindrome detection
"""
import pytest

from palcheck.core.checker import CheckResult, check_palindrome, normalize_text, is_palindrome


class TestNormalizeText:
    """Tests for normalize_text"""

    def test_strips_punctuation_and_spaces(self):
        assert normalize_text("A man, a plan, a canal: Panama") == "amanaplanacanalpanama"

    def test_removes_underscore(self):
        assert normalize_text("snake_case_name") == "snakecasename"

    def test_removes_all_whitespace_kinds(self):
        assert normalize_text("a b\tc\nd\r\ne") == "abcde"

    def test_keeps_digits(self):
        assert normalize_text("1-2-3, 2 1!") == "12321"

    def test_keeps_accented_letters(self):
        """Word characters are Unicode-aware"""
        assert normalize_text("Ésé!") == "ésé"

    def test_empty(self):
        assert normalize_text("") == ""

    @pytest.mark.parametrize("text", [
        "A man, a plan, a canal: Panama",
        "Hello, world!",
        "İstanbul",
        "Straße _ 42",
        "  ",
        "?!",
    ])
    def test_idempotent(self, text):
        """Normalizing twice gives the same result as once"""
        once = normalize_text(text)
        assert normalize_text(once) == once


class TestCheckPalindrome:
    """Tests for check_palindrome"""

    def test_panama(self):
        result = check_palindrome("A man, a plan, a canal: Panama")
        assert result == CheckResult(is_palindrome=True, normalized_text="amanaplanacanalpanama")

    def test_race_a_car(self):
        result = check_palindrome("race a car")
        assert result.normalized_text == "raceacar"
        assert result.is_palindrome is False

    def test_numeric(self):
        result = check_palindrome("12321")
        assert result.normalized_text == "12321"
        assert result.is_palindrome is True

    def test_spaces_only_is_not_palindrome(self):
        result = check_palindrome("   ")
        assert result.is_palindrome is False
        assert result.normalized_text == ""

    def test_all_punctuation_is_not_palindrome(self):
        result = check_palindrome("!?.,;_")
        assert result.is_palindrome is False
        assert result.normalized_text == ""

    def test_empty_is_not_palindrome(self):
        assert check_palindrome("").is_palindrome is False

    def test_hello_world(self):
        result = check_palindrome("Hello, world!")
        assert result.normalized_text == "helloworld"
        assert result.is_palindrome is False

    def test_single_character(self):
        assert check_palindrome("x").is_palindrome is True

    def test_case_insensitive(self):
        assert check_palindrome("RaceCar").is_palindrome is True

    def test_length(self):
        assert check_palindrome("No lemon, no melon").length == len("nolemonnomelon")

    @pytest.mark.parametrize("text", [
        "Was it a car or a cat I saw?",
        "No lemon, no melon",
        "Able was I, I saw Elba!",
        "abc",
        "abca",
        "Ésé",
    ])
    def test_verdict_matches_reversal(self, text):
        """Palindrome exactly when the normalized text equals its reverse"""
        result = check_palindrome(text)
        normalized = result.normalized_text
        assert result.is_palindrome == (bool(normalized) and normalized[::-1] == normalized)

    def test_is_palindrome_shortcut(self):
        assert is_palindrome("Was it a rat I saw?") is True
        assert is_palindrome("Python") is False
