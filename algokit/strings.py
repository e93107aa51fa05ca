"""Text routines: reversing, counting, filtering and reordering characters."""

from __future__ import annotations

from collections import Counter
from typing import NamedTuple

VOWELS = frozenset("aeiouAEIOU")

_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_ASCII_UPPER = _ASCII_LOWER.upper()
_TOGGLE_TABLE = str.maketrans(
    _ASCII_LOWER + _ASCII_UPPER, _ASCII_UPPER + _ASCII_LOWER
)


class VowelCount(NamedTuple):
    """Number of vowels and of all other characters in a text."""

    vowels: int
    others: int


def reverse_string(text: str) -> str:
    """Return the characters of text in reverse order."""
    return text[::-1]


def string_length(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def is_anagram(first: str, second: str) -> bool:
    """Return True if both texts hold the same characters equally often."""
    return Counter(first) == Counter(second)


def delete_character(text: str, char: str) -> str:
    """Return text with every occurrence of the single character char removed."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return text.replace(char, "")


def remove_spaces(text: str) -> str:
    """Return text with every space character removed; other whitespace stays."""
    return text.replace(" ", "")


def sort_characters(text: str) -> str:
    """Return the characters of text in ascending code-point order."""
    return "".join(sorted(text))


def toggle_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving every other character alone."""
    return text.translate(_TOGGLE_TABLE)


def is_vowel(char: str) -> bool:
    """Return True if char is one of a, e, i, o, u in either case."""
    return char in VOWELS


def count_vowels(text: str) -> VowelCount:
    """Count the vowels in text and, separately, every other character."""
    vowels = sum(1 for char in text if is_vowel(char))
    return VowelCount(vowels=vowels, others=len(text) - vowels)


def remove_vowels(text: str) -> str:
    """Return text with every vowel removed."""
    return "".join(char for char in text if not is_vowel(char))