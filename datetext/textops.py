"""Word- and letter-level helpers for plain text.

Words are separated by single space characters only; letter-case helpers
act on ASCII letters and leave every other character as it is.
"""

from __future__ import annotations

import string
from collections.abc import Iterable
from enum import Enum

__all__ = [
    "WhatToCount",
    "count_words",
    "upper_first_letter_of_each_word",
    "lower_first_letter_of_each_word",
    "invert_letter_case",
    "invert_all_letters_case",
    "count_letters",
    "count_capital_letters",
    "count_small_letters",
    "count_specific_letter",
    "is_vowel",
    "count_vowels",
    "split",
    "trim_left",
    "trim_right",
    "trim",
    "join_string",
    "reverse_words",
    "replace_word",
    "remove_punctuations",
]

_SPACE = " "
_VOWELS = frozenset("aeiou")
_PUNCTUATION = frozenset(string.punctuation)


class WhatToCount(Enum):
    """Which characters :func:`count_letters` counts."""

    SMALL_LETTERS = 0
    CAPITAL_LETTERS = 1
    ALL = 3


def _upper(char: str) -> str:
    return char.upper() if char.isascii() else char


def _lower(char: str) -> str:
    return char.lower() if char.isascii() else char


def _is_upper(char: str) -> bool:
    return char.isascii() and char.isupper()


def _is_lower(char: str) -> bool:
    return char.isascii() and char.islower()


def _lower_all(text: str) -> str:
    return "".join(_lower(c) for c in text)


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def count_words(text: str) -> int:
    """Return the number of non-empty space-separated words."""
    return len(split(text, _SPACE))


def _change_first_letters(text: str, change) -> str:
    result = []
    at_word_start = True
    for char in text:
        if char != _SPACE and at_word_start:
            char = change(char)
        result.append(char)
        at_word_start = char == _SPACE
    return "".join(result)


def upper_first_letter_of_each_word(text: str) -> str:
    """Capitalise the first letter of every word."""
    return _change_first_letters(text, _upper)


def lower_first_letter_of_each_word(text: str) -> str:
    """Lower-case the first letter of every word."""
    return _change_first_letters(text, _lower)


def invert_letter_case(char: str) -> str:
    """Swap the case of a single character."""
    _single_char(char)
    return _lower(char) if _is_upper(char) else _upper(char)


def invert_all_letters_case(text: str) -> str:
    """Swap the case of every letter in ``text``."""
    return "".join(invert_letter_case(c) for c in text)


def count_letters(text: str, what: WhatToCount = WhatToCount.ALL) -> int:
    """Count capital letters, small letters, or all characters."""
    if what is WhatToCount.ALL:
        return len(text)
    if what is WhatToCount.CAPITAL_LETTERS:
        return count_capital_letters(text)
    return count_small_letters(text)


def count_capital_letters(text: str) -> int:
    """Return the number of upper-case letters."""
    return sum(1 for c in text if _is_upper(c))


def count_small_letters(text: str) -> int:
    """Return the number of lower-case letters."""
    return sum(1 for c in text if _is_lower(c))


def count_specific_letter(text: str, letter: str, match_case: bool = True) -> int:
    """Count occurrences of ``letter``, optionally ignoring case."""
    _single_char(letter)
    if match_case:
        return sum(1 for c in text if c == letter)
    target = _lower(letter)
    return sum(1 for c in text if _lower(c) == target)


def is_vowel(char: str) -> bool:
    """Return True if ``char`` is one of a, e, i, o, u in either case."""
    return _lower(_single_char(char)) in _VOWELS


def count_vowels(text: str) -> int:
    """Return the number of vowels in ``text``."""
    return sum(1 for c in text if is_vowel(c))


def split(text: str, delim: str) -> list[str]:
    """Split on ``delim`` and drop empty pieces."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return [piece for piece in text.split(delim) if piece]


def trim_left(text: str) -> str:
    """Remove leading spaces."""
    return text.lstrip(_SPACE)


def trim_right(text: str) -> str:
    """Remove trailing spaces."""
    return text.rstrip(_SPACE)


def trim(text: str) -> str:
    """Remove leading and trailing spaces."""
    return trim_left(trim_right(text))


def join_string(parts: Iterable[str], delim: str) -> str:
    """Join ``parts`` with ``delim`` between them."""
    return delim.join(parts)


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order, single-spaced."""
    return join_string(reversed(split(text, _SPACE)), _SPACE)


def replace_word(text: str, old: str, new: str, match_case: bool = True) -> str:
    """Replace whole words equal to ``old`` with ``new``.

    The result is rebuilt from the words, so runs of spaces collapse to one.
    """
    if match_case:
        matches = lambda word: word == old  # noqa: E731
    else:
        target = _lower_all(old)
        matches = lambda word: _lower_all(word) == target  # noqa: E731
    words = (new if matches(word) else word for word in split(text, _SPACE))
    return join_string(words, _SPACE)


def remove_punctuations(text: str) -> str:
    """Drop every ASCII punctuation character."""
    return "".join(c for c in text if c not in _PUNCTUATION)