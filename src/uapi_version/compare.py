# SPDX-License-Identifier: MIT
"""Version string comparison following the UAPI Version Format.

Both strings are walked in lock-step, one segment at a time. A segment is a
run of ASCII digits, a run of ASCII letters, or a single separator. The first
segment that differs decides the order:

    ~   pre-release marker, sorts before anything, even the end of the string
    -   version/release separator
    ^   patch-level separator
    .   point-release separator

Characters outside ``[A-Za-z0-9~^.-]`` are skipped wherever they occur.
"""

from __future__ import annotations

import logging
import string
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_ZERO = frozenset("0")

# Checked in this order after the end-of-string rule; '~' is handled before it.
_SEPARATORS = ("-", "^", ".")

_VALID_CHARS = _DIGITS | _LETTERS | frozenset("~-^.")


class Ordering(IntEnum):
    """Verdict of a comparison, usable wherever a ``-1/0/1`` int is expected."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Return the verdict with the operands swapped."""
        return Ordering(-self.value)


def is_valid_version_char(char: str) -> bool:
    """Return True if ``char`` takes part in version comparison.

    Examples:
        >>> is_valid_version_char("a")
        True
        >>> is_valid_version_char("^")
        True
        >>> is_valid_version_char("_")
        False
        >>> is_valid_version_char("٣")  # ARABIC-INDIC DIGIT THREE
        False
    """
    return char in _VALID_CHARS


def _compare(left, right) -> Ordering:
    return Ordering((left > right) - (left < right))


def _span(text: str, pos: int, chars: frozenset[str]) -> int:
    """Return the index just past the run of ``chars`` starting at ``pos``."""
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _skip_invalid(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] not in _VALID_CHARS:
        pos += 1
    return pos


def _compare_marker(marker: str, left: Optional[str], right: Optional[str]) -> Ordering:
    """The side holding ``marker`` sorts first."""
    return _compare(left != marker, right != marker)


def _decided(a: str, b: str, result: Ordering, rule: str) -> Ordering:
    logger.debug("%r vs %r: %s by %s rule", a, b, result.name, rule)
    return result


def strverscmp(a: str, b: str) -> Ordering:
    """Compare two version strings.

    Every string is a valid version, including the empty string and strings
    made only of characters that are ignored.

    Args:
        a: First version string
        b: Second version string

    Returns:
        Ordering.LESS if a is older than b, Ordering.EQUAL if they are
        equivalent, Ordering.GREATER if a is newer

    Raises:
        TypeError: If either argument is not a string

    Examples:
        >>> strverscmp("225.1", "2")
        <Ordering.GREATER: 1>
        >>> strverscmp("123~rc1", "123")
        <Ordering.LESS: -1>
        >>> strverscmp("0001", "1")
        <Ordering.EQUAL: 0>
    """
    for name, value in (("a", a), ("b", b)):
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string, got {type(value).__name__}")

    i = j = 0
    while True:
        i = _skip_invalid(a, i)
        j = _skip_invalid(b, j)
        left = a[i] if i < len(a) else None
        right = b[j] if j < len(b) else None

        if left == "~" or right == "~":
            result = _compare_marker("~", left, right)
            if result:
                return _decided(a, b, result, "~")
            i += 1
            j += 1
            continue

        # Whatever is left, even a lone separator, beats the end of the string
        if left is None or right is None:
            result = _compare(left is not None, right is not None)
            return _decided(a, b, result, "end" if result else "exhausted")

        marker = next((m for m in _SEPARATORS if left == m or right == m), None)
        if marker is not None:
            result = _compare_marker(marker, left, right)
            if result:
                return _decided(a, b, result, marker)
            i += 1
            j += 1
            continue

        if left in _DIGITS or right in _DIGITS:
            # Leading zeros carry no weight; a longer remaining run is larger
            i = _span(a, i, _ZERO)
            j = _span(b, j, _ZERO)
            end_a = _span(a, i, _DIGITS)
            end_b = _span(b, j, _DIGITS)
            run_a, run_b = a[i:end_a], b[j:end_b]
            result = _compare(len(run_a), len(run_b)) or _compare(run_a, run_b)
            rule = "numeric"
        else:
            end_a = _span(a, i, _LETTERS)
            end_b = _span(b, j, _LETTERS)
            result = _compare(a[i:end_a], b[j:end_b])
            rule = "alpha"

        if result:
            return _decided(a, b, result, rule)
        i, j = end_a, end_b
