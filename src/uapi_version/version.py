# SPDX-License-Identifier: MIT
"""Version values ordered by :func:`~uapi_version.compare.strverscmp`."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cmp_to_key, total_ordering
from typing import Any, Iterable, Union

from .compare import Ordering, strverscmp

# Segments as strverscmp walks them; anything else is skipped
_SEGMENT_PATTERN = re.compile(r"[0-9]+|[A-Za-z]+|[~^.-]")


def _segments(value: str) -> tuple[str, ...]:
    """Return the non-empty segments of ``value``, digit runs without leading zeros.

    Two strings that compare equal always produce the same tuple. The reverse
    does not hold (``"0"`` and ``""`` differ), which is fine for hashing.
    """
    segments = []
    for match in _SEGMENT_PATTERN.finditer(value):
        segment = match.group()
        if segment[0].isdigit():
            segment = segment.lstrip("0")
        if segment:
            segments.append(segment)
    return tuple(segments)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A version string with UAPI ordering.

    The string is stored verbatim: no parsing, no validation, no
    normalization. Equality and ordering come from :func:`strverscmp`, so
    ``Version("0") == Version("0___")`` even though the stored strings differ.

    Attributes:
        value: The version string as given

    Examples:
        >>> Version("225.1") > Version("2")
        True
        >>> sorted(map(Version, ["5.2", "abc-5", "1.0.0~rc1"]))
        [Version(value='abc-5'), Version(value='1.0.0~rc1'), Version(value='5.2')]
    """

    value: str

    def __post_init__(self) -> None:
        if isinstance(self.value, Version):
            object.__setattr__(self, "value", self.value.value)
        elif not isinstance(self.value, str):
            raise TypeError(
                f"Version must be built from a string, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def as_str(self) -> str:
        """Return the stored version string."""
        return self.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return strverscmp(self.value, other.value) == Ordering.EQUAL

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return strverscmp(self.value, other.value) == Ordering.LESS

    def __hash__(self) -> int:
        return hash(_segments(self.value))


def _as_str(version: Union[str, Version]) -> str:
    return version.value if isinstance(version, Version) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two versions given as strings or Version objects.

    Args:
        version1: First version
        version2: Second version

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER, which compare
        equal to -1, 0 and 1

    Examples:
        >>> compare_versions("1.0.0", Version("2.0.0"))
        <Ordering.LESS: -1>
        >>> compare_versions(Version("1.0"), "1.00") == 0
        True
    """
    return strverscmp(_as_str(version1), _as_str(version2))


_VersionKey = cmp_to_key(compare_versions)


def version_key(version: Union[str, Version]) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0~rc1"], key=version_key)
        ['1.0.0~rc1', '1.0.0', '2.0.0']
    """
    return _VersionKey(version)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Union[str, Version]]:
    """Return ``versions`` sorted oldest first (newest first with ``reverse``).

    The sort is stable: versions that compare equal, such as ``"1.0"`` and
    ``"1.00"``, keep their input order.
    """
    return sorted(versions, key=version_key, reverse=reverse)
