# SPDX-License-Identifier: MIT
"""Version comparison following the UAPI Version Format Specification.

Compatible with the ordering used by systemd and RPM: version strings are not
parsed against a fixed schema, every string has a well-defined place in the
total order.

Example:
    >>> from uapi_version import Version, strverscmp, sort_versions
    >>>
    >>> strverscmp("124", "123")
    <Ordering.GREATER: 1>
    >>>
    >>> Version("1.0.0") < Version("2.0.0")
    True
    >>>
    >>> sort_versions(["5.2", "abc-5", "1.0.0~rc1"])
    ['abc-5', '1.0.0~rc1', '5.2']
"""

import logging

__version__ = "0.1.0"

from .compare import (
    Ordering,
    strverscmp,
    is_valid_version_char,
)
from .version import (
    Version,
    compare_versions,
    version_key,
    sort_versions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # String comparison
    "Ordering",
    "strverscmp",
    "is_valid_version_char",
    # Version values
    "Version",
    "compare_versions",
    "version_key",
    "sort_versions",
]
