"""Pure parsers from raw parameter strings to typed values.

Each parser returns the typed value or ``None`` when the string is
malformed; the resolver turns ``None`` into ``InvalidParameterError``.
"""

from __future__ import annotations

import re
from typing import Final

I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1
U64_MAX: Final[int] = 2**64 - 1

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"true", "1"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"false", "0"})

# int() also accepts surrounding whitespace, "_" separators and non-ASCII digits.
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")


def _to_int(raw: str, pattern: re.Pattern[str]) -> int | None:
    if not pattern.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits() are out of range anyway.
        return None


def parse_bool(raw: str) -> bool | None:
    if raw in _TRUE_TOKENS:
        return True
    if raw in _FALSE_TOKENS:
        return False
    return None


def parse_i64(raw: str) -> int | None:
    value = _to_int(raw, _SIGNED_RE)
    if value is None or not I64_MIN <= value <= I64_MAX:
        return None
    return value


def parse_u64(raw: str) -> int | None:
    """Parse an unsigned 64-bit integer; any leading sign is rejected."""
    value = _to_int(raw, _UNSIGNED_RE)
    if value is None or value > U64_MAX:
        return None
    return value
