from __future__ import annotations

import re
from typing import List, Pattern

# Only these three; \r and other unicode whitespace survive trimming.
TRIM_CHARS = " \t\n"

# "<count><whitespace><word>" as found in frequency-sorted leak lists, e.g. "4 Hello".
# The remainder must start with a non-whitespace char, so "123" and "123   " never match.
# The remainder is stripped of the same unicode whitespace the separator accepts.
COUNT_PREFIX = re.compile(r"^[0-9]+\s+(\S.*)$", re.DOTALL)


def trim_token(w: str) -> str:
    return w.strip(TRIM_CHARS)


def strip_count(w: str, pattern: Pattern[str] = COUNT_PREFIX) -> str:
    """
    "4 Hello" -> "Hello". Tokens without a leading count are returned as-is.
    """
    m = pattern.match(w)
    if m is None:
        return w
    return m.group(1).strip()


def trim_whitespace(words: List[str]) -> List[str]:
    return [trim_token(w) for w in words]


def remove_counts(words: List[str], pattern: Pattern[str] = COUNT_PREFIX) -> List[str]:
    """
    Strip occurrence-count prefixes from every word.
    `pattern` must capture the remainder in group 1.
    """
    return [strip_count(w, pattern) for w in words]


def add_prefix(words: List[str], prefix: str) -> List[str]:
    return [prefix + w for w in words]
