from __future__ import annotations

from typing import List


def is_letters(w: str) -> bool:
    # str.isalpha is the L* categories; combining marks (Mn/Mc) are not letters
    # all() is vacuously true, so "" counts as letters-only
    return all(ch.isalpha() for ch in w)


def has_symbol(w: str) -> bool:
    # "" has no non-alphabetic char, so it is not kept by remove_lacking_symbols
    return any(not ch.isalpha() for ch in w)


def remove_contains_symbols(words: List[str]) -> List[str]:
    """
    Keep only words made of alphabetic characters (unicode letters).
    Anything with a digit, punctuation, symbol or space is dropped.
    """
    return [w for w in words if is_letters(w)]


def remove_lacking_symbols(words: List[str]) -> List[str]:
    """
    Keep only words with at least one non-alphabetic character.
    """
    return [w for w in words if has_symbol(w)]


def check_lengths(min_len: int, max_len: int) -> None:
    if min_len < 0 or max_len < 0:
        raise ValueError(f"length bounds must be non-negative: {min_len}..{max_len}")
    if min_len > max_len:
        raise ValueError(f"min length greater than max length: {min_len} > {max_len}")


def remove_outside_lengths(words: List[str], min_len: int, max_len: int) -> List[str]:
    """
    Keep words whose length in characters (not bytes) is within [min_len, max_len].
    """
    return [w for w in words if min_len <= len(w) <= max_len]
