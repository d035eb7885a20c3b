from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def deduplicate(words: Iterable[str]) -> List[str]:
    """
    Unique words, sorted by code point.

    Sorting is part of the contract: the output file layout is deterministic
    no matter how the input lists were ordered.
    """
    return sorted(set(words))


def write_words(out_path: Path, words: Iterable[str]) -> int:
    """
    Write one word per line (each followed by "\\n"), overwriting out_path.
    Returns the number of words written. OSError propagates.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with out_path.open("w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(w + "\n")
            n += 1
    return n
