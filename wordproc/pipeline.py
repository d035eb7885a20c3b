"""
Pipeline of word-list transforms.

A Stage wraps one transform (List[str] -> List[str]) plus whether it keeps input
order. A Pipeline runs stages in sequence; each stage gets a fresh copy of the
previous stage's output and nothing else.

Steps are given as short strings (CLI --step):

  trim              strip space/tab/newline from both ends
  remove-counts     "4 Hello" -> "Hello"
  dedup             unique + sorted
  length:MIN:MAX    keep MIN <= len <= MAX
  alpha-only        keep words made only of letters
  has-symbol        keep words with at least one non-letter
  prefix:TEXT       prepend TEXT (everything after the first ':', spaces kept)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .filters import check_lengths, remove_contains_symbols, remove_lacking_symbols, remove_outside_lengths
from .merge import deduplicate
from .normalize import COUNT_PREFIX, add_prefix, remove_counts, trim_whitespace

Transform = Callable[[List[str]], List[str]]
Report = Callable[["Stage", List[str]], None]

DEFAULT_STEPS: Tuple[str, ...] = ("trim", "remove-counts", "dedup")


class StepError(ValueError):
    """Raised when a step string can't be turned into a Stage."""


@dataclass(frozen=True)
class Stage:
    name: str
    func: Transform
    preserves_order: bool = True

    def __call__(self, words: List[str]) -> List[str]:
        return self.func(words)


class Pipeline:
    def __init__(self, stages: Iterable[Stage] = ()) -> None:
        self.stages: Tuple[Stage, ...] = tuple(stages)

    def __repr__(self) -> str:
        return f"Pipeline({[s.name for s in self.stages]})"

    def __len__(self) -> int:
        return len(self.stages)

    @property
    def preserves_order(self) -> bool:
        return all(s.preserves_order for s in self.stages)

    def run(self, words: Iterable[str], report: Optional[Report] = None) -> List[str]:
        """Apply stages in order; zero stages returns a copy of the input."""
        cur = list(words)
        for stage in self.stages:
            cur = list(stage(list(cur)))
            if report is not None:
                report(stage, cur)
        return cur


def _parse_int(name: str, s: str) -> int:
    try:
        return int(s)
    except ValueError:
        raise StepError(f"{name}: expected an integer, got {s!r}") from None


def parse_step(spec: str) -> Stage:
    """Turn one step string into a Stage. Raises StepError."""
    name, sep, arg = spec.partition(":")
    name = name.strip().lower()

    if name == "trim":
        return Stage("trim", trim_whitespace)

    if name == "remove-counts":
        def xform(words: List[str]) -> List[str]:
            return remove_counts(words, COUNT_PREFIX)
        return Stage("remove-counts", xform)

    if name == "dedup":
        return Stage("dedup", deduplicate, preserves_order=False)

    if name == "alpha-only":
        return Stage("alpha-only", remove_contains_symbols)

    if name == "has-symbol":
        return Stage("has-symbol", remove_lacking_symbols)

    if name == "length":
        parts = arg.split(":") if sep else []
        if len(parts) != 2:
            raise StepError(f"length step expects length:MIN:MAX, got {spec!r}")
        lo = _parse_int("length", parts[0])
        hi = _parse_int("length", parts[1])
        try:
            check_lengths(lo, hi)
        except ValueError as e:
            raise StepError(str(e)) from None

        def xform(words: List[str]) -> List[str]:
            return remove_outside_lengths(words, lo, hi)
        return Stage(f"length:{lo}:{hi}", xform)

    if name == "prefix":
        if not sep:
            raise StepError(f"prefix step expects prefix:TEXT, got {spec!r}")

        def xform(words: List[str]) -> List[str]:
            return add_prefix(words, arg)
        return Stage(f"prefix:{arg}", xform)

    raise StepError(f"unknown step: {spec!r}")


def build_pipeline(steps: Sequence[str]) -> Pipeline:
    return Pipeline(parse_step(s) for s in steps)
