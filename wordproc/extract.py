from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, soft_wrap=True)


def list_files(root: Path, recursive: bool = False) -> List[Path]:
    """
    All regular files under root, sorted by path.
    With recursive=True subdirectories are walked too.
    Unreadable directories raise OSError.
    """
    files: List[Path] = []
    for p in sorted(root.iterdir()):
        if p.is_file():
            files.append(p)
        elif recursive and p.is_dir():
            files.extend(list_files(p, recursive=True))
    files.sort()
    return files


def normalize_exts(exts: Optional[Iterable[str]]) -> List[str]:
    # accept "txt", ".txt" and "txt,lst"
    out: List[str] = []
    for e in exts or []:
        for x in e.split(","):
            x = x.strip().lstrip(".")
            if x:
                out.append(x)
    return out


def filter_extensions(files: Iterable[Path], exts: Optional[Iterable[str]]) -> List[Path]:
    """
    Keep files whose extension is in exts. No exts means keep everything.
    Files without an extension are dropped when filtering.
    """
    allowed = set(normalize_exts(exts))
    if not allowed:
        return list(files)
    return [f for f in files if f.suffix and f.suffix[1:] in allowed]


def read_lines(fp: Path) -> List[str]:
    """
    Read non-empty lines from fp as UTF-8.
    Lines that fail to decode are dropped with a warning; the rest of the file still counts.
    """
    with fp.open("rb") as f:
        data = f.read()

    out: List[str] = []
    for lineno, raw in enumerate(data.split(b"\n"), start=1):
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            err_console.print(f"[yellow]Warning[/yellow]: error in file {escape(str(fp))}:{lineno}: {escape(str(e))}")
            continue
        if line:
            out.append(line)
    return out


def count_lines(fp: Path) -> int:
    n = 0
    with fp.open("rb") as f:
        for _ in f:
            n += 1
    return n


def read_files(files: Iterable[Path]) -> List[str]:
    words: List[str] = []
    for fp in files:
        words.extend(read_lines(fp))
    return words


def collect_files(source: Path, recursive: bool = True, exts: Optional[Iterable[str]] = None) -> List[Path]:
    """
    Files a run would read. A plain file source is taken as-is, ignoring exts.
    """
    if source.is_file():
        return [source]
    return filter_extensions(list_files(source, recursive=recursive), exts)


def collect_words(source: Path, recursive: bool = True, exts: Optional[Iterable[str]] = None) -> List[str]:
    return read_files(collect_files(source, recursive=recursive, exts=exts))
