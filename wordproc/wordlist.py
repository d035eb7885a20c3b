from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import questionary
import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .extract import collect_files, count_lines, err_console, read_files, read_lines
from .merge import write_words
from .pipeline import DEFAULT_STEPS, Stage, StepError, build_pipeline
from .qc import build_report, write_report

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


@dataclass
class AppConfig:
    source_path: Path
    output_path: Path


def fail(msg: str, code: int = 1) -> typer.Exit:
    err_console.print(f"[bold red]error[/bold red]: {escape(msg)}")
    return typer.Exit(code=code)


def require_source(source: Path) -> None:
    if not source.exists():
        raise fail(f"source path does not exist: {source}")


@app.callback()
def _global_options(
    ctx: typer.Context,
    source_path: Path = typer.Option(
        Path("lists"), "--source-path", "-s", envvar="WORDPROC_SOURCE_PATH",
        help="path to scan for word/password list files",
    ),
    output_path: Path = typer.Option(
        Path("output.lst"), "--output-path", "-o", envvar="WORDPROC_OUTPUT_PATH",
        help="path to write the processed word/password list",
    ),
):
    """
    Utilities to process word/password lists.
    """
    ctx.obj = AppConfig(source_path=source_path, output_path=output_path)


@app.command("run")
def cmd_run(
    ctx: typer.Context,
    step: Optional[List[str]] = typer.Option(
        None, "--step",
        help="pipeline step, repeatable: trim | remove-counts | dedup | length:MIN:MAX | alpha-only | has-symbol | prefix:TEXT",
    ),
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="only read files with these extensions (repeatable or comma-separated)"),
    recursive: bool = typer.Option(True, "--recursive/--no-recursive", help="walk subdirectories"),
    confirm_overwrite: bool = typer.Option(False, "--confirm-overwrite", help="ask before overwriting an existing output file"),
):
    """
    Read all lists under the source path, run the pipeline, write one word per line.
    """
    cfg: AppConfig = ctx.obj
    steps = list(step) if step else list(DEFAULT_STEPS)
    try:
        pipeline = build_pipeline(steps)
    except StepError as e:
        raise typer.BadParameter(str(e), param_hint="--step")

    require_source(cfg.source_path)

    out = cfg.output_path
    if confirm_overwrite and out.exists():
        ok = questionary.confirm(f"{out} exists. Overwrite?", default=False).ask()
        if not ok:
            raise fail(f"not overwriting {out}")

    rows: List[list] = []

    def on_stage(stage: Stage, words: List[str]) -> None:
        rows.append([Text(stage.name), "yes" if stage.preserves_order else "no", f"{len(words):,}"])

    try:
        files = collect_files(cfg.source_path, recursive=recursive, exts=ext)
        words = read_files(files)
        console.print(f"[extract] {len(files)} file(s), {len(words):,} line(s)", markup=False)
        result = pipeline.run(words, report=on_stage)
        n = write_words(out, result)
    except OSError as e:
        raise fail(str(e))

    table = Table(title="Pipeline result", box=box.SIMPLE_HEAVY)
    table.add_column("stage", style="bold")
    table.add_column("keeps order")
    table.add_column("count", justify="right")
    table.add_row("(input)", "-", f"{len(words):,}")
    for r in rows:
        table.add_row(*r)
    table.add_section()
    table.add_row("OUTPUT", "yes" if pipeline.preserves_order else "no", f"{n:,}")
    console.print(table)
    console.print(f"[bold green]Wrote[/bold green] {escape(str(out))}")


@app.command("sources")
def cmd_sources(
    ctx: typer.Context,
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="only list files with these extensions"),
    recursive: bool = typer.Option(True, "--recursive/--no-recursive", help="walk subdirectories"),
):
    """
    List the files a run would read, with line counts.
    """
    cfg: AppConfig = ctx.obj
    require_source(cfg.source_path)

    try:
        files = collect_files(cfg.source_path, recursive=recursive, exts=ext)
        counts = [count_lines(fp) for fp in files]
    except OSError as e:
        raise fail(str(e))

    table = Table(title="Sources", box=box.SIMPLE_HEAVY)
    table.add_column("#", justify="right")
    table.add_column("file", style="bold", overflow="fold")
    table.add_column("lines", justify="right")
    base = cfg.source_path if cfg.source_path.is_dir() else cfg.source_path.parent
    for i, (fp, cnt) in enumerate(zip(files, counts), start=1):
        table.add_row(str(i), Text(str(fp.relative_to(base))), f"{cnt:,}")
    table.add_section()
    table.add_row("", "TOTAL", f"{sum(counts):,}")
    console.print(table)


@app.command("stats")
def cmd_stats(
    ctx: typer.Context,
    top: int = typer.Option(20, "--top", help="how many prefixes/suffixes to show"),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="also write the report as json"),
):
    """
    QC report for the output list: counts, common first/last characters, lengths.
    """
    cfg: AppConfig = ctx.obj
    fp = cfg.output_path
    if not fp.exists():
        raise fail(f"output file does not exist: {fp}")

    try:
        words = read_lines(fp)
    except OSError as e:
        raise fail(str(e))
    report = build_report(words, top=top)

    summary = Table(title="Summary", box=box.SIMPLE_HEAVY)
    summary.add_column("metric", style="bold")
    summary.add_column("value", justify="right")
    summary.add_row("count", f"{report['count']:,}")
    summary.add_row("unique", f"{report['unique']:,}")
    summary.add_row("duplicates", f"{report['count'] - report['unique']:,}")
    console.print(summary)

    t2 = Table(title=f"Top {top} first/last characters", box=box.SIMPLE_HEAVY)
    t2.add_column("prefix", style="bold")
    t2.add_column("n", justify="right")
    t2.add_column("suffix", style="bold")
    t2.add_column("n", justify="right")
    pre = report[f"top_prefix_{top}"]
    suf = report[f"top_suffix_{top}"]

    def cells(items, i):
        if i >= len(items):
            return [Text(""), ""]
        ch, n = items[i]
        return [Text(repr(ch)), f"{n:,}"]

    for i in range(max(len(pre), len(suf))):
        t2.add_row(*cells(pre, i), *cells(suf, i))
    console.print(t2)

    t3 = Table(title="Lengths", box=box.SIMPLE_HEAVY)
    t3.add_column("length", justify="right")
    t3.add_column("count", justify="right")
    for length, cnt in report["lengths"]:
        t3.add_row(str(length), f"{cnt:,}")
    console.print(t3)

    if json_out is not None:
        try:
            write_report(report, json_out)
        except OSError as e:
            raise fail(str(e))
        console.print(f"[qc] report -> {json_out}", markup=False)
