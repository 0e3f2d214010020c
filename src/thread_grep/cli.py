"""CLI interface for thread-grep."""

import sys
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from thread_grep import __version__
from thread_grep.config import get_settings
from thread_grep.core import (
    MatchConfig,
    PatternError,
    SegmentationError,
    Segmenter,
    compile_pattern,
)
from thread_grep.report import byte_writer, write_report
from thread_grep.stats import RunStats

# Records go to stdout as raw bytes; everything else goes here
console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise click.Abort()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("pattern")
@click.option("-v", "invert", is_flag=True, help="Invert matching")
@click.option("-c", "count_only", is_flag=True, help="Print number of matching threads")
@click.option("-name", "name_only", is_flag=True, help="Match on thread name only")
@click.option("-i", "--ignore-case", is_flag=True, help="Match case-insensitively")
@click.option("--stats", "show_stats", is_flag=True, help="Print run statistics to stderr")
@click.version_option(version=__version__, prog_name="thread-grep")
def cli(
    pattern: str,
    invert: bool,
    count_only: bool,
    name_only: bool,
    ignore_case: bool,
    show_stats: bool,
) -> None:
    """Filter a thread dump read from standard input by PATTERN.

    Each thread is a header line containing 'nid=' and 'tid=' followed by
    its indented stack lines. Matching threads are printed separated by a
    blank line.

    Example:
        jstack 4242 | thread-grep -name '^pool-'
        jstack 4242 | thread-grep -c -v 'State: RUNNABLE'
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"invalid configuration: {e}")

    # Compile before touching stdin so a bad pattern fails fast
    try:
        compiled = compile_pattern(pattern, ignore_case=ignore_case or settings.ignore_case)
    except PatternError as e:
        _fail(str(e))

    try:
        text = settings.decode(sys.stdin.buffer.read())
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"error reading stdin: {e}")

    segmenter = Segmenter()
    try:
        records = segmenter.segment(text)
    except SegmentationError as e:
        _fail(f"error parsing stack dump: {e}")

    config = MatchConfig(pattern=compiled, invert=invert, name_only=name_only)
    selected = write_report(records, config, count_only=count_only, echo=byte_writer(settings.encode))

    if show_stats or settings.show_stats:
        RunStats(
            segmentation=segmenter.stats,
            selected=selected,
            invert=invert,
            name_only=name_only,
            count_only=count_only,
        ).print_summary(console)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
