"""Print selected thread records or their count."""

from functools import partial
from typing import Callable, Sequence

import click

from thread_grep.core.matcher import MatchConfig, count_threads, format_threads, select_threads
from thread_grep.core.segmenter import ThreadRecord

# Records are written verbatim, escape sequences included
echo_verbatim = partial(click.echo, color=True)


def byte_writer(encode: Callable[[str], bytes]) -> Callable[[str], None]:
    """Build a line writer that encodes text before echoing it.

    click writes bytes straight to the binary stream, so whatever the
    encoder produces (including surrogate-escaped input bytes) reaches
    stdout unchanged.
    """
    def write(line: str) -> None:
        click.echo(encode(line))
    return write


def write_report(
    records: Sequence[ThreadRecord],
    config: MatchConfig,
    count_only: bool = False,
    echo: Callable[[str], None] = echo_verbatim,
) -> int:
    """Write the report for a run.

    In list mode every selected record is written in input order with one
    blank line between records. In count mode only the number of selected
    records is written.

    Args:
        records: Segmented records
        config: Match configuration
        count_only: Write the count instead of the records
        echo: Line writer (appends its own newline)

    Returns:
        Number of selected records
    """
    if count_only:
        count = count_threads(records, config)
        echo(str(count))
        return count

    selected = list(select_threads(records, config))
    if selected:
        echo(format_threads(selected))
    return len(selected)
