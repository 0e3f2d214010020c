"""Pattern matching over thread records."""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from thread_grep.core.errors import PatternError
from thread_grep.core.segmenter import ThreadRecord


def compile_pattern(expression: str, ignore_case: bool = False) -> re.Pattern:
    """Compile a search pattern.

    Args:
        expression: Regular expression source
        ignore_case: Whether to match case-insensitively

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the expression is not a valid regular expression
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(expression, flags)
    except re.error as e:
        raise PatternError(expression, str(e)) from e


@dataclass(frozen=True)
class MatchConfig:
    """How records are matched during one run."""

    pattern: re.Pattern
    invert: bool = False
    name_only: bool = False

    def candidate(self, record: ThreadRecord) -> str:
        """Text of the record the pattern is applied to."""
        return record.name if self.name_only else record.text

    def matches(self, record: ThreadRecord) -> bool:
        """Check if the pattern occurs anywhere in the candidate text."""
        return self.pattern.search(self.candidate(record)) is not None

    def selects(self, record: ThreadRecord) -> bool:
        """Check if the record is selected (match, or non-match when inverted)."""
        return self.matches(record) != self.invert


def select_threads(records: Iterable[ThreadRecord], config: MatchConfig) -> Iterator[ThreadRecord]:
    """Yield selected records in input order."""
    for record in records:
        if config.selects(record):
            yield record


def count_threads(records: Iterable[ThreadRecord], config: MatchConfig) -> int:
    """Count selected records."""
    return sum(1 for _ in select_threads(records, config))


def format_threads(records: Iterable[ThreadRecord]) -> str:
    """Join display texts with a single blank line between records."""
    return "\n\n".join(record.text for record in records)
