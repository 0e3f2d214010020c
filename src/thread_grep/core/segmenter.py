"""Thread dump segmentation.

Splits a raw dump (``jstack`` and similar) into one record per thread. A
thread starts at a line carrying both ``nid=`` and ``tid=`` markers and
continues over the following lines that begin with a space or a tab:

```
"main" #1 prio=5 os_prio=0 tid=0x00007f3c8c00a800 nid=0x1c03 runnable
   java.lang.Thread.State: RUNNABLE
	at java.io.FileInputStream.readBytes(Native Method)

"GC task thread#0 (ParallelGC)" os_prio=0 tid=0x00007f3c8c01f800 nid=0x1c04 runnable
```

Anything else (banner text, blank lines, JNI summary) closes the current
record and is otherwise ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from thread_grep.core.errors import SegmentationError

HEADER_MARKERS = ("nid=", "tid=")


@dataclass(frozen=True)
class ThreadRecord:
    """A single thread entry from a dump."""

    header: str  # First line, verbatim
    name: str  # Text between the first and last double quote of the header
    body: str = ""  # Continuation lines joined with newlines

    @property
    def text(self) -> str:
        """Display text: the header, followed by the body when present."""
        if self.body:
            return self.header + "\n" + self.body
        return self.header


@dataclass
class SegmentationStats:
    """Counters collected while splitting a dump into records."""

    lines_read: int = 0
    records: int = 0
    orphan_lines: int = 0  # Continuation lines seen before any header
    noise_lines: int = 0  # Non-empty lines that are neither header nor continuation


class SegmenterState(Enum):
    """Position of the segmenter relative to thread records."""
    IDLE = "idle"  # Not inside a record
    IN_RECORD = "in_record"  # Collecting continuation lines


def is_continuation(line: str) -> bool:
    """Check if a line continues the current record (leading space or tab)."""
    return line[:1] in (" ", "\t")


def is_thread_header(line: str) -> bool:
    """Check if a line starts a new thread record."""
    return bool(line) and all(marker in line for marker in HEADER_MARKERS)


def extract_thread_name(header: str) -> str | None:
    """Return the quoted thread name from a header line, or None if absent."""
    start = header.find('"')
    end = header.rfind('"')
    if start < 0 or end <= start:
        return None
    return header[start + 1:end]


def build_record(lines: List[str], line_number: int = 1) -> ThreadRecord:
    """Turn the collected lines of one thread into a record.

    Args:
        lines: Header line followed by its continuation lines
        line_number: 1-based input line of the header (for error reporting)

    Returns:
        The finished record

    Raises:
        SegmentationError: If the header has no quoted thread name
    """
    header = lines[0]
    name = extract_thread_name(header)
    if name is None:
        raise SegmentationError(line_number, header)
    return ThreadRecord(header=header, name=name, body="\n".join(lines[1:]))


class Segmenter:
    """Line-oriented, single pass thread dump segmenter."""

    def __init__(self):
        """Initialize the segmenter."""
        self.stats = SegmentationStats()
        self._state = SegmenterState.IDLE
        self._lines: List[str] = []
        self._header_line = 0

    @property
    def state(self) -> SegmenterState:
        """Current state of the segmenter."""
        return self._state

    def segment(self, text: str) -> List[ThreadRecord]:
        """Split dump text into thread records.

        Args:
            text: Entire thread dump

        Returns:
            Records in input order (empty if no thread header was found)

        Raises:
            SegmentationError: If any thread header lacks a quoted name. No
                records are returned in that case.
        """
        self.stats = SegmentationStats()
        self._reset()
        records: List[ThreadRecord] = []

        for number, line in enumerate(text.split("\n"), start=1):
            self.stats.lines_read += 1

            if line and is_continuation(line):
                if self._state is SegmenterState.IN_RECORD:
                    self._lines.append(line)
                else:
                    self.stats.orphan_lines += 1
                continue

            # Boundary line
            if self._state is SegmenterState.IN_RECORD:
                records.append(self._finish())

            if is_thread_header(line):
                self._start(line, number)
            elif line:
                self.stats.noise_lines += 1

        if self._state is SegmenterState.IN_RECORD:
            records.append(self._finish())

        self.stats.records = len(records)
        return records

    def _start(self, header: str, line_number: int) -> None:
        self._lines = [header]
        self._header_line = line_number
        self._state = SegmenterState.IN_RECORD

    def _finish(self) -> ThreadRecord:
        try:
            return build_record(self._lines, self._header_line)
        finally:
            self._reset()

    def _reset(self) -> None:
        self._lines = []
        self._header_line = 0
        self._state = SegmenterState.IDLE


def segment_threads(text: str) -> List[ThreadRecord]:
    """Split dump text into thread records (convenience function).

    Args:
        text: Entire thread dump

    Returns:
        Records in input order
    """
    return Segmenter().segment(text)
