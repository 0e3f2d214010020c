"""Exceptions raised while parsing and filtering thread dumps."""


class ThreadGrepError(Exception):
    """Base exception for thread-grep errors."""
    pass


class PatternError(ThreadGrepError):
    """The search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class SegmentationError(ThreadGrepError):
    """A thread header line has no quoted thread name."""

    def __init__(self, line_number: int, header: str):
        self.line_number = line_number
        self.header = header
        super().__init__(f"no thread name found in header at line {line_number}: {header!r}")
