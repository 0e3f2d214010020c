"""Core thread dump segmentation and matching."""

from thread_grep.core.errors import PatternError, SegmentationError, ThreadGrepError
from thread_grep.core.matcher import (
    MatchConfig,
    compile_pattern,
    count_threads,
    format_threads,
    select_threads,
)
from thread_grep.core.segmenter import (
    SegmentationStats,
    Segmenter,
    SegmenterState,
    ThreadRecord,
    segment_threads,
)

__all__ = [
    "ThreadGrepError",
    "PatternError",
    "SegmentationError",
    "ThreadRecord",
    "Segmenter",
    "SegmenterState",
    "SegmentationStats",
    "segment_threads",
    "MatchConfig",
    "compile_pattern",
    "select_threads",
    "count_threads",
    "format_threads",
]
