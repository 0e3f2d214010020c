"""Run statistics for segmentation and filtering."""

from dataclasses import dataclass, field
from typing import Dict

from rich.console import Console
from rich.table import Table

from thread_grep.core.segmenter import SegmentationStats

console = Console(stderr=True)


@dataclass
class RunStats:
    """Statistics for one filter run."""

    segmentation: SegmentationStats = field(default_factory=SegmentationStats)
    selected: int = 0
    invert: bool = False
    name_only: bool = False
    count_only: bool = False

    @property
    def rejected(self) -> int:
        """Number of records not selected."""
        return self.segmentation.records - self.selected

    @property
    def mode(self) -> str:
        """Human-readable description of the match mode."""
        parts = ["count" if self.count_only else "list"]
        if self.name_only:
            parts.append("name only")
        if self.invert:
            parts.append("inverted")
        return ", ".join(parts)

    def get_summary(self) -> Dict[str, int | str]:
        """Get summary statistics.

        Returns:
            Dictionary with summary stats
        """
        seg = self.segmentation
        return {
            "lines_read": seg.lines_read,
            "records": seg.records,
            "orphan_lines": seg.orphan_lines,
            "noise_lines": seg.noise_lines,
            "selected": self.selected,
            "rejected": self.rejected,
            "mode": self.mode,
        }

    def print_summary(self, out: Console | None = None):
        """Print a formatted summary table (to stderr by default)."""
        out = out or console
        summary = self.get_summary()

        table = Table(title="Thread Grep Statistics", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Lines Read", str(summary["lines_read"]))
        table.add_row("Thread Records", str(summary["records"]))
        table.add_row("Orphan Continuation Lines", str(summary["orphan_lines"]))
        table.add_row("Other Lines Skipped", str(summary["noise_lines"]))
        table.add_row("Selected", str(summary["selected"]))
        table.add_row("Not Selected", str(summary["rejected"]))
        table.add_row("Mode", summary["mode"])

        out.print(table)

        if summary["records"] == 0:
            out.print("[yellow]⚠ No thread headers found (lines containing both 'nid=' and 'tid=')[/yellow]")
