"""Positional difference extraction between two masked bytecode strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..constants import CONTEXT_SIZE


@dataclass(frozen=True)
class DifferenceRun:
    """Maximal span where the two strings disagree at every position.

    ``end`` is inclusive. A content string is shorter than the run (possibly
    empty) when that file ran out of characters inside the span.
    """

    start: int
    end: int
    content1: str
    content2: str

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "length": self.length,
            "content1": self.content1,
            "content2": self.content2,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Difference runs plus aggregate statistics."""

    runs: tuple[DifferenceRun, ...] = field(default_factory=tuple)
    total_different_chars: int = 0
    percent_different: float = 0.0
    compared_length: int = 0

    @property
    def identical(self) -> bool:
        return not self.runs

    def to_dict(self) -> dict:
        return {
            "identical": self.identical,
            "runs": [run.to_dict() for run in self.runs],
            "total_different_chars": self.total_different_chars,
            "percent_different": self.percent_different,
            "compared_length": self.compared_length,
        }


def _char_at(text: str, index: int) -> Optional[str]:
    """Character at ``index`` or None past the end."""
    return text[index] if index < len(text) else None


def find_difference_runs(text1: str, text2: str) -> list[DifferenceRun]:
    """Group contiguous mismatching positions into runs.

    Positions past the end of the shorter string count as absent, and an
    absent character never equals a present one.
    """
    runs: list[DifferenceRun] = []
    limit = max(len(text1), len(text2))
    run_start: Optional[int] = None

    for index in range(limit):
        char1 = _char_at(text1, index)
        char2 = _char_at(text2, index)
        mismatch = char1 is None or char2 is None or char1 != char2

        if mismatch:
            if run_start is None:
                run_start = index
        elif run_start is not None:
            runs.append(
                DifferenceRun(
                    start=run_start,
                    end=index - 1,
                    content1=text1[run_start:index],
                    content2=text2[run_start:index],
                )
            )
            run_start = None

    if run_start is not None:
        runs.append(
            DifferenceRun(
                start=run_start,
                end=limit - 1,
                content1=text1[run_start:],
                content2=text2[run_start:],
            )
        )

    return runs


def compare_masked(text1: str, text2: str) -> ComparisonResult:
    """Compare two masked strings position by position."""
    compared_length = max(len(text1), len(text2))
    if text1 == text2:
        return ComparisonResult(compared_length=compared_length)

    runs = find_difference_runs(text1, text2)
    total = sum(run.length for run in runs)
    percent = round(total / compared_length * 100, 2) if compared_length else 0.0

    return ComparisonResult(
        runs=tuple(runs),
        total_different_chars=total,
        percent_different=percent,
        compared_length=compared_length,
    )


def context_window(text: str, run: DifferenceRun, size: int = CONTEXT_SIZE) -> tuple[str, str]:
    """Up to ``size`` characters of ``text`` before and after ``run``, clipped to bounds."""
    before = text[max(0, run.start - size):run.start]
    after = text[run.end + 1:run.end + 1 + size]
    return before, after
