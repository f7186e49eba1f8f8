from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence

import pandas as pd

from chartwindow.data.periods import window_length

Label = str | None
Value = str | int | float | None


@dataclass(frozen=True)
class WindowConfig:
    length: int

    @classmethod
    def from_period(cls, period: str, available: int) -> "WindowConfig":
        return cls(length=window_length(period, available))


@dataclass(frozen=True)
class WindowResult:
    labels: Sequence[Label]
    values: Sequence[Value]


@dataclass(frozen=True)
class LabeledSeries:
    labels: Sequence[Label]
    values: Sequence[Value]

    @property
    def is_aligned(self) -> bool:
        return len(self.labels) == len(self.values)

    def window(self, length: int) -> WindowResult:
        return window_slice(self.labels, self.values, length)


def _tail(seq: Any, length: int) -> Any:
    end = len(seq)
    start = max(0, end - length)
    # pandas objects: slice by position, not by index label
    if hasattr(seq, "iloc"):
        return seq.iloc[start:end]
    return seq[start:end]


def window_slice(labels: Sequence[Label], values: Sequence[Value], length: int) -> WindowResult:
    """
    Trailing `length` elements of labels and values.

    Each sequence is clamped by its own length, so inputs of different
    lengths can come back with different lengths. A negative length gives
    empty slices (the start index lands past the end).
    """
    return WindowResult(labels=_tail(labels, length), values=_tail(values, length))


def align_tail(labels: Sequence[Label], values: Sequence[Value]) -> LabeledSeries:
    """Trim both sequences to their common trailing length."""
    n = min(len(labels), len(values))
    return LabeledSeries(labels=_tail(labels, n), values=_tail(values, n))


def window_frame(df: pd.DataFrame, length: int) -> pd.DataFrame:
    return _tail(df, length)
