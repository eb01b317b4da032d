"""Data models for the colocount core module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

# Pair order used by every result matrix: (1,2), (1,3), (2,3).
CHANNEL_PAIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, 2), (1, 2))
PAIR_LABELS: tuple[str, ...] = ("1-2", "1-3", "2-3")

# Third-channel labels that mean "the image only has two channels".
EMPTY_CHANNEL_LABELS = frozenset({"", "none"})


def is_empty_channel_label(label: str) -> bool:
    """True if a channel label denotes an absent channel."""
    return label.strip().lower() in EMPTY_CHANNEL_LABELS


@dataclass(frozen=True, eq=False)
class RoiPixelSet:
    """Coordinates of the "on" pixels of a mask, in row-major order.

    Attributes:
        rows: Row index of every ROI pixel.
        cols: Column index of every ROI pixel.
        shape: (Y, X) shape of the mask the coordinates came from.
    """

    rows: np.ndarray
    cols: np.ndarray
    shape: tuple[int, int]

    @property
    def total_mask_pixels(self) -> int:
        return int(self.rows.size)

    def coordinates(self) -> Iterator[tuple[int, int]]:
        """Yield (row, col) tuples for every ROI pixel."""
        for r, c in zip(self.rows.tolist(), self.cols.tolist()):
            yield r, c

    def __len__(self) -> int:
        return self.total_mask_pixels


@dataclass(frozen=True)
class AnalysisMetadata:
    """Descriptive information attached to a persisted result."""

    channel_names: tuple[str, str, str]
    median_filtered: bool
    has_channel3: bool

    def info_lines(self) -> list[str]:
        """The four human-readable info strings stored alongside results."""
        ch1, ch2, ch3 = self.channel_names
        lines = [f"channel 1={ch1}", f"channel 2={ch2}"]
        if self.has_channel3:
            lines.append(f"channel 3={ch3}")
        else:
            lines.append("channel 3 is empty")
        lines.append("median filtered" if self.median_filtered else "no median filter")
        return lines


@dataclass(frozen=True)
class PerFrameResult:
    """Coincidence counts for a single frame.

    Attributes:
        frame_index: Zero-based frame position in the stack.
        pixels: Coincident ROI pixels per pair (1-2, 1-3, 2-3).
        percent: ``pixels / total_mask_pixels * 100`` per pair.
        thresholds: Binarisation threshold used for channels 1, 2, 3.
    """

    frame_index: int
    pixels: tuple[int, int, int]
    percent: tuple[float, float, float]
    thresholds: tuple[float, float, float] | None = None


@dataclass(frozen=True)
class AggregateResult:
    """Whole-stack totals.

    Attributes:
        total_pixels: Sum of per-frame coincident pixels per pair.
        total_percent: ``total_pixels / (frame_count * total_mask_pixels) * 100``.
        frame_count: Number of frames aggregated.
        total_mask_pixels: ROI size of a single frame.
    """

    total_pixels: tuple[int, int, int]
    total_percent: tuple[float, float, float]
    frame_count: int
    total_mask_pixels: int


@dataclass(frozen=True)
class ColocalizationResult:
    """Complete output of one analysis run."""

    metadata: AnalysisMetadata
    per_frame: tuple[PerFrameResult, ...]
    aggregate: AggregateResult

    @property
    def per_frame_pixels(self) -> np.ndarray:
        """Frame-count x 3 integer matrix of coincident pixels."""
        return np.array([r.pixels for r in self.per_frame], dtype=np.int64).reshape(-1, 3)

    @property
    def per_frame_percent(self) -> np.ndarray:
        """Frame-count x 3 float matrix of coincidence percentages."""
        return np.array([r.percent for r in self.per_frame], dtype=np.float64).reshape(-1, 3)

    @property
    def frame_count(self) -> int:
        return len(self.per_frame)
