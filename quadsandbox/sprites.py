"""Animated sprites cut from a sprite sheet laid out as a grid of frames."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

FRAME_SIZE = 184.0
SHEET_COLUMNS = 5
DEFAULT_FPS = 20.0


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in texture pixels."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class FrameSeq:
    """A run of frame indices on the sheet, ``start`` included, ``end`` excluded."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


DEFAULT_SEQUENCES = (FrameSeq(11, 20), FrameSeq(21, 23))


@dataclass
class Frames:
    """A sprite sheet of square frames numbered row by row."""

    num_cols: int
    sequences: Sequence[FrameSeq]
    frame_width: float = FRAME_SIZE
    frame_height: float = FRAME_SIZE

    def __post_init__(self) -> None:
        if self.num_cols <= 0:
            raise ValueError("a sheet needs at least one column")

    def source_rect(self, seq_id: int, frame: int) -> Rect:
        """Area of the sheet showing ``frame`` of sequence ``seq_id``; frames loop."""
        if not 0 <= seq_id < len(self.sequences):
            raise IndexError(f"no frame sequence {seq_id}")
        seq = self.sequences[seq_id]
        length = seq.end - seq.start
        if length == 0:
            raise ValueError(f"frame sequence {seq_id} is empty")
        frame_id = _trunc_rem(frame, length) + seq.start
        row = _trunc_div(frame_id, self.num_cols)
        col = _trunc_rem(frame_id, self.num_cols)
        return Rect(
            col * self.frame_width,
            row * self.frame_height,
            self.frame_width,
            self.frame_height,
        )


@dataclass
class Sprite:
    """Plays the first sequence of a sheet at a fixed frame rate."""

    frames: Frames
    fps: float = DEFAULT_FPS
    time: float = field(default=0.0)

    def advance(self, dt: float) -> Rect:
        """Let ``dt`` seconds pass and return the frame to show now."""
        self.time += dt
        return self.frames.source_rect(0, int(self.time * self.fps))


@dataclass(frozen=True)
class GridFrames:
    """A texture split evenly into ``num_rows`` by ``num_cols`` frames."""

    texture_width: float
    texture_height: float
    num_rows: int
    num_cols: int

    def __post_init__(self) -> None:
        if self.num_rows <= 0 or self.num_cols <= 0:
            raise ValueError("grid dimensions must be positive")

    def source_rect(self, row: int, col: int) -> Rect:
        """Area of the texture holding the frame at (row, col)."""
        frame_width = self.texture_width / self.num_rows
        frame_height = self.texture_height / self.num_cols
        return Rect(row * frame_width, col * frame_height, frame_width, frame_height)