# -*- coding: utf-8 -*-

# Author: Puneet Tiwari
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Boolean mask algebra over the robot's digital output lines.

- Pure Python (no ROS imports) for easy unit testing.
- toggle: XOR, set: OR, reset: material non-implication.
- Every operation works in place on a LineFrame and never changes its length;
  masks of the wrong length are rejected (returns False, frame untouched).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Sequence, Tuple


FRAME_SIZE = 8


class Color(IntEnum):
    """Line index bound to each indicator color."""
    RED = 0
    GREEN = 1
    YELLOW = 2
    BLUE = 3


CORE_COLORS: Tuple[Color, ...] = (Color.RED, Color.BLUE, Color.YELLOW, Color.GREEN)


@dataclass
class LineFrame:
    """
    Ordered line states broadcast together as one unit.

    Attributes:
        values: One boolean per output line; index i is line i.
    """
    values: List[bool] = field(default_factory=lambda: [False] * FRAME_SIZE)

    @classmethod
    def blank(cls, size: int = FRAME_SIZE) -> "LineFrame":
        return cls(values=[False] * size)

    def __len__(self) -> int:
        return len(self.values)

    def snapshot(self) -> List[bool]:
        """Return a copy safe to hand to a publisher."""
        return list(self.values)

    def lit(self) -> List[int]:
        return [i for i, v in enumerate(self.values) if v]


def line_mask(size: int, *lines: int) -> List[bool]:
    """Mask of `size` with only the given lines set."""
    mask = [False] * size
    for line in lines:
        mask[line] = True
    return mask


def core_colors_mask(size: int = FRAME_SIZE) -> List[bool]:
    return line_mask(size, *CORE_COLORS)


def is_lit(frame: LineFrame, line: int) -> bool:
    return frame.values[line]


def toggle_single(frame: LineFrame, line: int) -> bool:
    """XOR the frame with a one-hot mask on `line`."""
    if not 0 <= line < len(frame):
        return False
    mask = line_mask(len(frame), line)
    frame.values[:] = [v != m for v, m in zip(frame.values, mask)]
    return True


def toggle_pair(frame: LineFrame, line_a: int, line_b: int) -> bool:
    """
    Advance a two-color blink by one step.

    From fully off only `line_a` is lit; afterwards both lines are toggled,
    so the pair alternates a, b, a, b... rather than flashing together.
    """
    if not (0 <= line_a < len(frame) and 0 <= line_b < len(frame)):
        return False
    if not is_lit(frame, line_a) and not is_lit(frame, line_b):
        return toggle_single(frame, line_a)
    toggle_single(frame, line_a)
    return toggle_single(frame, line_b)


def set_masked(frame: LineFrame, mask: Sequence[bool]) -> bool:
    """Positionwise OR: light every masked line, never turn one off."""
    if len(mask) != len(frame):
        return False
    frame.values[:] = [v or bool(m) for v, m in zip(frame.values, mask)]
    return True


def reset_masked(frame: LineFrame, mask: Sequence[bool]) -> bool:
    """Positionwise non-implication: clear masked lines, leave the rest."""
    if len(mask) != len(frame):
        return False
    frame.values[:] = [not (not v or bool(m)) for v, m in zip(frame.values, mask)]
    return True
