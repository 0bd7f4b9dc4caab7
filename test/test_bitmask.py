#!/usr/bin/env python3
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

import pytest

from robotino_leds.core.bitmask import (
    FRAME_SIZE,
    Color,
    LineFrame,
    core_colors_mask,
    is_lit,
    reset_masked,
    set_masked,
    toggle_pair,
    toggle_single,
)

PATTERN = [True, False, True, True, False, False, True, False]


def test_blank_frame_has_fixed_width_and_is_off():
    frame = LineFrame()
    assert len(frame) == FRAME_SIZE == 8
    assert frame.lit() == []

def test_core_colors_mask_covers_the_four_colors_only():
    assert core_colors_mask() == [True, True, True, True, False, False, False, False]

@pytest.mark.parametrize("line", range(FRAME_SIZE))
def test_toggle_single_is_an_involution(line):
    frame = LineFrame(values=list(PATTERN))
    assert toggle_single(frame, line)
    assert frame.values[line] is not PATTERN[line]
    assert [v for i, v in enumerate(frame.values) if i != line] == \
        [v for i, v in enumerate(PATTERN) if i != line]
    toggle_single(frame, line)
    assert frame.values == PATTERN

def test_toggle_single_out_of_range_is_rejected():
    frame = LineFrame(values=list(PATTERN))
    assert not toggle_single(frame, FRAME_SIZE)
    assert not toggle_single(frame, -1)
    assert frame.values == PATTERN

def test_toggle_pair_starts_with_first_line_then_alternates():
    frame = LineFrame()
    toggle_pair(frame, Color.RED, Color.BLUE)
    assert frame.lit() == [Color.RED]
    toggle_pair(frame, Color.RED, Color.BLUE)
    assert frame.lit() == [Color.BLUE]
    toggle_pair(frame, Color.RED, Color.BLUE)
    assert frame.lit() == [Color.RED]

def test_toggle_pair_with_both_lit_turns_both_off():
    frame = LineFrame()
    set_masked(frame, core_colors_mask())
    toggle_pair(frame, Color.GREEN, Color.RED)
    assert not is_lit(frame, Color.GREEN) and not is_lit(frame, Color.RED)
    assert is_lit(frame, Color.YELLOW) and is_lit(frame, Color.BLUE)

def test_set_masked_is_idempotent_and_never_clears():
    frame = LineFrame(values=list(PATTERN))
    mask = [False, True, False, False, True, False, False, False]
    assert set_masked(frame, mask)
    once = frame.snapshot()
    assert set_masked(frame, mask)
    assert frame.values == once
    assert all(frame.values[i] for i, v in enumerate(PATTERN) if v)

def test_reset_masked_clears_masked_lines_only():
    frame = LineFrame(values=list(PATTERN))
    assert reset_masked(frame, core_colors_mask())
    assert frame.values == [False, False, False, False, False, False, True, False]

def test_reset_then_set_lights_every_masked_line():
    for start in (LineFrame(), LineFrame(values=list(PATTERN))):
        mask = core_colors_mask()
        reset_masked(start, mask)
        set_masked(start, mask)
        assert all(start.values[i] for i, m in enumerate(mask) if m)

@pytest.mark.parametrize("op", [set_masked, reset_masked])
@pytest.mark.parametrize("width", [0, 4, 7, 9])
def test_mask_width_mismatch_is_rejected_without_mutation(op, width):
    frame = LineFrame(values=list(PATTERN))
    assert op(frame, [True] * width) is False
    assert frame.values == PATTERN

def test_snapshot_is_a_copy():
    frame = LineFrame()
    snap = frame.snapshot()
    toggle_single(frame, Color.RED)
    assert snap == [False] * FRAME_SIZE
