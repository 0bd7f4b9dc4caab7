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
Periodic signaler: decides, once per tick, whether the controller blinks.

Ticks run at twice the base frequency so both colors of a pair get a visible
half period each. Idle state produces no tick and no broadcast.
"""

from __future__ import annotations
from typing import Optional

from .controller import LedController

MIN_TICK_PERIOD = 0.01


class PeriodicSignaler:

    def __init__(self, controller: LedController) -> None:
        self._controller = controller
        self._ticks = 0

    @property
    def tick_period(self) -> float:
        """Seconds between ticks: 1 / (2 * frequency)."""
        return max(MIN_TICK_PERIOD, 1.0 / (2.0 * self._controller.frequency))

    @property
    def ticks(self) -> int:
        """Number of ticks that actually signaled."""
        return self._ticks

    def on_tick(self) -> Optional[bool]:
        """Run one tick. Returns None when idle, else the tick's success flag."""
        if self._controller.state.is_idle:
            return None
        self._ticks += 1
        return self._controller.tick()
