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
LED signaling controller.

Owns the single LineFrame and the StateMachine; every frame change goes out
through the injected `broadcast` callback (the ROS node wires it to a
publisher, tests wire it to a list). `sleep` is injectable too so the
blocking end signal can be exercised without waiting.
"""

from __future__ import annotations
from math import isfinite
from typing import Callable, List, Optional
import time

from .behavior import apply_tick
from .bitmask import FRAME_SIZE, LineFrame, core_colors_mask, reset_masked, set_masked
from .state_machine import Event, Mode, Place, Product, SignalingState, StateMachine

Broadcast = Callable[[List[bool]], None]

END_BLINKS = 3


class LedController:
    """
    Route/product signaling on a bank of digital output lines.

    Semantics:
        - assign_route / assign_product first switch the core colors off and
          broadcast, then store whatever part of the request is valid (None
          means invalid). They report success only when everything was valid.
        - abort returns to idle and blinks all core colors END_BLINKS times.
        - tick advances the product/route blink by one step and broadcasts.
    """

    def __init__(
        self,
        broadcast: Broadcast,
        frequency: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        size: int = FRAME_SIZE,
        history_size: int = 64,
    ) -> None:
        self._broadcast = broadcast
        self._sleep = sleep
        self._frame = LineFrame.blank(size)
        self._core_mask = core_colors_mask(size)
        self._sm = StateMachine(history_size=history_size)
        self._frequency = 1.0
        self.frequency = frequency

    # ------- Properties ------- #

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        value = float(value)
        if not isfinite(value) or value <= 0.0:
            raise ValueError(f'frequency must be finite and > 0, got {value}')
        self._frequency = value

    @property
    def half_period(self) -> float:
        """Wait between end-signal steps, in seconds."""
        return 0.5 / self._frequency

    @property
    def frame(self) -> LineFrame:
        return self._frame

    @property
    def state(self) -> SignalingState:
        return self._sm.state

    @property
    def mode(self) -> Mode:
        return self._sm.mode

    @property
    def state_machine(self) -> StateMachine:
        return self._sm

    # ------- Frame helpers ------- #

    def publish(self) -> None:
        self._broadcast(self._frame.snapshot())

    def set_leds(self, mask: Optional[List[bool]] = None) -> bool:
        return set_masked(self._frame, self._core_mask if mask is None else mask)

    def reset_leds(self, mask: Optional[List[bool]] = None) -> bool:
        return reset_masked(self._frame, self._core_mask if mask is None else mask)

    # ------- Transitions ------- #

    def assign_route(self, departure: Optional[Place], arrival: Optional[Place]) -> bool:
        succeed = self.reset_leds()
        self.publish()
        self._sm.dispatch(Event.SET_ROUTE, departure=departure, arrival=arrival)
        return succeed and departure is not None and arrival is not None

    def assign_product(self, product: Optional[Product]) -> bool:
        succeed = self.reset_leds()
        self.publish()
        if product is Product.NONE:
            product = None
        self._sm.dispatch(Event.SET_PRODUCT, product=product)
        return succeed and product is not None

    def abort(self) -> bool:
        self._sm.dispatch(Event.RESET)
        return self.signal_end()

    def tick(self) -> bool:
        succeed = apply_tick(self._frame, self._sm.state)
        self.publish()
        return succeed

    def signal_end(self) -> bool:
        """Blink every core color END_BLINKS times, blocking until done."""
        pause = self.half_period
        self.reset_leds()
        self.publish()
        for _ in range(END_BLINKS):
            self._sleep(pause)
            self.set_leds()
            self.publish()
            self._sleep(pause)
            self.reset_leds()
            self.publish()
        return True
