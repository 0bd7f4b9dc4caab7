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
Route/product signaling state for the transport robot.

- Pure Python (no ROS imports) for easy unit testing.
- State: (product, departure, arrival); idle is (NONE, ORIGIN, CONTROL_SECTOR).
- Modes are derived from the state, never stored:
  IDLE, ROUTING_ONLY, CARRYING_ONLY, ROUTING_AND_CARRYING
- Events: SET_ROUTE(departure?, arrival?), SET_PRODUCT(product), RESET
  A SET_ROUTE field given as None is left unchanged, so a half-valid route
  request still applies its valid half.

Also records a ring-buffer of recent transitions for traceability.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum, IntEnum, auto
from collections import deque
from typing import Deque, List, Optional
import time


# -------------------------- Public enums & dataclasses -------------------------- #

class Place(IntEnum):
    """Locations a route can start or end at (value is the request code)."""
    ORIGIN = 0
    CONTROL_SECTOR = 1
    EXAM_ROOM = 2
    OPERATING_ROOM = 3
    RECOVERY_SECTOR = 4
    EXIT_SECTOR = 5


class Product(IntEnum):
    """Cargo classes (value is the request code); NONE means no cargo."""
    NONE = 0
    TV = 1
    DVD = 2
    PHONE = 3
    TABLET = 4
    LAPTOP = 5


IDLE_DEPARTURE = Place.ORIGIN
IDLE_ARRIVAL = Place.CONTROL_SECTOR


class Mode(Enum):
    """Signaling mode derived from the state."""
    IDLE = auto()
    ROUTING_ONLY = auto()
    CARRYING_ONLY = auto()
    ROUTING_AND_CARRYING = auto()


class Event(Enum):
    """Inputs to the state machine."""
    SET_ROUTE = auto()
    SET_PRODUCT = auto()
    RESET = auto()         # back to idle


@dataclass(frozen=True)
class SignalingState:
    """
    Snapshot of the signaling state.

    Attributes:
        product: Cargo being carried.
        departure: Route start.
        arrival: Route end.
        updated_at: Unix timestamp (float seconds) when last updated.
    """
    product: Product = Product.NONE
    departure: Place = IDLE_DEPARTURE
    arrival: Place = IDLE_ARRIVAL
    updated_at: float = 0.0

    @property
    def has_route(self) -> bool:
        return (self.departure, self.arrival) != (IDLE_DEPARTURE, IDLE_ARRIVAL)

    @property
    def has_product(self) -> bool:
        return self.product is not Product.NONE

    @property
    def is_idle(self) -> bool:
        return not self.has_route and not self.has_product

    @property
    def mode(self) -> Mode:
        if self.has_route and self.has_product:
            return Mode.ROUTING_AND_CARRYING
        if self.has_route:
            return Mode.ROUTING_ONLY
        if self.has_product:
            return Mode.CARRYING_ONLY
        return Mode.IDLE


@dataclass(frozen=True)
class TransitionRec:
    """
    A single transition record captured in the ring buffer.

    Attributes:
        t: Unix timestamp when the transition was recorded.
        frm: Mode before handling the event.
        evt: Event applied.
        to: Mode after handling the event.
        state: Resulting state.
    """
    t: float
    frm: Mode
    evt: Event
    to: Mode
    state: SignalingState


# ------------------------------- State machine --------------------------------- #

class StateMachine:
    """
    Holds the current signaling state and its transition history.

    Semantics:
        - Default state: idle
        - SET_ROUTE   => updates departure and/or arrival (None keeps the field)
        - SET_PRODUCT => updates product (None keeps it)
        - RESET       => back to idle

    Notes:
        - Code validation happens before dispatch (see core.commands); the
          machine only ever holds valid enum members.
        - Transitions are recorded in an in-memory ring buffer (maxlen=64 by default).
    """

    def __init__(self, history_size: int = 64) -> None:
        self._state: SignalingState = SignalingState(updated_at=time.time())
        self._hist: Deque[TransitionRec] = deque(maxlen=max(1, history_size))

    # ------- Public API ------- #

    @property
    def state(self) -> SignalingState:
        """Return an immutable snapshot of the current state."""
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    def dispatch(
        self,
        evt: Event,
        departure: Optional[Place] = None,
        arrival: Optional[Place] = None,
        product: Optional[Product] = None,
    ) -> SignalingState:
        """
        Apply an event to the state machine and return the updated state.

        Args:
            evt: Event to apply.
            departure: New departure for SET_ROUTE, None to keep the current one.
            arrival: New arrival for SET_ROUTE, None to keep the current one.
            product: New product for SET_PRODUCT, None to keep the current one.

        Returns:
            Updated SignalingState snapshot.
        """
        before = self._state
        after = self._apply(before, evt, departure, arrival, product)
        self._state = after
        self._hist.append(
            TransitionRec(t=after.updated_at, frm=before.mode, evt=evt, to=after.mode, state=after)
        )
        return self._state

    def history(self) -> List[TransitionRec]:
        """Return a copy of the transition history (most-recent last)."""
        return list(self._hist)

    def last_transition(self) -> Optional[TransitionRec]:
        """Return the most recent transition record, or None if empty."""
        try:
            return self._hist[-1]
        except IndexError:
            return None

    def clear_history(self) -> None:
        """Erase the transition ring buffer."""
        self._hist.clear()

    # ------- Internal logic ------- #

    def _apply(
        self,
        state: SignalingState,
        evt: Event,
        departure: Optional[Place],
        arrival: Optional[Place],
        product: Optional[Product],
    ) -> SignalingState:
        now = time.time()

        if evt is Event.RESET:
            return SignalingState(updated_at=now)

        if evt is Event.SET_ROUTE:
            return replace(
                state,
                departure=state.departure if departure is None else departure,
                arrival=state.arrival if arrival is None else arrival,
                updated_at=now,
            )

        if evt is Event.SET_PRODUCT:
            return replace(state, product=state.product if product is None else product, updated_at=now)

        # Unknown event (shouldn't happen with Enum) -> no change.
        return replace(state, updated_at=now)
