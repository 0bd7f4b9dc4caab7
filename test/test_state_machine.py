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


from robotino_leds.core.state_machine import StateMachine, Event, Mode, Place, Product

def test_starts_idle():
    sm = StateMachine()
    st = sm.state
    assert st.is_idle
    assert st.product is Product.NONE
    assert (st.departure, st.arrival) == (Place.ORIGIN, Place.CONTROL_SECTOR)
    assert sm.mode is Mode.IDLE

def test_derived_modes():
    sm = StateMachine()
    sm.dispatch(Event.SET_ROUTE, departure=Place.EXAM_ROOM, arrival=Place.EXIT_SECTOR)
    assert sm.mode is Mode.ROUTING_ONLY
    sm.dispatch(Event.SET_PRODUCT, product=Product.TV)
    assert sm.mode is Mode.ROUTING_AND_CARRYING
    sm.dispatch(Event.SET_ROUTE, departure=Place.ORIGIN, arrival=Place.CONTROL_SECTOR)
    assert sm.mode is Mode.CARRYING_ONLY
    sm.dispatch(Event.RESET)
    assert sm.mode is Mode.IDLE

def test_set_route_keeps_fields_given_as_none():
    sm = StateMachine()
    sm.dispatch(Event.SET_ROUTE, departure=Place.EXAM_ROOM, arrival=Place.EXIT_SECTOR)
    sm.dispatch(Event.SET_ROUTE, departure=Place.CONTROL_SECTOR, arrival=None)
    assert sm.state.departure is Place.CONTROL_SECTOR
    assert sm.state.arrival is Place.EXIT_SECTOR

def test_idle_pair_with_product_is_not_idle():
    sm = StateMachine()
    sm.dispatch(Event.SET_PRODUCT, product=Product.DVD)
    assert not sm.state.is_idle
    assert not sm.state.has_route

def test_reset_returns_to_idle_from_any_state():
    sm = StateMachine()
    sm.dispatch(Event.SET_PRODUCT, product=Product.LAPTOP)
    sm.dispatch(Event.SET_ROUTE, departure=Place.OPERATING_ROOM, arrival=Place.RECOVERY_SECTOR)
    st = sm.dispatch(Event.RESET)
    assert st.is_idle

def test_history_records_transitions_in_order():
    sm = StateMachine(history_size=2)
    assert sm.last_transition() is None
    sm.dispatch(Event.SET_PRODUCT, product=Product.TV)
    sm.dispatch(Event.SET_ROUTE, departure=Place.EXAM_ROOM, arrival=Place.OPERATING_ROOM)
    sm.dispatch(Event.RESET)
    hist = sm.history()
    assert [h.evt for h in hist] == [Event.SET_ROUTE, Event.RESET]
    last = sm.last_transition()
    assert last.frm is Mode.ROUTING_AND_CARRYING and last.to is Mode.IDLE
    assert last.state == sm.state
    sm.clear_history()
    assert sm.history() == []
