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


from __future__ import annotations
from typing import Dict, Optional, Tuple
from .bitmask import Color, LineFrame, toggle_pair, toggle_single
from .state_machine import Place, Product, SignalingState

ColorPair = Tuple[Color, Color]

PRODUCT_COLORS: Dict[Product, Optional[ColorPair]] = {
    Product.NONE: None,
    Product.TV: (Color.YELLOW, Color.BLUE),
    Product.DVD: (Color.BLUE, Color.GREEN),
    Product.PHONE: (Color.GREEN, Color.YELLOW),
    Product.TABLET: (Color.RED, Color.BLUE),
    Product.LAPTOP: (Color.GREEN, Color.RED),
}

ROUTE_COLORS: Dict[Tuple[Place, Place], Color] = {
    (Place.EXAM_ROOM, Place.EXIT_SECTOR): Color.GREEN,
    (Place.OPERATING_ROOM, Place.RECOVERY_SECTOR): Color.RED,
    (Place.RECOVERY_SECTOR, Place.EXIT_SECTOR): Color.YELLOW,
    (Place.EXAM_ROOM, Place.OPERATING_ROOM): Color.BLUE,
}

_unmapped = set(Product) - set(PRODUCT_COLORS)
if _unmapped:
    raise RuntimeError(f'PRODUCT_COLORS has no entry for {sorted(p.name for p in _unmapped)}')


def product_colors(product: Product) -> Optional[ColorPair]:
    return PRODUCT_COLORS[product]


def route_color(departure: Place, arrival: Place) -> Optional[Color]:
    return ROUTE_COLORS.get((departure, arrival))


def apply_tick(frame: LineFrame, state: SignalingState) -> bool:
    # The route toggle's result replaces the product toggle's; both still mutate the frame.
    pair = product_colors(state.product)
    succeed = toggle_pair(frame, *pair) if pair is not None else False
    single = route_color(state.departure, state.arrival)
    if single is not None:
        succeed = toggle_single(frame, single)
    return succeed
