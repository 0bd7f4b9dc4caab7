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
Command handlers: numeric request codes in, CommandResult out.

The ROS node copies `succeed` into the service response verbatim and logs
`message` (error level when `succeed` is False).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .controller import LedController
from .state_machine import Place, Product


@dataclass(frozen=True)
class CommandResult:
    succeed: bool
    message: str = ''


def parse_place(code: int) -> Optional[Place]:
    try:
        return Place(int(code))
    except ValueError:
        return None


def parse_product(code: int) -> Optional[Product]:
    """Product codes 1-5; NONE (0) is not assignable."""
    try:
        product = Product(int(code))
    except ValueError:
        return None
    return None if product is Product.NONE else product


class CommandHandlers:
    """Thin adapters from request codes to LedController transitions."""

    def __init__(self, controller: LedController) -> None:
        self._controller = controller

    def go_from_to(self, departure_code: int, arrival_code: int) -> CommandResult:
        departure = parse_place(departure_code)
        arrival = parse_place(arrival_code)
        succeed = self._controller.assign_route(departure, arrival)

        errors: List[str] = []
        if departure is None:
            errors.append(f'Invalid departure place code: {departure_code}')
        if arrival is None:
            errors.append(f'Invalid arrival place code: {arrival_code}')
        if errors:
            return CommandResult(succeed, '; '.join(errors))
        state = self._controller.state
        return CommandResult(succeed, f'Going from {state.departure.name} to {state.arrival.name}')

    def transport_product(self, product_code: int) -> CommandResult:
        product = parse_product(product_code)
        succeed = self._controller.assign_product(product)
        if product is None:
            return CommandResult(succeed, f'Invalid requested product: {product_code}')
        return CommandResult(succeed, f'Transporting a {product.name}')

    def stop_transportation(self) -> CommandResult:
        succeed = self._controller.abort()
        return CommandResult(succeed, 'Transportation stopped' if succeed else 'End signal failed')
