#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# robotino_leds/core/__init__.py
"""
Core, ROS-agnostic logic for robotino_leds.
Exports the bitmask engine, signaling state machine, controller and command handlers.
"""
from .bitmask import (
    FRAME_SIZE,
    CORE_COLORS,
    Color,
    LineFrame,
    core_colors_mask,
    is_lit,
    reset_masked,
    set_masked,
    toggle_pair,
    toggle_single,
)
from .state_machine import StateMachine, Event, Mode, Place, Product, SignalingState, TransitionRec
from .behavior import apply_tick, product_colors, route_color
from .controller import LedController
from .signaler import PeriodicSignaler
from .commands import CommandHandlers, CommandResult, parse_place, parse_product

__all__ = [
    "FRAME_SIZE",
    "CORE_COLORS",
    "Color",
    "LineFrame",
    "core_colors_mask",
    "is_lit",
    "reset_masked",
    "set_masked",
    "toggle_pair",
    "toggle_single",
    "StateMachine",
    "Event",
    "Mode",
    "Place",
    "Product",
    "SignalingState",
    "TransitionRec",
    "apply_tick",
    "product_colors",
    "route_color",
    "LedController",
    "PeriodicSignaler",
    "CommandHandlers",
    "CommandResult",
    "parse_place",
    "parse_product",
]
