#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import List, Optional
from math import isfinite

import rclpy
from rclpy.executors import MultiThreadedExecutor
from rclpy.lifecycle import LifecycleNode, State, TransitionCallbackReturn
from rclpy.qos import QoSProfile, ReliabilityPolicy, HistoryPolicy, DurabilityPolicy
from rclpy.callback_groups import MutuallyExclusiveCallbackGroup
from rclpy.parameter import Parameter
from rcl_interfaces.msg import (
    SetParametersResult,
    ParameterDescriptor,
    FloatingPointRange,
)

from std_srvs.srv import Trigger
from robotino_leds_interfaces.msg import DigitalReadings
from robotino_leds_interfaces.srv import GoFromTo, StopTransportation, TransportProduct

from .core.controller import LedController
from .core.commands import CommandHandlers, CommandResult
from .core.signaler import PeriodicSignaler


class RobotinoLedsNode(LifecycleNode):
    """Lifecycle node signaling the robot's route and cargo on its LED lines."""

    def __init__(self) -> None:
        super().__init__('robotino_leds')
        # Timer and commands share one exclusive group: a command, including
        # the blocking end signal, always finishes before the next tick.
        self._cbg = MutuallyExclusiveCallbackGroup()

        self.declare_parameter(
            'frequency',
            1.0,
            descriptor=ParameterDescriptor(
                description='Base signaling frequency in Hz; blink ticks run at twice this rate.',
                floating_point_range=[FloatingPointRange(from_value=0.1, to_value=20.0, step=0.0)],
            ),
        )

        # ----- Core, ROS-agnostic -----
        self._ctrl = LedController(
            broadcast=self._publish_frame,
            frequency=float(self.get_parameter('frequency').value),
        )
        self._signaler = PeriodicSignaler(self._ctrl)
        self._commands = CommandHandlers(self._ctrl)
        self._is_active = False

        # ----- ROS interfaces (created in on_configure) -----
        self._pub: Optional['rclpy.lifecycle.Publisher'] = None
        self._timer = None
        self._srv_go = None
        self._srv_transport = None
        self._srv_stop = None
        self._srv_health = None

        self._param_cb = self.add_on_set_parameters_callback(self._on_param_update)

        self.get_logger().info('Constructed (UNCONFIGURED)')

    # ---------------- Lifecycle hooks ----------------
    def on_configure(self, state: State) -> TransitionCallbackReturn:
        self.get_logger().info('on_configure()')
        try:
            # Latched: late subscribers still get the last frame.
            qos = QoSProfile(
                depth=1,
                reliability=ReliabilityPolicy.RELIABLE,
                durability=DurabilityPolicy.TRANSIENT_LOCAL,
                history=HistoryPolicy.KEEP_LAST,
            )
            self._pub = self.create_lifecycle_publisher(DigitalReadings, 'set_digital_values', qos)

            self._srv_go = self.create_service(
                GoFromTo, 'go_from_to', self._on_go_from_to, callback_group=self._cbg
            )
            self._srv_transport = self.create_service(
                TransportProduct, 'transport_product', self._on_transport_product, callback_group=self._cbg
            )
            self._srv_stop = self.create_service(
                StopTransportation, 'stop_transportation', self._on_stop_transportation, callback_group=self._cbg
            )
            self._srv_health = self.create_service(
                Trigger, 'health', self._on_health, callback_group=self._cbg
            )

            # Timer (created but stopped until ACTIVE)
            self._timer = self.create_timer(
                self._signaler.tick_period, self._on_timer, callback_group=self._cbg
            )
            self._timer.cancel()

            self.get_logger().info('Configured resources (INACTIVE)')
            return TransitionCallbackReturn.SUCCESS
        except Exception as e:
            self.get_logger().error(f'Configure failed: {e}')
            return TransitionCallbackReturn.FAILURE

    def on_activate(self, state: State) -> TransitionCallbackReturn:
        self.get_logger().info('on_activate()')
        try:
            if self._pub is None or self._timer is None:
                self.get_logger().error('Missing resources in activate')
                return TransitionCallbackReturn.FAILURE
            self._pub.on_activate(state)
            self._is_active = True
            self._ctrl.reset_leds()
            self._ctrl.publish()
            self._timer.reset()
            self.get_logger().info(
                f'Robotino LED node is up and running, mode={self._ctrl.mode.name}, '
                f'frequency={self._ctrl.frequency} Hz'
            )
            return TransitionCallbackReturn.SUCCESS
        except Exception as e:
            self.get_logger().error(f'Activate failed: {e}')
            return TransitionCallbackReturn.FAILURE

    def on_deactivate(self, state: State) -> TransitionCallbackReturn:
        self.get_logger().info('on_deactivate()')
        try:
            self._is_active = False
            if self._timer:
                self._timer.cancel()
            if self._pub:
                self._pub.on_deactivate(state)
            self.get_logger().info('Deactivated (timer stopped, publisher inactive)')
            return TransitionCallbackReturn.SUCCESS
        except Exception as e:
            self.get_logger().error(f'Deactivate failed: {e}')
            return TransitionCallbackReturn.FAILURE

    def on_cleanup(self, state: State) -> TransitionCallbackReturn:
        self.get_logger().info('on_cleanup()')
        try:
            self._is_active = False

            if self._timer:
                self._timer.cancel()
                self.destroy_timer(self._timer)
                self._timer = None

            for srv in (self._srv_go, self._srv_transport, self._srv_stop, self._srv_health):
                if srv:
                    self.destroy_service(srv)
            self._srv_go = self._srv_transport = self._srv_stop = self._srv_health = None

            if self._pub:
                self.destroy_publisher(self._pub)
                self._pub = None

            self.get_logger().info('Cleaned up (UNCONFIGURED)')
            return TransitionCallbackReturn.SUCCESS
        except Exception as e:
            self.get_logger().error(f'Cleanup failed: {e}')
            return TransitionCallbackReturn.FAILURE

    def on_shutdown(self, state: State) -> TransitionCallbackReturn:
        self.get_logger().info('on_shutdown()')
        self._is_active = False
        if self._timer:
            self._timer.cancel()
        return TransitionCallbackReturn.SUCCESS

    # ---------------- Parameter handling (pure validate + react) ----------------
    def _on_param_update(self, params: List[Parameter]) -> SetParametersResult:
        freq = self._ctrl.frequency

        for p in params:
            if p.name == 'frequency':
                if p.type_ != Parameter.Type.DOUBLE or not isfinite(p.value) or p.value <= 0.0:
                    return SetParametersResult(successful=False, reason='frequency must be finite and > 0')
                freq = float(p.value)

        self._ctrl.frequency = freq

        if self._timer is not None:
            was_running = self._is_active
            self._timer.cancel()
            self._timer.timer_period_ns = int(self._signaler.tick_period * 1e9)
            if was_running:
                self._timer.reset()

        return SetParametersResult(successful=True)

    # ---------------- Helpers & ROS Callbacks ----------------
    def _publish_frame(self, values: List[bool]) -> None:
        if self._pub is None:
            return
        msg = DigitalReadings()
        msg.stamp = self.get_clock().now().to_msg()
        msg.values = values
        self._pub.publish(msg)

    def _log_result(self, result: CommandResult) -> None:
        if result.succeed:
            self.get_logger().info(result.message)
        else:
            self.get_logger().error(result.message)

    def _on_timer(self) -> None:
        if not self._is_active:
            return
        self._signaler.on_tick()

    # ---------------- Services ----------------
    def _on_go_from_to(self, req: GoFromTo.Request, res: GoFromTo.Response) -> GoFromTo.Response:
        if not self._is_active:
            self.get_logger().warn('go_from_to rejected: node not active')
            res.succeed = False; return res
        result = self._commands.go_from_to(req.departure_place, req.arrival_place)
        self._log_result(result)
        res.succeed = result.succeed
        return res

    def _on_transport_product(
        self, req: TransportProduct.Request, res: TransportProduct.Response
    ) -> TransportProduct.Response:
        if not self._is_active:
            self.get_logger().warn('transport_product rejected: node not active')
            res.succeed = False; return res
        result = self._commands.transport_product(req.product)
        self._log_result(result)
        res.succeed = result.succeed
        return res

    def _on_stop_transportation(
        self, req: StopTransportation.Request, res: StopTransportation.Response
    ) -> StopTransportation.Response:
        if not self._is_active:
            self.get_logger().warn('stop_transportation rejected: node not active')
            res.succeed = False; return res
        self.get_logger().info('Stopping transportation, signaling the end')
        result = self._commands.stop_transportation()
        self._log_result(result)
        res.succeed = result.succeed
        return res

    def _on_health(self, req: Trigger.Request, res: Trigger.Response) -> Trigger.Response:
        lc = 'ACTIVE' if self._is_active else 'INACTIVE/OTHER'
        st = self._ctrl.state
        res.success = True
        res.message = (
            f'lifecycle={lc}, mode={st.mode.name}, product={st.product.name}, '
            f'route={st.departure.name}->{st.arrival.name}, lit={self._ctrl.frame.lit()}'
        )
        return res


def main() -> None:
    rclpy.init()
    node = RobotinoLedsNode()
    exe = MultiThreadedExecutor(num_threads=2)
    exe.add_node(node)
    try:
        exe.spin()
    finally:
        exe.shutdown()
        node.destroy_node()
        rclpy.shutdown()
