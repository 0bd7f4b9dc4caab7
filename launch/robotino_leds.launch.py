#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import LifecycleNode
from launch_ros.parameter_descriptions import ParameterValue

def generate_launch_description():
    frequency = DeclareLaunchArgument(
        'frequency',
        default_value='1.0',
        description='Base signaling frequency in Hz'
    )

    leds = LifecycleNode(
        package='robotino_leds',
        executable='node',
        name='robotino_leds',
        namespace='',
        output='screen',
        parameters=[{
            'frequency': ParameterValue(LaunchConfiguration('frequency'), value_type=float),
        }]
    )

    return LaunchDescription([frequency, leds])
