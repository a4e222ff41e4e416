import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node


def generate_launch_description():

    default_params = os.path.join(
        get_package_share_directory("aim_range_align"), "config", "aim_range.yaml"
    )

    # Arguments
    params_file_arg = DeclareLaunchArgument(
        "params_file",
        default_value=default_params,
        description="Aim & Range parameter file"
    )

    right_side_arg = DeclareLaunchArgument(
        "right_side",
        default_value="true",
        description="Align to the right-side target profile (false = left)"
    )

    cmd_vel_topic_arg = DeclareLaunchArgument(
        "cmd_vel_topic",
        default_value="/cmd_vel",
        description="Drivetrain velocity command topic"
    )

    # Aim & Range Node
    node = Node(
        package="aim_range_align",
        executable="aim_range",
        name="aim_range",
        parameters=[
            LaunchConfiguration("params_file"),
            {"right_side": LaunchConfiguration("right_side")},
            {"cmd_vel_topic": LaunchConfiguration("cmd_vel_topic")},
        ],
        output="screen",
        emulate_tty=True,
    )

    return LaunchDescription([
        params_file_arg,
        right_side_arg,
        cmd_vel_topic_arg,
        node,
    ])
