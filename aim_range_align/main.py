#!/usr/bin/env python3
"""
Aim & Range alignment node
Main entry point
"""

import rclpy
from aim_range_align.aim_range_runner import AimRangeRunner


def main(args=None):
    rclpy.init(args=args)
    node = AimRangeRunner()

    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.try_shutdown()


if __name__ == "__main__":
    main()
