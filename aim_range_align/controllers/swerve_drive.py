"""
Holonomic drivetrain output over cmd_vel
"""
from geometry_msgs.msg import Twist


class SwerveDrive:
    """Publishes (forward, strafe, rotate) as a Twist"""

    def __init__(self, node, logger, cmd_vel_topic: str):
        self.logger = logger
        self.cmd_pub = node.create_publisher(Twist, cmd_vel_topic, 10)

    def drive(self, forward: float, strafe: float, rotate: float):
        twist = Twist()
        twist.linear.x = float(forward)
        twist.linear.y = float(strafe)
        twist.angular.z = float(rotate)
        self.cmd_pub.publish(twist)

    def stop(self):
        """Publish a zero Twist."""
        self.cmd_pub.publish(Twist())
        self.logger.info("🛑 Drivetrain stopped")
