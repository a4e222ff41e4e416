"""
Aim & Range Runner - ROS2 node hosting the alignment command
"""
from rclpy.node import Node
from std_msgs.msg import Bool
from std_srvs.srv import Trigger

from aim_range_align.config import AlignmentConfig
from aim_range_align.constants import *
from aim_range_align.commands import AimRangeCommand
from aim_range_align.controllers import LimelightVision, SwerveDrive
from aim_range_align.core import CommandRunner


class AimRangeRunner(Node):
    """
    Schedules AimRangeCommand on a fixed-period timer.

    - ~/start (Trigger): activate the command, interrupting any holder of the drivetrain
    - ~/cancel (Trigger): interrupt the active command
    - estop topic (Bool): interrupt and publish a zero Twist
    - positioning topic (Bool): command positioning status every period
    """

    def __init__(self):
        super().__init__("aim_range")

        self._declare_parameters()
        self._load_parameters()

        self.vision = LimelightVision(
            node=self,
            logger=self.get_logger(),
            botpose_topic=self.botpose_topic,
            valid_topic=self.valid_topic,
            id_filter_topic=self.id_filter_topic,
        )
        self.drivetrain = SwerveDrive(self, self.get_logger(), self.cmd_vel_topic)

        self.command = AimRangeCommand(
            drivetrain=self.drivetrain,
            vision=self.vision,
            config=self.config,
            logger=self.get_logger(),
            clock=self._now,
        )
        self.runner = CommandRunner(self.get_logger())

        self.positioning_pub = self.create_publisher(Bool, self.positioning_topic, 10)
        self.estop_sub = self.create_subscription(Bool, self.estop_topic, self.estop_cb, 10)
        self.start_srv = self.create_service(Trigger, "~/start", self.start_cb)
        self.cancel_srv = self.create_service(Trigger, "~/cancel", self.cancel_cb)

        self.estop_active = False
        self.control_timer = self.create_timer(self.config.control_period, self.control_loop)

        self._log_startup_info()

    def _declare_parameters(self):
        """Declare all ROS2 parameters"""
        self.declare_parameter("botpose_topic", BOTPOSE_TOPIC)
        self.declare_parameter("valid_topic", TARGET_VALID_TOPIC)
        self.declare_parameter("id_filter_topic", ID_FILTER_TOPIC)
        self.declare_parameter("cmd_vel_topic", CMD_VEL_TOPIC)
        self.declare_parameter("estop_topic", ESTOP_TOPIC)
        self.declare_parameter("positioning_topic", POSITIONING_TOPIC)

        for name, default in AlignmentConfig.parameter_defaults().items():
            self.declare_parameter(name, default)

    def _load_parameters(self):
        """Load parameter values; raises ValueError on an invalid configuration"""
        self.botpose_topic = self.get_parameter("botpose_topic").value
        self.valid_topic = self.get_parameter("valid_topic").value
        self.id_filter_topic = self.get_parameter("id_filter_topic").value
        self.cmd_vel_topic = self.get_parameter("cmd_vel_topic").value
        self.estop_topic = self.get_parameter("estop_topic").value
        self.positioning_topic = self.get_parameter("positioning_topic").value

        params = {
            name: self.get_parameter(name).value
            for name in AlignmentConfig.parameter_defaults()
        }
        self.config = AlignmentConfig.from_parameters(params)

    def _now(self) -> float:
        return self.get_clock().now().nanoseconds / 1e9

    def _log_startup_info(self):
        cfg = self.config
        self.get_logger().info("=" * 70)
        self.get_logger().info("🎯 AIM & RANGE READY")
        self.get_logger().info("=" * 70)
        self.get_logger().info(f"   Side: {'RIGHT' if cfg.right_side else 'LEFT'}")
        self.get_logger().info(f"   Loop: {1 / cfg.control_period:.1f} Hz | Timeout: {cfg.timeout:.1f}s")
        self.get_logger().info(
            f"   Thresholds: X {cfg.strafe_threshold}m | Z {cfg.range_threshold}m | "
            f"Yaw {cfg.aim_threshold}°"
        )
        self.get_logger().info(f"   Allowed tags: {cfg.allowed_tag_ids}")
        self.get_logger().info(f"   cmd_vel: {self.cmd_vel_topic}")

    def start_cb(self, request, response):
        if self.estop_active:
            response.success = False
            response.message = "Emergency stop active"
            return response

        response.success = self.runner.schedule(self.command)
        response.message = "started" if response.success else "already running"
        return response

    def cancel_cb(self, request, response):
        response.success = self.runner.cancel() is not None
        response.message = "cancelled" if response.success else "not running"
        return response

    def estop_cb(self, msg):
        """Emergency stop callback"""
        self.estop_active = msg.data
        if msg.data:
            self.get_logger().warn("⚠️  EMERGENCY STOP ACTIVATED")
            if self.runner.cancel() is not None:
                self.drivetrain.stop()
        else:
            self.get_logger().info("✅ Emergency stop deactivated")

    def control_loop(self):
        self.runner.run_once()

        msg = Bool()
        msg.data = self.command.positioning
        self.positioning_pub.publish(msg)
