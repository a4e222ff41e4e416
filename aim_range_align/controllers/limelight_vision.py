"""
Limelight vision source over ROS2 topics
"""
from typing import List, Optional, Tuple

from std_msgs.msg import Bool, Float64MultiArray, Int32MultiArray


class LimelightVision:
    """
    Latest-value cache of the Limelight target-space pose and target-valid flag.

    read() never waits: it returns whatever was last published, or None if
    nothing has arrived yet.
    """

    def __init__(self, node, logger, botpose_topic: str, valid_topic: str,
                 id_filter_topic: str):
        self.node = node
        self.logger = logger

        self._visible: Optional[bool] = None
        self._botpose: Optional[List[float]] = None

        self.botpose_sub = node.create_subscription(
            Float64MultiArray, botpose_topic, self.botpose_cb, 10)
        self.valid_sub = node.create_subscription(
            Bool, valid_topic, self.valid_cb, 10)
        self.id_filter_pub = node.create_publisher(Int32MultiArray, id_filter_topic, 10)

        self.logger.info(f"📷 Limelight pose: {botpose_topic} | valid: {valid_topic}")

    def botpose_cb(self, msg):
        self._botpose = list(msg.data)

    def valid_cb(self, msg):
        self._visible = bool(msg.data)

    def configure_allowed_ids(self, ids: List[int]):
        msg = Int32MultiArray()
        msg.data = [int(i) for i in ids]
        self.id_filter_pub.publish(msg)

    def read(self) -> Optional[Tuple[bool, List[float]]]:
        if self._visible is None and self._botpose is None:
            return None
        return bool(self._visible), self._botpose
