"""
Target-in-view latch for one activation
"""
from aim_range_align.enums import TrackingCheck
from aim_range_align.core.pose_sampler import PoseSample


class TrackingGate:
    """
    Decides whether the current activation is still tracking the target.

    The first evaluation requires visibility, tz above tz_min_range and
    |yaw| below yaw_max_range. Later evaluations only re-check visibility and
    tz, and once tracking is false it stays false until reset().
    """

    def __init__(self, tz_min_range: float, yaw_max_range: float):
        self.tz_min_range = tz_min_range
        self.yaw_max_range = yaw_max_range
        self.tracking = False
        self.check = TrackingCheck.FIRST_CHECK

    def reset(self):
        self.tracking = False
        self.check = TrackingCheck.FIRST_CHECK

    def evaluate(self, sample: PoseSample) -> bool:
        pose = sample.pose
        if self.check is TrackingCheck.FIRST_CHECK:
            self.tracking = (
                sample.visible
                and pose.tz > self.tz_min_range
                and abs(pose.yaw) < self.yaw_max_range
            )
            self.check = TrackingCheck.SUBSEQUENT_CHECK
        elif self.tracking:
            self.tracking = sample.visible and pose.tz > self.tz_min_range
        return self.tracking
