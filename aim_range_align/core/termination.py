"""
Completion checks for one activation
"""
import time
from typing import Callable, Optional

from aim_range_align.config import AlignmentConfig, TargetProfile
from aim_range_align.core.pose_sampler import TargetPose
from aim_range_align.enums import FinishReason


class ElapsedTimer:
    """Seconds since the last reset(), read from an injectable clock"""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.start_time: Optional[float] = None

    def reset(self):
        self.start_time = self.clock()

    def get(self) -> float:
        if self.start_time is None:
            return 0.0
        return self.clock() - self.start_time


class TerminationEvaluator:
    """
    Finished when all three errors are inside their thresholds, when tracking
    is lost, or when the elapsed time exceeds the timeout.
    """

    def __init__(self, config: AlignmentConfig):
        self.config = config

    def converged(self, pose: TargetPose, profile: TargetProfile) -> bool:
        return (
            abs(pose.tx - profile.strafe_target) < self.config.strafe_threshold
            and abs(pose.tz - profile.range_target) < self.config.range_threshold
            and abs(pose.yaw - profile.aim_target) < self.config.aim_threshold
        )

    def evaluate(self, pose: TargetPose, profile: TargetProfile,
                 tracking: bool, elapsed: float) -> Optional[FinishReason]:
        """Reason the activation is complete, or None to keep running."""
        if self.converged(pose, profile):
            return FinishReason.CONVERGED
        if not tracking:
            return FinishReason.TARGET_LOST
        if elapsed > self.config.timeout:
            return FinishReason.TIMED_OUT
        return None

    def is_finished(self, pose: TargetPose, profile: TargetProfile,
                    tracking: bool, elapsed: float) -> bool:
        return self.evaluate(pose, profile, tracking, elapsed) is not None
