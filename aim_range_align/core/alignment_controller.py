"""
Aim & Range Alignment Controller - three independent PID loops

Converts the target-space pose error into a (forward, strafe, rotate)
velocity command for a holonomic drivetrain:

- Strafe: tx - strafe_target, wrapped on strafe_domain
- Range:  tz - range_target, wrapped on range_domain
- Aim:    yaw - aim_target, wrapped on aim_domain

Each loop output is multiplied by its output gain and the vehicle's maximum
linear or angular speed.
"""
from dataclasses import dataclass

from aim_range_align.config import AlignmentConfig, PidGains, TargetProfile
from aim_range_align.core.pose_sampler import TargetPose
from aim_range_align.utils import PID


@dataclass(frozen=True)
class DriveCommand:
    """Velocity command for the drivetrain."""
    forward: float = 0.0
    strafe: float = 0.0
    rotate: float = 0.0


def _make_pid(gains: PidGains, period: float) -> PID:
    return PID(gains.kp, gains.ki, gains.kd,
               i_limit=gains.i_limit, out_limit=gains.out_limit, period=period)


class AlignmentController:
    """Strafe / range / aim PID loops sharing one target profile"""

    def __init__(self, config: AlignmentConfig, logger):
        self.config = config
        self.logger = logger

        self.pid_strafe = _make_pid(config.strafe_gains, config.control_period)
        self.pid_range = _make_pid(config.range_gains, config.control_period)
        self.pid_aim = _make_pid(config.aim_gains, config.control_period)

    def reset(self):
        """Clear integral and previous-error state of all loops."""
        self.pid_strafe.reset()
        self.pid_range.reset()
        self.pid_aim.reset()

    def strafe_speed(self, pose: TargetPose, profile: TargetProfile) -> float:
        self.pid_strafe.enable_continuous_input(*self.config.strafe_domain)
        speed = self.pid_strafe.calculate(pose.tx - profile.strafe_target)
        return speed * self.config.strafe_output_gain * self.config.max_linear_speed

    def range_speed(self, pose: TargetPose, profile: TargetProfile) -> float:
        self.pid_range.enable_continuous_input(*self.config.range_domain)
        speed = self.pid_range.calculate(pose.tz - profile.range_target)
        return speed * self.config.range_output_gain * self.config.max_linear_speed

    def aim_speed(self, pose: TargetPose, profile: TargetProfile) -> float:
        self.pid_aim.enable_continuous_input(*self.config.aim_domain)
        speed = self.pid_aim.calculate(pose.yaw - profile.aim_target)
        return speed * self.config.aim_output_gain * self.config.max_angular_speed

    def compute(self, pose: TargetPose, profile: TargetProfile) -> DriveCommand:
        return DriveCommand(
            forward=self.range_speed(pose, profile),
            strafe=self.strafe_speed(pose, profile),
            rotate=self.aim_speed(pose, profile),
        )
