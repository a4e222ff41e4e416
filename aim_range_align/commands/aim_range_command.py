"""
Aim & Range command - positions the robot at a fixed offset from the nearest
valid reef tag.

Lifecycle (driven by CommandRunner or any scheduler with the same contract):
    activate() -> tick() ... is_finished() ... -> deactivate(interrupted)

Finishes when strafe, range and aim errors are all inside their thresholds,
when the tag is no longer tracked, or when the timeout elapses.
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from aim_range_align.config import AlignmentConfig, TargetProfile
from aim_range_align.constants import DRIVETRAIN_RESOURCE, LOG_INTERVAL_TICKS
from aim_range_align.core.alignment_controller import AlignmentController, DriveCommand
from aim_range_align.core.pose_sampler import PoseSampler, TargetPose
from aim_range_align.core.tag_filter import TagFilter
from aim_range_align.core.target_profile import select_target_profile
from aim_range_align.core.termination import ElapsedTimer, TerminationEvaluator
from aim_range_align.core.tracking_gate import TrackingGate
from aim_range_align.enums import CommandState, FinishReason


@dataclass(frozen=True)
class AlignmentStatus:
    """Snapshot of the command for telemetry; only the command writes it."""
    state: CommandState
    positioning: bool
    tracking: bool
    elapsed: float
    pose: TargetPose
    profile: Optional[TargetProfile]
    last_command: Optional[DriveCommand]
    finish_reason: Optional[FinishReason]


class AimRangeCommand:
    """
    Closed-loop alignment of a holonomic drivetrain to a fiducial target.

    Args:
        drivetrain: object with drive(forward, strafe, rotate)
        vision: object with configure_allowed_ids(ids) and
            read() -> (visible, [tx, ty, tz, pitch, yaw, roll]) or None
        config: AlignmentConfig
        logger: ROS2-style logger
        clock: monotonic seconds source for the timeout
    """

    def __init__(self, drivetrain, vision, config: AlignmentConfig, logger,
                 clock: Callable[[], float] = time.monotonic):
        self.drivetrain = drivetrain
        self.config = config
        self.logger = logger
        self.requirements = frozenset({DRIVETRAIN_RESOURCE})

        self.tag_filter = TagFilter(vision, config.allowed_tag_ids, logger)
        self.sampler = PoseSampler(vision)
        self.gate = TrackingGate(config.tz_min_range, config.yaw_max_range)
        self.controller = AlignmentController(config, logger)
        self.evaluator = TerminationEvaluator(config)
        self.timer = ElapsedTimer(clock)

        # State variables
        self.state = CommandState.IDLE
        self.profile: Optional[TargetProfile] = None
        self.last_command: Optional[DriveCommand] = None
        self.finish_reason: Optional[FinishReason] = None
        self.tick_count = 0
        self._positioning = False

    @property
    def positioning(self) -> bool:
        """True from activate() until deactivate()."""
        return self._positioning

    @property
    def tracking(self) -> bool:
        return self.gate.tracking

    @property
    def status(self) -> AlignmentStatus:
        return AlignmentStatus(
            state=self.state,
            positioning=self._positioning,
            tracking=self.gate.tracking,
            elapsed=self.timer.get() if self._positioning else 0.0,
            pose=self.sampler.latest.pose,
            profile=self.profile,
            last_command=self.last_command,
            finish_reason=self.finish_reason,
        )

    def activate(self):
        """Select targets, filter tags, take the first sample and start the timer."""
        if self.state in (CommandState.ACTIVATING, CommandState.RUNNING):
            raise RuntimeError("AimRangeCommand is already active")

        self.state = CommandState.ACTIVATING
        self.profile = select_target_profile(self.config)
        self.tag_filter.apply()

        sample = self.sampler.sample()
        self.gate.reset()
        self.gate.evaluate(sample)

        # Integral windup from a previous activation must not carry over
        self.controller.reset()
        self.timer.reset()

        self.last_command = None
        self.finish_reason = None
        self.tick_count = 0
        self._positioning = True

        side = "RIGHT" if self.config.right_side else "LEFT"
        self.logger.info(
            f"🎯 Aim & Range started ({side}) | Tracking: {self.gate.tracking} | "
            f"Target X:{self.profile.strafe_target:+.3f} Z:{self.profile.range_target:+.3f} "
            f"Yaw:{self.profile.aim_target:+.1f}°"
        )
        if not self.gate.tracking:
            self.logger.warn(
                f"⚠️  No valid tag at start | TV:{sample.visible} "
                f"Z:{sample.pose.tz:+.3f} Yaw:{sample.pose.yaw:+.1f}°"
            )

        self.state = CommandState.RUNNING

    def tick(self):
        """
        One control period: sample, then while tracking re-check it and drive.

        The tick that loses tracking still sends a command computed from this
        tick's sample; later ticks send nothing.
        """
        if self.state is not CommandState.RUNNING:
            raise RuntimeError(f"tick() called in state {self.state.value}")

        self.tick_count += 1
        sample = self.sampler.sample()

        if self.gate.tracking:
            if not self.gate.evaluate(sample):
                self.logger.warn(
                    f"⚠️  Lost tag | TV:{sample.visible} Z:{sample.pose.tz:+.3f}"
                )
            cmd = self.controller.compute(sample.pose, self.profile)
            self.drivetrain.drive(cmd.forward, cmd.strafe, cmd.rotate)
            self.last_command = cmd

        if self.tick_count % LOG_INTERVAL_TICKS == 0:
            pose = sample.pose
            self.logger.debug(
                f"📷 Tracking: {self.gate.tracking} | "
                f"X:{pose.tx:+.3f} Z:{pose.tz:+.3f} Yaw:{pose.yaw:+.1f}° | "
                f"t={self.timer.get():.2f}s"
            )

    def _pending_reason(self) -> Optional[FinishReason]:
        return self.evaluator.evaluate(
            self.sampler.latest.pose, self.profile, self.gate.tracking, self.timer.get()
        )

    def is_finished(self) -> bool:
        if self.state is not CommandState.RUNNING:
            return False
        return self._pending_reason() is not None

    def deactivate(self, interrupted: bool):
        """Clear the positioning status. No drive command is sent here."""
        if interrupted:
            self.finish_reason = FinishReason.INTERRUPTED
        elif self.state is CommandState.RUNNING:
            self.finish_reason = self._pending_reason()

        elapsed = self.timer.get()
        self._positioning = False
        self.state = CommandState.TERMINATED

        if self.finish_reason is FinishReason.CONVERGED:
            self.logger.info(f"✅ Aim & Range converged in {elapsed:.2f}s")
        elif self.finish_reason is FinishReason.TARGET_LOST:
            self.logger.warn(f"⚠️  Aim & Range ended, tag not tracked ({elapsed:.2f}s)")
        elif self.finish_reason is FinishReason.TIMED_OUT:
            self.logger.warn(f"⏱️  Aim & Range timed out after {elapsed:.2f}s")
        elif self.finish_reason is FinishReason.INTERRUPTED:
            self.logger.info(f"⛔ Aim & Range interrupted after {elapsed:.2f}s")
        else:
            self.logger.info(f"⏹️ Aim & Range stopped after {elapsed:.2f}s")
