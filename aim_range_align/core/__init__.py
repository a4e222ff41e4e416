"""
Core modules for the Aim & Range alignment command
"""
from .target_profile import select_target_profile
from .tag_filter import TagFilter
from .pose_sampler import PoseSampler, PoseSample, TargetPose
from .tracking_gate import TrackingGate
from .alignment_controller import AlignmentController, DriveCommand
from .termination import ElapsedTimer, TerminationEvaluator
from .command_runner import CommandRunner

__all__ = [
    'select_target_profile', 'TagFilter', 'PoseSampler', 'PoseSample', 'TargetPose',
    'TrackingGate', 'AlignmentController', 'DriveCommand', 'ElapsedTimer',
    'TerminationEvaluator', 'CommandRunner',
]
