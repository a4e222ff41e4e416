"""
Commands for the Aim & Range alignment node
"""
from .aim_range_command import AimRangeCommand, AlignmentStatus

__all__ = ['AimRangeCommand', 'AlignmentStatus']
