"""
ROS2 collaborators for the Aim & Range alignment node
"""
from .limelight_vision import LimelightVision
from .swerve_drive import SwerveDrive

__all__ = ['LimelightVision', 'SwerveDrive']
