"""
Target profile selection
"""
from aim_range_align.config import AlignmentConfig, TargetProfile


def select_target_profile(config: AlignmentConfig) -> TargetProfile:
    """Pick the right- or left-side offsets according to config.right_side."""
    if config.right_side:
        return config.right_profile
    return config.left_profile
