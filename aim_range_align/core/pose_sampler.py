"""
Non-blocking reads of the latest target-relative pose
"""
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class TargetPose:
    """Robot pose in target space: [tx, ty, tz, pitch, yaw, roll]."""
    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    @classmethod
    def from_array(cls, values: Optional[Sequence[float]]) -> "TargetPose":
        """Zero pose unless values holds at least six numbers."""
        if values is None or len(values) < 6:
            return cls()
        return cls(*(float(v) for v in values[:6]))


@dataclass(frozen=True)
class PoseSample:
    visible: bool = False
    pose: TargetPose = TargetPose()


class PoseSampler:
    """Reads (visible, pose) from the vision collaborator once per call"""

    def __init__(self, vision):
        self.vision = vision
        self.latest = PoseSample()

    def sample(self) -> PoseSample:
        reading = self.vision.read()
        if reading is None:
            self.latest = PoseSample()
        else:
            visible, values = reading
            self.latest = PoseSample(bool(visible), TargetPose.from_array(values))
        return self.latest
