"""
Enumerations for the Aim & Range alignment command
"""
from enum import Enum


class CommandState(Enum):
    """Activation lifecycle states"""
    IDLE = "IDLE"
    ACTIVATING = "ACTIVATING"
    RUNNING = "RUNNING"
    TERMINATED = "TERMINATED"


class TrackingCheck(Enum):
    """Which tracking rule applies on the next evaluation"""
    FIRST_CHECK = "FIRST_CHECK"
    SUBSEQUENT_CHECK = "SUBSEQUENT_CHECK"


class FinishReason(Enum):
    """Why an activation ended"""
    CONVERGED = "CONVERGED"
    TARGET_LOST = "TARGET_LOST"
    TIMED_OUT = "TIMED_OUT"
    INTERRUPTED = "INTERRUPTED"
