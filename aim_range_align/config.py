"""
Configuration for the Aim & Range alignment command

All values default to the names in constants.py and can be overridden from a
flat mapping of ROS parameter names (see AlignmentConfig.from_parameters).
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Tuple

from aim_range_align.constants import *


@dataclass(frozen=True)
class PidGains:
    """Gains and limits for one PID loop."""
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    i_limit: float = PID_I_LIMIT
    out_limit: float = PID_OUT_LIMIT


@dataclass(frozen=True)
class TargetProfile:
    """Desired steady-state offsets relative to the target."""
    strafe_target: float  # meters
    range_target: float  # meters
    aim_target: float  # degrees


@dataclass
class AlignmentConfig:
    """Static configuration of one alignment command."""

    strafe_gains: PidGains = field(default_factory=lambda: PidGains(
        PID_STRAFE_KP, PID_STRAFE_KI, PID_STRAFE_KD))
    range_gains: PidGains = field(default_factory=lambda: PidGains(
        PID_RANGE_KP, PID_RANGE_KI, PID_RANGE_KD))
    aim_gains: PidGains = field(default_factory=lambda: PidGains(
        PID_AIM_KP, PID_AIM_KI, PID_AIM_KD))

    max_linear_speed: float = MAX_LINEAR_SPEED
    max_angular_speed: float = MAX_ANGULAR_SPEED

    strafe_threshold: float = STRAFE_THRESHOLD
    range_threshold: float = RANGE_THRESHOLD
    aim_threshold: float = AIM_THRESHOLD

    right_profile: TargetProfile = field(default_factory=lambda: TargetProfile(
        STRAFE_RIGHT_TARGET, RANGE_RIGHT_TARGET, AIM_RIGHT_TARGET))
    left_profile: TargetProfile = field(default_factory=lambda: TargetProfile(
        STRAFE_LEFT_TARGET, RANGE_LEFT_TARGET, AIM_LEFT_TARGET))
    right_side: bool = RIGHT_SIDE

    tz_min_range: float = TZ_MIN_RANGE
    yaw_max_range: float = YAW_MAX_RANGE

    timeout: float = ALIGNMENT_TIMEOUT
    control_period: float = CONTROL_LOOP_RATE

    strafe_domain: Tuple[float, float] = STRAFE_DOMAIN
    range_domain: Tuple[float, float] = RANGE_DOMAIN
    aim_domain: Tuple[float, float] = AIM_DOMAIN

    strafe_output_gain: float = STRAFE_OUTPUT_GAIN
    range_output_gain: float = RANGE_OUTPUT_GAIN
    aim_output_gain: float = AIM_OUTPUT_GAIN

    allowed_tag_ids: List[int] = field(default_factory=lambda: list(ALLOWED_TAG_IDS))

    def validate(self) -> "AlignmentConfig":
        """Raise ValueError if the configuration cannot drive the command."""
        for name in ("strafe_threshold", "range_threshold", "aim_threshold",
                     "timeout", "control_period"):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

        for name in ("max_linear_speed", "max_angular_speed"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")

        for name in ("strafe_domain", "range_domain", "aim_domain"):
            lower, upper = getattr(self, name)
            if not lower < upper:
                raise ValueError(f"{name} minimum must be below maximum, got ({lower}, {upper})")

        if not self.allowed_tag_ids:
            raise ValueError("allowed_tag_ids must not be empty")

        return self

    @classmethod
    def parameter_defaults(cls) -> Dict[str, Any]:
        """Flat ROS parameter names mapped to their default values."""
        return _flatten(cls())

    @classmethod
    def from_parameters(cls, params: Mapping[str, Any]) -> "AlignmentConfig":
        """
        Build a validated configuration from flat ROS parameter values.

        Keys follow parameter_defaults(); unknown keys are ignored and
        missing keys keep their defaults.
        """
        values = cls.parameter_defaults()
        values.update({k: v for k, v in params.items() if k in values})

        def gains(prefix: str) -> PidGains:
            return PidGains(
                kp=float(values[f"{prefix}_kp"]),
                ki=float(values[f"{prefix}_ki"]),
                kd=float(values[f"{prefix}_kd"]),
                i_limit=float(values[f"{prefix}_i_limit"]),
                out_limit=float(values[f"{prefix}_out_limit"]),
            )

        def profile(side: str) -> TargetProfile:
            return TargetProfile(
                strafe_target=float(values[f"strafe_{side}_target"]),
                range_target=float(values[f"range_{side}_target"]),
                aim_target=float(values[f"aim_{side}_target"]),
            )

        def domain(prefix: str) -> Tuple[float, float]:
            return (float(values[f"{prefix}_domain_min"]), float(values[f"{prefix}_domain_max"]))

        config = cls(
            strafe_gains=gains("strafe"),
            range_gains=gains("range"),
            aim_gains=gains("aim"),
            right_profile=profile("right"),
            left_profile=profile("left"),
            strafe_domain=domain("strafe"),
            range_domain=domain("range"),
            aim_domain=domain("aim"),
            right_side=bool(values["right_side"]),
            allowed_tag_ids=[int(i) for i in values["allowed_tag_ids"]],
            **{name: float(values[name]) for name in _SCALAR_FIELDS},
        )
        return config.validate()


_SCALAR_FIELDS = (
    "max_linear_speed", "max_angular_speed",
    "strafe_threshold", "range_threshold", "aim_threshold",
    "tz_min_range", "yaw_max_range",
    "timeout", "control_period",
    "strafe_output_gain", "range_output_gain", "aim_output_gain",
)


def _flatten(config: AlignmentConfig) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for axis in ("strafe", "range", "aim"):
        gains = getattr(config, f"{axis}_gains")
        for f in fields(PidGains):
            flat[f"{axis}_{f.name}"] = getattr(gains, f.name)
        lower, upper = getattr(config, f"{axis}_domain")
        flat[f"{axis}_domain_min"] = lower
        flat[f"{axis}_domain_max"] = upper
    for side in ("right", "left"):
        prof = getattr(config, f"{side}_profile")
        flat[f"strafe_{side}_target"] = prof.strafe_target
        flat[f"range_{side}_target"] = prof.range_target
        flat[f"aim_{side}_target"] = prof.aim_target
    for name in _SCALAR_FIELDS:
        flat[name] = getattr(config, name)
    flat["right_side"] = config.right_side
    flat["allowed_tag_ids"] = list(config.allowed_tag_ids)
    return flat
