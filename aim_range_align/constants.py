"""
Constants for the Aim & Range alignment command
"""
import math

# ============================================================================
# Vision Configuration
# ============================================================================

BOTPOSE_TOPIC = "/limelight/botpose_targetspace"  # [tx, ty, tz, pitch, yaw, roll]
TARGET_VALID_TOPIC = "/limelight/tv"
ID_FILTER_TOPIC = "/limelight/fiducial_id_filters_set"

# Reef faces only (perspective is from the respective driver station)
ALLOWED_TAG_IDS = [6, 7, 8, 9, 10, 11, 17, 18, 19, 20, 21, 22]

REEF_TAG_NAMES = {
    6: "Reef Red Front Left",
    7: "Reef Red Front Center",
    8: "Reef Red Front Right",
    9: "Reef Red Back Right",
    10: "Reef Red Back Center",
    11: "Reef Red Back Left",
    17: "Reef Blue Front Right",
    18: "Reef Blue Front Center",
    19: "Reef Blue Front Left",
    20: "Reef Blue Back Left",
    21: "Reef Blue Back Center",
    22: "Reef Blue Back Right",
}

# ============================================================================
# Tracking Validity Bounds
# ============================================================================

TZ_MIN_RANGE = -1.5  # Robot sits at negative tz in target space (meters)
YAW_MAX_RANGE = 25.0  # degrees

# ============================================================================
# Target Profiles (strafe m, range m, aim deg)
# ============================================================================

RIGHT_SIDE = True

STRAFE_RIGHT_TARGET = 0.165
RANGE_RIGHT_TARGET = -0.45
AIM_RIGHT_TARGET = 0.0

STRAFE_LEFT_TARGET = -0.165
RANGE_LEFT_TARGET = -0.45
AIM_LEFT_TARGET = 0.0

# ============================================================================
# Convergence Thresholds
# ============================================================================

STRAFE_THRESHOLD = 0.03  # meters
RANGE_THRESHOLD = 0.04  # meters
AIM_THRESHOLD = 2.0  # degrees

# ============================================================================
# PID Controller Parameters
# ============================================================================

PID_STRAFE_KP = 1.2
PID_STRAFE_KI = 0.0
PID_STRAFE_KD = 0.05

PID_RANGE_KP = 1.0
PID_RANGE_KI = 0.0
PID_RANGE_KD = 0.05

PID_AIM_KP = 0.06
PID_AIM_KI = 0.0
PID_AIM_KD = 0.002

PID_I_LIMIT = 1.0
PID_OUT_LIMIT = math.inf  # Unclipped unless configured

# ============================================================================
# Continuous Input Domains
# ============================================================================

STRAFE_DOMAIN = (-2.0, 2.0)  # meters
RANGE_DOMAIN = (-2.0, 0.0)  # meters
AIM_DOMAIN = (-30.0, 30.0)  # degrees

# ============================================================================
# Output Scaling
# ============================================================================

MAX_LINEAR_SPEED = 0.5  # m/s
MAX_ANGULAR_SPEED = 1.5  # rad/s

STRAFE_OUTPUT_GAIN = -1.0
RANGE_OUTPUT_GAIN = 1.0
AIM_OUTPUT_GAIN = -0.1  # Robot is CCW positive, attenuated rotation

# ============================================================================
# Timing Parameters
# ============================================================================

ALIGNMENT_TIMEOUT = 3.0  # seconds
CONTROL_LOOP_RATE = 0.02  # Control loop period (50Hz = 0.02s)
LOG_INTERVAL_TICKS = 10  # Log every N ticks

# ============================================================================
# Drivetrain / Scheduler Topics
# ============================================================================

CMD_VEL_TOPIC = "/cmd_vel"
ESTOP_TOPIC = "/emergency_stop_state"
POSITIONING_TOPIC = "/aim_range/positioning"
DRIVETRAIN_RESOURCE = "drivetrain"
