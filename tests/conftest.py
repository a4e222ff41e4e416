import pytest

from aim_range_align.commands import AimRangeCommand
from aim_range_align.config import AlignmentConfig


class FakeLogger:
    def __init__(self):
        self.messages = []

    def _log(self, level, msg):
        self.messages.append((level, msg))

    def debug(self, msg):
        self._log("debug", msg)

    def info(self, msg):
        self._log("info", msg)

    def warn(self, msg):
        self._log("warn", msg)

    def error(self, msg):
        self._log("error", msg)


class FakeVision:
    """Latest-value vision source; pose=None means nothing published yet."""

    def __init__(self, visible=True, pose=None):
        self.visible = visible
        self.pose = pose
        self.allowed_ids = None
        self.configure_calls = 0

    def set(self, visible, tx=0.0, tz=0.0, yaw=0.0):
        self.visible = visible
        self.pose = [tx, 0.0, tz, 0.0, yaw, 0.0]

    def configure_allowed_ids(self, ids):
        self.allowed_ids = list(ids)
        self.configure_calls += 1

    def read(self):
        if self.pose is None:
            return None
        return self.visible, list(self.pose)


class FakeDrive:
    def __init__(self):
        self.calls = []

    def drive(self, forward, strafe, rotate):
        self.calls.append((forward, strafe, rotate))


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def vision():
    return FakeVision()


@pytest.fixture
def drive():
    return FakeDrive()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return AlignmentConfig()


@pytest.fixture
def make_command(drive, vision, logger, clock):
    def _make(config=None):
        return AimRangeCommand(drive, vision, config or AlignmentConfig(), logger, clock=clock)
    return _make
