import itertools

import pytest

from aim_range_align.core import PoseSample, TargetPose, TrackingGate
from aim_range_align.enums import TrackingCheck


def sample(visible, tz=0.0, yaw=0.0):
    return PoseSample(visible, TargetPose(tz=tz, yaw=yaw))


@pytest.mark.parametrize("visible, tz, yaw", itertools.product(
    [True, False], [0.5, 1.0, 1.6], [-25.0, -5.0, 5.0, 20.0, 21.0]))
def test_first_check_requires_all_three_conditions(visible, tz, yaw):
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    expected = visible and tz > 1.0 and abs(yaw) < 20.0
    assert gate.evaluate(sample(visible, tz, yaw)) == expected
    assert gate.check is TrackingCheck.SUBSEQUENT_CHECK


def test_scenario_a_tracks_at_start():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    assert gate.evaluate(sample(True, tz=1.6, yaw=5.0)) is True


def test_subsequent_checks_ignore_yaw_bound():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    gate.evaluate(sample(True, tz=1.6, yaw=5.0))
    assert gate.evaluate(sample(True, tz=1.6, yaw=45.0)) is True


def test_subsequent_checks_still_require_visibility_and_range():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    gate.evaluate(sample(True, tz=1.6))
    assert gate.evaluate(sample(True, tz=0.9)) is False


def test_tracking_latches_false():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    gate.evaluate(sample(True, tz=1.6))
    gate.evaluate(sample(False, tz=1.6))

    for _ in range(5):
        assert gate.evaluate(sample(True, tz=1.6, yaw=0.0)) is False


def test_failed_first_check_never_recovers():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    assert gate.evaluate(sample(True, tz=1.6, yaw=30.0)) is False
    assert gate.evaluate(sample(True, tz=1.6, yaw=0.0)) is False


def test_reset_restores_first_check():
    gate = TrackingGate(tz_min_range=1.0, yaw_max_range=20.0)
    gate.evaluate(sample(False))
    gate.reset()
    assert gate.check is TrackingCheck.FIRST_CHECK
    assert gate.evaluate(sample(True, tz=1.6)) is True
