import pytest

from aim_range_align.config import AlignmentConfig, PidGains
from aim_range_align.constants import ALLOWED_TAG_IDS, DRIVETRAIN_RESOURCE
from aim_range_align.enums import CommandState, FinishReason

# Default right-side profile
STRAFE_TARGET, RANGE_TARGET, AIM_TARGET = 0.165, -0.45, 0.0


def test_scenario_a_tracks_and_drives(make_command, vision, drive):
    vision.set(True, tx=0.0, tz=1.6, yaw=5.0)
    command = make_command(AlignmentConfig(tz_min_range=1.0, yaw_max_range=20.0))

    command.activate()
    assert command.tracking is True
    assert command.state is CommandState.RUNNING

    command.tick()
    assert len(drive.calls) == 1


def test_scenario_b_not_visible_finishes_immediately(make_command, vision, drive):
    vision.set(False, tx=STRAFE_TARGET + 0.3, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()

    command.activate()
    assert command.tracking is False

    vision.set(True, tx=STRAFE_TARGET + 0.3, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command.tick()
    assert command.is_finished() is True
    assert drive.calls == []

    command.deactivate(False)
    assert command.finish_reason is FinishReason.TARGET_LOST


def test_scenario_c_lateral_error_only(make_command, vision, drive):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    command.activate()

    for _ in range(3):
        command.tick()
        forward, strafe, rotate = drive.calls[-1]
        assert strafe > 0.0
        assert forward == pytest.approx(0.0)
        assert rotate == pytest.approx(0.0)
        assert command.is_finished() is False

    vision.set(True, tx=STRAFE_TARGET + 0.01, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command.tick()
    assert command.is_finished() is True

    command.deactivate(False)
    assert command.finish_reason is FinishReason.CONVERGED


def test_scenario_d_times_out_after_limit(make_command, vision, clock):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    command.activate()

    clock.t = 1.5
    command.tick()
    assert command.is_finished() is False

    clock.t = 3.0
    command.tick()
    assert command.is_finished() is False

    clock.t = 3.01
    command.tick()
    assert command.tracking is True
    assert command.is_finished() is True

    command.deactivate(False)
    assert command.finish_reason is FinishReason.TIMED_OUT


def test_exact_targets_finish_on_same_tick(make_command, vision):
    vision.set(True, tx=STRAFE_TARGET, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    command.activate()
    command.tick()
    assert command.is_finished() is True


def test_tick_losing_tracking_still_drives_then_stops(make_command, vision, drive):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    command.activate()
    command.tick()
    assert len(drive.calls) == 1

    vision.set(False, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command.tick()
    assert command.tracking is False
    assert len(drive.calls) == 2

    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command.tick()
    command.tick()
    assert command.tracking is False
    assert len(drive.calls) == 2


def test_heading_bound_only_checked_at_activation(make_command, vision, drive):
    vision.set(True, tx=STRAFE_TARGET, tz=RANGE_TARGET, yaw=5.0)
    command = make_command()
    command.activate()

    vision.set(True, tx=STRAFE_TARGET, tz=RANGE_TARGET, yaw=40.0)
    command.tick()
    assert command.tracking is True
    assert len(drive.calls) == 1


def test_positioning_status_spans_activation(make_command, vision):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    assert command.positioning is False

    command.activate()
    assert command.positioning is True
    assert command.status.positioning is True

    command.deactivate(True)
    assert command.positioning is False
    assert command.status.state is CommandState.TERMINATED
    assert command.finish_reason is FinishReason.INTERRUPTED


def test_interrupt_sends_no_drive_command(make_command, vision, drive):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command()
    command.activate()
    command.tick()
    command.deactivate(True)
    assert len(drive.calls) == 1


def test_allow_list_applied_at_activation_and_kept(make_command, vision):
    command = make_command()
    command.activate()
    assert vision.allowed_ids == ALLOWED_TAG_IDS

    command.deactivate(False)
    assert vision.allowed_ids == ALLOWED_TAG_IDS
    assert vision.configure_calls == 1


def test_pid_state_resets_between_activations(make_command, vision):
    vision.set(True, tx=STRAFE_TARGET + 0.5, tz=RANGE_TARGET, yaw=AIM_TARGET)
    command = make_command(AlignmentConfig(strafe_gains=PidGains(kp=1.0, ki=1.0)))

    command.activate()
    command.tick()
    command.tick()
    assert command.controller.pid_strafe.i != 0.0
    command.deactivate(True)

    command.activate()
    assert command.controller.pid_strafe.i == 0.0
    assert command.controller.pid_strafe.prev_e == 0.0


def test_left_side_profile(make_command, vision):
    vision.set(True, tx=-0.165, tz=-0.45, yaw=0.0)
    command = make_command(AlignmentConfig(right_side=False))
    command.activate()
    command.tick()
    assert command.profile.strafe_target == pytest.approx(-0.165)
    assert command.is_finished() is True


def test_requires_drivetrain(make_command):
    assert DRIVETRAIN_RESOURCE in make_command().requirements


def test_lifecycle_misuse_raises(make_command):
    command = make_command()
    with pytest.raises(RuntimeError):
        command.tick()

    command.activate()
    with pytest.raises(RuntimeError):
        command.activate()


def test_is_finished_false_when_not_running(make_command):
    assert make_command().is_finished() is False
