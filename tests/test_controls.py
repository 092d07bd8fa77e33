import pytest

from bendyscene.controls import (
    DOWN,
    LEFT_BUTTON,
    MAX_SCROLL,
    UP,
    WHEEL_DOWN,
    WHEEL_UP,
    Action,
    Controls,
    Pose,
    camera_for_model,
)
from bendyscene.objmodel import Model


def test_left_arm_limits():
    pose = Pose()
    for _ in range(20):
        pose.apply_key("a")
    assert pose.l_arm == -25.0
    for _ in range(20):
        pose.apply_key("A")
    assert pose.l_arm == 15.0


def test_leg_limits():
    pose = Pose()
    for _ in range(30):
        pose.apply_key("C")
    assert pose.r_leg == 60.0
    assert pose.apply_key("C") is False


def test_finger_round_trip():
    pose = Pose()
    for _ in range(10):
        pose.apply_key("n")
    assert pose.l_finger == -20.0
    for _ in range(10):
        pose.apply_key("N")
    assert pose.l_finger == 0.0
    assert pose.finger_ly == pytest.approx(0.0, abs=1e-9)


def test_right_finger_lowers_while_bending():
    pose = Pose()
    assert pose.apply_key("m") is True
    assert pose.r_finger > 0.0
    assert pose.finger_ry < 0.0


def test_unknown_key_changes_nothing():
    pose = Pose()
    assert pose.apply_key("x") is False
    assert pose == Pose()


def test_key_actions():
    controls = Controls()
    assert controls.key(27) is Action.QUIT
    assert controls.key("p") is Action.PLAY_SOUND
    assert controls.key("P") is Action.STOP_SOUND
    assert controls.key("d") is Action.POSE
    assert controls.key("?") is None


def test_camera_for_model():
    controls = camera_for_model(Model(pos_x=1.0, pos_y=2.0, pos_z=-20.0))
    assert controls.pos_x == 1.0
    assert controls.pos_z == -21.0
    assert controls.zoom_per_scroll == 2.0


def test_scroll_round_trip_and_limits():
    controls = camera_for_model(Model(pos_z=-20.0))
    start = controls.pos_z
    controls.mouse(WHEEL_DOWN, UP, 0, 0)
    assert controls.pos_z == pytest.approx(start - controls.zoom_per_scroll)
    controls.mouse(WHEEL_UP, UP, 0, 0)
    assert controls.pos_z == pytest.approx(start)
    for _ in range(30):
        controls.mouse(WHEEL_DOWN, UP, 0, 0)
    assert controls.current_scroll == MAX_SCROLL
    for _ in range(30):
        controls.mouse(WHEEL_UP, UP, 0, 0)
    assert controls.current_scroll == 0


def test_wheel_press_is_ignored():
    controls = Controls(zoom_per_scroll=1.0)
    controls.mouse(WHEEL_DOWN, DOWN, 0, 0)
    assert controls.pos_z == 0.0
    assert controls.updated is True


def test_drag_rotates_and_clamps_pitch():
    controls = Controls()
    controls.mouse(LEFT_BUTTON, DOWN, 0, 0)
    controls.motion(10, 100)
    assert controls.angle_y == 10.0
    assert controls.angle_x == 35.0
    controls.motion(10, -200)
    assert controls.angle_x == -15.0


def test_yaw_wraps_below_zero():
    controls = Controls()
    controls.mouse(LEFT_BUTTON, DOWN, 0, 0)
    controls.motion(-10, 0)
    assert controls.angle_y == 350.0


def test_motion_without_button_does_nothing():
    controls = Controls()
    controls.mouse(LEFT_BUTTON, DOWN, 0, 0)
    controls.mouse(LEFT_BUTTON, UP, 0, 0)
    controls.motion(50, 50)
    assert (controls.angle_x, controls.angle_y) == (0.0, 0.0)