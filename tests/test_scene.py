import pytest

from bendyscene.controls import Controls, Pose
from bendyscene.geometry import transform_point
from bendyscene.scene import (
    BLACK,
    TEXTURES,
    build_bendy,
    build_scene,
    room_quads,
)


def _origin(primitive):
    return transform_point(primitive.transform, (0.0, 0.0, 0.0))


def _arms(pose):
    return [
        p
        for p in build_bendy(pose)
        if p.kind == "cylinder" and p.params[:2] == (0.35, 5.2)
    ]


def test_body_comes_first():
    body = build_bendy(Pose())[0]
    assert body.kind == "sphere"
    assert body.params == (2.25, 50, 50)
    assert body.color == BLACK


def test_pose_keeps_primitive_count():
    posed = Pose(l_arm=-25.0, r_leg=60.0, l_finger=-20.0, finger_ly=-0.2)
    assert len(build_bendy(posed)) == len(build_bendy(Pose()))


def test_two_boots():
    kinds = [p.kind for p in build_bendy(Pose())]
    assert kinds.count("half_sphere") == 2


def test_right_arm_moves_only_one_arm():
    rest = _arms(Pose())
    raised = _arms(Pose(r_arm=25.0))
    changed = [a for a, b in zip(rest, raised) if a.transform != b.transform]
    assert len(changed) == 1
    assert _origin(changed[0])[0] < 0.0


def test_left_leg_changes_only_left_side():
    rest = build_bendy(Pose())
    moved = build_bendy(Pose(l_leg=30.0))
    changed = [a for a, b in zip(rest, moved) if a.transform != b.transform]
    assert len(changed) > 0
    assert all(_origin(p)[0] > 0.0 for p in changed)


def test_room_quads_are_cube_faces():
    quads = room_quads()
    assert len(quads) == 6
    assert {q.texture for q in quads} <= set(TEXTURES)
    for quad in quads:
        assert all(abs(c) == 8.0 for _, vertex in quad.params for c in vertex)


def test_scene_order_and_size():
    controls = Controls(pos_x=1.0, pos_y=-2.0, pos_z=-30.0)
    scene = build_scene(controls)
    assert scene[0].kind == "model"
    assert len(scene) == 1 + len(build_bendy(controls.pose)) + len(room_quads())
    assert [p.kind for p in scene[-6:]] == ["quad"] * 6


def test_model_sits_at_camera_offset():
    controls = Controls(pos_x=1.0, pos_y=-2.0, pos_z=-30.0, angle_x=20.0, angle_y=45.0)
    head = build_scene(controls)[0]
    assert _origin(head) == pytest.approx((1.0, -2.0, -30.0))