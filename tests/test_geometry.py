import math

import pytest

from bendyscene.geometry import (
    aspect_ratio,
    half_sphere_quads,
    half_sphere_vertices,
    identity,
    multiply,
    perspective,
    rotate,
    scale,
    transform_point,
    translate,
)


def _flat(matrix):
    return [value for row in matrix for value in row]


def test_identity_is_neutral():
    m = translate(1, 2, 3)
    assert multiply(identity(), m) == m
    assert multiply(m, identity()) == m


def test_translate_inverse():
    product = multiply(translate(1, 2, 3), translate(-1, -2, -3))
    assert _flat(product) == pytest.approx(_flat(identity()), abs=1e-9)


def test_transform_point_translate():
    assert transform_point(translate(1, 2, 3), (0.0, 0.0, 0.0)) == (1.0, 2.0, 3.0)


def test_transform_point_scale():
    assert transform_point(scale(2, 3, 4), (1.0, 1.0, 1.0)) == (2.0, 3.0, 4.0)


def test_rotate_round_trip():
    product = multiply(rotate(37.0, 1, 2, 3), rotate(-37.0, 1, 2, 3))
    assert _flat(product) == pytest.approx(_flat(identity()), abs=1e-9)


def test_rotation_preserves_length():
    p = (1.5, -2.0, 0.5)
    q = transform_point(rotate(123.0, 0, 1, 1), p)
    assert math.hypot(*q) == pytest.approx(math.hypot(*p))


def test_rotate_quarter_turn_about_z():
    assert transform_point(rotate(90.0, 0, 0, 1), (1.0, 0.0, 0.0)) == pytest.approx(
        (0.0, 1.0, 0.0), abs=1e-9
    )


def test_rotate_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate(10.0, 0, 0, 0)


def test_perspective_maps_planes_to_clip_range():
    m = perspective(45.0, 1.0, 1.0, 1000.0)
    assert transform_point(m, (0.0, 0.0, -1.0))[2] == pytest.approx(-1.0)
    assert transform_point(m, (0.0, 0.0, -1000.0))[2] == pytest.approx(1.0)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(45.0, 1.0, 5.0, 5.0)


def test_aspect_ratio_zero_height():
    assert aspect_ratio(600, 0) == 600.0


def test_aspect_ratio_inverts():
    assert aspect_ratio(800, 300) * 300 == pytest.approx(800)


def test_half_sphere_vertices_lie_on_sphere():
    vertices = half_sphere_vertices(20, 20, 1.0)
    assert len(vertices) == 20 * 20
    assert all(math.hypot(*v) == pytest.approx(1.0) for v in vertices)
    assert all(v[1] >= 0.0 for v in vertices)


def test_half_sphere_quads_use_sphere_vertices():
    vertices = set(half_sphere_vertices(5, 8, 2.0))
    quads = half_sphere_quads(5, 8, 2.0)
    assert len(quads) == (5 - 1) * 8
    assert all(corner in vertices for quad in quads for corner in quad)


def test_half_sphere_invalid_resolution():
    with pytest.raises(ValueError):
        half_sphere_vertices(0, 20, 1.0)