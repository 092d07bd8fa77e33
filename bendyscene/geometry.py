"""4x4 matrix helpers with fixed-function GL conventions, and mesh helpers."""

from __future__ import annotations

import math

__all__ = [
    "Matrix",
    "Vector",
    "aspect_ratio",
    "half_sphere_quads",
    "half_sphere_vertices",
    "identity",
    "multiply",
    "perspective",
    "rotate",
    "scale",
    "transform_point",
    "translate",
]

Matrix = tuple[tuple[float, float, float, float], ...]
Vector = tuple[float, float, float]


def identity() -> Matrix:
    """Return the 4x4 identity matrix."""
    return tuple(
        tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
    )


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a @ b`` (``b`` is applied to points first)."""
    columns = tuple(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )


def translate(x: float, y: float, z: float) -> Matrix:
    """Return a translation matrix."""
    return (
        (1.0, 0.0, 0.0, float(x)),
        (0.0, 1.0, 0.0, float(y)),
        (0.0, 0.0, 1.0, float(z)),
        (0.0, 0.0, 0.0, 1.0),
    )


def scale(x: float, y: float, z: float) -> Matrix:
    """Return a scaling matrix."""
    return (
        (float(x), 0.0, 0.0, 0.0),
        (0.0, float(y), 0.0, 0.0),
        (0.0, 0.0, float(z), 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotate(angle: float, x: float, y: float, z: float) -> Matrix:
    """Return a rotation of ``angle`` degrees about the axis (x, y, z)."""
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = x / length, y / length, z / length
    radians = math.radians(angle)
    c = math.cos(radians)
    s = math.sin(radians)
    t = 1.0 - c
    return (
        (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0),
        (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0),
        (x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def transform_point(m: Matrix, p: Vector) -> Vector:
    """Apply ``m`` to the point ``p``, dividing by the homogeneous coordinate."""
    vector = (*p, 1.0)
    out = [sum(a * b for a, b in zip(row, vector)) for row in m]
    w = out[3]
    if w == 0.0:
        raise ValueError("point is mapped to infinity")
    return (out[0] / w, out[1] / w, out[2] / w)


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Return a perspective projection; ``fovy`` is in degrees."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = near - far
    return (
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, f, 0.0, 0.0),
        (0.0, 0.0, (far + near) / depth, 2.0 * far * near / depth),
        (0.0, 0.0, -1.0, 0.0),
    )


def aspect_ratio(width: int, height: int) -> float:
    """Width over height, treating a zero height as one."""
    if height == 0:
        height = 1
    return width / height


def _check_resolution(scalex: int, scaley: int) -> None:
    if scalex < 1 or scaley < 1:
        raise ValueError("half sphere resolution must be at least 1")


def half_sphere_vertices(scalex: int, scaley: int, r: float) -> list[Vector]:
    """Vertices of an upper half sphere: ``scalex`` rings of ``scaley`` points."""
    _check_resolution(scalex, scaley)
    vertices = []
    for i in range(scalex):
        elevation = i * math.pi / (2 * scalex)
        for j in range(scaley):
            azimuth = j * 2 * math.pi / scaley
            vertices.append(
                (
                    r * math.cos(azimuth) * math.cos(elevation),
                    r * math.sin(elevation),
                    r * math.sin(azimuth) * math.cos(elevation),
                )
            )
    return vertices


def half_sphere_quads(
    scalex: int, scaley: int, r: float
) -> list[tuple[Vector, Vector, Vector, Vector]]:
    """Quads joining neighbouring rings of :func:`half_sphere_vertices`."""
    vertices = half_sphere_vertices(scalex, scaley, r)
    rings = [vertices[i * scaley:(i + 1) * scaley] for i in range(scalex)]
    quads = []
    for lower, upper in zip(rings, rings[1:]):
        for j in range(scaley):
            k = (j + 1) % scaley
            quads.append((lower[j], lower[k], upper[k], upper[j]))
    return quads