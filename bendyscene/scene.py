"""Building the drawable scene: Bendy's body parts and the textured room."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

from bendyscene.controls import Controls, Pose
from bendyscene.geometry import Matrix, identity, multiply, rotate, scale, translate

__all__ = [
    "BLACK",
    "BOOT",
    "ORANGE",
    "Primitive",
    "TEXTURES",
    "WHITE",
    "build_bendy",
    "build_scene",
    "room_quads",
]

Colour = tuple[float, float, float]

BLACK: Colour = (0.0, 0.0, 0.0)
WHITE: Colour = (1.0, 1.0, 1.0)
ORANGE: Colour = (1.0, 0.66, 0.17)
BOOT: Colour = (0.15, 0.13, 0.12)

TEXTURES = {
    "wall": "Texture/Wall.bmp",
    "ceiling": "Texture/Ceiling.bmp",
    "floor": "Texture/Floor.bmp",
}

_BODY_SCALE = 1.66
_BENDY_SCALE = 2.5
_ROOM_SCALE = (16.0, 7.0, 16.0)
_ROOM_LIFT = 3.25
_TEX_COORDS = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0))
_ROOM_FACES = (
    ("wall", ((-8, -8, 8), (-8, 8, 8), (8, 8, 8), (8, -8, 8))),
    ("wall", ((-8, -8, -8), (-8, 8, -8), (-8, 8, 8), (-8, -8, 8))),
    ("wall", ((8, -8, -8), (8, 8, -8), (8, 8, 8), (8, -8, 8))),
    ("wall", ((-8, -8, -8), (-8, 8, -8), (8, 8, -8), (8, -8, -8))),
    ("ceiling", ((-8, 8, -8), (-8, 8, 8), (8, 8, 8), (8, 8, -8))),
    ("floor", ((-8, -8, -8), (-8, -8, 8), (8, -8, 8), (8, -8, -8))),
)


@dataclass(frozen=True)
class Primitive:
    """A shape to draw: its kind, size parameters, colour and model transform.

    Kinds are ``sphere``, ``cone``, ``torus``, ``cylinder`` and
    ``half_sphere`` with their size parameters, ``quad`` whose parameters are
    four (texcoord, vertex) pairs, and ``model`` for the loaded head.
    """

    kind: str
    params: tuple
    color: Colour
    transform: Matrix
    texture: str | None = None


class _Builder:
    def __init__(self) -> None:
        self.matrix = identity()
        self.color = BLACK
        self.primitives: list[Primitive] = []

    def translate(self, x: float, y: float, z: float) -> None:
        self.matrix = multiply(self.matrix, translate(x, y, z))

    def rotate(self, angle: float, x: float, y: float, z: float) -> None:
        self.matrix = multiply(self.matrix, rotate(angle, x, y, z))

    def scale(self, x: float, y: float, z: float) -> None:
        self.matrix = multiply(self.matrix, scale(x, y, z))

    @contextmanager
    def pushed(self) -> Iterator[None]:
        saved = self.matrix
        try:
            yield
        finally:
            self.matrix = saved

    def emit(self, kind: str, *params: float) -> None:
        self.primitives.append(Primitive(kind, params, self.color, self.matrix))


def _body(b: _Builder) -> None:
    b.color = BLACK
    with b.pushed():
        b.translate(0.0, -1.3, 0.0)
        b.scale(0.85, 1.3, 0.85)
        b.emit("sphere", 2.25, 50, 50)


def _bowtie(b: _Builder) -> None:
    b.color = ORANGE
    with b.pushed():
        b.translate(0.0, 0.8, 1.5)
        b.scale(1.0, 1.0, 0.5)
        b.emit("sphere", 0.35, 20, 20)
        for x, yaw in ((-1.5, 90.0), (1.5, -90.0)):
            with b.pushed():
                b.translate(x, 0.0, 0.0)
                b.rotate(yaw, 0.0, 1.0, 0.0)
                b.scale(0.75, 1.0, 1.0)
                b.emit("cone", 0.35, 2.0, 20, 20)


def _arm(b: _Builder, x: float, yaw: float) -> None:
    b.color = BLACK
    with b.pushed():
        b.translate(x, 0.75, 0.0)
        b.rotate(yaw, 0.0, 1.0, 0.0)
        b.emit("cylinder", 0.35, 5.2, 20, 20)


def _hand(
    b: _Builder,
    wrist_x: float,
    wrist_angle: float,
    facing: float,
    thumb_x: float,
    bent_x: float,
    bend_angle: float,
    bend_axis_z: float,
    lift: float,
) -> None:
    b.color = ORANGE
    with b.pushed():
        b.translate(wrist_x, 0.75, 0.0)
        b.rotate(wrist_angle, 0.0, 0.0, 1.0)
        b.rotate(facing, 0.0, 1.0, 0.0)
        b.emit("torus", 0.15, 0.35, 20, 20)
        with b.pushed():
            b.translate(0.0, 0.0, -0.75)
            b.scale(1.75, 1.0, 1.6)
            b.emit("sphere", 0.45, 20, 20)
        b.color = BLACK
        for dot_x in (0.225, -0.225):
            with b.pushed():
                b.translate(dot_x, 0.3, -0.75)
                b.scale(1.0, 1.0, 1.5)
                b.emit("sphere", 0.2, 20, 20)
        b.color = ORANGE
        for x, z, yaw in ((-0.55, -1.5, 110.0), (0.0, -1.75, 90.0), (0.55, -1.5, 70.0)):
            bent = x == bent_x
            with b.pushed():
                b.translate(x, 0.0, z)
                if bent:
                    b.translate(0.0, lift, 0.0)
                b.rotate(yaw, 0.0, 1.0, 0.0)
                if bent:
                    b.rotate(bend_angle, 0.0, 0.0, bend_axis_z)
                b.scale(2.5, 1.0, 1.0)
                b.emit("sphere", 0.3, 30, 30)
        with b.pushed():
            b.translate(thumb_x, 0.0, -0.55)
            b.scale(2.5, 1.0, 1.0)
            b.emit("sphere", 0.3, 30, 30)


def _leg(b: _Builder, x: float, angle: float) -> None:
    b.color = BLACK
    with b.pushed():
        b.translate(x, -3.0, 0.0)
        b.rotate(angle, 1.0, 0.0, 0.0)
        b.rotate(90.0, 1.0, 0.0, 0.0)
        b.emit("cylinder", 0.35, 4.5, 20, 20)
        b.color = BOOT
        with b.pushed():
            b.translate(0.0, 0.0, 3.5)
            b.emit("cylinder", 0.45, 1.5, 20, 20)
        with b.pushed():
            b.rotate(-90.0, 1.0, 0.0, 0.0)
            b.translate(0.0, -5.0, 1.0)
            b.scale(0.7, 1.1, 1.0)
            b.emit("half_sphere", 20, 20, 1.0)


def build_bendy(pose: Pose) -> list[Primitive]:
    """Bendy's body below the head, in the frame the head model is drawn in."""
    b = _Builder()
    b.scale(_BODY_SCALE, _BODY_SCALE, _BODY_SCALE)
    _body(b)
    _bowtie(b)
    with b.pushed():
        b.rotate(pose.r_arm, 0.0, 0.0, 1.0)
        _arm(b, -1.25, -90.0)
        _hand(b, -6.3, pose.r_hand, 90.0, -0.8, 0.55, pose.r_finger, -1.0, pose.finger_ry)
    with b.pushed():
        b.rotate(pose.l_arm, 0.0, 0.0, 1.0)
        _arm(b, 1.0, 90.0)
        _hand(b, 6.25, pose.l_hand, -90.0, 0.8, -0.55, pose.l_finger, 1.0, pose.finger_ly)
    _leg(b, -1.0, pose.r_leg)
    _leg(b, 1.0, pose.l_leg)
    return b.primitives


def room_quads() -> list[Primitive]:
    """The six textured faces of the room, in the room's own frame."""
    return [
        Primitive(
            "quad",
            tuple(
                (tex, tuple(float(c) for c in vertex))
                for tex, vertex in zip(_TEX_COORDS, corners)
            ),
            WHITE,
            identity(),
            texture,
        )
        for texture, corners in _ROOM_FACES
    ]


def _view(controls: Controls) -> Matrix:
    m = translate(controls.pos_x, controls.pos_y, controls.pos_z)
    return m


def _oriented(m: Matrix, controls: Controls) -> Matrix:
    m = multiply(m, rotate(controls.angle_x, 1.0, 0.0, 0.0))
    return multiply(m, rotate(controls.angle_y, 0.0, 1.0, 0.0))


def build_scene(controls: Controls) -> list[Primitive]:
    """Everything to draw for one frame, in drawing order, in eye coordinates."""
    bendy = multiply(_view(controls), scale(_BENDY_SCALE, _BENDY_SCALE, _BENDY_SCALE))
    bendy = _oriented(bendy, controls)
    primitives = [Primitive("model", (), WHITE, bendy)]
    primitives.extend(
        replace(p, transform=multiply(bendy, p.transform))
        for p in build_bendy(controls.pose)
    )
    room = _oriented(_view(controls), controls)
    room = multiply(room, scale(*_ROOM_SCALE))
    room = multiply(room, translate(0.0, _ROOM_LIFT, 0.0))
    primitives.extend(
        replace(q, transform=multiply(room, q.transform)) for q in room_quads()
    )
    return primitives