"""Keyboard and mouse state of the viewer: Bendy's pose and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from bendyscene.objmodel import Model

__all__ = [
    "Action",
    "Controls",
    "DOWN",
    "LEFT_BUTTON",
    "MAX_SCROLL",
    "Pose",
    "SOUND_FILE",
    "UP",
    "WHEEL_DOWN",
    "WHEEL_UP",
    "camera_for_model",
]

LEFT_BUTTON = 0
WHEEL_UP = 3
WHEEL_DOWN = 4
DOWN = 0
UP = 1

ESCAPE = "\x1b"
MAX_SCROLL = 15
INITIAL_SCROLL = 5
SCROLL_STEPS = 10
MIN_PITCH = -15.0
MAX_PITCH = 35.0
FULL_TURN = 360.0

SOUND_FILE = Path("Sound") / "BATDR.wav"


class Action(Enum):
    """What a key press asks the viewer to do."""

    POSE = auto()
    PLAY_SOUND = auto()
    STOP_SOUND = auto()
    QUIT = auto()


@dataclass(frozen=True)
class _Move:
    joint: str
    delta: float
    limit: float
    finger: str | None = None
    finger_delta: float = 0.0

    def allowed(self, value: float) -> bool:
        return value > self.limit if self.delta < 0 else value < self.limit


_MOVES = {
    "a": _Move("l_arm", -5.0, -25.0),
    "A": _Move("l_arm", 5.0, 15.0),
    "d": _Move("r_arm", 5.0, 25.0),
    "D": _Move("r_arm", -5.0, -15.0),
    "q": _Move("l_hand", -5.0, -30.0),
    "Q": _Move("l_hand", 5.0, 30.0),
    "e": _Move("r_hand", 5.0, 30.0),
    "E": _Move("r_hand", -5.0, -30.0),
    "z": _Move("l_leg", -5.0, -60.0),
    "Z": _Move("l_leg", 5.0, 60.0),
    "c": _Move("r_leg", -5.0, -60.0),
    "C": _Move("r_leg", 5.0, 60.0),
    "n": _Move("l_finger", -5.0, -20.0, "finger_ly", -0.05),
    "N": _Move("l_finger", 5.0, 0.0, "finger_ly", 0.05),
    "m": _Move("r_finger", 5.0, 20.0, "finger_ry", -0.05),
    "M": _Move("r_finger", -5.0, 0.0, "finger_ry", 0.05),
}


@dataclass
class Pose:
    """Joint angles in degrees and finger lifts of Bendy's limbs."""

    l_arm: float = 0.0
    r_arm: float = 0.0
    l_hand: float = 0.0
    r_hand: float = 0.0
    l_leg: float = 0.0
    r_leg: float = 0.0
    l_finger: float = 0.0
    r_finger: float = 0.0
    finger_ly: float = 0.0
    finger_ry: float = 0.0

    def apply_key(self, key: str) -> bool:
        """Move the joint bound to ``key``; return whether the pose changed."""
        move = _MOVES.get(key)
        if move is None or not move.allowed(getattr(self, move.joint)):
            return False
        setattr(self, move.joint, getattr(self, move.joint) + move.delta)
        if move.finger is not None:
            setattr(self, move.finger, getattr(self, move.finger) + move.finger_delta)
        return True


@dataclass
class Controls:
    """Camera position and orientation, mouse state and the current pose."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    zoom_per_scroll: float = 0.0
    angle_x: float = 0.0
    angle_y: float = 0.0
    current_scroll: int = INITIAL_SCROLL
    x_old: int = 0
    y_old: int = 0
    holding_mouse: bool = False
    updated: bool = False
    pose: Pose = field(default_factory=Pose)

    def key(self, key: str | int) -> Action | None:
        """Handle a key press, returning the action it calls for, if any."""
        if isinstance(key, int):
            key = chr(key)
        if key == ESCAPE:
            return Action.QUIT
        if key == "p":
            return Action.PLAY_SOUND
        if key == "P":
            return Action.STOP_SOUND
        if self.pose.apply_key(key):
            return Action.POSE
        return None

    def mouse(self, button: int, state: int, x: int, y: int) -> None:
        """Handle a button press or release, including wheel steps."""
        self.updated = True
        if button == LEFT_BUTTON:
            if state == DOWN:
                self.x_old = x
                self.y_old = y
                self.holding_mouse = True
            else:
                self.holding_mouse = False
        elif state == UP:
            if button == WHEEL_UP and self.current_scroll > 0:
                self.current_scroll -= 1
                self.pos_z += self.zoom_per_scroll
            elif button == WHEEL_DOWN and self.current_scroll < MAX_SCROLL:
                self.current_scroll += 1
                self.pos_z -= self.zoom_per_scroll

    def motion(self, x: int, y: int) -> None:
        """Rotate the view while the left button is held."""
        if not self.holding_mouse:
            return
        self.updated = True
        self.angle_y += x - self.x_old
        self.x_old = x
        if self.angle_y > FULL_TURN:
            self.angle_y -= FULL_TURN
        elif self.angle_y < 0.0:
            self.angle_y += FULL_TURN
        self.angle_x += y - self.y_old
        self.y_old = y
        self.angle_x = min(max(self.angle_x, MIN_PITCH), MAX_PITCH)


def camera_for_model(model: Model) -> Controls:
    """Controls whose camera frames the loaded model."""
    return Controls(
        pos_x=model.pos_x,
        pos_y=model.pos_y,
        pos_z=model.pos_z - 1.0,
        zoom_per_scroll=-model.pos_z / SCROLL_STEPS,
    )