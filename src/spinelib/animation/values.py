"""
Interpolable values

The closed set of keyframe value kinds and their blend rules.
"""

import math
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..config.settings import ANGLE_WRAP_DEGREES

Vec2 = Tuple[float, float]
Color = Tuple[int, int, int, int]


class ValueKind(Enum):
    """Keyframe value kinds."""
    ANGLE = "angle"            # Rotation in radians
    VECTOR = "vector"          # Translation or scale (x, y)
    COLOR = "color"            # RGBA bytes
    ATTACHMENT = "attachment"  # Optional attachment name


def normalize_degrees(angle: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    full_turn = 2.0 * ANGLE_WRAP_DEGREES
    while angle > ANGLE_WRAP_DEGREES:
        angle -= full_turn
    while angle <= -ANGLE_WRAP_DEGREES:
        angle += full_turn
    return angle


def wrap_radians(delta: float) -> float:
    """Wrap an angle delta in radians into (-pi, pi]."""
    while delta > math.pi:
        delta -= 2.0 * math.pi
    while delta <= -math.pi:
        delta += 2.0 * math.pi
    return delta


def blend_angle(start: float, end: float, percent: float) -> float:
    """Interpolate rotation along the shortest arc."""
    return start + percent * wrap_radians(end - start)


def blend_vector(start: Vec2, end: Vec2, percent: float) -> Vec2:
    return (
        start[0] + percent * (end[0] - start[0]),
        start[1] + percent * (end[1] - start[1]),
    )


def blend_color(start: Color, end: Color, percent: float) -> Color:
    """Blend RGBA bytes per channel, clamping before conversion back to bytes."""
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    mixed = np.clip(np.floor(a + percent * (b - a) + 0.5), 0.0, 255.0)
    return tuple(int(c) for c in mixed)


def blend_attachment(start: Optional[str], end: Optional[str], percent: float) -> Optional[str]:
    # Attachment names never interpolate
    return start


BLEND_RULES = {
    ValueKind.ANGLE: blend_angle,
    ValueKind.VECTOR: blend_vector,
    ValueKind.COLOR: blend_color,
    ValueKind.ATTACHMENT: blend_attachment,
}
