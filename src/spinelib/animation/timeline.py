"""
Timelines

Keyframe sequences describing how one bone or slot property changes over time.
"""

import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Iterable, List, Set

from ..core.color import decode_color
from ..core.document import BoneTimelineDefinition, SlotTimelineDefinition
from ..core.errors import TimelineOrderError
from ..core.transform import SRT
from .curve import STEPPED, Curve, curve_from_definition
from .values import BLEND_RULES, ValueKind, normalize_degrees


@dataclass(frozen=True)
class Keyframe:
    """Single keyframe: time in seconds, curve to the next keyframe, and value."""

    time: float
    curve: Curve
    value: Any


class Timeline:
    """
    Time-ordered keyframes for one property of one bone or slot.

    Evaluation returns None before the first keyframe and holds the last
    value after the final keyframe.
    """

    def __init__(self, kind: ValueKind, keyframes: Iterable[Keyframe] = ()):
        """
        Initialize timeline.

        Args:
            kind: Value kind stored in the keyframes (selects the blend rule)
            keyframes: Keyframes in non-decreasing time order

        Raises:
            TimelineOrderError: If a keyframe time is lower than its predecessor
        """
        self.kind = kind
        self.keyframes: List[Keyframe] = list(keyframes)
        self.times: List[float] = [k.time for k in self.keyframes]
        self._blend = BLEND_RULES[kind]

        for previous, current in zip(self.times, self.times[1:]):
            if current < previous:
                raise TimelineOrderError(previous, current)

    def __len__(self):
        return len(self.keyframes)

    def __bool__(self):
        return bool(self.keyframes)

    @property
    def duration(self) -> float:
        """Time of the last keyframe (0 for an empty timeline)."""
        return self.times[-1] if self.times else 0.0

    def evaluate(self, time: float):
        """
        Sample the timeline at a given time.

        Args:
            time: Time in seconds

        Returns:
            Interpolated value, or None before the first keyframe
        """
        if not self.keyframes or time < self.times[0]:
            return None

        index = bisect_right(self.times, time)
        if index >= len(self.keyframes):
            return self.keyframes[-1].value

        previous = self.keyframes[index - 1]
        following = self.keyframes[index]
        percent = (time - previous.time) / (following.time - previous.time)
        percent = previous.curve.evaluate(percent)
        return self._blend(previous.value, following.value, percent)

    def __repr__(self):
        return f"Timeline(kind={self.kind.value}, keyframes={len(self.keyframes)})"


class BoneTimeline:
    """Translate, rotate and scale timelines of one bone."""

    def __init__(self, translate: Timeline, rotate: Timeline, scale: Timeline):
        self.translate = translate
        self.rotate = rotate
        self.scale = scale

    @classmethod
    def from_definition(cls, definition: BoneTimelineDefinition) -> "BoneTimeline":
        translate = Timeline(ValueKind.VECTOR, (
            Keyframe(k.time, curve_from_definition(k.curve), (k.x or 0.0, k.y or 0.0))
            for k in definition.translate
        ))
        rotate = Timeline(ValueKind.ANGLE, (
            Keyframe(k.time, curve_from_definition(k.curve), math.radians(normalize_degrees(k.angle or 0.0)))
            for k in definition.rotate
        ))
        scale = Timeline(ValueKind.VECTOR, (
            Keyframe(
                k.time,
                curve_from_definition(k.curve),
                (1.0 if k.x is None else k.x, 1.0 if k.y is None else k.y),
            )
            for k in definition.scale
        ))
        return cls(translate, rotate, scale)

    @property
    def duration(self) -> float:
        return max(self.translate.duration, self.rotate.duration, self.scale.duration)

    def srt(self, time: float) -> SRT:
        """
        Evaluate all three timelines into an animated delta transform.

        Missing values contribute identity: zero translation, zero rotation
        and unit scale.
        """
        x, y = self.translate.evaluate(time) or (0.0, 0.0)
        rotation = self.rotate.evaluate(time)
        scale_x, scale_y = self.scale.evaluate(time) or (1.0, 1.0)
        return SRT(
            scale_x=scale_x,
            scale_y=scale_y,
            rotation=0.0 if rotation is None else rotation,
            x=x,
            y=y,
        )


class SlotTimeline:
    """Attachment and color timelines of one slot."""

    def __init__(self, attachment: Timeline, color: Timeline):
        self.attachment = attachment
        self.color = color

    @classmethod
    def from_definition(cls, definition: SlotTimelineDefinition) -> "SlotTimeline":
        # Attachment switches are always stepped
        attachment = Timeline(ValueKind.ATTACHMENT, (
            Keyframe(k.time, STEPPED, k.name) for k in definition.attachment
        ))
        color = Timeline(ValueKind.COLOR, (
            Keyframe(k.time, curve_from_definition(k.curve), decode_color(k.color))
            for k in definition.color
        ))
        return cls(attachment, color)

    @property
    def duration(self) -> float:
        return max(self.attachment.duration, self.color.duration)

    @property
    def drives_attachment(self) -> bool:
        return bool(self.attachment)

    def attachment_names(self) -> Set[str]:
        """Distinct attachment names referenced by the attachment timeline."""
        return {k.value for k in self.attachment.keyframes if k.value is not None}

