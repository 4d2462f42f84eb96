"""
Skeleton document definitions.

Typed intermediate representation of a skeleton JSON document. The
definitions only mirror the document structure; name resolution, color
decoding and curve precomputation happen when the skeleton is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .errors import DocumentError

CurveDefinition = Union[None, str, List[float]]

ATTACHMENT_TYPES = ("region", "regionsequence", "boundingbox")
CURVE_TAGS = ("linear", "stepped")


def _require(data: Dict[str, Any], key: str, context: str) -> Any:
    if key not in data:
        raise DocumentError(f"{context} is missing required '{key}' field")
    return data[key]


def _to_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise DocumentError(f"Field '{key}' must be a number, got {value!r}") from exc


def _optional_float(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else _to_float(value, key)


def _parse_curve(value: Any, context: str) -> CurveDefinition:
    if value is None:
        return None
    if isinstance(value, str):
        if value not in CURVE_TAGS:
            raise DocumentError(f"{context}: curve must be 'linear', 'stepped' or 4 numbers, got {value!r}")
        return value
    if isinstance(value, (list, tuple)) and len(value) == 4:
        cx1, cy1, cx2, cy2 = (_to_float(v, "curve") for v in value)
        # Time controls outside [0, 1] would fold the curve back in time.
        # Value controls may overshoot.
        if not (0.0 <= cx1 <= 1.0 and 0.0 <= cx2 <= 1.0):
            raise DocumentError(f"{context}: bezier x controls must lie in [0, 1], got {value!r}")
        return [cx1, cy1, cx2, cy2]
    raise DocumentError(f"{context}: curve must be 'linear', 'stepped' or 4 numbers, got {value!r}")


@dataclass
class BoneDefinition:
    """Bone entry of the ``bones`` array."""

    name: str
    parent: Optional[str] = None
    length: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    rotation: Optional[float] = None  # Degrees
    inherit_scale: Optional[bool] = None
    inherit_rotation: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoneDefinition":
        name = _require(data, "name", "Bone definition")
        return cls(
            name=name,
            parent=data.get("parent"),
            length=_optional_float(data, "length"),
            x=_optional_float(data, "x"),
            y=_optional_float(data, "y"),
            scale_x=_optional_float(data, "scaleX"),
            scale_y=_optional_float(data, "scaleY"),
            rotation=_optional_float(data, "rotation"),
            inherit_scale=data.get("inheritScale"),
            inherit_rotation=data.get("inheritRotation"),
        )


@dataclass
class SlotDefinition:
    """Slot entry of the ``slots`` array."""

    name: str
    bone: str
    color: Optional[str] = None  # RRGGBBAA hex
    attachment: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlotDefinition":
        name = _require(data, "name", "Slot definition")
        return cls(
            name=name,
            bone=_require(data, "bone", f"Slot '{name}'"),
            color=data.get("color"),
            attachment=data.get("attachment"),
        )


@dataclass
class AttachmentDefinition:
    """Attachment entry inside a skin."""

    name: Optional[str] = None
    type: Optional[str] = None  # region, regionsequence, boundingbox
    x: Optional[float] = None
    y: Optional[float] = None
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    rotation: Optional[float] = None  # Degrees
    width: Optional[float] = None
    height: Optional[float] = None
    fps: Optional[float] = None
    mode: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttachmentDefinition":
        attachment_type = data.get("type")
        if attachment_type is not None and attachment_type not in ATTACHMENT_TYPES:
            raise DocumentError(f"Unsupported attachment type: {attachment_type}")
        return cls(
            name=data.get("name"),
            type=attachment_type,
            x=_optional_float(data, "x"),
            y=_optional_float(data, "y"),
            scale_x=_optional_float(data, "scaleX"),
            scale_y=_optional_float(data, "scaleY"),
            rotation=_optional_float(data, "rotation"),
            width=_optional_float(data, "width"),
            height=_optional_float(data, "height"),
            fps=_optional_float(data, "fps"),
            mode=data.get("mode"),
        )


@dataclass
class TranslateKeyframeDefinition:
    """Keyframe of a bone ``translate`` or ``scale`` timeline."""

    time: float
    curve: CurveDefinition = None
    x: Optional[float] = None
    y: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranslateKeyframeDefinition":
        time = _to_float(_require(data, "time", "Keyframe"), "time")
        return cls(
            time=time,
            curve=_parse_curve(data.get("curve"), f"Keyframe at {time}"),
            x=_optional_float(data, "x"),
            y=_optional_float(data, "y"),
        )


ScaleKeyframeDefinition = TranslateKeyframeDefinition


@dataclass
class RotateKeyframeDefinition:
    """Keyframe of a bone ``rotate`` timeline."""

    time: float
    curve: CurveDefinition = None
    angle: Optional[float] = None  # Degrees

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RotateKeyframeDefinition":
        time = _to_float(_require(data, "time", "Keyframe"), "time")
        return cls(
            time=time,
            curve=_parse_curve(data.get("curve"), f"Keyframe at {time}"),
            angle=_optional_float(data, "angle"),
        )


@dataclass
class AttachmentKeyframeDefinition:
    """Keyframe of a slot ``attachment`` timeline (``name`` None hides the slot)."""

    time: float
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttachmentKeyframeDefinition":
        return cls(time=_to_float(_require(data, "time", "Keyframe"), "time"), name=data.get("name"))


@dataclass
class ColorKeyframeDefinition:
    """Keyframe of a slot ``color`` timeline."""

    time: float
    color: Optional[str] = None
    curve: CurveDefinition = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorKeyframeDefinition":
        time = _to_float(_require(data, "time", "Keyframe"), "time")
        return cls(
            time=time,
            color=data.get("color"),
            curve=_parse_curve(data.get("curve"), f"Keyframe at {time}"),
        )


@dataclass
class BoneTimelineDefinition:
    translate: List[TranslateKeyframeDefinition] = field(default_factory=list)
    rotate: List[RotateKeyframeDefinition] = field(default_factory=list)
    scale: List[ScaleKeyframeDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoneTimelineDefinition":
        return cls(
            translate=[TranslateKeyframeDefinition.from_dict(k) for k in data.get("translate") or []],
            rotate=[RotateKeyframeDefinition.from_dict(k) for k in data.get("rotate") or []],
            scale=[ScaleKeyframeDefinition.from_dict(k) for k in data.get("scale") or []],
        )


@dataclass
class SlotTimelineDefinition:
    attachment: List[AttachmentKeyframeDefinition] = field(default_factory=list)
    color: List[ColorKeyframeDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SlotTimelineDefinition":
        return cls(
            attachment=[AttachmentKeyframeDefinition.from_dict(k) for k in data.get("attachment") or []],
            color=[ColorKeyframeDefinition.from_dict(k) for k in data.get("color") or []],
        )


@dataclass
class EventKeyframeDefinition:
    """Event keyframe (stored on the track, never dispatched)."""

    time: float
    name: str
    int_value: Optional[int] = None
    float_value: Optional[float] = None
    string_value: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventKeyframeDefinition":
        time = _to_float(_require(data, "time", "Event keyframe"), "time")
        return cls(
            time=time,
            name=_require(data, "name", f"Event keyframe at {time}"),
            int_value=data.get("int"),
            float_value=_optional_float(data, "float"),
            string_value=data.get("string"),
        )


@dataclass
class DrawOrderOffsetDefinition:
    slot: str
    offset: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DrawOrderOffsetDefinition":
        return cls(
            slot=_require(data, "slot", "Draw order offset"),
            offset=int(_to_float(_require(data, "offset", "Draw order offset"), "offset")),
        )


@dataclass
class DrawOrderKeyframeDefinition:
    """Draw order keyframe (stored on the track, never applied)."""

    time: float
    offsets: List[DrawOrderOffsetDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DrawOrderKeyframeDefinition":
        return cls(
            time=_to_float(_require(data, "time", "Draw order keyframe"), "time"),
            offsets=[DrawOrderOffsetDefinition.from_dict(o) for o in data.get("offsets") or []],
        )


@dataclass
class AnimationDefinition:
    """One named entry of the ``animations`` object."""

    bones: Dict[str, BoneTimelineDefinition] = field(default_factory=dict)
    slots: Dict[str, SlotTimelineDefinition] = field(default_factory=dict)
    events: List[EventKeyframeDefinition] = field(default_factory=list)
    draworder: List[DrawOrderKeyframeDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnimationDefinition":
        return cls(
            bones={name: BoneTimelineDefinition.from_dict(t) for name, t in (data.get("bones") or {}).items()},
            slots={name: SlotTimelineDefinition.from_dict(t) for name, t in (data.get("slots") or {}).items()},
            events=[EventKeyframeDefinition.from_dict(e) for e in data.get("events") or []],
            draworder=[DrawOrderKeyframeDefinition.from_dict(d) for d in data.get("draworder") or []],
        )


@dataclass
class SkeletonDocument:
    """
    Complete skeleton document.

    Example JSON:
        {
            "bones": [{"name": "root"}, {"name": "arm", "parent": "root", "rotation": 45}],
            "slots": [{"name": "arm", "bone": "arm", "attachment": "arm"}],
            "skins": {"default": {"arm": {"arm": {"width": 10, "height": 4}}}},
            "animations": {
                "wave": {"bones": {"arm": {"rotate": [{"time": 0, "angle": 0}, {"time": 1, "angle": 30}]}}}
            }
        }
    """

    bones: List[BoneDefinition] = field(default_factory=list)
    slots: List[SlotDefinition] = field(default_factory=list)
    # skin name -> slot name -> attachment name -> attachment
    skins: Dict[str, Dict[str, Dict[str, AttachmentDefinition]]] = field(default_factory=dict)
    animations: Dict[str, AnimationDefinition] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkeletonDocument":
        if not isinstance(data, dict):
            raise DocumentError("Skeleton document must be a JSON object")

        skins = {}
        for skin_name, slots in (data.get("skins") or {}).items():
            skins[skin_name] = {
                slot_name: {
                    attachment_name: AttachmentDefinition.from_dict(attachment)
                    for attachment_name, attachment in attachments.items()
                }
                for slot_name, attachments in slots.items()
            }

        return cls(
            bones=[BoneDefinition.from_dict(b) for b in data.get("bones") or []],
            slots=[SlotDefinition.from_dict(s) for s in data.get("slots") or []],
            skins=skins,
            animations={
                name: AnimationDefinition.from_dict(a)
                for name, a in (data.get("animations") or {}).items()
            },
        )
