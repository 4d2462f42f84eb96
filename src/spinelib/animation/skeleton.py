"""
Skeleton

Static pose graph: bones, slots, skins and animations loaded from a document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config.settings import DEFAULT_SKIN_NAME
from ..core.color import Color, decode_color
from ..core.document import BoneDefinition, SkeletonDocument, SlotDefinition
from ..core.errors import AnimationNotFound, BoneNotFound, DuplicateName, SkinNotFound, SlotNotFound
from ..core.transform import SRT
from .animation import AnimationTrack
from .skin import Attachment, Skin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bone:
    """
    Single bone of the skeleton hierarchy.

    ``parent`` is the index of an earlier bone in skeleton storage order, so
    every parent is stored (and solved) before its children.
    """

    name: str
    parent: Optional[int]
    srt: SRT
    length: float = 0.0
    inherit_rotation: bool = True
    inherit_scale: bool = True

    @classmethod
    def from_definition(cls, definition: BoneDefinition, bones: List["Bone"]) -> "Bone":
        parent = None
        if definition.parent is not None:
            parent = _index_of(definition.parent, bones, BoneNotFound)
        return cls(
            name=definition.name,
            parent=parent,
            srt=SRT.from_degrees(
                definition.scale_x, definition.scale_y,
                definition.rotation,
                definition.x, definition.y,
            ),
            length=definition.length or 0.0,
            inherit_rotation=True if definition.inherit_rotation is None else bool(definition.inherit_rotation),
            inherit_scale=True if definition.inherit_scale is None else bool(definition.inherit_scale),
        )


@dataclass(frozen=True)
class Slot:
    """Named attachment point bound to one bone."""

    name: str
    bone: int
    color: Color = (255, 255, 255, 255)
    attachment: Optional[str] = None

    @classmethod
    def from_definition(cls, definition: SlotDefinition, bones: List[Bone]) -> "Slot":
        return cls(
            name=definition.name,
            bone=_index_of(definition.bone, bones, BoneNotFound),
            color=decode_color(definition.color),
            attachment=definition.attachment,
        )


def _check_unique(items, kind: str):
    seen = set()
    for item in items:
        if item.name in seen:
            raise DuplicateName(kind, item.name)
        seen.add(item.name)


def _index_of(name: str, items, error):
    for index, item in enumerate(items):
        if item.name == name:
            return index
    raise error(name)


class Skeleton:
    """
    Skeleton data loaded into memory.

    Manages the static pose graph and provides:
    - Lookups of bones, slots, skins and animations by name
    - Session creation for a (skin, animation) pair
    """

    def __init__(
        self,
        bones: List[Bone],
        slots: List[Slot],
        skins: Dict[str, Skin],
        animations: Dict[str, AnimationTrack],
    ):
        """
        Initialize skeleton.

        Args:
            bones: Bones in parent-before-child order
            slots: Slots in draw order
            skins: Skin name -> skin
            animations: Animation name -> track
        """
        for index, bone in enumerate(bones):
            if bone.parent is not None and not 0 <= bone.parent < index:
                raise BoneNotFound(f"parent #{bone.parent} of '{bone.name}'")
        for slot in slots:
            if not 0 <= slot.bone < len(bones):
                raise BoneNotFound(f"bone #{slot.bone} of slot '{slot.name}'")
        _check_unique(bones, "bone")
        _check_unique(slots, "slot")

        self.bones = bones
        self.slots = slots
        self.skins = skins
        self.animations = animations
        self._bone_by_name = {bone.name: i for i, bone in enumerate(bones)}
        self._slot_by_name = {slot.name: i for i, slot in enumerate(slots)}

    @classmethod
    def from_document(cls, document: SkeletonDocument) -> "Skeleton":
        """
        Build a skeleton from a parsed document.

        Raises:
            BoneNotFound: If a parent or slot bone reference is unknown
            DuplicateName: If two bones or two slots share a name
            SlotNotFound: If a skin or animation references an unknown slot
            ColorDecodeError: If a slot or keyframe color is malformed
            TimelineOrderError: If keyframe times decrease within a timeline
        """
        bones: List[Bone] = []
        for definition in document.bones:
            bones.append(Bone.from_definition(definition, bones))
        _check_unique(bones, "bone")

        slots = [Slot.from_definition(definition, bones) for definition in document.slots]
        _check_unique(slots, "slot")

        bone_names = [bone.name for bone in bones]
        slot_names = [slot.name for slot in slots]
        animations = {
            name: AnimationTrack.from_definition(name, definition, bone_names, slot_names)
            for name, definition in document.animations.items()
        }

        skins = {}
        for skin_name, skin_slots in document.skins.items():
            attachments = {}
            for slot_name, definitions in skin_slots.items():
                slot_index = _index_of(slot_name, slots, SlotNotFound)
                attachments[slot_index] = {
                    attachment_name: Attachment.from_definition(definition)
                    for attachment_name, definition in definitions.items()
                }
            skins[skin_name] = Skin(skin_name, attachments)

        skeleton = cls(bones, slots, skins, animations)
        logger.debug("Built %r", skeleton)
        return skeleton

    def bone_index(self, name: str) -> int:
        if name not in self._bone_by_name:
            raise BoneNotFound(name)
        return self._bone_by_name[name]

    def slot_index(self, name: str) -> int:
        if name not in self._slot_by_name:
            raise SlotNotFound(name)
        return self._slot_by_name[name]

    def get_skin(self, name: str) -> Skin:
        if name not in self.skins:
            raise SkinNotFound(name)
        return self.skins[name]

    def get_default_skin(self) -> Skin:
        return self.get_skin(DEFAULT_SKIN_NAME)

    def get_animation(self, name: str) -> AnimationTrack:
        if name not in self.animations:
            raise AnimationNotFound(name)
        return self.animations[name]

    def get_animated_skin(self, skin: str, animation: Optional[str] = None):
        """Bind a skin and an optional animation into a sampling session."""
        from .animation_controller import AnimationSession
        return AnimationSession.resolve(self, skin, animation)

    def __repr__(self):
        return (
            f"Skeleton(bones={len(self.bones)}, slots={len(self.slots)}, "
            f"skins={len(self.skins)}, animations={len(self.animations)})"
        )


def build(document) -> Skeleton:
    """
    Build a skeleton from a document.

    Args:
        document: SkeletonDocument, or a dict in the JSON document layout

    Returns:
        Immutable Skeleton
    """
    if not isinstance(document, SkeletonDocument):
        document = SkeletonDocument.from_dict(document)
    return Skeleton.from_document(document)
