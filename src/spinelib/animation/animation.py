"""
Animation

Resolved animation tracks: bone and slot timelines bound to skeleton indices.
"""

import logging
from typing import Dict, List, Sequence

from ..core.document import (
    AnimationDefinition,
    DrawOrderKeyframeDefinition,
    EventKeyframeDefinition,
)
from ..core.errors import BoneNotFound, SlotNotFound
from .timeline import BoneTimeline, SlotTimeline

logger = logging.getLogger(__name__)


class AnimationTrack:
    """
    Complete animation bound to a skeleton.

    Bone timelines are keyed by bone index and slot timelines by slot index.
    Events and draw order keyframes are carried along but never evaluated.
    """

    def __init__(
        self,
        name: str,
        bones: Dict[int, BoneTimeline],
        slots: Dict[int, SlotTimeline],
        events: Sequence[EventKeyframeDefinition] = (),
        draworder: Sequence[DrawOrderKeyframeDefinition] = (),
    ):
        """
        Initialize animation track.

        Args:
            name: Animation name
            bones: Bone index -> bone timeline
            slots: Slot index -> slot timeline
            events: Event keyframes (pass-through)
            draworder: Draw order keyframes (pass-through)
        """
        self.name = name
        self.bones = bones
        self.slots = slots
        self.events: List[EventKeyframeDefinition] = list(events)
        self.draworder: List[DrawOrderKeyframeDefinition] = list(draworder)

        # Latest keyframe over translate/rotate/scale/attachment/color
        self.duration: float = max(
            [t.duration for t in bones.values()] + [t.duration for t in slots.values()],
            default=0.0,
        )

    @classmethod
    def from_definition(
        cls,
        name: str,
        definition: AnimationDefinition,
        bone_names: Sequence[str],
        slot_names: Sequence[str],
    ) -> "AnimationTrack":
        """
        Build a track from its document definition.

        Args:
            name: Animation name
            definition: Parsed animation definition
            bone_names: Bone names in skeleton storage order
            slot_names: Slot names in skeleton storage order

        Raises:
            BoneNotFound: If a bone timeline targets an unknown bone
            SlotNotFound: If a slot timeline targets an unknown slot
            ColorDecodeError: If a color keyframe is malformed
            TimelineOrderError: If keyframe times decrease within a timeline
        """
        bone_lookup = {bone_name: i for i, bone_name in enumerate(bone_names)}
        slot_lookup = {slot_name: i for i, slot_name in enumerate(slot_names)}

        bones = {}
        for bone_name, timelines in definition.bones.items():
            if bone_name not in bone_lookup:
                raise BoneNotFound(bone_name)
            bones[bone_lookup[bone_name]] = BoneTimeline.from_definition(timelines)

        slots = {}
        for slot_name, timelines in definition.slots.items():
            if slot_name not in slot_lookup:
                raise SlotNotFound(slot_name)
            slots[slot_lookup[slot_name]] = SlotTimeline.from_definition(timelines)

        track = cls(name, bones, slots, definition.events, definition.draworder)
        logger.debug(
            "Built animation '%s': %d bone timelines, %d slot timelines, duration %.3fs",
            name, len(bones), len(slots), track.duration,
        )
        return track

    def bone_timeline(self, bone_index: int):
        return self.bones.get(bone_index)

    def slot_timeline(self, slot_index: int):
        return self.slots.get(slot_index)

    def __repr__(self):
        return (
            f"AnimationTrack(name='{self.name}', duration={self.duration:.2f}s, "
            f"bones={len(self.bones)}, slots={len(self.slots)})"
        )
