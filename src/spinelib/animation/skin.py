"""
Skin

Attachments grouped into named skins, and per-session attachment resolution.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core.document import AttachmentDefinition
from ..core.transform import SRT

logger = logging.getLogger(__name__)


class AttachmentType(Enum):
    """Attachment geometry kinds."""
    REGION = "region"
    REGION_SEQUENCE = "regionsequence"
    BOUNDING_BOX = "boundingbox"


@dataclass(frozen=True)
class Attachment:
    """
    Placeable geometry attached to a slot.

    ``width`` and ``height`` describe a rectangle centered on the origin which
    is placed by ``srt``. Bounding boxes only carry this placement.
    """

    name: Optional[str] = None
    type: AttachmentType = AttachmentType.REGION
    srt: SRT = field(default_factory=SRT)
    width: float = 0.0
    height: float = 0.0
    fps: Optional[float] = None
    mode: Optional[str] = None

    @classmethod
    def from_definition(cls, definition: AttachmentDefinition) -> "Attachment":
        return cls(
            name=definition.name,
            type=AttachmentType(definition.type) if definition.type else AttachmentType.REGION,
            srt=SRT.from_degrees(
                definition.scale_x, definition.scale_y,
                definition.rotation,
                definition.x, definition.y,
            ),
            width=definition.width or 0.0,
            height=definition.height or 0.0,
            fps=definition.fps,
            mode=definition.mode,
        )

    @property
    def corners(self) -> np.ndarray:
        """Unplaced quad corners, top-left first then clockwise, shape (4, 2)."""
        w2 = self.width / 2.0
        h2 = self.height / 2.0
        return np.array([[-w2, h2], [w2, h2], [w2, -h2], [-w2, -h2]], dtype=np.float64)

    @property
    def positions(self) -> np.ndarray:
        """Quad corners placed by the attachment's own transform, shape (4, 2)."""
        return self.srt.transform_points(self.corners)


class Skin:
    """
    Named set of attachments per slot.

    Attachments are addressed by (slot index, attachment name).
    """

    def __init__(self, name: str, slots: Optional[Dict[int, Dict[str, Attachment]]] = None):
        self.name = name
        self.slots: Dict[int, Dict[str, Attachment]] = slots or {}

    def find(self, slot_index: int, attachment_name: str) -> Optional[Attachment]:
        """Return the attachment for a slot, or None if this skin lacks it."""
        return self.slots.get(slot_index, {}).get(attachment_name)

    def __repr__(self):
        return f"Skin(name='{self.name}', slots={len(self.slots)})"


ResolvedAttachment = Tuple[str, Attachment]


class SkinResolver:
    """
    Decides which attachment each slot shows for one (skin, animation) pair.

    Slots without attachment keyframes are static and always show the
    attachment named by the slot's setup pose. Slots driven by an attachment
    timeline are dynamic: every name the timeline references is looked up
    once, here, so sampling never searches skins.
    """

    def __init__(self, skeleton, skin: Skin, default_skin: Skin, track=None):
        """
        Initialize resolver.

        Args:
            skeleton: Skeleton owning the slots
            skin: Requested skin
            default_skin: Fallback skin for attachments the requested skin lacks
            track: Active AnimationTrack, or None for the setup pose
        """
        self.skin = skin
        self.default_skin = default_skin
        self.static: List[Optional[ResolvedAttachment]] = []
        self.dynamic: Dict[int, Dict[str, Optional[Attachment]]] = {}
        self._timelines = {}

        for index, slot in enumerate(skeleton.slots):
            resolved = None
            if slot.attachment is not None:
                attachment = self._lookup(index, slot.attachment)
                if attachment is not None:
                    resolved = (slot.attachment, attachment)
            self.static.append(resolved)

            timeline = track.slot_timeline(index) if track is not None else None
            if timeline is None or not timeline.drives_attachment:
                continue

            table = {}
            for name in sorted(timeline.attachment_names()):
                attachment = self._lookup(index, name)
                if attachment is None:
                    logger.warning(
                        "Attachment '%s' for slot '%s' not found in skin '%s' or '%s'; slot hidden",
                        name, slot.name, skin.name, default_skin.name,
                    )
                table[name] = attachment
            self.dynamic[index] = table
            self._timelines[index] = timeline.attachment

    def _lookup(self, slot_index: int, name: str) -> Optional[Attachment]:
        attachment = self.skin.find(slot_index, name)
        if attachment is None:
            attachment = self.default_skin.find(slot_index, name)
        return attachment

    def is_dynamic(self, slot_index: int) -> bool:
        return slot_index in self.dynamic

    def resolve(self, slot_index: int, time: float) -> Optional[ResolvedAttachment]:
        """
        Attachment visible in a slot at a given time.

        Args:
            slot_index: Slot index in skeleton storage order
            time: Time in seconds

        Returns:
            (attachment name, attachment), or None when nothing is drawn
        """
        timeline = self._timelines.get(slot_index)
        if timeline is None or time < timeline.times[0]:
            return self.static[slot_index]

        name = timeline.evaluate(time)
        if name is None:
            return None
        attachment = self.dynamic[slot_index][name]
        if attachment is None:
            return None
        return (name, attachment)
