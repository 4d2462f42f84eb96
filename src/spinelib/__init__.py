"""
SpineLib - 2D Skeletal Animation Runtime

Loads skeleton documents (bones, slots, skins, animations) and samples the
visible sprites of an animation at any point in time.
"""

# Configuration
from .config.settings import *

# Core
from .core import (
    SRT,
    SkeletonDocument,
    decode_color,
    SkeletonError,
    BoneNotFound,
    SlotNotFound,
    DuplicateName,
    SkinNotFound,
    AnimationNotFound,
    ColorDecodeError,
    TimelineOrderError,
    DocumentError,
)

# Animation
from .animation import (
    AnimationSession,
    AnimationStream,
    AnimationTrack,
    Attachment,
    AttachmentType,
    Bone,
    PoseSolver,
    Skeleton,
    SkeletonAnimator,
    Skin,
    Slot,
    Sprite,
    build,
    resolve,
)

# Loaders
from .loaders import SkeletonLoader

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Core
    "SRT",
    "SkeletonDocument",
    "decode_color",
    # Errors
    "SkeletonError",
    "BoneNotFound",
    "SlotNotFound",
    "DuplicateName",
    "SkinNotFound",
    "AnimationNotFound",
    "ColorDecodeError",
    "TimelineOrderError",
    "DocumentError",
    # Animation
    "Bone",
    "Slot",
    "Skin",
    "Attachment",
    "AttachmentType",
    "Skeleton",
    "AnimationTrack",
    "PoseSolver",
    "Sprite",
    "AnimationSession",
    "AnimationStream",
    "SkeletonAnimator",
    "build",
    "resolve",
    # Loaders
    "SkeletonLoader",
]
