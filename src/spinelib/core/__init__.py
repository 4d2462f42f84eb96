"""Core value types, color decoding and errors."""

from .color import decode_color
from .document import SkeletonDocument
from .errors import (
    AnimationNotFound,
    BoneNotFound,
    ColorDecodeError,
    DocumentError,
    DuplicateName,
    SkeletonError,
    SkinNotFound,
    SlotNotFound,
    TimelineOrderError,
)
from .transform import SRT

__all__ = [
    'SRT',
    'decode_color',
    'SkeletonDocument',
    'SkeletonError',
    'BoneNotFound',
    'SlotNotFound',
    'DuplicateName',
    'SkinNotFound',
    'AnimationNotFound',
    'ColorDecodeError',
    'TimelineOrderError',
    'DocumentError',
]
