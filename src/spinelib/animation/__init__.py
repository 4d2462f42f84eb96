"""
Animation System

Provides skeletal sprite animation sampling.
"""

from .curve import BezierCurve, CurveKind, LinearCurve, SteppedCurve, curve_from_definition
from .values import ValueKind
from .timeline import Keyframe, Timeline, BoneTimeline, SlotTimeline
from .animation import AnimationTrack
from .skin import Attachment, AttachmentType, Skin, SkinResolver
from .skeleton import Bone, Slot, Skeleton, build
from .pose import PoseSolver
from .sprite import Sprite
from .animation_controller import AnimationSession, AnimationStream, SkeletonAnimator, resolve

__all__ = [
    'CurveKind',
    'LinearCurve',
    'SteppedCurve',
    'BezierCurve',
    'curve_from_definition',
    'ValueKind',
    'Keyframe',
    'Timeline',
    'BoneTimeline',
    'SlotTimeline',
    'AnimationTrack',
    'Attachment',
    'AttachmentType',
    'Skin',
    'SkinResolver',
    'Bone',
    'Slot',
    'Skeleton',
    'build',
    'PoseSolver',
    'Sprite',
    'AnimationSession',
    'AnimationStream',
    'SkeletonAnimator',
    'resolve',
]
