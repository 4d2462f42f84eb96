"""
Animation Controller

Binds a skin and an animation to a skeleton and samples sprite poses.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..config.settings import DEFAULT_SAMPLE_DELTA, DEFAULT_TINT
from .pose import PoseSolver
from .skeleton import Skeleton
from .skin import SkinResolver
from .sprite import Sprite

logger = logging.getLogger(__name__)


class AnimationSession:
    """
    Samples one (skeleton, skin, animation) combination.

    All lookups are done when the session is resolved; sampling only walks
    bones and slots. A session holds no per-sample state, so sampling the
    same time twice yields equal sprite lists.
    """

    def __init__(self, skeleton: Skeleton, skin, default_skin, track=None):
        """
        Initialize animation session.

        Args:
            skeleton: Skeleton to animate
            skin: Requested skin
            default_skin: Fallback skin
            track: AnimationTrack to play, or None for the setup pose
        """
        self.skeleton = skeleton
        self.skin = skin
        self.track = track
        self.duration: float = track.duration if track is not None else 0.0
        self.solver = PoseSolver(skeleton, track)
        self.resolver = SkinResolver(skeleton, skin, default_skin, track)

    @classmethod
    def resolve(cls, skeleton: Skeleton, skin: str, animation: Optional[str] = None) -> "AnimationSession":
        """
        Create a session for a skin and an optional animation.

        Args:
            skeleton: Skeleton to animate
            skin: Skin name
            animation: Animation name, or None for the setup pose

        Raises:
            SkinNotFound: If the skin or the default skin is missing
            AnimationNotFound: If the animation is missing
        """
        requested = skeleton.get_skin(skin)
        default_skin = skeleton.get_default_skin()
        track = skeleton.get_animation(animation) if animation is not None else None

        session = cls(skeleton, requested, default_skin, track)
        logger.debug("Resolved %r", session)
        return session

    def sample(self, time: float) -> Optional[List[Sprite]]:
        """
        Compute the visible sprites at a given time.

        Args:
            time: Time in seconds

        Returns:
            Sprites in slot order, or None if time is past the animation's end
        """
        if time > self.duration:
            return None

        world = self.solver.solve(time)
        track = self.track

        sprites = []
        for index, slot in enumerate(self.skeleton.slots):
            resolved = self.resolver.resolve(index, time)
            if resolved is None:
                continue
            name, attachment = resolved

            color = None
            timeline = track.slot_timeline(index) if track is not None else None
            if timeline is not None:
                color = timeline.color.evaluate(time)
            if color is None:
                color = DEFAULT_TINT

            bone_srt = world[slot.bone]
            sprites.append(Sprite(
                attachment=attachment.name or name,
                color=color,
                srt=attachment.srt.compose(bone_srt),
                bone_srt=bone_srt,
                source=attachment,
            ))
        return sprites

    def stream(self, delta: float = DEFAULT_SAMPLE_DELTA, start: float = 0.0) -> "AnimationStream":
        """Iterate sprite lists every ``delta`` seconds until the animation ends."""
        return AnimationStream(self, delta, start)

    def __iter__(self):
        return self.stream()

    def __repr__(self):
        animation = self.track.name if self.track is not None else "None"
        return (
            f"AnimationSession(skin='{self.skin.name}', animation='{animation}', "
            f"duration={self.duration:.2f}s)"
        )


class AnimationStream:
    """
    Iterator sampling a session at a constant period.

    Yields the pose at ``start``, ``start + delta``, ``start + 2 * delta``, ...
    and stops at the first time past the session's duration.
    """

    def __init__(self, session: AnimationSession, delta: float, start: float = 0.0):
        if delta <= 0.0:
            raise ValueError(f"Stream delta must be positive, got {delta}")
        self.session = session
        self.delta = delta
        self.start = start
        self.step = 0
        self.finished = False

    @property
    def time(self) -> float:
        """Time of the next sample."""
        return self.start + self.step * self.delta

    def __iter__(self) -> Iterator[List[Sprite]]:
        return self

    def __next__(self) -> List[Sprite]:
        if self.finished:
            raise StopIteration
        sprites = self.session.sample(self.time)
        if sprites is None:
            self.finished = True
            raise StopIteration
        self.step += 1
        return sprites


class SkeletonAnimator:
    """
    One-call sampling over a skeleton.

    Sessions are created on first use for each (skin, animation) pair and
    reused afterward.
    """

    def __init__(self, skeleton: Skeleton):
        self.skeleton = skeleton
        self._sessions: Dict[Tuple[str, Optional[str]], AnimationSession] = {}

    def session(self, skin: str, animation: Optional[str] = None) -> AnimationSession:
        key = (skin, animation)
        if key not in self._sessions:
            self._sessions[key] = AnimationSession.resolve(self.skeleton, skin, animation)
        return self._sessions[key]

    def calculate(self, skin: str, animation: Optional[str], time: float) -> Optional[List[Sprite]]:
        """Sample ``animation`` under ``skin`` at ``time``."""
        return self.session(skin, animation).sample(time)


def resolve(skeleton: Skeleton, skin: str, animation: Optional[str] = None) -> AnimationSession:
    """Bind a skin and an optional animation of ``skeleton`` into a session."""
    return AnimationSession.resolve(skeleton, skin, animation)
