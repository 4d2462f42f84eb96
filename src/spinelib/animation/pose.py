"""
Pose solver

Computes bone world transforms for one point in time.
"""

from typing import List, Optional

from ..core.transform import SRT


class PoseSolver:
    """
    Solves world transforms for every bone of a skeleton.

    Bones are stored parent-before-child, so a single forward pass in storage
    order always finds a bone's parent already solved.
    """

    def __init__(self, skeleton, track=None):
        """
        Initialize pose solver.

        Args:
            skeleton: Skeleton to pose
            track: AnimationTrack to apply, or None for the setup pose
        """
        self.skeleton = skeleton
        self.track = track

    def solve(self, time: float) -> List[SRT]:
        """
        Compute bone world transforms at a given time.

        Args:
            time: Time in seconds

        Returns:
            World SRT per bone, indexed like ``skeleton.bones``
        """
        world: List[SRT] = []
        for index, bone in enumerate(self.skeleton.bones):
            local = bone.srt
            timeline = self.track.bone_timeline(index) if self.track is not None else None
            if timeline is not None:
                local = local.compose(timeline.srt(time))

            parent = world[bone.parent] if bone.parent is not None else None
            world.append(self.to_world(local, parent, bone.inherit_rotation, bone.inherit_scale))
        return world

    @staticmethod
    def to_world(
        local: SRT,
        parent: Optional[SRT],
        inherit_rotation: bool = True,
        inherit_scale: bool = True,
    ) -> SRT:
        """
        Place a local transform in its parent's space.

        The position always follows the parent; rotation and scale are only
        accumulated when the bone inherits them.
        """
        if parent is None:
            return local

        x, y = parent.transform(local.position)
        rotation = local.rotation + parent.rotation if inherit_rotation else local.rotation
        if inherit_scale:
            scale_x = local.scale_x * parent.scale_x
            scale_y = local.scale_y * parent.scale_y
        else:
            scale_x, scale_y = local.scale_x, local.scale_y
        return SRT(scale_x=scale_x, scale_y=scale_y, rotation=rotation, x=x, y=y)
