"""
Sprite

Output of a pose sample: one visible attachment with its placement and tint.
"""

from dataclasses import dataclass

import numpy as np
from pyrr import Matrix44

from ..core.color import Color
from ..core.transform import SRT
from .skin import Attachment


@dataclass(frozen=True)
class Sprite:
    """
    Visible attachment of one slot at one point in time.

    ``srt`` is the attachment's local transform composed with the slot bone's
    world transform. ``positions`` places the attachment's quad by nesting
    the two transforms instead, which also carries the attachment offset
    through the bone's rotation.
    """

    attachment: str
    color: Color
    srt: SRT
    bone_srt: SRT
    source: Attachment

    @property
    def positions(self) -> np.ndarray:
        """
        Quad corners in world space.

        Returns:
            Array of shape (4, 2), top-left first then clockwise
        """
        return self.bone_srt.transform_points(self.source.positions)

    def get_model_matrix(self) -> Matrix44:
        """
        Model matrix for the composed world transform.

        Returns:
            4x4 row-major matrix; a row vector (x, y, 0, 1) multiplied on the
            left is transformed exactly like ``srt.transform``
        """
        srt = self.srt
        matrix = Matrix44.identity()
        matrix[0, 0] = srt.cos * srt.scale_x
        matrix[0, 1] = srt.sin * srt.scale_x
        matrix[1, 0] = -srt.sin * srt.scale_y
        matrix[1, 1] = srt.cos * srt.scale_y
        matrix[3, 0] = srt.x
        matrix[3, 1] = srt.y
        return matrix

    def __repr__(self):
        return f"Sprite(attachment='{self.attachment}', color={self.color}, srt={self.srt})"
