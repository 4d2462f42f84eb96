"""
Transform

Scale / rotation / translation (SRT) value type for 2D bones and attachments.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class SRT:
    """
    Rigid 2D transform made of independent scale, rotation and translation.

    Applying an SRT to a point scales it, rotates it by ``rotation`` (radians)
    and then translates it. Instances are immutable; composition returns a new
    SRT.
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation: float = 0.0
    x: float = 0.0
    y: float = 0.0
    cos: float = field(init=False, repr=False, compare=False)
    sin: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "cos", math.cos(self.rotation))
        object.__setattr__(self, "sin", math.sin(self.rotation))

    @classmethod
    def identity(cls) -> "SRT":
        return cls()

    @classmethod
    def from_degrees(
        cls,
        scale_x: Optional[float] = None,
        scale_y: Optional[float] = None,
        rotation: Optional[float] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> "SRT":
        """Build an SRT from document units (degrees), filling omitted fields."""
        return cls(
            scale_x=1.0 if scale_x is None else float(scale_x),
            scale_y=1.0 if scale_y is None else float(scale_y),
            rotation=math.radians(rotation or 0.0),
            x=float(x or 0.0),
            y=float(y or 0.0),
        )

    @property
    def position(self) -> Vec2:
        return (self.x, self.y)

    @property
    def scale(self) -> Vec2:
        return (self.scale_x, self.scale_y)

    def compose(self, other: "SRT") -> "SRT":
        """
        Combine two transforms component-wise.

        Translations and rotations are added, scales are multiplied.
        """
        return SRT(
            scale_x=self.scale_x * other.scale_x,
            scale_y=self.scale_y * other.scale_y,
            rotation=self.rotation + other.rotation,
            x=self.x + other.x,
            y=self.y + other.y,
        )

    def transform(self, point: Vec2) -> Vec2:
        """Apply this transform to a single 2D point."""
        px = point[0] * self.scale_x
        py = point[1] * self.scale_y
        return (
            self.cos * px - self.sin * py + self.x,
            self.sin * px + self.cos * py + self.y,
        )

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """
        Apply this transform to an array of points.

        Args:
            points: Array of shape (N, 2)

        Returns:
            Transformed array of shape (N, 2), dtype float64
        """
        pts = np.asarray(points, dtype=np.float64) * np.array([self.scale_x, self.scale_y])
        rot = np.array([[self.cos, self.sin], [-self.sin, self.cos]])
        return pts @ rot + np.array([self.x, self.y])

    def __repr__(self):
        return (
            f"SRT(scale=({self.scale_x:.3f}, {self.scale_y:.3f}), "
            f"rotation={math.degrees(self.rotation):.2f}deg, "
            f"position=({self.x:.3f}, {self.y:.3f}))"
        )
