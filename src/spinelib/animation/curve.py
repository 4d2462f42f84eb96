"""
Curves

Interpolation laws applied between two adjacent keyframes.
"""

from enum import Enum
from typing import Tuple, Union

from ..config.settings import BEZIER_SEGMENTS
from ..core.errors import DocumentError


class CurveKind(Enum):
    """Curve interpolation kinds."""
    LINEAR = "linear"
    STEPPED = "stepped"
    BEZIER = "bezier"


class LinearCurve:
    """Progress follows elapsed time unchanged."""

    kind = CurveKind.LINEAR

    def evaluate(self, percent: float) -> float:
        return percent

    def __eq__(self, other):
        return isinstance(other, LinearCurve)

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return "LinearCurve()"


class SteppedCurve:
    """Value holds the earlier keyframe until the next one is reached."""

    kind = CurveKind.STEPPED

    def evaluate(self, percent: float) -> float:
        return 0.0

    def __eq__(self, other):
        return isinstance(other, SteppedCurve)

    def __hash__(self):
        return hash(self.kind)

    def __repr__(self):
        return "SteppedCurve()"


class BezierCurve:
    """
    Cubic bezier from (0, 0) to (1, 1).

    The curve is flattened once, at construction, into ``BEZIER_SEGMENTS``
    linear segments using forward differencing. Only the interior sample
    points are stored; the endpoints are implicit.
    """

    kind = CurveKind.BEZIER

    def __init__(self, cx1: float, cy1: float, cx2: float, cy2: float):
        """
        Initialize bezier curve.

        Args:
            cx1: First control point x, percent of time between keyframes
            cy1: First control point y, percent of value difference
            cx2: Second control point x
            cy2: Second control point y
        """
        self.control_points = (float(cx1), float(cy1), float(cx2), float(cy2))
        self.xs, self.ys = self._compute_samples(*self.control_points)

    @staticmethod
    def _compute_samples(cx1, cy1, cx2, cy2) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
        subdiv1 = 1.0 / BEZIER_SEGMENTS
        subdiv2 = subdiv1 * subdiv1
        subdiv3 = subdiv2 * subdiv1
        pre1 = 3.0 * subdiv1
        pre2 = 3.0 * subdiv2
        pre4 = 6.0 * subdiv2
        pre5 = 6.0 * subdiv3
        tmp1x = -cx1 * 2.0 + cx2
        tmp1y = -cy1 * 2.0 + cy2
        tmp2x = (cx1 - cx2) * 3.0 + 1.0
        tmp2y = (cy1 - cy2) * 3.0 + 1.0

        dfx = cx1 * pre1 + tmp1x * pre2 + tmp2x * subdiv3
        dfy = cy1 * pre1 + tmp1y * pre2 + tmp2y * subdiv3
        ddfx = tmp1x * pre4 + tmp2x * pre5
        ddfy = tmp1y * pre4 + tmp2y * pre5
        dddfx = tmp2x * pre5
        dddfy = tmp2y * pre5

        xs = []
        ys = []
        x, y = dfx, dfy
        for _ in range(BEZIER_SEGMENTS - 1):
            xs.append(x)
            ys.append(y)
            dfx += ddfx
            dfy += ddfy
            ddfx += dddfx
            ddfy += dddfy
            x += dfx
            y += dfy
        return tuple(xs), tuple(ys)

    def evaluate(self, percent: float) -> float:
        xs, ys = self.xs, self.ys
        for i, x in enumerate(xs):
            if percent < x:
                if i == 0:
                    return ys[0] * percent / x
                prev_x, prev_y = xs[i - 1], ys[i - 1]
                return prev_y + (ys[i] - prev_y) * (percent - prev_x) / (x - prev_x)

        # Past the last sample: finish the segment toward (1, 1)
        last_x, last_y = xs[-1], ys[-1]
        return last_y + (1.0 - last_y) * (percent - last_x) / (1.0 - last_x)

    def __eq__(self, other):
        return isinstance(other, BezierCurve) and self.control_points == other.control_points

    def __hash__(self):
        return hash((self.kind, self.control_points))

    def __repr__(self):
        return "BezierCurve(cx1={:.3f}, cy1={:.3f}, cx2={:.3f}, cy2={:.3f})".format(*self.control_points)


Curve = Union[LinearCurve, SteppedCurve, BezierCurve]

LINEAR = LinearCurve()
STEPPED = SteppedCurve()


def curve_from_definition(definition) -> Curve:
    """
    Convert a document curve specification into a curve.

    Args:
        definition: None or "linear", "stepped", or four bezier control numbers

    Returns:
        Shared linear/stepped instance, or a new precomputed BezierCurve
    """
    if definition is None or definition == "linear":
        return LINEAR
    if definition == "stepped":
        return STEPPED
    if isinstance(definition, (list, tuple)) and len(definition) == 4:
        return BezierCurve(*definition)
    raise DocumentError(f"Unsupported curve definition: {definition!r}")
