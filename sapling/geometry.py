"""
2D point primitives shared by the branch and leaf generators.

Screen space: y increases downward, so "up" is negative y. Angles are
measured from vertical and increase clockwise.
"""

import math
from typing import NamedTuple


class Point2D(NamedTuple):
    """An immutable point in screen coordinates."""

    x: float
    y: float

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def advance(start: Point2D, length: float, angle: float) -> Point2D:
    """Move `length` from `start` in direction `angle` (0 = up, clockwise)."""
    return Point2D(
        start.x + length * math.sin(angle),
        start.y - length * math.cos(angle),
    )


def rotate_about(local: Point2D, angle: float, anchor: Point2D) -> Point2D:
    """
    Rotate a local-frame point by `angle` and translate it onto `anchor`.

    The local frame has the anchor at the origin. With y pointing down, a
    positive angle turns the point clockwise on screen.
    """
    c, s = math.cos(angle), math.sin(angle)
    return Point2D(
        anchor.x + (local.x * c - local.y * s),
        anchor.y + (local.x * s + local.y * c),
    )
