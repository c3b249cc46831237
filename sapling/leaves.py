"""
Serrated leaf outlines and vein lines.

Every point is first laid out in the leaf's local frame, with the stem at the
origin and the blade pointing up (negative y), then rotated by the leaf angle
and moved onto the leaf position. The shape math never sees orientation.

Outline traversal (local frame, w = size * width_ratio, h = size):

    M base
    C left flank          base -> left shoulder
    Q x num_teeth         left teeth, base to tip
    Q tip                 degenerate curve onto the tip
    Q x num_teeth         right teeth, tip to base
    C right flank         back to base
    Z
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union

from sapling.branches import LeafDescriptor
from sapling.config import LeafShape
from sapling.geometry import Point2D, rotate_about


# =============================================================================
# PATH COMMANDS
# =============================================================================

class MoveTo(NamedTuple):
    point: Point2D


class CubicTo(NamedTuple):
    control1: Point2D
    control2: Point2D
    point: Point2D


class QuadTo(NamedTuple):
    control: Point2D
    point: Point2D


@dataclass(frozen=True)
class ClosePath:
    """Return to the subpath start."""


PathCommand = Union[MoveTo, CubicTo, QuadTo, ClosePath]
Polyline = tuple[Point2D, ...]


@dataclass(frozen=True)
class LeafPath:
    """Drawable leaf: a closed outline plus vein polylines."""
    outline: tuple[PathCommand, ...]
    veins: tuple[Polyline, ...]

    def to_svg(self, precision: int = 3) -> tuple[str, str]:
        """SVG path data for (outline, veins)."""
        return (outline_to_svg(self.outline, precision),
                veins_to_svg(self.veins, precision))


def command_points(command: PathCommand) -> list[Point2D]:
    """Every coordinate a command carries, controls first."""
    if isinstance(command, MoveTo):
        return [command.point]
    if isinstance(command, CubicTo):
        return [command.control1, command.control2, command.point]
    if isinstance(command, QuadTo):
        return [command.control, command.point]
    return []


def outline_points(outline: tuple[PathCommand, ...]) -> list[Point2D]:
    """Flatten an outline to its coordinates in emission order."""
    pts = []
    for command in outline:
        pts.extend(command_points(command))
    return pts


# =============================================================================
# OUTLINE
# =============================================================================

def _tooth(progress: float, side: float, w: float, h: float,
           shape: LeafShape) -> tuple[Point2D, Point2D]:
    """
    Margin point and notch control for one tooth, in the local frame.

    `side` is -1 for the left margin and +1 for the right. The notch sits
    toward the midrib and slightly toward the tip.
    """
    depth = w * shape.tooth_depth_ratio
    x = side * w * (shape.tooth_inset - progress * shape.tooth_taper)
    y = -h * progress
    notch = Point2D(x - side * depth, y - depth * 0.5)
    return notch, Point2D(x, y)


def build_outline(leaf: LeafDescriptor,
                  shape: LeafShape | None = None) -> tuple[PathCommand, ...]:
    """
    Closed serrated outline of a leaf.

    A leaf with size <= 0 collapses every point onto the anchor but still
    yields a well-formed, closed path.
    """
    if shape is None:
        shape = LeafShape()

    size = max(leaf.size, 0.0)
    w = size * shape.width_ratio
    h = size

    def world(x: float, y: float) -> Point2D:
        return rotate_about(Point2D(x, y), leaf.angle, leaf.position)

    base = world(0.0, 0.0)
    tip = world(0.0, -h)
    left = [world(-fx * w, -fy * h) for fx, fy in shape.flank_controls]
    right = [world(fx * w, -fy * h) for fx, fy in shape.flank_controls]

    n = shape.num_teeth
    left_teeth = []
    for i in range(1, n + 1):
        notch, margin = _tooth(i / (n + 1), -1.0, w, h, shape)
        left_teeth.append(QuadTo(world(*notch), world(*margin)))

    right_teeth = []
    for i in range(n, 0, -1):
        notch, margin = _tooth(i / (n + 1), 1.0, w, h, shape)
        right_teeth.append(QuadTo(world(*notch), world(*margin)))

    return (
        MoveTo(base),
        CubicTo(left[0], left[1], left[2]),
        *left_teeth,
        QuadTo(tip, tip),
        *right_teeth,
        # Mirror of the left flank, traversed back down to the stem
        CubicTo(right[1], right[0], base),
        ClosePath(),
    )


# =============================================================================
# VEINS
# =============================================================================

def build_veins(leaf: LeafDescriptor,
                shape: LeafShape | None = None) -> tuple[Polyline, ...]:
    """
    Midrib plus side veins, each a polyline in world coordinates.

    Side veins cross the midrib left -> center -> right and shorten toward
    the tip. A leaf with size <= 0 gives veins collapsed onto the anchor.
    """
    if shape is None:
        shape = LeafShape()

    size = max(leaf.size, 0.0)
    h = size * shape.vein_height_ratio
    n = shape.num_veins

    def world(x: float, y: float) -> Point2D:
        return rotate_about(Point2D(x, y), leaf.angle, leaf.position)

    veins: list[Polyline] = [(world(0.0, 0.0), world(0.0, -h))]
    for i in range(1, n + 1):
        t = i / (n + 1)
        y = -h * t
        half = size * shape.vein_width_ratio * (1 - t)
        veins.append((world(-half, y), world(0.0, y), world(half, y)))

    return tuple(veins)


def build_leaf_path(leaf: LeafDescriptor,
                    shape: LeafShape | None = None) -> LeafPath:
    """Outline and veins for one leaf."""
    return LeafPath(outline=build_outline(leaf, shape),
                    veins=build_veins(leaf, shape))


# =============================================================================
# SVG PATH DATA
# =============================================================================

def _fmt(p: Point2D, precision: int) -> str:
    return f"{p.x:.{precision}f} {p.y:.{precision}f}"


def outline_to_svg(outline: tuple[PathCommand, ...], precision: int = 3) -> str:
    """Serialize an outline to an SVG `d` attribute."""
    parts = []
    for command in outline:
        if isinstance(command, MoveTo):
            parts.append(f"M {_fmt(command.point, precision)}")
        elif isinstance(command, CubicTo):
            parts.append(
                f"C {_fmt(command.control1, precision)} "
                f"{_fmt(command.control2, precision)} "
                f"{_fmt(command.point, precision)}"
            )
        elif isinstance(command, QuadTo):
            parts.append(
                f"Q {_fmt(command.control, precision)} "
                f"{_fmt(command.point, precision)}"
            )
        else:
            parts.append("Z")
    return " ".join(parts)


def veins_to_svg(veins: tuple[Polyline, ...], precision: int = 3) -> str:
    """Serialize vein polylines to one SVG `d` attribute (M ... L ...)."""
    parts = []
    for vein in veins:
        if not vein:
            continue
        parts.append(f"M {_fmt(vein[0], precision)}")
        parts.extend(f"L {_fmt(p, precision)}" for p in vein[1:])
    return " ".join(parts)


__all__ = [
    'MoveTo',
    'CubicTo',
    'QuadTo',
    'ClosePath',
    'PathCommand',
    'Polyline',
    'LeafPath',
    'build_outline',
    'build_veins',
    'build_leaf_path',
    'command_points',
    'outline_points',
    'outline_to_svg',
    'veins_to_svg',
]
