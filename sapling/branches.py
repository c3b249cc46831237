"""
Recursive fractal tree generation with partial growth.

A single continuous growth level drives the whole tree:

    depth    = floor(level)          # generations that exist
    fraction = level - depth         # how far the newest generation has grown

Every generation above the newest is fully grown. The newest generation
(generation `depth`) is drawn at `fraction` of its nominal length, so as the
level rises from k to k + 1 its branches extend smoothly from nothing to full
length, and the next generation sprouts at zero length when the level
reaches k + 1. The trunk is always drawn fully grown.

The whole tree is also scaled by level / max_level, so a young tree is small
as well as sparse.

Branch and leaf lists come out in pre-order: a branch, then its left
subtree, then its right subtree.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from sapling.config import (
    GrowthConstants,
    clamp_level,
    validate_growth_inputs,
)
from sapling.geometry import Point2D, advance


# =============================================================================
# TREE ELEMENTS
# =============================================================================

@dataclass(frozen=True)
class Branch:
    """
    One edge of the tree.

    Attributes:
        start: Where the branch leaves its parent
        end: Where the branch stops (after partial growth is applied)
        generation: 1 for the trunk, +1 per fork
        length: Nominal length before partial growth
        progress: Fraction of the nominal length actually grown [0, 1]
    """
    start: Point2D
    end: Point2D
    generation: int
    length: float = 0.0
    progress: float = 1.0

    @property
    def effective_length(self) -> float:
        return self.length * self.progress


@dataclass(frozen=True)
class LeafDescriptor:
    """Where a leaf sits, which way it points and how big it is."""
    position: Point2D
    angle: float
    size: float


@dataclass(frozen=True)
class TreeGeometry:
    """Branches and leaves produced by one call to `generate_tree`."""
    branches: tuple[Branch, ...] = field(default_factory=tuple)
    leaves: tuple[LeafDescriptor, ...] = field(default_factory=tuple)

    @property
    def depth(self) -> int:
        """Deepest generation present (0 for an empty tree)."""
        return max((b.generation for b in self.branches), default=0)

    def generation(self, index: int) -> tuple[Branch, ...]:
        """All branches of one generation, in pre-order."""
        return tuple(b for b in self.branches if b.generation == index)

    def total_length(self) -> float:
        """Summed effective length of every branch."""
        return sum(b.effective_length for b in self.branches)

    def is_empty(self) -> bool:
        return not self.branches


# =============================================================================
# GENERATION
# =============================================================================

def generate_tree(
    origin: Point2D,
    base_length: float,
    initial_angle: float,
    level: float,
    max_level: float,
    constants: GrowthConstants | None = None,
) -> TreeGeometry:
    """
    Grow a binary fractal tree for a continuous growth level.

    Args:
        origin: Base of the trunk
        base_length: Trunk length at level == max_level
        initial_angle: Trunk direction (0 = straight up, clockwise positive)
        level: Growth level; clamped into [0, max_level]
        max_level: Upper bound on level, must be positive
        constants: Branching constants (defaults if None)

    Returns:
        TreeGeometry with 2^floor(level) - 1 branches

    Raises:
        InvalidConfigurationError: max_level <= 0, base_length < 0, or a
            non-finite max_level, base_length or initial_angle
    """
    if constants is None:
        constants = GrowthConstants()
    validate_growth_inputs(base_length, max_level, initial_angle)

    clamped = clamp_level(level, max_level)
    depth = math.floor(clamped)
    fraction = clamped - depth
    trunk_length = base_length * (clamped / max_level)

    branches: list[Branch] = []
    leaves: list[LeafDescriptor] = []

    def grow(start: Point2D, length: float, angle: float,
             remaining: int, progress: float) -> None:
        if remaining <= 0:
            return

        end = advance(start, length * progress, angle)
        branches.append(Branch(
            start=start,
            end=end,
            generation=depth - remaining + 1,
            length=length,
            progress=progress,
        ))

        if remaining <= constants.leaf_generation_threshold:
            leaves.append(LeafDescriptor(
                position=end,
                angle=angle,
                size=length * constants.leaf_size_factor,
            ))

        # Children with one level left are the newest generation
        child_progress = fraction if remaining == 2 else 1.0
        child_length = length * constants.length_decay

        grow(end, child_length, angle + constants.angle_increment,
             remaining - 1, child_progress)
        grow(end, child_length, angle - constants.angle_increment,
             remaining - 1, child_progress)

    grow(origin, trunk_length, initial_angle, depth, 1.0)

    return TreeGeometry(branches=tuple(branches), leaves=tuple(leaves))


def expected_branch_count(depth: int) -> int:
    """Branches in a full binary tree with `depth` generations."""
    return 2**depth - 1 if depth > 0 else 0


__all__ = [
    'Branch',
    'LeafDescriptor',
    'TreeGeometry',
    'generate_tree',
    'expected_branch_count',
]
