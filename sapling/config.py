"""
Configuration and constants for fractal tree generation.

This module collects every tunable number the generators use, so the
geometry code never carries magic numbers of its own.

Growth constants (branch recursion):
    angle_increment: Spread of each child from its parent (radians)
    length_decay: Child length as a fraction of parent length
    leaf_generation_threshold: Leaves grow on branches this close to the tips
    leaf_size_factor: Leaf size as a fraction of the parent branch length

Leaf shape constants (outline and veins):
    width_ratio, num_teeth, tooth_depth_ratio, flank control points,
    vein_height_ratio, num_veins, vein_width_ratio

Coordinates are screen space: x grows right, y grows DOWN. An angle of 0
points straight up and angles increase clockwise.
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sapling.geometry import Point2D

if TYPE_CHECKING:
    from sapling.branches import TreeGeometry


class InvalidConfigurationError(ValueError):
    """Raised when a tree is configured with values no tree can be grown from."""


@dataclass(frozen=True)
class GrowthConstants:
    """Branching constants shared by every recursive call."""

    angle_increment: float = math.pi / 5  # 36 degrees
    length_decay: float = 0.7
    leaf_generation_threshold: int = 2
    leaf_size_factor: float = 0.5

    def __post_init__(self) -> None:
        if not 0 < self.length_decay <= 1:
            raise InvalidConfigurationError("length_decay must be in (0, 1]")
        if self.leaf_generation_threshold < 0:
            raise InvalidConfigurationError(
                "leaf_generation_threshold must be nonnegative"
            )
        if self.leaf_size_factor < 0:
            raise InvalidConfigurationError("leaf_size_factor must be nonnegative")


@dataclass(frozen=True)
class LeafShape:
    """
    Proportions of the serrated leaf outline and its veins.

    Flank control points are (width fraction, height fraction) pairs for the
    left side of the blade; the right side mirrors them across the midrib.
    """

    width_ratio: float = 0.6
    num_teeth: int = 5
    tooth_depth_ratio: float = 0.15
    tooth_inset: float = 0.8  # Margin x at the base, as a fraction of width
    tooth_taper: float = 0.3  # How much the margin narrows toward the tip
    flank_controls: tuple[tuple[float, float], ...] = (
        (0.3, 0.2),
        (1.0, 0.5),
        (0.7, 0.8),
    )

    vein_height_ratio: float = 0.8
    num_veins: int = 3
    vein_width_ratio: float = 0.4

    def __post_init__(self) -> None:
        if self.num_teeth < 0:
            raise InvalidConfigurationError("num_teeth must be nonnegative")
        if self.num_veins < 0:
            raise InvalidConfigurationError("num_veins must be nonnegative")
        if len(self.flank_controls) != 3:
            raise InvalidConfigurationError(
                "flank_controls needs exactly three control points"
            )


def validate_growth_inputs(base_length: float, max_level: float,
                           initial_angle: float = 0.0) -> None:
    """Reject configurations that indicate a caller bug."""
    if not math.isfinite(max_level) or max_level <= 0:
        raise InvalidConfigurationError(
            f"max_level must be a positive finite number, got {max_level}"
        )
    if not math.isfinite(base_length) or base_length < 0:
        raise InvalidConfigurationError(
            f"base_length must be a nonnegative finite number, got {base_length}"
        )
    if not math.isfinite(initial_angle):
        raise InvalidConfigurationError(
            f"initial_angle must be finite, got {initial_angle}"
        )


def clamp_level(level: float, max_level: float) -> float:
    """Clamp a growth level into [0, max_level]."""
    if math.isnan(level):
        raise InvalidConfigurationError("level must be a number, got NaN")
    return min(max(level, 0.0), max_level)


def streak_to_level(streak_days: float, days_per_level: float = 10.0) -> float:
    """
    Map a streak of consecutive days to a continuous growth level.

    Ten days grow one full generation by default. Negative streaks read as
    no growth. The result is not clamped to any maximum; generation clamps.
    """
    if days_per_level <= 0:
        raise InvalidConfigurationError("days_per_level must be positive")
    return max(streak_days, 0) / days_per_level


@dataclass(frozen=True)
class TreeConfig:
    """
    Fixed parameters of one tree, validated once at configuration time.

    Attributes:
        origin: Base of the trunk (screen coordinates)
        base_length: Trunk length when level == max_level
        max_level: Upper bound on the growth level (recursion depth cap)
        initial_angle: Trunk direction (0 = straight up)
        constants: Branching constants
    """

    origin: Point2D = Point2D(0.0, 0.0)
    base_length: float = 120.0
    max_level: float = 8.0
    initial_angle: float = 0.0
    constants: GrowthConstants = field(default_factory=GrowthConstants)

    def __post_init__(self) -> None:
        validate_growth_inputs(self.base_length, self.max_level,
                               self.initial_angle)

    @classmethod
    def for_canvas(cls, width: float, max_level: float = 8.0) -> "TreeConfig":
        """Square canvas of the given width, trunk rooted near the bottom edge."""
        return cls(
            origin=Point2D(width / 2, width * 0.95),
            base_length=120.0,
            max_level=max_level,
        )

    def grow(self, level: float) -> "TreeGeometry":
        """Generate the tree for a growth level."""
        from sapling.branches import generate_tree

        return generate_tree(
            self.origin,
            self.base_length,
            self.initial_angle,
            level,
            self.max_level,
            constants=self.constants,
        )
