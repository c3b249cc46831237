"""
Request and response schemas for JSON consumers of tree geometry.

A mobile or web client sends a GrowthRequest (usually carrying a streak
count rather than a level) and draws the GrowthResponse: branches as
strokes, leaves as filled SVG paths with a vein overlay.
"""

from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from sapling.branches import TreeGeometry, generate_tree
from sapling.config import clamp_level, streak_to_level
from sapling.geometry import Point2D
from sapling.leaves import build_leaf_path

#
# Schemata
#


class GrowthRequest(BaseModel):
    """Input schema for one tree."""

    origin_x: float = Field(default=0.0, description="Trunk base x (screen space)")
    origin_y: float = Field(default=0.0, description="Trunk base y (screen space)")
    base_length: float = Field(
        default=120.0, ge=0.0, description="Trunk length at max_level"
    )
    initial_angle: float = Field(
        default=0.0, description="Trunk direction in radians (0 = up)"
    )

    # Growth
    level: float = Field(default=0.0, description="Continuous growth level")
    max_level: float = Field(default=8.0, gt=0.0, description="Upper bound on level")
    streak_days: Optional[int] = Field(
        default=None, description="If set, overrides level via streak_days / days_per_level"
    )
    days_per_level: float = Field(
        default=10.0, gt=0.0, description="Streak days per generation"
    )

    # Output
    include_leaf_paths: bool = Field(
        default=True, description="Attach SVG outline and vein path data to leaves"
    )
    precision: int = Field(default=3, ge=0, le=10, description="SVG decimal places")

    @field_validator("level")
    @classmethod
    def _not_nan(cls, value: float) -> float:
        # An infinite level clamps to max_level
        if math.isnan(value):
            raise ValueError("must be a number, got NaN")
        return value

    @field_validator(
        "max_level", "base_length", "initial_angle", "origin_x", "origin_y"
    )
    @classmethod
    def _finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError(f"must be finite, got {value}")
        return value

    def resolved_level(self) -> float:
        """Level to grow at, after applying any streak override."""
        if self.streak_days is not None:
            return streak_to_level(self.streak_days, self.days_per_level)
        return self.level


class BranchSchema(BaseModel):
    """One branch segment."""

    x1: float
    y1: float
    x2: float
    y2: float
    generation: int = Field(description="1 for the trunk, +1 per fork")
    progress: float = Field(description="Fraction of nominal length grown [0, 1]")


class LeafSchema(BaseModel):
    """One leaf, optionally with drawable path data."""

    x: float
    y: float
    angle: float
    size: float
    outline: Optional[str] = Field(default=None, description="SVG path data, closed")
    veins: Optional[str] = Field(default=None, description="SVG path data, open")


class GrowthResponse(BaseModel):
    """Output schema for one tree."""

    level: float = Field(description="Level actually grown (after clamping)")
    depth: int = Field(description="Deepest generation present")
    num_branches: int = Field(default=0, description="Number of branch segments")
    num_leaves: int = Field(default=0, description="Number of leaves")
    branches: list[BranchSchema] = Field(default_factory=list)
    leaves: list[LeafSchema] = Field(default_factory=list)


#
# Pipeline
#


def geometry_to_response(
    geometry: TreeGeometry,
    level: float,
    include_leaf_paths: bool = True,
    precision: int = 3,
) -> GrowthResponse:
    """Serialize generated geometry into a response."""
    branches = [
        BranchSchema(
            x1=b.start.x, y1=b.start.y, x2=b.end.x, y2=b.end.y,
            generation=b.generation, progress=b.progress,
        )
        for b in geometry.branches
    ]

    leaves = []
    for leaf in geometry.leaves:
        outline = veins = None
        if include_leaf_paths:
            outline, veins = build_leaf_path(leaf).to_svg(precision)
        leaves.append(LeafSchema(
            x=leaf.position.x, y=leaf.position.y,
            angle=leaf.angle, size=leaf.size,
            outline=outline, veins=veins,
        ))

    return GrowthResponse(
        level=level,
        depth=geometry.depth,
        num_branches=len(branches),
        num_leaves=len(leaves),
        branches=branches,
        leaves=leaves,
    )


def grow(request: GrowthRequest) -> GrowthResponse:
    """Generate the tree a request describes."""
    level = clamp_level(request.resolved_level(), request.max_level)
    geometry = generate_tree(
        Point2D(request.origin_x, request.origin_y),
        request.base_length,
        request.initial_angle,
        level,
        request.max_level,
    )
    return geometry_to_response(
        geometry, level, request.include_leaf_paths, request.precision
    )
