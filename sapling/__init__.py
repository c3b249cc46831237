"""
Sapling Geometry Module

Procedural fractal tree geometry driven by a single growth level: a
recursive binary branching generator with smooth growth of the newest
generation, and serrated, veined leaf outlines built from Bezier curves.

Modules:
    config: Constants, tree configuration and input validation
    geometry: 2D points, polar advance and rotation
    branches: Recursive branch and leaf-descriptor generation
    leaves: Leaf outline and vein synthesis, SVG path data
    batch: Vectorized leaf geometry and branch arrays
    continuity: Growth continuity report
    schema: Request/response schemas for JSON clients
"""

from sapling.batch import (
    branch_generations,
    branch_segments,
    leaf_outline_batch,
    leaf_vein_batch,
)
from sapling.branches import Branch, LeafDescriptor, TreeGeometry, generate_tree
from sapling.config import (
    GrowthConstants,
    InvalidConfigurationError,
    LeafShape,
    TreeConfig,
    streak_to_level,
)
from sapling.continuity import growth_continuity_report, print_continuity_report
from sapling.geometry import Point2D, advance, rotate_about
from sapling.leaves import (
    ClosePath,
    CubicTo,
    LeafPath,
    MoveTo,
    QuadTo,
    build_leaf_path,
    build_outline,
    build_veins,
    outline_to_svg,
    veins_to_svg,
)
from sapling.schema import GrowthRequest, GrowthResponse, grow

__all__ = [
    # Config
    "GrowthConstants",
    "InvalidConfigurationError",
    "LeafShape",
    "TreeConfig",
    "streak_to_level",
    # Geometry
    "Point2D",
    "advance",
    "rotate_about",
    # Tree generation
    "Branch",
    "LeafDescriptor",
    "TreeGeometry",
    "generate_tree",
    # Leaves
    "ClosePath",
    "CubicTo",
    "LeafPath",
    "MoveTo",
    "QuadTo",
    "build_leaf_path",
    "build_outline",
    "build_veins",
    "outline_to_svg",
    "veins_to_svg",
    # Arrays
    "branch_generations",
    "branch_segments",
    "leaf_outline_batch",
    "leaf_vein_batch",
    # Continuity
    "growth_continuity_report",
    "print_continuity_report",
    # Schemas
    "GrowthRequest",
    "GrowthResponse",
    "grow",
]
