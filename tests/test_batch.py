"""
Tests for vectorized leaf geometry and branch arrays.

The batch transforms must agree point-for-point with the scalar builders.
"""

import math

import jax.numpy as jnp
import numpy as np

from sapling.batch import (
    branch_generations,
    branch_segments,
    leaf_outline_batch,
    leaf_vein_batch,
    outline_template,
    vein_template,
)
from sapling.branches import LeafDescriptor, generate_tree
from sapling.config import LeafShape
from sapling.geometry import Point2D
from sapling.leaves import build_outline, build_veins, outline_points


def make_leaves() -> list[LeafDescriptor]:
    """A handful of leaves with varied anchors, angles and sizes."""
    return [
        LeafDescriptor(Point2D(0.0, 0.0), 0.0, 10.0),
        LeafDescriptor(Point2D(50.0, -20.0), math.pi / 5, 6.5),
        LeafDescriptor(Point2D(-30.0, 12.0), -1.1, 3.0),
        LeafDescriptor(Point2D(5.0, 5.0), math.pi, 0.0),
    ]


class TestTemplates:
    """Tests for unit-leaf templates."""

    def test_outline_template_shape(self) -> None:
        """1 move + 2 cubics + 11 quads worth of points."""
        assert outline_template().shape == (1 + 3 + 2 * 11 + 3, 2)

    def test_vein_template_shape(self) -> None:
        """Midrib (2) plus three 3-point side veins."""
        assert vein_template().shape == (2 + 3 * 3, 2)

    def test_template_follows_shape(self) -> None:
        """More teeth means more outline points."""
        assert outline_template(LeafShape(num_teeth=7)).shape[0] == 1 + 3 + 2 * 15 + 3


class TestLeafBatch:
    """Tests for batched leaf transforms."""

    def test_outline_matches_scalar(self) -> None:
        """Every batched outline point equals the scalar builder's."""
        leaves = make_leaves()
        batch = leaf_outline_batch(leaves)

        assert batch.shape == (len(leaves), 29, 2)
        for i, leaf in enumerate(leaves):
            expected = np.array([[p.x, p.y] for p in outline_points(build_outline(leaf))])
            assert jnp.allclose(batch[i], expected, atol=1e-3)

    def test_veins_match_scalar(self) -> None:
        """Every batched vein point equals the scalar builder's."""
        leaves = make_leaves()
        batch = leaf_vein_batch(leaves)

        assert batch.shape == (len(leaves), 11, 2)
        for i, leaf in enumerate(leaves):
            expected = np.array([[p.x, p.y] for vein in build_veins(leaf) for p in vein])
            assert jnp.allclose(batch[i], expected, atol=1e-3)

    def test_empty_batch(self) -> None:
        """No leaves gives an empty leading dimension."""
        assert leaf_outline_batch([]).shape == (0, 29, 2)
        assert leaf_vein_batch([]).shape == (0, 11, 2)

    def test_negative_size_collapses_to_anchor(self) -> None:
        """Negative sizes collapse onto the anchor, as in the scalar builders."""
        leaf = LeafDescriptor(Point2D(10.0, 20.0), 0.0, -10.0)
        outline = leaf_outline_batch([leaf])
        veins = leaf_vein_batch([leaf])

        assert jnp.allclose(outline[0], jnp.array([10.0, 20.0]))
        assert jnp.allclose(veins[0], jnp.array([10.0, 20.0]))
        scalar = np.array([[p.x, p.y] for p in outline_points(build_outline(leaf))])
        assert jnp.allclose(outline[0], scalar, atol=1e-3)

    def test_tree_leaves(self) -> None:
        """A generated tree's leaves batch cleanly."""
        tree = generate_tree(Point2D(200.0, 380.0), 120.0, 0.0, 5.4, 8.0)
        batch = leaf_outline_batch(list(tree.leaves))
        assert batch.shape[0] == len(tree.leaves) == 24
        assert bool(jnp.all(jnp.isfinite(batch)))


class TestBranchArrays:
    """Tests for branch endpoint arrays."""

    def test_segments_shape_and_values(self) -> None:
        """Segments line up with the branch list."""
        tree = generate_tree(Point2D(0.0, 0.0), 120.0, 0.0, 3.0, 8.0)
        segments = branch_segments(tree)

        assert segments.shape == (7, 2, 2)
        for segment, branch in zip(segments, tree.branches):
            assert np.allclose(segment[0], [branch.start.x, branch.start.y])
            assert np.allclose(segment[1], [branch.end.x, branch.end.y])

    def test_generations(self) -> None:
        """Generation array is aligned with segments."""
        tree = generate_tree(Point2D(0.0, 0.0), 120.0, 0.0, 3.0, 8.0)
        assert branch_generations(tree).tolist() == [1, 2, 3, 3, 2, 3, 3]

    def test_empty_tree(self) -> None:
        """An empty tree gives an empty array."""
        tree = generate_tree(Point2D(0.0, 0.0), 120.0, 0.0, 0.0, 8.0)
        assert branch_segments(tree).shape == (0, 2, 2)
