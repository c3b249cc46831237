"""
Array views of tree geometry for renderers that draw many leaves at once.

Outline and vein points are linear in leaf size, so every leaf is the same
unit-leaf template scaled, rotated and translated. The template is built once
with the scalar builders in `sapling.leaves`, and the per-leaf transform is
vectorized with `jax.vmap`.

Point order matches `outline_points(build_outline(leaf))` and the flattened
`build_veins(leaf)` polylines exactly.
"""

import jax
import jax.numpy as jnp
import numpy as np
from jax import Array

from sapling.branches import LeafDescriptor, TreeGeometry
from sapling.config import LeafShape
from sapling.geometry import Point2D
from sapling.leaves import build_outline, build_veins, outline_points


_UNIT_LEAF = LeafDescriptor(position=Point2D(0.0, 0.0), angle=0.0, size=1.0)


def outline_template(shape: LeafShape | None = None) -> np.ndarray:
    """Outline points of a unit leaf at the origin, shape [P, 2]."""
    pts = outline_points(build_outline(_UNIT_LEAF, shape))
    return np.array([[p.x, p.y] for p in pts], dtype=float)


def vein_template(shape: LeafShape | None = None) -> np.ndarray:
    """Flattened vein points of a unit leaf at the origin, shape [Q, 2]."""
    pts = [p for vein in build_veins(_UNIT_LEAF, shape) for p in vein]
    return np.array([[p.x, p.y] for p in pts], dtype=float)


def _place(template: Array, anchor: Array, angle: Array, size: Array) -> Array:
    """Scale a template by size, rotate by angle, translate onto anchor."""
    c, s = jnp.cos(angle), jnp.sin(angle)
    rotation = jnp.array([[c, -s], [s, c]])
    return anchor + (template * size) @ rotation.T


def _place_all(template: np.ndarray, leaves: list[LeafDescriptor]) -> Array:
    if not leaves:
        return jnp.zeros((0, template.shape[0], 2))

    anchors = jnp.array([[leaf.position.x, leaf.position.y] for leaf in leaves])
    angles = jnp.array([leaf.angle for leaf in leaves])
    # Negative sizes collapse onto the anchor like the scalar builders
    sizes = jnp.maximum(jnp.array([leaf.size for leaf in leaves]), 0.0)

    return jax.vmap(_place, in_axes=(None, 0, 0, 0))(
        jnp.asarray(template), anchors, angles, sizes
    )


def leaf_outline_batch(
    leaves: list[LeafDescriptor],
    shape: LeafShape | None = None,
) -> Array:
    """
    Outline points for every leaf.

    Returns:
        Array of shape [num_leaves, P, 2]
    """
    return _place_all(outline_template(shape), list(leaves))


def leaf_vein_batch(
    leaves: list[LeafDescriptor],
    shape: LeafShape | None = None,
) -> Array:
    """
    Vein points for every leaf (midrib first, then side veins).

    Returns:
        Array of shape [num_leaves, Q, 2]
    """
    return _place_all(vein_template(shape), list(leaves))


def branch_segments(geometry: TreeGeometry) -> np.ndarray:
    """Branch endpoints as an array of shape [num_branches, 2, 2]."""
    if geometry.is_empty():
        return np.zeros((0, 2, 2))
    return np.array([
        [[b.start.x, b.start.y], [b.end.x, b.end.y]]
        for b in geometry.branches
    ], dtype=float)


def branch_generations(geometry: TreeGeometry) -> np.ndarray:
    """Generation index per branch, aligned with `branch_segments`."""
    return np.array([b.generation for b in geometry.branches], dtype=int)
