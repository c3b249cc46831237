"""
Growth continuity checks.

As the growth level rises the tree should never jump: the newest generation
extends smoothly from zero to full length, and the next generation sprouts at
zero length. This module samples the generator across the level range and
reports how large the biggest step in total branch length is.
"""

import math

import jax.numpy as jnp

from sapling.branches import generate_tree
from sapling.config import GrowthConstants, InvalidConfigurationError
from sapling.geometry import Point2D


def newest_generation_length(
    level: float,
    max_level: float,
    base_length: float = 120.0,
    constants: GrowthConstants | None = None,
) -> float:
    """
    Effective length of one branch in the newest generation.

    Returns 0.0 for an empty tree.
    """
    geometry = generate_tree(Point2D(0.0, 0.0), base_length, 0.0,
                             level, max_level, constants)
    if geometry.is_empty():
        return 0.0
    newest = geometry.generation(geometry.depth)
    return newest[0].effective_length


def growth_continuity_report(
    max_level: float = 8.0,
    base_length: float = 120.0,
    num_samples: int = 801,
    constants: GrowthConstants | None = None,
) -> dict[str, object]:
    """
    Sample the generator across [1, max_level] and summarize continuity.

    Key metrics:
    - max_jump: largest change in total branch length between adjacent samples
    - monotonic: total branch length never decreases as level rises
    - generations: newest-generation length at the start and end of each
      integer interval, next to its nominal (fully grown) length

    Args:
        max_level: Upper bound on level
        base_length: Trunk length at max_level
        num_samples: Number of levels sampled (inclusive of both ends)
        constants: Branching constants (defaults if None)

    Returns:
        Dict with 'max_jump', 'monotonic', 'step', 'final_total'
        and 'generations'

    Raises:
        InvalidConfigurationError: num_samples < 1
    """
    if num_samples < 1:
        raise InvalidConfigurationError(
            f"num_samples must be at least 1, got {num_samples}"
        )
    if constants is None:
        constants = GrowthConstants()

    # Below level 1 there is no tree; the trunk appears whole at level 1
    levels = jnp.linspace(1.0, max_level, num_samples)
    totals = jnp.array([
        generate_tree(Point2D(0.0, 0.0), base_length, 0.0,
                      float(level), max_level, constants).total_length()
        for level in levels
    ])
    jumps = jnp.abs(jnp.diff(totals))

    generations = {}
    eps = 1e-9
    for k in range(2, math.floor(max_level)):
        start = newest_generation_length(k, max_level, base_length, constants)
        end = newest_generation_length(k + 1 - eps, max_level, base_length, constants)
        nominal = base_length * ((k + 1) / max_level) * constants.length_decay ** (k - 1)
        generations[k] = {"start": start, "end": end, "nominal": nominal}

    return {
        "step": float(levels[1] - levels[0]) if num_samples > 1 else 0.0,
        "max_jump": float(jnp.max(jumps)) if jumps.size else 0.0,
        "monotonic": bool(jnp.all(jnp.diff(totals) >= -1e-3)),
        "final_total": float(totals[-1]),
        "generations": generations,
    }


def print_continuity_report(report: dict[str, object]) -> None:
    """Pretty-print a growth continuity report."""
    print("\n" + "=" * 60)
    print("GROWTH CONTINUITY REPORT")
    print("=" * 60)
    print(f"{'Generation':<12} {'Start':>10} {'End':>10} {'Nominal':>10}")
    print("-" * 60)

    for k, metrics in report["generations"].items():
        print(
            f"{k:<12} "
            f"{metrics['start']:>10.4f} "
            f"{metrics['end']:>10.4f} "
            f"{metrics['nominal']:>10.4f}"
        )

    print("=" * 60)
    print(f"Sample step: {report['step']:.4f} levels")
    print(f"Largest jump in total length: {report['max_jump']:.4f}")
    print(f"Monotonic growth: {report['monotonic']}")
    print()
