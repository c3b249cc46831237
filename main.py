"""
Sapling - Growing a Fractal Tree From a Streak

Walks a streak from day 0 to day 80 and shows how the tree responds:
1. streak_to_level - days become a continuous growth level
2. TreeConfig.grow - the level becomes branches and leaf descriptors
3. build_leaf_path - each leaf descriptor becomes SVG path data
4. growth_continuity_report - checks that growth never jumps
"""

from sapling import (
    GrowthRequest,
    TreeConfig,
    build_leaf_path,
    grow,
    growth_continuity_report,
    print_continuity_report,
    streak_to_level,
)


def show_streak(config: TreeConfig, streak_days: list[int]) -> None:
    """Print branch and leaf counts for each streak length."""
    print(f"{'Days':>6} {'Level':>7} {'Depth':>6} {'Branches':>9} {'Leaves':>7} {'Length':>9}")
    print("-" * 60)
    for days in streak_days:
        level = streak_to_level(days)
        tree = config.grow(level)
        print(
            f"{days:>6} {level:>7.2f} {tree.depth:>6} "
            f"{len(tree.branches):>9} {len(tree.leaves):>7} "
            f"{tree.total_length():>9.1f}"
        )


def main() -> None:
    print("\n" + "=" * 60)
    print("  SAPLING: Fractal Tree Growth")
    print("=" * 60)

    config = TreeConfig.for_canvas(width=400.0)

    print("\n" + "=" * 60)
    print("STEP 1: Growth over a streak")
    print("=" * 60)
    show_streak(config, [0, 5, 10, 15, 25, 33, 42, 57, 68, 80, 120])

    print("\n" + "=" * 60)
    print("STEP 2: One leaf as SVG path data")
    print("=" * 60)
    tree = config.grow(streak_to_level(42))
    leaf = tree.leaves[0]
    outline, veins = build_leaf_path(leaf).to_svg(precision=1)
    print(f"Leaf at ({leaf.position.x:.1f}, {leaf.position.y:.1f}), "
          f"angle={leaf.angle:.3f}, size={leaf.size:.2f}")
    print(f"  outline: {outline}")
    print(f"  veins:   {veins}")

    print("\n" + "=" * 60)
    print("STEP 3: JSON response for a client")
    print("=" * 60)
    response = grow(GrowthRequest(streak_days=25, include_leaf_paths=False))
    print(f"Level {response.level:.2f}: {len(response.branches)} branches, "
          f"{len(response.leaves)} leaves")
    print(response.model_dump_json()[:200] + " ...")

    report = growth_continuity_report(max_level=config.max_level,
                                      base_length=config.base_length)
    print_continuity_report(report)


if __name__ == "__main__":
    main()
