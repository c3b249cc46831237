"""
Tests for the growth continuity report.
"""

import pytest

from sapling.config import InvalidConfigurationError
from sapling.continuity import (
    growth_continuity_report,
    newest_generation_length,
    print_continuity_report,
)


class TestNewestGeneration:
    """Tests for newest-generation length sampling."""

    def test_empty_tree(self) -> None:
        """Below level 1 there is nothing to measure."""
        assert newest_generation_length(0.5, 8.0) == 0.0

    def test_trunk_only(self) -> None:
        """At depth 1 the trunk is the newest generation and fully grown."""
        assert newest_generation_length(1.5, 8.0) == pytest.approx(120.0 * 1.5 / 8.0)

    def test_starts_at_zero(self) -> None:
        """Each new generation sprouts with no length."""
        for k in [2, 3, 6]:
            assert newest_generation_length(float(k), 8.0) == 0.0

    def test_reaches_full_length(self) -> None:
        """Just below k + 1 the newest generation is at its nominal length."""
        k = 4
        nominal = 120.0 * ((k + 1) / 8.0) * 0.7 ** (k - 1)
        assert newest_generation_length(k + 1 - 1e-9, 8.0) == pytest.approx(
            nominal, rel=1e-6
        )


class TestContinuityReport:
    """Tests for the full report."""

    def test_report_structure(self) -> None:
        """Report has the documented keys."""
        report = growth_continuity_report(num_samples=101)
        for key in ["step", "max_jump", "monotonic", "final_total", "generations"]:
            assert key in report
        assert sorted(report["generations"]) == [2, 3, 4, 5, 6, 7]

    def test_growth_is_monotonic(self) -> None:
        """Total branch length never shrinks as the level rises."""
        report = growth_continuity_report(num_samples=401)
        assert report["monotonic"]

    def test_no_large_jumps(self) -> None:
        """Fine sampling leaves only small steps in total length."""
        report = growth_continuity_report(num_samples=801)
        assert report["max_jump"] < 0.01 * report["final_total"]

    def test_generations_span_zero_to_nominal(self) -> None:
        """Each generation grows from zero to its nominal length."""
        report = growth_continuity_report(num_samples=11)
        for metrics in report["generations"].values():
            assert metrics["start"] == 0.0
            assert metrics["end"] == pytest.approx(metrics["nominal"], rel=1e-6)

    def test_samples_start_at_level_one(self) -> None:
        """Sampling spans [1, max_level], so eight samples step by one level."""
        report = growth_continuity_report(max_level=8.0, num_samples=8)
        assert report["step"] == pytest.approx(1.0)
        assert report["final_total"] == pytest.approx(
            growth_continuity_report(num_samples=2)["final_total"]
        )

    def test_rejects_empty_sampling(self) -> None:
        """At least one level must be sampled."""
        for num_samples in [0, -5]:
            with pytest.raises(InvalidConfigurationError):
                growth_continuity_report(num_samples=num_samples)

    def test_single_sample(self) -> None:
        """One sample has no steps to measure."""
        report = growth_continuity_report(num_samples=1)
        assert report["max_jump"] == 0.0
        assert report["monotonic"]

    def test_print_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Printed report includes a header and a row per generation."""
        print_continuity_report(growth_continuity_report(num_samples=11))
        out = capsys.readouterr().out
        assert "GROWTH CONTINUITY REPORT" in out
        assert "Monotonic growth: True" in out
