"""Tests for the calorie-tiered serving table."""

import pytest

from nutritrack.domain.targets import ServingTargets
from nutritrack.services.servings import SERVING_TIERS, TOP_TIER, baseline_servings


@pytest.mark.parametrize(
    ("calories", "grains"),
    [
        (1000, 1.5),
        (1349, 1.5),
        (1350, 2.5),
        (1881, 3),
        (2132, 4),
        (2599, 4.5),
        (2600, 5),
        (4000, 5),
    ],
)
def test_tier_boundaries_are_strict(calories: float, grains: float) -> None:
    assert baseline_servings(calories).grains == grains


def test_top_tier_values() -> None:
    assert baseline_servings(3000) == TOP_TIER
    assert TOP_TIER == ServingTargets(
        grains=5, proteins=8, vegetables=5, fruits=4, dairy=2, oils=8
    )


def test_servings_never_decrease_with_calories() -> None:
    tiers = [servings for _, servings in SERVING_TIERS] + [TOP_TIER]

    for lower, higher in zip(tiers, tiers[1:], strict=False):
        assert higher.grains >= lower.grains
        assert higher.proteins >= lower.proteins
        assert higher.oils >= lower.oils
