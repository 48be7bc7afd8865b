"""Calorie-tiered baseline servings for the six food groups."""

from nutritrack.domain.targets import ServingTargets

# Evaluated top to bottom with a strict ``<`` test; the bands are hand tuned.
SERVING_TIERS: tuple[tuple[float, ServingTargets], ...] = (
    (
        1350,
        ServingTargets(
            grains=1.5, proteins=3, vegetables=3, fruits=2, dairy=1.5, oils=3
        ),
    ),
    (
        1650,
        ServingTargets(
            grains=2.5, proteins=4, vegetables=3, fruits=2, dairy=1.5, oils=4
        ),
    ),
    (
        1900,
        ServingTargets(grains=3, proteins=5, vegetables=3, fruits=2, dairy=1.5, oils=5),
    ),
    (
        2100,
        ServingTargets(
            grains=3.5, proteins=6, vegetables=4, fruits=3, dairy=1.5, oils=6
        ),
    ),
    (
        2350,
        ServingTargets(
            grains=4, proteins=6, vegetables=4, fruits=3.5, dairy=1.5, oils=6
        ),
    ),
    (
        2600,
        ServingTargets(
            grains=4.5, proteins=7, vegetables=5, fruits=4, dairy=1.5, oils=7
        ),
    ),
)

TOP_TIER = ServingTargets(grains=5, proteins=8, vegetables=5, fruits=4, dairy=2, oils=8)


def baseline_servings(calories: float) -> ServingTargets:
    """Return the baseline servings for a calorie target."""
    for upper, servings in SERVING_TIERS:
        if calories < upper:
            return servings
    return TOP_TIER
