"""Diet-strategy adjustments to calorie and serving targets."""

from dataclasses import dataclass, replace

from nutritrack.domain.profile import CycleDay, DietStrategy, Goal, Profile
from nutritrack.domain.targets import DailyTarget, MetabolicMetrics, ServingTargets
from nutritrack.services.metabolism import (
    calculate_metrics,
    round_half_up,
    water_goal_ml,
)
from nutritrack.services.servings import baseline_servings

BALANCED_MULTIPLIERS: dict[Goal, float] = {
    Goal.LOSE_WEIGHT: 0.85,
    Goal.MAINTAIN: 1.0,
    Goal.GAIN_MUSCLE: 1.10,
}

# Gain-muscle cycles keep a surplus on training days and stay near
# maintenance on rest days; cutting and maintaining refeed at TDEE.
CARB_CYCLING_MULTIPLIERS: dict[tuple[bool, CycleDay], float] = {
    (True, CycleDay.HIGH_CARB): 1.15,
    (True, CycleDay.LOW_CARB): 0.95,
    (False, CycleDay.HIGH_CARB): 1.0,
    (False, CycleDay.LOW_CARB): 0.75,
}


@dataclass(frozen=True)
class TargetCalculation:
    """Everything derived from a profile in automatic mode."""

    metrics: MetabolicMetrics
    target: DailyTarget
    water_goal_ml: int


def calorie_multiplier(
    strategy: DietStrategy, cycle_day: CycleDay, goal: Goal
) -> float:
    """Return the fraction of TDEE to eat for a strategy, cycle day and goal."""
    if strategy == DietStrategy.CARB_CYCLING:
        return CARB_CYCLING_MULTIPLIERS[(goal == Goal.GAIN_MUSCLE, cycle_day)]
    return BALANCED_MULTIPLIERS[goal]


def adjust_targets(
    tdee: float, strategy: DietStrategy, cycle_day: CycleDay, goal: Goal
) -> DailyTarget:
    """Apply the strategy multiplier and the carb-cycling serving shifts."""
    calories = int(round_half_up(tdee * calorie_multiplier(strategy, cycle_day, goal)))
    servings = baseline_servings(calories)
    if strategy == DietStrategy.CARB_CYCLING:
        if cycle_day == CycleDay.HIGH_CARB:
            servings = _high_carb_servings(servings)
        else:
            servings = _low_carb_servings(servings, goal)
    return DailyTarget(calories=calories, servings=servings)


def calculate_targets(profile: Profile) -> TargetCalculation:
    """Compute metrics, the automatic daily target and the water goal."""
    metrics = calculate_metrics(
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        age=profile.age,
        sex=profile.sex,
        activity_level=profile.activity_level,
        body_fat_pct=profile.body_fat_pct,
    )
    target = adjust_targets(
        metrics.tdee, profile.diet_strategy, profile.cycle_day, profile.goal
    )
    return TargetCalculation(
        metrics=metrics,
        target=target,
        water_goal_ml=water_goal_ml(profile.weight_kg),
    )


def _high_carb_servings(base: ServingTargets) -> ServingTargets:
    return replace(
        base,
        grains=round_half_up(base.grains * 1.3, 1),
        fruits=round_half_up(base.fruits * 1.2, 1),
        oils=max(3.0, round_half_up(base.oils * 0.8)),
    )


def _low_carb_servings(base: ServingTargets, goal: Goal) -> ServingTargets:
    grain_factor = 0.5 if goal == Goal.GAIN_MUSCLE else 0.3
    return replace(
        base,
        grains=max(0.5, round_half_up(base.grains * grain_factor, 1)),
        fruits=max(1.0, round_half_up(base.fruits * 0.5, 1)),
        proteins=round_half_up(base.proteins * 1.4, 1),
        vegetables=round_half_up(base.vegetables * 1.3, 1),
        oils=round_half_up(base.oils * 1.5, 1),
    )
