"""Automatic/custom target resolution for a profile.

Every function here takes a ``Profile`` and returns a new one. The cached
metrics and the active target are only ever written through these functions,
so they stay a projection of the rest of the profile:

* automatic mode re-derives metrics, active target and water goal on every
  edit to a body metric, activity level, goal or strategy;
* custom mode refreshes the metrics (they are informational) but never
  touches the user's manual targets;
* switching the cycle day re-derives or re-looks-up the active target.
"""

from dataclasses import replace

from nutritrack.domain.profile import CycleDay, DietStrategy, Profile
from nutritrack.domain.targets import (
    DEFAULT_CYCLE_TARGETS,
    CustomTargets,
    DailyTarget,
    FoodGroup,
)
from nutritrack.services.metabolism import round_half_up
from nutritrack.services.strategy import calculate_targets

RECALCULATING_FIELDS = frozenset(
    {
        "age",
        "height_cm",
        "weight_kg",
        "body_fat_pct",
        "sex",
        "activity_level",
        "goal",
        "diet_strategy",
    }
)
EDITABLE_FIELDS = RECALCULATING_FIELDS | {
    "name",
    "goal_weight_kg",
    "muscle_mass_kg",
    "waist_cm",
    "water_goal_ml",
    "export_url",
}
TARGET_FIELDS = ("calories", *(group.value for group in FoodGroup))


def create_default_profile() -> Profile:
    """Return the first-use profile with its derived fields filled in."""
    return refresh_profile(Profile())


def resolve_active_target(profile: Profile) -> DailyTarget:
    """Return the target that should be active for the profile's current state."""
    if not profile.is_custom_targets:
        return calculate_targets(profile).target
    custom = profile.custom_targets
    if profile.diet_strategy == DietStrategy.CARB_CYCLING:
        slot = _cycle_slot(custom, profile.cycle_day)
        return slot or _cycle_slot(DEFAULT_CYCLE_TARGETS, profile.cycle_day)
    return custom.balanced or profile.active_target


def refresh_profile(profile: Profile) -> Profile:
    """Recompute cached metrics, and in automatic mode the targets too."""
    calculation = calculate_targets(profile)
    metrics = calculation.metrics
    refreshed = replace(
        profile,
        bmr=metrics.bmr,
        tdee=metrics.tdee,
        bmi=metrics.bmi,
        ffmi=metrics.ffmi,
    )
    if refreshed.is_custom_targets:
        return refreshed
    return replace(
        refreshed,
        active_target=calculation.target,
        water_goal_ml=calculation.water_goal_ml,
    )


def update_profile(profile: Profile, **changes: object) -> Profile:
    """Apply user edits to a profile."""
    rejected = set(changes) - EDITABLE_FIELDS
    if rejected:
        raise ValueError(f"Fields cannot be edited directly: {sorted(rejected)}")
    updated = replace(profile, **changes)
    if RECALCULATING_FIELDS.intersection(changes):
        return refresh_profile(updated)
    return updated


def set_custom_mode(profile: Profile, enabled: bool) -> Profile:
    """Switch between automatic and custom targets."""
    if enabled == profile.is_custom_targets:
        return profile
    if not enabled:
        # The custom table stays stored for the next switch back.
        return refresh_profile(replace(profile, is_custom_targets=False))
    custom = replace(
        profile,
        is_custom_targets=True,
        custom_targets=_seed_custom_targets(profile),
    )
    return replace(custom, active_target=resolve_active_target(custom))


def switch_cycle_day(profile: Profile, cycle_day: CycleDay) -> Profile:
    """Change the current cycle day and publish its target as active."""
    updated = replace(profile, cycle_day=cycle_day)
    if updated.is_custom_targets:
        updated = replace(updated, custom_targets=_seed_custom_targets(updated))
    return replace(updated, active_target=resolve_active_target(updated))


def set_custom_target_field(
    profile: Profile,
    field: str,
    value: float,
    cycle_day: CycleDay | None = None,
) -> Profile:
    """Edit one calorie or serving value of a custom target.

    Under carb cycling the slot for ``cycle_day`` (default: the current day)
    is edited; the value is mirrored into the active target only when custom
    mode is on and that day is the current one. Under the balanced strategy
    the single balanced slot is edited.
    """
    if field not in TARGET_FIELDS:
        raise ValueError(f"Unknown target field: {field}")
    custom = _seed_custom_targets(profile)
    if profile.diet_strategy == DietStrategy.CARB_CYCLING:
        day = cycle_day or profile.cycle_day
        slot = _with_field(_cycle_slot(custom, day), field, value)
        custom = _with_cycle_slot(custom, day, slot)
        mirror = day == profile.cycle_day
    else:
        custom = replace(custom, balanced=_with_field(custom.balanced, field, value))
        mirror = True

    updated = replace(profile, custom_targets=custom)
    if mirror and profile.is_custom_targets:
        updated = replace(
            updated, active_target=_with_field(profile.active_target, field, value)
        )
    return updated


def _seed_custom_targets(profile: Profile) -> CustomTargets:
    custom = profile.custom_targets
    if profile.diet_strategy == DietStrategy.CARB_CYCLING:
        if not custom.has_cycle_table:
            custom = replace(
                custom,
                high_carb=custom.high_carb or DEFAULT_CYCLE_TARGETS.high_carb,
                low_carb=custom.low_carb or DEFAULT_CYCLE_TARGETS.low_carb,
            )
    elif custom.balanced is None:
        custom = replace(custom, balanced=profile.active_target)
    return custom


def _cycle_slot(custom: CustomTargets, cycle_day: CycleDay) -> DailyTarget | None:
    if cycle_day == CycleDay.HIGH_CARB:
        return custom.high_carb
    return custom.low_carb


def _with_cycle_slot(
    custom: CustomTargets, cycle_day: CycleDay, slot: DailyTarget
) -> CustomTargets:
    if cycle_day == CycleDay.HIGH_CARB:
        return replace(custom, high_carb=slot)
    return replace(custom, low_carb=slot)


def _with_field(target: DailyTarget, field: str, value: float) -> DailyTarget:
    if field == "calories":
        return replace(target, calories=int(round_half_up(value)))
    return replace(target, servings=replace(target.servings, **{field: float(value)}))

