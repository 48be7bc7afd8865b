"""Profile editing service."""

import logging
from dataclasses import dataclass

from nutritrack.domain.profile import CycleDay, Profile
from nutritrack.services.metabolism import bmi_category
from nutritrack.services.state import StateStore
from nutritrack.services.targets import (
    set_custom_mode,
    set_custom_target_field,
    switch_cycle_day,
    update_profile,
)

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Applies profile edits through the target resolution rules."""

    store: StateStore

    def get_profile(self) -> Profile:
        """Return the current profile."""
        return self.store.state.profile

    def update(self, **changes: object) -> Profile:
        """Edit profile fields; derived fields follow automatically."""
        profile = update_profile(self.store.state.profile, **changes)
        self.store.commit(profile=profile)
        return profile

    def set_custom_mode(self, enabled: bool) -> Profile:
        """Turn manual targets on or off."""
        profile = set_custom_mode(self.store.state.profile, enabled)
        self.store.commit(profile=profile)
        _logger.info("Custom targets %s", "enabled" if enabled else "disabled")
        return profile

    def switch_cycle_day(self, cycle_day: CycleDay) -> Profile:
        """Change the current carb-cycling day."""
        profile = switch_cycle_day(self.store.state.profile, cycle_day)
        self.store.commit(profile=profile)
        return profile

    def set_custom_target(
        self, field: str, value: float, cycle_day: CycleDay | None = None
    ) -> Profile:
        """Edit one value of a custom target."""
        profile = set_custom_target_field(
            self.store.state.profile, field, value, cycle_day=cycle_day
        )
        self.store.commit(profile=profile)
        return profile

    def bmi_category(self) -> str:
        """Return the label for the profile's current BMI."""
        return bmi_category(self.store.state.profile.bmi)
