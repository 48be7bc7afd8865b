"""Process-local tracker state with JSON persistence per collection."""

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from nutritrack.domain.logs import ExerciseEntry, FoodEntry, WaterEntry, WeightEntry
from nutritrack.domain.profile import Profile
from nutritrack.services.targets import create_default_profile, refresh_profile

PROFILE_KEY = "nutritrack_profile_v2"
FOOD_LOGS_KEY = "nutritrack_food_logs_v2"
EXERCISE_LOGS_KEY = "nutritrack_exercise_logs_v1"
WEIGHT_LOGS_KEY = "nutritrack_weight_logs"
WATER_LOGS_KEY = "nutritrack_water_logs"

_logger = logging.getLogger(__name__)


class StateRepository(Protocol):
    """Key/value persistence for serialized state documents."""

    def load_value(self, key: str) -> str | None:
        """Return the stored JSON text for a key, if present."""

    def save_value(self, key: str, value: str) -> None:
        """Store JSON text under a key."""


@dataclass(frozen=True)
class TrackerState:
    """The profile and the four log collections."""

    profile: Profile
    food_logs: tuple[FoodEntry, ...] = ()
    exercise_logs: tuple[ExerciseEntry, ...] = ()
    weight_logs: tuple[WeightEntry, ...] = ()
    water_logs: tuple[WaterEntry, ...] = ()


STORAGE_KEYS: dict[str, str] = {
    "profile": PROFILE_KEY,
    "food_logs": FOOD_LOGS_KEY,
    "exercise_logs": EXERCISE_LOGS_KEY,
    "weight_logs": WEIGHT_LOGS_KEY,
    "water_logs": WATER_LOGS_KEY,
}

_ADAPTERS: dict[str, TypeAdapter] = {
    "profile": TypeAdapter(Profile),
    "food_logs": TypeAdapter(tuple[FoodEntry, ...]),
    "exercise_logs": TypeAdapter(tuple[ExerciseEntry, ...]),
    "weight_logs": TypeAdapter(tuple[WeightEntry, ...]),
    "water_logs": TypeAdapter(tuple[WaterEntry, ...]),
}


def to_jsonable(name: str, value: object) -> object:
    """Return a JSON-compatible representation of a state member."""
    return _ADAPTERS[name].dump_python(value, mode="json")


@dataclass
class StateStore:
    """Holds the current state and writes each changed member back."""

    repository: StateRepository
    _state: TrackerState | None = field(default=None, repr=False)

    @property
    def state(self) -> TrackerState:
        """Return the current state, loading it on first access."""
        if self._state is None:
            self._state = self.load()
        return self._state

    def load(self) -> TrackerState:
        """Load every member independently, falling back to defaults."""
        profile = self._load_member("profile")
        if profile is None:
            profile = create_default_profile()
        values = {
            name: self._load_member(name) or ()
            for name in STORAGE_KEYS
            if name != "profile"
        }
        return TrackerState(profile=profile, **values)

    def commit(self, **changes: object) -> TrackerState:
        """Replace state members and persist the changed ones."""
        unknown = set(changes) - set(STORAGE_KEYS)
        if unknown:
            raise ValueError(f"Unknown state members: {sorted(unknown)}")
        updated = replace(self.state, **changes)
        for name in changes:
            payload = _ADAPTERS[name].dump_json(getattr(updated, name))
            self.repository.save_value(STORAGE_KEYS[name], payload.decode("utf-8"))
        self._state = updated
        return updated

    def _load_member(self, name: str) -> object | None:
        key = STORAGE_KEYS[name]
        raw = self.repository.load_value(key)
        if raw is None:
            return None
        try:
            value = _ADAPTERS[name].validate_json(raw)
            if name == "profile":
                value = refresh_profile(value)
        except (ValidationError, ValueError):
            _logger.warning("Discarding unreadable state for %s", key, exc_info=True)
            return None
        return value
