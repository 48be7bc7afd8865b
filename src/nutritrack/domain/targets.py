"""Domain models for energy and serving targets."""

from dataclasses import dataclass
from enum import StrEnum


class FoodGroup(StrEnum):
    """The six food groups a serving can belong to."""

    GRAINS = "grains"
    PROTEINS = "proteins"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    DAIRY = "dairy"
    OILS = "oils"


@dataclass(frozen=True)
class ServingTargets:
    """Servings per food group, used both as a goal and as a logged total."""

    grains: float = 0.0
    proteins: float = 0.0
    vegetables: float = 0.0
    fruits: float = 0.0
    dairy: float = 0.0
    oils: float = 0.0

    def get(self, group: FoodGroup) -> float:
        """Return the servings for a food group."""
        return getattr(self, group.value)

    def plus(self, other: "ServingTargets") -> "ServingTargets":
        """Return the group-wise sum of two serving sets."""
        return ServingTargets(
            grains=self.grains + other.grains,
            proteins=self.proteins + other.proteins,
            vegetables=self.vegetables + other.vegetables,
            fruits=self.fruits + other.fruits,
            dairy=self.dairy + other.dairy,
            oils=self.oils + other.oils,
        )


@dataclass(frozen=True)
class DailyTarget:
    """Calorie goal plus serving goals for one day."""

    calories: int
    servings: ServingTargets


@dataclass(frozen=True)
class CustomTargets:
    """Manually entered targets, one slot per cycle day plus a balanced slot."""

    high_carb: DailyTarget | None = None
    low_carb: DailyTarget | None = None
    balanced: DailyTarget | None = None

    @property
    def has_cycle_table(self) -> bool:
        return self.high_carb is not None and self.low_carb is not None


@dataclass(frozen=True)
class MetabolicMetrics:
    """Body metrics derived from weight, height, age, sex and activity."""

    bmr: int
    tdee: int
    bmi: float
    ffmi: float | None


DEFAULT_CYCLE_TARGETS = CustomTargets(
    high_carb=DailyTarget(
        calories=2400,
        servings=ServingTargets(
            grains=4, proteins=6, vegetables=4, fruits=3, dairy=1.5, oils=4
        ),
    ),
    low_carb=DailyTarget(
        calories=1600,
        servings=ServingTargets(
            grains=1, proteins=8, vegetables=5, fruits=1, dairy=1.5, oils=6
        ),
    ),
)
