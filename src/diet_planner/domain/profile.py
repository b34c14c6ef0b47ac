"""Patient profile domain models."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Biological sex category used by the BMR formula."""

    MALE = "Male"
    FEMALE = "Female"
    CHILD = "Child"


class ActivityLevel(str, Enum):
    """Self-reported activity category."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "Lightly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"


class Goal(str, Enum):
    """Body composition goal."""

    LOSE_FAT = "Lose Fat"
    MAINTAIN_WEIGHT = "Maintain Weight"
    GAIN_MUSCLE = "Gain Muscle"


@dataclass(frozen=True)
class PatientProfile:
    """Anthropometric inputs collected in the first wizard step."""

    height_cm: float
    weight_kg: float
    age_years: int
    sex: Sex = Sex.MALE
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.MAINTAIN_WEIGHT

    def is_complete(self) -> bool:
        """Return True when all measurements are positive."""
        return self.height_cm > 0 and self.weight_kg > 0 and self.age_years > 0
