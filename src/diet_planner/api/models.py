"""Pydantic models for wizard API payloads."""

from pydantic import BaseModel, Field

from diet_planner.domain.macros import MacroKind
from diet_planner.domain.profile import ActivityLevel, Goal, PatientProfile, Sex


class ProfileRequest(BaseModel):
    """Patient data collected in the macro calculator step."""

    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    age_years: int = Field(gt=0)
    sex: Sex = Sex.MALE
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    goal: Goal = Goal.MAINTAIN_WEIGHT

    def to_profile(self) -> PatientProfile:
        """Convert the payload into a domain profile."""
        return PatientProfile(
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            age_years=self.age_years,
            sex=self.sex,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class DistributionRequest(BaseModel):
    """Meal counts for the distribution step."""

    large_meals: int = Field(default=3, ge=0, le=6)
    small_meals: int = Field(default=2, ge=0, le=6)


class CaloriesAdjustment(BaseModel):
    """New calorie value for a meal."""

    calories: int = Field(ge=0)


class MacroAdjustment(BaseModel):
    """New gram value for one macro of a meal."""

    macro: MacroKind
    grams: int


class AutoRedistributeRequest(BaseModel):
    """Toggle for automatic redistribution."""

    enabled: bool


class QuantityChange(BaseModel):
    """New quantity for a suggested food."""

    quantity: int = Field(ge=0)
