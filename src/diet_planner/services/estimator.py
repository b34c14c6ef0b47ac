"""Energy and macro estimation from a patient profile."""

import logging

from diet_planner.domain.errors import UnsupportedSexError
from diet_planner.domain.macros import (
    STANDARD_SHARES,
    EnergyBreakdown,
    MacroTarget,
    grams_from_calories,
    round_half_up,
)
from diet_planner.domain.profile import ActivityLevel, Goal, PatientProfile, Sex

# Mifflin-St Jeor constant term. Child uses the male constant until a
# pediatric formula is chosen.
_BMR_OFFSETS = {
    Sex.MALE: 5.0,
    Sex.FEMALE: -161.0,
    Sex.CHILD: 5.0,
}

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}

_GOAL_FACTORS = {
    Goal.LOSE_FAT: 0.8,
    Goal.MAINTAIN_WEIGHT: 1.0,
    Goal.GAIN_MUSCLE: 1.15,
}

_logger = logging.getLogger(__name__)


def basal_metabolic_rate(profile: PatientProfile) -> float:
    """Return BMR in kcal/day using Mifflin-St Jeor."""
    try:
        offset = _BMR_OFFSETS[Sex(profile.sex)]
    except (KeyError, ValueError) as exc:
        raise UnsupportedSexError(f"No BMR formula for sex: {profile.sex}") from exc
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age_years
        + offset
    )


def energy_breakdown(profile: PatientProfile) -> EnergyBreakdown:
    """Return BMR, TDEE and goal-adjusted calories for a profile."""
    bmr = basal_metabolic_rate(profile)
    tdee = bmr * _ACTIVITY_MULTIPLIERS[ActivityLevel(profile.activity_level)]
    total = round_half_up(tdee * _GOAL_FACTORS[Goal(profile.goal)])
    return EnergyBreakdown(bmr=bmr, tdee=tdee, total_calories=total)


def estimate(profile: PatientProfile) -> MacroTarget:
    """Estimate the daily calorie and macro budget for a profile."""
    energy = energy_breakdown(profile)
    protein, carbs, fat = grams_from_calories(energy.total_calories, STANDARD_SHARES)
    _logger.debug(
        "Estimated budget: bmr=%.2f tdee=%.2f total=%s",
        energy.bmr,
        energy.tdee,
        energy.total_calories,
    )
    return MacroTarget(
        total_calories=energy.total_calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
    )
